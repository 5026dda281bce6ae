from pathlib import Path

import pytest

from gitreport.config import _discovery
from gitreport.config._discovery import (
    REPO_CONFIG_FILENAME,
    discover_config_files,
    get_repo_config_path,
    get_user_config_path,
)


class TestGetUserConfigPath:
    def test_uses_platformdirs(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(
            _discovery.platformdirs,
            "user_config_path",
            lambda appname: tmp_path / appname,
        )

        assert get_user_config_path() == tmp_path / "gitreport" / "config.toml"


class TestDiscoverConfigFiles:
    def test_repo_config_path(self, tmp_path: Path) -> None:
        assert get_repo_config_path(tmp_path) == tmp_path / REPO_CONFIG_FILENAME

    def test_no_files(self, tmp_path: Path) -> None:
        assert discover_config_files(tmp_path) == []

    def test_user_file_comes_first(
        self, tmp_path: Path, isolated_config: Path
    ) -> None:
        isolated_config.parent.mkdir(parents=True)
        isolated_config.touch()
        repo_file = tmp_path / REPO_CONFIG_FILENAME
        repo_file.touch()

        assert discover_config_files(tmp_path) == [isolated_config, repo_file]

    def test_without_repo_root(self, isolated_config: Path) -> None:
        isolated_config.parent.mkdir(parents=True)
        isolated_config.touch()

        assert discover_config_files() == [isolated_config]

    def test_directory_named_like_config_is_skipped(self, tmp_path: Path) -> None:
        (tmp_path / REPO_CONFIG_FILENAME).mkdir()

        assert discover_config_files(tmp_path) == []
