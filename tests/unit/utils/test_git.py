# pyright: reportAny=false
"""Unit tests for git helper functions."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from dulwich.repo import Repo

from gitreport.exceptions import RepositoryNotFoundError
from gitreport.utils._git import (
    decode_bytes,
    find_repo_root,
    get_worktree_dir,
    open_repo,
    strip_refs_heads,
)


class TestDecodeBytes:
    def test_decodes_bytes(self) -> None:
        assert decode_bytes(b"main") == "main"

    def test_passes_strings_through(self) -> None:
        assert decode_bytes("main") == "main"

    def test_replaces_undecodable_bytes(self) -> None:
        assert decode_bytes(b"caf\xe9") == "caf�"

    def test_custom_encoding(self) -> None:
        assert decode_bytes(b"caf\xe9", "latin-1") == "café"

    def test_unknown_encoding_raises_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            _ = decode_bytes(b"x", "no-such-codec")


class TestStripRefsHeads:
    @pytest.mark.parametrize(
        ("ref", "expected"),
        [
            (b"refs/heads/master", "master"),
            ("refs/heads/feature/test", "feature/test"),
            (b"refs/tags/1.0.0", None),
            ("HEAD", None),
        ],
    )
    def test_strip(self, ref: bytes | str, expected: str | None) -> None:
        assert strip_refs_heads(ref) == expected


class TestGetWorktreeDir:
    def test_non_bare_repo_returns_parent_of_git_dir(self, tmp_path: Path) -> None:
        mock_repo = MagicMock()
        mock_repo.path = str(tmp_path / ".git")

        assert get_worktree_dir(mock_repo) == tmp_path.resolve()

    def test_bytes_path(self, tmp_path: Path) -> None:
        mock_repo = MagicMock()
        mock_repo.path = str(tmp_path).encode()

        assert get_worktree_dir(mock_repo) == tmp_path.resolve()


class TestOpenRepo:
    def test_opens_repository(self, tmp_path: Path) -> None:
        repo = Repo.init(str(tmp_path))
        repo.close()

        opened = open_repo(tmp_path)
        try:
            assert get_worktree_dir(opened) == tmp_path.resolve()
        finally:
            opened.close()

    def test_plain_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(RepositoryNotFoundError) as exc_info:
            _ = open_repo(tmp_path)

        assert exc_info.value.path == tmp_path

    def test_discover_searches_parents(self, tmp_path: Path) -> None:
        Repo.init(str(tmp_path)).close()
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        with pytest.raises(RepositoryNotFoundError):
            _ = open_repo(nested)

        opened = open_repo(nested, discover=True)
        try:
            assert get_worktree_dir(opened) == tmp_path.resolve()
        finally:
            opened.close()


class TestFindRepoRoot:
    def test_finds_enclosing_repository(self, tmp_path: Path) -> None:
        Repo.init(str(tmp_path)).close()
        nested = tmp_path / "src"
        nested.mkdir()

        assert find_repo_root(nested) == tmp_path.resolve()

    def test_returns_none_outside_repository(self, tmp_path: Path) -> None:
        plain = tmp_path / "plain"
        plain.mkdir()

        assert find_repo_root(plain) is None
