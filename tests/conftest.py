"""Shared test fixtures for gitreport tests."""

import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest
from rich.console import Console

# A script step is either ("git", *args) or ("touch", *file_names).
Step = tuple[str, ...]


def run_git(cwd: Path, *args: str) -> str:
    """Run a git command in the given directory.

    Returns:
        The command's standard output.
    """
    result = subprocess.run(  # noqa: S603 - Safe: running git with controlled args
        ["git", *args],  # noqa: S607
        cwd=str(cwd),
        capture_output=True,
        text=True,
        check=False,
    )
    if result.returncode != 0:
        msg = f"git {' '.join(args)} failed: {result.stderr}"
        raise RuntimeError(msg)
    return result.stdout


def init_repo(directory: Path) -> Path:
    """Initialize a git repository on branch master with a test identity."""
    run_git(directory, "init", "--initial-branch=master")
    run_git(directory, "config", "user.name", "Test User")
    run_git(directory, "config", "user.email", "test@example.com")
    run_git(directory, "config", "commit.gpgsign", "false")
    run_git(directory, "config", "tag.gpgsign", "false")
    return directory


def run_script(directory: Path, steps: Sequence[Step]) -> None:
    """Run setup steps in order inside directory."""
    for command, *args in steps:
        if command == "git":
            run_git(directory, *args)
        elif command == "touch":
            for name in args:
                file_path = directory / name
                file_path.parent.mkdir(parents=True, exist_ok=True)
                file_path.touch()
        else:
            msg = f"Unknown script command: {command}"
            raise ValueError(msg)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep user config and GITREPORT_* environment out of tests."""
    user_config = tmp_path / "user-config" / "config.toml"
    monkeypatch.setattr(
        "gitreport.config._discovery.get_user_config_path",
        lambda: user_config,
    )
    for name in (
        "GITREPORT_DEBUG",
        "GITREPORT_STRICT_CONFIG",
        "GITREPORT_LOGGING__LEVEL",
        "GITREPORT_LOGGING__FORMAT",
        "GITREPORT_LOGGING__FILE",
        "GITREPORT_OUTPUT__FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    return user_config


@pytest.fixture
def make_repo(tmp_path: Path) -> Callable[..., Path]:
    """Create a git repository and run setup steps in it.

    Returns a callable taking a sequence of steps and returning the
    repository directory.
    """

    def _make(steps: Sequence[Step] = (), *, name: str = "repo") -> Path:
        directory = tmp_path / name
        directory.mkdir()
        init_repo(directory)
        run_script(directory, steps)
        return directory

    return _make


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
