"""Configuration file discovery."""

from pathlib import Path
from typing import Final

import platformdirs

REPO_CONFIG_FILENAME: Final = ".gitreport.toml"


def get_user_config_path() -> Path:
    r"""Get platform-specific user config file path.

    - Linux: ``~/.config/gitreport/config.toml``
    - macOS: ``~/Library/Application Support/gitreport/config.toml``
    - Windows: ``%APPDATA%\gitreport\config.toml``

    The path is returned regardless of whether the file exists.

    Returns:
        Path to the user config file for the current platform.
    """
    return platformdirs.user_config_path("gitreport") / "config.toml"


def get_repo_config_path(repo_root: Path) -> Path:
    """Get the repository-level config file path.

    Args:
        repo_root: Root of the repository working tree.

    Returns:
        Path to .gitreport.toml in the repository root.
    """
    return repo_root / REPO_CONFIG_FILENAME


def discover_config_files(repo_root: Path | None = None) -> list[Path]:
    """List existing config files in increasing precedence order.

    Args:
        repo_root: Repository root to look for a repository config in.

    Returns:
        Existing config file paths, user file first.
    """
    candidates = [get_user_config_path()]
    if repo_root is not None:
        candidates.append(get_repo_config_path(repo_root))
    return [path for path in candidates if path.is_file()]
