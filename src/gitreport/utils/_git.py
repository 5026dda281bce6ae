"""Common git utility functions.

This module provides shared helper functions used by the repository accessor
for repository opening, path handling, and byte/string conversion.
"""

from pathlib import Path
from typing import Final

from dulwich.errors import NotGitRepository
from dulwich.repo import Repo

from gitreport.exceptions import RepositoryNotFoundError

_REFS_HEADS: Final = "refs/heads/"


def decode_bytes(value: bytes | str, encoding: str = "utf-8") -> str:
    """Decode bytes to str if needed.

    Args:
        value: A bytes or str value.
        encoding: Encoding to decode with. Undecodable bytes are replaced.

    Returns:
        The value as a string.
    """
    if isinstance(value, bytes):
        return value.decode(encoding, errors="replace")
    return value


def open_repo(path: Path, *, discover: bool = False) -> Repo:
    """Open the git repository at path.

    Args:
        path: Working tree or bare repository directory.
        discover: If True, also search the parents of path.

    Returns:
        The opened Repo instance.

    Raises:
        RepositoryNotFoundError: If no git repository is found.
    """
    try:
        if discover:
            return Repo.discover(str(path))
        return Repo(str(path))
    except NotGitRepository as e:
        msg = f"Not a git repository: {path}"
        raise RepositoryNotFoundError(msg, path=path) from e
    except FileNotFoundError as e:
        msg = f"Repository path does not exist: {path}"
        raise RepositoryNotFoundError(msg, path=path) from e


def get_worktree_dir(repo: Repo) -> Path:
    """Get the worktree directory for a repository.

    Args:
        repo: The repository instance.

    Returns:
        Path to the worktree directory (the git directory for bare repos).
    """
    repo_path = repo.path
    if isinstance(repo_path, bytes):
        repo_path = repo_path.decode()

    path = Path(repo_path).resolve()
    if path.name == ".git":
        return path.parent
    return path


def strip_refs_heads(ref: bytes | str) -> str | None:
    """Strip the refs/heads/ prefix from a branch reference.

    Args:
        ref: Full reference name (bytes or str).

    Returns:
        Branch name without prefix, or None if ref is not a branch.
    """
    ref_str = decode_bytes(ref)
    if ref_str.startswith(_REFS_HEADS):
        return ref_str[len(_REFS_HEADS) :]
    return None


def find_repo_root(start: Path) -> Path | None:
    """Find the root of the repository containing start.

    Args:
        start: Directory to start the search from.

    Returns:
        The worktree directory, or None if start is not inside a repository.
    """
    try:
        repo = Repo.discover(str(start))
    except (NotGitRepository, FileNotFoundError):
        return None
    try:
        return get_worktree_dir(repo)
    finally:
        repo.close()
