# ruff: noqa: TC003  # Path needed at runtime for method bodies
"""Repository accessor.

This module provides the Repository class, which opens a git repository,
resolves HEAD once, and answers read-only queries about the HEAD commit
using dulwich's object, tree, and reference APIs.
"""

from pathlib import Path
from types import TracebackType
from typing import Final, Self

from dulwich.diff_tree import tree_changes
from dulwich.objects import Commit, Tag
from dulwich.repo import Repo
from structlog.typing import FilteringBoundLogger

from gitreport.exceptions import ObjectNotFoundError, ReferenceNotFoundError
from gitreport.utils._git import (
    decode_bytes,
    get_worktree_dir,
    open_repo,
    strip_refs_heads,
)
from gitreport.utils._logging import create_null_logger

_HEAD: Final = b"HEAD"
_TAGS_PREFIX: Final = b"refs/tags"
_DEFAULT_ENCODING: Final = "utf-8"


class Repository:
    """Read-only view of a git repository's HEAD commit.

    HEAD is resolved once when the repository is opened; every query
    answers for that commit. The instance owns the underlying dulwich Repo
    and implements the context manager protocol to release it.

    Repository satisfies the Reporter protocol.

    Attributes:
        root: The resolved path to the repository working tree.
        head: Hex SHA of the HEAD commit.

    Example:
        >>> with Repository(Path("/path/to/repo")) as repo:
        ...     print(repo.branch(), repo.tags())
    """

    __slots__: Final = ("_head", "_logger", "_repo", "_root")
    _head: str
    _logger: FilteringBoundLogger
    _repo: Repo
    _root: Path

    def __init__(
        self,
        path: Path | str,
        *,
        search_parents: bool = False,
        logger: FilteringBoundLogger | None = None,
    ) -> None:
        """Open the repository and resolve HEAD.

        Args:
            path: Working tree or bare repository directory.
            search_parents: If True, search path and its parents for a
                repository instead of requiring path to be the root.
            logger: Optional structlog logger for debug events.

        Raises:
            RepositoryNotFoundError: If no git repository is found.
            ReferenceNotFoundError: If HEAD does not resolve to a commit.
        """
        self._logger = logger if logger is not None else create_null_logger()
        self._repo = open_repo(Path(path), discover=search_parents)
        self._root = get_worktree_dir(self._repo)
        self._logger.debug("repository_opened", root=str(self._root))

        try:
            self._head = self._resolve_head()
        except ReferenceNotFoundError:
            self._repo.close()
            raise

    @classmethod
    def discover(
        cls,
        start: Path | str | None = None,
        *,
        logger: FilteringBoundLogger | None = None,
    ) -> Self:
        """Open the repository containing start.

        Args:
            start: Directory to start the search from. Defaults to the
                current working directory.
            logger: Optional structlog logger for debug events.

        Returns:
            The opened repository.

        Raises:
            RepositoryNotFoundError: If no enclosing repository is found.
            ReferenceNotFoundError: If HEAD does not resolve to a commit.
        """
        if start is None:
            start = Path.cwd()
        return cls(start, search_parents=True, logger=logger)

    # =========================================================================
    # Context Manager Protocol
    # =========================================================================

    def __enter__(self) -> Self:
        """Enter the context manager.

        Returns:
            The repository instance.
        """
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the context manager and close the repository.

        Args:
            exc_type: Exception type if an exception was raised.
            exc_val: Exception value if an exception was raised.
            exc_tb: Exception traceback if an exception was raised.
        """
        self.close()

    def close(self) -> None:
        """Close the underlying git repository.

        Releases file handles held by the dulwich Repo. This method is
        automatically called when using the context manager protocol.
        """
        self._repo.close()

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def root(self) -> Path:
        """Get the resolved root path of the repository.

        Returns:
            The absolute path to the working tree (git directory if bare).
        """
        return self._root

    @property
    def head(self) -> str:
        """Get the HEAD commit SHA.

        Returns:
            The 40-character hex SHA that HEAD resolved to on open.
        """
        return self._head

    @property
    def is_detached(self) -> bool:
        """Check whether HEAD is detached.

        Returns:
            True if HEAD does not point at a branch.
        """
        return self.branch() == ""

    # =========================================================================
    # Reporter Methods
    # =========================================================================

    def branch(self) -> str:
        """Get the short name of the checked out branch.

        Returns:
            Branch name without refs/heads/ (e.g. "feature/test"), or the
            empty string if HEAD is detached.
        """
        symrefs = self._repo.refs.get_symrefs()
        target = symrefs.get(_HEAD)
        if target is None:
            return ""
        return strip_refs_heads(target) or ""

    def files(self) -> list[str]:
        """Get the files touched by HEAD relative to its first parent.

        A root commit is compared against the empty tree, so every file it
        contains is reported. Both sides of each change are included, so a
        rename reports the old and the new path.

        Returns:
            Sorted, de-duplicated repository-relative paths.

        Raises:
            ObjectNotFoundError: If a commit or tree is missing, including the
                parent of a shallow clone's boundary commit.
        """
        commit = self._get_commit(self._head)
        parent_tree: bytes | None = None
        if commit.parents:
            parent_sha = decode_bytes(commit.parents[0])
            if self._head.encode() in self._repo.get_shallow():
                msg = f"Parent of shallow commit is not available: {parent_sha}"
                raise ObjectNotFoundError(msg, path=self._root, sha=parent_sha)
            parent = self._get_commit(parent_sha)
            parent_tree = parent.tree

        touched: set[str] = set()
        try:
            for change in tree_changes(
                self._repo.object_store, parent_tree, commit.tree
            ):
                for entry in (change.old, change.new):
                    # Added/deleted sides are None or a null entry depending
                    # on the dulwich version
                    if entry is not None and entry.path is not None:
                        touched.add(decode_bytes(entry.path))
        except KeyError as e:
            msg = f"Failed to diff HEAD tree: missing object {e}"
            raise ObjectNotFoundError(msg, path=self._root, sha=_key_sha(e)) from e

        files = sorted(touched)
        self._logger.debug(
            "files_diffed",
            count=len(files),
            root_commit=parent_tree is None,
        )
        return files

    def message(self) -> str:
        """Get the HEAD commit message.

        The message is decoded with the encoding declared in the commit,
        falling back to UTF-8. Undecodable bytes are replaced.

        Returns:
            The complete commit message, not trimmed.

        Raises:
            ObjectNotFoundError: If the HEAD commit is missing.
        """
        commit = self._get_commit(self._head)
        # dulwich leaves message unset for commits without a body separator
        raw = commit.message or b""
        encoding = _DEFAULT_ENCODING
        if commit.encoding:
            encoding = decode_bytes(commit.encoding)
        try:
            return decode_bytes(raw, encoding)
        except LookupError:
            self._logger.warning("unknown_commit_encoding", encoding=encoding)
            return decode_bytes(raw)

    def tags(self) -> list[str]:
        """Get the tags pointing at HEAD.

        Annotated tags are peeled to the object they tag, so both
        lightweight and annotated tags on the HEAD commit are reported.

        Returns:
            Sorted, de-duplicated tag names without refs/tags/.
        """
        head = self._head.encode()
        names: set[str] = set()
        for name, sha in self._repo.refs.as_dict(_TAGS_PREFIX).items():
            if sha == head or self._peel(sha) == head:
                names.add(decode_bytes(name))

        tags = sorted(names)
        self._logger.debug("tags_collected", count=len(tags))
        return tags

    # =========================================================================
    # Private Helper Methods
    # =========================================================================

    def _resolve_head(self) -> str:
        """Resolve HEAD to a commit SHA.

        Returns:
            Hex SHA of the HEAD commit.

        Raises:
            ReferenceNotFoundError: If HEAD is unborn (no commits yet).
        """
        try:
            head_bytes: bytes = self._repo.head()
        except KeyError as e:
            raise ReferenceNotFoundError(path=self._root, reference="HEAD") from e

        head = decode_bytes(head_bytes)
        self._logger.debug("head_resolved", head=head, branch=self.branch())
        return head

    def _get_commit(self, sha: str) -> Commit:
        """Load a commit object.

        Args:
            sha: Hex SHA of the commit.

        Returns:
            The commit object.

        Raises:
            ObjectNotFoundError: If the object is missing or not a commit.
        """
        try:
            obj = self._repo[sha.encode()]
        except KeyError as e:
            msg = f"Commit not found: {sha}"
            raise ObjectNotFoundError(msg, path=self._root, sha=sha) from e
        if not isinstance(obj, Commit):
            msg = f"Object is not a commit: {sha}"
            raise ObjectNotFoundError(msg, path=self._root, sha=sha)
        return obj

    def _peel(self, sha: bytes) -> bytes | None:
        """Follow annotated tag objects to the object they tag.

        Args:
            sha: Hex SHA a tag reference points at.

        Returns:
            Hex SHA of the first non-tag object, or None if the chain
            ends in a missing object.
        """
        try:
            obj = self._repo[sha]
            while isinstance(obj, Tag):
                _, target = obj.object
                obj = self._repo[target]
        except KeyError:
            self._logger.warning("dangling_tag", sha=decode_bytes(sha))
            return None
        return obj.id


def _key_sha(error: KeyError) -> str | None:
    """Extract the missing SHA from a dulwich KeyError, if present."""
    if error.args and isinstance(error.args[0], bytes | str):
        return decode_bytes(error.args[0])
    return None
