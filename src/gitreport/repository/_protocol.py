"""Reporter protocol for type-safe dependency injection.

This module defines a runtime-checkable Protocol that Repository satisfies,
so the reporting function can be exercised with fakes.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Reporter(Protocol):
    """Protocol for the four read-only queries against HEAD.

    Example:
        >>> def summary(reporter: Reporter) -> str:
        ...     return f"{reporter.branch()}: {len(reporter.files())} file(s)"
        >>> with Repository(Path("/path/to/repo")) as repo:
        ...     print(summary(repo))
    """

    def branch(self) -> str:
        """Short name of the checked out branch.

        Returns:
            Branch name without refs/heads/, or "" when HEAD is detached.
        """
        ...

    def files(self) -> list[str]:
        """Files touched by HEAD relative to its first parent.

        Returns:
            Sorted, de-duplicated repository-relative paths.
        """
        ...

    def message(self) -> str:
        """The HEAD commit message.

        Returns:
            The full message, not trimmed.
        """
        ...

    def tags(self) -> list[str]:
        """Tags pointing at HEAD.

        Returns:
            Sorted, de-duplicated tag names without refs/tags/.
        """
        ...
