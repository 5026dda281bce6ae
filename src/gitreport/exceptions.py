"""gitreport exceptions."""

from pathlib import Path
from typing import Any


class GitReportError(Exception):
    """Base exception for gitreport errors."""


# =============================================================================
# Repository Exceptions
# =============================================================================


class RepositoryError(GitReportError):
    """Base exception for repository access errors.

    Attributes:
        path: The repository path involved, if known.
    """

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        """Initialize with error message and repository context.

        Args:
            message: Human-readable error message.
            path: The repository path involved.
        """
        super().__init__(message)
        self.path: Path | None = path


class RepositoryNotFoundError(RepositoryError):
    """Raised when a path does not contain a git repository."""


class ReferenceNotFoundError(RepositoryError, KeyError):
    """Raised when a reference cannot be resolved to a commit.

    This is the case for HEAD in a repository without commits, or after
    checking out an orphan branch that has no commits yet.

    Attributes:
        reference: The reference name that could not be resolved.
    """

    def __init__(
        self,
        message: str = "reference not found",
        *,
        path: Path | None = None,
        reference: str = "HEAD",
    ) -> None:
        """Initialize with error message and reference context.

        Args:
            message: Human-readable error message.
            path: The repository path involved.
            reference: The reference name that could not be resolved.
        """
        super().__init__(message, path=path)
        self.reference: str = reference

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class ObjectNotFoundError(RepositoryError, KeyError):
    """Raised when a git object is missing from the object store.

    Attributes:
        sha: Hex SHA of the missing object.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        sha: str | None = None,
    ) -> None:
        """Initialize with error message and object context.

        Args:
            message: Human-readable error message.
            path: The repository path involved.
            sha: Hex SHA of the missing object.
        """
        super().__init__(message, path=path)
        self.sha: str | None = sha

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(GitReportError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source
