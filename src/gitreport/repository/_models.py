"""Repository status models.

This module defines the immutable result of reading a repository's HEAD.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Status:
    """Status snapshot of a repository's HEAD commit.

    Attributes:
        branch: Short name of the checked out branch (without refs/heads/),
            or the empty string if HEAD is detached.
        files: Repository-relative paths touched by HEAD relative to its
            first parent, sorted and without duplicates.
        message: The complete HEAD commit message, untrimmed.
        tags: Short names of tags pointing at HEAD, sorted and without
            duplicates.
    """

    branch: str = ""
    files: tuple[str, ...] = field(default_factory=tuple)
    message: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
        """Convert to a plain dictionary suitable for serialization.

        Returns:
            Dictionary with the four status fields; sequences become lists.
        """
        return {
            "branch": self.branch,
            "files": list(self.files),
            "message": self.message,
            "tags": list(self.tags),
        }
