# ruff: noqa: TC003  # Path needed at runtime for function signatures
"""Status reporting.

This module assembles the answers of a Reporter into a single Status value.
"""

from collections.abc import Iterable
from pathlib import Path

from structlog.typing import FilteringBoundLogger

from gitreport.repository._models import Status
from gitreport.repository._protocol import Reporter
from gitreport.repository._repository import Repository


def _normalize(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(sorted(set(values)))


def report(reporter: Reporter) -> Status:
    """Build a Status from the four reporter queries.

    Each query is called exactly once. File and tag lists are sorted and
    de-duplicated regardless of what the reporter returns.

    Args:
        reporter: Any object satisfying the Reporter protocol.

    Returns:
        The assembled Status.

    Example:
        >>> with Repository(Path("/path/to/repo")) as repo:
        ...     status = report(repo)
        >>> status.branch
        'main'
    """
    return Status(
        branch=reporter.branch(),
        files=_normalize(reporter.files()),
        message=reporter.message(),
        tags=_normalize(reporter.tags()),
    )


def read_status(
    path: Path | str,
    *,
    discover: bool = False,
    logger: FilteringBoundLogger | None = None,
) -> Status:
    """Open the repository at path, report its status, and close it.

    Args:
        path: Repository directory, or a directory inside it when
            discover is True.
        discover: If True, search path and its parents for a repository.
        logger: Optional structlog logger for debug events.

    Returns:
        The Status of the repository's HEAD commit.

    Raises:
        RepositoryNotFoundError: If no git repository is found.
        ReferenceNotFoundError: If HEAD does not resolve to a commit.
        ObjectNotFoundError: If the HEAD commit or its trees are missing.
    """
    with Repository(path, search_parents=discover, logger=logger) as repo:
        return report(repo)
