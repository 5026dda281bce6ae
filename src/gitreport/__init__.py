"""Read branch, changed files, message, and tags of a git repository's HEAD."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gitreport")
except PackageNotFoundError:
    __version__ = "0.0.0"

from gitreport.exceptions import (
    GitReportError,
    ObjectNotFoundError,
    ReferenceNotFoundError,
    RepositoryError,
    RepositoryNotFoundError,
)
from gitreport.repository import (
    FakeReporter,
    Reporter,
    Repository,
    Status,
    read_status,
    report,
)

__all__ = [
    "FakeReporter",
    "GitReportError",
    "ObjectNotFoundError",
    "ReferenceNotFoundError",
    "Reporter",
    "Repository",
    "RepositoryError",
    "RepositoryNotFoundError",
    "Status",
    "__version__",
    "read_status",
    "report",
]
