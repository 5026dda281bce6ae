"""gitreport repository access.

This package opens git repositories read-only and reports facts about the
HEAD commit.

Classes:
    Repository: Read-only accessor for a repository's HEAD commit.
    Reporter: Runtime-checkable protocol for the four HEAD queries.
    FakeReporter: In-memory Reporter for tests.

Models:
    Status: Branch, touched files, message, and tags of HEAD.

Functions:
    report: Assemble a Status from any Reporter.
    read_status: Open a repository, report, and close it.

Example:
    >>> from gitreport.repository import Repository, report
    >>> with Repository("/path/to/repo") as repo:
    ...     status = report(repo)
    >>> status.tags
    ('1.0.0',)
"""

from gitreport.repository._fake import FakeReporter
from gitreport.repository._models import Status
from gitreport.repository._protocol import Reporter
from gitreport.repository._report import read_status, report
from gitreport.repository._repository import Repository

__all__ = [
    "FakeReporter",
    "Reporter",
    "Repository",
    "Status",
    "read_status",
    "report",
]
