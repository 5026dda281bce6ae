"""Fake reporter for testing.

This module provides a FakeReporter class that implements the Reporter
protocol for use in tests without requiring an actual git repository.
"""

from dataclasses import dataclass, field


@dataclass(slots=True)
class FakeReporter:
    """Fake reporter with settable answers.

    Records how many times each query was called so tests can verify that
    consumers query each field once.

    Example:
        >>> reporter = FakeReporter(branch_name="main", file_list=["b", "a"])
        >>> report(reporter).files
        ('a', 'b')
    """

    branch_name: str = ""
    file_list: list[str] = field(default_factory=list)
    commit_message: str = ""
    tag_list: list[str] = field(default_factory=list)
    calls: dict[str, int] = field(default_factory=dict)

    def _record(self, name: str) -> None:
        self.calls[name] = self.calls.get(name, 0) + 1

    def branch(self) -> str:
        """Return the configured branch name."""
        self._record("branch")
        return self.branch_name

    def files(self) -> list[str]:
        """Return a copy of the configured file list."""
        self._record("files")
        return list(self.file_list)

    def message(self) -> str:
        """Return the configured commit message."""
        self._record("message")
        return self.commit_message

    def tags(self) -> list[str]:
        """Return a copy of the configured tag list."""
        self._record("tags")
        return list(self.tag_list)
