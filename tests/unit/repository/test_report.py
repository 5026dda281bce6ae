"""Unit tests for report() and the Status model."""

from dataclasses import FrozenInstanceError

import pytest

from gitreport.repository import FakeReporter, Reporter, Status, report


class TestReport:
    def test_copies_branch_and_message(self) -> None:
        reporter = FakeReporter(branch_name="main", commit_message="subject\n\nbody\n")

        status = report(reporter)

        assert status.branch == "main"
        assert status.message == "subject\n\nbody\n"

    def test_message_is_not_trimmed(self) -> None:
        reporter = FakeReporter(commit_message="  padded  \n\n")

        assert report(reporter).message == "  padded  \n\n"

    def test_sorts_files(self) -> None:
        reporter = FakeReporter(file_list=["b.txt", "a/z.txt", "a.txt"])

        assert report(reporter).files == ("a.txt", "a/z.txt", "b.txt")

    def test_removes_duplicate_files(self) -> None:
        reporter = FakeReporter(file_list=["x", "y", "x"])

        assert report(reporter).files == ("x", "y")

    def test_sorts_and_deduplicates_tags(self) -> None:
        reporter = FakeReporter(tag_list=["2.0.0", "1.0.0", "2.0.0"])

        assert report(reporter).tags == ("1.0.0", "2.0.0")

    def test_empty_reporter_gives_empty_status(self) -> None:
        assert report(FakeReporter()) == Status()

    def test_detached_branch_is_empty_string(self) -> None:
        reporter = FakeReporter(branch_name="", tag_list=["0.0.0"])

        assert report(reporter).branch == ""

    def test_calls_each_query_once(self) -> None:
        reporter = FakeReporter()

        _ = report(reporter)

        assert reporter.calls == {"branch": 1, "files": 1, "message": 1, "tags": 1}


class TestFakeReporter:
    def test_satisfies_reporter_protocol(self) -> None:
        assert isinstance(FakeReporter(), Reporter) is True

    def test_returns_copies_of_lists(self) -> None:
        reporter = FakeReporter(file_list=["a"])

        reporter.files().append("b")

        assert reporter.file_list == ["a"]


class TestStatus:
    def test_is_frozen(self) -> None:
        status = Status(branch="main")

        with pytest.raises(FrozenInstanceError):
            status.branch = "other"  # pyright: ignore[reportAttributeAccessIssue]

    def test_to_dict_uses_lists(self) -> None:
        status = Status(
            branch="main",
            files=("a.txt",),
            message="msg\n",
            tags=("1.0.0",),
        )

        assert status.to_dict() == {
            "branch": "main",
            "files": ["a.txt"],
            "message": "msg\n",
            "tags": ["1.0.0"],
        }
