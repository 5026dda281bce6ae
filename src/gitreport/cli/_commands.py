# pyright: reportUnusedCallResult=false, reportUnusedFunction=false
# ruff: noqa: D415, FBT002
"""Status commands for the gitreport CLI."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console
from rich.markup import escape

from gitreport.cli._context import CLIContext
from gitreport.cli._shared import ExitCode, exit_with_error, format_json, format_yaml
from gitreport.config import OutputFormat
from gitreport.exceptions import (
    ObjectNotFoundError,
    ReferenceNotFoundError,
    RepositoryNotFoundError,
)
from gitreport.repository import Repository, Status, report

__all__ = ["register_commands"]

PathArg = Annotated[
    Path | None,
    Parameter(help="Repository directory (defaults to the current directory)"),
]
DiscoverOpt = Annotated[
    bool,
    Parameter(help="Search parent directories for the repository"),
]


@contextmanager
def _open_repository(path: Path | None, *, discover: bool) -> Iterator[Repository]:
    """Open a repository, translating failures into CLI exits.

    The current CLIContext is switched to the configuration of the opened
    repository before the body runs.

    Args:
        path: Repository directory, or None for the current directory.
        discover: Whether to search parent directories.

    Yields:
        The opened repository.

    Raises:
        SystemExit: If the repository cannot be opened or read.
    """
    ctx = CLIContext.get_current()
    target = path if path is not None else Path.cwd()
    log = ctx.logger.bind(path=str(target))

    try:
        with Repository(target, search_parents=discover, logger=log) as repo:
            CLIContext.set_current(ctx.for_repository(repo.root))
            yield repo
    except RepositoryNotFoundError as e:
        log.error("repository_not_found")
        exit_with_error(str(e), ExitCode.REPOSITORY_NOT_FOUND)
    except ReferenceNotFoundError as e:
        log.error("reference_not_found", reference=e.reference)
        exit_with_error(f"{target}: {e}", ExitCode.REFERENCE_NOT_FOUND)
    except ObjectNotFoundError as e:
        log.exception("object_not_found", sha=e.sha)
        exit_with_error(str(e), ExitCode.INTERNAL_ERROR)


def _print_lines(lines: list[str]) -> None:
    for line in lines:
        print(line)  # noqa: T201


def _print_status_text(status: Status, console: Console) -> None:
    """Print a status as aligned, human-readable text."""
    branch = escape(status.branch) if status.branch else "[dim](detached)[/dim]"
    console.print(f"[bold]branch:[/bold]  {branch}", soft_wrap=True)

    tags = ", ".join(escape(tag) for tag in status.tags) or "[dim](none)[/dim]"
    console.print(f"[bold]tags:[/bold]    {tags}", soft_wrap=True)

    console.print("[bold]message:[/bold]")
    for line in status.message.rstrip("\n").splitlines():
        console.print(f"  {escape(line)}", soft_wrap=True)

    console.print(f"[bold]files:[/bold]   [dim]({len(status.files)})[/dim]")
    for file in status.files:
        console.print(f"  {escape(file)}", soft_wrap=True)


def _status(
    path: PathArg = None,
    /,
    *,
    output_format: Annotated[
        OutputFormat | None,
        Parameter(name=["--format", "-f"], help="Output format"),
    ] = None,
    discover: DiscoverOpt = True,
) -> None:
    """Show branch, changed files, message, and tags of HEAD"""
    with _open_repository(path, discover=discover) as repo:
        status = report(repo)

    ctx = CLIContext.get_current()
    effective_format = output_format or ctx.config.output.format

    ctx.logger.info(
        "status_reported",
        branch=status.branch,
        files=len(status.files),
        tags=len(status.tags),
    )

    match effective_format:
        case OutputFormat.JSON:
            print(format_json(status.to_dict()))  # noqa: T201
        case OutputFormat.YAML:
            print(format_yaml(status.to_dict()).rstrip())  # noqa: T201
        case _:
            _print_status_text(status, Console(no_color=ctx.no_color))


def _branch(path: PathArg = None, /, *, discover: DiscoverOpt = True) -> None:
    """Print the current branch name (empty when HEAD is detached)"""
    with _open_repository(path, discover=discover) as repo:
        print(repo.branch())  # noqa: T201


def _files(path: PathArg = None, /, *, discover: DiscoverOpt = True) -> None:
    """Print the files touched by HEAD, one per line"""
    with _open_repository(path, discover=discover) as repo:
        _print_lines(repo.files())


def _message(path: PathArg = None, /, *, discover: DiscoverOpt = True) -> None:
    """Print the HEAD commit message"""
    with _open_repository(path, discover=discover) as repo:
        print(repo.message(), end="")  # noqa: T201


def _tags(path: PathArg = None, /, *, discover: DiscoverOpt = True) -> None:
    """Print the tags pointing at HEAD, one per line"""
    with _open_repository(path, discover=discover) as repo:
        _print_lines(repo.tags())


def register_commands(app: App) -> None:
    """Register the status commands on an application.

    Args:
        app: The cyclopts application to register commands on.
    """
    app.command(_status, name="status")
    app.command(_branch, name="branch")
    app.command(_files, name="files")
    app.command(_message, name="message")
    app.command(_tags, name="tags")
