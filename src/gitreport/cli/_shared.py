# pyright: reportExplicitAny=false
"""Shared CLI utilities for commands.

This module provides common utilities used across CLI command implementations:
- Standardized exit codes
- Output formatters (JSON, YAML)
- Error reporting with exit codes
"""

from enum import IntEnum
from typing import Any, Never

from rich.console import Console
from rich.markup import escape

__all__ = [
    "ExitCode",
    "exit_with_error",
    "format_json",
    "format_yaml",
]


class ExitCode(IntEnum):
    """Standard exit codes for gitreport CLI commands."""

    SUCCESS = 0
    CONFIG_ERROR = 1
    USAGE_ERROR = 2
    REPOSITORY_NOT_FOUND = 3
    REFERENCE_NOT_FOUND = 4
    INTERNAL_ERROR = 5


def format_json(data: dict[str, Any], *, indent: bool = True) -> str:
    """Format data as JSON.

    Args:
        data: Dictionary to format as JSON.
        indent: Whether to pretty-print with indentation.

    Returns:
        JSON-formatted string representation.
    """
    import orjson

    options = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(data, option=options).decode("utf-8")


def format_yaml(data: dict[str, Any]) -> str:
    """Format data as YAML.

    Args:
        data: Dictionary to format as YAML.

    Returns:
        YAML-formatted string representation.
    """
    import yaml

    return yaml.safe_dump(
        data, default_flow_style=False, allow_unicode=True, sort_keys=False
    )


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.INTERNAL_ERROR,
    *,
    console: Console | None = None,
) -> Never:
    """Print an error message and exit with the specified code.

    Args:
        message: The error message to display.
        code: The exit code to use (defaults to INTERNAL_ERROR).
        console: Optional Rich console for output. If not provided,
            a new stderr console will be created.

    Raises:
        SystemExit: Always raised with the specified exit code.
    """
    if console is None:
        console = Console(stderr=True)

    console.print(f"[red]Error:[/red] {escape(message)}")
    raise SystemExit(code)
