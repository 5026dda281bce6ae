"""The gitreport command-line interface."""

from ._app import create_app, main
from ._context import CLIContext
from ._shared import ExitCode

__all__ = ["CLIContext", "ExitCode", "create_app", "main"]
