"""The command-line interface for gitreport."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from gitreport import __version__
from gitreport.cli._commands import register_commands
from gitreport.cli._context import CLIContext, load_logger
from gitreport.config import LogLevel, safe_load_config
from gitreport.utils import find_repo_root

_HELP = "Report branch, changed files, message, and tags of a git HEAD commit."


def _cli_overrides(*, verbose: bool, quiet: bool) -> dict[str, object] | None:
    """Build configuration overrides from global flags.

    --verbose wins over --quiet when both are given.
    """
    if verbose:
        return {"logging": {"level": LogLevel.DEBUG.value}}
    if quiet:
        return {"logging": {"level": LogLevel.ERROR.value}}
    return None


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    """Create the gitreport application.

    Invoke ``app.meta(tokens)`` to apply global options before dispatching
    to a command; invoking ``app(tokens)`` directly uses default settings.

    Args:
        console: Console for help and normal output.
        error_console: Console for parse errors.
        exit_on_error: Whether cyclopts exits on parse errors.

    Returns:
        The configured cyclopts App.
    """
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="gitreport",
        help=_HELP,
        version=__version__,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.meta.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
        verbose: Annotated[bool, Parameter(help="Enable debug logging")] = False,
        quiet: Annotated[bool, Parameter(help="Only log errors")] = False,
        no_color: Annotated[
            bool, Parameter(name="--no-color", help="Disable colored output")
        ] = False,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
    ) -> None:
        """Launch gitreport with global options.

        Args:
            tokens: Command tokens to pass to subcommands.
            verbose: Enable debug logging.
            quiet: Only log errors.
            no_color: Disable colored output.
            config: Explicit path to config file.
        """
        repo_root = find_repo_root(Path.cwd())
        overrides = _cli_overrides(verbose=verbose, quiet=quiet)
        loaded_config, config_error = safe_load_config(
            config_path=config,
            repo_root=repo_root,
            overrides=overrides,
        )
        cli_logger = load_logger(loaded_config, config_error)

        ctx = CLIContext(
            config=loaded_config,
            verbose=verbose,
            quiet=quiet,
            no_color=no_color,
            config_error=config_error,
            logger=cli_logger,
            config_path=config,
            config_root=repo_root,
            overrides=overrides,
        )
        CLIContext.set_current(ctx)

        try:
            app(tokens)
        finally:
            CLIContext.reset()

    register_commands(app)
    return app


def main() -> None:
    """Default entrypoint for the `gitreport` CLI."""
    app = create_app()
    app.meta()
