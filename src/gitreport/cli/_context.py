# ruff: noqa: TC003  # Path needed at runtime for dataclass fields
"""CLI context for global state management.

The CLIContext is set once at CLI startup and made available to all
commands via contextvars.
"""

import contextvars
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path

from structlog.typing import FilteringBoundLogger

from gitreport.config import Config, get_repo_config_path, safe_load_config
from gitreport.utils import create_logger, create_null_logger


def load_logger(config: Config, config_error: str | None) -> FilteringBoundLogger:
    """Create the CLI logger described by a configuration.

    Args:
        config: Loaded configuration.
        config_error: Error from loading the configuration, logged as a
            warning when present.

    Returns:
        A configured structlog logger.
    """
    logger = create_logger(
        level=config.logging.level.value,
        log_format=config.logging.format.value,  # type: ignore[arg-type]
        log_file=config.logging.file,
    )
    if config_error is not None:
        logger.warning("config_load_failed", error=config_error)
    return logger


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global CLI context with configuration and options.

    Attributes:
        config: Loaded configuration object.
        verbose: Enable verbose output with additional details.
        quiet: Suppress non-essential output.
        no_color: Disable colored output.
        config_error: Error message if config loading failed.
        logger: Structured logger for CLI commands.
        config_path: Explicit config file given with --config.
        config_root: Repository whose .gitreport.toml was loaded, if any.
        overrides: Configuration overrides from global flags.
    """

    config: Config = field(default_factory=Config, repr=False)
    verbose: bool = False
    quiet: bool = False
    no_color: bool = False
    config_error: str | None = None
    logger: FilteringBoundLogger = field(
        default_factory=create_null_logger, repr=False
    )
    config_path: Path | None = None
    config_root: Path | None = None
    overrides: Mapping[str, object] | None = field(default=None, repr=False)

    def for_repository(self, root: Path) -> "CLIContext":
        """Get a context configured for the repository at root.

        Configuration is reloaded when root differs from the repository it
        was loaded for and either one has a .gitreport.toml. An explicit
        --config file is used as-is.

        Args:
            root: Working tree of the repository a command reads.

        Returns:
            This context, or a copy with the reloaded config and logger.
        """
        if self.config_path is not None or self.config_root == root:
            return self
        if self.config_root is None and not get_repo_config_path(root).is_file():
            return self

        config, config_error = safe_load_config(
            repo_root=root, overrides=self.overrides
        )
        logger = load_logger(config, config_error)
        logger.debug("config_reloaded", root=str(root))
        return replace(
            self,
            config=config,
            config_error=config_error,
            logger=logger,
            config_root=root,
        )

    @classmethod
    def get_current(cls) -> "CLIContext":
        """Get current active CLIContext, or create a default if not set.

        Returns:
            The currently active CLIContext, or a default instance if none is set.
        """
        ctx = _current_cli_context.get()
        if ctx is not None:
            return ctx
        return cls()

    @classmethod
    def set_current(cls, ctx: "CLIContext") -> None:
        """Set the current active CLIContext.

        Args:
            ctx: The CLIContext to set as current.
        """
        _current_cli_context.set(ctx)

    @classmethod
    def reset(cls) -> None:
        """Reset to default context.

        This is primarily useful for testing to ensure a clean state between tests.
        """
        _current_cli_context.set(None)


_current_cli_context: contextvars.ContextVar[CLIContext | None] = (
    contextvars.ContextVar("cli_context", default=None)
)
