# pyright: reportExplicitAny=false, reportAny=false
"""Configuration container with typed access.

This module provides the Config class that serves as the primary interface
for accessing gitreport configuration values.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gitreport.config._discovery import discover_config_files
from gitreport.config._loader import deep_merge, parse_env_vars, read_toml_file
from gitreport.config._models import LoggingConfig, OutputConfig
from gitreport.exceptions import ConfigValidationError


class Config(BaseModel):
    """Configuration container with typed access.

    Use the factory methods rather than the constructor so that
    validation errors surface as ConfigValidationError.

    Attributes:
        logging: Logging section.
        output: Output section.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        *,
        source: str | None = None,
    ) -> Self:
        """Create configuration from a dictionary.

        Args:
            data: Dictionary of configuration values. Missing keys take
                their defaults.
            source: Name of the source for error reporting.

        Returns:
            Validated configuration object.

        Raises:
            ConfigValidationError: If a value is invalid.
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            error = e.errors()[0]
            key = ".".join(str(part) for part in error["loc"])
            ctx: dict[str, Any] = error.get("ctx") or {}
            expected = str(ctx.get("expected", error["type"]))
            msg = f"Invalid configuration value for {key}: {error['msg']}"
            raise ConfigValidationError(
                msg,
                key=key,
                value=error.get("input"),
                expected=expected,
                source=source,
            ) from e

    @classmethod
    def from_file(cls, path: Path) -> Self:
        """Load configuration from a specific file.

        Args:
            path: Path to the TOML config file.

        Returns:
            Configuration object from the specified file only.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file cannot be parsed.
            ConfigValidationError: If validation fails.
        """
        return cls.from_dict(read_toml_file(path), source=str(path))

    @classmethod
    def load(
        cls,
        *,
        repo_root: Path | None = None,
        include_env: bool = True,
        environ: Mapping[str, str] | None = None,
        overrides: Mapping[str, Any] | None = None,
    ) -> Self:
        """Load merged configuration from all sources.

        Sources are merged in increasing precedence:
        defaults -> user file -> repository file -> environment -> overrides.

        Args:
            repo_root: Repository root to read .gitreport.toml from.
            include_env: Include GITREPORT_* environment variables.
            environ: Environment mapping. Defaults to os.environ.
            overrides: Highest-precedence values, e.g. from CLI flags.

        Returns:
            Merged configuration object.

        Raises:
            ConfigLoadError: If a config file cannot be parsed.
            ConfigValidationError: If the merged config fails validation.
        """
        merged: dict[str, Any] = {}
        for path in discover_config_files(repo_root):
            merged = deep_merge(merged, read_toml_file(path))
        if include_env:
            merged = deep_merge(merged, parse_env_vars(environ))
        if overrides:
            merged = deep_merge(merged, overrides)
        return cls.from_dict(merged)
