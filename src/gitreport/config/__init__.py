"""gitreport configuration.

This module provides the public API for configuration management:
loading, validation, and typed access to configuration values.

Example:
    >>> from gitreport.config import Config
    >>> config = Config.load()
    >>> config.logging.level
    <LogLevel.WARNING: 'warning'>
"""

from gitreport.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
)

from ._config import Config
from ._discovery import (
    REPO_CONFIG_FILENAME,
    discover_config_files,
    get_repo_config_path,
    get_user_config_path,
)
from ._load import safe_load_config
from ._loader import ENV_PREFIX, deep_merge, parse_env_vars, read_toml_file
from ._models import LogFormat, LoggingConfig, LogLevel, OutputConfig, OutputFormat

__all__ = [
    "ENV_PREFIX",
    "REPO_CONFIG_FILENAME",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "OutputConfig",
    "OutputFormat",
    "deep_merge",
    "discover_config_files",
    "get_repo_config_path",
    "get_user_config_path",
    "parse_env_vars",
    "read_toml_file",
    "safe_load_config",
]
