"""Error-tolerant configuration loading for the CLI."""

import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from gitreport.config._config import Config
from gitreport.config._loader import deep_merge
from gitreport.exceptions import ConfigError


def safe_load_config(
    *,
    config_path: Path | None = None,
    repo_root: Path | None = None,
    overrides: Mapping[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> tuple[Config, str | None]:
    """Load configuration with error handling.

    Attempts to load configuration and handles errors based on the
    GITREPORT_STRICT_CONFIG environment variable:
    - If unset or "0": warn to stderr and return default config
    - If "1": fail fast with sys.exit(1)

    When config_path is provided, the file must exist (explicit user request).

    Args:
        config_path: Explicit path to config file (--config flag).
        repo_root: Repository root to read .gitreport.toml from.
        overrides: CLI overrides applied on top of every source.

    Returns:
        Tuple of (Config, error_message). On success, error_message is None.
        On failure (non-strict mode), returns default Config with error message.
    """
    strict_mode = os.environ.get("GITREPORT_STRICT_CONFIG", "0") == "1"

    try:
        if config_path is not None:
            if not config_path.exists():
                error_msg = f"Config file not found: {config_path}"
                print(f"Error: {error_msg}", file=sys.stderr)  # noqa: T201
                sys.exit(1)
            config = Config.from_file(config_path)
            if overrides:
                config = Config.from_dict(
                    deep_merge(config.model_dump(mode="json"), overrides)
                )
            return config, None

        config = Config.load(repo_root=repo_root, overrides=overrides)
    except (ConfigError, OSError) as e:
        error_msg = str(e)
        if strict_mode:
            print(f"Error: {error_msg}", file=sys.stderr)  # noqa: T201
            sys.exit(1)
        print(  # noqa: T201
            f"Warning: Failed to load config: {error_msg}",
            file=sys.stderr,
        )
        return Config(), error_msg
    else:
        return config, None
