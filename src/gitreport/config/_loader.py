# pyright: reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""TOML configuration file loading and merging."""

import copy
import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from gitreport.exceptions import ConfigLoadError

ENV_PREFIX = "GITREPORT_"

# Environment variables with the prefix that are not config keys
_RESERVED_ENV_KEYS = frozenset({"DEBUG", "STRICT_CONFIG"})


def read_toml_file(path: Path) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Read and parse a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        Parsed TOML content as dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigLoadError: If the file cannot be parsed.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse TOML file: {e}"
        raise ConfigLoadError(
            msg,
            path=path,
            line=getattr(e, "lineno", None),
            column=getattr(e, "colno", None),
        ) from e


def deep_merge(
    base: Mapping[str, Any],  # pyright: ignore[reportExplicitAny]
    override: Mapping[str, Any],  # pyright: ignore[reportExplicitAny]
) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Deep merge two configuration dictionaries.

    Merges `override` into `base`, returning a new dictionary. Neither input
    is modified.

    Merge rules:
        - Dictionaries are recursively merged
        - Arrays are replaced entirely (no element-wise merge)
        - Scalars are replaced with override value
        - Missing keys in override preserve base values

    Args:
        base: Base configuration (lower precedence).
        override: Override configuration (higher precedence).

    Returns:
        Merged configuration dictionary.
    """
    result: dict[str, Any] = copy.deepcopy(dict(base))  # pyright: ignore[reportExplicitAny]
    for key, override_val in override.items():
        base_val = result.get(key)
        if isinstance(base_val, dict) and isinstance(override_val, Mapping):
            result[key] = deep_merge(base_val, override_val)
        else:
            result[key] = copy.deepcopy(override_val)
    return result


def parse_env_vars(
    environ: Mapping[str, str] | None = None,
    *,
    prefix: str = ENV_PREFIX,
) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Parse environment variables into a config dictionary.

    Variable names map to keys by stripping the prefix, lowercasing, and
    splitting sections on double underscores:
    GITREPORT_LOGGING__LEVEL -> logging.level

    Args:
        environ: Environment mapping. Defaults to os.environ.
        prefix: Environment variable prefix.

    Returns:
        Dictionary of config values with nested structure.
    """
    if environ is None:
        environ = os.environ

    result: dict[str, Any] = {}  # pyright: ignore[reportExplicitAny]
    for key, value in environ.items():
        if not key.startswith(prefix):
            continue
        config_key = key[len(prefix) :]
        if not config_key or config_key in _RESERVED_ENV_KEYS:
            continue

        parts = [part.lower() for part in config_key.split("__") if part]
        if not parts:
            continue

        target = result
        for part in parts[:-1]:
            target = target.setdefault(part, {})
            if not isinstance(target, dict):
                break
        else:
            target[parts[-1]] = value
    return result
