"""Utilities for gitreport.

This package provides git helper functions and structlog logger factories.
"""

from gitreport.utils._git import (
    decode_bytes,
    find_repo_root,
    get_worktree_dir,
    open_repo,
    strip_refs_heads,
)
from gitreport.utils._logging import LogFormatType, create_logger, create_null_logger

__all__ = [
    "LogFormatType",
    "create_logger",
    "create_null_logger",
    "decode_bytes",
    "find_repo_root",
    "get_worktree_dir",
    "open_repo",
    "strip_refs_heads",
]
