"""Utilities shared by the git-status-vars packages."""

from git_status_vars.utils._duration import parse_duration
from git_status_vars.utils._git import decode_bytes, encode_str, tree_path
from git_status_vars.utils._logging import DEBUG_ENV_VAR, LogFormatType, create_logger

__all__ = [
    "DEBUG_ENV_VAR",
    "LogFormatType",
    "create_logger",
    "decode_bytes",
    "encode_str",
    "parse_duration",
    "tree_path",
]
