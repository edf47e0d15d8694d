"""The git-status-vars command line."""

from git_status_vars.cli._app import create_app, main, run, summarize_all
from git_status_vars.cli._exit_codes import ExitCode
from git_status_vars.cli._timeout import (
    TIMEOUT_OUTPUT,
    cancel_timeout,
    install_timeout,
    timeout_supported,
)

__all__ = [
    "TIMEOUT_OUTPUT",
    "ExitCode",
    "cancel_timeout",
    "create_app",
    "install_timeout",
    "main",
    "run",
    "summarize_all",
    "timeout_supported",
]
