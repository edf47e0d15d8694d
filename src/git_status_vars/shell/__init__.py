"""Shell variable output.

This package renders values as POSIX-shell-safe ``key=value`` lines and
provides the grouping writer used to prefix them hierarchically.
"""

from git_status_vars.shell._quote import (
    debug_format,
    display,
    shell_quote,
    shell_quote_debug,
)
from git_status_vars.shell._writer import ShellVars, ShellWriter, TextSink

__all__ = [
    "ShellVars",
    "ShellWriter",
    "TextSink",
    "debug_format",
    "display",
    "shell_quote",
    "shell_quote_debug",
]
