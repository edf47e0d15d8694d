"""Exit codes for the git-status-vars command.

A summary is always a success, even when it reports ``repo_state=NotFound``
or ``repo_state=Error``: those are facts about the repository, not failures
of the command.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for the git-status-vars command."""

    SUCCESS = 0
    USAGE_ERROR = 1
    TIMEOUT = 2
