"""Process-wide timeout.

When the timeout expires the process reports the repository as timed out
and exits immediately, wherever it was. The report starts with a newline so
that it never continues a partially written line.
"""

import contextlib
import os
import signal
import sys
from typing import TYPE_CHECKING, NoReturn

from git_status_vars.cli._exit_codes import ExitCode

if TYPE_CHECKING:
    from types import FrameType

    from structlog.typing import FilteringBoundLogger

TIMEOUT_OUTPUT = b"\nrepo_state=Error\nrepo_error='Timed out'\n"
STDOUT_FILENO = 1

# setitimer() treats 0 as "disarm"; shorter timeouts are rounded up to this.
_MIN_INTERVAL = 1e-6


def timeout_supported() -> bool:
    """Check whether this platform can deliver ``SIGALRM`` timers."""
    return hasattr(signal, "SIGALRM") and hasattr(signal, "setitimer")


def _on_timeout(_signum: int, _frame: "FrameType | None") -> NoReturn:
    with contextlib.suppress(OSError, RuntimeError, ValueError):
        sys.stdout.flush()
    with contextlib.suppress(OSError):
        _ = os.write(STDOUT_FILENO, TIMEOUT_OUTPUT)
    os._exit(ExitCode.TIMEOUT)


def install_timeout(
    seconds: float | None,
    *,
    logger: "FilteringBoundLogger | None" = None,
) -> bool:
    """Arm the process timeout.

    Args:
        seconds: Time limit, or None for no limit.
        logger: Optional logger for diagnostic events.

    Returns:
        True if a timer was armed.
    """
    if seconds is None:
        return False
    if not timeout_supported():
        if logger is not None:
            logger.debug("timeout_unsupported", platform=sys.platform)
        return False

    _ = signal.signal(signal.SIGALRM, _on_timeout)
    _ = signal.setitimer(signal.ITIMER_REAL, max(seconds, _MIN_INTERVAL))
    if logger is not None:
        logger.debug("timeout_installed", seconds=seconds)
    return True


def cancel_timeout() -> None:
    """Disarm the process timeout, if one is armed."""
    if timeout_supported():
        _ = signal.setitimer(signal.ITIMER_REAL, 0)
        _ = signal.signal(signal.SIGALRM, signal.SIG_DFL)
