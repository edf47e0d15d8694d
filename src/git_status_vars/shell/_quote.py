r"""Rendering values for POSIX shells.

Values are rendered twice over: first to text (``display`` for the natural
form, ``debug_format`` for the diagnostic form), then quoted so the line can
be passed to ``eval`` or ``source`` safely. Quoted values are wrapped in single
quotes; an embedded single quote is written as ``'\''``.
"""

import re
from enum import Enum

_UNSAFE_CHARACTER = re.compile(r"[^\w@%+=:,./-]", re.ASCII)


def _quote(text: str) -> str:
    if not text:
        return "''"
    if _UNSAFE_CHARACTER.search(text) is None:
        return text
    return "'" + text.replace("'", "'\\''") + "'"


def display(value: object) -> str:
    """Render a value in its natural form.

    ``None`` renders as the empty string and booleans as ``true``/``false``,
    so optional and boolean fields read the way a shell script expects.

    Args:
        value: Any value.

    Returns:
        The display text.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def debug_format(value: object) -> str:
    """Render a value in its diagnostic form.

    Enum members render as their value (e.g. ``CherryPick``); everything else,
    errors in particular, renders as ``repr()``.

    Args:
        value: Any value.

    Returns:
        The diagnostic text.
    """
    if isinstance(value, Enum):
        return str(value.value)
    return repr(value)


def shell_quote(value: object) -> str:
    """Display and quote a value for a POSIX shell.

    Args:
        value: Any value.

    Returns:
        The quoted text. Empty values become ``''``.
    """
    return _quote(display(value))


def shell_quote_debug(value: object) -> str:
    """Debug-format and quote a value for a POSIX shell.

    Args:
        value: Any value.

    Returns:
        The quoted text.
    """
    return _quote(debug_format(value))
