"""Duration parsing for the ``--timeout`` option."""

import re

_UNIT_SECONDS: dict[str, float] = {
    "h": 3600.0,
    "m": 60.0,
    "min": 60.0,
    "s": 1.0,
    "ms": 1e-3,
    "us": 1e-6,
    "ns": 1e-9,
}

_PART_PATTERN = re.compile(r"(\d+(?:\.\d*)?|\.\d+)\s*(min|ms|us|ns|h|m|s)")
_NUMBER_PATTERN = re.compile(r"\d+(?:\.\d*)?|\.\d+")
_NO_TIMEOUT: frozenset[str] = frozenset({"", "0", "none"})


def parse_duration(value: str) -> float | None:
    """Parse a duration into seconds.

    Accepted forms:

    - a plain number of seconds: ``"1"``, ``"1.5"``
    - one or more ``<number><unit>`` parts: ``"1s"``, ``"200ms"``, ``"2s 50ms"``
    - ``"none"``, ``"0"`` or ``""`` for no duration at all

    Args:
        value: The text to parse.

    Returns:
        The duration in seconds, or None for "no duration".

    Raises:
        ValueError: If the text is negative or not a duration.

    Examples:
        >>> parse_duration("2s 50ms")
        2.05
        >>> parse_duration("none") is None
        True
    """
    text = value.strip().lower()
    if text in _NO_TIMEOUT:
        return None
    if text.startswith("-"):
        msg = "duration cannot be negative"
        raise ValueError(msg)
    if _NUMBER_PATTERN.fullmatch(text):
        seconds = float(text)
        return seconds if seconds > 0 else None

    total = 0.0
    position = 0
    for match in _PART_PATTERN.finditer(text):
        if text[position : match.start()].strip():
            break
        total += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        position = match.end()
    if position == 0 or text[position:].strip():
        msg = f"invalid duration: {value!r}"
        raise ValueError(msg)
    return total if total > 0 else None
