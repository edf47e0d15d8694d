"""Small helpers for working with dulwich values."""

import os


def decode_bytes(value: bytes | str) -> str:
    """Decode bytes to str if needed.

    Reference names and paths from dulwich are bytes; undecodable bytes are
    kept with ``surrogateescape`` so they survive a round trip.

    Args:
        value: A bytes or str value.

    Returns:
        The value as a string.
    """
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="surrogateescape")
    return value


def encode_str(value: bytes | str) -> bytes:
    """Encode str to bytes if needed (the inverse of ``decode_bytes``)."""
    if isinstance(value, str):
        return value.encode("utf-8", errors="surrogateescape")
    return value


def tree_path(relative_path: str) -> bytes:
    """Convert an OS-relative path to a ``/``-separated tree path.

    Args:
        relative_path: Path relative to the working tree root.

    Returns:
        The path as stored in git trees and the index.
    """
    path = os.fsencode(relative_path)
    if os.sep != "/":
        path = path.replace(os.fsencode(os.sep), b"/")
    return path
