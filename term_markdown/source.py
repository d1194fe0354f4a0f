"""Input helpers for term-markdown."""

from __future__ import annotations

from typing import BinaryIO

from .constants import MAX_INPUT_SIZE
from .exceptions import InputError, InputTooLargeError


def read_source(stream: BinaryIO, max_size: int = MAX_INPUT_SIZE, name: str = "<stdin>") -> str:
    """Read a whole binary stream and decode it as UTF-8.

    Reads at most one byte past `max_size` so oversized input is detected
    without loading all of it.

    Args:
        stream: Binary stream to read.
        max_size: Maximum number of bytes accepted.
        name: Display name of the stream used in error messages.

    Returns:
        str: Decoded text.

    Raises:
        InputTooLargeError: If the stream holds more than `max_size` bytes.
        InputError: If the stream cannot be read or is not valid UTF-8.

    Examples:
        with open("README.md", "rb") as handle:
            text = read_source(handle, name="README.md")
    """
    try:
        data = stream.read(max_size + 1)
    except OSError as error:
        raise InputError(f"Error reading {name}: {error}") from error

    if len(data) > max_size:
        raise InputTooLargeError(len(data), max_size)

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as error:
        raise InputError(f"Invalid UTF-8 sequence in {name}: {error}") from error
