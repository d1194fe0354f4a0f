"""Package-specific exception types."""

from __future__ import annotations


class TermMarkdownError(Exception):
    """Base class for term-markdown errors raised outside the renderer."""


class InputError(TermMarkdownError):
    """Raised when the markdown input cannot be read or decoded."""


class InputTooLargeError(InputError):
    """Raised when the input exceeds the configured size limit.

    Args:
        size: Number of bytes read before giving up (at least `limit` + 1).
        limit: Maximum number of bytes allowed.
    """

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Input exceeds the maximum allowed size of {limit} bytes")
