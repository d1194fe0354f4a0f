"""Constants used across the term-markdown package."""

from __future__ import annotations

# Highlighting defaults
DEFAULT_LANGUAGE = "rust"
DEFAULT_THEME = "monokai"

# Limits
MAX_INPUT_SIZE = 10 * 1024 * 1024

# ANSI escape sequences
ESC = "\x1b"
ANSI_RESET = f"{ESC}[0m"

# Plain-text markers
LIST_ITEM_MARKER = " * "
INLINE_CODE_MARKER = "`"
