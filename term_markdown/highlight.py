"""Line-by-line syntax highlighting with 24-bit ANSI output."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import NamedTuple

from pygments.lexers import get_lexer_by_name
from pygments.styles import get_style_by_name
from pygments.token import Token
from pygments.util import ClassNotFound

from .config import ConfigError, RenderConfig
from .constants import ANSI_RESET, DEFAULT_LANGUAGE, DEFAULT_THEME, ESC
from .lexing import LineLexer, TokenType

logger = logging.getLogger(__name__)


class Color(NamedTuple):
    """An RGB colour with 8-bit channels."""

    r: int
    g: int
    b: int

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Parse ``"f8f8f2"``, ``"#f8f8f2"`` or the short ``"#fff"`` form.

        Examples:
            Color.from_hex("#272822")  # Color(r=39, g=40, b=34)
        """
        digits = value.lstrip("#")
        if len(digits) == 3:
            digits = "".join(char * 2 for char in digits)
        if len(digits) != 6:
            raise ValueError(f"Invalid hex colour: {value!r}")
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    def is_dark(self) -> bool:
        # ITU-R BT.601 luma
        return (299 * self.r + 587 * self.g + 114 * self.b) / 1000 < 128


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


@dataclass(frozen=True)
class Style:
    """Resolved colours for one highlighted span."""

    foreground: Color
    background: Color


Span = tuple[Style, str]


class Theme:
    """Immutable lookup table from token types to resolved styles.

    Built once per Pygments style name by `load_theme` and shared by every
    highlighter using that name.

    Attributes:
        name: Pygments style name.
        background: Theme background colour.
        default: Style for plain text.
        styles: Read-only mapping of token types to styles.
    """

    def __init__(self, name: str, background: Color, default: Style, styles: Mapping):
        self.name = name
        self.background = background
        self.default = default
        self.styles = MappingProxyType(dict(styles))

    def style_for(self, ttype: TokenType) -> Style:
        """Return the style of `ttype` or of its nearest known ancestor."""
        while ttype not in self.styles:
            if ttype.parent is None:
                return self.default
            ttype = ttype.parent
        return self.styles[ttype]


@lru_cache(maxsize=None)
def load_theme(name: str) -> Theme:
    """Load and resolve a Pygments style into a `Theme`.

    Foreground colours missing from a token fall back to the style's plain
    text colour, then to black or white depending on the background.

    Args:
        name: Pygments style name, for example ``"monokai"``.

    Returns:
        Theme: Cached, read-only theme table.

    Raises:
        ConfigError: If no Pygments style has that name.

    Examples:
        load_theme("monokai").style_for(Token.Keyword)
    """
    try:
        style_cls = get_style_by_name(name)
    except ClassNotFound as error:
        raise ConfigError(f"Unknown theme: {name}") from error

    logger.debug("Loading theme table for %s", name)

    background = _parse_color(style_cls.background_color) or BLACK
    fallback = WHITE if background.is_dark() else BLACK
    text_color = _parse_color(style_cls.style_for_token(Token.Text)["color"]) or fallback
    default = Style(foreground=text_color, background=background)

    styles = {}
    for ttype, definition in style_cls:
        styles[ttype] = Style(
            foreground=_parse_color(definition["color"]) or text_color,
            background=_parse_color(definition["bgcolor"]) or background,
        )
    return Theme(name, background, default, styles)


def _parse_color(value: str | None) -> Color | None:
    if not value:
        return None
    try:
        return Color.from_hex(value)
    except ValueError:
        return None


class Highlighter:
    """Stateful highlighter fed one source line at a time.

    The lexer state reached at the end of a line is where the next line
    starts, so constructs spanning lines (block comments, multi-line strings)
    keep their styling until `reset` is called.

    Args:
        language: Pygments lexer alias.
        theme: Pygments style name.

    Raises:
        ConfigError: If the language or the theme is unknown.

    Examples:
        highlighter = Highlighter("rust", "monokai")
        spans = highlighter.highlight("fn main() {")
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE, theme: str = DEFAULT_THEME):
        try:
            lexer = get_lexer_by_name(language)
        except ClassNotFound as error:
            raise ConfigError(f"Unknown language: {language}") from error
        self._theme = load_theme(theme)
        self._lines = LineLexer(lexer)
        self.language = language
        logger.debug(
            "Highlighter ready (language=%s, theme=%s, resumable=%s)",
            language,
            theme,
            self._lines.resumable,
        )

    @classmethod
    def from_config(cls, config: RenderConfig) -> Highlighter:
        return cls(language=config.language, theme=config.theme)

    @property
    def theme(self) -> Theme:
        return self._theme

    def reset(self) -> None:
        """Return the lexer to its initial state."""
        self._lines.reset()

    def highlight(self, line: str) -> list[Span]:
        """Split one line into styled spans.

        Args:
            line: A single line of source code, without its line terminator.

        Returns:
            list[Span]: Spans whose substrings concatenate back to `line`.
        """
        text = f"{line}\n"
        stop = len(line)

        spans: list[Span] = []
        position = 0
        # Tokens past the line end are still consumed to advance the lexer state.
        for index, ttype, value in self._lines.tokens(text):
            end = index + len(value)
            if not value or end <= position or index >= stop:
                continue
            if index > position:
                spans.append((self._theme.default, text[position:index]))
                position = index
            piece_end = min(end, stop)
            spans.append((self._theme.style_for(ttype), text[position:piece_end]))
            position = piece_end
        if position < stop:
            spans.append((self._theme.default, text[position:stop]))
        return spans


def encode(spans: Iterable[Span], include_background: bool = False) -> str:
    """Serialize styled spans as 24-bit ANSI escape sequences.

    Each span sets its foreground colour (and its background colour when
    `include_background` is true) before its text; the result always ends
    with a reset code.

    Examples:
        encode([(Style(WHITE, BLACK), "x")], include_background=True)
        # '\\x1b[48;2;0;0;0m\\x1b[38;2;255;255;255mx\\x1b[0m'
    """
    parts = []
    for style, text in spans:
        if include_background:
            parts.append(_background_code(style.background))
        parts.append(_foreground_code(style.foreground))
        parts.append(text)
    parts.append(ANSI_RESET)
    return "".join(parts)


def _foreground_code(color: Color) -> str:
    return f"{ESC}[38;2;{color.r};{color.g};{color.b}m"


def _background_code(color: Color) -> str:
    return f"{ESC}[48;2;{color.r};{color.g};{color.b}m"
