"""
term-markdown: Markdown renderer for the terminal.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    term-markdown README.md
    cat README.md | term-markdown

Library Usage:
    from term_markdown import Highlighter, iter_events, render

    text = Path("README.md").read_text()
    output = render(iter_events(text), Highlighter("python", "monokai"))
"""

from .config import ConfigError, RenderConfig
from .events import iter_events
from .exceptions import InputError, InputTooLargeError, TermMarkdownError
from .highlight import Highlighter, Style, encode
from .models import (
    EndTag,
    HardLineBreak,
    Ignored,
    RawMarkup,
    RenderState,
    SoftLineBreak,
    StartTag,
    Tag,
    TagKind,
    Text,
)
from .renderer import Renderer, render, render_markdown

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "render",
    "render_markdown",
    "iter_events",
    "Renderer",
    # Highlighting
    "Highlighter",
    "Style",
    "encode",
    # Data models
    "EndTag",
    "HardLineBreak",
    "Ignored",
    "RawMarkup",
    "RenderState",
    "SoftLineBreak",
    "StartTag",
    "Tag",
    "TagKind",
    "Text",
    # Configuration
    "RenderConfig",
    # Exceptions
    "ConfigError",
    "InputError",
    "InputTooLargeError",
    "TermMarkdownError",
    # Version
    "__version__",
]
