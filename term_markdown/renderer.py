"""Terminal renderer that consumes Markdown events one at a time."""

from __future__ import annotations

from collections.abc import Iterable

from .config import RenderConfig, validate_config
from .constants import INLINE_CODE_MARKER, LIST_ITEM_MARKER
from .events import iter_events
from .highlight import Highlighter, encode
from .models import (
    EndTag,
    Event,
    HardLineBreak,
    RawMarkup,
    RenderState,
    SoftLineBreak,
    StartTag,
    Tag,
    TagKind,
    Text,
)


def split_lines(text: str) -> list[str]:
    """Split text on ``\\n``, dropping a trailing ``\\r`` from each line.

    A final line terminator does not start an extra empty line.

    Examples:
        split_lines("a\\r\\nb\\n")  # ["a", "b"]
        split_lines("a\\n\\nb")  # ["a", "", "b"]
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


class Renderer:
    """Single-pass event renderer.

    Plain text is appended as is; text inside a code block is highlighted
    line by line. A renderer renders one document and is then discarded.

    Args:
        highlighter: Highlighter owned by this renderer for its whole life.

    Examples:
        renderer = Renderer(Highlighter())
        renderer.run(iter_events("# Title"))
        output = renderer.getvalue()
    """

    def __init__(self, highlighter: Highlighter):
        self.highlighter = highlighter
        self.state = RenderState()

    def fresh_line(self) -> None:
        """Start a new line unless the buffer is empty or already on one."""
        if not (self.state.is_empty() or self.state.ends_with_newline()):
            self.state.append("\n")

    def run(self, events: Iterable[Event]) -> None:
        for event in events:
            self.feed(event)

    def feed(self, event: Event) -> None:
        """Apply one event to the buffer; unknown events are ignored."""
        if isinstance(event, StartTag):
            self._start_tag(event.tag)
        elif isinstance(event, EndTag):
            self._end_tag(event.tag)
        elif isinstance(event, (Text, RawMarkup)):
            self._text(event.text)
        elif isinstance(event, (SoftLineBreak, HardLineBreak)):
            self.state.append("\n")

    def getvalue(self) -> str:
        return self.state.getvalue()

    def _text(self, text: str) -> None:
        if not self.state.in_code_block:
            self.state.append(text)
            return

        for line in split_lines(text):
            spans = self.highlighter.highlight(line)
            self.state.append(encode(spans, include_background=True))
            self.fresh_line()

    def _start_tag(self, tag: Tag) -> None:
        kind = tag.kind
        if kind is TagKind.PARAGRAPH:
            self.fresh_line()
        elif kind is TagKind.RULE:
            self.fresh_line()
            self.state.append("\n")
        elif kind is TagKind.CODE_BLOCK:
            self.state.in_code_block = True
            self.highlighter.reset()
            self.fresh_line()
        elif kind is TagKind.CODE:
            self.state.append(INLINE_CODE_MARKER)
        elif kind is TagKind.LIST:
            self.fresh_line()
        elif kind is TagKind.ITEM:
            self.fresh_line()
            self.state.append(LIST_ITEM_MARKER)
        elif kind is TagKind.LINK:
            self.state.append(tag.destination)

    def _end_tag(self, tag: Tag) -> None:
        # Every handled end tag leaves code mode, not only a code block's.
        kind = tag.kind
        if kind is TagKind.PARAGRAPH:
            self.state.append("\n\n")
        elif kind is TagKind.RULE:
            pass
        elif kind in (TagKind.BLOCK_QUOTE, TagKind.CODE_BLOCK, TagKind.LIST, TagKind.ITEM):
            self.state.append("\n")
        elif kind is TagKind.CODE:
            self.state.append(INLINE_CODE_MARKER)
        else:
            return
        self.state.in_code_block = False


def render(events: Iterable[Event], highlighter: Highlighter | None = None) -> str:
    """Render a sequence of Markdown events to terminal text.

    Args:
        events: Events to consume, in document order. Consumed exactly once.
        highlighter: Highlighter for code blocks; defaults to one built from
            `RenderConfig()`.

    Returns:
        str: The rendered output.

    Examples:
        render(iter_events("Some *markdown*"))
    """
    renderer = Renderer(highlighter or Highlighter.from_config(RenderConfig()))
    renderer.run(events)
    return renderer.getvalue()


def render_markdown(text: str, config: RenderConfig | None = None) -> str:
    """Parse and render Markdown text.

    Args:
        text: Markdown source.
        config: Rendering configuration. Defaults to a new `RenderConfig`.

    Returns:
        str: The rendered output.

    Raises:
        ConfigError: If the configuration fails validation.

    Examples:
        render_markdown("```\\nfn main() {}\\n```\\n", RenderConfig(theme="nord"))
    """
    config = config or RenderConfig()
    validate_config(config)
    return render(iter_events(text), Highlighter.from_config(config))
