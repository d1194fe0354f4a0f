"""Data models for term-markdown.

Markdown parse events and the mutable state owned by a single render call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class TagKind(Enum):
    """Structural element kinds carried by start and end tags.

    Only a subset changes the rendered output; the renderer ignores the rest.
    """

    PARAGRAPH = auto()
    HEADING = auto()
    RULE = auto()
    BLOCK_QUOTE = auto()
    CODE_BLOCK = auto()
    CODE = auto()
    LIST = auto()
    ITEM = auto()
    EMPHASIS = auto()
    STRONG = auto()
    STRIKETHROUGH = auto()
    LINK = auto()
    IMAGE = auto()
    TABLE = auto()
    TABLE_HEAD = auto()
    TABLE_BODY = auto()
    TABLE_ROW = auto()
    TABLE_CELL = auto()


@dataclass(frozen=True)
class Tag:
    """A structural element together with its attributes.

    Attributes:
        kind: Element kind.
        language: Language hint of a code block (empty when absent).
        ordered: Whether a list is ordered.
        start: First number of an ordered list.
        level: Heading level.
        destination: Link or image URL.
        title: Link or image title.
    """

    kind: TagKind
    language: str = ""
    ordered: bool = False
    start: int | None = None
    level: int = 0
    destination: str = ""
    title: str = ""


@dataclass(frozen=True)
class StartTag:
    tag: Tag


@dataclass(frozen=True)
class EndTag:
    tag: Tag


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class RawMarkup:
    """Inline or block HTML, rendered exactly like `Text`."""

    text: str


@dataclass(frozen=True)
class SoftLineBreak:
    pass


@dataclass(frozen=True)
class HardLineBreak:
    pass


@dataclass(frozen=True)
class Ignored:
    """Any parser event without a visible rendering (footnotes, math, ...).

    Attributes:
        name: Parser-specific name of the event.
    """

    name: str


Event = StartTag | EndTag | Text | RawMarkup | SoftLineBreak | HardLineBreak | Ignored


@dataclass
class RenderState:
    """State owned by one render call.

    Attributes:
        buffer: Output chunks, only ever appended to.
        in_code_block: Whether text goes through the highlighter.
    """

    buffer: list[str] = field(default_factory=list)
    in_code_block: bool = False

    def append(self, text: str) -> None:
        if text:
            self.buffer.append(text)

    def is_empty(self) -> bool:
        return not self.buffer

    def ends_with_newline(self) -> bool:
        return bool(self.buffer) and self.buffer[-1].endswith("\n")

    def getvalue(self) -> str:
        return "".join(self.buffer)
