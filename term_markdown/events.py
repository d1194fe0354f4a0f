"""Markdown event source built on markdown-it-py.

markdown-it parses the whole document into a token list up front; only the
conversion of those tokens into start/end/text events is lazy.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from markdown_it import MarkdownIt
from markdown_it.token import Token

from .models import (
    EndTag,
    Event,
    HardLineBreak,
    Ignored,
    RawMarkup,
    SoftLineBreak,
    StartTag,
    Tag,
    TagKind,
    Text,
)

# markdown-it `<name>_open` / `<name>_close` pairs
PAIRED_TOKENS = {
    "paragraph": TagKind.PARAGRAPH,
    "heading": TagKind.HEADING,
    "blockquote": TagKind.BLOCK_QUOTE,
    "bullet_list": TagKind.LIST,
    "ordered_list": TagKind.LIST,
    "list_item": TagKind.ITEM,
    "em": TagKind.EMPHASIS,
    "strong": TagKind.STRONG,
    "s": TagKind.STRIKETHROUGH,
    "link": TagKind.LINK,
    "table": TagKind.TABLE,
    "thead": TagKind.TABLE_HEAD,
    "tbody": TagKind.TABLE_BODY,
    "tr": TagKind.TABLE_ROW,
    "th": TagKind.TABLE_CELL,
    "td": TagKind.TABLE_CELL,
}


def create_parser() -> MarkdownIt:
    """Return a CommonMark parser with tables and strikethrough enabled."""
    return MarkdownIt("commonmark").enable(["table", "strikethrough"])


def iter_events(text: str, parser: MarkdownIt | None = None) -> Iterator[Event]:
    """Parse Markdown text and yield its events.

    The text is tokenized in one go by markdown-it; events are then produced
    one at a time as the caller pulls them from the token list.

    Paragraphs hidden by markdown-it (the bodies of tight list items) produce
    no events. Tokens without a counterpart in the event model are reported
    as `Ignored`.

    Args:
        text: Markdown source.
        parser: Parser to use; defaults to `create_parser()`.

    Yields:
        Event: Parse events in document order.

    Examples:
        list(iter_events("`x`"))
        # [StartTag(PARAGRAPH), StartTag(CODE), Text("x"), EndTag(CODE), EndTag(PARAGRAPH)]
    """
    parser = parser or create_parser()
    yield from _walk(parser.parse(text), [])


def _walk(tokens: Sequence[Token], stack: list[Tag | None]) -> Iterator[Event]:
    for token in tokens:
        if token.type == "inline":
            yield from _walk(token.children or [], stack)
        elif token.hidden and token.type in ("paragraph_open", "paragraph_close"):
            continue
        elif token.nesting == 1:
            tag = _open_tag(token)
            stack.append(tag)
            yield StartTag(tag) if tag is not None else Ignored(token.type)
        elif token.nesting == -1:
            tag = stack.pop() if stack else None
            yield EndTag(tag) if tag is not None else Ignored(token.type)
        else:
            yield from _leaf_events(token, stack)


def _open_tag(token: Token) -> Tag | None:
    name = token.type.removesuffix("_open")
    kind = PAIRED_TOKENS.get(name)
    if kind is None:
        return None

    if kind is TagKind.HEADING:
        return Tag(kind, level=int(token.tag[1:]))
    if kind is TagKind.LIST:
        ordered = name == "ordered_list"
        start = int(token.attrGet("start") or 1) if ordered else None
        return Tag(kind, ordered=ordered, start=start)
    if kind is TagKind.LINK:
        return Tag(
            kind,
            destination=str(token.attrGet("href") or ""),
            title=str(token.attrGet("title") or ""),
        )
    return Tag(kind)


def _leaf_events(token: Token, stack: list[Tag | None]) -> Iterator[Event]:
    kind = token.type
    if kind == "text":
        yield Text(token.content)
    elif kind in ("html_block", "html_inline"):
        yield RawMarkup(token.content)
    elif kind == "softbreak":
        yield SoftLineBreak()
    elif kind == "hardbreak":
        yield HardLineBreak()
    elif kind in ("fence", "code_block"):
        info = token.info.split(maxsplit=1)
        tag = Tag(TagKind.CODE_BLOCK, language=info[0] if info else "")
        yield StartTag(tag)
        yield Text(token.content)
        yield EndTag(tag)
    elif kind == "code_inline":
        tag = Tag(TagKind.CODE)
        yield StartTag(tag)
        yield Text(token.content)
        yield EndTag(tag)
    elif kind == "hr":
        tag = Tag(TagKind.RULE)
        yield StartTag(tag)
        yield EndTag(tag)
    elif kind == "image":
        tag = Tag(
            TagKind.IMAGE,
            destination=str(token.attrGet("src") or ""),
            title=str(token.attrGet("title") or ""),
        )
        yield StartTag(tag)
        yield from _walk(token.children or [], stack)
        yield EndTag(tag)
    else:
        yield Ignored(kind)
