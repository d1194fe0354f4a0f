"""Resumable line-at-a-time lexing on top of Pygments lexers."""

from __future__ import annotations

from collections.abc import Iterator

from pygments.lexer import ExtendedRegexLexer, Lexer, LexerContext, RegexLexer
from pygments.token import Error, Token, Whitespace

TokenType = type(Token)

LexedToken = tuple[int, TokenType, str]


class LineLexer:
    """Feed a Pygments lexer one line at a time.

    Lexers driven by Pygments' regex loop (`RegexLexer` and
    `ExtendedRegexLexer` without an overridden `get_tokens_unprocessed`)
    resume each line from the state stack the previous line left behind, so
    a line costs the same however many lines came before it. Any other lexer
    starts every line from its initial state.

    Args:
        lexer: Pygments lexer instance.

    Examples:
        lines = LineLexer(get_lexer_by_name("rust"))
        list(lines.tokens("/* open\\n"))
        list(lines.tokens("still a comment */\\n"))
    """

    def __init__(self, lexer: Lexer):
        self.lexer = lexer
        self.stack: list[str] = ["root"]

    @property
    def resumable(self) -> bool:
        method = type(self.lexer).get_tokens_unprocessed
        return method is RegexLexer.get_tokens_unprocessed or (
            method is ExtendedRegexLexer.get_tokens_unprocessed
        )

    def reset(self) -> None:
        self.stack = ["root"]

    def tokens(self, text: str) -> Iterator[LexedToken]:
        """Lex `text`, continuing from the state left by the previous call.

        The state stack is only updated once the returned iterator is
        exhausted.
        """
        method = type(self.lexer).get_tokens_unprocessed
        if method is RegexLexer.get_tokens_unprocessed:
            return _regex_tokens(self.lexer, text, self.stack)
        if method is ExtendedRegexLexer.get_tokens_unprocessed:
            return _extended_tokens(self.lexer, text, self.stack)
        return self.lexer.get_tokens_unprocessed(text)


def _regex_tokens(lexer: RegexLexer, text: str, stack: list[str]) -> Iterator[LexedToken]:
    # Same matching loop as `RegexLexer.get_tokens_unprocessed`, except that
    # the state stack belongs to the caller and survives the call.
    tokendefs = lexer._tokens
    statetokens = tokendefs[stack[-1]]
    pos = 0
    while pos < len(text):
        for rexmatch, action, new_state in statetokens:
            match = rexmatch(text, pos)
            if not match:
                continue
            if action is not None:
                if type(action) is TokenType:
                    yield pos, action, match.group()
                else:
                    yield from action(lexer, match)
            pos = match.end()
            if new_state is not None:
                _change_state(stack, new_state)
                statetokens = tokendefs[stack[-1]]
            break
        else:
            if text[pos] == "\n":
                stack[:] = ["root"]
                statetokens = tokendefs["root"]
                yield pos, Whitespace, "\n"
            else:
                yield pos, Error, text[pos]
            pos += 1


def _change_state(stack: list[str], new_state: tuple | int | str) -> None:
    if isinstance(new_state, tuple):
        for state in new_state:
            if state == "#pop":
                if len(stack) > 1:
                    stack.pop()
            elif state == "#push":
                stack.append(stack[-1])
            else:
                stack.append(state)
    elif isinstance(new_state, int):
        # pop, but never below the root state
        if abs(new_state) >= len(stack):
            del stack[1:]
        else:
            del stack[new_state:]
    elif new_state == "#push":
        stack.append(stack[-1])


def _extended_tokens(
    lexer: ExtendedRegexLexer, text: str, stack: list[str]
) -> Iterator[LexedToken]:
    context = LexerContext(text, 0, list(stack))
    yield from lexer.get_tokens_unprocessed(context=context)
    stack[:] = context.stack
