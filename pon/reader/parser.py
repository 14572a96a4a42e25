"""
  Lisp Reader: tokenizer and parser

- Parentheses are padded with whitespace, then the text is split on whitespace.
- Emits Python primitives:

    - lists -> Python list
    - integers (-?\\d+) -> int
    - decimals (-?\\d*\\.\\d+) -> float
    - anything else -> Symbol

  There are no strings, comments, quote shorthands or escapes. One call to
  `read` consumes exactly one top-level expression.
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from pon import SExpression
from pon.errors import PonSyntaxError
from pon.types.symbol import Symbol


INTEGER_RE = re.compile(r"-?\d+")
DECIMAL_RE = re.compile(r"-?\d*\.\d+")


def tokenize(source: str) -> list[str]:
    """Split source text into raw tokens, with each paren as its own token."""
    return source.replace("(", " ( ").replace(")", " ) ").split()


def read_atom(token: str) -> SExpression:
    """Classify a single non-paren token as int, float or Symbol."""
    if INTEGER_RE.fullmatch(token):
        try:
            return int(token)
        except ValueError as ex:
            raise PonSyntaxError(f"Unreadable integer literal: {ex}") from None
    if DECIMAL_RE.fullmatch(token):
        return float(token)
    return Symbol(token)


class TokenStream:
    def __init__(self, tokens: Iterable[str]):
        self.tokens: Iterator[str] = iter(tokens)
        self.buffer: list[str] = []

    def peek(self) -> Optional[str]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[str]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> SExpression:
        token = self.advance()
        if token is None:
            raise PonSyntaxError("Unexpected end of input")

        if token == "(":
            items: list[SExpression] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise PonSyntaxError("Unmatched '('")
                if nxt == ")":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if token == ")":
            raise PonSyntaxError("Unmatched ')'")

        return read_atom(token)


def read(source: str) -> SExpression:
    """Read exactly one expression from `source`.

    Raises PonSyntaxError on empty input, unbalanced parentheses, or tokens
    left over after the first complete expression.
    """
    stream = TokenStream(tokenize(source))
    if stream.peek() is None:
        raise PonSyntaxError("Empty input")
    expr = stream.parse_expr()
    leftover = stream.peek()
    if leftover is not None:
        raise PonSyntaxError(f"Unexpected token after expression: {leftover}")
    return expr
