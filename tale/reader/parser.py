"""
  TALE reader: turns a token sequence into expression trees.

- `(` opens a list, read recursively until the matching `)`
- `true` / `false` -> bool
- float literals -> float
- anything else -> Symbol, verbatim

`parse` returns the first expression together with the tokens it did not
consume, so callers can read several top-level forms from one token stream.
"""

from __future__ import annotations

import re
from typing import Iterator, Sequence

from tale import SExpression
from tale.errors import TaleReaderError
from tale.types.symbol import Symbol


FLOAT_RE = re.compile(
    r"[+-]?"
    r"(?:"
    r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"  # 1, 1., 1.5, .5, 1e3, 1.5E-3
    r"|inf|infinity|nan"
    r")",
    re.IGNORECASE | re.ASCII,
)


def parse_atom(token: str) -> SExpression:
    if token == "true":
        return True
    if token == "false":
        return False
    if FLOAT_RE.fullmatch(token):
        return float(token)
    return Symbol(token)


class TokenStream:
    """Cursor over a token list."""

    def __init__(self, tokens: Sequence[str]):
        self.tokens = list(tokens)
        self.pos = 0

    def peek(self) -> str | None:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> str | None:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def remaining(self) -> list[str]:
        return self.tokens[self.pos:]

    def parse_expr(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            raise TaleReaderError("Could not get token from expression")
        if tok == "(":
            return self.read_seq()
        if tok == ")":
            raise TaleReaderError("Unexpected `)`")
        return parse_atom(tok)

    def read_seq(self) -> list[SExpression]:
        """Read list elements up to and including the closing `)`."""
        items: list[SExpression] = []
        while True:
            tok = self.peek()
            if tok is None:
                raise TaleReaderError("Could not find closing `)`")
            if tok == ")":
                self.advance()
                return items
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def parse(tokens: Sequence[str]) -> tuple[SExpression, list[str]]:
    """Read one expression; returns it with the unconsumed tokens."""
    stream = TokenStream(tokens)
    expr = stream.parse_expr()
    return expr, stream.remaining()


def read_seq(tokens: Sequence[str]) -> tuple[list[SExpression], list[str]]:
    """Read the rest of a list whose `(` has already been consumed."""
    stream = TokenStream(tokens)
    items = stream.read_seq()
    return items, stream.remaining()


def parse_all(tokens: Sequence[str]) -> Iterator[SExpression]:
    """Yield every top-level expression in the token sequence, in order."""
    return TokenStream(tokens).parse_all()
