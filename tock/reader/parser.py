"""
  Tock Parser

Recursive descent over the token sequence. Emits Python primitives instead of
dedicated node classes:

    - numbers      -> float
    - strings      -> str
    - identifiers  -> Symbol (keywords too)
    - lists        -> Python list
    - 'x           -> [Symbol("quote"), x]

Only structure is checked here; whether a head names a real form or function
is decided at evaluation time.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from tock import SExpression
from tock.errors import ParseError
from tock.reader.lexer import Token, TokenKind, tokenize
from tock.types.symbol import Symbol, QUOTE

logger = logging.getLogger(__name__)


class TokenStream:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens: Iterator[Token] = iter(tokens)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            raise ParseError("Unexpected end of input")

        if tok.kind is TokenKind.QUOTE:
            if self.peek() is None:
                raise ParseError("Quote with no following expression", tok.pos)
            return [QUOTE, self.parse_expr()]

        if tok.kind is TokenKind.NUMBER:
            return float(tok.text)

        if tok.kind is TokenKind.STRING:
            return tok.text

        if tok.kind in (TokenKind.IDENTIFIER, TokenKind.KEYWORD):
            return Symbol(tok.text)

        if tok.kind is TokenKind.LEFT_PAREN:
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise ParseError("Unmatched parenthesis", tok.pos)
                if nxt.kind is TokenKind.RIGHT_PAREN:
                    self.advance()
                    return items
                items.append(self.parse_expr())

        # A right paren only reaches here when parse_expr is called directly on one
        raise ParseError("Unexpected ')'", tok.pos)

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok = self.peek()
            if tok is None:
                break
            if tok.kind is TokenKind.RIGHT_PAREN:
                # Tolerated: a stray closing paren between top-level forms is dropped
                logger.warning("Skipping stray ')' at position %d", tok.pos)
                self.advance()
                continue
            yield self.parse_expr()


def parse(tokens: Iterable[Token]) -> list[SExpression]:
    """Parse a token sequence into the ordered list of top-level forms."""
    return list(TokenStream(tokens).parse_all())


def parse_source(source: str) -> list[SExpression]:
    return parse(tokenize(source))
