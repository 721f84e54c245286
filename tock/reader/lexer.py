"""
  Tock Lexer

- Streaming: `lex` yields tokens lazily, `tokenize` collects them.
- Token kinds:

    - lparen / rparen  -> ( )
    - quote            -> '
    - number           -> optional sign, digits, optional fraction
    - string           -> "raw text", no escape processing
    - identifier       -> any other run up to whitespace or a parenthesis
    - keyword          -> identifier spelled as one of KEYWORDS

  `<`, `>`, `!` and `=` only ever pair with a following `=`; on their own they
  are one-character identifiers, so `<x` reads as `<` then `x`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from tock.errors import LexError


class TokenKind(Enum):
    LEFT_PAREN = "lparen"
    RIGHT_PAREN = "rparen"
    QUOTE = "quote"
    NUMBER = "number"
    STRING = "string"
    IDENTIFIER = "identifier"
    KEYWORD = "keyword"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    pos: int


KEYWORDS = frozenset(
    ("def", "if", "else", "while", "return", "func", "var", "let", "const", "set")
)

COMPARISON_CHARS = "<>!="
IDENTIFIER_START_CHARS = "_+-*/%&|?.:@$^~#"

NUMBER_RE = re.compile(r"[+-]?\d+(?:\.\d+)?")
IDENTIFIER_RE = re.compile(r"[^\s()]+")
WHITESPACE_RE = re.compile(r"\s+")
COMMENT_RE = re.compile(r";[^\n]*")


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token objects in source order."""
    pos = 0
    n = len(source)

    while pos < n:
        ch = source[pos]

        # ----------------------
        # Whitespace and comments
        # ----------------------
        if ch.isspace():
            pos = WHITESPACE_RE.match(source, pos).end()
            continue
        if ch == ";":
            pos = COMMENT_RE.match(source, pos).end()
            continue

        # ----------------------
        # Single-character tokens
        # ----------------------
        if ch == "(":
            yield Token(TokenKind.LEFT_PAREN, ch, pos)
            pos += 1
            continue
        if ch == ")":
            yield Token(TokenKind.RIGHT_PAREN, ch, pos)
            pos += 1
            continue
        if ch == "'":
            yield Token(TokenKind.QUOTE, ch, pos)
            pos += 1
            continue

        # ----------------------
        # Numbers, including a sign glued to the digits
        # ----------------------
        m = NUMBER_RE.match(source, pos)
        if m:
            yield Token(TokenKind.NUMBER, m.group(), pos)
            pos = m.end()
            continue

        # ----------------------
        # Comparison operators: <, <=, >, >=, !, !=, =, ==
        # ----------------------
        if ch in COMPARISON_CHARS:
            width = 2 if source.startswith("=", pos + 1) else 1
            yield Token(TokenKind.IDENTIFIER, source[pos:pos + width], pos)
            pos += width
            continue

        # ----------------------
        # Strings
        # ----------------------
        if ch == '"':
            end = source.find('"', pos + 1)
            if end == -1:
                raise LexError("Unterminated string literal", pos)
            yield Token(TokenKind.STRING, source[pos + 1:end], pos)
            pos = end + 1
            continue

        # ----------------------
        # Identifiers and keywords
        # ----------------------
        if ch.isalpha() or ch in IDENTIFIER_START_CHARS:
            m = IDENTIFIER_RE.match(source, pos)
            text = m.group()
            kind = TokenKind.KEYWORD if text in KEYWORDS else TokenKind.IDENTIFIER
            yield Token(kind, text, pos)
            pos = m.end()
            continue

        raise LexError(f"Unexpected character: {ch!r}", pos)


def tokenize(source: str) -> list[Token]:
    """Tokenize the whole of `source`, raising LexError on the first bad character."""
    return list(lex(source))
