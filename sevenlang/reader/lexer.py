"""
  Lexer for SevenLang source text.

- Streaming: characters are pulled one at a time from a str or a text stream
- Lazy: `Lexer.tokens()` is a generator, so a source can be walked only once
- Whitespace produces nothing, comments are yielded as COMMENT tokens
- Every token sequence ends with exactly one END_OF_STREAM token

    (+ 1.1 2) ; note  ->  ( + 1.1 2 ) "note" <EOF>
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, TextIO

from sevenlang.config import strict_strings
from sevenlang.errors import LexError
from sevenlang.types.numbers import format_number

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \r\n\t")
DIGITS = frozenset("0123456789")
NUMBER_CHARS = DIGITS | {"."}
SYMBOL_CHARS = frozenset("+-*/=!<>")


class TokenType(Enum):
    LEFT_BRACKET = "lparen"
    RIGHT_BRACKET = "rparen"
    IDENTIFIER = "identifier"
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING = "string"
    COMMENT = "comment"
    END_OF_STREAM = "eof"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: float | bool | str | None = None

    @property
    def text(self) -> str:
        """Canonical rendering, used for dispatch in the parser and for comparisons in tests."""
        match self.type:
            case TokenType.LEFT_BRACKET:
                return "("
            case TokenType.RIGHT_BRACKET:
                return ")"
            case TokenType.NUMBER:
                return format_number(self.value)
            case TokenType.BOOLEAN:
                return "#t" if self.value else "#f"
            case TokenType.END_OF_STREAM:
                return "<EOF>"
            case _:
                return self.value

    def __str__(self) -> str:
        return self.text


LEFT_BRACKET = Token(TokenType.LEFT_BRACKET)
RIGHT_BRACKET = Token(TokenType.RIGHT_BRACKET)
EOF = Token(TokenType.END_OF_STREAM)


def is_identifier_char(ch: str) -> bool:
    return ch != "" and (ch.isalnum() or ch in SYMBOL_CHARS)


class _CharReader:
    """One character of lookahead over a text stream. Returns '' at end of input."""

    __slots__ = ("_stream", "_peeked", "pos")

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._peeked: str | None = None
        self.pos = 0

    def peek(self) -> str:
        if self._peeked is None:
            self._peeked = self._stream.read(1)
        return self._peeked

    def read(self) -> str:
        ch = self.peek()
        self._peeked = None
        if ch:
            self.pos += 1
        return ch

    def read_while(self, pred) -> str:
        chars = []
        while pred(self.peek()):
            chars.append(self.read())
        return "".join(chars)

    def read_line(self) -> str:
        line = self.read_while(lambda ch: ch not in ("", "\n"))
        self.read()  # the newline itself, if any
        return line.rstrip("\r")


class Lexer:
    """Turns a character source into tokens.

    Accepts either a string or an open text stream. The lexer closes the
    stream when used as a context manager.
    """

    def __init__(self, source: str | TextIO):
        self._stream: TextIO = io.StringIO(source) if isinstance(source, str) else source
        self._reader = _CharReader(self._stream)

    def __enter__(self) -> Lexer:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._stream.close()

    def tokens(self) -> Iterator[Token]:
        reader = self._reader
        while (ch := reader.peek()) != "":
            if ch in WHITESPACE:
                reader.read()
            elif ch in DIGITS:
                yield self._read_number()
            elif ch == "#":
                yield self._read_boolean()
            elif ch == '"':
                yield self._read_string()
            elif ch == "(":
                reader.read()
                yield LEFT_BRACKET
            elif ch == ")":
                reader.read()
                yield RIGHT_BRACKET
            elif ch == ";":
                reader.read()
                yield Token(TokenType.COMMENT, reader.read_line())
            else:
                yield self._read_identifier()
        yield EOF

    def _read_number(self) -> Token:
        start = self._reader.pos
        text = self._reader.read_while(lambda ch: ch in NUMBER_CHARS)
        try:
            return Token(TokenType.NUMBER, float(text))
        except ValueError:
            raise LexError(f"Malformed number at {start}: {text!r}")

    def _read_boolean(self) -> Token:
        start = self._reader.pos
        self._reader.read()  # '#'
        ch = self._reader.read()
        if ch == "t":
            return Token(TokenType.BOOLEAN, True)
        if ch == "f":
            return Token(TokenType.BOOLEAN, False)
        if ch == "":
            raise LexError(f"Unexpected end of input after '#' at {start}")
        raise LexError(f"Unexpected char after '#' at {start}: {ch!r}")

    def _read_string(self) -> Token:
        start = self._reader.pos
        self._reader.read()  # opening quote
        literal = self._reader.read_while(lambda ch: ch not in ("", '"'))
        if self._reader.read() == "":
            if strict_strings():
                raise LexError(f"Unterminated string starting at {start}")
            logger.warning(f"Unterminated string starting at {start}, read to end of input")
        return Token(TokenType.STRING, literal)

    def _read_identifier(self) -> Token:
        identifier = self._reader.read_while(is_identifier_char)
        if not identifier:
            raise LexError(f"Unexpected char at {self._reader.pos}: {self._reader.peek()!r}")
        return Token(TokenType.IDENTIFIER, identifier)


def tokenize(source: str | TextIO) -> Iterator[Token]:
    """Token generator over `source`, ending with EOF."""
    return Lexer(source).tokens()
