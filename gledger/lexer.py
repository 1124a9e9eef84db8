"""Tokenizer for ledger journal text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import IO, Iterator

_NUL = "\0"
_CHUNK_SIZE = 4096


class TokenType(IntEnum):
    """Kind of a lexical token."""

    EOF = 0
    NEWLINE = 1
    WHITESPACE = 2
    DATE = 3
    STATUS = 4
    CODE = 5
    DESCRIPTION = 6
    ACCOUNT = 7
    AMOUNT = 8
    COMMODITY = 9
    COMMENT = 10
    INDENT = 11
    EQUAL = 12
    DOUBLE_EQUAL = 13
    AT = 14
    DOUBLE_AT = 15
    SEMICOLON = 16
    COLON = 17
    MINUS = 18
    PLUS = 19
    NUMBER = 20
    STRING = 21


@dataclass(frozen=True)
class Token:
    """A token with its text and the position where it starts."""

    type: TokenType
    value: str
    line: int
    column: int


def _characters(stream: IO[str]) -> Iterator[str]:
    while chunk := stream.read(_CHUNK_SIZE):
        yield from chunk


def _is_space(char: str) -> bool:
    return char != _NUL and char.isspace()


def _is_digit(char: str) -> bool:
    return char.isdecimal()


class Lexer:
    """Splits journal text read from a stream into tokens."""

    def __init__(self, stream: IO[str]) -> None:
        self._chars = _characters(stream)
        self._line = 1
        self._column = 0
        self._current = _NUL
        self._peek = _NUL
        self._at_eof = False
        self._advance()
        self._advance()

    def _advance(self) -> None:
        if self._at_eof:
            return
        self._current = self._peek
        following = next(self._chars, None)
        if following is None:
            self._peek = _NUL
            if self._current == _NUL:
                self._at_eof = True
        else:
            self._peek = following
        self._column += 1

    def _token(self, token_type: TokenType, value: str, line: int, column: int) -> Token:
        return Token(token_type, value, line, column)

    def next_token(self) -> Token:
        """Return the next token; at the end of input an EOF token, repeatedly."""
        while _is_space(self._current) and self._current != "\n":
            self._advance()

        if self._at_eof:
            return Token(TokenType.EOF, "", self._line, self._column)

        line, column = self._line, self._column
        current = self._current

        if current == "\n":
            self._advance()
            self._line += 1
            self._column = 0
            return Token(TokenType.NEWLINE, "\n", line, column)

        if current == ";":
            return self._read_comment()

        if _is_digit(current):
            return self._read_date()

        if current == "-":
            return self._read_amount()

        if current in "*!?":
            self._advance()
            return Token(TokenType.STATUS, current, line, column)

        if current == "=":
            self._advance()
            if self._current == "=":
                self._advance()
                return Token(TokenType.DOUBLE_EQUAL, "==", line, column)
            return Token(TokenType.EQUAL, "=", line, column)

        if current == "@":
            self._advance()
            if self._current == "@":
                self._advance()
                return Token(TokenType.DOUBLE_AT, "@@", line, column)
            return Token(TokenType.AT, "@", line, column)

        return self._read_text()

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, the EOF token."""
        while True:
            token = self.next_token()
            if token.type is TokenType.EOF:
                return
            yield token

    def _read_date(self) -> Token:
        line, column = self._line, self._column
        chars: list[str] = []
        while _is_digit(self._current) or self._current in ("-", "/"):
            chars.append(self._current)
            self._advance()
        text = "".join(chars)
        if len(text) == 10 and text[4] in "-/" and text[7] in "-/":
            return Token(TokenType.DATE, text, line, column)
        return Token(TokenType.STRING, text, line, column)

    def _read_amount(self) -> Token:
        line, column = self._line, self._column
        chars: list[str] = []
        if self._current == "-":
            chars.append(self._current)
            self._advance()
        while _is_digit(self._current) or self._current == ",":
            if self._current != ",":
                chars.append(self._current)
            self._advance()
        if self._current == ".":
            chars.append(self._current)
            self._advance()
            while _is_digit(self._current):
                chars.append(self._current)
                self._advance()
        return Token(TokenType.AMOUNT, "".join(chars), line, column)

    def _read_comment(self) -> Token:
        line, column = self._line, self._column
        self._advance()
        chars: list[str] = []
        while self._current != "\n" and not self._at_eof:
            chars.append(self._current)
            self._advance()
        return Token(TokenType.COMMENT, "".join(chars).strip(), line, column)

    def _read_text(self) -> Token:
        line, column = self._line, self._column
        chars: list[str] = []
        while not self._at_eof and self._current not in ("\n", ";", "=", "@"):
            chars.append(self._current)
            self._advance()
            if self._current == " " and self._peek == " ":
                break
        value = "".join(chars).strip()
        if ":" in value:
            return Token(TokenType.ACCOUNT, value, line, column)
        return Token(TokenType.STRING, value, line, column)


_TYPE_NAMES = {
    TokenType.EOF: "EOF",
    TokenType.NEWLINE: "Newline",
    TokenType.WHITESPACE: "Whitespace",
    TokenType.DATE: "Date",
    TokenType.STATUS: "Status",
    TokenType.CODE: "Code",
    TokenType.DESCRIPTION: "Description",
    TokenType.ACCOUNT: "Account",
    TokenType.AMOUNT: "Amount",
    TokenType.COMMODITY: "Commodity",
    TokenType.COMMENT: "Comment",
}


def token_type_name(token_type: int) -> str:
    """A readable name for a token type, or ``Unknown(n)`` for the rest."""
    try:
        return _TYPE_NAMES[TokenType(token_type)]
    except (ValueError, KeyError):
        return f"Unknown({int(token_type)})"