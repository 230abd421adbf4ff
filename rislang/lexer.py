"""Turn program text into a stream of tokens."""

from __future__ import annotations

import unicodedata
from typing import Iterator

from rislang.tokens import Position, Token, TokenType, lookup_identifier

_EOF = "\0"

_DECIMAL = "decimal"
_HEX = "hex"
_BINARY = "binary"

_SINGLE = {
    ";": TokenType.SEMICOLON,
    "?": TokenType.QUESTION,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    ".": TokenType.PERIOD,
    "%": TokenType.MOD,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "\n": TokenType.NEWLINE,
}

# character -> (((next character, type), ...), type when no follower matches)
_COMPOUND = {
    "&": ((("&", TokenType.AND),), None),
    "|": ((("|", TokenType.OR),), TokenType.PIPE),
    "=": ((("=", TokenType.EQ),), TokenType.ASSIGN),
    "+": ((("+", TokenType.PLUS_PLUS), ("=", TokenType.PLUS_EQUALS)), TokenType.PLUS),
    "-": ((("-", TokenType.MINUS_MINUS), ("=", TokenType.MINUS_EQUALS)), TokenType.MINUS),
    "/": ((("=", TokenType.SLASH_EQUALS),), TokenType.SLASH),
    "*": ((("*", TokenType.POW), ("=", TokenType.ASTERISK_EQUALS)), TokenType.ASTERISK),
    "<": ((("<", TokenType.LT_LT), ("=", TokenType.LT_EQUALS)), TokenType.LT),
    ">": (((">", TokenType.GT_GT), ("=", TokenType.GT_EQUALS)), TokenType.GT),
    "!": ((("=", TokenType.NOT_EQ),), TokenType.BANG),
    ":": ((("=", TokenType.DECLARE),), TokenType.COLON),
    "\r": ((("\n", TokenType.NEWLINE),), TokenType.NEWLINE),
}

_QUOTES = {
    "'": TokenType.FSTRING,
    '"': TokenType.STRING,
}

_ESCAPES = {"n": "\n", "r": "\r", "t": "\t", "\\": "\\"}


class LexerError(Exception):
    """Raised when the input cannot be tokenized.

    ``token`` holds the partial token where one was produced (for example an
    unterminated string literal).
    """

    def __init__(self, message: str, token: Token | None = None) -> None:
        super().__init__(message)
        self.token = token


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_identifier(ch: str) -> bool:
    category = unicodedata.category(ch)
    return category.startswith("L") or category == "Nd" or ch == "_"


def _is_letter_or_number(ch: str) -> bool:
    category = unicodedata.category(ch)
    return category.startswith("L") or category.startswith("N")


def _quote_char(ch: str) -> str:
    if ch in ("'", "\\"):
        return f"'\\{ch}'"
    if ch.isprintable():
        return f"'{ch}'"
    code = ord(ch)
    if code < 0x80:
        return f"'\\x{code:02x}'"
    if code < 0x10000:
        return f"'\\u{code:04x}'"
    return f"'\\U{code:08x}'"


class Lexer:
    """Reads tokens one at a time from program text."""

    def __init__(self, text: str, file: str = "") -> None:
        self._chars = text
        self._pos = -1
        self._next_pos = 0
        self._ch = _EOF
        self._line = 0
        self._line_start = 0
        self._column = -1
        self._prev_type: TokenType | None = None
        self._start: Position | None = None
        self.file = file
        self._read_char()

    def position(self) -> Position:
        """Return the current read position."""
        return Position(
            value=self._ch,
            char=self._pos,
            line_start=self._line_start,
            line=self._line,
            column=self._column,
            file=self.file,
        )

    def next(self) -> Token:
        """Return the next token; raise LexerError on invalid input."""
        while True:
            self._skip_tabs_and_spaces()
            self._start = self.position()
            if self._ch == "#" or (self._ch == "/" and self._peek() == "/"):
                self._skip_comment()
                continue
            break

        if self._ch == "/" and self._peek() == "*":
            self._skip_multiline_comment()

        if self._prev_type is TokenType.EOF:
            return self._new_token(TokenType.EOF, _EOF)

        ch = self._ch
        if ch in _COMPOUND:
            followers, single = _COMPOUND[ch]
            peek = self._peek()
            for follow, typ in followers:
                if peek == follow:
                    self._read_char()
                    return self._finish(self._new_token(typ, ch + follow))
            if single is None:
                self._read_char()
                raise LexerError(f"unexpected character: {_quote_char(ch)}")
            return self._finish(self._new_token(single, ch))
        if ch in _SINGLE:
            return self._finish(self._new_token(_SINGLE[ch], ch))
        if ch == "~":
            raise LexerError(f"unexpected character: {_quote_char(ch)}")
        if ch in _QUOTES or ch == "`":
            if ch == "`":
                typ = TokenType.BACKTICK
                text, terminated = self._read_backtick()
            else:
                typ = _QUOTES[ch]
                text, terminated = self._read_string(ch)
            tok = self._finish(self._new_token(typ, text))
            if not terminated:
                raise LexerError("unterminated string literal", tok)
            return tok
        if ch == _EOF:
            return self._finish(self._new_token(TokenType.EOF, ""))
        if _is_digit(ch):
            return self._finish(self._read_decimal())
        ident = self._read_identifier()
        return self._finish(self._new_token(lookup_identifier(ident), ident))

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF token."""
        while True:
            tok = self.next()
            yield tok
            if tok.type is TokenType.EOF:
                return

    def get_line_text(self, tok: Token) -> str:
        """Return the text of the line that holds ``tok``, without the newline."""
        chars = self._chars
        if not chars:
            return ""
        start_pos = tok.start
        if start_pos.char < 0 or start_pos.char > len(chars) + 1:
            raise ValueError(
                f"invalid token start position: {start_pos.char} "
                f"token: {tok.type.value!r} input length: {len(chars)}"
            )
        if start_pos.line < 0:
            raise ValueError(f"invalid token start line: {start_pos.line}")
        offset = 1 if tok.type is TokenType.EOF else 0
        start = start_pos.char - offset
        while start > 0 and chars[start - 1] != "\n":
            start -= 1
        end = start_pos.char - offset
        while end < len(chars) and chars[end] != "\n":
            end += 1
        return chars[start:end]

    def _finish(self, tok: Token) -> Token:
        self._read_char()
        self._prev_type = tok.type
        return tok

    def _new_token(self, typ: TokenType, literal: str) -> Token:
        return Token(type=typ, literal=literal, start=self._start, end=self.position())

    def _read_char(self) -> None:
        # Position len(chars) is the EOF position and still valid.
        if self._pos > len(self._chars):
            return
        prev = self._ch
        self._pos = self._next_pos
        self._next_pos += 1
        self._ch = self._chars[self._pos] if self._pos < len(self._chars) else _EOF
        if prev == "\n":
            self._column = 0
            self._line += 1
            self._line_start = self._pos
        else:
            self._column += 1

    def _peek(self) -> str:
        if self._next_pos >= len(self._chars):
            return _EOF
        return self._chars[self._next_pos]

    def _skip_tabs_and_spaces(self) -> None:
        while self._ch in (" ", "\t"):
            self._read_char()

    def _skip_comment(self) -> None:
        while self._ch not in ("\n", _EOF):
            self._read_char()
        self._skip_tabs_and_spaces()

    def _skip_multiline_comment(self) -> None:
        found = False
        while not found:
            if self._ch == _EOF:
                found = True
            if self._ch == "*" and self._peek() == "/":
                found = True
                self._read_char()
            self._read_char()
        self._skip_tabs_and_spaces()

    def _read_identifier(self) -> str:
        if not _is_identifier(self._ch):
            raise LexerError(f"invalid identifier: {self._ch}")
        chars = [self._ch]
        while _is_identifier(self._peek()):
            self._read_char()
            chars.append(self._ch)
        if ord(self._peek()) > 0x7F:
            raise LexerError(f"invalid identifier: {''.join(chars)}{self._peek()}")
        return "".join(chars)

    def _read_number(self) -> tuple[str, str]:
        text = [self._ch]
        accept = "0123456789"
        kind = _DECIMAL
        if self._ch == "0" and self._peek() == "x":
            accept = "0x123456789abcdefABCDEF"
            kind = _HEX
        elif self._ch == "0" and self._peek() == "b":
            accept = "b01"
            kind = _BINARY
        while self._peek() in accept:
            self._read_char()
            text.append(self._ch)
        number = "".join(text)
        trailing = self._peek()
        if _is_letter_or_number(trailing):
            raise LexerError(f"invalid decimal literal: {number}{trailing}")
        return kind, number

    def _read_decimal(self) -> Token:
        kind, integer = self._read_number()
        if self._peek() != ".":
            return self._new_token(TokenType.INT, integer)
        if kind != _DECIMAL:
            raise LexerError(f"invalid decimal literal: {integer}.")
        self._read_char()
        if _is_digit(self._peek()):
            self._read_char()
            kind, fraction = self._read_number()
            if kind != _DECIMAL:
                raise LexerError(f"invalid decimal literal: {integer}.{fraction}")
            return self._new_token(TokenType.FLOAT, f"{integer}.{fraction}")
        raise LexerError(f"invalid decimal literal: {integer}.{self._peek()}")

    def _read_string(self, end: str) -> tuple[str, bool]:
        out = []
        while True:
            if self._peek() in (_EOF, "\n"):
                return "".join(out), False
            self._read_char()
            if self._ch == end:
                return "".join(out), True
            if self._ch == "\\":
                self._read_char()
                # The translated character replaces the current one, so line
                # tracking sees an escaped "\n" as a real newline.
                self._ch = _ESCAPES.get(self._ch, self._ch)
            out.append(self._ch)

    def _read_backtick(self) -> tuple[str, bool]:
        begin = self._pos + 1
        while True:
            if self._peek() == _EOF:
                return "", False
            self._read_char()
            if self._ch == "`":
                return self._chars[begin:self._pos], True


def tokenize(text: str) -> list[Token]:
    """Lex all of ``text`` and return its tokens, ending with EOF."""
    return list(Lexer(text))