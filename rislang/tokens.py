"""Token types, source positions and tokens produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenType(str, Enum):
    """The kinds of token the lexer can produce."""

    EOF = "EOF"
    NEWLINE = "NEWLINE"

    IDENT = "IDENT"
    INT = "INT"
    FLOAT = "FLOAT"
    STRING = "STRING"
    FSTRING = "FSTRING"
    BACKTICK = "BACKTICK"

    ASSIGN = "ASSIGN"
    DECLARE = "DECLARE"
    PLUS = "PLUS"
    PLUS_PLUS = "PLUS_PLUS"
    PLUS_EQUALS = "PLUS_EQUALS"
    MINUS = "MINUS"
    MINUS_MINUS = "MINUS_MINUS"
    MINUS_EQUALS = "MINUS_EQUALS"
    ASTERISK = "ASTERISK"
    ASTERISK_EQUALS = "ASTERISK_EQUALS"
    POW = "POW"
    SLASH = "SLASH"
    SLASH_EQUALS = "SLASH_EQUALS"
    MOD = "MOD"
    BANG = "BANG"
    PIPE = "PIPE"
    AND = "AND"
    OR = "OR"
    LT = "LT"
    LT_LT = "LT_LT"
    LT_EQUALS = "LT_EQUALS"
    GT = "GT"
    GT_GT = "GT_GT"
    GT_EQUALS = "GT_EQUALS"
    EQ = "EQ"
    NOT_EQ = "NOT_EQ"

    SEMICOLON = "SEMICOLON"
    COLON = "COLON"
    COMMA = "COMMA"
    PERIOD = "PERIOD"
    QUESTION = "QUESTION"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    LBRACE = "LBRACE"
    RBRACE = "RBRACE"
    LBRACKET = "LBRACKET"
    RBRACKET = "RBRACKET"

    NIL = "NIL"
    VAR = "VAR"
    FUNC = "FUNC"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"
    TRUE = "TRUE"
    FALSE = "FALSE"
    FOR = "FOR"
    BREAK = "BREAK"
    IMPORT = "IMPORT"
    IN = "IN"


_KEYWORDS = {
    "nil": TokenType.NIL,
    "var": TokenType.VAR,
    "func": TokenType.FUNC,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "break": TokenType.BREAK,
    "import": TokenType.IMPORT,
    "in": TokenType.IN,
}


def lookup_identifier(ident: str) -> TokenType:
    """Return the keyword type for ``ident``, or IDENT if it is not a keyword."""
    return _KEYWORDS.get(ident, TokenType.IDENT)


@dataclass(frozen=True)
class Position:
    """A location in the lexer's input; all fields are zero-indexed."""

    value: str
    char: int
    line_start: int
    line: int
    column: int
    file: str = ""


@dataclass(frozen=True)
class Token:
    """A single lexed token with its start and end positions."""

    type: TokenType
    literal: str
    start: Position
    end: Position