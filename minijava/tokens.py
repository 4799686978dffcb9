"""Token kinds, tokens and the error type shared by the scanner and parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

ERROR_PREFIX = "parser_error.minijava"
UNKNOWN_TOKEN = "Token Desconhecido"


class TokenKind(IntEnum):
    """Every kind of token the scanner can produce."""

    UNDEF = 0
    ID = 1

    PLUS = 2
    MINUS = 3
    MULT = 4
    DIV = 5

    AND = 6
    OR = 7
    EQUAL = 8
    ASSIGN = 9
    NOTEQUAL = 10
    NOT = 11
    LESSTHAN = 12
    GREATERTHAN = 13

    SEMICOLON = 14
    DOT = 15
    COMMA = 16

    LBRACKET = 17
    RBRACKET = 18
    LBRACE = 19
    RBRACE = 20
    LPAREN = 21
    RPAREN = 22

    NUMBER = 23
    FALSE = 24
    TRUE = 25

    BOOLEAN = 26
    CLASS = 27
    ELSE = 28
    EXTENDS = 29
    IF = 30
    INT = 31
    LENGTH = 32
    MAIN = 33
    NEW = 34
    PUBLIC = 35
    RETURN = 36
    STATIC = 37
    STRING = 38
    THIS = 39
    VOID = 40
    WHILE = 41
    SYSTEM_OUT_PRINTLN = 42

    END_OF_FILE = 43

    def describe(self) -> str:
        """Human-readable name used in syntax error messages."""
        return _DESCRIPTIONS.get(self, UNKNOWN_TOKEN)


_DESCRIPTIONS: dict[TokenKind, str] = {
    TokenKind.ID: "ID",
    TokenKind.PLUS: "PLUS ('+')",
    TokenKind.MINUS: "MINUS ('-')",
    TokenKind.MULT: "MULT ('*')",
    TokenKind.DIV: "DIV ('/')",
    TokenKind.AND: "AND ('&&')",
    TokenKind.OR: "OR ('||')",
    TokenKind.EQUAL: "EQUAL ('==')",
    TokenKind.ASSIGN: "ASSING ('=')",
    TokenKind.NOTEQUAL: "NOTEQUAL ('!=')",
    TokenKind.NOT: "NOT ('!')",
    TokenKind.LESSTHAN: "LESSTHAN ('<')",
    TokenKind.GREATERTHAN: "GREATERTHAN ('>')",
    TokenKind.SEMICOLON: "SEMICOLON (';')",
    TokenKind.DOT: "DOT ('.')",
    TokenKind.COMMA: "COMMA (',')",
    TokenKind.LBRACKET: "LBRACKET ('[')",
    TokenKind.RBRACKET: "RBRACKET (']')",
    TokenKind.LBRACE: "LBRACE ('{')",
    TokenKind.RBRACE: "RBRACE ('}')",
    TokenKind.LPAREN: "LPAREN ('(')",
    TokenKind.RPAREN: "RPAREN (')')",
    TokenKind.NUMBER: "NUMBER",
    TokenKind.FALSE: "FALSE",
    TokenKind.TRUE: "TRUE",
    TokenKind.BOOLEAN: "BOOLEAN",
    TokenKind.CLASS: "CLASS",
    TokenKind.ELSE: "ELSE",
    TokenKind.EXTENDS: "EXTENDS",
    TokenKind.IF: "IF",
    TokenKind.INT: "INT",
    TokenKind.LENGTH: "LENGTH",
    TokenKind.MAIN: "MAIN",
    TokenKind.NEW: "NEW",
    TokenKind.PUBLIC: "PUBLIC",
    TokenKind.RETURN: "RETURN",
    TokenKind.STATIC: "STATIC",
    TokenKind.STRING: "STRING",
    TokenKind.THIS: "THIS",
    TokenKind.VOID: "VOID",
    TokenKind.WHILE: "WHILE",
    TokenKind.SYSTEM_OUT_PRINTLN: "System.out.println",
}


@dataclass(frozen=True)
class Token:
    """A token with its kind, text and source position."""

    kind: TokenKind
    lexeme: str = ""
    line: int = 0
    column: int = 0


class CompileError(Exception):
    """An error found while compiling, tied to a line and column."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return f"{ERROR_PREFIX}:{self.line}:{self.column}: erro: {self.message}"