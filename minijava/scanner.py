"""Lexical analysis of MiniJava source text."""

from __future__ import annotations

import string
from collections.abc import Iterator

from .tokens import CompileError, Token, TokenKind

LEXICAL_MESSAGE = "Erro lexico: Token não aceito."
PRINTLN_TAIL = ".out.println"
PRINTLN_LEXEME = "System.out.println"

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset(string.digits)
_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_PART = _IDENT_START | _DIGITS

_SINGLE = {
    ";": TokenKind.SEMICOLON,
    ".": TokenKind.DOT,
    ",": TokenKind.COMMA,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MULT,
    "/": TokenKind.DIV,
    "<": TokenKind.LESSTHAN,
    ">": TokenKind.GREATERTHAN,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}

# Operators that must be written twice.
_DOUBLED = {"&": TokenKind.AND, "|": TokenKind.OR}

# Operators that may be followed by '=': (alone, with '=').
_OPTIONAL_EQ = {
    "=": (TokenKind.ASSIGN, TokenKind.EQUAL),
    "!": (TokenKind.NOT, TokenKind.NOTEQUAL),
}

_KEYWORDS = {
    "boolean": TokenKind.BOOLEAN,
    "class": TokenKind.CLASS,
    "else": TokenKind.ELSE,
    "false": TokenKind.FALSE,
    "true": TokenKind.TRUE,
    "extends": TokenKind.EXTENDS,
    "if": TokenKind.IF,
    "int": TokenKind.INT,
    "length": TokenKind.LENGTH,
    "main": TokenKind.MAIN,
    "new": TokenKind.NEW,
    "public": TokenKind.PUBLIC,
    "return": TokenKind.RETURN,
    "static": TokenKind.STATIC,
    "String": TokenKind.STRING,
    "this": TokenKind.THIS,
    "void": TokenKind.VOID,
    "while": TokenKind.WHILE,
}


class LexicalError(CompileError):
    """Raised when the input holds text that is not a valid token."""


class Scanner:
    """Turns MiniJava source text into tokens, one at a time."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1

    def _peek(self, offset: int = 0) -> str:
        index = self._pos + offset
        return self._source[index] if index < len(self._source) else ""

    def _error(self) -> LexicalError:
        return LexicalError(LEXICAL_MESSAGE, self._line, self._column)

    def _step(self) -> str:
        """Consume one character, keeping line and column up to date."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def _skip_line_comment(self) -> None:
        self._pos += 2
        self._column += 2
        while self._peek() not in ("", "\n"):
            self._step()
        if self._peek() == "\n":
            self._step()

    def _skip_block_comment(self) -> None:
        self._pos += 2
        self._column += 2
        while self._pos + 1 < len(self._source):
            if self._peek() == "*" and self._peek(1) == "/":
                self._pos += 2
                self._column += 2
                return
            self._step()
        raise self._error()

    def _skip_trivia(self) -> None:
        while True:
            ch = self._peek()
            if ch in _WHITESPACE and ch:
                self._step()
            elif ch == "/" and self._peek(1) == "/":
                self._skip_line_comment()
            elif ch == "/" and self._peek(1) == "*":
                self._skip_block_comment()
            else:
                return

    def _read_while(self, allowed: frozenset[str]) -> str:
        start = self._pos
        while self._peek() and self._peek() in allowed:
            self._pos += 1
            self._column += 1
        return self._source[start:self._pos]

    def _word(self) -> Token:
        lexeme = self._read_while(_IDENT_PART)
        if lexeme == "System" and self._source.startswith(PRINTLN_TAIL, self._pos):
            self._pos += len(PRINTLN_TAIL)
            token = Token(
                TokenKind.SYSTEM_OUT_PRINTLN, PRINTLN_LEXEME, self._line, self._column
            )
            self._column += len(PRINTLN_TAIL)
            return token
        keyword = _KEYWORDS.get(lexeme)
        if keyword is not None:
            return Token(keyword, "", self._line, self._column)
        return Token(TokenKind.ID, lexeme, self._line, self._column)

    def next_token(self) -> Token:
        """Return the next token; END_OF_FILE once the input is used up."""
        self._skip_trivia()
        ch = self._peek()
        if not ch:
            return Token(TokenKind.END_OF_FILE, "", self._line, self._column)

        kind = _SINGLE.get(ch)
        if kind is not None:
            self._pos += 1
            token = Token(kind, "", self._line, self._column)
            self._column += 1
            return token

        if ch in _DOUBLED:
            self._pos += 1
            self._column += 1
            if self._peek() != ch:
                raise self._error()
            self._pos += 1
            token = Token(_DOUBLED[ch], "", self._line, self._column)
            self._column += 1
            return token

        if ch in _OPTIONAL_EQ:
            alone, with_eq = _OPTIONAL_EQ[ch]
            self._pos += 1
            self._column += 1
            if self._peek() == "=":
                self._pos += 1
                token = Token(with_eq, "", self._line, self._column)
                self._column += 1
                return token
            return Token(alone, "", self._line, self._column)

        if ch in _IDENT_START:
            return self._word()

        if ch in _DIGITS:
            lexeme = self._read_while(_DIGITS)
            return Token(TokenKind.NUMBER, lexeme, self._line, self._column)

        raise self._error()

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including END_OF_FILE."""
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.END_OF_FILE:
                return


def tokenize(source: str) -> list[Token]:
    """Scan the whole source, returning every token including END_OF_FILE."""
    return list(Scanner(source))