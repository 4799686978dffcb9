"""Recursive-descent syntax checker for MiniJava programs."""

from __future__ import annotations

from .scanner import Scanner
from .tokens import CompileError, Token, TokenKind

K = TokenKind

_TYPE_START = (K.INT, K.BOOLEAN, K.ID)
_STATEMENT_START = (K.LBRACE, K.IF, K.WHILE, K.ID, K.SYSTEM_OUT_PRINTLN)
_COMPARISONS = (K.LESSTHAN, K.GREATERTHAN, K.EQUAL, K.NOTEQUAL)


class ParseError(CompileError):
    """Raised when the token stream does not follow the MiniJava grammar."""


class Parser:
    """Checks that the tokens from a scanner form a valid MiniJava program."""

    def __init__(self, scanner: Scanner) -> None:
        self._scanner = scanner
        self._token = scanner.next_token()

    def run(self) -> Token:
        """Parse a whole program; return the END_OF_FILE token it ends on."""
        return self._program()

    # Helpers

    def _at(self, *kinds: TokenKind) -> bool:
        return self._token.kind in kinds

    def _advance(self) -> Token:
        current = self._token
        self._token = self._scanner.next_token()
        return current

    def _match(self, kind: TokenKind) -> Token:
        if self._token.kind == kind:
            return self._advance()
        raise self._error(
            f"Erro de sintaxe: Esperado {kind.describe()}, "
            f"encontrado {self._token.kind.describe()}."
        )

    def _match_all(self, *kinds: TokenKind) -> None:
        for kind in kinds:
            self._match(kind)

    def _error(self, message: str) -> ParseError:
        return ParseError(message, self._token.line, self._token.column)

    # Program structure

    def _program(self) -> Token:
        self._main_class()
        while self._at(K.CLASS):
            self._class_declaration()
        return self._match(K.END_OF_FILE)

    def _main_class(self) -> None:
        self._match_all(
            K.CLASS, K.ID, K.LBRACE, K.PUBLIC, K.STATIC, K.VOID, K.MAIN,
            K.LPAREN, K.STRING, K.LBRACKET, K.RBRACKET, K.ID, K.RPAREN,
            K.LBRACE,
        )
        self._statement()
        self._match_all(K.RBRACE, K.RBRACE)

    def _class_declaration(self) -> None:
        self._match_all(K.CLASS, K.ID)
        if self._at(K.EXTENDS):
            self._advance()
            self._match(K.ID)
        self._match(K.LBRACE)
        self._variable_declarations()
        while self._at(K.PUBLIC):
            self._method_declaration()
        self._match(K.RBRACE)

    def _variable_declarations(self) -> None:
        while self._at(*_TYPE_START):
            self._type()
            self._match_all(K.ID, K.SEMICOLON)

    def _method_declaration(self) -> None:
        self._match(K.PUBLIC)
        self._type()
        self._match_all(K.ID, K.LPAREN)
        if self._at(*_TYPE_START):
            self._params()
        self._match_all(K.RPAREN, K.LBRACE)
        self._variable_declarations()
        self._statements()
        self._match(K.RETURN)
        self._expression()
        self._match_all(K.SEMICOLON, K.RBRACE)

    def _params(self) -> None:
        self._type()
        self._match(K.ID)
        while self._at(K.COMMA):
            self._advance()
            self._type()
            self._match(K.ID)

    def _type(self) -> None:
        if self._at(K.INT):
            self._advance()
            if self._at(K.LBRACKET):
                self._advance()
                self._match(K.RBRACKET)
        elif self._at(K.BOOLEAN, K.ID):
            self._advance()
        else:
            raise self._error(
                "Erro de tipo: Esperado 'int', 'boolean' ou 'ID', "
                f"encontrado '{self._token.lexeme}'."
            )

    # Statements

    def _statements(self) -> None:
        while self._at(*_STATEMENT_START):
            self._statement()

    def _statement(self) -> None:
        if self._at(K.LBRACE):
            self._advance()
            self._statements()
            self._match(K.RBRACE)
        elif self._at(K.IF):
            self._advance()
            self._parenthesized()
            self._statement()
            self._match(K.ELSE)
            self._statement()
        elif self._at(K.WHILE):
            self._advance()
            self._parenthesized()
            self._statement()
        elif self._at(K.SYSTEM_OUT_PRINTLN):
            self._advance()
            self._parenthesized()
            self._match(K.SEMICOLON)
        elif self._at(K.ID):
            self._advance()
            self._identifier_statement()
        else:
            raise self._error(
                f"Erro de sintaxe: Token inesperado '{self._token.lexeme}' no inicio "
                "de uma instrução. Esperado: '{', 'if', 'while', "
                "'System.out.println' ou 'ID'."
            )

    def _identifier_statement(self) -> None:
        if self._at(K.ASSIGN):
            self._advance()
            self._expression()
            self._match(K.SEMICOLON)
        elif self._at(K.LBRACKET):
            self._advance()
            self._expression()
            self._match_all(K.RBRACKET, K.ASSIGN)
            self._expression()
            self._match(K.SEMICOLON)
        elif self._at(K.LPAREN):
            self._call_arguments()
            self._match(K.SEMICOLON)
        else:
            lexeme = self._token.lexeme
            raise self._error(
                f"Erro de sintaxe: Após o identificador '{lexeme}'era esperado "
                f"'=', '[' ou '('. Encontrado: '{lexeme}'."
            )

    def _parenthesized(self) -> None:
        self._match(K.LPAREN)
        self._expression()
        self._match(K.RPAREN)

    def _call_arguments(self) -> None:
        self._match(K.LPAREN)
        if not self._at(K.RPAREN):
            self._expression()
            while self._at(K.COMMA):
                self._advance()
                self._expression()
        self._match(K.RPAREN)

    # Expressions, lowest precedence first

    def _expression(self) -> None:
        self._and_expression()
        while self._at(K.OR):
            self._advance()
            self._and_expression()

    def _and_expression(self) -> None:
        self._comparison()
        while self._at(K.AND):
            self._advance()
            self._comparison()

    def _comparison(self) -> None:
        self._additive()
        if self._at(*_COMPARISONS):
            self._advance()
            self._additive()

    def _additive(self) -> None:
        self._multiplicative()
        while self._at(K.PLUS, K.MINUS):
            self._advance()
            self._multiplicative()

    def _multiplicative(self) -> None:
        self._unary()
        while self._at(K.MULT, K.DIV):
            self._advance()
            self._unary()

    def _unary(self) -> None:
        while self._at(K.NOT):
            self._advance()
        self._postfix()

    def _postfix(self) -> None:
        self._primary()
        while self._at(K.DOT, K.LBRACKET):
            if self._at(K.DOT):
                self._advance()
                if self._at(K.LENGTH):
                    self._advance()
                elif self._at(K.ID):
                    self._advance()
                    self._call_arguments()
                else:
                    raise self._error("Esperado 'length' ou ID após o '.'")
            else:
                self._advance()
                self._expression()
                self._match(K.RBRACKET)

    def _primary(self) -> None:
        if self._at(K.NUMBER, K.TRUE, K.FALSE, K.ID, K.THIS):
            self._advance()
        elif self._at(K.NEW):
            self._advance()
            if self._at(K.INT):
                self._advance()
                self._match(K.LBRACKET)
                self._expression()
                self._match(K.RBRACKET)
            elif self._at(K.ID):
                self._advance()
                self._match_all(K.LPAREN, K.RPAREN)
            else:
                raise self._error(
                    "Erro de expressão: Após 'new' era esperado 'int ou 'ID' "
                    f"Encontrou: '{self._token.lexeme}'."
                )
        elif self._at(K.LPAREN):
            self._parenthesized()
        else:
            raise self._error(
                "Erro de expressão: Era esperado um literal. "
                f"Encontrou: '{self._token.lexeme}'."
            )


def parse(source: str) -> Token:
    """Check a whole MiniJava program, raising on the first error."""
    return Parser(Scanner(source)).run()