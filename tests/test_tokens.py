import pytest

from minijava.tokens import CompileError, Token, TokenKind


@pytest.mark.parametrize(
    "kind, text",
    [
        (TokenKind.PLUS, "PLUS ('+')"),
        (TokenKind.ASSIGN, "ASSING ('=')"),
        (TokenKind.NOTEQUAL, "NOTEQUAL ('!=')"),
        (TokenKind.LBRACE, "LBRACE ('{')"),
        (TokenKind.ID, "ID"),
        (TokenKind.WHILE, "WHILE"),
        (TokenKind.SYSTEM_OUT_PRINTLN, "System.out.println"),
    ],
)
def test_describe_known_kinds(kind, text):
    assert kind.describe() == text


@pytest.mark.parametrize("kind", [TokenKind.UNDEF, TokenKind.END_OF_FILE])
def test_describe_unknown_kinds(kind):
    assert kind.describe() == "Token Desconhecido"


def test_every_other_kind_has_its_own_description():
    unknown = (TokenKind.UNDEF, TokenKind.END_OF_FILE)
    descriptions = [
        TokenKind.describe(kind) for kind in TokenKind if kind not in unknown
    ]
    assert "Token Desconhecido" not in descriptions
    assert len(set(descriptions)) == len(descriptions)
    assert len(descriptions) == len(TokenKind) - 2
    assert TokenKind.describe(TokenKind.DOT) == "DOT ('.')"


def test_kinds_are_in_declaration_order():
    kinds = list(TokenKind)
    assert kinds[0] is TokenKind.UNDEF
    assert kinds[-1] is TokenKind.END_OF_FILE
    assert [k.value for k in kinds] == list(range(len(kinds)))
    assert TokenKind(27).describe() == "CLASS"
    assert TokenKind(42).describe() == "System.out.println"
    assert TokenKind(9).describe() == "ASSING ('=')"


def test_token_defaults_and_equality():
    token = Token(TokenKind.ID)
    assert token.lexeme == ""
    assert token == Token(TokenKind.ID, "", 0, 0)
    assert Token(TokenKind.ID, "a", 2, 3) != Token(TokenKind.ID, "b", 2, 3)


def test_compile_error_formats_position():
    err = CompileError("mensagem", 3, 7)
    assert str(err) == "parser_error.minijava:3:7: erro: mensagem"
    assert (err.message, err.line, err.column) == ("mensagem", 3, 7)


def test_compile_error_is_an_exception_with_its_message():
    err = CompileError("falha", 1, 2)
    assert isinstance(err, Exception)
    assert err.message == "falha"
    assert str(err) == "parser_error.minijava:1:2: erro: falha"