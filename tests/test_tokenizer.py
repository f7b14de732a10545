import pytest

from assignlang.tokenizer import Token, TokenType, tokenize, untokenize


@pytest.mark.parametrize(
    "line, expected_tokens",
    [
        pytest.param(
            "x = 001;",
            [
                Token(TokenType.IDENTIFIER, "x"),
                Token(TokenType.EQUAL, "="),
                Token(TokenType.NUMBER, "001"),
                Token(TokenType.EXPR_END, ";"),
            ],
        ),
        pytest.param(
            "z = ---(x+y);",
            [
                Token(TokenType.IDENTIFIER, "z"),
                Token(TokenType.EQUAL, "="),
                Token(TokenType.TRIPLE_MINUS, "---"),
                Token(TokenType.BRACKET_OPEN, "("),
                Token(TokenType.IDENTIFIER, "x"),
                Token(TokenType.PLUS, "+"),
                Token(TokenType.IDENTIFIER, "y"),
                Token(TokenType.BRACKET_CLOSE, ")"),
                Token(TokenType.EXPR_END, ";"),
            ],
        ),
        pytest.param(
            "a----b",
            [
                Token(TokenType.IDENTIFIER, "a"),
                Token(TokenType.TRIPLE_MINUS, "---"),
                Token(TokenType.MINUS, "-"),
                Token(TokenType.IDENTIFIER, "b"),
            ],
        ),
        pytest.param(
            "--5",
            [Token(TokenType.MINUS, "-"), Token(TokenType.MINUS, "-"), Token(TokenType.NUMBER, "5")],
        ),
        pytest.param(
            "+++5",
            [Token(TokenType.DOUBLE_PLUS, "++"), Token(TokenType.PLUS, "+"), Token(TokenType.NUMBER, "5")],
        ),
        pytest.param("x_2", [Token(TokenType.IDENTIFIER, "x_2")]),
        pytest.param("_a1", [Token(TokenType.IDENTIFIER, "_a1")]),
        pytest.param("2x", [Token(TokenType.NUMBER, "2"), Token(TokenType.IDENTIFIER, "x")]),
        pytest.param(
            "12  *\t3 / 4",
            [
                Token(TokenType.NUMBER, "12"),
                Token(TokenType.STAR, "*"),
                Token(TokenType.NUMBER, "3"),
                Token(TokenType.SLASH, "/"),
                Token(TokenType.NUMBER, "4"),
            ],
        ),
        pytest.param(
            "a ? b",
            [Token(TokenType.IDENTIFIER, "a"), Token(TokenType.OTHER, "?"), Token(TokenType.IDENTIFIER, "b")],
        ),
        pytest.param("", []),
        pytest.param("   \t", []),
    ],
)
def test_tokenize(line: str, expected_tokens: list[Token]) -> None:
    assert tokenize(line) == expected_tokens


def test_tokens_carry_no_whitespace() -> None:
    assert [t.lexeme for t in tokenize("  foo   =  bar ;  ")] == ["foo", "=", "bar", ";"]


def test_untokenize() -> None:
    assert untokenize(tokenize("z=---( x + y ) ;")) == "z = --- (x + y);"
