import enum
import re
from dataclasses import dataclass

from assignlang.utils import PrintableEnum


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    IDENTIFIER = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()
    EXPR_END = enum.auto()
    EQUAL = enum.auto()
    TRIPLE_MINUS = enum.auto()
    DOUBLE_PLUS = enum.auto()
    DOUBLE_MINUS = enum.auto()
    OTHER = enum.auto()


@dataclass
class Token:
    type: TokenType
    lexeme: str

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


# order matters: "---" must win over "-", and "-" is tried before "--"
TOKEN_PATTERN = re.compile(r"\s*(---|-|\+\+|--|[A-Za-z_][A-Za-z0-9_]*|\d+|\S)\s*")

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
NUMBER_PATTERN = re.compile(r"\d+")

FIXED_TOKENS = {
    "---": TokenType.TRIPLE_MINUS,
    "++": TokenType.DOUBLE_PLUS,
    "--": TokenType.DOUBLE_MINUS,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
    ";": TokenType.EXPR_END,
    "=": TokenType.EQUAL,
}


def _classify(lexeme: str) -> TokenType:
    if lexeme in FIXED_TOKENS:
        return FIXED_TOKENS[lexeme]
    elif NUMBER_PATTERN.fullmatch(lexeme):
        return TokenType.NUMBER
    elif IDENTIFIER_PATTERN.fullmatch(lexeme):
        return TokenType.IDENTIFIER
    else:
        return TokenType.OTHER


def tokenize(line: str) -> list[Token]:
    """Splits a single source line into tokens, whitespace only separates them"""
    return [Token(type=_classify(lexeme), lexeme=lexeme) for lexeme in TOKEN_PATTERN.findall(line)]


def untokenize(tokens: list[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens)

    result = re.sub(r"\s+;", ";", result)

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)
    return result
