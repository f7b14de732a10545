"""Recursive-descent parser that evaluates while it parses.

Every production takes the (immutable) token list of the current line and
the index of the first token it owns, and returns the computed value together
with the index of the first token it did not consume:

    Assignment := IDENTIFIER '=' ( ';' | Expression [';'] )
    Expression := ('---')* Term (('+' | '-') Term)*
    Term       := Factor ('*' Factor)*
    Factor     := ('-' | '+' | '++' | '--')* Primitive ('/' Factor)*
    Primitive  := NUMBER | IDENTIFIER | '(' Expression ')'
"""
from dataclasses import dataclass, field

from assignlang.options import InterpreterOptions
from assignlang.tokenizer import Token, TokenType, untokenize
from assignlang.utils import NamedEnum
from assignlang.value import NO_VALUE, Binding, NoValue, Number, divide, normalize, parse_digits


class ErrorKind(NamedEnum):
    ASSIGNMENT_SYNTAX = "AssignmentSyntaxError"
    MALFORMED_LITERAL = "MalformedLiteralError"
    UNDEFINED_VARIABLE = "UndefinedVariableError"
    UNEXPECTED_TOKEN = "UnexpectedTokenError"
    UNMATCHED_PAREN = "UnmatchedParenError"
    DIVISION_BY_ZERO = "DivisionByZeroError"
    NESTING_TOO_DEEP = "NestingTooDeepError"


@dataclass
class ParserError(Exception):
    kind: ErrorKind
    errmsg: str
    line: int
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        parsed_tokens = self.tokens[: self.error_token_idx]
        filler_whitespace = " " * len(untokenize(parsed_tokens)) + (" " if parsed_tokens else "")
        return "\n".join(
            [
                f"[{self.kind}] line {self.line}: {self.errmsg}",
                untokenize(self.tokens),
                filler_whitespace + "^",
            ]
        )


@dataclass
class LineContext:
    tokens: list[Token]
    line: int
    symbols: dict[str, Binding]
    options: InterpreterOptions = field(default_factory=InterpreterOptions)

    def type_at(self, i: int) -> TokenType | None:
        return self.tokens[i].type if i < len(self.tokens) else None

    def error(self, kind: ErrorKind, errmsg: str, i: int) -> ParserError:
        return ParserError(kind=kind, errmsg=errmsg, line=self.line, tokens=self.tokens, error_token_idx=i)


@dataclass
class Assignment:
    name: str
    value: Binding


def parse_assignment(ctx: LineContext) -> Assignment:
    """Parses one statement and binds its target in ``ctx.symbols``.

    Raises ParserError for the first problem found; in that case the symbol
    table is left untouched.
    """
    tokens = ctx.tokens
    if ctx.type_at(0) is not TokenType.IDENTIFIER:
        raise ctx.error(ErrorKind.ASSIGNMENT_SYNTAX, "Assignment target expected", 0)
    name = tokens[0].lexeme
    if ctx.type_at(1) is not TokenType.EQUAL:
        raise ctx.error(ErrorKind.ASSIGNMENT_SYNTAX, "'=' expected", 1)

    if ctx.type_at(2) is TokenType.EXPR_END:
        value: Binding = NO_VALUE
        i = 3
    else:
        number, i = _consume_expression(ctx, 2)
        value = normalize(number)
        if i < len(tokens):
            if tokens[i].type is not TokenType.EXPR_END:
                raise ctx.error(ErrorKind.ASSIGNMENT_SYNTAX, f"';' expected, found {tokens[i].type}", i)
            i += 1
        elif ctx.options.require_terminator:
            raise ctx.error(ErrorKind.ASSIGNMENT_SYNTAX, "Unterminated statement", i)

    if i < len(tokens):
        raise ctx.error(ErrorKind.ASSIGNMENT_SYNTAX, "Unexpected tokens after ';'", i)

    ctx.symbols[name] = value
    return Assignment(name=name, value=value)


def _consume_expression(ctx: LineContext, i: int) -> tuple[Number, int]:
    negations = 0
    while ctx.type_at(i) is TokenType.TRIPLE_MINUS:
        negations += 1
        i += 1

    value, i = _consume_term(ctx, i)
    if negations % 2:
        value = -value

    while ctx.type_at(i) in (TokenType.PLUS, TokenType.MINUS):
        operator = ctx.tokens[i].type
        rhs, i = _consume_term(ctx, i + 1)
        if operator is TokenType.PLUS:
            value += rhs
        else:
            value -= rhs
    return value, i


def _consume_term(ctx: LineContext, i: int) -> tuple[Number, int]:
    value, i = _consume_factor(ctx, i)
    while ctx.type_at(i) is TokenType.STAR:
        rhs, i = _consume_factor(ctx, i + 1)
        value *= rhs
    return value, i


def _consume_unary_run(ctx: LineContext, i: int) -> tuple[bool, int]:
    negations = 0
    while True:
        token_type = ctx.type_at(i)
        if token_type is TokenType.MINUS:
            negations += 1
        elif token_type is TokenType.PLUS:
            if ctx.options.legacy_unary_plus:
                negations -= 1
        elif token_type is TokenType.DOUBLE_MINUS:
            # tokenize() never emits "--" (it splits it into two "-"), only hand-built token lists do
            negations += 2
        elif token_type is not TokenType.DOUBLE_PLUS:
            break
        i += 1
    return negations % 2 == 1, i


def _consume_factor(ctx: LineContext, i: int) -> tuple[Number, int]:
    operands: list[tuple[Number, bool]] = []
    slash_indices: list[int] = []
    while True:
        negate, i = _consume_unary_run(ctx, i)
        value, i = _consume_primitive(ctx, i)
        operands.append((value, negate))
        if ctx.type_at(i) is not TokenType.SLASH:
            break
        slash_indices.append(i)
        i += 1

    # the divisor is a whole Factor, so "/" chains to the right: 8/4/2 == 8/(4/2)
    value, negate = operands[-1]
    result = -value if negate else value
    for (value, negate), slash_idx in zip(reversed(operands[:-1]), reversed(slash_indices)):
        if result == 0:
            raise ctx.error(ErrorKind.DIVISION_BY_ZERO, "Division by zero", slash_idx)
        result = divide(value, result)
        if negate:
            result = -result
    return result, i


def _consume_primitive(ctx: LineContext, i: int) -> tuple[Number, int]:
    if i >= len(ctx.tokens):
        raise ctx.error(ErrorKind.UNEXPECTED_TOKEN, "Unexpected end of line", i)
    token = ctx.tokens[i]
    if token.type is TokenType.NUMBER:
        if len(token.lexeme) > 1 and token.lexeme.startswith("0"):
            raise ctx.error(ErrorKind.MALFORMED_LITERAL, f"Leading zero in literal {token.lexeme!r}", i)
        return parse_digits(token.lexeme), i + 1
    elif token.type is TokenType.IDENTIFIER:
        value = ctx.symbols.get(token.lexeme, NO_VALUE)
        if isinstance(value, NoValue):
            raise ctx.error(ErrorKind.UNDEFINED_VARIABLE, f"Variable {token.lexeme!r} has no value", i)
        return value, i + 1
    elif token.type is TokenType.BRACKET_OPEN:
        value, j = _consume_expression(ctx, i + 1)
        if ctx.type_at(j) is not TokenType.BRACKET_CLOSE:
            raise ctx.error(ErrorKind.UNMATCHED_PAREN, "')' expected", j)
        return value, j + 1
    else:
        raise ctx.error(ErrorKind.UNEXPECTED_TOKEN, f"Unexpected token {token.lexeme!r}", i)
