import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from assignlang.options import InterpreterOptions
from assignlang.parser import ErrorKind, LineContext, ParserError, parse_assignment
from assignlang.tokenizer import tokenize
from assignlang.value import Binding, format_value

logger = logging.getLogger(__name__)


@dataclass
class Bound:
    line: int
    name: str
    value: Binding


@dataclass
class Failed:
    line: int
    kind: ErrorKind
    text: str
    error: Optional[ParserError] = None


@dataclass
class Skipped:
    line: int


LineOutcome = Union[Bound, Failed, Skipped]


@dataclass
class Diagnostic:
    line: int
    message: str

    def __str__(self) -> str:
        return self.message


def diagnostics_for(outcome: Failed) -> list[Diagnostic]:
    result: list[Diagnostic] = []
    if outcome.kind is ErrorKind.DIVISION_BY_ZERO:
        result.append(Diagnostic(line=outcome.line, message=f"Division by zero in line {outcome.line}"))
    result.append(Diagnostic(line=outcome.line, message=f"Error in line {outcome.line}: {outcome.text}"))
    return result


@dataclass
class Report:
    outcomes: list[LineOutcome] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    bindings: dict[str, Binding] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not any(isinstance(o, Failed) for o in self.outcomes)

    def binding_lines(self) -> list[str]:
        return [f"{name} = {format_value(value)}" for name, value in self.bindings.items()]

    def lines(self) -> list[str]:
        return [str(d) for d in self.diagnostics] + self.binding_lines()

    def __str__(self) -> str:
        return "\n".join(self.lines())


class Interpreter:
    """Runs programs made of one assignment per line.

    The symbol table and line counter belong to the instance and are reset by
    every ``run`` call, so one instance must not run two programs at once.
    """

    def __init__(self, options: Optional[InterpreterOptions] = None) -> None:
        self.options = options or InterpreterOptions()
        self.symbols: dict[str, Binding] = dict()
        self.line_counter = 0

    def reset(self) -> None:
        self.symbols = dict()
        self.line_counter = 0

    def run(self, code: str) -> Report:
        self.reset()
        report = Report()
        for line in code.split("\n"):
            outcome = self.execute_line(line)
            report.outcomes.append(outcome)
            if isinstance(outcome, Failed):
                report.diagnostics.extend(diagnostics_for(outcome))
        report.bindings = dict(self.symbols)
        logger.debug(
            "Ran %d line(s), %d binding(s), %d diagnostic(s)",
            self.line_counter,
            len(report.bindings),
            len(report.diagnostics),
        )
        return report

    def execute_line(self, line: str) -> LineOutcome:
        """Handles the next line against the current state; never raises"""
        self.line_counter += 1
        tokens = tokenize(line)
        if not tokens and self.options.skip_blank_lines:
            logger.debug("Line %d: blank, skipped", self.line_counter)
            return Skipped(line=self.line_counter)

        ctx = LineContext(tokens=tokens, line=self.line_counter, symbols=self.symbols, options=self.options)
        try:
            assignment = parse_assignment(ctx)
        except ParserError as e:
            logger.debug("Line %d failed with %s\n%s", e.line, e.kind, e)
            return Failed(line=e.line, kind=e.kind, text=line, error=e)
        except RecursionError:
            logger.debug("Line %d failed: parentheses nested too deep", self.line_counter)
            return Failed(line=self.line_counter, kind=ErrorKind.NESTING_TOO_DEEP, text=line)

        logger.debug("Line %d: %s = %s", self.line_counter, assignment.name, format_value(assignment.value))
        return Bound(line=self.line_counter, name=assignment.name, value=assignment.value)


def interpret(code: str, options: Optional[InterpreterOptions] = None) -> Report:
    return Interpreter(options=options).run(code)
