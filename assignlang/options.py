import argparse
from dataclasses import dataclass


@dataclass(frozen=True)
class InterpreterOptions:
    # reject a statement whose line ends right after the expression, without ";"
    require_terminator: bool = False
    # unary "+" counts as one more negation instead of being a no-op; the default
    # (no-op) deliberately departs from that legacy sign flip
    legacy_unary_plus: bool = False
    # whitespace-only lines are counted but not reported as errors
    skip_blank_lines: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "InterpreterOptions":
        return cls(
            require_terminator=getattr(args, "strict", False),
            legacy_unary_plus=getattr(args, "legacy_plus", False),
        )
