import argparse
import dataclasses
import logging
from pathlib import Path
from typing import Optional

from assignlang.examples import EXAMPLE_PROGRAMS
from assignlang.options import InterpreterOptions
from assignlang.runtime import Interpreter

logger = logging.getLogger(__name__)


def process_examples(interpreter: Interpreter) -> None:
    for i, code in enumerate(EXAMPLE_PROGRAMS, start=1):
        print("\n\n")
        print(f"Input {i}:\n{code}")
        print(f"Output {i}:")
        print(interpreter.run(code))


def process_file(interpreter: Interpreter, file_name: str) -> int:
    try:
        code = Path(file_name).read_text()
    except FileNotFoundError:
        print(f"File '{file_name}' not found.")
        return 1
    except OSError as e:
        logger.debug("Reading %s failed: %s", file_name, e)
        print(f"File '{file_name}' could not be read.")
        return 1
    print(f"\nInput Code:\n{code}\n")
    print(interpreter.run(code))
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run programs made of one assignment per line")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--examples", action="store_true", help="run the built-in example programs")
    source.add_argument("--file", help="run the program in FILE")
    parser.add_argument("--strict", action="store_true", help="require ';' at the end of every statement")
    parser.add_argument("--legacy-plus", action="store_true", help="treat unary '+' as a sign flip")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every line's outcome")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    options = InterpreterOptions.from_args(args)
    # a file's trailing newline is not an empty statement
    file_options = dataclasses.replace(options, skip_blank_lines=True)
    if args.examples:
        process_examples(Interpreter(options=options))
        return 0
    if args.file:
        return process_file(Interpreter(options=file_options), args.file)

    option = input("Enter 1 to process hardcoded inputs or 2 to provide a file name: ").strip()
    if option == "1":
        process_examples(Interpreter(options=options))
        return 0
    elif option == "2":
        file_name = input("Enter the file name: ").strip()
        return process_file(Interpreter(options=file_options), file_name)
    else:
        print("Invalid option. Please enter either 1 or 2.")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
