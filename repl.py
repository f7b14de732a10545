from assignlang.runtime import Bound, Failed, Interpreter, diagnostics_for
from assignlang.value import format_value


if __name__ == "__main__":
    interpreter = Interpreter()

    while True:
        try:
            line = input("> ")
        except EOFError:
            break

        outcome = interpreter.execute_line(line)
        if isinstance(outcome, Failed):
            for diagnostic in diagnostics_for(outcome):
                print(diagnostic)
            if outcome.error is not None:
                print(outcome.error)
        elif isinstance(outcome, Bound):
            print(f"{outcome.name} = {format_value(outcome.value)}")

    print("\n".join(f"{name} = {format_value(value)}" for name, value in interpreter.symbols.items()))
