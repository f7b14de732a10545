from assignlang.runtime import Interpreter
from assignlang.tokenizer import tokenize

for code in [
    "x = 5;",
    "x = -1;",
    "x = 1 + 1;",
    "x = ---1 + 1;",
    "x = 1 + -1;",
    "x = 4 + 6 * 3;",
    "x = (4 + 6) * 3;",
    "x = 80225/+2;",
    "x = 7/6/2000;",
    "x = 8/4/2;",
    "a = 1;\nb = 2;\nc = a + b;",
    "var = (1 + 14 * (54 * 54));",
    "x = ;\ny = x + 1;",
    "x = 1/(2 - 2);",
    "x = 001;",
    "x = (1 + 2;",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    for i, line in enumerate(code.split("\n")):
        print(f"tokens {i + 1:> 2}: {' '.join(str(t) for t in tokenize(line))}")

    report = Interpreter().run(code)
    outcomes_str = "\n".join(f" {o.line:> 2}: {o}" for o in report.outcomes)
    print(f"line outcomes:\n{outcomes_str}")
    print(f"report:\n{report}")
