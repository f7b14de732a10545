import math
import random
import re
import string
import warnings
from fractions import Fraction

from assignlang.runtime import Bound, interpret

warnings.filterwarnings("ignore")


def eval_py(code: str) -> float | str:
    try:
        return eval(code)
    except Exception as e:
        return str(e)


def eval_my(code: str) -> Fraction | int | str:
    outcome = interpret(f"x = {code};").outcomes[0]
    if isinstance(outcome, Bound):
        return outcome.value  # type: ignore
    else:
        return str(outcome.kind)


if __name__ == "__main__":
    alphabet = string.digits + "()+-* "

    def generate(length: int) -> str:
        return "".join(random.choices(alphabet, k=length))

    while True:
        code = generate(10)

        if re.findall(r"\*\s*\*", code):
            continue  # avoid generating powers (10**4)

        if "---" in code or "++" in code:
            continue  # multi-character operators have no python counterpart

        if not code.strip():
            continue

        res_py = eval_py(code)
        res_my = eval_my(code)
        if isinstance(res_py, (int, float)) and isinstance(res_my, (int, Fraction)):
            if math.isclose(float(res_my), res_py):
                continue
        if not isinstance(res_py, (int, float)) and isinstance(res_my, str):
            continue
        print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
