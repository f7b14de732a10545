from fractions import Fraction
from typing import Union

Number = Union[int, Fraction]


class NoValue:
    """Marker bound by an empty initializer (``x = ;``)"""

    _instance: "NoValue | None" = None

    def __new__(cls) -> "NoValue":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_VALUE"

    def __str__(self) -> str:
        return ""

    def __bool__(self) -> bool:
        return False


NO_VALUE = NoValue()

Binding = Union[Number, NoValue]


def normalize(value: Number) -> Number:
    if isinstance(value, Fraction) and value.denominator == 1:
        return int(value.numerator)
    return value


def divide(a: Number, b: Number) -> Number:
    """Exact division, the caller is responsible for rejecting zero divisors"""
    return normalize(Fraction(a) / Fraction(b))


# int() and str() refuse more than a few thousand digits at once (sys.get_int_max_str_digits)
DIGIT_CHUNK = 1000


def parse_digits(digits: str) -> int:
    value = 0
    for start in range(0, len(digits), DIGIT_CHUNK):
        chunk = digits[start : start + DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def format_int(n: int) -> str:
    if n < 0:
        return "-" + format_int(-n)
    base = 10**DIGIT_CHUNK
    chunks: list[str] = []
    while n >= base:
        n, rem = divmod(n, base)
        chunks.append(str(rem).zfill(DIGIT_CHUNK))
    chunks.append(str(n))
    return "".join(reversed(chunks))


def format_value(value: Binding) -> str:
    if isinstance(value, NoValue):
        return ""
    value = normalize(value)
    if isinstance(value, Fraction):
        return f"{format_int(value.numerator)}/{format_int(value.denominator)}"
    return format_int(value)
