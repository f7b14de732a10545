import enum


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


class NamedEnum(enum.Enum):
    """Enum whose members print as their value, e.g. error kind names"""

    def __str__(self) -> str:
        return str(self.value)

    __repr__ = __str__
