EXAMPLE_PROGRAMS: list[str] = [
    "x = 001;",
    "x_2 = 0;",
    "x = 0\ny = x;\nz = ---(x+y);",
    "x = 1;\ny = 2;\nz = ---(x+y)*(x+-y);",
]
