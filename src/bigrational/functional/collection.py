from __future__ import annotations
from typing import Callable
from bigrational.functional.arithmetic import add, divide, invert, multiply, negate, pow, subtract, sum_all
from bigrational.functional.comparison import abs, compare_to, is_equal_to, max, min, signum


OPERATIONS: dict[str, Callable] = {
    "add": add,
    "subtract": subtract,
    "multiply": multiply,
    "divide": divide,
    "negate": negate,
    "invert": invert,
    "pow": pow,
    "sum_all": sum_all,
    "signum": signum,
    "compare_to": compare_to,
    "is_equal_to": is_equal_to,
    "abs": abs,
    "max": max,
    "min": min,
}
