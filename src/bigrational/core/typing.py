from __future__ import annotations

from typing import Union

import numpy as np

# Types accepted wherever an exact integer is expected
IntegerLike = Union[
    int,
    np.integer,
]


def as_integer(value: IntegerLike) -> int:
    """
    Widens an integer-like value to a python int. Fixed-width numpy scalars are
    converted before any arithmetic happens, so products can never overflow.

    Args:
        value (IntegerLike): python or numpy integer

    Raises:
        TypeError: if value is not an integer

    Returns:
        int: the same value as an unbounded python int
    """
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"Value {value!r} must be int or numpy integer, got {type(value).__name__}")
    return int(value)


def is_integer_like(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)
