from __future__ import annotations

from bigrational.core.fraction import Rational


def signum(x: Rational | None) -> int | None:
    if x is None:
        return None
    return x.signum()


def compare_to(
    x: Rational | None,
    y: Rational | None,
) -> int:
    """
    Orders x against y, see Rational.compare_to. A missing operand on either
    side compares as equal.
    """
    if x is None:
        return 0
    return x.compare_to(y)


def is_equal_to(
    x: Rational | None,
    y: Rational | None,
) -> bool:
    if x is None:
        return False
    return x.is_equal_to(y)


def abs(x: Rational | None) -> Rational | None:
    if x is None:
        return None
    return x.abs()


def max(
    x: Rational | None,
    y: Rational | None,
) -> Rational | None:
    if x is None:
        return None
    return x.max(y)


def min(
    x: Rational | None,
    y: Rational | None,
) -> Rational | None:
    if x is None:
        return None
    return x.min(y)
