from __future__ import annotations

from typing import Iterable

from bigrational.core.fraction import Rational
from bigrational.core.typing import IntegerLike


def add(
    x: Rational | None,
    y: Rational | None,
) -> Rational | None:
    if x is None:
        return None
    return x.add(y)


def subtract(
    x: Rational | None,
    y: Rational | None,
) -> Rational | None:
    if x is None:
        return None
    return x.subtract(y)


def multiply(
    x: Rational | None,
    y: Rational | None,
) -> Rational | None:
    if x is None:
        return None
    return x.multiply(y)


def divide(
    x: Rational | None,
    y: Rational | None,
) -> Rational | None:
    """
    Divides x by y. A missing dividend gives None, a missing divisor or one
    without a strictly positive denominator gives the degenerate pair.
    """
    if x is None:
        return None
    return x.divide(y)


def negate(x: Rational | None) -> Rational | None:
    if x is None:
        return None
    return x.negate()


def invert(x: Rational | None) -> Rational | None:
    if x is None:
        return None
    return x.invert()


def pow(
    x: Rational | None,
    exponent: IntegerLike,
) -> Rational | None:
    if x is None:
        return None
    return x.pow(exponent)


def sum_all(fractions: Iterable[Rational | None] | None) -> Rational | None:
    return Rational.sum_all(fractions)
