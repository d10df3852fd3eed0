from __future__ import annotations

import math
from typing import Any, Iterable, NamedTuple

from bigrational.core.constants import DEGENERATE_STR, FRACTION_CLOSE, FRACTION_OPEN, FRACTION_SEPARATOR
from bigrational.core.typing import IntegerLike, as_integer, is_integer_like


class _RationalPair(NamedTuple):
    numerator: int
    denominator: int


def _cmp(a: int, b: int) -> int:
    return (a > b) - (a < b)


def _coerce(other: Any) -> "Rational | None":
    if isinstance(other, Rational):
        return other
    if is_integer_like(other):
        return Rational(other)
    return None


def _reject_plain_tuple(op: str, other: Any) -> None:
    # a plain tuple would fall back to tuple comparison or concatenation
    if isinstance(other, tuple):
        raise TypeError(f"unsupported operand type(s) for {op}: 'Rational' and '{type(other).__name__}'")


class Rational(_RationalPair):
    """
    Immutable fraction of two unbounded integers, stored in lowest terms.

    If the numerator or the denominator is zero, the value collapses to the
    degenerate pair (0, 0), which stands for both zero and an undefined
    fraction. The sign of the denominator is kept as given.

    Binary methods take an optional argument: a missing (None) operand yields
    None instead of raising. Invalid arithmetic yields the degenerate pair.
    """

    __slots__ = ()
    # numpy must not treat the pair as a sequence, its operators defer to ours
    __array_ufunc__ = None

    def __new__(
        cls,
        numerator: IntegerLike,
        denominator: IntegerLike = 1,
    ) -> "Rational":
        num = as_integer(numerator)
        denom = as_integer(denominator)
        if num == 0 or denom == 0:
            return super().__new__(cls, 0, 0)

        common_divisor = math.gcd(num, denom)
        if common_divisor != 0:
            num //= common_divisor
            denom //= common_divisor
        return super().__new__(cls, num, denom)

    @classmethod
    def _make(cls, iterable: Iterable[IntegerLike]) -> Rational:
        return cls(*iterable)

    def _replace(self, **kwargs: IntegerLike) -> Rational:
        return Rational(**{**self._asdict(), **kwargs})

    def is_degenerate(self) -> bool:
        return self.denominator == 0

    def is_integer(self) -> bool:
        return self.denominator == 1

    # Arithmetic
    def add(self, val: Rational | None) -> Rational | None:
        """(a/b + c/d) = (a*d + b*c) / (b*d)"""
        if val is None:
            return None
        return Rational(
            self.numerator * val.denominator + self.denominator * val.numerator,
            self.denominator * val.denominator,
        )

    def subtract(self, val: Rational | None) -> Rational | None:
        if val is None:
            return None
        return Rational(
            self.numerator * val.denominator - self.denominator * val.numerator,
            self.denominator * val.denominator,
        )

    def multiply(self, val: Rational | None) -> Rational | None:
        if val is None:
            return None
        return Rational(self.numerator * val.numerator, self.denominator * val.denominator)

    def divide(self, val: Rational | None) -> Rational:
        """
        Divides by val. Only a divisor with a strictly positive denominator is
        accepted, anything else (None included) gives the degenerate pair.
        """
        if val is not None and val.denominator > 0:
            return Rational(self.numerator * val.denominator, self.denominator * val.numerator)
        return Rational(0, 0)

    def negate(self) -> Rational:
        # which component carries the sign afterwards depends on the branch taken
        if self.numerator < 0 and self.denominator < 0:
            return Rational(-self.numerator, -self.denominator)
        elif self.denominator < 0:
            return Rational(self.numerator, -self.denominator)
        return Rational(-self.numerator, self.denominator)

    def invert(self) -> Rational:
        if self.denominator > 0:
            return Rational(self.denominator, self.numerator)
        return Rational(0, 0)

    def pow(self, exponent: IntegerLike) -> Rational:
        """
        Integer power. a^0 is 1 for every a (the degenerate pair included) and
        a^1 is the instance itself. Negative exponents flip the pair.

        Args:
            exponent (IntegerLike): python or numpy integer

        Returns:
            Rational: this value taken to the power of exponent
        """
        exp = as_integer(exponent)
        if exp == 0:
            return Rational(1, 1)
        elif exp == 1:
            return self
        elif exp < 0:
            return Rational(self.denominator ** (-exp), self.numerator ** (-exp))
        return Rational(self.numerator**exp, self.denominator**exp)

    @staticmethod
    def sum_all(fractions: Iterable[Rational | None] | None) -> Rational | None:
        """
        Adds up the absolute numerators and the absolute denominators of all
        entries separately and builds one fraction from the two totals. This is
        not fraction addition: sum_all([1/2, 1/3]) is 2/5.

        Args:
            fractions (Iterable[Rational | None] | None): values to accumulate

        Returns:
            Rational | None: None if fractions is or contains None, the
                degenerate pair if it is empty, the accumulated fraction otherwise.
        """
        if fractions is None:
            return None
        num_total = 0
        denom_total = 0
        for fraction in fractions:
            if fraction is None:
                return None
            num_total += abs(fraction.numerator)
            denom_total += abs(fraction.denominator)
        return Rational(num_total, denom_total)

    # Comparison
    def signum(self) -> int:
        """Sign of the numerator only, the denominator sign is ignored."""
        return _cmp(self.numerator, 0)

    def compare_to(self, val: Rational | None) -> int:
        """
        Orders this value against val. Values of different signum are ordered
        by the signum difference, which can be 2 or -2. A missing val compares
        as equal.
        """
        if val is None:
            return 0
        if self.signum() != val.signum():
            return self.signum() - val.signum()
        if self.denominator == val.denominator:
            return _cmp(self.numerator, val.numerator)
        # Cross multiply to avoid division
        return _cmp(self.numerator * val.denominator, self.denominator * val.numerator)

    def is_equal_to(self, val: Rational | None) -> bool:
        if val is None:
            return False
        return self.numerator == val.numerator and self.denominator == val.denominator

    def abs(self) -> Rational:
        return self.negate() if self.signum() < 0 else self

    def max(self, val: Rational | None) -> Rational | None:
        if val is None:
            return None
        return self if self.compare_to(val) >= 0 else val

    def min(self, val: Rational | None) -> Rational | None:
        if val is None:
            return None
        return self if self.compare_to(val) <= 0 else val

    # Rendering
    def __repr__(self) -> str:
        return str(self)

    def __str__(self) -> str:
        if self.denominator == 0:
            return DEGENERATE_STR
        if self.denominator == 1:
            return str(self.numerator)
        return f"{FRACTION_OPEN}{self.numerator}{FRACTION_SEPARATOR}{self.denominator}{FRACTION_CLOSE}"

    # Python operators, integers are promoted to Rational(x, 1)
    def __add__(self, other: Any) -> Rational:  # type: ignore[override]
        val = _coerce(other)
        if val is None:
            return NotImplemented
        return self.add(val)  # type: ignore[return-value]

    def __radd__(self, other: Any) -> Rational:
        val = _coerce(other)
        if val is None:
            _reject_plain_tuple("+", other)
            return NotImplemented
        return val.add(self)  # type: ignore[return-value]

    def __sub__(self, other: Any) -> Rational:
        val = _coerce(other)
        if val is None:
            return NotImplemented
        return self.subtract(val)  # type: ignore[return-value]

    def __rsub__(self, other: Any) -> Rational:
        val = _coerce(other)
        if val is None:
            return NotImplemented
        return val.subtract(self)  # type: ignore[return-value]

    def __mul__(self, other: Any) -> Rational:  # type: ignore[override]
        val = _coerce(other)
        if val is None:
            return NotImplemented
        return self.multiply(val)  # type: ignore[return-value]

    def __rmul__(self, other: Any) -> Rational:  # type: ignore[override]
        val = _coerce(other)
        if val is None:
            return NotImplemented
        return val.multiply(self)  # type: ignore[return-value]

    def __truediv__(self, other: Any) -> Rational:
        val = _coerce(other)
        if val is None:
            return NotImplemented
        return self.divide(val)

    def __rtruediv__(self, other: Any) -> Rational:
        val = _coerce(other)
        if val is None:
            return NotImplemented
        return val.divide(self)

    def __pow__(self, exponent: Any) -> Rational:
        if not is_integer_like(exponent):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> Rational:
        return self.negate()

    def __abs__(self) -> Rational:
        return self.abs()

    def __bool__(self) -> bool:
        return self.signum() != 0

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Rational):
            return self.is_equal_to(other)
        if is_integer_like(other):
            return self.is_equal_to(Rational(other))
        return False

    def __ne__(self, other: Any) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        # integer values (and the degenerate pair, equal to 0) hash like the int they equal
        if self.denominator in (0, 1):
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __lt__(self, other: Any) -> bool:  # type: ignore[override]
        val = _coerce(other)
        if val is None:
            _reject_plain_tuple("<", other)
            return NotImplemented
        return self.compare_to(val) < 0

    def __le__(self, other: Any) -> bool:  # type: ignore[override]
        val = _coerce(other)
        if val is None:
            _reject_plain_tuple("<=", other)
            return NotImplemented
        return self.compare_to(val) <= 0

    def __gt__(self, other: Any) -> bool:  # type: ignore[override]
        val = _coerce(other)
        if val is None:
            _reject_plain_tuple(">", other)
            return NotImplemented
        return self.compare_to(val) > 0

    def __ge__(self, other: Any) -> bool:  # type: ignore[override]
        val = _coerce(other)
        if val is None:
            _reject_plain_tuple(">=", other)
            return NotImplemented
        return self.compare_to(val) >= 0
