import math
from fractions import Fraction

from hypothesis import given
from hypothesis import strategies as st

from bigrational import Rational

nonzero = st.integers().filter(lambda x: x != 0)
positive = st.integers(min_value=1)


@given(nonzero, nonzero)
def test_construction_divides_by_gcd(num, denom):
    g = math.gcd(num, denom)
    r = Rational(num, denom)
    assert (r.numerator, r.denominator) == (num // g, denom // g)
    assert math.gcd(r.numerator, r.denominator) == 1


@given(st.integers())
def test_zero_operand_is_degenerate(value):
    assert tuple(Rational(0, value)) == (0, 0)
    assert tuple(Rational(value, 0)) == (0, 0)


@given(nonzero, nonzero)
def test_pow_zero_is_one(num, denom):
    assert Rational(num, denom).pow(0).is_equal_to(Rational(1, 1))


@given(nonzero, positive, st.integers(min_value=1, max_value=8))
def test_negative_pow_is_inverted_pow_for_positive_denominators(num, denom, exp):
    x = Rational(num, denom)
    assert x.pow(-exp).is_equal_to(x.pow(exp).invert())


@given(nonzero, positive, nonzero, positive)
def test_arithmetic_matches_exact_fractions(n1, d1, n2, d2):
    """With positive denominators, results agree with the stdlib unless they are zero"""
    a, b = Rational(n1, d1), Rational(n2, d2)
    fa, fb = Fraction(n1, d1), Fraction(n2, d2)

    for result, expected in [
        (a.add(b), fa + fb),
        (a.subtract(b), fa - fb),
        (a.multiply(b), fa * fb),
        (a.divide(b), fa / fb),
    ]:
        if expected == 0:
            assert result.is_degenerate()
        else:
            # the quotient may carry its sign in the denominator
            assert Fraction(result.numerator, result.denominator) == expected
            assert math.gcd(result.numerator, result.denominator) == 1


@given(nonzero, positive, nonzero, positive)
def test_compare_to_matches_exact_fractions(n1, d1, n2, d2):
    a, b = Rational(n1, d1), Rational(n2, d2)
    fa, fb = Fraction(n1, d1), Fraction(n2, d2)
    expected = (fa > fb) - (fa < fb)

    assert (a.compare_to(b) > 0) - (a.compare_to(b) < 0) == expected
    assert (b.compare_to(a) > 0) - (b.compare_to(a) < 0) == -expected


@given(st.lists(st.one_of(st.integers(), st.tuples(nonzero, nonzero)), max_size=10))
def test_sum_all_accumulates_absolute_components(items):
    values = [Rational(*item) if isinstance(item, tuple) else Rational(item) for item in items]
    result = Rational.sum_all(values)
    expected = Rational(sum(abs(v.numerator) for v in values), sum(abs(v.denominator) for v in values))
    assert result.is_equal_to(expected)
    assert result.signum() >= 0
