from bigrational import Rational


def get_sign_configurations(num: int, denom: int) -> list[Rational]:
    """(+,+), (-,-), (+,-), (-,+) variants of a positive pair"""
    assert num > 0 and denom > 0
    return [
        Rational(num, denom),
        Rational(-num, -denom),
        Rational(num, -denom),
        Rational(-num, denom),
    ]
