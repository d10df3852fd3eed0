from bigrational.core.fraction import Rational
from bigrational.core.typing import IntegerLike
from bigrational.functional import arithmetic, comparison
from bigrational.functional.collection import OPERATIONS

__all__ = [
    "Rational",
    "IntegerLike",
    "OPERATIONS",
    "arithmetic",
    "comparison",
]
