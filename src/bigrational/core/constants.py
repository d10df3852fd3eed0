"""String rendering of the degenerate (0, 0) value"""
DEGENERATE_STR: str = "0"

"""
Pieces of the rendering of a non-integer value, e.g. "(5 / 3)".
The numerator and denominator are printed as stored, without sign normalization.
"""
FRACTION_OPEN: str = "("
FRACTION_SEPARATOR: str = " / "
FRACTION_CLOSE: str = ")"
