"""
fractionkit — точные рациональные дроби с контролем переполнения.

    >>> from fractionkit import fraction
    >>> fraction(1, 2) + fraction(1, 3)
    Fraction(numerator=5, denominator=6)
"""

from fractionkit.core.domain import (
    Fraction,
    Fraction8,
    Fraction16,
    Fraction32,
    Fraction64,
    fraction,
    from_integer,
    parse_fraction,
)
from fractionkit.core.errors import (
    DivisionByZeroError,
    FractionError,
    FractionOverflowError,
    FractionParseError,
    InvalidFractionError,
    NotIntegralError,
    ParseErrorKind,
)
from fractionkit.core.math import (
    DEFAULT_WIDTH,
    INT8,
    INT16,
    INT32,
    INT64,
    IntegerWidth,
)

__version__ = "0.1.0"

__all__ = [
    # Values
    "Fraction",
    "Fraction8",
    "Fraction16",
    "Fraction32",
    "Fraction64",
    "fraction",
    "from_integer",
    "parse_fraction",
    # Errors
    "FractionError",
    "InvalidFractionError",
    "DivisionByZeroError",
    "FractionOverflowError",
    "NotIntegralError",
    "FractionParseError",
    "ParseErrorKind",
    # Widths
    "IntegerWidth",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "DEFAULT_WIDTH",
]
