"""
Domain models and value objects.

Contains the Fraction value type, its fixed-width variants, and the parser.
"""

from fractionkit.core.domain.fraction import (
    Fraction,
    Fraction8,
    Fraction16,
    Fraction32,
    Fraction64,
    fraction,
    from_integer,
)
from fractionkit.core.domain.parsing import parse_fraction

__all__ = [
    # Fraction model
    "Fraction",
    "Fraction8",
    "Fraction16",
    "Fraction32",
    "Fraction64",
    "fraction",
    "from_integer",
    # Parsing
    "parse_fraction",
]
