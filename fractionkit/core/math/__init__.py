"""
Core math modules для fractionkit

Целочисленные примитивы с контролем переполнения и нормализация дробей.
"""

# Checked Integers
from fractionkit.core.math.checked_int import (
    # Widths
    DEFAULT_WIDTH,
    INT8,
    INT16,
    INT32,
    INT64,
    IntegerWidth,
    # Checked operations
    checked_add,
    checked_mul,
    checked_neg,
    checked_sub,
    require_in_range,
)

# Normalizer
from fractionkit.core.math.normalizer import normalize

__all__ = [
    # Checked Integers — Widths
    "DEFAULT_WIDTH",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "IntegerWidth",
    # Checked Integers — Operations
    "checked_add",
    "checked_mul",
    "checked_neg",
    "checked_sub",
    "require_in_range",
    # Normalizer
    "normalize",
]
