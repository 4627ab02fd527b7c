"""
Contract Validation Module

JSON Schema контракт для сериализованных дробей fractionkit.
"""

from .validators import (
    FractionValidator,
    SchemaLoader,
    load_fraction,
    validate_fraction,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "FractionValidator",
    # Functions
    "load_fraction",
    "validate_fraction",
]
