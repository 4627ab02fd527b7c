"""
Core value types, integer primitives, and invariants.

This module contains the foundational building blocks of fractionkit;
nothing here performs I/O or holds shared mutable state.
"""
