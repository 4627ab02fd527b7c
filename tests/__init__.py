"""
Test suite for fractionkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
