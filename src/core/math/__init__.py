"""
Core math modules для fraction calculator

Целочисленные примитивы для рациональной арифметики.
"""

# Rational primitives
from src.core.math.rational import (
    ZERO_DENOMINATOR_MESSAGE,
    DivisionByZeroError,
    gcd,
    lcm,
    normalize_pair,
    validate_denominator,
)

__all__ = [
    # Constants
    "ZERO_DENOMINATOR_MESSAGE",
    # Exceptions
    "DivisionByZeroError",
    # Functions
    "gcd",
    "lcm",
    "normalize_pair",
    "validate_denominator",
]
