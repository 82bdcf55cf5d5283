"""
Domain models and value objects.

Contains the Fraction value type, arithmetic operations and calculation records.
"""

from src.core.domain.calculation import CalculationRecord, evaluate
from src.core.domain.fraction import Fraction, FractionResult
from src.core.domain.operation import Operation
from src.core.math.rational import DivisionByZeroError

__all__ = [
    # Fraction model
    "Fraction",
    "FractionResult",
    "DivisionByZeroError",
    # Operations
    "Operation",
    "CalculationRecord",
    "evaluate",
]
