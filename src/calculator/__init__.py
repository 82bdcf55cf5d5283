"""Interactive fraction calculator: driver over the src.core value types.

Reads two fractions and an operator per iteration, prints the reduced and
mixed-number forms of the operands and the result.
"""

from .config import CalculatorConfig
from .exceptions import CalculatorError, InputFormatError
from .reader import TokenReader
from .session import CalculatorSession

__all__ = [
    "CalculatorConfig",
    "CalculatorError",
    "InputFormatError",
    "TokenReader",
    "CalculatorSession",
]
