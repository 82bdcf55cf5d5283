"""
Operation — бинарные арифметические операции над Fraction

Символ оператора (+ - * /) отображается на метод Fraction.
Неизвестный символ не является ошибкой: вызывающий код получает None.
"""

from enum import Enum
from typing import Optional

from src.core.domain.fraction import Fraction


class Operation(str, Enum):
    """Арифметическая операция; значение enum это символ оператора"""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional["Operation"]:
        """
        Args:
            symbol: Символ оператора

        Returns:
            Operation или None для неизвестного символа
        """
        try:
            return cls(symbol)
        except ValueError:
            return None

    def apply(self, left: Fraction, right: Fraction) -> Fraction:
        """
        Применение операции к двум дробям.

        Raises:
            DivisionByZeroError: Для DIVIDE, если right.numerator == 0
        """
        if self is Operation.ADD:
            return left.add(right)
        elif self is Operation.SUBTRACT:
            return left.subtract(right)
        elif self is Operation.MULTIPLY:
            return left.multiply(right)
        else:
            return left.divide(right)
