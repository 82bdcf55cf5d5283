"""
CalculationRecord — одно вычисление вида `left op right = result`

Immutable Pydantic модель. Соответствует схеме calculation_record.json.
"""

from typing import Any

from pydantic import BaseModel, Field

from src.core.domain.fraction import Fraction
from src.core.domain.operation import Operation


class CalculationRecord(BaseModel):
    """
    Результат вычисления над двумя дробями.

    Для нераспознанного оператора recognized=False, а result равен 0/1.
    """

    left: Fraction = Field(..., description="Левый операнд")
    operator: str = Field(..., min_length=1, max_length=1, description="Символ оператора")
    right: Fraction = Field(..., description="Правый операнд")
    result: Fraction = Field(default_factory=Fraction, description="Результат")
    recognized: bool = Field(..., description="Оператор распознан и применён")

    model_config = {"frozen": True}  # Immutable

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


def evaluate(left: Fraction, symbol: str, right: Fraction) -> CalculationRecord:
    """
    Вычисление `left symbol right`.

    Args:
        left: Левый операнд
        symbol: Символ оператора (один символ)
        right: Правый операнд

    Returns:
        CalculationRecord; для неизвестного символа result == Fraction()

    Raises:
        DivisionByZeroError: При делении на дробь с нулевым числителем
    """
    operation = Operation.from_symbol(symbol)
    if operation is None:
        return CalculationRecord(left=left, operator=symbol, right=right, recognized=False)

    return CalculationRecord(
        left=left,
        operator=operation.value,
        right=right,
        result=operation.apply(left, right),
        recognized=True,
    )
