"""
Contract Validation Module

Модуль для валидации JSON контрактов дробей и записей вычислений.
"""

from .validators import (
    CalculationRecordValidator,
    ContractValidator,
    FractionValidator,
    SchemaLoader,
    validate_calculation_record,
    validate_fraction,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FractionValidator",
    "CalculationRecordValidator",
    # Functions
    "validate_fraction",
    "validate_calculation_record",
]
