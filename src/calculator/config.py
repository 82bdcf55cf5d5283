"""
Конфигурация интерактивного калькулятора.

Значения по умолчанию воспроизводят классический текстовый диалог.
Переопределение через переменные окружения:
- FRACTION_CALC_LOG_LEVEL: уровень логирования loguru (default: WARNING)
- FRACTION_CALC_JSON: 1/true/yes включает вывод JSON-записей
"""

import os
from dataclasses import dataclass
from typing import Final, Mapping, Optional

# =============================================================================
# ТЕКСТЫ ДИАЛОГА
# =============================================================================

FRACTIONS_PROMPT: Final[str] = "Type in two fractions:"
OPERATION_PROMPT: Final[str] = "Operation to perform (+-*/): "
UNKNOWN_OPERATION_MESSAGE: Final[str] = "Unknown operation!"
SEPARATOR: Final[str] = "\n---\n"

# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_HISTORY_LIMIT: Final[int] = 100
LOG_LEVELS: Final[frozenset[str]] = frozenset(
    {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
)

ENV_LOG_LEVEL: Final[str] = "FRACTION_CALC_LOG_LEVEL"
ENV_JSON_OUTPUT: Final[str] = "FRACTION_CALC_JSON"

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация сессии калькулятора.

    json_output=True заменяет текстовый диалог на одну JSON-строку
    (CalculationRecord) на каждое вычисление.
    """

    fractions_prompt: str = FRACTIONS_PROMPT
    operation_prompt: str = OPERATION_PROMPT
    unknown_operation_message: str = UNKNOWN_OPERATION_MESSAGE
    separator: str = SEPARATOR
    json_output: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    history_limit: int = DEFAULT_HISTORY_LIMIT

    def __post_init__(self) -> None:
        if self.history_limit < 1:
            raise ValueError(f"history_limit must be positive, got {self.history_limit}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(LOG_LEVELS)}, got {self.log_level!r}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CalculatorConfig":
        """
        Args:
            environ: Переменные окружения (default: os.environ)

        Returns:
            Конфигурация с учётом FRACTION_CALC_* переменных

        Raises:
            ValueError: Если уровень логирования неизвестен
        """
        if environ is None:
            environ = os.environ

        log_level = environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper()
        json_output = environ.get(ENV_JSON_OUTPUT, "").strip().lower() in _TRUTHY
        return cls(json_output=json_output, log_level=log_level)
