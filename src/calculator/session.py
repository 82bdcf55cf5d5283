"""
CalculatorSession — интерактивный цикл калькулятора дробей.

Цикл:
1. Приглашение, чтение дроби A, вывод "A == mixed(A)"
2. Чтение дроби B, вывод "B == mixed(B)"
3. Приглашение, чтение символа операции
4. Вычисление; неизвестный символ оставляет результат равным 0/1
5. Вывод результата и разделителя

Ввод/вывод инжектируются (TextIO), ядро (src.core) ввода/вывода не делает.
run(): единственная точка восстановления: ошибка печатается, код выхода 1.
"""

import json
from collections import deque
from typing import Optional, TextIO

from loguru import logger

from src.calculator.config import CalculatorConfig
from src.calculator.exceptions import CalculatorError
from src.calculator.reader import TokenReader
from src.core.contracts import validate_calculation_record
from src.core.domain import CalculationRecord, DivisionByZeroError, Fraction, evaluate


class CalculatorSession:
    """Сессия калькулятора поверх входного и выходного потоков."""

    def __init__(
        self,
        stdin: TextIO,
        stdout: TextIO,
        config: Optional[CalculatorConfig] = None,
    ):
        """
        Args:
            stdin: Поток ввода
            stdout: Поток вывода (диалог, результаты, сообщения об ошибках)
            config: Конфигурация (default: CalculatorConfig())
        """
        self.config = config or CalculatorConfig()
        self._reader = TokenReader(stdin)
        self._stdout = stdout

        # Последние history_limit записей; calculations считает все
        self.history: deque[CalculationRecord] = deque(maxlen=self.config.history_limit)
        self.calculations = 0

    def _say(self, text: str) -> None:
        """Текст диалога; в JSON-режиме подавляется."""
        if not self.config.json_output:
            self._stdout.write(text)

    def read_fraction(self) -> Fraction:
        """
        Raises:
            EOFError: Если ввод исчерпан
            InputFormatError: Если токен не является целым
            DivisionByZeroError: Если знаменатель равен нулю
        """
        numerator = self._reader.read_int()
        denominator = self._reader.read_int()
        return Fraction(numerator, denominator)

    def step(self) -> CalculationRecord:
        """Одна итерация цикла: две дроби, операция, результат."""
        self._say(self.config.fractions_prompt + "\n")

        left = self.read_fraction()
        self._say(left.describe() + "\n")

        right = self.read_fraction()
        self._say(right.describe() + "\n")

        self._say(self.config.operation_prompt)
        self._stdout.flush()
        symbol = self._reader.read_char()

        record = evaluate(left, symbol, right)
        if not record.recognized:
            logger.warning("Unknown operation {!r}, result left at 0/1", symbol)
            self._say(self.config.unknown_operation_message + "\n")

        logger.debug("{} {} {} = {}", left, symbol, right, record.result)

        if self.config.json_output:
            data = record.to_dict()
            validate_calculation_record(data)
            self._stdout.write(json.dumps(data) + "\n")
        else:
            self._say(record.result.describe() + "\n")
            self._say(self.config.separator)
        self._stdout.flush()

        self.history.append(record)
        self.calculations += 1
        return record

    def run(self) -> int:
        """
        Цикл до исчерпания ввода или первой ошибки.

        Returns:
            0 при исчерпании ввода, 1 при ошибке (сообщение выведено в stdout)
        """
        try:
            while True:
                self.step()
        except EOFError:
            logger.debug("Input exhausted after {} calculation(s)", self.calculations)
            return 0
        except (DivisionByZeroError, CalculatorError) as e:
            logger.error("Calculation aborted: {}", e)
            self._stdout.write(f"{e}\n")
            self._stdout.flush()
            return 1
