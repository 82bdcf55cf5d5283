"""
TokenReader — чтение целых чисел и символов из текстового потока.

Поведение повторяет потоковое чтение `>>`:
- пробельные символы (включая переводы строк) пропускаются
- целое число: необязательный знак и цифры; чтение останавливается на
  первом нецифровом символе ("12abc" даёт 12, "abc" остаётся в потоке)
- символ: следующий непробельный символ ("+3" даёт "+", "3" остаётся)

Поток читается построчно, поэтому reader работает и с интерактивным stdin.
"""

import re
from typing import TextIO

from src.calculator.exceptions import InputFormatError

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_TOKEN_PATTERN = re.compile(r"\S+")


class TokenReader:
    """Построчный токенизатор поверх TextIO.

    На исчерпанном потоке read_int/read_char бросают EOFError.
    """

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._buffer = ""
        self._pos = 0

    def _fill(self) -> bool:
        """Подгрузка следующей строки при пустом буфере. False на EOF."""
        while self._pos >= len(self._buffer):
            line = self._stream.readline()
            if not line:
                return False
            self._buffer, self._pos = line, 0
        return True

    def _skip_whitespace(self) -> None:
        while self._fill():
            if not self._buffer[self._pos].isspace():
                return
            self._pos += 1
        raise EOFError("input exhausted")

    def read_int(self) -> int:
        """
        Returns:
            Следующее целое число из потока

        Raises:
            EOFError: Если поток исчерпан
            InputFormatError: Если следующий токен не начинается с целого
        """
        self._skip_whitespace()
        match = _INT_PATTERN.match(self._buffer, self._pos)
        if match is None:
            token = _TOKEN_PATTERN.match(self._buffer, self._pos)
            raise InputFormatError(f"Expected an integer, got {token.group()!r}")
        self._pos = match.end()
        return int(match.group())

    def read_char(self) -> str:
        """
        Returns:
            Следующий непробельный символ

        Raises:
            EOFError: Если поток исчерпан
        """
        self._skip_whitespace()
        ch = self._buffer[self._pos]
        self._pos += 1
        return ch
