"""Ошибки интерактивного калькулятора."""


class CalculatorError(Exception):
    """Базовая ошибка драйвера калькулятора"""


class InputFormatError(CalculatorError):
    """Во входном потоке встречен токен, который не является целым числом"""
