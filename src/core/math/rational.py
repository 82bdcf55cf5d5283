"""
Rational Primitives — целочисленная арифметика для дробей

Модуль содержит чистые целочисленные функции, на которых построена
нормализация и арифметика Fraction:
- НОД (алгоритм Евклида)
- НОК через НОД
- Проверка знаменателя

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd(0, b) == b, gcd(a, 0) == a (стандартное соглашение Евклида)
2. Результаты gcd/lcm всегда неотрицательные
3. Все функции детерминированы и не имеют побочных эффектов
"""

from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Сообщение об ошибке для нулевого знаменателя
ZERO_DENOMINATOR_MESSAGE: Final[str] = "Denominator cannot be zero."


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZeroError(ZeroDivisionError):
    """
    Попытка построить дробь с нулевым знаменателем.

    Возникает как при прямом создании Fraction(n, 0), так и при делении
    на дробь с нулевым числителем (перекрёстное умножение даёт знаменатель 0).

    Наследуется от ZeroDivisionError, поэтому pydantic-валидаторы
    пропускают её наружу без оборачивания в ValidationError.
    """

    def __init__(self, message: str = ZERO_DENOMINATOR_MESSAGE):
        super().__init__(message)


# =============================================================================
# НОД / НОК
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида).

    Итеративно заменяет (a, b) на (b, a mod b), пока b != 0.

    Args:
        a: Первое неотрицательное целое
        b: Второе неотрицательное целое

    Returns:
        НОД(a, b) >= 0

    Raises:
        ValueError: Если один из аргументов отрицательный

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(0, 5)
        5
        >>> gcd(7, 0)
        7
        >>> gcd(0, 0)
        0
    """
    if a < 0 or b < 0:
        raise ValueError(f"gcd requires non-negative arguments, got ({a}, {b})")

    while b > 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное: abs(a * b) / gcd(a, b).

    Знак аргументов не важен. Для знаменателей дробей (всегда > 0)
    деление на ноль невозможно.

    Args:
        a: Первое целое
        b: Второе целое

    Returns:
        НОК(a, b) >= 0

    Raises:
        ValueError: Если оба аргумента равны нулю

    Examples:
        >>> lcm(4, 6)
        12
        >>> lcm(-3, 5)
        15
        >>> lcm(0, 5)
        0
    """
    divisor = gcd(abs(a), abs(b))
    if divisor == 0:
        raise ValueError("lcm is undefined for (0, 0)")
    return abs(a * b) // divisor


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_denominator(denominator: int) -> None:
    """
    Проверка, что знаменатель не равен нулю.

    Args:
        denominator: Проверяемый знаменатель

    Raises:
        DivisionByZeroError: Если denominator == 0
    """
    if denominator == 0:
        raise DivisionByZeroError()


def normalize_pair(numerator: int, denominator: int) -> tuple[int, int]:
    """
    Приведение пары (числитель, знаменатель) к каноническому виду.

    Алгоритм:
        1. Знак переносится в числитель (знаменатель становится > 0)
        2. Обе части делятся на gcd(|n|, |d|)

    Для числителя 0 gcd(0, d) == d, поэтому знаменатель сокращается до 1.

    Args:
        numerator: Любое целое
        denominator: Любое ненулевое целое

    Returns:
        (numerator, denominator) в сокращённой форме, denominator > 0

    Raises:
        DivisionByZeroError: Если denominator == 0

    Examples:
        >>> normalize_pair(2, 4)
        (1, 2)
        >>> normalize_pair(3, -9)
        (-1, 3)
        >>> normalize_pair(0, -7)
        (0, 1)
    """
    validate_denominator(denominator)

    if denominator < 0:
        numerator = -numerator
        denominator = -denominator

    c = gcd(abs(numerator), denominator)
    return numerator // c, denominator // c
