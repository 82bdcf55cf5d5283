"""
Тесты для модуля Rational Primitives

Проверяет:
1. НОД (алгоритм Евклида) и соглашение gcd(0, b) == b
2. НОК через НОД
3. Проверку знаменателя
4. Нормализацию пары (знак, сокращение)
"""

import pytest

from src.core.math import (
    ZERO_DENOMINATOR_MESSAGE,
    DivisionByZeroError,
    gcd,
    lcm,
    normalize_pair,
    validate_denominator,
)

# =============================================================================
# ТЕСТЫ НОД
# =============================================================================


class TestGcd:
    """Тесты для gcd"""

    def test_common_divisor(self) -> None:
        """Общий делитель находится"""
        assert gcd(12, 18) == 6
        assert gcd(18, 12) == 6
        assert gcd(100, 75) == 25

    def test_coprime(self) -> None:
        """Взаимно простые числа дают 1"""
        assert gcd(7, 9) == 1
        assert gcd(1, 1000) == 1

    def test_zero_argument_returns_other(self) -> None:
        """gcd(0, b) == b и gcd(a, 0) == a"""
        assert gcd(0, 5) == 5
        assert gcd(7, 0) == 7
        assert gcd(0, 0) == 0

    def test_equal_arguments(self) -> None:
        """gcd(a, a) == a"""
        assert gcd(42, 42) == 42

    def test_large_values(self) -> None:
        """Python int не переполняется"""
        big = 2**80
        assert gcd(big * 3, big * 5) == big

    def test_negative_raises(self) -> None:
        """Отрицательные аргументы отклоняются"""
        with pytest.raises(ValueError, match="non-negative"):
            gcd(-4, 6)

        with pytest.raises(ValueError, match="non-negative"):
            gcd(4, -6)


# =============================================================================
# ТЕСТЫ НОК
# =============================================================================


class TestLcm:
    """Тесты для lcm"""

    def test_basic(self) -> None:
        assert lcm(4, 6) == 12
        assert lcm(2, 3) == 6
        assert lcm(5, 5) == 5

    def test_sign_ignored(self) -> None:
        """Результат всегда неотрицательный"""
        assert lcm(-3, 5) == 15
        assert lcm(3, -5) == 15
        assert lcm(-3, -5) == 15

    def test_one_zero_argument(self) -> None:
        assert lcm(0, 5) == 0

    def test_both_zero_raises(self) -> None:
        """lcm(0, 0) не определён"""
        with pytest.raises(ValueError, match="undefined"):
            lcm(0, 0)


# =============================================================================
# ТЕСТЫ НОРМАЛИЗАЦИИ
# =============================================================================


class TestValidateDenominator:
    """Тесты для validate_denominator"""

    def test_nonzero_passes(self) -> None:
        validate_denominator(1)
        validate_denominator(-3)

    def test_zero_raises(self) -> None:
        with pytest.raises(DivisionByZeroError, match="Denominator cannot be zero"):
            validate_denominator(0)

    def test_error_is_zero_division(self) -> None:
        """DivisionByZeroError совместима с ZeroDivisionError"""
        with pytest.raises(ZeroDivisionError):
            validate_denominator(0)

    def test_default_message(self) -> None:
        assert str(DivisionByZeroError()) == ZERO_DENOMINATOR_MESSAGE


class TestNormalizePair:
    """Тесты для normalize_pair"""

    def test_reduction(self) -> None:
        assert normalize_pair(2, 4) == (1, 2)
        assert normalize_pair(6, 9) == (2, 3)

    def test_sign_moves_to_numerator(self) -> None:
        assert normalize_pair(3, -9) == (-1, 3)
        assert normalize_pair(-3, -9) == (1, 3)
        assert normalize_pair(-3, 9) == (-1, 3)

    def test_zero_numerator_reduces_denominator_to_one(self) -> None:
        assert normalize_pair(0, 7) == (0, 1)
        assert normalize_pair(0, -7) == (0, 1)

    def test_zero_denominator_raises(self) -> None:
        with pytest.raises(DivisionByZeroError):
            normalize_pair(1, 0)
