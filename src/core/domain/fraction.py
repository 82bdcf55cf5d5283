"""
Fraction — рациональное число в форме числитель/знаменатель

Immutable Pydantic модель. Любая пара (numerator, denominator) при создании
приводится к канонической форме:
- знак хранится только в числителе (denominator > 0)
- дробь сокращена на НОД (0 всегда хранится как 0/1)

Арифметические операции возвращают новые экземпляры и никогда не
изменяют операнды.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, Field, StrictInt, model_validator

from src.core.math import rational
from src.core.math.rational import DivisionByZeroError

_FIELD_ORDER = ("numerator", "denominator")


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# RESULT TYPE
# =============================================================================


@dataclass(frozen=True)
class FractionResult:
    """Результат операции, которая может завершиться делением на ноль.

    Ровно одно из полей value/error заполнено.
    """

    value: Optional["Fraction"] = None
    error: Optional[DivisionByZeroError] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("FractionResult requires exactly one of value or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> "Fraction":
        """
        Returns:
            value, если операция успешна

        Raises:
            DivisionByZeroError: сохранённая ошибка операции
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction(BaseModel):
    """
    Дробь в сокращённой форме с положительным знаменателем.

    Immutable модель (frozen=True): все операции создают новый экземпляр.

    Examples:
        >>> Fraction(2, 4)
        Fraction(numerator=1, denominator=2)
        >>> str(Fraction(1, 2) + Fraction(1, 3))
        '5/6'
        >>> Fraction(-7, 2).to_mixed()
        '-3 1/2'
    """

    numerator: StrictInt = Field(0, description="Числитель (несёт знак дроби)")
    denominator: StrictInt = Field(1, gt=0, description="Знаменатель (всегда > 0)")

    model_config = {"frozen": True, "extra": "forbid"}  # Immutable

    def __init__(self, *args: int, **data: Any) -> None:
        """
        Позиционная форма Fraction(numerator, denominator) в дополнение к
        именованной. Без аргументов создаёт 0/1.
        """
        if len(args) > len(_FIELD_ORDER):
            raise TypeError(
                f"Fraction takes at most {len(_FIELD_ORDER)} positional arguments "
                f"({len(args)} given)"
            )
        for name, value in zip(_FIELD_ORDER, args):
            if name in data:
                raise TypeError(f"Fraction got multiple values for argument '{name}'")
            data[name] = value
        super().__init__(**data)

    @model_validator(mode="before")
    @classmethod
    def normalize(cls, data: Any) -> Any:
        """
        Нормализация до проверки полей.

        Нецелые значения пропускаются без изменений: их отклонит StrictInt.

        Raises:
            DivisionByZeroError: Если denominator == 0
        """
        if not isinstance(data, dict):
            return data

        numerator = data.get("numerator", 0)
        denominator = data.get("denominator", 1)
        if not (_is_plain_int(numerator) and _is_plain_int(denominator)):
            return data

        numerator, denominator = rational.normalize_pair(numerator, denominator)
        return {**data, "numerator": numerator, "denominator": denominator}

    # -------------------------------------------------------------------------
    # Alternative constructors
    # -------------------------------------------------------------------------

    @classmethod
    def try_new(cls, numerator: int, denominator: int) -> FractionResult:
        """Создание без исключения для нулевого знаменателя."""
        try:
            return FractionResult(value=cls(numerator, denominator))
        except DivisionByZeroError as e:
            return FractionResult(error=e)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Fraction":
        """
        Создание из словаря контракта fraction.json.

        Значения повторно нормализуются, поэтому {"numerator": 2,
        "denominator": 4} даёт 1/2.
        """
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, int]:
        return self.model_dump()

    # -------------------------------------------------------------------------
    # GCD / LCM
    # -------------------------------------------------------------------------

    @staticmethod
    def gcd(a: int, b: int) -> int:
        return rational.gcd(a, b)

    @staticmethod
    def lcm(a: int, b: int) -> int:
        return rational.lcm(a, b)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _add_by_value(self, numerator: int, denominator: int) -> "Fraction":
        """
        Сложение с дробью numerator/denominator через общий знаменатель.

        Новый знаменатель nd = lcm(ad, bd), числители масштабируются на
        nd / собственный знаменатель.
        """
        nd = rational.lcm(self.denominator, denominator)
        ax = nd // self.denominator
        bx = nd // denominator

        nn = (self.numerator * ax) + (numerator * bx)
        return Fraction(nn, nd)

    def add(self, other: "Fraction") -> "Fraction":
        """self + other"""
        return self._add_by_value(other.numerator, other.denominator)

    def subtract(self, other: "Fraction") -> "Fraction":
        """self - other"""
        return self._add_by_value(-other.numerator, other.denominator)

    def multiply(self, other: "Fraction") -> "Fraction":
        """self * other"""
        return Fraction(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def divide(self, other: "Fraction") -> "Fraction":
        """
        self / other, то есть self * (1 / other).

        Raises:
            DivisionByZeroError: Если other.numerator == 0
        """
        return Fraction(
            self.numerator * other.denominator,
            self.denominator * other.numerator,
        )

    def try_divide(self, other: "Fraction") -> FractionResult:
        """Деление без исключения для нулевого делителя."""
        try:
            return FractionResult(value=self.divide(other))
        except DivisionByZeroError as e:
            return FractionResult(error=e)

    def __add__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.divide(other)

    # -------------------------------------------------------------------------
    # Formatting
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """
        Returns:
            "numerator/denominator" (0 выводится как "0/1")
        """
        return f"{self.numerator}/{self.denominator}"

    def to_mixed(self) -> str:
        """
        Дробь в виде смешанного числа.

        Целая часть получается делением с отбрасыванием дробной части,
        остаток выводится по модулю. Знак показывается только у целой
        части: -7/2 выводится как "-3 1/2".

        Returns:
            "i", "i n/d", "0" или "n/d" для правильной дроби
        """
        if abs(self.numerator) >= self.denominator:
            whole, remainder = divmod(abs(self.numerator), self.denominator)
            if self.numerator < 0:
                whole = -whole
            if remainder == 0:
                return f"{whole}"
            return f"{whole} {remainder}/{self.denominator}"
        elif self.numerator == 0:
            return "0"
        else:
            return self.to_string()

    def describe(self) -> str:
        """
        Returns:
            "numerator/denominator == mixed"
        """
        return f"{self.to_string()} == {self.to_mixed()}"

    def __str__(self) -> str:
        return self.to_string()
