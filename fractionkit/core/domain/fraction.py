"""
Fraction — точная рациональная дробь с контролем переполнения

Immutable Pydantic модель значения n/d:
- numerator: целое со знаком (знак дроби хранится только здесь)
- denominator: целое > 0
- дробь всегда сокращена (gcd(|n|, d) == 1), ноль — это 0/1

Арифметика (+, -, *, /, унарный -) и сравнение выполняются точно:
промежуточные произведения и суммы считаются в расширенной ширине
(2 * bits) checked-операциями, итог проходит через normalize(), который
требует попадания в ширину хранения. Float внутри не используется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ненормализованная дробь никогда не возвращается наружу
2. Переполнение → FractionOverflowError (никогда не wraparound)
3. Нулевой знаменатель → InvalidFractionError, деление на ноль → DivisionByZeroError
4. Каждая операция возвращает новый экземпляр (frozen=True)

Ширины хранения: Fraction (int32, по умолчанию), Fraction8, Fraction16,
Fraction64. Дроби разных классов между собой не смешиваются; int
приводится автоматически.
"""

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, Field, StrictInt, model_validator

from fractionkit.core.errors import (
    DivisionByZeroError,
    NotIntegralError,
)
from fractionkit.core.logging_utils import get_logger
from fractionkit.core.math.checked_int import (
    INT8,
    INT16,
    INT32,
    INT64,
    IntegerWidth,
    checked_add,
    checked_mul,
    checked_neg,
    checked_sub,
    require_in_range,
)
from fractionkit.core.math.normalizer import normalize

logger = get_logger(__name__)


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction(BaseModel):
    """
    Обыкновенная дробь numerator/denominator шириной int32.

    Конструирование:
        >>> Fraction(14, 24)
        Fraction(numerator=7, denominator=12)
        >>> Fraction(1, -5)
        Fraction(numerator=-1, denominator=5)
        >>> Fraction(5)
        Fraction(numerator=5, denominator=1)

    Десериализация (model_validate / model_validate_json) также
    нормализует значения.
    """

    WIDTH: ClassVar[IntegerWidth] = INT32

    numerator: StrictInt = Field(..., description="Числитель (знак дроби)")
    denominator: StrictInt = Field(..., gt=0, description="Знаменатель (всегда > 0)")

    model_config = {"frozen": True, "extra": "forbid"}  # Immutable

    def __init__(self, *args: int, **data: Any) -> None:
        """
        Позиционная форма: Fraction(n, d) или Fraction(n) == n/1.

        Знаменатель по умолчанию подставляется только для позиционного
        вызова; keyword и dict вход (model_validate) требует оба поля.
        """
        if len(args) > 2:
            raise TypeError(f"{type(self).__name__} takes at most 2 positional arguments")
        if args:
            names = ("numerator", "denominator")[: len(args)]
            for name in names:
                if name in data:
                    raise TypeError(f"{type(self).__name__} got multiple values for {name!r}")
            data.update(zip(names, args))
            data.setdefault("denominator", 1)
        super().__init__(**data)

    def model_copy(
        self, *, update: Optional[dict[str, Any]] = None, deep: bool = False
    ) -> "Fraction":
        """
        Копия дроби. Поля из update проходят ту же нормализацию,
        что и при конструировании.

        Raises:
            InvalidFractionError: Если update задаёт нулевой знаменатель
        """
        if update:
            return type(self)(**{**self.model_dump(), **update})
        return super().model_copy(deep=deep)

    @model_validator(mode="before")
    @classmethod
    def _normalize_input(cls, data: Any) -> Any:
        """
        Нормализация входа до проверки полей.

        Нецелые значения пропускаются без изменений, их отклонит
        строгая проверка StrictInt.
        """
        if not isinstance(data, dict):
            return data

        numerator = data.get("numerator")
        denominator = data.get("denominator")
        if not (_is_plain_int(numerator) and _is_plain_int(denominator)):
            return data

        require_in_range(numerator, cls.WIDTH, name="numerator")
        require_in_range(denominator, cls.WIDTH, name="denominator")
        numerator, denominator = normalize(numerator, denominator, cls.WIDTH)
        return {**data, "numerator": numerator, "denominator": denominator}

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def _from_raw(cls, numerator: int, denominator: int) -> "Fraction":
        """
        Единая точка выхода арифметики: сырые значения расширенной
        ширины → normalize() → экземпляр без повторной валидации.
        """
        numerator, denominator = normalize(numerator, denominator, cls.WIDTH)
        return cls.model_construct(numerator=numerator, denominator=denominator)

    @classmethod
    def from_integer(cls, value: int) -> "Fraction":
        """
        Дробь value/1.

        Raises:
            FractionOverflowError: Если value не помещается в ширину
        """
        if not _is_plain_int(value):
            raise TypeError(f"from_integer expects int, got {type(value).__name__}")
        require_in_range(value, cls.WIDTH, name="integer")
        return cls.model_construct(numerator=value, denominator=1)

    @classmethod
    def parse(cls, text: str) -> "Fraction":
        """Разбор строки "<int>/<int>" или "<int>" (см. parse_fraction)."""
        from fractionkit.core.domain.parsing import parse_fraction

        return parse_fraction(text, cls)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    def as_tuple(self) -> tuple[int, int]:
        """Кортеж (numerator, denominator)."""
        return self.numerator, self.denominator

    def is_proper(self) -> bool:
        """True если |numerator| < denominator (правильная дробь)."""
        return abs(self.numerator) < self.denominator

    def is_integer(self) -> bool:
        return self.denominator == 1

    def is_zero(self) -> bool:
        return self.numerator == 0

    def __bool__(self) -> bool:
        return self.numerator != 0

    # -------------------------------------------------------------------------
    # Приведение операндов
    # -------------------------------------------------------------------------

    def _coerce(self, other: Any) -> Optional["Fraction"]:
        """
        Приведение второго операнда к классу self.

        Returns:
            Дробь того же класса, либо None если операнд не поддерживается
            (float, дробь другой ширины и т.п.)
        """
        if type(other) is type(self):
            return other
        if _is_plain_int(other):
            return type(self).from_integer(other)
        return None

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def _add(self, other: "Fraction") -> "Fraction":
        wide = self.WIDTH.widened()
        n1, d1 = self.as_tuple()
        n2, d2 = other.as_tuple()
        numerator = checked_add(checked_mul(n1, d2, wide), checked_mul(n2, d1, wide), wide)
        return self._from_raw(numerator, checked_mul(d1, d2, wide))

    def _sub(self, other: "Fraction") -> "Fraction":
        wide = self.WIDTH.widened()
        n1, d1 = self.as_tuple()
        n2, d2 = other.as_tuple()
        numerator = checked_sub(checked_mul(n1, d2, wide), checked_mul(n2, d1, wide), wide)
        return self._from_raw(numerator, checked_mul(d1, d2, wide))

    def _mul(self, other: "Fraction") -> "Fraction":
        wide = self.WIDTH.widened()
        n1, d1 = self.as_tuple()
        n2, d2 = other.as_tuple()
        return self._from_raw(checked_mul(n1, n2, wide), checked_mul(d1, d2, wide))

    def _div(self, other: "Fraction") -> "Fraction":
        if other.numerator == 0:
            logger.debug("division by zero: %s / %s", self, other)
            raise DivisionByZeroError(f"Cannot divide {self} by zero")

        wide = self.WIDTH.widened()
        n1, d1 = self.as_tuple()
        n2, d2 = other.as_tuple()
        # d1 * n2 может быть < 0, знак переносит normalize()
        return self._from_raw(checked_mul(n1, d2, wide), checked_mul(d1, n2, wide))

    def __add__(self, other: Any) -> "Fraction":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._add(rhs)

    def __radd__(self, other: Any) -> "Fraction":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._add(self)

    def __sub__(self, other: Any) -> "Fraction":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._sub(rhs)

    def __rsub__(self, other: Any) -> "Fraction":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._sub(self)

    def __mul__(self, other: Any) -> "Fraction":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._mul(rhs)

    def __rmul__(self, other: Any) -> "Fraction":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._mul(self)

    def __truediv__(self, other: Any) -> "Fraction":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._div(rhs)

    def __rtruediv__(self, other: Any) -> "Fraction":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs._div(self)

    def __neg__(self) -> "Fraction":
        """
        -n/d. Единственный случай переполнения: n == WIDTH.min_value.
        """
        return self._from_raw(checked_neg(self.numerator, self.WIDTH), self.denominator)

    def __pos__(self) -> "Fraction":
        return self

    def __abs__(self) -> "Fraction":
        return -self if self.numerator < 0 else self

    def reciprocal(self) -> "Fraction":
        """
        Обратная дробь 1/f, знак переносится в числитель.

        Raises:
            DivisionByZeroError: Если дробь равна нулю
            FractionOverflowError: Если числитель равен WIDTH.min_value
        """
        if self.numerator == 0:
            raise DivisionByZeroError("Cannot take the reciprocal of zero")
        return self._from_raw(self.denominator, self.numerator)

    # -------------------------------------------------------------------------
    # Сравнение (точное, перекрёстным умножением)
    # -------------------------------------------------------------------------

    def _cross(self, other: Any) -> Optional[tuple[int, int]]:
        """
        Члены перекрёстного умножения (n1 * d2, n2 * d1).

        int вне ширины хранения не приводится к дроби: k сравнивается
        с n/d точно как n против k * d.

        Returns:
            Пара целых, либо None если операнд не поддерживается
        """
        if _is_plain_int(other):
            return self.numerator, other * self.denominator
        if type(other) is not type(self):
            return None
        wide = self.WIDTH.widened()
        return (
            checked_mul(self.numerator, other.denominator, wide),
            checked_mul(other.numerator, self.denominator, wide),
        )

    def compare(self, other: Any) -> int:
        """
        Трёхзначное сравнение.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other

        Raises:
            TypeError: Если other не int и не дробь того же класса
        """
        terms = self._cross(other)
        if terms is None:
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        a, b = terms
        return (a > b) - (a < b)

    def __eq__(self, other: Any) -> bool:
        if type(other) is type(self):
            # Канонические формы равны тогда и только тогда, когда равны значения
            return self.as_tuple() == other.as_tuple()
        if _is_plain_int(other):
            return self.denominator == 1 and self.numerator == other
        return NotImplemented

    def __hash__(self) -> int:
        if self.denominator == 1:
            return hash(self.numerator)
        return hash((type(self).__name__, self.numerator, self.denominator))

    def __lt__(self, other: Any) -> bool:
        terms = self._cross(other)
        if terms is None:
            return NotImplemented
        return terms[0] < terms[1]

    def __le__(self, other: Any) -> bool:
        terms = self._cross(other)
        if terms is None:
            return NotImplemented
        return terms[0] <= terms[1]

    def __gt__(self, other: Any) -> bool:
        terms = self._cross(other)
        if terms is None:
            return NotImplemented
        return terms[0] > terms[1]

    def __ge__(self, other: Any) -> bool:
        terms = self._cross(other)
        if terms is None:
            return NotImplemented
        return terms[0] >= terms[1]

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_f64_approx(self) -> float:
        """
        Приближение float: numerator / denominator.

        ВАЖНО: конверсия неточная (округление float), использовать
        только для отображения и оценок, не для дальнейших вычислений.
        """
        return self.numerator / self.denominator

    def to_integer_exact(self) -> int:
        """
        Точная конверсия в int.

        Raises:
            NotIntegralError: Если denominator != 1
        """
        if self.denominator != 1:
            raise NotIntegralError(f"{self} is not an integer")
        return self.numerator

    def to_integer_truncated(self) -> int:
        """
        Конверсия в int с отбрасыванием дробной части (округление к нулю).

        Examples:
            >>> Fraction(7, 2).to_integer_truncated()
            3
            >>> Fraction(-7, 2).to_integer_truncated()
            -3
        """
        quotient = abs(self.numerator) // self.denominator
        return -quotient if self.numerator < 0 else quotient

    def __float__(self) -> float:
        return self.to_f64_approx()

    def __int__(self) -> int:
        return self.to_integer_truncated()

    def __trunc__(self) -> int:
        return self.to_integer_truncated()

    # -------------------------------------------------------------------------
    # Текстовое представление
    # -------------------------------------------------------------------------

    def render(self, bare_integer: bool = False) -> str:
        """
        Текстовая запись "n/d".

        Args:
            bare_integer: Если True, дробь с denominator == 1
                записывается как целое ("5" вместо "5/1")
        """
        if bare_integer and self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def __str__(self) -> str:
        return self.render()


# =============================================================================
# ШИРИНЫ ХРАНЕНИЯ
# =============================================================================


class Fraction8(Fraction):
    """Дробь с числителем и знаменателем int8."""

    WIDTH: ClassVar[IntegerWidth] = INT8


class Fraction16(Fraction):
    """Дробь с числителем и знаменателем int16."""

    WIDTH: ClassVar[IntegerWidth] = INT16


class Fraction64(Fraction):
    """Дробь с числителем и знаменателем int64."""

    WIDTH: ClassVar[IntegerWidth] = INT64


Fraction32 = Fraction


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def fraction(numerator: int, denominator: int = 1) -> Fraction:
    """
    Построение нормализованной дроби int32.

    Raises:
        InvalidFractionError: Если denominator == 0
        FractionOverflowError: Если значения не помещаются в int32
    """
    return Fraction(numerator, denominator)


def from_integer(value: int) -> Fraction:
    """Дробь value/1 (int32)."""
    return Fraction.from_integer(value)
