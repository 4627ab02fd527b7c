"""
Checked Integers — целочисленная арифметика с контролем переполнения

Python int не ограничен по размеру, поэтому диапазон представимых значений
задаётся явно через IntegerWidth (знаковое целое из `bits` бит).

Модуль обеспечивает:
- Описание ширины целого (INT8/INT16/INT32/INT64) и её "расширенной"
  версии для промежуточных вычислений (2 * bits)
- Checked-операции add/sub/mul/neg: результат вычисляется точно, затем
  проверяется попадание в диапазон ширины
- Проверку входных значений (require_in_range)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение никогда не "заворачивается" (нет wraparound)
2. Выход за диапазон → FractionOverflowError
3. Все операции детерминированы и не имеют побочных эффектов
"""

from dataclasses import dataclass
from typing import Final

from fractionkit.core.errors import FractionOverflowError
from fractionkit.core.logging_utils import get_logger

logger = get_logger(__name__)


# =============================================================================
# ШИРИНА ЦЕЛОГО
# =============================================================================


@dataclass(frozen=True)
class IntegerWidth:
    """
    Знаковое целое фиксированной ширины (дополнительный код).

    Диапазон: [-2**(bits-1), 2**(bits-1) - 1]
    """

    bits: int

    def __post_init__(self) -> None:
        if self.bits < 2:
            raise ValueError(f"bits must be >= 2, got {self.bits}")

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    def contains(self, value: int) -> bool:
        """True если value представимо в этой ширине."""
        return self.min_value <= value <= self.max_value

    def widened(self) -> "IntegerWidth":
        """
        Ширина для промежуточных вычислений (2 * bits).

        Произведение двух значений ширины `bits` всегда помещается
        в расширенную ширину, но проверка всё равно выполняется.
        """
        return IntegerWidth(self.bits * 2)

    def __str__(self) -> str:
        return f"int{self.bits}"


INT8: Final[IntegerWidth] = IntegerWidth(8)
INT16: Final[IntegerWidth] = IntegerWidth(16)
INT32: Final[IntegerWidth] = IntegerWidth(32)
INT64: Final[IntegerWidth] = IntegerWidth(64)

# Ширина хранения по умолчанию
DEFAULT_WIDTH: Final[IntegerWidth] = INT32


# =============================================================================
# ПРОВЕРКА ДИАПАЗОНА
# =============================================================================


def require_in_range(value: int, width: IntegerWidth, name: str = "value") -> int:
    """
    Проверка, что value помещается в ширину.

    Args:
        value: Проверяемое целое
        width: Ширина
        name: Имя значения (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        FractionOverflowError: Если value вне [width.min_value, width.max_value]

    Examples:
        >>> require_in_range(127, INT8)
        127
        >>> require_in_range(128, INT8)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        FractionOverflowError: value 128 does not fit int8 [-128, 127]
    """
    if not width.contains(value):
        _raise_overflow(name, value, width)
    return value


def _raise_overflow(name: str, value: int, width: IntegerWidth) -> None:
    logger.debug("overflow: %s=%d outside %s", name, value, width)
    raise FractionOverflowError(
        f"{name} {value} does not fit {width} [{width.min_value}, {width.max_value}]"
    )


# =============================================================================
# CHECKED-ОПЕРАЦИИ
# =============================================================================
# Сообщение об ошибке формируется только при переполнении.


def checked_add(a: int, b: int, width: IntegerWidth) -> int:
    """a + b с проверкой переполнения."""
    result = a + b
    if not width.contains(result):
        _raise_overflow(f"sum {a} + {b} =", result, width)
    return result


def checked_sub(a: int, b: int, width: IntegerWidth) -> int:
    """a - b с проверкой переполнения."""
    result = a - b
    if not width.contains(result):
        _raise_overflow(f"difference {a} - {b} =", result, width)
    return result


def checked_mul(a: int, b: int, width: IntegerWidth) -> int:
    """a * b с проверкой переполнения."""
    result = a * b
    if not width.contains(result):
        _raise_overflow(f"product {a} * {b} =", result, width)
    return result


def checked_neg(a: int, width: IntegerWidth) -> int:
    """
    -a с проверкой переполнения.

    В дополнительном коде -min_value не представимо:
    checked_neg(-128, INT8) → FractionOverflowError.
    """
    result = -a
    if not width.contains(result):
        _raise_overflow(f"negation -({a}) =", result, width)
    return result
