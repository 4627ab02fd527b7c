"""
Normalizer — приведение пары (числитель, знаменатель) к каноническому виду

Каноническая форма дроби n/d:
1. d > 0, знак хранится в числителе
2. gcd(|n|, d) == 1; ноль всегда 0/1
3. n и d помещаются в ширину хранения

Все публичные операции над дробями проходят через normalize() перед
возвратом результата, поэтому ненормализованная дробь снаружи не видна.

Входные значения могут быть "сырыми" результатами промежуточных
вычислений, поэтому на входе допускается расширенная ширина
(width.widened()), а на выходе требуется ширина хранения.
"""

from fractionkit.core.errors import InvalidFractionError
from fractionkit.core.logging_utils import get_logger
from fractionkit.core.math.checked_int import (
    IntegerWidth,
    checked_neg,
    require_in_range,
)

logger = get_logger(__name__)


def _gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида, повторяемый остаток).

    Ожидает a >= 0, b > 0; результат всегда >= 1.
    """
    while b:
        a, b = b, a % b
    return a


def normalize(numerator: int, denominator: int, width: IntegerWidth) -> tuple[int, int]:
    """
    Нормализация дроби numerator/denominator.

    Алгоритм:
        1. denominator == 0 → InvalidFractionError
        2. denominator < 0 → оба знака меняются (checked, расширенная ширина)
        3. numerator == 0 → (0, 1) без вычисления GCD
        4. g = gcd(|numerator|, denominator), деление обоих на g
        5. результат должен помещаться в ширину хранения

    Args:
        numerator: Числитель (любой знак)
        denominator: Знаменатель (ненулевой)
        width: Ширина хранения

    Returns:
        Кортеж (numerator, denominator) в канонической форме

    Raises:
        InvalidFractionError: Если denominator == 0
        FractionOverflowError: Если входы не помещаются в расширенную ширину
            или сокращённая дробь не помещается в ширину хранения

    Examples:
        >>> normalize(14, 24, INT32)
        (7, 12)
        >>> normalize(1, -5, INT32)
        (-1, 5)
        >>> normalize(0, -7, INT32)
        (0, 1)
    """
    wide = width.widened()
    require_in_range(numerator, wide, name="numerator")
    require_in_range(denominator, wide, name="denominator")

    if denominator == 0:
        logger.debug("invalid fraction: %d/0", numerator)
        raise InvalidFractionError(
            f"Fraction cannot have a zero denominator: {numerator}/{denominator}"
        )

    if denominator < 0:
        numerator = checked_neg(numerator, wide)
        denominator = checked_neg(denominator, wide)

    if numerator == 0:
        return 0, 1

    g = _gcd(abs(numerator), denominator)
    # Деление на GCD только уменьшает модуль
    numerator //= g
    denominator //= g

    require_in_range(numerator, width, name="reduced numerator")
    require_in_range(denominator, width, name="reduced denominator")
    return numerator, denominator
