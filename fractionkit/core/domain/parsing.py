"""
Parsing — разбор текстовой записи дроби

Поддерживаемые формы (пробелы по краям отбрасываются):
- "<int>/<int>"  например "5/17", "-3/4", "3/-4"
- "<int>"        например "42" → 42/1

Целое: необязательный знак и десятичные цифры. Разбор не является
парсером выражений: "1/2 + 1/3", "1.5", "1 / 2" не поддерживаются.
"""

import re
from typing import Final, Optional

from fractionkit.core.domain.fraction import Fraction
from fractionkit.core.errors import FractionParseError, ParseErrorKind
from fractionkit.core.logging_utils import get_logger

logger = get_logger(__name__)

_INTEGER_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")

FRACTION_SEPARATOR: Final[str] = "/"


def _parse_integer(part: str) -> int:
    if _INTEGER_RE.fullmatch(part) is None:
        raise ValueError(f"invalid integer literal: {part!r}")
    return int(part)


def parse_fraction(text: str, cls: Optional[type[Fraction]] = None) -> Fraction:
    """
    Разбор строки в дробь класса cls (по умолчанию Fraction).

    Args:
        text: Строка "<int>/<int>" или "<int>"
        cls: Класс дроби (Fraction, Fraction8, Fraction16, Fraction64)

    Returns:
        Нормализованная дробь

    Raises:
        FractionParseError: INCORRECT_FORM, ZERO_DENOMINATOR или NUMBER
        FractionOverflowError: Если значения не помещаются в ширину cls

    Examples:
        >>> parse_fraction("5/17")
        Fraction(numerator=5, denominator=17)
        >>> parse_fraction("5:17")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        FractionParseError: Incorrectly formed fraction ...
    """
    target = cls or Fraction
    stripped = text.strip()
    parts = stripped.split(FRACTION_SEPARATOR)

    if len(parts) == 1:
        try:
            value = _parse_integer(parts[0])
        except ValueError as e:
            logger.debug("parse failed (form): %r", text)
            raise FractionParseError(ParseErrorKind.INCORRECT_FORM, text) from e
        return target.from_integer(value)

    if len(parts) != 2:
        logger.debug("parse failed (form): %r", text)
        raise FractionParseError(ParseErrorKind.INCORRECT_FORM, text)

    try:
        numerator = _parse_integer(parts[0])
        denominator = _parse_integer(parts[1])
    except ValueError as e:
        logger.debug("parse failed (number): %r", text)
        raise FractionParseError(ParseErrorKind.NUMBER, text) from e

    if denominator == 0:
        logger.debug("parse failed (zero denominator): %r", text)
        raise FractionParseError(ParseErrorKind.ZERO_DENOMINATOR, text)

    return target(numerator, denominator)
