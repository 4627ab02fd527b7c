"""
Errors — иерархия исключений fractionkit

Все ошибки арифметики дробей наследуются от FractionError, поэтому
вызывающий код может перехватить их одним except.

Иерархия:
    FractionError (базовый класс)
    ├── InvalidFractionError  - нулевой знаменатель при конструировании
    ├── DivisionByZeroError   - деление на дробь с нулевым числителем
    ├── FractionOverflowError - выход за диапазон целочисленной ширины
    ├── NotIntegralError      - точная конверсия нецелой дроби в int
    └── FractionParseError    - некорректная текстовая запись дроби

Стандартные базовые классы (ZeroDivisionError, OverflowError, ValueError)
добавлены, чтобы ошибки ловились и привычным для Python способом.
"""

from enum import Enum


class FractionError(Exception):
    """Базовое исключение fractionkit."""

    pass


class InvalidFractionError(FractionError, ZeroDivisionError):
    """
    Попытка построить дробь с нулевым знаменателем.

    Examples:
        >>> Fraction(1, 0)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidFractionError: Fraction cannot have a zero denominator: 1/0
    """

    pass


class DivisionByZeroError(FractionError, ZeroDivisionError):
    """Деление на нулевую дробь (или reciprocal() от нуля)."""

    pass


class FractionOverflowError(FractionError, OverflowError):
    """
    Промежуточный или итоговый результат не помещается в целочисленную ширину.

    Переполнение никогда не "заворачивается": вместо численно неверной
    дроби всегда поднимается это исключение.
    """

    pass


class NotIntegralError(FractionError, ValueError):
    """Точная конверсия в int невозможна: знаменатель не равен 1."""

    pass


class ParseErrorKind(str, Enum):
    """Вид ошибки разбора текстовой записи дроби"""

    INCORRECT_FORM = "incorrect_form"
    ZERO_DENOMINATOR = "zero_denominator"
    NUMBER = "number"


_PARSE_MESSAGES = {
    ParseErrorKind.INCORRECT_FORM: "Incorrectly formed fraction (format should be <N>/<D> or <N>)",
    ParseErrorKind.ZERO_DENOMINATOR: "Fraction denominator cannot be zero",
    ParseErrorKind.NUMBER: "Error when parsing fraction component",
}


class FractionParseError(FractionError, ValueError):
    """
    Ошибка разбора строки вида "<int>/<int>" или "<int>".

    Attributes:
        kind: Вид ошибки (ParseErrorKind)
        text: Исходная строка

    Для kind == NUMBER исходная ошибка разбора числа доступна как __cause__.
    """

    def __init__(self, kind: ParseErrorKind, text: str):
        self.kind = kind
        self.text = text
        super().__init__(f"{_PARSE_MESSAGES[kind]}: {text!r}")

    @property
    def is_number_error(self) -> bool:
        """True если не удалось разобрать числитель или знаменатель."""
        return self.kind is ParseErrorKind.NUMBER
