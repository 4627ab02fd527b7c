"""
JSON Schema Contract Validators

Валидация сериализованных дробей {"numerator": n, "denominator": d}:
- структура проверяется JSON Schema контрактом (schema/fraction.json,
  Draft 2020-12) через библиотеку jsonschema
- каноническая форма (сокращение, знак в числителе) проверяется
  сравнением с результатом нормализации Fraction
- load() возвращает нормализованную дробь нужной ширины

Схемы:
- fraction.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from fractionkit.core.domain.fraction import Fraction


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем (входят в пакет).
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла с meta-валидацией.

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# FRACTION CONTRACT
# =============================================================================


class FractionValidator:
    """
    Валидатор fraction контракта.

    validate() проверяет только структуру; validate_canonical()
    дополнительно требует, чтобы payload уже был в канонической форме
    (ровно то, что выдаёт Fraction.model_dump()).
    """

    schema_name = "fraction"

    def __init__(self):
        self.schema = _SCHEMA_LOADER.load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Проверка структуры payload.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка структуры без exception."""
        return self.validator.is_valid(data)

    def load(self, data: Dict[str, Any], cls: type[Fraction] = Fraction) -> Fraction:
        """
        Структурная проверка и построение нормализованной дроби.

        Args:
            data: Payload {"numerator": n, "denominator": d}
            cls: Класс дроби (ширина хранения)

        Returns:
            Нормализованная дробь (2/4 → 1/2)

        Raises:
            ValidationError: Если данные не соответствуют схеме
            FractionOverflowError: Если значения не помещаются в ширину cls
        """
        self.validate(data)
        return cls.model_validate(data)

    def validate_canonical(self, data: Dict[str, Any], cls: type[Fraction] = Fraction) -> Fraction:
        """
        Проверка, что payload уже сокращён и знак в числителе.

        Returns:
            Дробь, совпадающая с payload

        Raises:
            ValidationError: Если структура неверна или форма не каноническая
        """
        value = self.load(data, cls)
        if value.model_dump() != data:
            raise ValidationError(
                f"Fraction {data['numerator']}/{data['denominator']} is not in "
                f"canonical form (expected {value})"
            )
        return value


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_fraction(data: Dict[str, Any], canonical: bool = False) -> None:
    """
    Валидация сериализованной дроби.

    Args:
        data: Данные для валидации
        canonical: Требовать каноническую (сокращённую) форму

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    validator = FractionValidator()
    if canonical:
        validator.validate_canonical(data)
    else:
        validator.validate(data)


def load_fraction(data: Dict[str, Any], cls: type[Fraction] = Fraction) -> Fraction:
    """Валидация payload и построение нормализованной дроби класса cls."""
    return FractionValidator().load(data, cls)


__all__ = [
    "SchemaLoader",
    "FractionValidator",
    "ValidationError",
    "load_fraction",
    "validate_fraction",
]
