"""
JSON Schema Contract Validators

Контракт сериализованного HugeNumber: {"mantissa": <number>, "exponent": <integer>}.
Схема лежит рядом с модулем (schema/huge_number.json) и проверяется
Draft 2020-12 мета-схемой при загрузке.

Каноничность пары контракт не требует: from_dict нормализует вход,
а NaN/Inf отсекает pydantic модель.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator

HUGE_NUMBER_SCHEMA = "huge_number"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Загрузчик и кэш JSON Schema файлов из одного каталога."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Raises:
            FileNotFoundError: Если файла нет
            ValueError: Если файл не проходит meta-validation
        """
        if schema_name not in self._schemas:
            schema_path = self._schema_dir / f"{schema_name}.json"
            if not schema_path.exists():
                raise FileNotFoundError(f"Schema not found: {schema_path}")

            schema = json.loads(schema_path.read_text(encoding="utf-8"))
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e
            self._schemas[schema_name] = schema

        return self._schemas[schema_name]


# =============================================================================
# HUGE NUMBER CONTRACT
# =============================================================================


class HugeNumberValidator:
    """
    Валидатор сериализованного HugeNumber.

    Args:
        loader: Источник схем (по умолчанию schema/ рядом с модулем)
    """

    def __init__(self, loader: SchemaLoader | None = None):
        self.schema = (loader or SchemaLoader()).load_schema(HUGE_NUMBER_SCHEMA)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первое найденное нарушение
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        """Все нарушения контракта, а не только первое."""
        return self._validator.iter_errors(data)


_VALIDATOR: HugeNumberValidator | None = None


def validate_huge_number(data: Dict[str, Any]) -> None:
    """
    Проверка payload против huge_number.json (валидатор создаётся один раз).

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    global _VALIDATOR
    if _VALIDATOR is None:
        _VALIDATOR = HugeNumberValidator()
    _VALIDATOR.validate(data)
