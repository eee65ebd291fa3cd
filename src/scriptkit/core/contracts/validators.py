"""
JSON Schema Contract Validators

Валидация JSON данных (экспорт графиков, сохранения, произвольные файлы)
по формальным JSON Schema контрактам с помощью jsonschema (Draft 2020-12).

Встроенные схемы (schema/*.json рядом с модулем):
- amortization_schedule.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from scriptkit.core.errors import ContractViolation, InvalidArgumentError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик встроенных JSON Schema файлов.

    Схемы лежат в schema/ относительно этого модуля и кэшируются после
    первой загрузки.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema по имени без расширения.

        Raises:
            InvalidArgumentError: схема не найдена
            ValueError: файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise InvalidArgumentError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation самой схемы
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор данных против JSON Schema.

    Можно создать по имени встроенной схемы или передать схему напрямую.
    """

    def __init__(
        self,
        schema_name: Optional[str] = None,
        schema: Optional[Dict[str, Any]] = None,
    ):
        if (schema_name is None) == (schema is None):
            raise InvalidArgumentError("exactly one of schema_name or schema is required")

        if schema is None:
            self.schema_name = schema_name
            self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        else:
            try:
                Draft202012Validator.check_schema(schema)
            except jsonschema.SchemaError as e:
                raise InvalidArgumentError(f"Invalid JSON Schema: {e.message}") from e
            self.schema_name = schema.get("title", "inline")
            self.schema = schema

        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            ContractViolation: данные не соответствуют схеме
        """
        try:
            self.validator.validate(data)
        except ValidationError as e:
            path = "/".join(str(p) for p in e.absolute_path) or "<root>"
            raise ContractViolation(
                f"{self.schema_name}: {e.message} (at {path})"
            ) from e

    def is_valid(self, data: Any) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class AmortizationScheduleValidator(ContractValidator):
    """Валидатор экспорта AmortizationSchedule (model_dump(mode='json'))."""

    def __init__(self):
        super().__init__("amortization_schedule")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_amortization_schedule(data: Dict[str, Any]) -> None:
    """
    Raises:
        ContractViolation: данные не соответствуют схеме
    """
    AmortizationScheduleValidator().validate(data)


def validate_against(data: Any, schema: Dict[str, Any]) -> None:
    """
    Валидация данных против произвольной схемы.

    Raises:
        InvalidArgumentError: сама схема невалидна
        ContractViolation: данные не соответствуют схеме
    """
    ContractValidator(schema=schema).validate(data)
