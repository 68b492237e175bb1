"""
JSON Schema Contract Validators

Валидация входных payload'ов (от data-loading коллаборатора) согласно
JSON Schema контрактам до построения доменных моделей.

Схемы (src/core/contracts/schema/, ставятся вместе с пакетом):
- portfolio.json
- market_observation.json

Схема проверяет только форму payload'а; согласованность размерностей
(N×N, одинаковые длины) проверяет модель Portfolio.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"

# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Находит схемы в schema/ рядом с этим модулем (package data).
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла (с кэшированием).

        Args:
            schema_name: Имя схемы без расширения (например, 'portfolio')

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
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
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER: SchemaLoader | None = None


def _get_schema_loader() -> SchemaLoader:
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует валидацию данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _get_schema_loader().load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class PortfolioValidator(ContractValidator):
    """Валидатор для portfolio контракта."""

    def __init__(self):
        super().__init__("portfolio")


class MarketObservationValidator(ContractValidator):
    """Валидатор для market_observation контракта."""

    def __init__(self):
        super().__init__("market_observation")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_portfolio(data: Dict[str, Any]) -> None:
    """
    Валидация portfolio payload.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    PortfolioValidator().validate(data)


def validate_market_observation(data: Dict[str, Any]) -> None:
    """
    Валидация market_observation payload.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MarketObservationValidator().validate(data)
