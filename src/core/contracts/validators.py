"""
JSON Schema контракты финансового ядра

Каждый контракт описывает wire-форму одного запроса или снапшота
(contracts/schema/<имя>.json, Draft 2020-12). Контракт проверяет только
форму: типы, обязательные поля, диапазон uint256. Семантические проверки
(свежесть фида, знак цены, минимальные суммы) выполняют evaluator'ы.

Контракты:
- mint_request
- redeem_request
- feed_reading
- rate_curve_params
- collateral_snapshot
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Final, Iterator, Optional, Tuple

import jsonschema
from jsonschema import Draft202012Validator

CONTRACT_SCHEMAS: Final[Tuple[str, ...]] = (
    "mint_request",
    "redeem_request",
    "feed_reading",
    "rate_curve_params",
    "collateral_snapshot",
)

# <repo>/contracts/schema
_DEFAULT_SCHEMA_DIR: Final[Path] = Path(__file__).resolve().parents[3] / "contracts" / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Чтение и meta-валидация файлов схем с кэшированием по имени."""

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or _DEFAULT_SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без расширения.

        Raises:
            FileNotFoundError: Нет файла <schema_name>.json
            ValueError: Файл не является корректной Draft 2020-12 схемой
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class ContractValidator:
    """Проверка данных против одного контракта."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение контракта
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self._validator.iter_errors(data)


_VALIDATORS: Dict[str, ContractValidator] = {}


def contract_validator(schema_name: str) -> ContractValidator:
    """Валидатор контракта из стандартного каталога схем (один экземпляр на имя)."""
    validator = _VALIDATORS.get(schema_name)
    if validator is None:
        validator = ContractValidator(schema_name)
        _VALIDATORS[schema_name] = validator
    return validator


# =============================================================================
# VALIDATE_* ФУНКЦИИ
# =============================================================================


def _validator_for(schema_name: str) -> Callable[[Dict[str, Any]], None]:
    def validate(data: Dict[str, Any]) -> None:
        contract_validator(schema_name).validate(data)

    validate.__name__ = validate.__qualname__ = f"validate_{schema_name}"
    validate.__doc__ = (
        f"Проверка формы {schema_name}.\n\n"
        "Raises:\n    ValidationError: Данные не соответствуют контракту\n"
    )
    return validate


validate_mint_request = _validator_for("mint_request")
validate_redeem_request = _validator_for("redeem_request")
# Только форма; свежесть и знак проверяет oracle.feed_reader
validate_feed_reading = _validator_for("feed_reading")
validate_rate_curve_params = _validator_for("rate_curve_params")
validate_collateral_snapshot = _validator_for("collateral_snapshot")
