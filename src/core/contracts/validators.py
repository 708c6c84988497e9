"""
JSON Schema контракты conductor'а

Схемы лежат в schema/ как package data и читаются через importlib.resources.
Скомпилированные Draft 2020-12 валидаторы кэшируются по имени контракта.

Контракты:
- conductor_state: результат TimeConductor.export_state()
"""

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator

CONDUCTOR_STATE_CONTRACT = "conductor_state"


@lru_cache(maxsize=None)
def load_schema(contract: str) -> Dict[str, Any]:
    """
    Чтение и meta-валидация схемы контракта.

    Raises:
        FileNotFoundError: если схемы с таким именем нет
        ValueError: если файл не является корректной JSON Schema
    """
    path = resources.files(__package__) / "schema" / f"{contract}.json"
    if not path.is_file():
        raise FileNotFoundError(f"No schema for contract '{contract}'")

    schema = json.loads(path.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema for contract '{contract}': {e.message}")
    return schema


@lru_cache(maxsize=None)
def contract_validator(contract: str) -> Draft202012Validator:
    return Draft202012Validator(load_schema(contract))


def validate_contract(contract: str, data: Any) -> None:
    """
    Raises:
        jsonschema.ValidationError: первая найденная ошибка
    """
    contract_validator(contract).validate(data)


def contract_errors(contract: str, data: Any) -> List[str]:
    """Все нарушения контракта в виде строк "path: message" (пусто если валидно)."""
    errors = []
    for error in contract_validator(contract).iter_errors(data):
        path = "/".join(str(part) for part in error.absolute_path) or "<root>"
        errors.append(f"{path}: {error.message}")
    return sorted(errors)


def validate_conductor_state(data: Any) -> None:
    validate_contract(CONDUCTOR_STATE_CONTRACT, data)
