"""
Валидация документа equivalency_options

Схема (JSON Schema Draft 2020-12) поставляется вместе с пакетом:
src/core/contracts/schema/equivalency_options.json

Порядок загрузки документа:
1. Проверка против JSON Schema (jsonschema)
2. Разбор в immutable Pydantic модель EquivalencyOptions
"""

import json
from functools import lru_cache
from importlib.resources import files
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.domain.options import EquivalencyOptions


SCHEMA_FILE = "equivalency_options.json"


# =============================================================================
# СХЕМА
# =============================================================================


def build_validator(schema: Dict[str, Any]) -> Draft202012Validator:
    """
    Создание валидатора с meta-валидацией самой схемы.

    Args:
        schema: JSON Schema как dict

    Returns:
        Draft202012Validator для схемы

    Raises:
        ValueError: Если schema не является валидной JSON Schema
    """
    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema: {e.message}") from e

    return Draft202012Validator(schema)


@lru_cache(maxsize=1)
def options_validator() -> Draft202012Validator:
    """
    Валидатор встроенной схемы equivalency_options.

    Схема читается из ресурсов пакета один раз, далее берётся из кэша.
    """
    resource = files(__package__).joinpath("schema").joinpath(SCHEMA_FILE)
    schema = json.loads(resource.read_text(encoding="utf-8"))
    return build_validator(schema)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def options_errors(data: Dict[str, Any]) -> List[ValidationError]:
    """
    Все нарушения схемы в документе (без exception).

    Returns:
        Список ValidationError, упорядоченный по JSON-пути; пустой если документ валиден
    """
    return sorted(options_validator().iter_errors(data), key=lambda e: e.json_path)


def validate_equivalency_options(data: Dict[str, Any]) -> None:
    """
    Проверка документа equivalency_options против схемы.

    Raises:
        ValidationError: Если документ не соответствует схеме
    """
    options_validator().validate(data)


def load_equivalency_options(data: Dict[str, Any]) -> EquivalencyOptions:
    """
    Проверка документа и разбор в EquivalencyOptions.

    Args:
        data: Документ настроек (dict, например из json.load)

    Returns:
        Immutable EquivalencyOptions

    Raises:
        ValidationError: Если документ не соответствует схеме
        pydantic.ValidationError: Если нарушено ограничение модели
    """
    validate_equivalency_options(data)
    return EquivalencyOptions.model_validate(data)
