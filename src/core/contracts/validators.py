"""
BigInt Contract — JSON Schema для dict-представления BigInt

Контракт {"value": str, "negative": bool} описан схемой
src/core/contracts/schema/big_int.json (Draft 2020-12), которая поставляется
как package data. Схема читается лениво при первой валидации и кэшируется.
"""

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, Final

from jsonschema import Draft202012Validator

# Файл схемы внутри пакета src.core.contracts
BIG_INT_SCHEMA_FILE: Final[str] = "schema/big_int.json"


@lru_cache(maxsize=None)
def big_int_validator() -> Draft202012Validator:
    """
    Валидатор схемы big_int (создаётся один раз).

    Raises:
        jsonschema.SchemaError: Если файл схемы сам не является валидной схемой
    """
    schema_text = (
        resources.files(__package__).joinpath(BIG_INT_SCHEMA_FILE).read_text(encoding="utf-8")
    )
    schema = json.loads(schema_text)
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def validate_big_int(data: Dict[str, Any]) -> None:
    """
    Валидация dict-представления BigInt.

    Raises:
        ValidationError: Если данные не соответствуют схеме big_int
    """
    big_int_validator().validate(data)
