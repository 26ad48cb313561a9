"""
Tests for JSON Schema Contract Validators

Тестирование контракта big_int:
- Схема поставляется внутри пакета и является валидной Draft 2020-12
- Ленивая загрузка: арифметика не читает схему
- Валидация правильных данных
- Детекция нарушений required полей, типов и pattern
- Инвариант нуля (ноль без знака)
- Интеграция с Pydantic моделью BigInt
"""

import json
from importlib import resources

import pytest
from jsonschema import Draft202012Validator, ValidationError

from src.core.contracts import (
    BIG_INT_SCHEMA_FILE,
    big_int_validator,
    validate_big_int,
)
from src.core.domain import BigInt


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_big_int():
    """Валидный big_int для тестирования."""
    return {"value": "932423400", "negative": True}


@pytest.fixture
def fresh_validator_cache():
    """Сброс кэша валидатора до и после теста."""
    big_int_validator.cache_clear()
    yield
    big_int_validator.cache_clear()


# =============================================================================
# SCHEMA RESOURCE
# =============================================================================


class TestSchemaResource:
    """Тесты схемы как package data"""

    def test_schema_shipped_inside_package(self):
        schema_file = resources.files("src.core.contracts").joinpath(BIG_INT_SCHEMA_FILE)
        assert schema_file.is_file()

    def test_schema_is_valid_draft_2020_12(self):
        schema_file = resources.files("src.core.contracts").joinpath(BIG_INT_SCHEMA_FILE)
        schema = json.loads(schema_file.read_text(encoding="utf-8"))
        Draft202012Validator.check_schema(schema)
        assert schema["title"] == "BigInt"

    def test_validator_cached(self):
        assert big_int_validator() is big_int_validator()

    def test_arithmetic_does_not_load_schema(self, fresh_validator_cache):
        a = BigInt.from_string("-900")
        a.subtract(BigInt.from_string("-1000"))
        a.multiply(a)
        assert a.to_string() == "10000"
        assert big_int_validator.cache_info().currsize == 0

    def test_schema_loaded_on_first_validation(self, fresh_validator_cache, valid_big_int):
        validate_big_int(valid_big_int)
        assert big_int_validator.cache_info().currsize == 1


# =============================================================================
# VALIDATION
# =============================================================================


class TestValidateBigInt:
    """Тесты validate_big_int"""

    def test_valid(self, valid_big_int):
        validate_big_int(valid_big_int)

    def test_zero_positive_valid(self):
        validate_big_int({"value": "0", "negative": False})

    def test_negative_zero_invalid(self):
        with pytest.raises(ValidationError):
            validate_big_int({"value": "0", "negative": True})

    @pytest.mark.parametrize("field", ["value", "negative"])
    def test_missing_required(self, valid_big_int, field):
        del valid_big_int[field]
        with pytest.raises(ValidationError, match=field):
            validate_big_int(valid_big_int)

    @pytest.mark.parametrize("value", ["", "007", "-5", "+5", "1.0", "12a"])
    def test_value_pattern(self, value):
        with pytest.raises(ValidationError):
            validate_big_int({"value": value, "negative": False})

    def test_value_type(self):
        with pytest.raises(ValidationError):
            validate_big_int({"value": 5, "negative": False})

    def test_negative_type(self):
        with pytest.raises(ValidationError):
            validate_big_int({"value": "5", "negative": "true"})

    def test_additional_properties(self, valid_big_int):
        valid_big_int["sign"] = "-"
        with pytest.raises(ValidationError):
            validate_big_int(valid_big_int)

    def test_all_errors_reported(self):
        errors = list(big_int_validator().iter_errors({"value": "x", "negative": 1}))
        assert len(errors) == 2


# =============================================================================
# PYDANTIC INTEGRATION
# =============================================================================


class TestPydanticIntegration:
    """Контракт совместим с моделью BigInt"""

    @pytest.mark.parametrize("text", ["0", "-1", "18446744073709551616", "-932423400"])
    def test_model_contract_passes_schema(self, text):
        validate_big_int(BigInt.from_string(text).to_contract())

    def test_model_dump_matches_contract(self):
        value = BigInt.from_string("-42")
        assert value.model_dump() == value.to_contract()
