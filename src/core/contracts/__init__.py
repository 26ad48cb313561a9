"""
Contract Validation Module

Валидация dict-представления BigInt по JSON Schema.
"""

from .validators import (
    BIG_INT_SCHEMA_FILE,
    big_int_validator,
    validate_big_int,
)

__all__ = [
    "BIG_INT_SCHEMA_FILE",
    "big_int_validator",
    "validate_big_int",
]
