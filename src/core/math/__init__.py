"""
Core math modules

Беззнаковые и знаковые schoolbook-алгоритмы над десятичными magnitude.
"""

# Errors
from src.core.math.errors import (
    BigIntError,
    DivisionByZero,
    InvalidDigitString,
)

# Digits (валидация и разбор)
from src.core.math.digits import (
    DIGIT_BASE,
    DIGIT_ZERO,
    NEGATIVE_SIGN,
    ZERO_MAGNITUDE,
    check_digits,
    normalize_sign,
    parse_digit_string,
    strip_leading_zeros,
)

# Magnitude (беззнаковая арифметика)
from src.core.math.magnitude import (
    add_magnitudes,
    compare_magnitudes,
    divide_magnitude_by_int,
    divmod_magnitudes,
    equal_lengths,
    multiply_by_digit,
    multiply_magnitudes,
    subtract_magnitudes,
)

# Sign Dispatch (знаковые операции)
from src.core.math.sign_dispatch import (
    ADD_TABLE,
    SUBTRACT_TABLE,
    DispatchPlan,
    MagnitudeOp,
    MagnitudeOrder,
    SignPair,
    compare_signed,
    product_sign,
    signed_add,
    signed_subtract,
)

__all__ = [
    # Errors
    "BigIntError",
    "DivisionByZero",
    "InvalidDigitString",
    # Digits — Constants
    "DIGIT_BASE",
    "DIGIT_ZERO",
    "NEGATIVE_SIGN",
    "ZERO_MAGNITUDE",
    # Digits — Functions
    "check_digits",
    "normalize_sign",
    "parse_digit_string",
    "strip_leading_zeros",
    # Magnitude — Functions
    "add_magnitudes",
    "compare_magnitudes",
    "divide_magnitude_by_int",
    "divmod_magnitudes",
    "equal_lengths",
    "multiply_by_digit",
    "multiply_magnitudes",
    "subtract_magnitudes",
    # Sign Dispatch — Tables
    "ADD_TABLE",
    "SUBTRACT_TABLE",
    # Sign Dispatch — Types
    "DispatchPlan",
    "MagnitudeOp",
    "MagnitudeOrder",
    "SignPair",
    # Sign Dispatch — Functions
    "compare_signed",
    "product_sign",
    "signed_add",
    "signed_subtract",
]
