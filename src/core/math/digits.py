"""
Digits — Валидация и разбор десятичных строк

Модуль превращает текст вида "-12345" в пару (negative, magnitude):
- magnitude: строка цифр '0'-'9', старшая цифра первая
- negative: True если присутствовал ведущий "-"

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. magnitude не содержит ведущих нулей (кроме ровно "0")
2. Ноль не имеет знака: magnitude == "0" → negative == False
3. Ведущий "+" запрещён, допускается только один ведущий "-"
"""

import logging
from typing import Final

from src.core.math.errors import InvalidDigitString

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Основание системы счисления (только десятичная)
DIGIT_BASE: Final[int] = 10

# Каноническое представление нуля
ZERO_MAGNITUDE: Final[str] = "0"

# Единственный допустимый знак
NEGATIVE_SIGN: Final[str] = "-"

# Символ цифры ноль (для заполнения и удаления разрядов)
DIGIT_ZERO: Final[str] = "0"

DIGIT_CHARS: Final[frozenset[str]] = frozenset("0123456789")


# =============================================================================
# ПРОВЕРКА И НОРМАЛИЗАЦИЯ
# =============================================================================


def check_digits(text: str) -> bool:
    """
    Проверка, что все символы строки являются десятичными цифрами.

    Пустая строка считается невалидной (нет цифр).

    Examples:
        >>> check_digits("12345")
        True
        >>> check_digits("90no0")
        False
        >>> check_digits("")
        False
    """
    if not text:
        return False
    return all(char in DIGIT_CHARS for char in text)


def strip_leading_zeros(magnitude: str) -> str:
    """
    Удаление ведущих нулей из magnitude.

    Если строка состоит только из нулей (или пустая), возвращает "0".

    Examples:
        >>> strip_leading_zeros("000120")
        '120'
        >>> strip_leading_zeros("0000")
        '0'
    """
    stripped = magnitude.lstrip(DIGIT_ZERO)
    return stripped or ZERO_MAGNITUDE


def normalize_sign(negative: bool, magnitude: str) -> bool:
    """Знак с учётом инварианта нуля: у "0" знака нет."""
    return negative and magnitude != ZERO_MAGNITUDE


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_digit_string(text: str) -> tuple[bool, str]:
    """
    Разбор десятичной строки в (negative, magnitude).

    Алгоритм:
    1. Необязательный один ведущий "-" снимается и запоминается как знак
    2. Остаток проверяется посимвольно; первый не-цифровой символ → ошибка
    3. Ведущие нули удаляются, знак нуля сбрасывается

    Args:
        text: Исходная строка (например, "-932423400")

    Returns:
        (negative, magnitude) в нормализованной форме

    Raises:
        InvalidDigitString: Если строка пустая, содержит только "-",
            начинается с "+" или содержит не-цифровой символ

    Examples:
        >>> parse_digit_string("-900")
        (True, '900')
        >>> parse_digit_string("0")
        (False, '0')
        >>> parse_digit_string("-000")
        (False, '0')
    """
    if not isinstance(text, str):
        raise InvalidDigitString(f"Expected str, got {type(text).__name__}")

    negative = text.startswith(NEGATIVE_SIGN)
    digits = text[1:] if negative else text

    if not digits:
        logger.debug("Rejected digit string %r: no digits", text)
        raise InvalidDigitString(f"Not a valid big int string: {text!r} has no digits")

    if not check_digits(digits):
        offset = 1 if negative else 0
        position, char = next(
            (index, char) for index, char in enumerate(digits) if char not in DIGIT_CHARS
        )
        logger.debug("Rejected digit string %r at position %d", text, position + offset)
        raise InvalidDigitString(
            f"Not a valid big int string: {text!r} has non-digit "
            f"{char!r} at position {position + offset}"
        )

    magnitude = strip_leading_zeros(digits)
    return (normalize_sign(negative, magnitude), magnitude)
