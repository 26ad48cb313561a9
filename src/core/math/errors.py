"""
BigInt Errors — Иерархия исключений арифметики произвольной точности

Все ошибки восстанавливаемые: вызывающий код получает typed exception,
процесс никогда не завершается.

Виды ошибок:
- InvalidDigitString: строка не является десятичным числом
- DivisionByZero: делитель равен нулю (оба варианта деления)
"""


class BigIntError(ValueError):
    """Базовое исключение для всех ошибок BigInt."""

    pass


class InvalidDigitString(BigIntError):
    """
    Невалидная строка при конструировании BigInt.

    Возникает при:
    1. Пустой строке или строке из одного знака "-"
    2. Ведущем "+" (не поддерживается)
    3. Любом не-цифровом символе после необязательного "-"
    """

    pass


class DivisionByZero(BigIntError, ZeroDivisionError):
    """Деление BigInt на ноль (divide_by_int или divide)."""

    pass
