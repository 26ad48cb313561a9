"""
BigInt — Целое произвольной точности в sign-magnitude представлении

Mutable Pydantic модель: magnitude хранится строкой десятичных цифр,
знак — отдельным флагом. Арифметические операции изменяют receiver
на месте (self), возвращая None; divide дополнительно возвращает остаток.

ПРАВИЛА ALIASING:
Любая бинарная операция снимает snapshot (value, negative) второго операнда
ДО изменения self, поэтому x.add(x), x.multiply(x), x.divide(x) корректны.
Экземпляры не синхронизированы: конкурентный доступ требует внешней блокировки.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. value без ведущих нулей (кроме ровно "0")
2. value == "0" → negative == False
3. После DivisionByZero receiver остаётся без изменений
"""

from typing import Any, Dict

from pydantic import BaseModel, Field, model_validator

from src.core.contracts.validators import validate_big_int
from src.core.math.digits import (
    NEGATIVE_SIGN,
    ZERO_MAGNITUDE,
    normalize_sign,
    parse_digit_string,
    strip_leading_zeros,
)
from src.core.math.errors import DivisionByZero
from src.core.math.magnitude import (
    divide_magnitude_by_int,
    divmod_magnitudes,
    multiply_magnitudes,
)
from src.core.math.sign_dispatch import (
    compare_signed,
    product_sign,
    signed_add,
    signed_subtract,
)


class BigInt(BaseModel):
    """
    Целое число неограниченной величины.

    Создаётся через BigInt.from_string (валидированный разбор) или как
    результат арифметической операции. Прямой вызов BigInt(value=..., negative=...)
    проверяется Pydantic и нормализуется так же.
    """

    value: str = Field(
        default=ZERO_MAGNITUDE,
        min_length=1,
        pattern=r"^[0-9]+$",
        description="Magnitude: десятичные цифры, старшая первая",
    )
    negative: bool = Field(default=False, description="True для отрицательных значений")

    @model_validator(mode="after")
    def normalize(self) -> "BigInt":
        """Удаление ведущих нулей и сброс знака у нуля."""
        self.value = strip_leading_zeros(self.value)
        self.negative = normalize_sign(self.negative, self.value)
        return self

    # =========================================================================
    # КОНСТРУИРОВАНИЕ
    # =========================================================================

    @classmethod
    def from_string(cls, text: str) -> "BigInt":
        """
        Валидированное создание из десятичной строки.

        Args:
            text: Строка вида "123", "-932423400" (ведущий "+" запрещён)

        Returns:
            Новый BigInt

        Raises:
            InvalidDigitString: Если строка не является десятичным числом
        """
        negative, magnitude = parse_digit_string(text)
        return cls(value=magnitude, negative=negative)

    @classmethod
    def from_int(cls, number: int) -> "BigInt":
        """Создание из Python int."""
        if isinstance(number, bool) or not isinstance(number, int):
            raise TypeError(f"Expected int, got {type(number).__name__}")
        return cls.from_string(str(number))

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "BigInt":
        """
        Создание из dict-контракта {"value": str, "negative": bool}.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме big_int
        """
        validate_big_int(data)
        return cls(value=data["value"], negative=data["negative"])

    def to_contract(self) -> Dict[str, Any]:
        """Сериализация в dict-контракт (проходит схему big_int)."""
        return {"value": self.value, "negative": self.negative}

    def snapshot(self) -> "BigInt":
        """Независимая копия для сохранения значения до мутации."""
        return self.model_copy()

    # =========================================================================
    # ПРЕДСТАВЛЕНИЕ
    # =========================================================================

    def to_string(self) -> str:
        """Цифры с ведущим "-" для отрицательных; ноль всегда "0"."""
        if self.negative:
            return NEGATIVE_SIGN + self.value
        return self.value

    def __str__(self) -> str:
        return self.to_string()

    # =========================================================================
    # СРАВНЕНИЕ И ЗНАК
    # =========================================================================

    def negate(self) -> None:
        """Смена знака на месте; ноль остаётся неотрицательным."""
        self.negative = normalize_sign(not self.negative, self.value)

    def compare_to(self, other: "BigInt") -> int:
        """
        Знаковое сравнение с other.

        Returns:
            -1 если self < other, 0 если равны, +1 если self > other
        """
        return compare_signed(self.negative, self.value, other.negative, other.value)

    # =========================================================================
    # АРИФМЕТИКА (IN-PLACE)
    # =========================================================================

    def _assign(self, negative: bool, value: str) -> None:
        self.value = value
        self.negative = normalize_sign(negative, value)

    def add(self, other: "BigInt") -> None:
        """self = self + other."""
        other_negative, other_value = other.negative, other.value
        self._assign(*signed_add(self.negative, self.value, other_negative, other_value))

    def subtract(self, other: "BigInt") -> None:
        """self = self - other (other не изменяется)."""
        other_negative, other_value = other.negative, other.value
        self._assign(*signed_subtract(self.negative, self.value, other_negative, other_value))

    def multiply(self, other: "BigInt") -> None:
        """
        self = self * other.

        Знак отрицательный iff ровно один операнд отрицателен;
        умножение на ноль всегда даёт "0" без знака.
        """
        other_negative, other_value = other.negative, other.value
        magnitude = multiply_magnitudes(self.value, other_value)
        self._assign(product_sign(self.negative, other_negative, magnitude), magnitude)

    def divide_by_int(self, divisor: int) -> None:
        """
        self = self // divisor (усечение к нулю, остаток отбрасывается).

        Отрицательный divisor меняет знак частного.

        Raises:
            DivisionByZero: Если divisor == 0 (self не изменяется)
            TypeError: Если divisor не int
        """
        if isinstance(divisor, bool) or not isinstance(divisor, int):
            raise TypeError(f"divisor must be int, got {type(divisor).__name__}")
        if divisor == 0:
            raise DivisionByZero(f"Cannot divide {self.to_string()} by zero")

        quotient = divide_magnitude_by_int(self.value, abs(divisor))
        self._assign(product_sign(self.negative, divisor < 0, quotient), quotient)

    def divide(self, other: "BigInt") -> str:
        """
        self = частное self / other (повторным вычитанием).

        Остаток возвращается как magnitude (без знака):
        |self| == |quotient| * |other| + remainder, 0 <= remainder < |other|.

        Returns:
            Остаток десятичной строкой

        Raises:
            DivisionByZero: Если other равен нулю (self не изменяется)
        """
        other_negative, other_value = other.negative, other.value
        if other_value == ZERO_MAGNITUDE:
            raise DivisionByZero(f"Cannot divide {self.to_string()} by zero")

        quotient, remainder = divmod_magnitudes(self.value, other_value)
        self._assign(product_sign(self.negative, other_negative, quotient), quotient)
        return remainder


def parse_big_int(text: str) -> BigInt:
    """
    Convenience-функция: разбор строки в BigInt.

    Raises:
        InvalidDigitString: Если строка не является десятичным числом
    """
    return BigInt.from_string(text)
