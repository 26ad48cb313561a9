"""
Magnitude — Беззнаковая арифметика над строками цифр

Schoolbook-алгоритмы над magnitude (строка десятичных цифр, старшая первая,
без ведущих нулей кроме ровно "0"):
- Сравнение: сначала по длине, затем лексикографически
- Сложение с переносом (carry ∈ {0, 1})
- Вычитание с заёмом (borrow ∈ {0, -1}), требует minuend ≥ subtrahend
- Умножение разложением по цифрам множителя со сдвигом
- Деление на машинное целое (long division, остаток отбрасывается)
- Деление на magnitude повторным вычитанием (частное и остаток)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любой операции — нормализованная magnitude (без ведущих нулей)
2. Входные строки никогда не мутируются (str immutable)
3. Деление на ноль → DivisionByZero, никогда не завершение процесса
"""

import logging

from src.core.math.digits import DIGIT_BASE, DIGIT_ZERO, ZERO_MAGNITUDE, strip_leading_zeros
from src.core.math.errors import DivisionByZero

logger = logging.getLogger(__name__)


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(a: str, b: str) -> int:
    """
    Сравнение двух magnitude без учёта знака.

    Так как ведущих нулей нет, более длинная строка всегда больше.
    При равной длине решает первая отличающаяся цифра слева направо.

    Returns:
        -1 если a < b
         0 если a == b
        +1 если a > b

    Examples:
        >>> compare_magnitudes("1000", "999")
        1
        >>> compare_magnitudes("725", "725")
        0
        >>> compare_magnitudes("1120", "1200")
        -1
    """
    if len(a) > len(b):
        return 1
    if len(a) < len(b):
        return -1

    for a_char, b_char in zip(a, b):
        if a_char > b_char:
            return 1
        if a_char < b_char:
            return -1
    return 0


def equal_lengths(a: str, b: str) -> tuple[str, str]:
    """
    Дополнение более короткой magnitude ведущими нулями до общей длины.

    Examples:
        >>> equal_lengths("5", "1000")
        ('0005', '1000')
    """
    width = max(len(a), len(b))
    return a.zfill(width), b.zfill(width)


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def add_magnitudes(a: str, b: str) -> str:
    """
    Беззнаковое сложение с переносом.

    Алгоритм (справа налево по выровненным строкам):
        digit_sum = digit_a + digit_b + carry
        emitted = digit_sum mod 10
        carry = digit_sum div 10
    Оставшийся carry = 1 добавляется ведущей "1".

    Examples:
        >>> add_magnitudes("9223372036854775808", "9223372036854775808")
        '18446744073709551616'
        >>> add_magnitudes("999", "1")
        '1000'
    """
    x, y = equal_lengths(a, b)

    carry = 0
    reversed_digits: list[str] = []
    for x_char, y_char in zip(reversed(x), reversed(y)):
        digit_sum = int(x_char) + int(y_char) + carry
        reversed_digits.append(str(digit_sum % DIGIT_BASE))
        carry = digit_sum // DIGIT_BASE

    if carry:
        reversed_digits.append(str(carry))

    return "".join(reversed(reversed_digits))


def subtract_magnitudes(minuend: str, subtrahend: str) -> str:
    """
    Беззнаковое вычитание с заёмом.

    Предусловие: minuend ≥ subtrahend. Знаковый слой (sign_dispatch)
    всегда упорядочивает операнды так, что предусловие выполнено.

    Алгоритм (справа налево по выровненным строкам):
        effective = minuend_digit + borrow
        если effective < subtrahend_digit: borrow = -1, effective += 10
        иначе: borrow = 0
        emitted = effective - subtrahend_digit
    Буфер собирается в обратном порядке; хвостовые "0" буфера (ведущие нули
    результата, появившиеся из-за заёма) удаляются до разворота.

    Args:
        minuend: Уменьшаемое
        subtrahend: Вычитаемое (не больше minuend)

    Returns:
        Разность; ровно "0" при равных операндах

    Raises:
        ValueError: Если minuend < subtrahend

    Examples:
        >>> subtract_magnitudes("10003", "1000")
        '9003'
        >>> subtract_magnitudes("1000", "999")
        '1'
        >>> subtract_magnitudes("725", "725")
        '0'
    """
    if compare_magnitudes(minuend, subtrahend) < 0:
        raise ValueError(
            f"Unsigned subtraction requires minuend >= subtrahend, "
            f"got {minuend} < {subtrahend}"
        )

    x, y = equal_lengths(minuend, subtrahend)

    borrow = 0
    reversed_digits: list[str] = []
    for x_char, y_char in zip(reversed(x), reversed(y)):
        effective = int(x_char) + borrow
        subtrahend_digit = int(y_char)

        borrow = 0
        if effective < subtrahend_digit:
            borrow = -1
            effective += DIGIT_BASE

        reversed_digits.append(str(effective - subtrahend_digit))

    while len(reversed_digits) > 1 and reversed_digits[-1] == DIGIT_ZERO:
        reversed_digits.pop()

    return "".join(reversed(reversed_digits))


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply_by_digit(magnitude: str, digit: int, shift: int = 0) -> str:
    """
    Умножение magnitude на одну цифру со сдвигом на shift разрядов.

    Проход справа налево с переносом:
        product = multiplicand_digit * digit + carry
        emitted = product mod 10
        carry = product div 10
    Ненулевой остаточный carry добавляется в начало, затем справа
    дописываются shift нулей (позиционный сдвиг).

    Args:
        magnitude: Множимое
        digit: Цифра множителя (0-9)
        shift: Позиция цифры в множителе (0 — разряд единиц)

    Returns:
        Нормализованное частичное произведение

    Raises:
        ValueError: Если digit вне [0, 9] или shift < 0

    Examples:
        >>> multiply_by_digit("125", 8)
        '1000'
        >>> multiply_by_digit("12", 3, shift=2)
        '3600'
    """
    if not 0 <= digit < DIGIT_BASE:
        raise ValueError(f"digit must be in [0, {DIGIT_BASE - 1}], got {digit}")
    if shift < 0:
        raise ValueError(f"shift must be non-negative, got {shift}")

    if digit == 0 or magnitude == ZERO_MAGNITUDE:
        return ZERO_MAGNITUDE

    carry = 0
    reversed_digits: list[str] = []
    for char in reversed(magnitude):
        product = int(char) * digit + carry
        reversed_digits.append(str(product % DIGIT_BASE))
        carry = product // DIGIT_BASE

    leading = str(carry) if carry else ""
    return leading + "".join(reversed(reversed_digits)) + DIGIT_ZERO * shift


def multiply_magnitudes(multiplicand: str, multiplier: str) -> str:
    """
    Умножение двух magnitude разложением по цифрам множителя.

    Для каждой цифры множителя (начиная с разряда единиц, позиция i)
    строится частичное произведение multiply_by_digit(multiplicand, d, i)
    и накапливается через add_magnitudes.

    Examples:
        >>> multiply_magnitudes("10", "10")
        '100'
        >>> multiply_magnitudes("123", "0")
        '0'
    """
    if multiplicand == ZERO_MAGNITUDE or multiplier == ZERO_MAGNITUDE:
        return ZERO_MAGNITUDE

    total = ZERO_MAGNITUDE
    for shift, char in enumerate(reversed(multiplier)):
        partial = multiply_by_digit(multiplicand, int(char), shift)
        total = add_magnitudes(total, partial)
    return total


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divide_magnitude_by_int(magnitude: str, divisor: int) -> str:
    """
    Long division magnitude на положительное машинное целое.

    Один проход слева направо с бегущим остатком:
        window = carry * 10 + digit
        quotient_digit = window div divisor
        carry = window mod divisor
    Ведущие нули частного удаляются. Остаток отбрасывается.

    Args:
        magnitude: Делимое
        divisor: Делитель (> 0)

    Returns:
        Частное (нормализованное, "0" если делимое меньше делителя)

    Raises:
        DivisionByZero: Если divisor == 0
        ValueError: Если divisor < 0

    Examples:
        >>> divide_magnitude_by_int("1002", 10)
        '100'
        >>> divide_magnitude_by_int("7", 10)
        '0'
    """
    if divisor == 0:
        raise DivisionByZero("Cannot divide by zero")
    if divisor < 0:
        raise ValueError(f"divisor must be positive for magnitude division, got {divisor}")

    carry = 0
    quotient_digits: list[str] = []
    for char in magnitude:
        window = carry * DIGIT_BASE + int(char)
        quotient_digits.append(str(window // divisor))
        carry = window % divisor

    return strip_leading_zeros("".join(quotient_digits))


def divmod_magnitudes(dividend: str, divisor: str) -> tuple[str, str]:
    """
    Деление magnitude на magnitude повторным вычитанием.

    Пока dividend ≥ divisor: dividend -= divisor, счётчик += 1.
    Счётчик становится частным, остаток dividend — остатком.

    ВНИМАНИЕ: сложность линейна по ЗНАЧЕНИЮ частного (не по числу цифр),
    поэтому пригодно только для умеренных частных.

    Особые случаи:
    - dividend < divisor → ("0", dividend), вычитаний нет
    - dividend == divisor → ("1", "0")

    Args:
        dividend: Делимое
        divisor: Делитель

    Returns:
        (quotient, remainder), обе в нормализованной форме,
        0 <= remainder < divisor

    Raises:
        DivisionByZero: Если divisor == "0"

    Examples:
        >>> divmod_magnitudes("1000000", "1120")
        ('892', '960')
        >>> divmod_magnitudes("10", "100")
        ('0', '10')
    """
    if divisor == ZERO_MAGNITUDE:
        raise DivisionByZero("Cannot divide by zero")

    order = compare_magnitudes(dividend, divisor)
    if order < 0:
        return (ZERO_MAGNITUDE, dividend)
    if order == 0:
        return ("1", ZERO_MAGNITUDE)

    subtractions = 0
    remainder = dividend
    while compare_magnitudes(remainder, divisor) >= 0:
        remainder = subtract_magnitudes(remainder, divisor)
        subtractions += 1

    logger.debug(
        "Repeated-subtraction division %s / %s took %d subtractions",
        dividend,
        divisor,
        subtractions,
    )
    return (str(subtractions), remainder)
