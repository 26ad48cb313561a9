"""
Тесты для модуля Digits (валидация и разбор десятичных строк)

Проверяет:
1. check_digits на валидных и невалидных строках
2. Разбор знака и magnitude
3. Нормализацию ведущих нулей и знака нуля
4. Отклонение "+", пустых строк и не-цифровых символов
"""

import pytest

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
from src.core.math.errors import BigIntError, InvalidDigitString


class TestConstants:
    """Тесты констант представления"""

    def test_decimal_base(self) -> None:
        assert DIGIT_BASE == 10
        assert ZERO_MAGNITUDE == "0"
        assert NEGATIVE_SIGN == "-"

    def test_zero_digit_in_digit_alphabet(self) -> None:
        assert DIGIT_ZERO == "0"
        assert check_digits(DIGIT_ZERO * 3)


class TestCheckDigits:
    """Тесты для check_digits"""

    def test_all_digits(self) -> None:
        assert check_digits("0123456789")
        assert check_digits("0")

    def test_non_digit_rejected(self) -> None:
        assert not check_digits("90no0")
        assert not check_digits("12.5")
        assert not check_digits(" 12")

    def test_empty_rejected(self) -> None:
        assert not check_digits("")

    def test_unicode_digits_rejected(self) -> None:
        """Только ASCII '0'-'9', не другие Unicode-цифры"""
        assert not check_digits("١٢٣")


class TestStripLeadingZeros:
    """Тесты для strip_leading_zeros"""

    def test_strips(self) -> None:
        assert strip_leading_zeros("000120") == "120"

    def test_all_zeros_become_zero(self) -> None:
        assert strip_leading_zeros("0000") == "0"
        assert strip_leading_zeros("") == "0"

    def test_already_normalized(self) -> None:
        assert strip_leading_zeros("100") == "100"


class TestNormalizeSign:
    """Тесты для normalize_sign"""

    def test_zero_never_negative(self) -> None:
        assert normalize_sign(True, "0") is False

    def test_non_zero_keeps_sign(self) -> None:
        assert normalize_sign(True, "5") is True
        assert normalize_sign(False, "5") is False


class TestParseDigitString:
    """Тесты для parse_digit_string"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0", (False, "0")),
            ("123", (False, "123")),
            ("-932423400", (True, "932423400")),
            ("9223372036854775808", (False, "9223372036854775808")),
        ],
    )
    def test_valid_strings(self, text: str, expected: tuple[bool, str]) -> None:
        assert parse_digit_string(text) == expected

    def test_leading_zeros_normalized(self) -> None:
        assert parse_digit_string("000120") == (False, "120")
        assert parse_digit_string("-0042") == (True, "42")

    def test_negative_zero_has_no_sign(self) -> None:
        assert parse_digit_string("-0") == (False, "0")
        assert parse_digit_string("-000") == (False, "0")

    @pytest.mark.parametrize("text", ["90no0", "+123", "", "-", "--5", "1-2", "12 ", "1e5"])
    def test_invalid_strings(self, text: str) -> None:
        with pytest.raises(InvalidDigitString):
            parse_digit_string(text)

    def test_error_names_offending_character(self) -> None:
        with pytest.raises(InvalidDigitString, match="'n' at position 2"):
            parse_digit_string("90no0")

    def test_error_position_accounts_for_sign(self) -> None:
        with pytest.raises(InvalidDigitString, match="'x' at position 2"):
            parse_digit_string("-1x")

    def test_plus_sign_rejected(self) -> None:
        with pytest.raises(InvalidDigitString, match="'\\+' at position 0"):
            parse_digit_string("+123")

    def test_no_digits_message(self) -> None:
        with pytest.raises(InvalidDigitString, match="has no digits"):
            parse_digit_string("-")

    def test_non_str_rejected(self) -> None:
        with pytest.raises(InvalidDigitString, match="Expected str"):
            parse_digit_string(123)  # type: ignore[arg-type]

    def test_error_hierarchy(self) -> None:
        """InvalidDigitString ловится как BigIntError и ValueError"""
        with pytest.raises(BigIntError):
            parse_digit_string("abc")
        with pytest.raises(ValueError):
            parse_digit_string("abc")

    @pytest.mark.parametrize("digits", ["0123456789", "007", "90no0", "12.5", " 12", "١٢٣", "12+"])
    def test_agrees_with_check_digits(self, digits: str) -> None:
        """Парсер принимает остаток после знака ровно тогда, когда его принимает check_digits"""
        if check_digits(digits):
            assert parse_digit_string(digits)[1] == strip_leading_zeros(digits)
        else:
            with pytest.raises(InvalidDigitString, match="non-digit"):
                parse_digit_string(digits)
