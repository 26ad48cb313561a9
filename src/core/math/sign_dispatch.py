"""
Sign Dispatch — Знаковое сравнение, сложение и вычитание

Сводит знаковые операции к беззнаковым (magnitude.py) через явную таблицу
случаев: 4 комбинации знаков × 3 исхода сравнения magnitude = 12 случаев
для сложения и 12 для вычитания.

Правило сложения:
- Знаки совпадают → сложить magnitude, сохранить общий знак
- Знаки различаются → из большей magnitude вычесть меньшую,
  знак берётся у операнда с большей magnitude (ноль при равенстве)

Вычитание a - b: зеркальная таблица (эквивалент a + (-b)),
операнды при этом не изменяются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Таблицы покрывают все 12 комбинаций (SignPair, MagnitudeOrder)
2. subtract_magnitudes вызывается только с minuend ≥ subtrahend
3. Результат нуля всегда неотрицательный
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from src.core.math.digits import ZERO_MAGNITUDE, normalize_sign
from src.core.math.magnitude import (
    add_magnitudes,
    compare_magnitudes,
    subtract_magnitudes,
)


# =============================================================================
# ENUMS
# =============================================================================


class SignPair(str, Enum):
    """Комбинация знаков операндов (левый, правый)."""

    POS_POS = "pos_pos"
    POS_NEG = "pos_neg"
    NEG_POS = "neg_pos"
    NEG_NEG = "neg_neg"

    @classmethod
    def from_signs(cls, left_negative: bool, right_negative: bool) -> "SignPair":
        if left_negative:
            return cls.NEG_NEG if right_negative else cls.NEG_POS
        return cls.POS_NEG if right_negative else cls.POS_POS


class MagnitudeOrder(str, Enum):
    """Исход сравнения magnitude левого операнда с правым."""

    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"

    @classmethod
    def from_comparison(cls, result: int) -> "MagnitudeOrder":
        if result < 0:
            return cls.LESS
        if result > 0:
            return cls.GREATER
        return cls.EQUAL


class MagnitudeOp(str, Enum):
    """Беззнаковая операция, выбранная таблицей."""

    ADD = "add"  # |a| + |b|
    SUB_LEFT = "sub_left"  # |a| - |b|, требует |a| > |b|
    SUB_RIGHT = "sub_right"  # |b| - |a|, требует |b| > |a|
    ZERO = "zero"  # |a| == |b|, разность равна нулю


# =============================================================================
# ТАБЛИЦЫ СЛУЧАЕВ
# =============================================================================


@dataclass(frozen=True)
class DispatchPlan:
    """Строка таблицы: беззнаковая операция и знак результата."""

    op: MagnitudeOp
    negative: bool


_ADD_POSITIVE: Final[DispatchPlan] = DispatchPlan(MagnitudeOp.ADD, False)
_ADD_NEGATIVE: Final[DispatchPlan] = DispatchPlan(MagnitudeOp.ADD, True)
_ZERO: Final[DispatchPlan] = DispatchPlan(MagnitudeOp.ZERO, False)

# a + b
ADD_TABLE: Final[dict[tuple[SignPair, MagnitudeOrder], DispatchPlan]] = {
    # +a + +b
    (SignPair.POS_POS, MagnitudeOrder.LESS): _ADD_POSITIVE,
    (SignPair.POS_POS, MagnitudeOrder.EQUAL): _ADD_POSITIVE,
    (SignPair.POS_POS, MagnitudeOrder.GREATER): _ADD_POSITIVE,
    # +a + -b
    (SignPair.POS_NEG, MagnitudeOrder.LESS): DispatchPlan(MagnitudeOp.SUB_RIGHT, True),
    (SignPair.POS_NEG, MagnitudeOrder.EQUAL): _ZERO,
    (SignPair.POS_NEG, MagnitudeOrder.GREATER): DispatchPlan(MagnitudeOp.SUB_LEFT, False),
    # -a + +b
    (SignPair.NEG_POS, MagnitudeOrder.LESS): DispatchPlan(MagnitudeOp.SUB_RIGHT, False),
    (SignPair.NEG_POS, MagnitudeOrder.EQUAL): _ZERO,
    (SignPair.NEG_POS, MagnitudeOrder.GREATER): DispatchPlan(MagnitudeOp.SUB_LEFT, True),
    # -a + -b
    (SignPair.NEG_NEG, MagnitudeOrder.LESS): _ADD_NEGATIVE,
    (SignPair.NEG_NEG, MagnitudeOrder.EQUAL): _ADD_NEGATIVE,
    (SignPair.NEG_NEG, MagnitudeOrder.GREATER): _ADD_NEGATIVE,
}

# a - b
SUBTRACT_TABLE: Final[dict[tuple[SignPair, MagnitudeOrder], DispatchPlan]] = {
    # +a - +b
    (SignPair.POS_POS, MagnitudeOrder.LESS): DispatchPlan(MagnitudeOp.SUB_RIGHT, True),
    (SignPair.POS_POS, MagnitudeOrder.EQUAL): _ZERO,
    (SignPair.POS_POS, MagnitudeOrder.GREATER): DispatchPlan(MagnitudeOp.SUB_LEFT, False),
    # +a - -b
    (SignPair.POS_NEG, MagnitudeOrder.LESS): _ADD_POSITIVE,
    (SignPair.POS_NEG, MagnitudeOrder.EQUAL): _ADD_POSITIVE,
    (SignPair.POS_NEG, MagnitudeOrder.GREATER): _ADD_POSITIVE,
    # -a - +b
    (SignPair.NEG_POS, MagnitudeOrder.LESS): _ADD_NEGATIVE,
    (SignPair.NEG_POS, MagnitudeOrder.EQUAL): _ADD_NEGATIVE,
    (SignPair.NEG_POS, MagnitudeOrder.GREATER): _ADD_NEGATIVE,
    # -a - -b
    (SignPair.NEG_NEG, MagnitudeOrder.LESS): DispatchPlan(MagnitudeOp.SUB_RIGHT, False),
    (SignPair.NEG_NEG, MagnitudeOrder.EQUAL): _ZERO,
    (SignPair.NEG_NEG, MagnitudeOrder.GREATER): DispatchPlan(MagnitudeOp.SUB_LEFT, True),
}


# =============================================================================
# ЗНАКОВЫЕ ОПЕРАЦИИ
# =============================================================================


def compare_signed(
    left_negative: bool,
    left_magnitude: str,
    right_negative: bool,
    right_magnitude: str,
) -> int:
    """
    Знаковое сравнение.

    - Положительное > отрицательного безусловно (ноль неотрицателен)
    - Два положительных: сравнение magnitude
    - Два отрицательных: ИНВЕРТИРОВАННОЕ сравнение magnitude

    Returns:
        -1 / 0 / +1
    """
    left_negative = normalize_sign(left_negative, left_magnitude)
    right_negative = normalize_sign(right_negative, right_magnitude)

    if left_negative != right_negative:
        return -1 if left_negative else 1

    order = compare_magnitudes(left_magnitude, right_magnitude)
    return -order if left_negative else order


def _apply_plan(plan: DispatchPlan, left_magnitude: str, right_magnitude: str) -> tuple[bool, str]:
    """
    Выполнение строки таблицы над magnitude операндов.

    Returns:
        (negative, magnitude) с восстановленным инвариантом нуля
    """
    if plan.op is MagnitudeOp.ADD:
        magnitude = add_magnitudes(left_magnitude, right_magnitude)
    elif plan.op is MagnitudeOp.SUB_LEFT:
        magnitude = subtract_magnitudes(left_magnitude, right_magnitude)
    elif plan.op is MagnitudeOp.SUB_RIGHT:
        magnitude = subtract_magnitudes(right_magnitude, left_magnitude)
    else:
        magnitude = ZERO_MAGNITUDE

    return (normalize_sign(plan.negative, magnitude), magnitude)


def _dispatch(
    table: dict[tuple[SignPair, MagnitudeOrder], DispatchPlan],
    left_negative: bool,
    left_magnitude: str,
    right_negative: bool,
    right_magnitude: str,
) -> tuple[bool, str]:
    signs = SignPair.from_signs(
        normalize_sign(left_negative, left_magnitude),
        normalize_sign(right_negative, right_magnitude),
    )
    order = MagnitudeOrder.from_comparison(compare_magnitudes(left_magnitude, right_magnitude))
    return _apply_plan(table[(signs, order)], left_magnitude, right_magnitude)


def signed_add(
    left_negative: bool,
    left_magnitude: str,
    right_negative: bool,
    right_magnitude: str,
) -> tuple[bool, str]:
    """
    Знаковое сложение a + b через ADD_TABLE.

    Examples:
        >>> signed_add(False, "10003", True, "1000")
        (False, '9003')
        >>> signed_add(False, "0", True, "932423400")
        (True, '932423400')
    """
    return _dispatch(ADD_TABLE, left_negative, left_magnitude, right_negative, right_magnitude)


def signed_subtract(
    left_negative: bool,
    left_magnitude: str,
    right_negative: bool,
    right_magnitude: str,
) -> tuple[bool, str]:
    """
    Знаковое вычитание a - b через SUBTRACT_TABLE.

    Examples:
        >>> signed_subtract(True, "900", True, "1000")
        (False, '100')
    """
    return _dispatch(SUBTRACT_TABLE, left_negative, left_magnitude, right_negative, right_magnitude)


def product_sign(left_negative: bool, right_negative: bool, magnitude: str) -> bool:
    """Знак произведения/частного: отрицательный iff ровно один операнд отрицателен."""
    return normalize_sign(left_negative != right_negative, magnitude)
