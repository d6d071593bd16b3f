"""
Тесты для модуля FixedPoint

Проверяет:
1. Валидацию uint256 (тип, диапазон, bool запрещён)
2. Checked арифметику (overflow/underflow)
3. mul_div: floor, полная точность промежуточного произведения
4. clamp
"""

import pytest

from src.core.errors import ArithmeticOverflow, CoreMathError, InvalidInput
from src.core.math.constants import MAX_UINT256, SCALE
from src.core.math.fixed_point import (
    checked_add,
    checked_mul,
    checked_sub,
    clamp,
    mul_div,
    saturating_sub,
    validate_bps,
    validate_positive,
    validate_uint,
)

# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


class TestValidateUint:
    """Тесты для validate_uint"""

    def test_bounds_accepted(self) -> None:
        """0 и MAX_UINT256 допустимы"""
        assert validate_uint(0, "x") == 0
        assert validate_uint(MAX_UINT256, "x") == MAX_UINT256

    def test_negative_rejected(self) -> None:
        with pytest.raises(ArithmeticOverflow):
            validate_uint(-1, "x")

    def test_above_max_rejected(self) -> None:
        with pytest.raises(ArithmeticOverflow):
            validate_uint(MAX_UINT256 + 1, "x")

    @pytest.mark.parametrize("value", [1.0, "1", True, None])
    def test_non_int_rejected(self, value) -> None:
        """float/str/bool/None не являются FixedPoint18"""
        with pytest.raises(TypeError):
            validate_uint(value, "x")

    def test_validate_positive_rejects_zero(self) -> None:
        with pytest.raises(InvalidInput):
            validate_positive(0, "amount")
        assert validate_positive(1, "amount") == 1

    def test_validate_bps(self) -> None:
        assert validate_bps(10_000, "fee", 10_000) == 10_000
        with pytest.raises(InvalidInput):
            validate_bps(10_001, "fee", 10_000)


# =============================================================================
# CHECKED АРИФМЕТИКА
# =============================================================================


class TestCheckedArithmetic:
    """Тесты для checked_add / checked_sub / checked_mul"""

    def test_add_overflow(self) -> None:
        with pytest.raises(ArithmeticOverflow):
            checked_add(MAX_UINT256, 1)

    def test_sub_underflow(self) -> None:
        """FixedPoint18 никогда не бывает отрицательным"""
        with pytest.raises(ArithmeticOverflow):
            checked_sub(1, 2)
        assert checked_sub(2, 1) == 1

    def test_saturating_sub(self) -> None:
        assert saturating_sub(1, 2) == 0
        assert saturating_sub(5, 2) == 3

    def test_mul_overflow(self) -> None:
        with pytest.raises(ArithmeticOverflow):
            checked_mul(2**200, 2**100)

    def test_errors_are_value_errors(self) -> None:
        """Ошибки ядра совместимы с except ValueError"""
        with pytest.raises(ValueError):
            checked_sub(0, 1)
        assert issubclass(ArithmeticOverflow, CoreMathError)


class TestMulDiv:
    """Тесты для mul_div"""

    def test_floor_rounding(self) -> None:
        assert mul_div(10, 10, 3) == 33
        assert mul_div(1, 1, 2) == 0

    def test_intermediate_product_not_bounded(self) -> None:
        """a * b > MAX_UINT256, но результат помещается"""
        assert mul_div(MAX_UINT256, SCALE, SCALE) == MAX_UINT256

    def test_result_overflow(self) -> None:
        with pytest.raises(ArithmeticOverflow):
            mul_div(MAX_UINT256, 2, 1)

    def test_zero_denominator(self) -> None:
        with pytest.raises(ZeroDivisionError):
            mul_div(1, 1, 0)


class TestClamp:
    """Тесты для clamp"""

    def test_clamp(self) -> None:
        assert clamp(5, 0, 10) == 5
        assert clamp(-1, 0, 10) == 0
        assert clamp(15, 0, 10) == 10

    def test_open_bounds(self) -> None:
        assert clamp(15, min_value=0) == 15
        assert clamp(-15, max_value=0) == -15
