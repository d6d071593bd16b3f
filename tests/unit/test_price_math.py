"""
Тесты для PriceMath

Проверяет:
1. deviation_within (асимметричная база, false на нулях)
2. inverse_price
3. normalize_amount (в обе стороны, границы decimals)
4. spot_price из резервов пула
5. twap_price из кумулятивных наблюдений
"""

import pytest

from src.core.errors import (
    ArithmeticOverflow,
    InvalidInput,
    ObservationWindowTooShort,
    ZeroPrice,
    ZeroReserve,
)
from src.core.math.constants import SCALE, TWAP_MIN_PERIOD
from src.core.math.price_math import (
    deviation_within,
    inverse_price,
    normalize_amount,
    spot_price,
    twap_price,
)


class TestDeviationWithin:
    """Тесты для deviation_within"""

    def test_exact_boundary_inclusive(self) -> None:
        assert deviation_within(100, 101, 100) is True
        assert deviation_within(100, 102, 100) is False

    def test_zero_inputs_false(self) -> None:
        assert deviation_within(0, 100, 10_000) is False
        assert deviation_within(100, 0, 10_000) is False

    def test_asymmetric_base(self) -> None:
        """Процентная база — первый аргумент"""
        # |100 - 110| = 10 = 10% от 100, но 9.09% от 110
        assert deviation_within(100, 110, 950) is False
        assert deviation_within(110, 100, 950) is True

    def test_equal_values_always_within(self) -> None:
        assert deviation_within(5 * SCALE, 5 * SCALE, 0) is True


class TestInversePrice:
    """Тесты для inverse_price"""

    def test_inverse(self) -> None:
        assert inverse_price(2 * SCALE) == SCALE // 2
        assert inverse_price(SCALE) == SCALE

    def test_zero(self) -> None:
        with pytest.raises(ZeroPrice):
            inverse_price(0)


class TestNormalizeAmount:
    """Тесты для normalize_amount"""

    def test_scale_up(self) -> None:
        assert normalize_amount(5_000_000_000_000, 8) == 50_000 * SCALE

    def test_identity(self) -> None:
        assert normalize_amount(123, 18) == 123

    def test_scale_down_floors(self) -> None:
        assert normalize_amount(1_999, 21) == 1

    def test_decimals_out_of_range(self) -> None:
        with pytest.raises(InvalidInput):
            normalize_amount(1, 37)
        with pytest.raises(InvalidInput):
            normalize_amount(1, -1)


class TestSpotPrice:
    """Тесты для spot_price"""

    def test_mixed_decimals(self) -> None:
        # 100 collateral (8 dec) против 5M stable (6 dec)
        assert spot_price(100 * 10**8, 5_000_000 * 10**6, 8, 6) == 50_000 * SCALE

    def test_zero_base_reserve(self) -> None:
        with pytest.raises(ZeroReserve):
            spot_price(0, 10**18, 18, 18)

    def test_zero_quote_reserve_is_zero_price(self) -> None:
        assert spot_price(10**18, 0, 18, 18) == 0


class TestTwapPrice:
    """Тесты для twap_price"""

    def test_constant_price(self) -> None:
        """Постоянная цена: TWAP равен ей"""
        price = 2 * SCALE
        start = 1_000 * price
        end = start + price * 3_600
        assert twap_price(start, end, 1_000, 4_600, TWAP_MIN_PERIOD) == price

    def test_time_weighting(self) -> None:
        """Цена 1 в течение 1800 с и 3 в течение 1800 с → 2"""
        end = SCALE * 1_800 + 3 * SCALE * 1_800
        assert twap_price(0, end, 0, 3_600, TWAP_MIN_PERIOD) == 2 * SCALE

    def test_window_too_short(self) -> None:
        with pytest.raises(ObservationWindowTooShort):
            twap_price(0, 10, 0, TWAP_MIN_PERIOD - 1, TWAP_MIN_PERIOD)

    def test_non_increasing_timestamps(self) -> None:
        with pytest.raises(ObservationWindowTooShort):
            twap_price(0, 10, 100, 100, 0)

    def test_cumulative_regression(self) -> None:
        with pytest.raises(ArithmeticOverflow):
            twap_price(10, 5, 0, TWAP_MIN_PERIOD, TWAP_MIN_PERIOD)
