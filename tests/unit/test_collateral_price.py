"""
Тесты для разрешения цены collateral

Проверяет:
1. cross_price (композиция двух фидов)
2. Эталонная медиана для 1 / 3 / N источников
3. Отказ при отклонении цены пула от эталона
"""

import pytest

from src.core.errors import ArithmeticOverflow, ExcessiveDeviation, InvalidInput, ZeroPrice
from src.core.math.constants import SCALE
from src.oracle.collateral_price import (
    CollateralPriceConfig,
    CollateralPriceResolver,
    cross_price,
)

BTC_USD = 50_000 * SCALE


@pytest.fixture
def resolver() -> CollateralPriceResolver:
    return CollateralPriceResolver()


class TestCrossPrice:
    """Тесты для cross_price"""

    def test_compose(self) -> None:
        # collateral/BTC = 0.999
        assert cross_price(BTC_USD, 999 * SCALE // 1_000) == 49_950 * SCALE

    def test_zero_leg(self) -> None:
        with pytest.raises(ZeroPrice):
            cross_price(0, SCALE)
        with pytest.raises(ZeroPrice):
            cross_price(BTC_USD, 0)


class TestCollateralPriceResolver:
    """Тесты для CollateralPriceResolver"""

    def test_default_deviation(self, resolver: CollateralPriceResolver) -> None:
        assert resolver.config.max_deviation_bps == 100

    def test_pool_within_bounds(self, resolver: CollateralPriceResolver) -> None:
        pool = 50_200 * SCALE
        refs = [49_900 * SCALE, BTC_USD, 50_100 * SCALE]
        assert resolver.resolve(pool, refs) == pool

    def test_pool_deviates(self, resolver: CollateralPriceResolver) -> None:
        with pytest.raises(ExcessiveDeviation):
            resolver.resolve(51_000 * SCALE, [BTC_USD])

    def test_reference_median_three_sources(self, resolver: CollateralPriceResolver) -> None:
        """Три источника: median3, выброс среди эталонов не влияет"""
        refs = [BTC_USD, 10 * SCALE, 50_010 * SCALE]
        assert resolver.reference_median(refs) == 50_000 * SCALE

    def test_reference_median_many_sources(self, resolver: CollateralPriceResolver) -> None:
        refs = [49_900 * SCALE, BTC_USD, 50_050 * SCALE, 50_100 * SCALE]
        assert resolver.reference_median(refs) == 50_025 * SCALE

    def test_many_sources_outlier(self, resolver: CollateralPriceResolver) -> None:
        refs = [BTC_USD, BTC_USD, BTC_USD, 60_000 * SCALE]
        with pytest.raises(ExcessiveDeviation):
            resolver.reference_median(refs)

    def test_single_reference_used_directly(self, resolver: CollateralPriceResolver) -> None:
        assert resolver.reference_median([BTC_USD]) == BTC_USD

    @pytest.mark.parametrize("refs", [[-1], [1.5], [BTC_USD, -1, BTC_USD]])
    def test_reference_must_be_uint(self, resolver: CollateralPriceResolver, refs) -> None:
        with pytest.raises((TypeError, ArithmeticOverflow)):
            resolver.reference_median(refs)

    def test_no_references(self, resolver: CollateralPriceResolver) -> None:
        with pytest.raises(InvalidInput):
            resolver.resolve(BTC_USD, [])

    def test_zero_pool_price(self, resolver: CollateralPriceResolver) -> None:
        with pytest.raises(ZeroPrice):
            resolver.resolve(0, [BTC_USD])

    def test_custom_tolerance(self) -> None:
        resolver = CollateralPriceResolver(CollateralPriceConfig(max_deviation_bps=300))
        assert resolver.resolve(51_000 * SCALE, [BTC_USD]) == 51_000 * SCALE
