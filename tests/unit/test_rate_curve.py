"""
Тесты для RateCurve

Проверяет:
1. CR поправку (кусочно-линейная, асимметричная, 0 при 100%)
2. Ставка в [min, max] на всей сетке цен и CR
3. Ставка на peg при CR = 100% равна default
4. Монотонность по цене и по CR
5. Bond-кривая >= primary-кривой ниже 100% CR
6. Валидацию RateCurveParams
"""

import pytest
from pydantic import ValidationError

from src.core.math.constants import SCALE
from src.core.math.rate_curve import (
    BOND_CURVE,
    PRIMARY_CURVE,
    CurveShape,
    RateCurveParams,
    bond_rate,
    compute_rate,
    cr_adjustment,
    primary_rate,
)

PRICES = [SCALE * p // 100 for p in (50, 80, 95, 99, 100, 101, 105, 120, 200)]
CRS = [SCALE * c // 100 for c in (0, 25, 50, 60, 75, 90, 100, 110, 125, 150, 300)]


class TestCrAdjustment:
    """Тесты для cr_adjustment"""

    def test_zero_at_one_hundred_percent(self) -> None:
        assert cr_adjustment(SCALE) == 0
        assert cr_adjustment(SCALE, multiplier=3) == 0

    def test_negative_branch_capped(self) -> None:
        assert cr_adjustment(125 * SCALE // 100) == -SCALE // 4
        assert cr_adjustment(150 * SCALE // 100) == -SCALE // 2
        assert cr_adjustment(5 * SCALE) == -SCALE // 2

    def test_positive_branch_capped(self) -> None:
        assert cr_adjustment(75 * SCALE // 100) == SCALE // 2
        assert cr_adjustment(SCALE // 2) == SCALE
        assert cr_adjustment(0) == SCALE

    def test_multiplier_only_below_peg_cr(self) -> None:
        assert cr_adjustment(75 * SCALE // 100, multiplier=3) == 3 * SCALE // 2
        assert cr_adjustment(125 * SCALE // 100, multiplier=3) == -SCALE // 4


class TestComputeRate:
    """Тесты для compute_rate"""

    @pytest.mark.parametrize("shape", [PRIMARY_CURVE, BOND_CURVE])
    def test_peg_identity(self, shape: CurveShape) -> None:
        """price == 1.0, CR == 1.0 → default_rate"""
        result = compute_rate(shape.params(SCALE, SCALE))
        assert result.rate_bps == shape.default_rate_bps
        assert result.cr_adjustment == 0

    @pytest.mark.parametrize("max_rate_bps", [2_000, 4_000, 10_000])
    def test_peg_identity_for_every_default(self, max_rate_bps: int) -> None:
        """Тождество на peg для всех default в (0, max), включая хвосты logit"""
        for default in range(1, max_rate_bps):
            shape = CurveShape(default, max_rate_bps, 0, 50 * SCALE, 1)
            assert compute_rate(shape.params(SCALE, SCALE)).rate_bps == default, default

    @pytest.mark.parametrize("shape", [PRIMARY_CURVE, BOND_CURVE])
    def test_within_bounds(self, shape: CurveShape) -> None:
        for price in PRICES:
            for cr in CRS:
                rate = compute_rate(shape.params(price, cr)).rate_bps
                assert shape.min_rate_bps <= rate <= shape.max_rate_bps

    def test_non_increasing_in_price(self) -> None:
        rates = [primary_rate(price, SCALE) for price in PRICES]
        assert rates == sorted(rates, reverse=True)

    def test_non_increasing_in_cr(self) -> None:
        rates = [primary_rate(SCALE, cr) for cr in CRS]
        assert rates == sorted(rates, reverse=True)

    def test_price_far_below_peg_saturates_to_max(self) -> None:
        result = compute_rate(PRIMARY_CURVE.params(SCALE // 2, SCALE))
        assert result.rate_bps == PRIMARY_CURVE.max_rate_bps
        assert result.saturated is True

    def test_price_far_above_peg_saturates_to_min(self) -> None:
        assert primary_rate(2 * SCALE, SCALE) == PRIMARY_CURVE.min_rate_bps

    def test_base_saturation_short_circuit(self) -> None:
        """base >= max → max без sigmoid"""
        shape = CurveShape(
            default_rate_bps=1_500,
            max_rate_bps=2_000,
            min_rate_bps=0,
            steepness=50 * SCALE,
            cr_multiplier=1,
        )
        result = compute_rate(shape.params(2 * SCALE, SCALE // 2))
        assert result.rate_bps == 2_000
        assert result.saturated is True

    def test_min_rate_floor(self) -> None:
        shape = CurveShape(
            default_rate_bps=400,
            max_rate_bps=2_000,
            min_rate_bps=100,
            steepness=50 * SCALE,
            cr_multiplier=1,
        )
        assert compute_rate(shape.params(2 * SCALE, SCALE)).rate_bps == 100

    def test_idempotent(self) -> None:
        params = PRIMARY_CURVE.params(97 * SCALE // 100, 80 * SCALE // 100)
        assert compute_rate(params) == compute_rate(params)


class TestBondVsPrimary:
    """Bond-кривая >= primary-кривой ниже 100% CR"""

    def test_equal_defaults_three_x_multiplier(self) -> None:
        primary = CurveShape(400, 4_000, 0, 50 * SCALE, 1)
        bond = CurveShape(400, 4_000, 0, 50 * SCALE, 3)
        for cr in (0, SCALE // 4, SCALE // 2, 6 * SCALE // 10, 9 * SCALE // 10):
            for price in (95 * SCALE // 100, SCALE, 105 * SCALE // 100):
                assert (
                    compute_rate(bond.params(price, cr)).rate_bps
                    >= compute_rate(primary.params(price, cr)).rate_bps
                )

    def test_presets_below_full_collateral(self) -> None:
        for cr in (SCALE // 2, 75 * SCALE // 100, 99 * SCALE // 100):
            assert bond_rate(SCALE, cr) >= primary_rate(SCALE, cr)


class TestRateCurveParams:
    """Тесты валидации RateCurveParams"""

    def _params(self, **overrides) -> dict:
        data = {
            "price_to_peg": SCALE,
            "collateral_ratio": SCALE,
            "default_rate_bps": 400,
            "max_rate_bps": 2_000,
            "min_rate_bps": 0,
            "steepness": 50 * SCALE,
            "cr_multiplier": 1,
        }
        data.update(overrides)
        return data

    def test_valid(self) -> None:
        assert RateCurveParams(**self._params()).max_rate_bps == 2_000

    def test_min_above_max(self) -> None:
        with pytest.raises(ValidationError):
            RateCurveParams(**self._params(min_rate_bps=3_000, max_rate_bps=2_000))

    def test_zero_max(self) -> None:
        with pytest.raises(ValidationError):
            RateCurveParams(**self._params(max_rate_bps=0))

    def test_float_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RateCurveParams(**self._params(price_to_peg=1.0))

    def test_multiplier_range(self) -> None:
        with pytest.raises(ValidationError):
            RateCurveParams(**self._params(cr_multiplier=0))

    def test_frozen(self) -> None:
        params = RateCurveParams(**self._params())
        with pytest.raises(ValidationError):
            params.max_rate_bps = 10
