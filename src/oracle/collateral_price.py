"""Collateral price resolution — цена collateral из пула с контролем по эталонам

Цена пула (spot или TWAP) принимается только если она в пределах
max_deviation_bps от медианы эталонных фидов. Эталонная цена может
составляться из двух фидов (например, BTC/USD × collateral/BTC), см.
cross_price.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from src.core.errors import ExcessiveDeviation, InvalidInput, ZeroPrice
from src.core.math.constants import SCALE
from src.core.math.fixed_point import mul_div, validate_uint
from src.core.math.price_math import deviation_within
from src.oracle.price_blender import blend_multi_source, median3

_log = logging.getLogger(__name__)


def cross_price(base_usd: int, asset_per_base: int) -> int:
    """
    Композиция двух фидов: USD за base × asset за base.

    Args:
        base_usd: Цена base в USD (18 decimals)
        asset_per_base: Цена актива в единицах base (18 decimals)

    Returns:
        base_usd * asset_per_base / SCALE

    Raises:
        ZeroPrice: Если любая из цен равна нулю
    """
    validate_uint(base_usd, "base_usd")
    validate_uint(asset_per_base, "asset_per_base")
    if base_usd == 0 or asset_per_base == 0:
        raise ZeroPrice(
            f"Cross price requires non-zero legs (base_usd={base_usd}, "
            f"asset_per_base={asset_per_base})"
        )
    return mul_div(base_usd, asset_per_base, SCALE)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CollateralPriceConfig:
    """Конфигурация разрешения цены collateral."""

    # Допустимое отклонение цены пула от эталонной медианы
    max_deviation_bps: int = 100  # 1%

    # Допустимое отклонение эталонов друг от друга (для > 3 источников)
    reference_max_deviation_bps: int = 200  # 2%


# =============================================================================
# RESOLVER
# =============================================================================


class CollateralPriceResolver:
    """Проверка цены пула против эталонных фидов."""

    def __init__(self, config: CollateralPriceConfig | None = None):
        self.config = config or CollateralPriceConfig()

    def reference_median(self, reference_prices: Sequence[int]) -> int:
        """
        Эталонная медиана.

        1 источник: он сам. 3 источника: median3 без взаимной проверки, один
        выброс не сдвигает медиану. Иначе blend_multi_source с
        reference_max_deviation_bps.

        Raises:
            InvalidInput: Нет источников
            TypeError, ArithmeticOverflow: Цена источника не uint256
            ExcessiveDeviation: Источник вне допуска (только для N != 1, 3)
        """
        if len(reference_prices) == 0:
            raise InvalidInput("At least one reference price is required")
        for i, price in enumerate(reference_prices):
            validate_uint(price, f"reference_prices[{i}]")
        if len(reference_prices) == 1:
            return reference_prices[0]
        if len(reference_prices) == 3:
            return median3(*reference_prices)
        return blend_multi_source(reference_prices, self.config.reference_max_deviation_bps)

    def resolve(self, pool_price: int, reference_prices: Sequence[int]) -> int:
        """
        Разрешение цены collateral.

        Args:
            pool_price: Цена из пула (spot или TWAP, 18 decimals)
            reference_prices: Цены эталонных фидов (18 decimals)

        Returns:
            pool_price, если он прошёл проверку

        Raises:
            ZeroPrice: pool_price или эталонная медиана равны нулю
            ExcessiveDeviation: pool_price вне max_deviation_bps от медианы
        """
        validate_uint(pool_price, "pool_price")
        if pool_price == 0:
            raise ZeroPrice("Pool price is zero")

        reference = self.reference_median(reference_prices)
        if reference == 0:
            raise ZeroPrice("Reference median is zero")

        if not deviation_within(reference, pool_price, self.config.max_deviation_bps):
            raise ExcessiveDeviation(
                f"Pool price {pool_price} deviates from reference {reference} "
                f"by more than {self.config.max_deviation_bps} bps"
            )

        _log.debug("collateral price resolved pool=%d reference=%d", pool_price, reference)
        return pool_price
