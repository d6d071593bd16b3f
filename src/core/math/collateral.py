"""
CollateralAccounting — Стоимость обеспечения, обязательств и CR

Формулы:
    collateral_value = normalize(collateral_balance) * collateral_price / 1e18
    liability_value  = (primary + secondary_equivalent) * reference_price / 1e18
    CR               = collateral_value * 1e18 / liability_value
    max_redeemable   = max(collateral_value - liability_value, 0)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. CR == 1e18 (100%) для пустой позиции (нулевая любая сторона) — sentinel,
   на который опираются rate curve и redemption; не special-case'ить
2. Ненулевые стороны CR обязаны быть >= MIN_USD_VALUE (ValueTooSmall)
3. Все функции монотонно неубывающие по каждому аргументу
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.core.errors import ValueTooSmall, ZeroPrice
from src.core.math.constants import MIN_USD_VALUE, ONE_HUNDRED_PERCENT_CR, PRICE_PRECISION, SCALE
from src.core.math.decimals import AssetId, to_canonical
from src.core.math.fixed_point import checked_add, mul_div, saturating_sub, validate_uint

if TYPE_CHECKING:
    from src.core.domain.snapshot import CollateralSnapshot


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class CollateralReport:
    """Результат оценки снапшота."""

    collateral_value_usd: int
    liability_value_usd: int
    collateral_ratio: int
    max_redeemable_usd: int
    max_redeemable_liability_units: int


# =============================================================================
# USD СТОИМОСТИ
# =============================================================================


def collateral_value(
    collateral_balance: int,
    collateral_price: int,
    asset: AssetId = AssetId.COLLATERAL,
) -> int:
    """
    USD стоимость обеспечения.

    Args:
        collateral_balance: Баланс collateral в native decimals
        collateral_price: Цена collateral (USD, 18 decimals)
        asset: Decimal-класс collateral токена

    Returns:
        USD стоимость (18 decimals), 0 если любой аргумент равен нулю
    """
    validate_uint(collateral_price, "collateral_price")
    if collateral_balance == 0 or collateral_price == 0:
        return 0

    normalized = to_canonical(collateral_balance, asset)
    return mul_div(normalized, collateral_price, PRICE_PRECISION)


def liability_value(
    primary_liability: int,
    secondary_liability_equivalent: int,
    reference_price: int,
) -> int:
    """
    USD стоимость обязательств.

    Args:
        primary_liability: Эмиссия primary unit (18 decimals)
        secondary_liability_equivalent: Вторая компонента в primary-эквиваленте
        reference_price: Целевая USD стоимость primary unit

    Returns:
        USD стоимость (18 decimals), 0 если обязательства или цена нулевые
    """
    validate_uint(primary_liability, "primary_liability")
    validate_uint(secondary_liability_equivalent, "secondary_liability_equivalent")
    validate_uint(reference_price, "reference_price")

    total = checked_add(primary_liability, secondary_liability_equivalent)
    if total == 0 or reference_price == 0:
        return 0

    return mul_div(total, reference_price, PRICE_PRECISION)


# =============================================================================
# COLLATERAL RATIO
# =============================================================================


def collateral_ratio(
    collateral_value_usd: int,
    liability_value_usd: int,
    min_value: int = MIN_USD_VALUE,
) -> int:
    """
    Collateralization ratio (1e18 = 100%).

    Args:
        collateral_value_usd: USD стоимость обеспечения
        liability_value_usd: USD стоимость обязательств
        min_value: Минимальная USD стоимость каждой стороны

    Returns:
        1e18 если любая сторона равна нулю (пустая позиция),
        иначе collateral_value * 1e18 / liability_value

    Raises:
        ValueTooSmall: Если ненулевая сторона ниже min_value
    """
    validate_uint(collateral_value_usd, "collateral_value_usd")
    validate_uint(liability_value_usd, "liability_value_usd")

    if collateral_value_usd == 0 or liability_value_usd == 0:
        return ONE_HUNDRED_PERCENT_CR

    if collateral_value_usd < min_value:
        raise ValueTooSmall(
            f"collateral value {collateral_value_usd} below minimum {min_value}"
        )
    if liability_value_usd < min_value:
        raise ValueTooSmall(
            f"liability value {liability_value_usd} below minimum {min_value}"
        )

    return mul_div(collateral_value_usd, SCALE, liability_value_usd)


# =============================================================================
# SURPLUS
# =============================================================================


def max_redeemable_usd(collateral_value_usd: int, liability_value_usd: int) -> int:
    """Избыток обеспечения в USD: max(collateral - liability, 0)."""
    return saturating_sub(collateral_value_usd, liability_value_usd)


def max_redeemable_in_liability_units(
    collateral_value_usd: int,
    liability_value_usd: int,
    reference_price: int,
) -> int:
    """
    Избыток обеспечения в primary units по reference price.

    Raises:
        ZeroPrice: Если reference_price == 0
    """
    if reference_price == 0:
        raise ZeroPrice("reference_price is zero")

    surplus = max_redeemable_usd(collateral_value_usd, liability_value_usd)
    return mul_div(surplus, PRICE_PRECISION, reference_price)


# =============================================================================
# SNAPSHOT
# =============================================================================


def evaluate_snapshot(
    snapshot: "CollateralSnapshot",
    min_value: int = MIN_USD_VALUE,
) -> CollateralReport:
    """
    Полная оценка снапшота обеспечения.

    Args:
        snapshot: Immutable снапшот (создаётся заново на каждую оценку)
        min_value: Минимальная USD стоимость сторон CR

    Returns:
        CollateralReport со всеми производными величинами
    """
    collateral_usd = collateral_value(
        snapshot.collateral_balance,
        snapshot.collateral_price,
        snapshot.collateral_asset,
    )
    liability_usd = liability_value(
        snapshot.total_liability_primary,
        snapshot.total_liability_secondary_equivalent,
        snapshot.reference_price,
    )
    cr = collateral_ratio(collateral_usd, liability_usd, min_value=min_value)

    surplus_units = 0
    if snapshot.reference_price > 0:
        surplus_units = max_redeemable_in_liability_units(
            collateral_usd, liability_usd, snapshot.reference_price
        )

    return CollateralReport(
        collateral_value_usd=collateral_usd,
        liability_value_usd=liability_usd,
        collateral_ratio=cr,
        max_redeemable_usd=max_redeemable_usd(collateral_usd, liability_usd),
        max_redeemable_liability_units=surplus_units,
    )
