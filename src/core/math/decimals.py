"""
DecimalNormalizer — Конверсия native decimals ↔ canonical 18 decimals

Статический whitelist decimal-классов (8, 6, 18). Масштаб выбирается по
идентичности токена, а не по decimals, запрошенным в runtime.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. from_canonical(to_canonical(x)) == x для любого representable x
2. 18-decimal классы — pass-through без изменений
3. Неизвестный токен → UnsupportedAsset (никаких fallback на 18)
"""

from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping

from src.core.errors import UnsupportedAsset
from src.core.math.constants import SCALE_6_TO_18, SCALE_8_TO_18
from src.core.math.fixed_point import checked_mul, validate_uint


# =============================================================================
# ТИПЫ
# =============================================================================


class AssetId(str, Enum):
    """Идентичность токена (whitelist)."""

    COLLATERAL = "collateral"  # hard-asset collateral (8 decimals)
    USDC = "usdc"
    USDT = "usdt"
    PRIMARY = "primary"  # stable-value unit
    BOND = "bond"  # bond-like unit, поглощает убыток при CR < 100%
    GOVERNANCE = "governance"  # вторичный компенсационный актив
    STAKED_PRIMARY = "staked_primary"
    STAKED_BOND = "staked_bond"


# Количество decimals для каждого токена
ASSET_DECIMALS: Final[Mapping[AssetId, int]] = MappingProxyType(
    {
        AssetId.COLLATERAL: 8,
        AssetId.USDC: 6,
        AssetId.USDT: 6,
        AssetId.PRIMARY: 18,
        AssetId.BOND: 18,
        AssetId.GOVERNANCE: 18,
        AssetId.STAKED_PRIMARY: 18,
        AssetId.STAKED_BOND: 18,
    }
)

# Масштаб до 18 decimals по классу decimals
_SCALE_BY_DECIMALS: Final[Mapping[int, int]] = MappingProxyType(
    {
        8: SCALE_8_TO_18,
        6: SCALE_6_TO_18,
        18: 1,
    }
)


# =============================================================================
# LOOKUP
# =============================================================================


def _resolve(asset: AssetId | str) -> AssetId:
    try:
        return AssetId(asset)
    except ValueError:
        raise UnsupportedAsset(f"Unsupported asset: {asset!r}") from None


def decimals_of(asset: AssetId | str) -> int:
    """
    Количество native decimals токена.

    Raises:
        UnsupportedAsset: Если токен не в whitelist
    """
    return ASSET_DECIMALS[_resolve(asset)]


def scale_factor(asset: AssetId | str) -> int:
    """Множитель native → canonical (1 для 18-decimal токенов)."""
    return _SCALE_BY_DECIMALS[decimals_of(asset)]


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def to_canonical(amount: int, asset: AssetId | str) -> int:
    """
    Конверсия: native amount → FixedPoint18

    Args:
        amount: Сумма в native decimals токена
        asset: Идентичность токена

    Returns:
        amount * 10^(18 - decimals)

    Raises:
        UnsupportedAsset: Если токен не в whitelist
        ArithmeticOverflow: Если результат не помещается в uint256

    Examples:
        >>> to_canonical(10**8, AssetId.COLLATERAL)
        1000000000000000000
    """
    validate_uint(amount, "amount")
    factor = scale_factor(asset)
    if factor == 1:
        return amount
    return checked_mul(amount, factor)


def from_canonical(amount: int, asset: AssetId | str) -> int:
    """
    Конверсия: FixedPoint18 → native amount (floor).

    Остаток ниже native точности отбрасывается.

    Examples:
        >>> from_canonical(19_900_000_000_000_000, AssetId.COLLATERAL)
        1990000
    """
    validate_uint(amount, "amount")
    factor = scale_factor(asset)
    if factor == 1:
        return amount
    return amount // factor
