"""
Core math modules

Целочисленные fixed-point примитивы финансового ядра. Без float,
без скрытого состояния, без чтения часов.
"""

# Constants
from src.core.math.constants import (
    ACC_PRECISION,
    BPS_BASE,
    MACRO_FEED_MAX_STALENESS,
    MARKET_FEED_MAX_STALENESS,
    MAX_UINT256,
    MIN_USD_VALUE,
    PRICE_PRECISION,
    SCALE,
    SECONDS_PER_YEAR,
    TARGET_MONTHLY_GROWTH_FACTOR,
    TWAP_MIN_PERIOD,
)

# Fixed point
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

# Decimals
from src.core.math.decimals import (
    ASSET_DECIMALS,
    AssetId,
    decimals_of,
    from_canonical,
    to_canonical,
)

# Price math
from src.core.math.price_math import (
    deviation_within,
    inverse_price,
    normalize_amount,
    spot_price,
    twap_price,
)

# Collateral accounting
from src.core.math.collateral import (
    CollateralReport,
    collateral_ratio,
    collateral_value,
    evaluate_snapshot,
    liability_value,
    max_redeemable_in_liability_units,
    max_redeemable_usd,
)

# Exp / ln
from src.core.math.exp_ln import exp_wad, ln_wad, logit_wad, sigmoid_wad

# Rate curve
from src.core.math.rate_curve import (
    BOND_CURVE,
    PRIMARY_CURVE,
    CurveShape,
    RateCurveParams,
    RateCurveResult,
    bond_rate,
    compute_rate,
    cr_adjustment,
    primary_rate,
)

# Accrual
from src.core.math.accrual import (
    WithdrawalSplit,
    acc_per_share_after,
    accrued_interest,
    emission_for,
    pending_reward,
    reward_debt,
    split_withdrawal,
    total_assets_with_accrued,
)

# Inflation
from src.core.math.inflation import (
    actual_multiplier,
    adjustment_factor,
    recalibrate_reference,
)

__all__ = [
    # Constants
    "ACC_PRECISION",
    "BPS_BASE",
    "MACRO_FEED_MAX_STALENESS",
    "MARKET_FEED_MAX_STALENESS",
    "MAX_UINT256",
    "MIN_USD_VALUE",
    "PRICE_PRECISION",
    "SCALE",
    "SECONDS_PER_YEAR",
    "TARGET_MONTHLY_GROWTH_FACTOR",
    "TWAP_MIN_PERIOD",
    # Fixed point
    "checked_add",
    "checked_mul",
    "checked_sub",
    "clamp",
    "mul_div",
    "saturating_sub",
    "validate_bps",
    "validate_positive",
    "validate_uint",
    # Decimals
    "ASSET_DECIMALS",
    "AssetId",
    "decimals_of",
    "from_canonical",
    "to_canonical",
    # Price math
    "deviation_within",
    "inverse_price",
    "normalize_amount",
    "spot_price",
    "twap_price",
    # Collateral accounting
    "CollateralReport",
    "collateral_ratio",
    "collateral_value",
    "evaluate_snapshot",
    "liability_value",
    "max_redeemable_in_liability_units",
    "max_redeemable_usd",
    # Exp / ln
    "exp_wad",
    "ln_wad",
    "logit_wad",
    "sigmoid_wad",
    # Rate curve
    "BOND_CURVE",
    "PRIMARY_CURVE",
    "CurveShape",
    "RateCurveParams",
    "RateCurveResult",
    "bond_rate",
    "compute_rate",
    "cr_adjustment",
    "primary_rate",
    # Accrual
    "WithdrawalSplit",
    "acc_per_share_after",
    "accrued_interest",
    "emission_for",
    "pending_reward",
    "reward_debt",
    "split_withdrawal",
    "total_assets_with_accrued",
    # Inflation
    "actual_multiplier",
    "adjustment_factor",
    "recalibrate_reference",
]
