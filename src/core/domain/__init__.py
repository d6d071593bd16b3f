"""
Domain models and value objects.

Immutable pydantic модели запросов, результатов и снапшотов финансового ядра.
"""

from src.core.domain.accrual_state import AccrualState, AccrualTransition, UserPosition
from src.core.domain.feed import FeedReading
from src.core.domain.mint import MintRequest, MintResult
from src.core.domain.redeem import (
    BondRedeemRequest,
    BondRedeemResult,
    RedeemRequest,
    RedeemResult,
)
from src.core.domain.snapshot import CollateralSnapshot
from src.core.domain.types import Bps, Uint256
from src.core.math.rate_curve import RateCurveParams, RateCurveResult

__all__ = [
    # Types
    "Uint256",
    "Bps",
    # Snapshot
    "CollateralSnapshot",
    # Mint
    "MintRequest",
    "MintResult",
    # Redeem
    "RedeemRequest",
    "RedeemResult",
    "BondRedeemRequest",
    "BondRedeemResult",
    # Feed
    "FeedReading",
    # Accrual
    "AccrualState",
    "AccrualTransition",
    "UserPosition",
    # Rate curve
    "RateCurveParams",
    "RateCurveResult",
]
