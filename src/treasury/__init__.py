"""Treasury — оценка эмиссии и погашения."""

from src.treasury.mint_evaluator import MintEvaluator, MintEvaluatorConfig
from src.treasury.redeem_evaluator import (
    BondRedeemEvaluator,
    RedeemEvaluator,
    RedeemEvaluatorConfig,
)

__all__ = [
    "MintEvaluator",
    "MintEvaluatorConfig",
    "RedeemEvaluator",
    "RedeemEvaluatorConfig",
    "BondRedeemEvaluator",
]
