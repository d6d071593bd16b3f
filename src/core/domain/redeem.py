"""
Redeem — Модели запроса и результата погашения

Immutable Pydantic модели для погашения primary unit (с компенсационным
waterfall при CR < 100%) и погашения bond unit за primary unit.
Соответствуют схеме contracts/schema/redeem_request.json.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from src.core.domain.types import Bps, Uint256
from src.core.math.constants import SCALE


# =============================================================================
# PRIMARY REDEMPTION
# =============================================================================


class RedeemRequest(BaseModel):
    """
    Запрос на погашение primary unit.

    Цены компенсационных активов опциональны: они нужны только если
    CR < 100% и возникает убыток. Их отсутствие в этом случае —
    InsufficientSecondaryPriceData.
    """

    burn_amount: Uint256 = Field(..., description="Сжигаемые primary units (18 decimals)")
    collateral_price: Uint256 = Field(..., description="Цена collateral (USD)")
    reference_price: Uint256 = Field(..., description="Целевая стоимость primary unit")
    collateral_ratio: Uint256 = Field(..., description="Текущий CR (1e18 = 100%)")
    fee_bps: Bps = Field(..., description="Комиссия погашения (bps)")

    # Waterfall цены (nullable)
    primary_unit_price: Optional[Uint256] = Field(
        None, description="Рыночная USD цена primary unit (nullable)"
    )
    compensation_asset_price: Optional[Uint256] = Field(
        None, description="Рыночная USD цена bond unit (nullable)"
    )
    secondary_compensation_asset_price: Optional[Uint256] = Field(
        None, description="Рыночная USD цена вторичного актива (nullable)"
    )
    compensation_price_floor: Uint256 = Field(
        0, description="Минимальная цена bond unit в primary units (18 decimals)"
    )

    model_config = {"frozen": True}

    def is_under_collateralized(self) -> bool:
        """CR < 100%."""
        return self.collateral_ratio < SCALE


class RedeemResult(BaseModel):
    """
    Результат погашения.

    Инвариант: при CR >= 100% compensation_out == secondary_compensation_out == 0.
    """

    collateral_out: Uint256 = Field(..., description="Collateral к выплате (18 decimals)")
    collateral_out_native: Uint256 = Field(
        ..., description="Collateral к выплате (native decimals, floor)"
    )
    compensation_out: Uint256 = Field(..., description="Bond units к эмиссии")
    secondary_compensation_out: Uint256 = Field(
        ..., description="Вторичный компенсационный актив к эмиссии"
    )
    fee: Uint256 = Field(..., description="Комиссия (primary units)")
    usd_value: Uint256 = Field(..., description="USD стоимость погашаемой суммы")
    loss_usd: Uint256 = Field(0, description="Непокрытый collateral убыток (USD)")

    model_config = {"frozen": True}


# =============================================================================
# BOND REDEMPTION
# =============================================================================


class BondRedeemRequest(BaseModel):
    """Запрос на погашение bond unit за primary unit (1:1 по номиналу)."""

    bond_amount: Uint256 = Field(..., description="Сжигаемые bond units")
    collateral_ratio: Uint256 = Field(..., description="Текущий CR (1e18 = 100%)")
    max_redeemable_liability_units: Uint256 = Field(
        ..., description="Избыток обеспечения в primary units"
    )
    fee_bps: Bps = Field(0, description="Комиссия погашения (bps)")

    model_config = {"frozen": True}


class BondRedeemResult(BaseModel):
    """Результат погашения bond unit."""

    primary_out: Uint256 = Field(..., description="Primary units к эмиссии пользователю")
    fee: Uint256 = Field(..., description="Комиссия (primary units)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_non_empty(self) -> "BondRedeemResult":
        if self.primary_out == 0 and self.fee == 0:
            raise ValueError("bond redemption produced no output")
        return self
