"""RedeemEvaluator — погашение primary unit с компенсационным waterfall

Общая часть:
    fee       = burn * fee_bps / 10000
    effective = burn - fee
    usd       = effective * reference_price / 1e18   (ниже floor → BelowMinimumValue)

CR >= 1e18:
    collateral_out = usd * 1e18 / collateral_price, компенсации нет

CR < 1e18:
    portion_usd    = usd * CR / 1e18
    collateral_out = portion_usd * 1e18 / collateral_price
    loss           = usd - portion_usd
    floor_usd      = compensation_price_floor * primary_unit_price / 1e18

    comp_price >= floor_usd:
        compensation_out = loss * 1e18 / comp_price
    comp_price <  floor_usd (spillover):
        compensation_out           = loss * 1e18 / floor_usd
        residual                   = loss * (floor_usd - comp_price) / floor_usd
        secondary_compensation_out = residual * 1e18 / secondary_price

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. CR >= 100% → compensation_out == secondary_compensation_out == 0
2. comp_price >= floor → secondary_compensation_out == 0
3. Делитель доли spillover — floor цена, не рыночная
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.core.domain.redeem import (
    BondRedeemRequest,
    BondRedeemResult,
    RedeemRequest,
    RedeemResult,
)
from src.core.errors import (
    BelowMinimumValue,
    InsufficientSecondaryPriceData,
    InsufficientSurplus,
    InvalidSecondaryPrice,
)
from src.core.math.constants import BPS_BASE, MIN_USD_VALUE, SCALE
from src.core.math.decimals import AssetId, from_canonical
from src.core.math.fixed_point import mul_div, validate_bps, validate_positive

_log = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RedeemEvaluatorConfig:
    """Конфигурация RedeemEvaluator."""

    # Dust floor USD стоимости погашения
    min_usd_value: int = MIN_USD_VALUE

    # Decimal-класс выплачиваемого collateral
    collateral_asset: AssetId = AssetId.COLLATERAL


# =============================================================================
# HELPERS
# =============================================================================


def _require_price(price: Optional[int], name: str) -> int:
    """Цена, обязательная для компенсации: None → Insufficient, 0 → Invalid."""
    if price is None:
        raise InsufficientSecondaryPriceData(f"{name} is required to compensate the loss")
    if price == 0:
        raise InvalidSecondaryPrice(f"{name} is zero")
    return price


# =============================================================================
# PRIMARY REDEMPTION
# =============================================================================


class RedeemEvaluator:
    """Оценка погашения primary unit."""

    def __init__(self, config: RedeemEvaluatorConfig | None = None):
        self.config = config or RedeemEvaluatorConfig()

    def evaluate(self, request: RedeemRequest) -> RedeemResult:
        """
        Расчёт погашения.

        Raises:
            InvalidInput: Нулевое погашение, нулевая цена или fee_bps > 10000
            BelowMinimumValue: USD стоимость ниже dust floor
            InsufficientSecondaryPriceData: Нет цены, нужной для компенсации
            InvalidSecondaryPrice: Нужная для компенсации цена равна нулю
        """
        validate_positive(request.burn_amount, "burn_amount")
        validate_positive(request.collateral_price, "collateral_price")
        validate_positive(request.reference_price, "reference_price")
        validate_bps(request.fee_bps, "fee_bps", BPS_BASE)

        fee = mul_div(request.burn_amount, request.fee_bps, BPS_BASE)
        effective = request.burn_amount - fee

        usd_value = mul_div(effective, request.reference_price, SCALE)
        if usd_value < self.config.min_usd_value:
            raise BelowMinimumValue(
                f"Redemption value {usd_value} below minimum {self.config.min_usd_value}"
            )

        if request.collateral_ratio >= SCALE:
            collateral_out = mul_div(usd_value, SCALE, request.collateral_price)
            return self._result(collateral_out, 0, 0, fee, usd_value, 0)

        # Недообеспеченность: collateral покрывает только долю CR
        portion_usd = mul_div(usd_value, request.collateral_ratio, SCALE)
        collateral_out = mul_div(portion_usd, SCALE, request.collateral_price)
        loss = usd_value - portion_usd

        if loss == 0:
            return self._result(collateral_out, 0, 0, fee, usd_value, 0)

        compensation_out, secondary_out = self._compensate(request, loss)
        return self._result(
            collateral_out, compensation_out, secondary_out, fee, usd_value, loss
        )

    def _compensate(self, request: RedeemRequest, loss: int) -> tuple[int, int]:
        """Распределение убытка между bond unit и вторичным активом."""
        primary_price = _require_price(request.primary_unit_price, "primary_unit_price")
        comp_price = _require_price(
            request.compensation_asset_price, "compensation_asset_price"
        )

        floor_usd = mul_div(request.compensation_price_floor, primary_price, SCALE)

        if comp_price >= floor_usd:
            return mul_div(loss, SCALE, comp_price), 0

        # Spillover: bond unit оценивается по floor, остаток уходит во вторичный актив
        secondary_price = _require_price(
            request.secondary_compensation_asset_price,
            "secondary_compensation_asset_price",
        )
        compensation_out = mul_div(loss, SCALE, floor_usd)
        residual = mul_div(loss, floor_usd - comp_price, floor_usd)
        secondary_out = mul_div(residual, SCALE, secondary_price)
        return compensation_out, secondary_out

    def _result(
        self,
        collateral_out: int,
        compensation_out: int,
        secondary_out: int,
        fee: int,
        usd_value: int,
        loss: int,
    ) -> RedeemResult:
        _log.debug(
            "redeem usd=%d collateral_out=%d compensation=%d secondary=%d loss=%d",
            usd_value,
            collateral_out,
            compensation_out,
            secondary_out,
            loss,
        )
        return RedeemResult(
            collateral_out=collateral_out,
            collateral_out_native=from_canonical(collateral_out, self.config.collateral_asset),
            compensation_out=compensation_out,
            secondary_compensation_out=secondary_out,
            fee=fee,
            usd_value=usd_value,
            loss_usd=loss,
        )


# =============================================================================
# BOND REDEMPTION
# =============================================================================


class BondRedeemEvaluator:
    """
    Погашение bond unit за primary unit по номиналу.

    Доступно только при CR >= 100% и только в пределах избытка обеспечения
    (выраженного в primary units).
    """

    def evaluate(self, request: BondRedeemRequest) -> BondRedeemResult:
        """
        Raises:
            InvalidInput: bond_amount == 0
            InsufficientSurplus: CR < 100% или bond_amount больше избытка
        """
        validate_positive(request.bond_amount, "bond_amount")
        validate_bps(request.fee_bps, "fee_bps", BPS_BASE)
        if request.collateral_ratio < SCALE:
            raise InsufficientSurplus(
                f"Bond redemption requires CR >= 100%, got {request.collateral_ratio}"
            )
        if request.bond_amount > request.max_redeemable_liability_units:
            raise InsufficientSurplus(
                f"bond_amount {request.bond_amount} exceeds surplus "
                f"{request.max_redeemable_liability_units}"
            )

        fee = mul_div(request.bond_amount, request.fee_bps, BPS_BASE)
        primary_out = request.bond_amount - fee

        _log.debug("bond redeem amount=%d primary_out=%d fee=%d", request.bond_amount, primary_out, fee)
        return BondRedeemResult(primary_out=primary_out, fee=fee)
