"""MintEvaluator — расчёт эмиссии primary unit под депозит collateral

Конвейер (порядок фиксирован):
1. Нулевой депозит/цены, fee_bps > 10000 → InvalidInput
2. Нормализация депозита к 18 decimals
3. USD стоимость депозита; ниже dust floor → BelowMinimumValue
4. gross = usd * 1e18 / reference_price
5. fee = gross * fee_bps / 10000
6. net = gross - fee
7. new_liability_value = (supply + gross) * reference_price / 1e18

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. fee вычисляется от gross, никогда от net
2. fee + net == gross
3. Комиссия входит в прирост эмиссии (минтится в treasury)
"""

import logging
from dataclasses import dataclass

from src.core.domain.mint import MintRequest, MintResult
from src.core.errors import BelowMinimumValue
from src.core.math.constants import BPS_BASE, MIN_USD_VALUE, SCALE
from src.core.math.decimals import AssetId, to_canonical
from src.core.math.fixed_point import checked_add, mul_div, validate_bps, validate_positive

_log = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class MintEvaluatorConfig:
    """Конфигурация MintEvaluator."""

    # Dust floor USD стоимости депозита
    min_usd_value: int = MIN_USD_VALUE

    # Decimal-класс депонируемого collateral
    collateral_asset: AssetId = AssetId.COLLATERAL


# =============================================================================
# EVALUATOR
# =============================================================================


class MintEvaluator:
    """
    Оценка эмиссии.

    Чистая функция от запроса: ничего не хранит между вызовами.
    """

    def __init__(self, config: MintEvaluatorConfig | None = None):
        self.config = config or MintEvaluatorConfig()

    def evaluate(self, request: MintRequest) -> MintResult:
        """
        Расчёт эмиссии.

        Args:
            request: Запрос на эмиссию

        Returns:
            MintResult

        Raises:
            InvalidInput: Нулевой депозит, нулевая цена или fee_bps > 10000
            BelowMinimumValue: USD стоимость депозита ниже dust floor
        """
        # 1. Входные данные
        validate_positive(request.deposit_amount, "deposit_amount")
        validate_positive(request.collateral_price, "collateral_price")
        validate_positive(request.reference_price, "reference_price")
        validate_bps(request.fee_bps, "fee_bps", BPS_BASE)

        # 2. Нормализация
        normalized = to_canonical(request.deposit_amount, self.config.collateral_asset)

        # 3. USD стоимость и dust floor
        usd_value = mul_div(normalized, request.collateral_price, SCALE)
        if usd_value < self.config.min_usd_value:
            raise BelowMinimumValue(
                f"Deposit value {usd_value} below minimum {self.config.min_usd_value}"
            )

        # 4-6. Эмиссия и комиссия
        gross = mul_div(usd_value, SCALE, request.reference_price)
        fee = mul_div(gross, request.fee_bps, BPS_BASE)
        net = gross - fee

        # 7. Обязательства после эмиссии
        new_supply = checked_add(request.current_liability_supply, gross)
        new_liability_value = mul_div(new_supply, request.reference_price, SCALE)

        _log.debug(
            "mint usd=%d gross=%d fee=%d net=%d", usd_value, gross, fee, net
        )

        return MintResult(
            normalized_deposit=normalized,
            usd_value=usd_value,
            gross_issued=gross,
            fee=fee,
            net_issued=net,
            new_liability_value=new_liability_value,
        )
