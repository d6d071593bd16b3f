"""
CollateralSnapshot — Снапшот обеспечения и обязательств

Immutable Pydantic модель-входной пакет для CollateralAccounting.
Создаётся вызывающей стороной заново при каждой оценке: ядро ничего
не кэширует и не хранит скрытого состояния.
"""

from pydantic import BaseModel, Field

from src.core.domain.types import Uint256
from src.core.math.decimals import AssetId


class CollateralSnapshot(BaseModel):
    """
    Снапшот состояния обеспечения.

    Все цены — FixedPoint18 (USD за 1 единицу), балансы обязательств — 18 decimals,
    collateral_balance — в native decimals collateral токена.
    """

    collateral_balance: Uint256 = Field(
        ..., description="Баланс collateral (native decimals)"
    )
    collateral_price: Uint256 = Field(..., description="Цена collateral (USD, 18 decimals)")
    total_liability_primary: Uint256 = Field(
        ..., description="Эмиссия primary unit (18 decimals)"
    )
    total_liability_secondary_equivalent: Uint256 = Field(
        ..., description="Вторая компонента обязательств в primary-эквиваленте"
    )
    reference_price: Uint256 = Field(
        ..., description="Целевая USD стоимость primary unit (18 decimals)"
    )
    collateral_asset: AssetId = Field(
        AssetId.COLLATERAL, description="Decimal-класс collateral токена"
    )

    model_config = {"frozen": True}

    def total_liability(self) -> int:
        """Суммарные обязательства в primary units."""
        return self.total_liability_primary + self.total_liability_secondary_equivalent
