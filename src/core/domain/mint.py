"""
Mint — Модели запроса и результата эмиссии primary unit

Immutable Pydantic модели. Соответствуют схеме contracts/schema/mint_request.json.
"""

from pydantic import BaseModel, Field, model_validator

from src.core.domain.types import Bps, Uint256


class MintRequest(BaseModel):
    """
    Запрос на эмиссию primary unit под депозит collateral.

    Нулевые значения допускаются моделью: их отвергает MintEvaluator (InvalidInput).
    """

    deposit_amount: Uint256 = Field(..., description="Депозит collateral (native decimals)")
    collateral_price: Uint256 = Field(..., description="Цена collateral (USD, 18 decimals)")
    reference_price: Uint256 = Field(..., description="Целевая стоимость primary unit")
    current_liability_supply: Uint256 = Field(
        ..., description="Текущая эмиссия primary unit (18 decimals)"
    )
    fee_bps: Bps = Field(..., description="Комиссия эмиссии (bps)")

    model_config = {"frozen": True}


class MintResult(BaseModel):
    """
    Результат эмиссии.

    Инвариант: fee + net_issued == gross_issued.
    Комиссия включена в прирост эмиссии (минтится в treasury, не сжигается).
    """

    normalized_deposit: Uint256 = Field(..., description="Депозит в 18 decimals")
    usd_value: Uint256 = Field(..., description="USD стоимость депозита")
    gross_issued: Uint256 = Field(..., description="Валовая эмиссия")
    fee: Uint256 = Field(..., description="Комиссия (в primary units)")
    net_issued: Uint256 = Field(..., description="Эмиссия пользователю")
    new_liability_value: Uint256 = Field(
        ..., description="USD стоимость обязательств после эмиссии"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_fee_identity(self) -> "MintResult":
        """fee + net_issued == gross_issued."""
        if self.fee + self.net_issued != self.gross_issued:
            raise ValueError(
                f"fee ({self.fee}) + net_issued ({self.net_issued}) "
                f"!= gross_issued ({self.gross_issued})"
            )
        return self
