"""
FeedReading — Сырое чтение внешнего oracle фида

Immutable Pydantic модель кортежа (answer, decimals, updatedAt, roundId,
answeredInRound). Модель только фиксирует форму данных: значение может быть
отрицательным или нулевым, проверки выполняет FeedReader.
"""

from pydantic import BaseModel, Field

from src.core.domain.types import Uint256


class FeedReading(BaseModel):
    """Сырое чтение фида (до валидации)."""

    value: int = Field(..., strict=True, description="Ответ фида (signed, native decimals)")
    decimals: int = Field(..., strict=True, ge=0, le=36, description="Decimals ответа")
    updated_at: Uint256 = Field(..., description="Timestamp обновления (секунды)")
    round_id: Uint256 = Field(..., description="Идентификатор раунда")
    answered_in_round: Uint256 = Field(..., description="Раунд, в котором получен ответ")

    model_config = {"frozen": True}
