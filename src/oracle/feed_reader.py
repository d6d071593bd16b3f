"""FeedReader — валидация и нормализация сырых чтений oracle фидов

Проверки (строго в этом порядке, первая неудачная прерывает чтение):
1. value > 0                                   → InvalidInput
2. updated_at != 0                             → IncompleteRoundData
3. answered_in_round >= round_id               → RoundRegression
4. updated_at <= now и now - updated_at <= max → StaleData

При успехе значение нормализуется к 18 decimals.

Два бюджета свежести: короткий для рыночных цен (порядка часа) и длинный
для макро-индекса (порядка 35 дней). Бюджет передаётся параметром.
"now" всегда передаёт вызывающая сторона: модуль не читает часы.
"""

import logging
from dataclasses import dataclass

from src.core.domain.feed import FeedReading
from src.core.errors import IncompleteRoundData, InvalidInput, RoundRegression, StaleData
from src.core.math.constants import MACRO_FEED_MAX_STALENESS, MARKET_FEED_MAX_STALENESS
from src.core.math.fixed_point import validate_uint
from src.core.math.price_math import normalize_amount

_log = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FeedReaderConfig:
    """Бюджеты свежести фидов (секунды)."""

    market_max_staleness: int = MARKET_FEED_MAX_STALENESS  # 1 час
    macro_max_staleness: int = MACRO_FEED_MAX_STALENESS  # 35 дней

    def __post_init__(self):
        if self.market_max_staleness <= 0 or self.macro_max_staleness <= 0:
            raise ValueError("staleness budgets must be positive")


# =============================================================================
# VALIDATION
# =============================================================================


def check_feed_reading(reading: FeedReading, now: int, max_staleness: int) -> int:
    """
    Проверка сырого чтения и нормализация к 18 decimals.

    Args:
        reading: Сырое чтение фида
        now: Текущее время (секунды), передаётся вызывающей стороной
        max_staleness: Бюджет свежести (секунды)

    Returns:
        Значение фида в 18 decimals

    Raises:
        InvalidInput: value <= 0
        IncompleteRoundData: updated_at == 0
        RoundRegression: answered_in_round < round_id
        StaleData: чтение из будущего или старше max_staleness
    """
    validate_uint(now, "now")
    validate_uint(max_staleness, "max_staleness")

    if reading.value <= 0:
        raise InvalidInput(f"Feed value must be positive, got {reading.value}")

    if reading.updated_at == 0:
        raise IncompleteRoundData(f"Round {reading.round_id} is not complete")

    if reading.answered_in_round < reading.round_id:
        raise RoundRegression(
            f"answered_in_round {reading.answered_in_round} < round_id {reading.round_id}"
        )

    if reading.updated_at > now:
        raise StaleData(f"updated_at {reading.updated_at} is in the future (now={now})")

    age = now - reading.updated_at
    if age > max_staleness:
        raise StaleData(f"Feed age {age}s exceeds max staleness {max_staleness}s")

    return normalize_amount(reading.value, reading.decimals)


# =============================================================================
# READER
# =============================================================================


class FeedReader:
    """
    Чтение рыночных цен и макро-индекса с соответствующими бюджетами свежести.

    Не хранит состояния между вызовами, не делает повторных запросов.
    """

    def __init__(self, config: FeedReaderConfig | None = None):
        self.config = config or FeedReaderConfig()

    def read_market_price(self, reading: FeedReading, now: int) -> int:
        """Рыночная цена (короткий бюджет свежести)."""
        price = check_feed_reading(reading, now, self.config.market_max_staleness)
        _log.debug("market price round=%d price=%d", reading.round_id, price)
        return price

    def read_macro_index(self, reading: FeedReading, now: int) -> int:
        """Значение макро-индекса (длинный бюджет свежести)."""
        value = check_feed_reading(reading, now, self.config.macro_max_staleness)
        _log.debug("macro index round=%d value=%d", reading.round_id, value)
        return value
