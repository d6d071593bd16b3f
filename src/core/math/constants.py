"""
NumericConstants — Общие масштабы, границы и пороги

Единственный источник числовых констант ядра. Все вычисления ведутся в
целых числах с фиксированной точкой 10^18 (FixedPoint18).
"""

from typing import Final

# =============================================================================
# FIXED-POINT МАСШТАБЫ
# =============================================================================

# Каноническая точность (18 decimals)
SCALE: Final[int] = 10**18

# Точность цен (quote units за 1 base unit, 18 decimals)
PRICE_PRECISION: Final[int] = 10**18

# Числитель для инверсии цены: 1e18 * 1e18
INVERSE_PRICE_NUMERATOR: Final[int] = 10**36

# Точность accumulator-per-share
ACC_PRECISION: Final[int] = 10**18

# Каноническое число decimals
CANONICAL_DECIMALS: Final[int] = 18

# Масштабы для статических decimal-классов
SCALE_8_TO_18: Final[int] = 10**10
SCALE_6_TO_18: Final[int] = 10**12

# Basis points: 10000 bps = 100%
BPS_BASE: Final[int] = 10_000

# Конверсия bps → 18-decimal доля: 1 bps = 1e14
BPS_TO_WAD: Final[int] = SCALE // BPS_BASE


# =============================================================================
# ГРАНИЦЫ
# =============================================================================

MAX_UINT256: Final[int] = 2**256 - 1

# Dust floor: минимальная USD стоимость операции (0.001 USD)
MIN_USD_VALUE: Final[int] = 10**15

# CR = 100%
ONE_HUNDRED_PERCENT_CR: Final[int] = SCALE


# =============================================================================
# ВРЕМЯ
# =============================================================================

SECONDS_PER_DAY: Final[int] = 86_400
SECONDS_PER_YEAR: Final[int] = 365 * SECONDS_PER_DAY

# Staleness budget для рыночных фидов (1 час)
MARKET_FEED_MAX_STALENESS: Final[int] = 3_600

# Staleness budget для макро-индексов (PCE/CPI публикуются раз в месяц)
MACRO_FEED_MAX_STALENESS: Final[int] = 35 * SECONDS_PER_DAY

# Минимальный период TWAP (30 минут)
TWAP_MIN_PERIOD: Final[int] = 30 * 60


# =============================================================================
# ИНФЛЯЦИЯ
# =============================================================================

# (1.02)^(1/12): целевой месячный рост reference unit при 2% годовых
TARGET_MONTHLY_GROWTH_FACTOR: Final[int] = 1_001_651_581_301_920_000
