"""
PriceMath — Проверка отклонений, инверсия и spot-цены

Модуль содержит ценовые примитивы:
- deviation_within: асимметричная проверка отклонения (база — первый аргумент)
- inverse_price: 1e36 / p
- normalize_amount: нормализация для динамических decimals (из фида)
- spot_price: цена из резервов пула
- twap_price: time-weighted average из кумулятивных наблюдений

Асимметрия deviation_within сохраняется намеренно: перестановка a/b
меняет результат на границе.
"""

from src.core.errors import InvalidInput, ObservationWindowTooShort, ZeroPrice, ZeroReserve
from src.core.math.constants import (
    BPS_BASE,
    CANONICAL_DECIMALS,
    INVERSE_PRICE_NUMERATOR,
    PRICE_PRECISION,
)
from src.core.math.fixed_point import checked_mul, checked_sub, mul_div, validate_uint

# Максимальное число decimals, принимаемое от внешнего фида
MAX_FEED_DECIMALS = 36


# =============================================================================
# ОТКЛОНЕНИЯ
# =============================================================================


def deviation_within(a: int, b: int, max_bps: int) -> bool:
    """
    Проверка, что |a - b| не превышает max_bps от a.

    Формула: |a - b| * BPS_BASE <= a * max_bps

    Args:
        a: Базовая цена (процентная база)
        b: Сравниваемая цена
        max_bps: Допустимое отклонение в basis points

    Returns:
        False если a или b равны нулю, иначе результат проверки

    Examples:
        >>> deviation_within(100, 101, 100)
        True
        >>> deviation_within(100, 102, 100)
        False
        >>> deviation_within(0, 100, 10_000)
        False
    """
    if a == 0 or b == 0:
        return False

    diff = a - b if a > b else b - a
    return diff * BPS_BASE <= a * max_bps


# =============================================================================
# ИНВЕРСИЯ И НОРМАЛИЗАЦИЯ
# =============================================================================


def inverse_price(price: int) -> int:
    """
    Инверсия цены: quote/base → base/quote.

    Args:
        price: Цена в 18 decimals (> 0)

    Returns:
        1e36 / price

    Raises:
        ZeroPrice: Если price == 0
    """
    validate_uint(price, "price")
    if price == 0:
        raise ZeroPrice("Cannot invert zero price")
    return INVERSE_PRICE_NUMERATOR // price


def normalize_amount(amount: int, decimals: int) -> int:
    """
    Нормализация суммы с произвольным числом decimals к 18 decimals.

    Используется только для decimals, прочитанных из внешнего фида.
    Для токенов из whitelist используется DecimalNormalizer.

    Args:
        amount: Сумма в исходных decimals
        decimals: Число decimals (0..36)

    Returns:
        Сумма в 18 decimals (floor при уменьшении точности)

    Raises:
        InvalidInput: Если decimals вне [0, 36]
    """
    validate_uint(amount, "amount")
    if not isinstance(decimals, int) or isinstance(decimals, bool):
        raise TypeError("decimals must be an int")
    if decimals < 0 or decimals > MAX_FEED_DECIMALS:
        raise InvalidInput(f"decimals must be in [0, {MAX_FEED_DECIMALS}], got {decimals}")

    if decimals == CANONICAL_DECIMALS:
        return amount
    if decimals < CANONICAL_DECIMALS:
        return checked_mul(amount, 10 ** (CANONICAL_DECIMALS - decimals))
    return amount // 10 ** (decimals - CANONICAL_DECIMALS)


# =============================================================================
# SPOT И TWAP
# =============================================================================


def spot_price(
    reserve_base: int,
    reserve_quote: int,
    base_decimals: int,
    quote_decimals: int,
) -> int:
    """
    Spot-цена base в quote единицах из резервов пула.

    Формула: quote_norm * 1e18 / base_norm

    Args:
        reserve_base: Резерв базового токена (native decimals)
        reserve_quote: Резерв quote токена (native decimals)
        base_decimals: Decimals базового токена
        quote_decimals: Decimals quote токена

    Returns:
        Цена в 18 decimals

    Raises:
        ZeroReserve: Если reserve_base == 0

    Examples:
        >>> spot_price(100 * 10**8, 5_000_000 * 10**6, 8, 6) == 50_000 * 10**18
        True
    """
    if reserve_base == 0:
        raise ZeroReserve("Base reserve is zero")

    base_norm = normalize_amount(reserve_base, base_decimals)
    quote_norm = normalize_amount(reserve_quote, quote_decimals)

    if base_norm == 0:
        raise ZeroReserve("Base reserve normalizes to zero")

    return mul_div(quote_norm, PRICE_PRECISION, base_norm)


def twap_price(
    cumulative_start: int,
    cumulative_end: int,
    ts_start: int,
    ts_end: int,
    min_period: int,
) -> int:
    """
    Time-weighted average price из двух кумулятивных наблюдений.

    Кумулятив — сумма (price_18 * seconds), накопленная пулом.
    TWAP = (cumulative_end - cumulative_start) / (ts_end - ts_start)

    Args:
        cumulative_start: Кумулятив в более раннем наблюдении
        cumulative_end: Кумулятив в текущий момент
        ts_start: Timestamp раннего наблюдения (секунды)
        ts_end: Текущий timestamp (секунды)
        min_period: Минимальная длина окна (секунды)

    Returns:
        TWAP в 18 decimals

    Raises:
        ObservationWindowTooShort: Если окно короче min_period
        ArithmeticOverflow: Если кумулятив уменьшился
    """
    if ts_end <= ts_start or ts_end - ts_start < min_period:
        raise ObservationWindowTooShort(
            f"No observation >= {min_period}s ago (window={ts_end - ts_start}s)"
        )

    elapsed = ts_end - ts_start
    return checked_sub(cumulative_end, cumulative_start) // elapsed
