"""
InflationAdjuster — Коэффициент корректировки reference unit по макро-индексу

Формулы:
    actual_multiplier = current * SCALE / previous
    factor = current * SCALE^2 / (previous * target_monthly_growth)

factor == SCALE когда фактический рост индекса равен целевому; растёт
монотонно с current. Вычисляется одним умножением-делением, без
промежуточной потери точности.
"""

from src.core.errors import InvalidInput
from src.core.math.constants import SCALE, TARGET_MONTHLY_GROWTH_FACTOR
from src.core.math.fixed_point import mul_div, validate_uint


def _require_positive_readings(current: int, previous: int) -> None:
    validate_uint(current, "current")
    validate_uint(previous, "previous")
    if current == 0 or previous == 0:
        raise InvalidInput(
            f"index readings must be positive (current={current}, previous={previous})"
        )


def actual_multiplier(current: int, previous: int) -> int:
    """
    Фактический рост индекса между двумя чтениями.

    Raises:
        InvalidInput: Если любое чтение равно нулю
    """
    _require_positive_readings(current, previous)
    return mul_div(current, SCALE, previous)


def adjustment_factor(
    current: int,
    previous: int,
    target_monthly_growth: int = TARGET_MONTHLY_GROWTH_FACTOR,
) -> int:
    """
    Коэффициент корректировки reference unit.

    Args:
        current: Текущее значение индекса (18 decimals)
        previous: Предыдущее значение индекса (18 decimals)
        target_monthly_growth: Целевой месячный рост (SCALE = 0%)

    Returns:
        current * SCALE^2 / (previous * target_monthly_growth)

    Raises:
        InvalidInput: Если чтения или target не положительные

    Examples:
        >>> adjustment_factor(101 * 10**18, 100 * 10**18, 101 * 10**16)
        1000000000000000000
    """
    _require_positive_readings(current, previous)
    validate_uint(target_monthly_growth, "target_monthly_growth")
    if target_monthly_growth == 0:
        raise InvalidInput("target_monthly_growth must be positive")

    return mul_div(current, SCALE * SCALE, previous * target_monthly_growth)


def recalibrate_reference(reference_price: int, factor: int) -> int:
    """
    Новая целевая стоимость reference unit после применения коэффициента.

    Returns:
        reference_price * factor / SCALE
    """
    validate_uint(reference_price, "reference_price")
    validate_uint(factor, "factor")
    return mul_div(reference_price, factor, SCALE)
