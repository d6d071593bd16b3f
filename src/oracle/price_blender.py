"""PriceBlender — медиана нескольких источников цены с проверкой отклонений

median3: сортирующая сеть из трёх сравнений, O(1).
blend_multi_source: insertion sort копии входа, медиана, затем КАЖДЫЙ
источник обязан быть в пределах max_bps от медианы. Выбросы не
отбрасываются молча: вызов целиком прерывается ExcessiveDeviation.
validate_all_within_bounds: попарная проверка O(n²), возвращает bool.
Рассчитан на <= 5 источников.
"""

import logging
from typing import List, Sequence

from src.core.errors import ExcessiveDeviation, InvalidInput
from src.core.math.fixed_point import validate_uint
from src.core.math.price_math import deviation_within

_log = logging.getLogger(__name__)

MIN_SOURCES = 2


def median3(a: int, b: int, c: int) -> int:
    """
    Медиана трёх значений через сортирующую сеть.

    Examples:
        >>> median3(3, 1, 2)
        2
        >>> median3(5, 5, 1)
        5
    """
    if a > b:
        a, b = b, a
    if b > c:
        b, c = c, b
    if a > b:
        a, b = b, a
    return b


def _insertion_sorted(prices: Sequence[int]) -> List[int]:
    result = list(prices)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def median_of(prices: Sequence[int]) -> int:
    """
    Медиана произвольного числа значений.

    Чётная длина: floor среднего двух центральных элементов.
    """
    if not prices:
        raise InvalidInput("Cannot take median of empty price list")
    ordered = _insertion_sorted(prices)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 1:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) // 2


def blend_multi_source(prices: Sequence[int], max_bps: int) -> int:
    """
    Медиана источников с проверкой отклонения каждого от медианы.

    Args:
        prices: Цены источников (18 decimals), минимум 2
        max_bps: Допустимое отклонение от медианы (bps)

    Returns:
        Медиана

    Raises:
        InvalidInput: Меньше двух источников
        ExcessiveDeviation: Хотя бы один источник отклоняется больше max_bps
    """
    validate_uint(max_bps, "max_bps")
    if len(prices) < MIN_SOURCES:
        raise InvalidInput(
            f"At least {MIN_SOURCES} price sources required, got {len(prices)}"
        )

    median = median_of(prices)

    for index, price in enumerate(prices):
        if not deviation_within(price, median, max_bps):
            raise ExcessiveDeviation(
                f"Source {index} price {price} deviates from median {median} "
                f"by more than {max_bps} bps"
            )

    _log.debug("blended %d sources median=%d", len(prices), median)
    return median


def validate_all_within_bounds(prices: Sequence[int], max_bps: int) -> bool:
    """
    Попарная проверка: каждая пара (i < j) в пределах max_bps.

    Процентная база пары — prices[i]. Не бросает исключений на
    отклонениях: результат возвращается как bool.
    """
    validate_uint(max_bps, "max_bps")
    for i in range(len(prices)):
        for j in range(i + 1, len(prices)):
            if not deviation_within(prices[i], prices[j], max_bps):
                return False
    return True
