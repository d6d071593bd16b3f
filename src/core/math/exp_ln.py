"""
ExpLn — Fixed-point аппроксимации e^x, ln(x) и sigmoid

Все значения — знаковые int с масштабом 1e18 (WAD). Это осознанная
аппроксимация: гарантируются монотонность и граничные clamp'ы, а не
побитовое совпадение с точным значением.

exp_wad:
    - Таблица якорей e^n для целых n в [-5, 5]
    - Дробный остаток f ∈ [0, 1) уточняется коротким степенным рядом e^f
    - Между ±5 и ±10 — линейная интерполяция к якорям насыщения
    - За пределами ±10 — насыщение на якоре e^±10

ln_wad:
    - Повторное деление/умножение на e приводит аргумент к [1, e)
    - 7 нечётных членов ряда 2*atanh((y-1)/(y+1))

logit_wad:
    - Внутри таблицы якорей через ln_wad
    - На участках линейной интерполяции ±5..±10 через обращение хорды,
      так что exp_wad(logit) >= отношение и отличается от него не более
      чем на один шаг хорды

sigmoid_wad:
    - e^x / (1 + e^x), насыщение в 0 / 1 за пределами ±10
"""

from types import MappingProxyType
from typing import Final, Mapping

from src.core.errors import InvalidInput

WAD: Final[int] = 10**18

# e в WAD
E_WAD: Final[int] = 2_718_281_828_459_045_235

# Граница таблицы якорей и насыщения (в единицах log-space)
ANCHOR_LIMIT: Final[int] = 5
SATURATION_LIMIT: Final[int] = 10

# e^n в WAD для n ∈ [-5, 5]
EXP_ANCHORS: Final[Mapping[int, int]] = MappingProxyType(
    {
        -5: 6_737_946_999_085_467,
        -4: 18_315_638_888_734_180,
        -3: 49_787_068_367_863_943,
        -2: 135_335_283_236_612_691,
        -1: 367_879_441_171_442_321,
        0: WAD,
        1: E_WAD,
        2: 7_389_056_098_930_650_227,
        3: 20_085_536_923_187_667_741,
        4: 54_598_150_033_144_239_078,
        5: 148_413_159_102_576_603_421,
    }
)

# Якоря насыщения e^10 и e^-10
EXP_POS_SATURATION: Final[int] = 22_026_465_794_806_716_516_957
EXP_NEG_SATURATION: Final[int] = 45_399_929_762_485

# Число членов ряда e^f для дробного остатка
_EXP_FRACTION_TERMS: Final[int] = 12

# Число нечётных членов ряда atanh
_LN_SERIES_TERMS: Final[int] = 7


# =============================================================================
# EXP
# =============================================================================


def _exp_fraction(f: int) -> int:
    """e^f для f ∈ [0, WAD), ряд Тейлора с floor на каждом члене."""
    term = WAD
    total = WAD
    for k in range(1, _EXP_FRACTION_TERMS + 1):
        term = term * f // (WAD * k)
        if term == 0:
            break
        total += term
    return total


def exp_wad(x: int) -> int:
    """
    Аппроксимация e^x в WAD.

    Args:
        x: Показатель степени в WAD (знаковый)

    Returns:
        e^x в WAD, монотонно неубывающая по x, в
        [EXP_NEG_SATURATION, EXP_POS_SATURATION]

    Examples:
        >>> exp_wad(0)
        1000000000000000000
        >>> exp_wad(10**18) == E_WAD
        True
    """
    upper = SATURATION_LIMIT * WAD
    anchor_span = ANCHOR_LIMIT * WAD

    if x >= upper:
        return EXP_POS_SATURATION
    if x <= -upper:
        return EXP_NEG_SATURATION

    if x > anchor_span:
        # Линейная интерполяция e^5 → e^10
        e5 = EXP_ANCHORS[ANCHOR_LIMIT]
        return e5 + (EXP_POS_SATURATION - e5) * (x - anchor_span) // (upper - anchor_span)

    if x < -anchor_span:
        # Линейная интерполяция e^-10 → e^-5
        e_neg5 = EXP_ANCHORS[-ANCHOR_LIMIT]
        return EXP_NEG_SATURATION + (e_neg5 - EXP_NEG_SATURATION) * (x + upper) // (
            upper - anchor_span
        )

    n = x // WAD  # floor, f всегда в [0, WAD)
    f = x - n * WAD
    anchor = EXP_ANCHORS[n]
    if f == 0:
        return anchor
    return anchor * _exp_fraction(f) // WAD


# =============================================================================
# LN
# =============================================================================


def ln_wad(x: int) -> int:
    """
    Аппроксимация натурального логарифма в WAD.

    Args:
        x: Аргумент в WAD (> 0)

    Returns:
        ln(x) в WAD (знаковый)

    Raises:
        InvalidInput: Если x <= 0

    Examples:
        >>> ln_wad(10**18)
        0
        >>> ln_wad(E_WAD)
        1000000000000000000
    """
    if x <= 0:
        raise InvalidInput(f"ln argument must be positive, got {x}")

    k = 0
    y = x

    # Приведение к [1, e)
    while y >= E_WAD:
        y = y * WAD // E_WAD
        k += 1
    while y < WAD:
        y = y * E_WAD // WAD
        k -= 1

    # 2 * atanh(z), z = (y - 1) / (y + 1) ∈ [0, 0.4621)
    z = (y - WAD) * WAD // (y + WAD)
    z_squared = z * z // WAD

    term = z
    series = z
    for i in range(1, _LN_SERIES_TERMS):
        term = term * z_squared // WAD
        series += term // (2 * i + 1)

    return k * WAD + 2 * series


# =============================================================================
# SIGMOID
# =============================================================================


def sigmoid_wad(x: int) -> int:
    """
    Логистическая функция e^x / (1 + e^x) в WAD.

    Returns:
        Значение в [0, WAD]: 0 при x <= -10, WAD при x >= 10
    """
    bound = SATURATION_LIMIT * WAD
    if x >= bound:
        return WAD
    if x <= -bound:
        return 0

    ex = exp_wad(x)
    return ex * WAD // (WAD + ex)


def logit_wad(p: int, ceiling: int) -> int:
    """
    ln(p / (ceiling - p)) — обратная к ceiling * sigmoid.

    Raises:
        InvalidInput: Если p вне (0, ceiling)
    """
    if p <= 0 or p >= ceiling:
        raise InvalidInput(f"logit argument must be in (0, {ceiling}), got {p}")
    return _log_of_exp_wad(p * WAD // (ceiling - p))


def _log_of_exp_wad(r: int) -> int:
    """
    Логарифм r, согласованный с exp_wad.

    На участках хорды возвращает наименьший x, для которого exp_wad(x) >= r.
    Вне [e^-10, e^10] насыщается на ±10.
    """
    upper = SATURATION_LIMIT * WAD
    chord_span = (SATURATION_LIMIT - ANCHOR_LIMIT) * WAD
    e5 = EXP_ANCHORS[ANCHOR_LIMIT]
    e_neg5 = EXP_ANCHORS[-ANCHOR_LIMIT]

    if r >= EXP_POS_SATURATION:
        return upper
    if r <= EXP_NEG_SATURATION:
        return -upper
    if r > e5:
        return upper - chord_span + _ceil_div((r - e5) * chord_span, EXP_POS_SATURATION - e5)
    if r < e_neg5:
        return -upper + _ceil_div(
            (r - EXP_NEG_SATURATION) * chord_span, e_neg5 - EXP_NEG_SATURATION
        )
    return ln_wad(r)


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)
