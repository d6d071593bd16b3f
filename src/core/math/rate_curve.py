"""
RateCurve — Sigmoid процентная кривая от CR и отклонения цены от peg

Две кривые (primary unit, bond unit) используют один алгоритм с разными
наборами параметров (потолок, steepness, множитель чувствительности к CR 1×/3×).

АЛГОРИТМ:
    1. Δ = cr_adjustment(CR) — кусочно-линейная асимметричная поправка:
       отрицательная (с капом) выше 100% CR, положительная (с капом) ниже,
       ровно 0 при CR = 100%
    2. base = default * (1 + Δ), clamp в [min, max]; base >= max → max
    3. beta = ln(base / (max - base))
    4. x = beta - steepness * (price - 1)   при price >= 1
       x = beta + steepness * (1 - price)   при price <  1
    5. sigmoid(x) = e^x / (1 + e^x), насыщение за пределами ±10
    6. rate = max * sigmoid(x), clamp в [min, max]

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда в [min_rate, max_rate]
2. При price == 1.0 и CR == 1.0 результат равен default_rate (после clamp)
3. Результат не возрастает по price и не возрастает по CR
4. При CR < 100% и равных default_rate bond-кривая >= primary-кривой
"""

from dataclasses import dataclass
from typing import Final

from pydantic import BaseModel, Field, model_validator

from src.core.math.constants import BPS_BASE, BPS_TO_WAD, MAX_UINT256, SCALE
from src.core.math.exp_ln import WAD, logit_wad, sigmoid_wad
from src.core.math.fixed_point import clamp

# =============================================================================
# ПАРАМЕТРЫ CR-ПОПРАВКИ
# =============================================================================

# Выше этого CR отрицательная поправка больше не растёт
CR_HIGH_THRESHOLD: Final[int] = 15 * SCALE // 10  # 150%

# Ниже этого CR положительная поправка больше не растёт
CR_LOW_THRESHOLD: Final[int] = SCALE // 2  # 50%

# Кап отрицательной поправки: ставка снижается максимум вдвое
MAX_NEGATIVE_CR_ADJUSTMENT: Final[int] = SCALE // 2

# Кап положительной поправки (до множителя): ставка растёт максимум вдвое
MAX_POSITIVE_CR_ADJUSTMENT: Final[int] = SCALE

PEG_PRICE: Final[int] = SCALE


# =============================================================================
# ТИПЫ
# =============================================================================


class RateCurveParams(BaseModel):
    """
    Параметры одного вычисления ставки.

    Вычисляется по запросу, внутри ядра не хранится.
    """

    price_to_peg: int = Field(
        ..., strict=True, ge=0, le=MAX_UINT256, description="Цена к peg (1e18 = на peg)"
    )
    collateral_ratio: int = Field(
        ..., strict=True, ge=0, le=MAX_UINT256, description="CR (1e18 = 100%)"
    )
    default_rate_bps: int = Field(
        ..., strict=True, ge=0, le=BPS_BASE, description="Базовая ставка (bps)"
    )
    max_rate_bps: int = Field(
        ..., strict=True, gt=0, le=BPS_BASE, description="Потолок ставки (bps)"
    )
    min_rate_bps: int = Field(
        0, strict=True, ge=0, le=BPS_BASE, description="Пол ставки (bps)"
    )
    steepness: int = Field(
        ..., strict=True, ge=0, le=1_000 * SCALE, description="Крутизна по цене (WAD)"
    )
    cr_multiplier: int = Field(
        1, strict=True, ge=1, le=10, description="Множитель чувствительности к CR"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_rate_bounds(self) -> "RateCurveParams":
        """min_rate <= max_rate."""
        if self.min_rate_bps > self.max_rate_bps:
            raise ValueError(
                f"min_rate_bps {self.min_rate_bps} exceeds max_rate_bps {self.max_rate_bps}"
            )
        return self


@dataclass(frozen=True)
class CurveShape:
    """Набор параметров кривой (governance конфигурация)."""

    default_rate_bps: int
    max_rate_bps: int
    min_rate_bps: int
    steepness: int
    cr_multiplier: int

    def params(self, price_to_peg: int, collateral_ratio: int) -> RateCurveParams:
        """Параметры для конкретной цены и CR."""
        return RateCurveParams(
            price_to_peg=price_to_peg,
            collateral_ratio=collateral_ratio,
            default_rate_bps=self.default_rate_bps,
            max_rate_bps=self.max_rate_bps,
            min_rate_bps=self.min_rate_bps,
            steepness=self.steepness,
            cr_multiplier=self.cr_multiplier,
        )


# Кривая primary unit
PRIMARY_CURVE: Final[CurveShape] = CurveShape(
    default_rate_bps=400,
    max_rate_bps=2_000,
    min_rate_bps=0,
    steepness=50 * SCALE,
    cr_multiplier=1,
)

# Кривая bond unit: выше потолок, мягче по цене, 3× чувствительность к CR
BOND_CURVE: Final[CurveShape] = CurveShape(
    default_rate_bps=600,
    max_rate_bps=4_000,
    min_rate_bps=0,
    steepness=30 * SCALE,
    cr_multiplier=3,
)


@dataclass(frozen=True)
class RateCurveResult:
    """Результат вычисления ставки."""

    rate_bps: int
    rate_wad: int

    # Диагностика
    base_rate_wad: int
    cr_adjustment: int
    beta: int
    x: int
    saturated: bool


# =============================================================================
# CR ПОПРАВКА
# =============================================================================


def cr_adjustment(collateral_ratio: int, multiplier: int = 1) -> int:
    """
    Знаковая поправка Δ (WAD) к базовой ставке от CR.

    CR >= 150%        → -0.5 (кап)
    100% < CR < 150%  → линейно от 0 до -0.5
    CR == 100%        → 0
    50% < CR < 100%   → линейно от 0 до +1.0 × multiplier
    CR <= 50%         → +1.0 × multiplier (кап)

    Args:
        collateral_ratio: CR (1e18 = 100%)
        multiplier: Множитель чувствительности для CR < 100%

    Returns:
        Δ в WAD
    """
    if collateral_ratio == SCALE:
        return 0

    if collateral_ratio > SCALE:
        excess = min(collateral_ratio, CR_HIGH_THRESHOLD) - SCALE
        return -(excess * MAX_NEGATIVE_CR_ADJUSTMENT // (CR_HIGH_THRESHOLD - SCALE))

    deficit = SCALE - max(collateral_ratio, CR_LOW_THRESHOLD)
    return deficit * MAX_POSITIVE_CR_ADJUSTMENT // (SCALE - CR_LOW_THRESHOLD) * multiplier


# =============================================================================
# RATE
# =============================================================================


def _wad_to_bps(rate_wad: int) -> int:
    # half-up
    return (rate_wad + BPS_TO_WAD // 2) // BPS_TO_WAD


def compute_rate(params: RateCurveParams) -> RateCurveResult:
    """
    Вычисление ставки по sigmoid кривой.

    Args:
        params: Параметры кривой, цена к peg и CR

    Returns:
        RateCurveResult со ставкой в bps и WAD и диагностикой
    """
    min_wad = params.min_rate_bps * BPS_TO_WAD
    max_wad = params.max_rate_bps * BPS_TO_WAD
    default_wad = params.default_rate_bps * BPS_TO_WAD

    # 1-2. Базовая ставка с CR поправкой
    delta = cr_adjustment(params.collateral_ratio, params.cr_multiplier)
    base_wad = clamp(default_wad * (SCALE + delta) // SCALE, min_wad, max_wad)

    if base_wad >= max_wad:
        return RateCurveResult(
            rate_bps=params.max_rate_bps,
            rate_wad=max_wad,
            base_rate_wad=base_wad,
            cr_adjustment=delta,
            beta=0,
            x=0,
            saturated=True,
        )

    if base_wad == 0:
        return RateCurveResult(
            rate_bps=params.min_rate_bps,
            rate_wad=min_wad,
            base_rate_wad=base_wad,
            cr_adjustment=delta,
            beta=0,
            x=0,
            saturated=True,
        )

    # 3. Logit базовой ставки относительно потолка
    beta = logit_wad(base_wad, max_wad)

    # 4. Сдвиг по отклонению цены от peg
    if params.price_to_peg >= PEG_PRICE:
        deviation = params.price_to_peg - PEG_PRICE
        x = beta - params.steepness * deviation // WAD
    else:
        deviation = PEG_PRICE - params.price_to_peg
        x = beta + params.steepness * deviation // WAD

    # 5-6. Sigmoid и clamp
    sig = sigmoid_wad(x)
    rate_wad = clamp(max_wad * sig // WAD, min_wad, max_wad)
    rate_bps = clamp(_wad_to_bps(rate_wad), params.min_rate_bps, params.max_rate_bps)

    return RateCurveResult(
        rate_bps=rate_bps,
        rate_wad=rate_wad,
        base_rate_wad=base_wad,
        cr_adjustment=delta,
        beta=beta,
        x=x,
        saturated=sig in (0, WAD),
    )


def primary_rate(
    price_to_peg: int,
    collateral_ratio: int,
    shape: CurveShape = PRIMARY_CURVE,
) -> int:
    """Ставка primary unit (bps)."""
    return compute_rate(shape.params(price_to_peg, collateral_ratio)).rate_bps


def bond_rate(
    price_to_peg: int,
    collateral_ratio: int,
    shape: CurveShape = BOND_CURVE,
) -> int:
    """Ставка bond unit (bps)."""
    return compute_rate(shape.params(price_to_peg, collateral_ratio)).rate_bps
