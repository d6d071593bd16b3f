"""
AccrualMath — Accumulator-per-share, pending rewards и начисление процентов

Формулы:
    acc' = acc + pool_reward * ACC_PRECISION / total_staked
    pending = max(amount * acc / ACC_PRECISION - reward_debt, 0)
    reward_debt = amount * acc / ACC_PRECISION
    interest = principal * rate_bps * elapsed / (BPS_BASE * SECONDS_PER_YEAR)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Accumulator никогда не убывает
2. pending никогда не отрицательный
3. principal_share + interest_share == amount при выводе
"""

from typing import NamedTuple

from src.core.errors import InvalidInput
from src.core.math.constants import ACC_PRECISION, BPS_BASE, SECONDS_PER_YEAR
from src.core.math.fixed_point import checked_add, mul_div, saturating_sub, validate_uint


class WithdrawalSplit(NamedTuple):
    """Разбиение вывода на principal и interest."""

    principal: int
    interest: int


# =============================================================================
# ACCUMULATOR-PER-SHARE
# =============================================================================


def acc_per_share_after(acc_per_share: int, pool_reward: int, total_staked: int) -> int:
    """
    Новое значение accumulator-per-share после распределения награды.

    Args:
        acc_per_share: Текущий accumulator (ACC_PRECISION)
        pool_reward: Награда пула за период
        total_staked: Суммарный stake

    Returns:
        acc + pool_reward * ACC_PRECISION / total_staked;
        acc без изменений, если total_staked или pool_reward равны нулю
    """
    validate_uint(acc_per_share, "acc_per_share")
    validate_uint(pool_reward, "pool_reward")
    validate_uint(total_staked, "total_staked")

    if total_staked == 0 or pool_reward == 0:
        return acc_per_share

    return checked_add(acc_per_share, mul_div(pool_reward, ACC_PRECISION, total_staked))


def reward_debt(amount: int, acc_per_share: int) -> int:
    """Reward debt позиции: amount * acc / ACC_PRECISION."""
    validate_uint(amount, "amount")
    validate_uint(acc_per_share, "acc_per_share")
    return mul_div(amount, acc_per_share, ACC_PRECISION)


def pending_reward(amount: int, acc_per_share: int, debt: int) -> int:
    """
    Невыплаченная награда позиции.

    Returns:
        max(amount * acc / ACC_PRECISION - debt, 0)
    """
    validate_uint(debt, "debt")
    return saturating_sub(reward_debt(amount, acc_per_share), debt)


# =============================================================================
# ВЫВОД
# =============================================================================


def split_withdrawal(amount: int, pending_interest: int, total_available: int) -> WithdrawalSplit:
    """
    Разбиение суммы вывода на principal и interest пропорционально.

    Args:
        amount: Сумма вывода
        pending_interest: Накопленный, но не выплаченный процент
        total_available: Всего доступно (principal + interest)

    Returns:
        WithdrawalSplit(principal, interest):
        - (0, 0) если amount == 0
        - interest = 0 если нет процентов или total_available == 0
        - interest = min(amount * pending_interest / total_available, amount)
    """
    validate_uint(amount, "amount")
    validate_uint(pending_interest, "pending_interest")
    validate_uint(total_available, "total_available")

    if amount == 0:
        return WithdrawalSplit(principal=0, interest=0)

    if pending_interest == 0 or total_available == 0:
        return WithdrawalSplit(principal=amount, interest=0)

    interest = min(mul_div(amount, pending_interest, total_available), amount)
    return WithdrawalSplit(principal=amount - interest, interest=interest)


# =============================================================================
# НАЧИСЛЕНИЕ ПРОЦЕНТОВ
# =============================================================================


def accrued_interest(
    principal: int,
    annual_rate_bps: int,
    elapsed_seconds: int,
    seconds_per_year: int = SECONDS_PER_YEAR,
) -> int:
    """
    Простой процент за период (без капитализации).

    Вычисляется одним mul_div: principal * rate * elapsed / (BPS_BASE * year).
    """
    validate_uint(principal, "principal")
    validate_uint(annual_rate_bps, "annual_rate_bps")
    validate_uint(elapsed_seconds, "elapsed_seconds")
    if seconds_per_year <= 0:
        raise InvalidInput(f"seconds_per_year must be positive, got {seconds_per_year}")

    if principal == 0 or annual_rate_bps == 0 or elapsed_seconds == 0:
        return 0

    return mul_div(principal, annual_rate_bps * elapsed_seconds, BPS_BASE * seconds_per_year)


def total_assets_with_accrued(
    principal: int,
    annual_rate_bps: int,
    elapsed_seconds: int,
    seconds_per_year: int = SECONDS_PER_YEAR,
) -> int:
    """
    Principal плюс начисленный процент.

    Returns:
        principal без изменений если elapsed == 0 или rate == 0
    """
    interest = accrued_interest(principal, annual_rate_bps, elapsed_seconds, seconds_per_year)
    return checked_add(principal, interest)


# =============================================================================
# ЭМИССИЯ (farming)
# =============================================================================


def emission_for(
    elapsed_seconds: int,
    reward_per_second: int,
    alloc_point: int,
    total_alloc_point: int,
) -> int:
    """
    Эмиссия награды пулу за период по его доле alloc points.

    Returns:
        elapsed * reward_per_second * alloc_point / total_alloc_point;
        0 если total_alloc_point == 0
    """
    validate_uint(elapsed_seconds, "elapsed_seconds")
    validate_uint(reward_per_second, "reward_per_second")
    validate_uint(alloc_point, "alloc_point")
    validate_uint(total_alloc_point, "total_alloc_point")

    if total_alloc_point == 0:
        return 0
    if alloc_point > total_alloc_point:
        raise InvalidInput(
            f"alloc_point {alloc_point} exceeds total_alloc_point {total_alloc_point}"
        )

    return mul_div(elapsed_seconds * reward_per_second, alloc_point, total_alloc_point)
