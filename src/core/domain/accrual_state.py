"""
AccrualState / UserPosition — Состояние пула начислений (accumulator-per-share)

Immutable Pydantic модели. Каждый переход (accrue, deposit, withdraw)
возвращает НОВЫЕ экземпляры; исходные объекты не изменяются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. acc_per_share никогда не убывает
2. После deposit/withdraw reward_debt позиции == amount * acc / ACC_PRECISION
3. Выплаченная при deposit/withdraw награда == pending до перехода
"""

from typing import NamedTuple

from pydantic import BaseModel, Field

from src.core.domain.types import Uint256
from src.core.errors import InvalidInput
from src.core.math.accrual import (
    acc_per_share_after,
    pending_reward,
    reward_debt,
)
from src.core.math.fixed_point import checked_add, checked_sub, validate_uint


class UserPosition(BaseModel):
    """Позиция пользователя в пуле."""

    amount: Uint256 = Field(0, description="Застейканная сумма")
    reward_debt: Uint256 = Field(0, description="Reward debt (ACC_PRECISION учтён)")

    model_config = {"frozen": True}


class AccrualTransition(NamedTuple):
    """Результат перехода: новое состояние пула, новая позиция, выплаченная награда."""

    state: "AccrualState"
    position: UserPosition
    harvested: int


class AccrualState(BaseModel):
    """
    Состояние пула начислений.

    Example:
        >>> state = AccrualState()
        >>> step = state.deposit(UserPosition(), 100)
        >>> step.state.accrue(50).pending(step.position)
        50
    """

    acc_per_share: Uint256 = Field(0, description="Accumulator per share (ACC_PRECISION)")
    total_staked: Uint256 = Field(0, description="Суммарный stake пула")

    model_config = {"frozen": True}

    def accrue(self, pool_reward: int) -> "AccrualState":
        """
        Распределение награды пула по текущему stake.

        При total_staked == 0 accumulator не изменяется (награда не распределяется).
        """
        return AccrualState(
            acc_per_share=acc_per_share_after(
                self.acc_per_share, pool_reward, self.total_staked
            ),
            total_staked=self.total_staked,
        )

    def pending(self, position: UserPosition) -> int:
        """Невыплаченная награда позиции при текущем accumulator."""
        return pending_reward(position.amount, self.acc_per_share, position.reward_debt)

    def deposit(self, position: UserPosition, amount: int) -> AccrualTransition:
        """
        Депозит в пул.

        Накопленная награда выплачивается (harvest), reward_debt
        пересчитывается от нового amount.
        """
        validate_uint(amount, "amount")
        harvested = self.pending(position)

        new_amount = checked_add(position.amount, amount)
        new_position = UserPosition(
            amount=new_amount,
            reward_debt=reward_debt(new_amount, self.acc_per_share),
        )
        new_state = AccrualState(
            acc_per_share=self.acc_per_share,
            total_staked=checked_add(self.total_staked, amount),
        )
        return AccrualTransition(state=new_state, position=new_position, harvested=harvested)

    def withdraw(self, position: UserPosition, amount: int) -> AccrualTransition:
        """
        Вывод из пула.

        Raises:
            InvalidInput: Если amount больше застейканного в позиции
        """
        validate_uint(amount, "amount")
        if amount > position.amount:
            raise InvalidInput(
                f"withdraw amount {amount} exceeds position amount {position.amount}"
            )
        harvested = self.pending(position)

        new_amount = position.amount - amount
        new_position = UserPosition(
            amount=new_amount,
            reward_debt=reward_debt(new_amount, self.acc_per_share),
        )
        new_state = AccrualState(
            acc_per_share=self.acc_per_share,
            total_staked=checked_sub(self.total_staked, amount),
        )
        return AccrualTransition(state=new_state, position=new_position, harvested=harvested)
