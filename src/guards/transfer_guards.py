"""Transfer guards — композиция проверок перевода до изменения балансов

Каждый guard — независимый предикат над TransferRequest. Guards
вычисляются в заданном порядке; первый заблокировавший определяет
результат, остальные не вызываются.

Guards:
- PauseGuard: все переводы заблокированы на паузе
- BlocklistGuard: отправитель или получатель в blocklist
- CustodianGuard: вывод с кастодиального счёта только его кастодианом
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Mapping, Protocol, Sequence


# =============================================================================
# TYPES
# =============================================================================


@dataclass(frozen=True)
class TransferRequest:
    """Запрос перевода (до изменения балансов)."""

    operator: str  # инициатор вызова
    sender: str
    recipient: str
    amount: int


@dataclass(frozen=True)
class GuardResult:
    """Результат проверки guard'а."""

    transfer_allowed: bool
    block_reason: str
    guard_name: str = ""
    details: str = ""


ALLOWED = GuardResult(transfer_allowed=True, block_reason="")


class TransferGuard(Protocol):
    """Предикат над запросом перевода."""

    name: str

    def evaluate(self, request: TransferRequest) -> GuardResult:
        ...


# =============================================================================
# GUARDS
# =============================================================================


@dataclass(frozen=True)
class PauseGuard:
    paused: bool = False
    name: str = "pause"

    def evaluate(self, request: TransferRequest) -> GuardResult:
        if self.paused:
            return GuardResult(
                transfer_allowed=False,
                block_reason="paused",
                guard_name=self.name,
                details="Transfers are paused",
            )
        return ALLOWED


@dataclass(frozen=True)
class BlocklistGuard:
    blocked: FrozenSet[str] = field(default_factory=frozenset)
    name: str = "blocklist"

    def evaluate(self, request: TransferRequest) -> GuardResult:
        for role, account in (("sender", request.sender), ("recipient", request.recipient)):
            if account in self.blocked:
                return GuardResult(
                    transfer_allowed=False,
                    block_reason=f"{role}_blocked",
                    guard_name=self.name,
                    details=f"{role} {account} is blocklisted",
                )
        return ALLOWED


@dataclass(frozen=True)
class CustodianGuard:
    """
    Кастодиальные счета: account → custodian.

    Списание с кастодиального счёта разрешено только его кастодиану.
    Зачисление на кастодиальный счёт не ограничено.
    """

    custody: Mapping[str, str] = field(default_factory=dict)
    name: str = "custodian"

    def evaluate(self, request: TransferRequest) -> GuardResult:
        custodian = self.custody.get(request.sender)
        if custodian is not None and request.operator != custodian:
            return GuardResult(
                transfer_allowed=False,
                block_reason="custodian_required",
                guard_name=self.name,
                details=(
                    f"Account {request.sender} is held by custodian {custodian}, "
                    f"operator {request.operator} is not allowed"
                ),
            )
        return ALLOWED


# =============================================================================
# COMPOSITION
# =============================================================================


def evaluate_transfer_guards(
    guards: Sequence[TransferGuard], request: TransferRequest
) -> GuardResult:
    """
    Последовательная проверка guards. Первый блок прерывает цепочку.

    Returns:
        Результат первого заблокировавшего guard'а или ALLOWED
    """
    for guard in guards:
        result = guard.evaluate(request)
        if not result.transfer_allowed:
            return result
    return ALLOWED
