"""
Тесты для transfer guards и проверки ролей

Проверяет:
1. Каждый guard независимо
2. Порядок вычисления: первый блок прерывает цепочку
3. check_role возвращает типизированную ошибку, а не исключение
"""

import pytest

from src.guards.roles import AuthorizationError, Role, check_role
from src.guards.transfer_guards import (
    ALLOWED,
    BlocklistGuard,
    CustodianGuard,
    GuardResult,
    PauseGuard,
    TransferRequest,
    evaluate_transfer_guards,
)


@pytest.fixture
def request_() -> TransferRequest:
    return TransferRequest(operator="alice", sender="alice", recipient="bob", amount=100)


class TestPauseGuard:
    """Тесты для PauseGuard"""

    def test_not_paused(self, request_: TransferRequest) -> None:
        assert PauseGuard().evaluate(request_).transfer_allowed is True

    def test_paused(self, request_: TransferRequest) -> None:
        result = PauseGuard(paused=True).evaluate(request_)
        assert result.transfer_allowed is False
        assert result.block_reason == "paused"


class TestBlocklistGuard:
    """Тесты для BlocklistGuard"""

    def test_sender_blocked(self, request_: TransferRequest) -> None:
        result = BlocklistGuard(blocked=frozenset({"alice"})).evaluate(request_)
        assert result.block_reason == "sender_blocked"

    def test_recipient_blocked(self, request_: TransferRequest) -> None:
        result = BlocklistGuard(blocked=frozenset({"bob"})).evaluate(request_)
        assert result.block_reason == "recipient_blocked"

    def test_clean(self, request_: TransferRequest) -> None:
        assert BlocklistGuard(blocked=frozenset({"eve"})).evaluate(request_) == ALLOWED


class TestCustodianGuard:
    """Тесты для CustodianGuard"""

    def test_custodian_may_move_funds(self) -> None:
        guard = CustodianGuard(custody={"alice": "custodian"})
        request = TransferRequest(operator="custodian", sender="alice", recipient="bob", amount=1)
        assert guard.evaluate(request).transfer_allowed is True

    def test_owner_may_not_move_custodied_funds(self, request_: TransferRequest) -> None:
        guard = CustodianGuard(custody={"alice": "custodian"})
        result = guard.evaluate(request_)
        assert result.transfer_allowed is False
        assert result.block_reason == "custodian_required"

    def test_deposit_into_custodial_account(self) -> None:
        guard = CustodianGuard(custody={"bob": "custodian"})
        request = TransferRequest(operator="alice", sender="alice", recipient="bob", amount=1)
        assert guard.evaluate(request).transfer_allowed is True


class TestEvaluateTransferGuards:
    """Тесты для evaluate_transfer_guards"""

    def test_empty_chain_allows(self, request_: TransferRequest) -> None:
        assert evaluate_transfer_guards([], request_) == ALLOWED

    def test_first_block_wins(self, request_: TransferRequest) -> None:
        guards = [
            BlocklistGuard(blocked=frozenset({"bob"})),
            PauseGuard(paused=True),
        ]
        result = evaluate_transfer_guards(guards, request_)
        assert result.guard_name == "blocklist"

    def test_guards_after_block_not_evaluated(self, request_: TransferRequest) -> None:
        calls = []

        class RecordingGuard:
            name = "recording"

            def evaluate(self, request: TransferRequest) -> GuardResult:
                calls.append(request)
                return ALLOWED

        evaluate_transfer_guards([PauseGuard(paused=True), RecordingGuard()], request_)
        assert calls == []

    def test_all_pass(self, request_: TransferRequest) -> None:
        guards = [PauseGuard(), BlocklistGuard(), CustodianGuard()]
        assert evaluate_transfer_guards(guards, request_).transfer_allowed is True


class TestCheckRole:
    """Тесты для check_role"""

    def test_granted(self) -> None:
        assert check_role({Role.MINTER, Role.PAUSER}, Role.MINTER) is None

    def test_missing_returns_error_value(self) -> None:
        error = check_role({Role.MINTER}, Role.RATE_SETTER)
        assert isinstance(error, AuthorizationError)
        assert error.required is Role.RATE_SETTER
        assert error.reason == "missing role rate_setter"

    def test_admin_not_implicit(self) -> None:
        """ADMIN не подразумевает остальные роли"""
        assert check_role({Role.ADMIN}, Role.MINTER) is not None
