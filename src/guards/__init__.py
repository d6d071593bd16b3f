"""Guards — проверки переводов и полномочий."""

from src.guards.roles import AuthorizationError, Role, check_role
from src.guards.transfer_guards import (
    ALLOWED,
    BlocklistGuard,
    CustodianGuard,
    GuardResult,
    PauseGuard,
    TransferGuard,
    TransferRequest,
    evaluate_transfer_guards,
)

__all__ = [
    # Transfer guards
    "ALLOWED",
    "TransferRequest",
    "GuardResult",
    "TransferGuard",
    "PauseGuard",
    "BlocklistGuard",
    "CustodianGuard",
    "evaluate_transfer_guards",
    # Roles
    "Role",
    "AuthorizationError",
    "check_role",
]
