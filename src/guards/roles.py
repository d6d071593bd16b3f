"""Роли и проверка полномочий

check_role вызывается в начале операции вызывающей стороны и возвращает
типизированную ошибку авторизации вместо исключения.
"""

from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Optional


class Role(str, Enum):
    """Полномочия операций протокола."""

    ADMIN = "admin"
    MINTER = "minter"
    PAUSER = "pauser"
    ORACLE_UPDATER = "oracle_updater"
    RATE_SETTER = "rate_setter"
    BLOCKLISTER = "blocklister"
    CUSTODIAN = "custodian"


@dataclass(frozen=True)
class AuthorizationError:
    """Отказ в полномочиях (значение, не исключение)."""

    required: Role
    reason: str


def check_role(granted: AbstractSet[Role], required: Role) -> Optional[AuthorizationError]:
    """
    Проверка наличия роли.

    Returns:
        None если роль выдана, иначе AuthorizationError

    Example:
        >>> check_role({Role.MINTER}, Role.MINTER) is None
        True
        >>> check_role(set(), Role.PAUSER).reason
        'missing role pauser'
    """
    if required in granted:
        return None
    return AuthorizationError(required=required, reason=f"missing role {required.value}")
