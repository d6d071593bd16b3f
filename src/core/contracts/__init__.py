"""
Contract Validation Module

Модуль для валидации JSON контрактов финансового ядра.
"""

from .validators import (
    CONTRACT_SCHEMAS,
    ContractValidator,
    SchemaLoader,
    contract_validator,
    validate_collateral_snapshot,
    validate_feed_reading,
    validate_mint_request,
    validate_rate_curve_params,
    validate_redeem_request,
)

__all__ = [
    "CONTRACT_SCHEMAS",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "contract_validator",
    # Functions
    "validate_mint_request",
    "validate_redeem_request",
    "validate_feed_reading",
    "validate_rate_curve_params",
    "validate_collateral_snapshot",
]
