"""
Contract Validation Module

Модуль для валидации JSON контрактов time conductor'а.
"""

from .validators import (
    CONDUCTOR_STATE_CONTRACT,
    contract_errors,
    contract_validator,
    load_schema,
    validate_conductor_state,
    validate_contract,
)

__all__ = [
    "CONDUCTOR_STATE_CONTRACT",
    "load_schema",
    "contract_validator",
    "validate_contract",
    "contract_errors",
    "validate_conductor_state",
]
