"""
Contract Validation Module

Модуль для валидации JSON контрактов ledger.
"""

from .validators import (
    ContractValidator,
    LedgerSnapshotValidator,
    MintReceiptValidator,
    SchemaLoader,
    validate_ledger_snapshot,
    validate_mint_receipt,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "LedgerSnapshotValidator",
    "MintReceiptValidator",
    # Functions
    "validate_ledger_snapshot",
    "validate_mint_receipt",
]
