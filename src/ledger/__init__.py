"""Ledger — выпуск items, series metadata и учёт владельцев.

- SeriesRegistry: metadata pointer и счётчик выпуска по series
- MintEngine: gates, цена по bonding curve, выдача item_id
- Ledger: публичный фасад с общим lock
"""

from .config import LedgerConfig
from .fees import FeeSink, InMemoryFeeSink
from .ledger import Ledger
from .mint_engine import MintEngine, MintReceipt
from .ownership import InMemoryOwnershipRegistry, OwnershipRegistry
from .series_registry import SeriesRegistry

__all__ = [
    "Ledger",
    "LedgerConfig",
    "SeriesRegistry",
    "MintEngine",
    "MintReceipt",
    "OwnershipRegistry",
    "InMemoryOwnershipRegistry",
    "FeeSink",
    "InMemoryFeeSink",
]
