"""
Domain models and value objects.

Contains fundamental domain entities like Series, Item, Roles and the
identifier scheme that binds them.
"""

from src.core.domain.errors import (
    InsufficientPayment,
    ItemAlreadyMinted,
    ItemNotFound,
    LedgerError,
    MetadataNotSet,
    NotItemOwner,
    SeriesExhausted,
    Unauthorized,
)
from src.core.domain.identifiers import (
    ITEM_ID_MULTIPLIER,
    SERIES_SUPPLY_CAP,
    item_id_for,
    sequence_of,
    series_id_of,
    validate_item_id,
    validate_series_id,
)
from src.core.domain.item import Item
from src.core.domain.roles import Roles
from src.core.domain.series import Series, SeriesState

__all__ = [
    # Identifiers module
    "ITEM_ID_MULTIPLIER",
    "SERIES_SUPPLY_CAP",
    "item_id_for",
    "series_id_of",
    "sequence_of",
    "validate_series_id",
    "validate_item_id",
    # Series model
    "Series",
    "SeriesState",
    # Item model
    "Item",
    # Roles
    "Roles",
    # Errors
    "LedgerError",
    "Unauthorized",
    "MetadataNotSet",
    "SeriesExhausted",
    "InsufficientPayment",
    "ItemNotFound",
    "ItemAlreadyMinted",
    "NotItemOwner",
]
