"""Ledger — публичный фасад: Series Registry + Mint Engine + ownership.

Создаётся с тремя identity (owner, metadata_setter, fee_recipient).
Все мутирующие операции сериализуются одним RLock: под N конкурентными
вызывающими каждый принятый mint увеличивает счётчики ровно на 1,
и ни один item_id не выдаётся дважды.
"""

import logging
import threading
from typing import Any, Dict, List, Optional

from src.core.contracts import validate_ledger_snapshot
from src.core.domain.identifiers import series_id_of, sequence_of, validate_item_id
from src.core.domain.item import Item
from src.core.domain.roles import Roles
from src.core.domain.series import Series
from src.gatekeeper.mint_gatekeeper import MintGateResult
from src.ledger.config import LedgerConfig
from src.ledger.fees import FeeSink, InMemoryFeeSink
from src.ledger.mint_engine import MintEngine, MintReceipt
from src.ledger.ownership import InMemoryOwnershipRegistry, OwnershipRegistry
from src.ledger.series_registry import SeriesRegistry

logger = logging.getLogger(__name__)

SNAPSHOT_SCHEMA_VERSION = "1"


class Ledger:
    """Token-issuance ledger."""

    def __init__(
        self,
        owner: str,
        metadata_setter: str,
        fee_recipient: str,
        config: Optional[LedgerConfig] = None,
        ownership: Optional[OwnershipRegistry] = None,
        fee_sink: Optional[FeeSink] = None,
    ):
        """
        Args:
            owner: административная identity
            metadata_setter: единственная identity, которой разрешён set_metadata
            fee_recipient: получатель оплаты за mint
            config: конфигурация (default LedgerConfig())
            ownership: capability учёта владельцев (default in-memory)
            fee_sink: получатель оплаты (default in-memory)
        """
        self.roles = Roles(
            owner=owner, metadata_setter=metadata_setter, fee_recipient=fee_recipient
        )
        self.config = config or LedgerConfig()
        self.ownership = ownership if ownership is not None else InMemoryOwnershipRegistry()
        self.fee_sink = fee_sink if fee_sink is not None else InMemoryFeeSink()

        self._lock = threading.RLock()
        self.registry = SeriesRegistry(self.roles, self.config, self._lock)
        self.engine = MintEngine(
            self.roles,
            self.registry,
            self.ownership,
            self.fee_sink,
            self.config,
            self._lock,
        )
        logger.info(
            "Ledger created: owner=%s metadata_setter=%s fee_recipient=%s",
            owner,
            metadata_setter,
            fee_recipient,
        )

    # -------------------------------------------------------------------------
    # Series Registry
    # -------------------------------------------------------------------------

    def set_metadata(self, caller: str, series_id: int, pointer: str) -> Series:
        return self.registry.set_metadata(caller, series_id, pointer)

    def token_uri(self, item_id: int) -> str:
        """Metadata pointer item ('' если series pointer не задан)."""
        return self.registry.resolve_pointer(item_id)

    def series(self, series_id: int) -> Series:
        return self.registry.get(series_id)

    def minted_count(self, series_id: int) -> int:
        return self.registry.minted_count(series_id)

    # -------------------------------------------------------------------------
    # Mint Engine
    # -------------------------------------------------------------------------

    def mint(self, caller: str, series_id: int, payment_amount: int = 0) -> int:
        """Mint item в series, возвращает item_id."""
        return self.engine.mint(caller, series_id, payment_amount).item_id

    def mint_with_receipt(self, caller: str, series_id: int, payment_amount: int = 0) -> MintReceipt:
        return self.engine.mint(caller, series_id, payment_amount)

    def preview_mint(self, series_id: int, payment_amount: int = 0) -> MintGateResult:
        return self.engine.preview(series_id, payment_amount)

    def next_price(self) -> int:
        return self.engine.quote_price()

    @property
    def total_minted(self) -> int:
        return self.engine.total_minted

    # -------------------------------------------------------------------------
    # Ownership (delegated)
    # -------------------------------------------------------------------------

    def balance_of(self, owner: str) -> int:
        with self._lock:
            return self.ownership.balance_of(owner)

    def owner_of(self, item_id: int) -> str:
        validate_item_id(item_id)
        with self._lock:
            return self.ownership.owner_of(item_id)

    def items_of(self, owner: str) -> List[int]:
        with self._lock:
            return self.ownership.items_of(owner)

    def item(self, item_id: int) -> Item:
        """Снапшот выпущенного item.

        Raises:
            ItemNotFound: item не выпущен
        """
        owner = self.owner_of(item_id)
        multiplier = self.config.item_id_multiplier
        sequence = sequence_of(item_id, multiplier)
        series_id = series_id_of(item_id, multiplier)
        if sequence == 0:
            # последний item series: id == (series_id + 1) * multiplier
            sequence = multiplier
            series_id -= 1
        return Item(item_id=item_id, series_id=series_id, sequence=sequence, owner=owner)

    def transfer(self, caller: str, from_owner: str, to_owner: str, item_id: int) -> None:
        validate_item_id(item_id)
        with self._lock:
            self.ownership.transfer(caller, from_owner, to_owner, item_id)

    # -------------------------------------------------------------------------
    # Snapshot
    # -------------------------------------------------------------------------

    def snapshot(self) -> Dict[str, Any]:
        """Согласованный снапшот состояния, валидированный контрактом ledger_snapshot."""
        with self._lock:
            total_minted = self.engine.total_minted
            data = {
                "schema_version": SNAPSHOT_SCHEMA_VERSION,
                "roles": self.roles.model_dump(),
                "config": {
                    "item_id_multiplier": self.config.item_id_multiplier,
                    "series_supply_cap": self.config.series_supply_cap,
                    "unit_increment": self.config.unit_increment,
                },
                "total_minted": total_minted,
                "next_price": self.engine.quote_price(),
                "series": [
                    {
                        "series_id": s.series_id,
                        "metadata_pointer": s.metadata_pointer,
                        "minted_count": s.minted_count,
                        "state": s.state.value,
                    }
                    for s in self.registry.all_series()
                ],
            }
        validate_ledger_snapshot(data)
        return data
