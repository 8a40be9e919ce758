"""Ownership Registry — capability учёта владельцев items.

Ядро ledger не хранит владельцев само: оно зависит от capability
OwnershipRegistry (record / query owner_of, balance_of, transfer).
InMemoryOwnershipRegistry реализует стандартную семантику:
- один владелец на item
- item передаваем (transfer только текущим владельцем)
- balance_of неизвестной identity == 0
"""

import logging
from typing import Dict, List, Protocol

from src.core.domain.errors import ItemAlreadyMinted, ItemNotFound, NotItemOwner

logger = logging.getLogger(__name__)


class OwnershipRegistry(Protocol):
    """Capability, от которой зависит Mint Engine."""

    def record_mint(self, item_id: int, owner: str) -> None:
        ...

    def revoke(self, item_id: int) -> None:
        ...

    def owner_of(self, item_id: int) -> str:
        ...

    def balance_of(self, owner: str) -> int:
        ...

    def items_of(self, owner: str) -> List[int]:
        ...

    def transfer(self, caller: str, from_owner: str, to_owner: str, item_id: int) -> None:
        ...


class InMemoryOwnershipRegistry:
    """In-memory реализация OwnershipRegistry.

    Сериализацию доступа обеспечивает владелец (Ledger lock).
    """

    def __init__(self):
        self._owners: Dict[int, str] = {}
        self._balances: Dict[str, int] = {}

    def record_mint(self, item_id: int, owner: str) -> None:
        """Регистрация нового item за owner.

        Raises:
            ItemAlreadyMinted: если item_id уже выдан
            ValueError: если owner пустой
        """
        if not owner:
            raise ValueError("owner identity cannot be empty")
        if item_id in self._owners:
            raise ItemAlreadyMinted(f"Item {item_id} already minted")

        self._owners[item_id] = owner
        self._balances[owner] = self._balances.get(owner, 0) + 1

    def revoke(self, item_id: int) -> None:
        """Откат record_mint (используется при откате неудачного mint)."""
        owner = self.owner_of(item_id)
        del self._owners[item_id]
        self._decrement(owner)
        logger.debug("Revoked item %d from %s", item_id, owner)

    def owner_of(self, item_id: int) -> str:
        try:
            return self._owners[item_id]
        except KeyError:
            raise ItemNotFound(f"Item {item_id} does not exist") from None

    def balance_of(self, owner: str) -> int:
        return self._balances.get(owner, 0)

    def items_of(self, owner: str) -> List[int]:
        return sorted(item_id for item_id, holder in self._owners.items() if holder == owner)

    def transfer(self, caller: str, from_owner: str, to_owner: str, item_id: int) -> None:
        """Передача item.

        Raises:
            ItemNotFound: item не существует
            NotItemOwner: caller или from_owner не владелец item
            ValueError: пустой получатель
        """
        current = self.owner_of(item_id)
        if current != from_owner:
            raise NotItemOwner(f"{from_owner} is not the owner of item {item_id}")
        if caller != current:
            raise NotItemOwner(f"Caller {caller} is not the owner of item {item_id}")
        if not to_owner:
            raise ValueError("Cannot transfer to empty identity")

        self._owners[item_id] = to_owner
        self._decrement(current)
        self._balances[to_owner] = self._balances.get(to_owner, 0) + 1
        logger.info("Transferred item %d: %s -> %s", item_id, current, to_owner)

    def _decrement(self, owner: str) -> None:
        remaining = self._balances[owner] - 1
        if remaining:
            self._balances[owner] = remaining
        else:
            del self._balances[owner]
