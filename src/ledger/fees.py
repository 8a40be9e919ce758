"""Fee Sink — получатель оплаты за mint (pass-through collaborator)."""

import logging
from typing import Dict, Protocol

logger = logging.getLogger(__name__)


class FeeSink(Protocol):
    def forward(self, recipient: str, amount: int) -> None:
        ...


class InMemoryFeeSink:
    """Накопитель оплат по получателям (base units)."""

    def __init__(self):
        self._balances: Dict[str, int] = {}

    def forward(self, recipient: str, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Fee amount cannot be negative: {amount}")
        if amount == 0:
            return
        self._balances[recipient] = self._balances.get(recipient, 0) + amount
        logger.debug("Forwarded %d to %s", amount, recipient)

    def balance_of(self, recipient: str) -> int:
        return self._balances.get(recipient, 0)

    @property
    def total_collected(self) -> int:
        return sum(self._balances.values())
