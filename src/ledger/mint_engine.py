"""Mint Engine — выпуск items с ценой по bonding curve.

Порядок mint(caller, series_id, payment_amount):
1. Mint gates (GATE 1-3): metadata_not_set → series_exhausted → insufficient_payment
2. sequence = minted_count + 1, item_id = series_id * multiplier + sequence
3. Ownership registry: item_id → caller
4. Fee sink: вся оплата → fee_recipient (переплата не возвращается)
5. minted_count += 1, total_minted += 1

Атомарность: шаги 2-5 выполняются под общим lock; если шаг 4 падает,
шаг 3 откатывается, и ошибка пробрасывается вызывающему. Счётчики
изменяются только после успешных внешних эффектов.
"""

import logging
import threading
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from src.core.domain.errors import InsufficientPayment, MetadataNotSet, SeriesExhausted
from src.core.domain.identifiers import item_id_for, validate_series_id
from src.core.domain.roles import Roles
from src.core.math.bonding_curve import price
from src.gatekeeper.gates.gate_03_payment import Gate03Config
from src.gatekeeper.mint_gatekeeper import MintGatekeeper, MintGateResult
from src.ledger.config import LedgerConfig
from src.ledger.fees import FeeSink
from src.ledger.ownership import OwnershipRegistry
from src.ledger.series_registry import SeriesRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MintReceipt:
    """Результат успешного mint."""

    item_id: int
    series_id: int
    sequence: int
    owner: str

    # Оплата (base units)
    price_paid: int
    payment_amount: int
    overpayment: int

    # Глобальный выпуск после mint
    total_minted: int

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация для контракта mint_receipt."""
        return asdict(self)


def _validate_payment(payment_amount: int) -> None:
    if not isinstance(payment_amount, int) or isinstance(payment_amount, bool):
        raise ValueError(f"payment_amount must be an integer (base units), got {payment_amount!r}")
    if payment_amount < 0:
        raise ValueError(f"payment_amount cannot be negative: {payment_amount}")


class MintEngine:
    """Mint Engine.

    Единственный владелец глобального счётчика total_minted.
    """

    def __init__(
        self,
        roles: Roles,
        registry: SeriesRegistry,
        ownership: OwnershipRegistry,
        fee_sink: FeeSink,
        config: Optional[LedgerConfig] = None,
        lock: Optional[threading.RLock] = None,
    ):
        """
        Args:
            roles: роли ledger (используется fee_recipient)
            registry: Series Registry
            ownership: capability учёта владельцев
            fee_sink: получатель оплаты
            config: конфигурация (multiplier, supply cap, unit_increment)
            lock: общий lock ledger (должен совпадать с lock registry)
        """
        self.roles = roles
        self.registry = registry
        self.ownership = ownership
        self.fee_sink = fee_sink
        self.config = config or LedgerConfig()
        self._lock = lock or threading.RLock()
        self._gatekeeper = MintGatekeeper(Gate03Config(unit_increment=self.config.unit_increment))
        self._total_minted = 0

    @property
    def total_minted(self) -> int:
        with self._lock:
            return self._total_minted

    def quote_price(self) -> int:
        """Цена следующего mint (base units) при текущем total_minted."""
        with self._lock:
            return price(self._total_minted, self.config.unit_increment)

    def preview(self, series_id: int, payment_amount: int) -> MintGateResult:
        """Dry-run mint gates без изменения состояния."""
        validate_series_id(series_id)
        _validate_payment(payment_amount)
        with self._lock:
            return self._gatekeeper.evaluate(
                self.registry.get(series_id), self._total_minted, payment_amount
            )

    def mint(self, caller: str, series_id: int, payment_amount: int) -> MintReceipt:
        """Выпуск нового item в series.

        Args:
            caller: identity, которой будет принадлежать item
            series_id: целевая series
            payment_amount: оплата в base units

        Returns:
            MintReceipt с item_id и параметрами оплаты

        Raises:
            MetadataNotSet: pointer series пуст
            SeriesExhausted: series достигла supply_cap
            InsufficientPayment: payment_amount < price(total_minted)
            ValueError: некорректные аргументы
        """
        validate_series_id(series_id)
        _validate_payment(payment_amount)
        if not caller:
            raise ValueError("caller identity cannot be empty")

        with self._lock:
            series = self.registry.get(series_id)
            gates = self._gatekeeper.evaluate(series, self._total_minted, payment_amount)
            if not gates.allowed:
                logger.warning(
                    "Rejected mint in series %d by %s: %s", series_id, caller, gates.details
                )
                self._raise_blocked(gates)

            sequence = series.next_sequence
            item_id = item_id_for(
                series_id,
                sequence,
                self.config.item_id_multiplier,
                self.config.series_supply_cap,
            )

            self.ownership.record_mint(item_id, caller)
            try:
                self.fee_sink.forward(self.roles.fee_recipient, payment_amount)
            except Exception:
                logger.error("Fee forwarding failed for item %d, rolling back mint", item_id)
                self.ownership.revoke(item_id)
                raise

            self.registry.record_mint(series_id)
            self._total_minted += 1
            total_minted = self._total_minted

        if gates.overpayment:
            logger.warning(
                "Mint of item %d overpaid by %d (required=%d, sent=%d); excess not refunded",
                item_id,
                gates.overpayment,
                gates.required_price,
                payment_amount,
            )
        logger.info(
            "Minted item %d (series %d, sequence %d) to %s for %d",
            item_id,
            series_id,
            sequence,
            caller,
            payment_amount,
        )

        return MintReceipt(
            item_id=item_id,
            series_id=series_id,
            sequence=sequence,
            owner=caller,
            price_paid=gates.required_price,
            payment_amount=payment_amount,
            overpayment=gates.overpayment,
            total_minted=total_minted,
        )

    def _raise_blocked(self, gates: MintGateResult) -> None:
        if gates.block_reason == "metadata_not_set":
            raise MetadataNotSet(gates.details)
        if gates.block_reason == "series_exhausted":
            raise SeriesExhausted(gates.details)
        if gates.block_reason == "insufficient_payment":
            raise InsufficientPayment(
                gates.details,
                required=gates.required_price,
                provided=gates.gate03.payment_amount,
            )
        raise RuntimeError(f"Unknown mint block reason: {gates.block_reason}")
