"""Mint Gatekeeper — фиксированная цепочка gates для mint.

Порядок проверок (первый блок определяет причину отказа):
1. GATE 1: metadata pointer series задан      → metadata_not_set
2. GATE 2: supply series не исчерпан          → series_exhausted
3. GATE 3: оплата >= price(total_minted)       → insufficient_payment

Gatekeeper не изменяет состояние: это чистая функция снапшота series,
глобального счётчика и суммы оплаты.
"""

import logging
from dataclasses import dataclass

from src.core.domain.series import Series
from src.gatekeeper.gates.gate_01_metadata_set import Gate01MetadataSet, Gate01Result
from src.gatekeeper.gates.gate_02_series_supply import Gate02Result, Gate02SeriesSupply
from src.gatekeeper.gates.gate_03_payment import Gate03Config, Gate03Payment, Gate03Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MintGateResult:
    """Сводный результат цепочки mint gates."""

    allowed: bool
    block_reason: str

    series_id: int
    required_price: int
    overpayment: int

    gate01: Gate01Result
    gate02: Gate02Result
    gate03: Gate03Result

    details: str


class MintGatekeeper:
    """Цепочка GATE 1-3 для mint."""

    def __init__(self, payment_config: Gate03Config | None = None):
        self.gate01 = Gate01MetadataSet()
        self.gate02 = Gate02SeriesSupply()
        self.gate03 = Gate03Payment(payment_config)

    def evaluate(self, series: Series, total_minted: int, payment_amount: int) -> MintGateResult:
        """Прогон всех gates по порядку.

        Args:
            series: снапшот целевой series
            total_minted: глобальный счётчик выпуска
            payment_amount: оплата в base units

        Returns:
            MintGateResult; при блокировке block_reason первого сработавшего gate
        """
        r01 = self.gate01.evaluate(series)
        r02 = self.gate02.evaluate(r01, series)
        r03 = self.gate03.evaluate(r02, total_minted, payment_amount)

        logger.debug(
            "Mint gates for series %d: gate01=%s gate02=%s gate03=%s",
            series.series_id,
            r01.block_reason or "PASS",
            r02.block_reason or "PASS",
            r03.block_reason or "PASS",
        )

        return MintGateResult(
            allowed=r03.allowed,
            block_reason=r03.block_reason,
            series_id=series.series_id,
            required_price=r03.required_price,
            overpayment=r03.overpayment,
            gate01=r01,
            gate02=r02,
            gate03=r03,
            details=r03.details,
        )
