"""GATE 2: Series Supply

Проверяет, что в series остался supply:
- minted_count < supply_cap, иначе series_exhausted

Интеграция:
- Использует результат GATE 1 (должен быть PASS)
"""

from dataclasses import dataclass

from src.core.domain.series import Series
from src.gatekeeper.gates.gate_01_metadata_set import Gate01Result


@dataclass(frozen=True)
class Gate02Result:
    """Результат GATE 2."""

    allowed: bool
    block_reason: str

    minted_count: int
    supply_cap: int
    remaining_supply: int

    # Детали
    details: str


class Gate02SeriesSupply:
    """GATE 2: лимит supply series."""

    def evaluate(self, gate01_result: Gate01Result, series: Series) -> Gate02Result:
        """Оценка GATE 2.

        Args:
            gate01_result: результат GATE 1
            series: снапшот series

        Returns:
            Gate02Result с решением о допуске
        """
        # 1. Проверка блокировки GATE 1
        if not gate01_result.allowed:
            return Gate02Result(
                allowed=False,
                block_reason=gate01_result.block_reason,
                minted_count=series.minted_count,
                supply_cap=series.supply_cap,
                remaining_supply=series.remaining_supply,
                details=f"GATE 1 blocked: {gate01_result.details}",
            )

        # 2. Лимит supply
        if series.is_exhausted:
            return Gate02Result(
                allowed=False,
                block_reason="series_exhausted",
                minted_count=series.minted_count,
                supply_cap=series.supply_cap,
                remaining_supply=0,
                details=f"Maximum {series.supply_cap} mints reached for series {series.series_id}",
            )

        return Gate02Result(
            allowed=True,
            block_reason="",
            minted_count=series.minted_count,
            supply_cap=series.supply_cap,
            remaining_supply=series.remaining_supply,
            details=f"PASS: {series.remaining_supply} of {series.supply_cap} remaining",
        )
