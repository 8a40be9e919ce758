"""Конфигурация ledger."""

from dataclasses import dataclass

from src.core.domain.identifiers import ITEM_ID_MULTIPLIER, SERIES_SUPPLY_CAP
from src.core.math.bonding_curve import UNIT_INCREMENT


@dataclass(frozen=True)
class LedgerConfig:
    """Конфигурация схемы идентификаторов, supply и bonding curve.

    - item_id_multiplier: множитель series_id в item_id (10_000)
    - series_supply_cap: лимит items в series (10_000)
    - unit_increment: шаг цены в base units (0.1 native)
    """

    item_id_multiplier: int = ITEM_ID_MULTIPLIER
    series_supply_cap: int = SERIES_SUPPLY_CAP
    unit_increment: int = UNIT_INCREMENT

    def __post_init__(self):
        if self.item_id_multiplier <= 0:
            raise ValueError(f"item_id_multiplier must be positive: {self.item_id_multiplier}")
        if self.series_supply_cap <= 0:
            raise ValueError(f"series_supply_cap must be positive: {self.series_supply_cap}")
        # sequence не должен пересекаться с диапазоном id следующей series
        if self.series_supply_cap > self.item_id_multiplier:
            raise ValueError(
                f"series_supply_cap {self.series_supply_cap} exceeds "
                f"item_id_multiplier {self.item_id_multiplier}"
            )
        if self.unit_increment < 0:
            raise ValueError(f"unit_increment cannot be negative: {self.unit_increment}")
