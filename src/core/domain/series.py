"""
Series — Модель series (batch items с общим metadata pointer)

Immutable Pydantic модель, представляющая снапшот состояния series.
Все изменения (pointer, minted_count) создают новый экземпляр.

Lifecycle:
    UNSET → (set_metadata) → OPEN → (supply_cap mints) → EXHAUSTED

- set_metadata в OPEN обновляет pointer без перехода
- Из EXHAUSTED переходов нет
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from .errors import SeriesExhausted
from .identifiers import SERIES_SUPPLY_CAP


# =============================================================================
# ENUMS
# =============================================================================


class SeriesState(str, Enum):
    """Состояние series."""

    UNSET = "UNSET"
    OPEN = "OPEN"
    EXHAUSTED = "EXHAUSTED"


# =============================================================================
# SERIES MODEL
# =============================================================================


class Series(BaseModel):
    """
    Модель series.

    metadata_pointer == "" означает "metadata не задана".
    minted_count монотонно растёт и ограничен supply_cap.
    """

    series_id: int = Field(..., gt=0, description="Идентификатор series (1-based)")
    metadata_pointer: str = Field("", description="Metadata pointer (URI prefix), '' = unset")
    minted_count: int = Field(0, ge=0, description="Количество выпущенных items")
    supply_cap: int = Field(SERIES_SUPPLY_CAP, gt=0, description="Лимит items в series")

    model_config = {"frozen": True, "strict": True}

    @model_validator(mode="after")
    def validate_minted_within_cap(self) -> "Series":
        if self.minted_count > self.supply_cap:
            raise ValueError(
                f"minted_count {self.minted_count} exceeds supply_cap {self.supply_cap}"
            )
        return self

    # -------------------------------------------------------------------------
    # Derived
    # -------------------------------------------------------------------------

    @property
    def is_set(self) -> bool:
        return self.metadata_pointer != ""

    @property
    def is_exhausted(self) -> bool:
        return self.minted_count >= self.supply_cap

    @property
    def state(self) -> SeriesState:
        """
        Текущее состояние lifecycle.

        EXHAUSTED имеет приоритет: исчерпанная series остаётся EXHAUSTED
        даже если pointer был очищен.
        """
        if self.is_exhausted:
            return SeriesState.EXHAUSTED
        if not self.is_set:
            return SeriesState.UNSET
        return SeriesState.OPEN

    @property
    def remaining_supply(self) -> int:
        return self.supply_cap - self.minted_count

    @property
    def next_sequence(self) -> int:
        """Sequence, который получит следующий item (minted_count + 1)."""
        return self.minted_count + 1

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def with_pointer(self, pointer: str) -> "Series":
        """
        Новый экземпляр с обновлённым pointer (last-write-wins).

        minted_count не меняется.
        """
        return self.model_copy(update={"metadata_pointer": pointer})

    def with_mint(self) -> "Series":
        """
        Новый экземпляр с minted_count + 1.

        Raises:
            SeriesExhausted: Если series уже достигла supply_cap
        """
        if self.is_exhausted:
            raise SeriesExhausted(
                f"Maximum {self.supply_cap} mints reached for series {self.series_id}"
            )
        return self.model_copy(update={"minted_count": self.minted_count + 1})
