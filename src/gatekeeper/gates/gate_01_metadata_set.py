"""GATE 1: Metadata Set

Первый gate в цепочке mint:
- Блокирует mint, если metadata pointer series пуст
- Пустой pointer — сигнал "series не открыта" (UNSET)
"""

from dataclasses import dataclass

from src.core.domain.series import Series, SeriesState


@dataclass(frozen=True)
class Gate01Result:
    """Результат GATE 1."""

    allowed: bool
    block_reason: str

    series_id: int
    series_state: SeriesState

    # Детали
    details: str


class Gate01MetadataSet:
    """GATE 1: series должна иметь непустой metadata pointer."""

    def evaluate(self, series: Series) -> Gate01Result:
        """Оценка GATE 1.

        Args:
            series: снапшот series (UNSET placeholder для неизвестных id)

        Returns:
            Gate01Result с решением о допуске
        """
        if not series.is_set:
            return Gate01Result(
                allowed=False,
                block_reason="metadata_not_set",
                series_id=series.series_id,
                series_state=series.state,
                details=f"Metadata not set yet for series {series.series_id}",
            )

        return Gate01Result(
            allowed=True,
            block_reason="",
            series_id=series.series_id,
            series_state=series.state,
            details=f"PASS: series {series.series_id} pointer={series.metadata_pointer!r}",
        )
