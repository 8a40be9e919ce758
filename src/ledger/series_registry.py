"""Series Registry — metadata pointer и счётчик выпуска по series.

- set_metadata: только metadata_setter (GATE 0), last-write-wins,
  series создаётся неявно при первом вызове, minted_count не меняется
- resolve_pointer: series_id = item_id // multiplier, '' если pointer не задан
- record_mint: единственная мутация minted_count (вызывается Mint Engine)

Все мутации выполняются под общим lock ledger.
"""

import logging
import threading
from typing import Dict, List, Optional

from src.core.domain.errors import Unauthorized
from src.core.domain.identifiers import series_id_of, validate_series_id
from src.core.domain.roles import Roles
from src.core.domain.series import Series
from src.gatekeeper.gates.gate_00_role_guard import Gate00RoleGuard
from src.ledger.config import LedgerConfig

logger = logging.getLogger(__name__)


class SeriesRegistry:
    """Реестр series."""

    def __init__(
        self,
        roles: Roles,
        config: Optional[LedgerConfig] = None,
        lock: Optional[threading.RLock] = None,
    ):
        """
        Args:
            roles: роли ledger (используется metadata_setter)
            config: конфигурация (multiplier, supply cap)
            lock: общий lock ledger; если не задан, создаётся собственный
        """
        self.roles = roles
        self.config = config or LedgerConfig()
        self._lock = lock or threading.RLock()
        self._guard = Gate00RoleGuard()
        self._series: Dict[int, Series] = {}

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def set_metadata(self, caller: str, series_id: int, pointer: str) -> Series:
        """Установка или обновление metadata pointer series.

        Args:
            caller: identity вызывающего
            series_id: идентификатор series (> 0)
            pointer: metadata pointer ('' очищает pointer)

        Returns:
            Новый снапшот series

        Raises:
            Unauthorized: caller не metadata_setter
            ValueError: некорректный series_id или pointer не строка
        """
        validate_series_id(series_id)
        if not isinstance(pointer, str):
            raise ValueError(f"pointer must be a string, got {type(pointer).__name__}")

        guard = self._guard.evaluate(caller, "metadata_setter", self.roles.metadata_setter)
        if not guard.allowed:
            logger.warning("Rejected set_metadata for series %d: %s", series_id, guard.details)
            raise Unauthorized("Only metadata setter can set metadata")

        with self._lock:
            current = self._get_unlocked(series_id)
            updated = current.with_pointer(pointer)
            self._series[series_id] = updated

        logger.info("Series %d metadata set to %r", series_id, pointer)
        return updated

    def record_mint(self, series_id: int) -> Series:
        """Увеличение minted_count на 1.

        Вызывается только Mint Engine после прохождения gates.

        Raises:
            SeriesExhausted: series уже достигла supply_cap
        """
        with self._lock:
            updated = self._get_unlocked(series_id).with_mint()
            self._series[series_id] = updated
            return updated

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get(self, series_id: int) -> Series:
        """Снапшот series (UNSET placeholder для неизвестного id)."""
        validate_series_id(series_id)
        with self._lock:
            return self._get_unlocked(series_id)

    def is_set(self, series_id: int) -> bool:
        return self.get(series_id).is_set

    def minted_count(self, series_id: int) -> int:
        return self.get(series_id).minted_count

    def resolve_pointer(self, item_id: int) -> str:
        """Metadata pointer для item_id.

        Зависит только от series_id, а не от того, выпущен ли сам item.
        '' означает "metadata нет" и не является ошибкой.
        """
        series_id = series_id_of(item_id, self.config.item_id_multiplier)
        with self._lock:
            series = self._series.get(series_id)
        return series.metadata_pointer if series is not None else ""

    def series_ids(self) -> List[int]:
        with self._lock:
            return sorted(self._series)

    def all_series(self) -> List[Series]:
        with self._lock:
            return [self._series[series_id] for series_id in sorted(self._series)]

    def _get_unlocked(self, series_id: int) -> Series:
        series = self._series.get(series_id)
        if series is None:
            series = Series(series_id=series_id, supply_cap=self.config.series_supply_cap)
        return series
