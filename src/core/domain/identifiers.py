"""
Identifiers — Централизованная схема идентификаторов items

Единственный допустимый способ преобразований между:
- series_id (положительное целое, 1-based)
- sequence (порядковый номер item внутри series, 1-based)
- item_id (глобально уникальный идентификатор)

    item_id = series_id * ITEM_ID_MULTIPLIER + sequence
    series_id = item_id // ITEM_ID_MULTIPLIER   (целочисленное деление, truncating)

ЗАПРЕЩЕНО вычислять item_id или series_id вручную в обход этого модуля.

Замечание: при sequence == ITEM_ID_MULTIPLIER последний item series s получает
id (s + 1) * ITEM_ID_MULTIPLIER, и series_id_of() вернёт s + 1. Уникальность
id при этом сохраняется (sequence 0 никогда не выдаётся).
"""

from typing import Final


# =============================================================================
# КОНСТАНТЫ СХЕМЫ
# =============================================================================

# Множитель series_id в старших разрядах item_id
ITEM_ID_MULTIPLIER: Final[int] = 10_000

# Максимальное количество items в одной series
SERIES_SUPPLY_CAP: Final[int] = 10_000


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _is_int(value: object) -> bool:
    # bool является подклассом int, но как идентификатор недопустим
    return isinstance(value, int) and not isinstance(value, bool)


def validate_series_id(series_id: int) -> None:
    """
    Проверка корректности series_id.

    Args:
        series_id: Идентификатор series

    Raises:
        ValueError: Если series_id не положительное целое
    """
    if not _is_int(series_id):
        raise ValueError(f"series_id must be an integer, got {series_id!r}")
    if series_id <= 0:
        raise ValueError(f"series_id must be positive: {series_id}")


def validate_item_id(item_id: int) -> None:
    """
    Проверка корректности item_id.

    Args:
        item_id: Идентификатор item

    Raises:
        ValueError: Если item_id не положительное целое
    """
    if not _is_int(item_id):
        raise ValueError(f"item_id must be an integer, got {item_id!r}")
    if item_id <= 0:
        raise ValueError(f"item_id must be positive: {item_id}")


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def item_id_for(
    series_id: int,
    sequence: int,
    multiplier: int = ITEM_ID_MULTIPLIER,
    supply_cap: int = SERIES_SUPPLY_CAP,
) -> int:
    """
    Конверсия: (series_id, sequence) → item_id

    Args:
        series_id: Идентификатор series (> 0)
        sequence: Порядковый номер внутри series (1..supply_cap)
        multiplier: Множитель series_id (default: ITEM_ID_MULTIPLIER)
        supply_cap: Лимит items в series (default: SERIES_SUPPLY_CAP)

    Returns:
        item_id = series_id * multiplier + sequence

    Raises:
        ValueError: Если series_id или sequence вне допустимого диапазона

    Examples:
        >>> item_id_for(1, 1)
        10001
        >>> item_id_for(5, 1)
        50001
    """
    validate_series_id(series_id)
    if not _is_int(sequence):
        raise ValueError(f"sequence must be an integer, got {sequence!r}")
    if sequence < 1 or sequence > supply_cap:
        raise ValueError(f"sequence {sequence} outside 1..{supply_cap}")

    return series_id * multiplier + sequence


def series_id_of(item_id: int, multiplier: int = ITEM_ID_MULTIPLIER) -> int:
    """
    Конверсия: item_id → series_id

    Восстанавливает принадлежность к series без дополнительного lookup.

    Args:
        item_id: Идентификатор item (> 0)
        multiplier: Множитель series_id (default: ITEM_ID_MULTIPLIER)

    Returns:
        item_id // multiplier (может быть 0 для item_id < multiplier)
    """
    validate_item_id(item_id)
    return item_id // multiplier


def sequence_of(item_id: int, multiplier: int = ITEM_ID_MULTIPLIER) -> int:
    """
    Конверсия: item_id → sequence (остаток от деления на multiplier)

    Args:
        item_id: Идентификатор item (> 0)
        multiplier: Множитель series_id (default: ITEM_ID_MULTIPLIER)

    Returns:
        item_id % multiplier
    """
    validate_item_id(item_id)
    return item_id % multiplier
