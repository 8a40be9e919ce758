"""
Bonding Curve — Линейная цена mint от глобального выпуска

Модуль обеспечивает детерминированный расчёт цены mint:
- Цена зависит только от глобального счётчика total_minted
- Цена не зависит от series, в которую выполняется mint
- Первый mint во всём ledger бесплатный

Все суммы — целые числа в base units нативной платёжной единицы
(1 native = 10**NATIVE_DECIMALS base units). Float не используется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. price(n) монотонно не убывает по n
2. price(0) == 0
3. Конверсия native ↔ base units точная (Decimal), без потерь

ФОРМУЛЫ:
    price(n) = n * unit_increment
    cumulative_cost(start, count) = Σ_{k=start}^{start+count-1} price(k)
                                  = unit_increment * (count * start + count * (count - 1) / 2)
"""

from decimal import Decimal, InvalidOperation, localcontext
from typing import Final, Union

# =============================================================================
# ПАРАМЕТРЫ КРИВОЙ
# =============================================================================

# Количество десятичных знаков нативной единицы
NATIVE_DECIMALS: Final[int] = 18

# 1 native в base units
BASE_UNITS_PER_NATIVE: Final[int] = 10**NATIVE_DECIMALS

# Шаг цены за каждый ранее выпущенный item (0.1 native)
UNIT_INCREMENT: Final[int] = BASE_UNITS_PER_NATIVE // 10

# Точность Decimal для конверсий (с запасом для uint256)
DECIMAL_PRECISION: Final[int] = 96


# =============================================================================
# ЦЕНА
# =============================================================================


def _require_non_negative_int(name: str, value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} cannot be negative: {value}")
    return value


def price(total_minted: int, unit_increment: int = UNIT_INCREMENT) -> int:
    """
    Цена следующего mint при глобальном выпуске total_minted.

    Args:
        total_minted: Количество items, выпущенных во всех series
        unit_increment: Шаг цены в base units (default: UNIT_INCREMENT)

    Returns:
        total_minted * unit_increment (base units)

    Raises:
        ValueError: Если аргументы отрицательные или не целые

    Examples:
        >>> price(0)
        0
        >>> price(1) == UNIT_INCREMENT
        True
    """
    _require_non_negative_int("total_minted", total_minted)
    _require_non_negative_int("unit_increment", unit_increment)
    return total_minted * unit_increment


def cumulative_cost(start: int, count: int, unit_increment: int = UNIT_INCREMENT) -> int:
    """
    Суммарная стоимость count последовательных mint начиная с total_minted == start.

    Args:
        start: Глобальный выпуск перед первым mint
        count: Количество последовательных mint
        unit_increment: Шаг цены в base units

    Returns:
        Сумма price(start) + ... + price(start + count - 1)
    """
    _require_non_negative_int("start", start)
    _require_non_negative_int("count", count)
    _require_non_negative_int("unit_increment", unit_increment)
    # Арифметическая прогрессия, count * (count - 1) всегда чётно
    return unit_increment * (count * start + count * (count - 1) // 2)


# =============================================================================
# КОНВЕРСИЯ ЕДИНИЦ
# =============================================================================


def to_base_units(amount: Union[int, str, Decimal]) -> int:
    """
    Конверсия: native amount → base units

    Args:
        amount: Сумма в native единицах ("0.1", Decimal("0.1"), 2)

    Returns:
        Сумма в base units (целое)

    Raises:
        ValueError: Если сумма отрицательная, не число, float,
            или содержит дробные base units

    Examples:
        >>> to_base_units("0.1") == UNIT_INCREMENT
        True
    """
    if isinstance(amount, (bool, float)):
        # float не допускается: 0.1 не представим точно
        raise ValueError(f"amount must be int, str or Decimal, got {type(amount).__name__}")

    try:
        value = Decimal(amount)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Invalid native amount: {amount!r}") from e

    if not value.is_finite():
        raise ValueError(f"Native amount must be finite: {amount!r}")
    if value < 0:
        raise ValueError(f"Native amount cannot be negative: {amount!r}")

    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        scaled = value * BASE_UNITS_PER_NATIVE
    if scaled != scaled.to_integral_value():
        raise ValueError(
            f"Native amount {amount!r} has more than {NATIVE_DECIMALS} decimal places"
        )
    return int(scaled)


def from_base_units(value: int) -> Decimal:
    """
    Конверсия: base units → native amount

    Args:
        value: Сумма в base units

    Returns:
        Decimal сумма в native единицах
    """
    _require_non_negative_int("value", value)
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        return Decimal(value) / Decimal(BASE_UNITS_PER_NATIVE)
