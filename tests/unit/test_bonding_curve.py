"""
Тесты для Bonding Curve

Проверяет:
1. price(n) = n * 0.1 native
2. Первый mint бесплатный
3. Монотонность и cumulative_cost
4. Точную конверсию native ↔ base units
"""

from decimal import Decimal

import pytest

from src.core.math.bonding_curve import (
    BASE_UNITS_PER_NATIVE,
    UNIT_INCREMENT,
    cumulative_cost,
    from_base_units,
    price,
    to_base_units,
)


class TestPrice:
    """Тесты для price"""

    def test_first_mint_is_free(self) -> None:
        assert price(0) == 0

    def test_unit_increment_is_one_tenth(self) -> None:
        assert UNIT_INCREMENT * 10 == BASE_UNITS_PER_NATIVE
        assert price(1) == to_base_units("0.1")

    def test_linear(self) -> None:
        assert price(2) == to_base_units("0.2")
        assert price(10) == to_base_units("1")
        assert price(12345) == 12345 * UNIT_INCREMENT

    def test_monotonic(self) -> None:
        prices = [price(n) for n in range(100)]
        assert prices == sorted(prices)

    def test_custom_increment(self) -> None:
        assert price(7, unit_increment=3) == 21
        assert price(7, unit_increment=0) == 0

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="negative"):
            price(-1)

    def test_bool_rejected(self) -> None:
        with pytest.raises(ValueError, match="integer"):
            price(True)


class TestCumulativeCost:
    """Тесты для cumulative_cost"""

    def test_matches_sum_of_prices(self) -> None:
        for start in (0, 1, 5):
            for count in (0, 1, 2, 7):
                expected = sum(price(k) for k in range(start, start + count))
                assert cumulative_cost(start, count) == expected

    def test_first_three_mints(self) -> None:
        """0 + 0.1 + 0.2 = 0.3 native"""
        assert cumulative_cost(0, 3) == to_base_units("0.3")


class TestUnitConversion:
    """Тесты конверсии native ↔ base units"""

    def test_decimal_string(self) -> None:
        assert to_base_units("0.1") == 10**17
        assert to_base_units("1.5") == 15 * 10**17

    def test_int_and_decimal(self) -> None:
        assert to_base_units(2) == 2 * 10**18
        assert to_base_units(Decimal("0.000000000000000001")) == 1

    def test_large_amount_exact(self) -> None:
        assert to_base_units("123456789012345.123456789012345678") == (
            123456789012345123456789012345678
        )

    def test_float_rejected(self) -> None:
        with pytest.raises(ValueError, match="float"):
            to_base_units(0.1)

    def test_too_many_decimals_rejected(self) -> None:
        with pytest.raises(ValueError, match="decimal places"):
            to_base_units("0.0000000000000000001")

    @pytest.mark.parametrize("value", ["-1", "abc", "NaN", "Infinity"])
    def test_invalid_rejected(self, value: str) -> None:
        with pytest.raises(ValueError):
            to_base_units(value)

    def test_from_base_units(self) -> None:
        assert from_base_units(10**17) == Decimal("0.1")
        assert from_base_units(0) == Decimal(0)
        assert from_base_units(to_base_units("42.5")) == Decimal("42.5")
