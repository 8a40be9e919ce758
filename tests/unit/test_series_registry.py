"""Тесты для Series Registry.

Coverage:
- set_metadata: роль metadata_setter, last-write-wins, неявное создание series
- resolve_pointer: зависимость только от series_id
- is_set / get / series_ids
"""

import pytest

from src.core.domain import Roles, SeriesState, Unauthorized
from src.ledger import LedgerConfig, SeriesRegistry


@pytest.fixture
def registry() -> SeriesRegistry:
    roles = Roles(owner="owner", metadata_setter="setter", fee_recipient="treasury")
    return SeriesRegistry(roles)


class TestSetMetadata:
    """Тесты set_metadata."""

    def test_setter_creates_series(self, registry):
        series = registry.set_metadata("setter", 1, "https://example.com/1/")

        assert series.series_id == 1
        assert series.state == SeriesState.OPEN
        assert registry.is_set(1)
        assert registry.series_ids() == [1]

    def test_non_setter_rejected(self, registry):
        with pytest.raises(Unauthorized, match="Only metadata setter"):
            registry.set_metadata("alice", 1, "https://evil/")

        assert not registry.is_set(1)
        assert registry.series_ids() == []

    def test_owner_is_not_setter(self, registry):
        """owner не имеет права set_metadata, если роли различны."""
        with pytest.raises(Unauthorized):
            registry.set_metadata("owner", 1, "x")

    def test_last_write_wins(self, registry):
        registry.set_metadata("setter", 1, "X")
        registry.set_metadata("setter", 1, "Y")

        assert registry.resolve_pointer(10001) == "Y"

    def test_does_not_touch_minted_count(self, registry):
        registry.set_metadata("setter", 1, "X")
        registry.record_mint(1)
        registry.set_metadata("setter", 1, "Y")

        assert registry.minted_count(1) == 1

    def test_invalid_series_id(self, registry):
        with pytest.raises(ValueError):
            registry.set_metadata("setter", 0, "X")

    def test_pointer_must_be_string(self, registry):
        with pytest.raises(ValueError, match="string"):
            registry.set_metadata("setter", 1, None)


class TestResolvePointer:
    """Тесты resolve_pointer."""

    def test_unset_returns_empty(self, registry):
        assert registry.resolve_pointer(1) == ""
        assert registry.resolve_pointer(10001) == ""

    def test_resolves_before_item_minted(self, registry):
        registry.set_metadata("setter", 3, "ipfs://three/")

        assert registry.resolve_pointer(30001) == "ipfs://three/"
        assert registry.resolve_pointer(39999) == "ipfs://three/"

    def test_series_are_independent(self, registry):
        for series_id in range(1, 6):
            registry.set_metadata("setter", series_id, f"https://example.com/{series_id}/")

        for series_id in range(1, 6):
            assert registry.resolve_pointer(series_id * 10000 + 1) == (
                f"https://example.com/{series_id}/"
            )

    def test_custom_multiplier(self):
        roles = Roles(owner="o", metadata_setter="s", fee_recipient="f")
        registry = SeriesRegistry(roles, LedgerConfig(item_id_multiplier=100, series_supply_cap=99))
        registry.set_metadata("s", 2, "two")

        assert registry.resolve_pointer(201) == "two"
        assert registry.resolve_pointer(10001) == ""


class TestQueries:
    """Тесты get / all_series."""

    def test_get_unknown_returns_placeholder(self, registry):
        series = registry.get(42)

        assert series.state == SeriesState.UNSET
        assert series.minted_count == 0
        assert registry.series_ids() == []  # placeholder не сохраняется

    def test_supply_cap_from_config(self):
        roles = Roles(owner="o", metadata_setter="s", fee_recipient="f")
        registry = SeriesRegistry(roles, LedgerConfig(series_supply_cap=5))

        assert registry.get(1).supply_cap == 5

    def test_all_series_sorted(self, registry):
        registry.set_metadata("setter", 3, "c")
        registry.set_metadata("setter", 1, "a")

        assert [s.series_id for s in registry.all_series()] == [1, 3]
