"""
Тесты для доменных моделей: Series, Item, Roles

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Lifecycle series (UNSET → OPEN → EXHAUSTED)
3. Immutability (frozen=True)
4. Граничные случаи и невалидные данные
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    Item,
    Roles,
    Series,
    SeriesExhausted,
    SeriesState,
)


# =============================================================================
# SERIES TESTS
# =============================================================================


class TestSeries:
    """Тесты для модели Series"""

    def test_new_series_is_unset(self) -> None:
        series = Series(series_id=1)
        assert series.metadata_pointer == ""
        assert series.minted_count == 0
        assert not series.is_set
        assert series.state == SeriesState.UNSET
        assert series.next_sequence == 1
        assert series.remaining_supply == 10_000

    def test_with_pointer_opens_series(self) -> None:
        series = Series(series_id=1).with_pointer("ipfs://a/")
        assert series.is_set
        assert series.state == SeriesState.OPEN
        assert series.metadata_pointer == "ipfs://a/"

    def test_with_pointer_keeps_minted_count(self) -> None:
        series = Series(series_id=1, metadata_pointer="a", minted_count=7)
        updated = series.with_pointer("b")
        assert updated.minted_count == 7
        assert updated.metadata_pointer == "b"

    def test_with_mint_increments(self) -> None:
        series = Series(series_id=2, metadata_pointer="a")
        minted = series.with_mint().with_mint()
        assert minted.minted_count == 2
        assert minted.next_sequence == 3
        assert series.minted_count == 0  # оригинал не изменён

    def test_exhausted_state(self) -> None:
        series = Series(series_id=1, metadata_pointer="a", minted_count=2, supply_cap=3)
        exhausted = series.with_mint()
        assert exhausted.state == SeriesState.EXHAUSTED
        assert exhausted.remaining_supply == 0
        with pytest.raises(SeriesExhausted):
            exhausted.with_mint()

    def test_exhausted_has_priority_over_unset(self) -> None:
        series = Series(series_id=1, metadata_pointer="", minted_count=3, supply_cap=3)
        assert series.state == SeriesState.EXHAUSTED

    def test_cleared_pointer_reports_unset(self) -> None:
        series = Series(series_id=1, metadata_pointer="a", minted_count=1).with_pointer("")
        assert series.state == SeriesState.UNSET
        assert series.minted_count == 1

    def test_frozen(self) -> None:
        series = Series(series_id=1)
        with pytest.raises(ValidationError):
            series.minted_count = 5

    def test_invalid_series_id(self) -> None:
        with pytest.raises(ValidationError):
            Series(series_id=0)

    def test_minted_above_cap_rejected(self) -> None:
        with pytest.raises(ValidationError, match="exceeds supply_cap"):
            Series(series_id=1, minted_count=4, supply_cap=3)

    def test_strict_types(self) -> None:
        with pytest.raises(ValidationError):
            Series(series_id="1")


# =============================================================================
# ITEM TESTS
# =============================================================================


class TestItem:
    """Тесты для модели Item"""

    def test_create(self) -> None:
        item = Item(item_id=10001, series_id=1, sequence=1, owner="alice")
        assert item.owner == "alice"
        assert item.series_id == 1

    def test_with_owner_returns_new_instance(self) -> None:
        item = Item(item_id=10001, series_id=1, sequence=1, owner="alice")
        moved = item.with_owner("bob")
        assert moved.owner == "bob"
        assert item.owner == "alice"

    def test_with_owner_validates(self) -> None:
        item = Item(item_id=10001, series_id=1, sequence=1, owner="alice")
        with pytest.raises(ValidationError):
            item.with_owner("")

    def test_sequence_cannot_exceed_id(self) -> None:
        with pytest.raises(ValidationError):
            Item(item_id=5, series_id=1, sequence=6, owner="alice")


# =============================================================================
# ROLES TESTS
# =============================================================================


class TestRoles:
    """Тесты для модели Roles"""

    def test_roles_may_coincide(self) -> None:
        roles = Roles(owner="deployer", metadata_setter="deployer", fee_recipient="deployer")
        assert roles.owner == roles.metadata_setter == roles.fee_recipient

    def test_empty_identity_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Roles(owner="", metadata_setter="a", fee_recipient="b")

    def test_frozen(self) -> None:
        roles = Roles(owner="a", metadata_setter="b", fee_recipient="c")
        with pytest.raises(ValidationError):
            roles.metadata_setter = "mallory"
