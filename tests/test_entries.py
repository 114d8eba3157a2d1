"""Tests for entry multiplier policies."""

from uuid import uuid4

import pytest

from macro_tracker.domain.errors import ValidationError
from macro_tracker.domain.foods import FoodEntrySnapshot
from macro_tracker.services.entries import (
    parse_multiplier,
    set_multiplier,
    set_multiplier_or_remove,
)


def _entries() -> list[FoodEntrySnapshot]:
    day_id = uuid4()
    return [
        FoodEntrySnapshot(
            id=uuid4(),
            day_id=day_id,
            food_id=uuid4(),
            multiplier=1,
            food_name=name,
            food_portion_size="1 cup",
            protein_g=8,
            carbs_g=52,
            fat_g=1,
        )
        for name in ("Rice", "Banana")
    ]


def test_set_multiplier_updates_only_target() -> None:
    entries = _entries()

    updated = set_multiplier(entries, entries[0].id, "1.5")

    assert updated[0].multiplier == 1.5
    assert updated[1] == entries[1]
    assert entries[0].multiplier == 1


def test_set_multiplier_rejects_negative() -> None:
    entries = _entries()

    with pytest.raises(ValidationError) as excinfo:
        set_multiplier(entries, entries[0].id, -1)

    assert "multiplier" in excinfo.value.errors
    assert entries[0].multiplier == 1


def test_set_multiplier_rejects_zero() -> None:
    entries = _entries()

    with pytest.raises(ValidationError):
        set_multiplier(entries, entries[0].id, 0)


def test_set_multiplier_or_remove_deletes_on_negative() -> None:
    entries = _entries()

    updated = set_multiplier_or_remove(entries, entries[0].id, -1)

    assert [entry.id for entry in updated] == [entries[1].id]


def test_set_multiplier_or_remove_updates_positive() -> None:
    entries = _entries()

    updated = set_multiplier_or_remove(entries, entries[1].id, 3)

    assert updated[1].multiplier == 3
    assert len(updated) == 2


def test_set_multiplier_or_remove_still_rejects_garbage() -> None:
    entries = _entries()

    with pytest.raises(ValidationError):
        set_multiplier_or_remove(entries, entries[0].id, "lots")


@pytest.mark.parametrize("raw", ["abc", "", "nan", "inf", None, True, [1]])
def test_parse_multiplier_rejects_non_numbers(raw: object) -> None:
    with pytest.raises(ValidationError):
        parse_multiplier(raw)


def test_parse_multiplier_accepts_numeric_strings() -> None:
    assert parse_multiplier(" 2.5 ") == 2.5
    assert parse_multiplier(2) == 2.0
