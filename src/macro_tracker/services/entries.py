"""Multiplier policies for logged food entries."""

import math
from dataclasses import replace
from uuid import UUID

from macro_tracker.domain.errors import ValidationError
from macro_tracker.domain.foods import FoodEntrySnapshot


def parse_multiplier(raw: object) -> float:
    """Parse a multiplier value into a finite float.

    Sign is not checked here; callers apply their own non-positive policy.
    """
    if isinstance(raw, bool):
        raise ValidationError({"multiplier": "Multiplier must be a number"})
    if isinstance(raw, int | float):
        value = float(raw)
    elif isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError as exc:
            raise ValidationError(
                {"multiplier": "Multiplier must be a number"}
            ) from exc
    else:
        raise ValidationError({"multiplier": "Multiplier must be a number"})
    if not math.isfinite(value):
        raise ValidationError({"multiplier": "Multiplier must be finite"})
    return value


def validate_multiplier(raw: object) -> float:
    """Parse a multiplier and require it to be positive."""
    value = parse_multiplier(raw)
    if value <= 0:
        raise ValidationError({"multiplier": "Multiplier must be greater than 0"})
    return value


def set_multiplier(
    entries: list[FoodEntrySnapshot], entry_id: UUID, raw: object
) -> list[FoodEntrySnapshot]:
    """Return entries with one multiplier replaced; reject non-positive values."""
    value = validate_multiplier(raw)
    return [
        replace(entry, multiplier=value) if entry.id == entry_id else entry
        for entry in entries
    ]


def set_multiplier_or_remove(
    entries: list[FoodEntrySnapshot], entry_id: UUID, raw: object
) -> list[FoodEntrySnapshot]:
    """Return entries with one multiplier replaced, dropping it when non-positive.

    Unparseable input is still rejected.
    """
    value = parse_multiplier(raw)
    if value <= 0:
        return remove_entry(entries, entry_id)
    return [
        replace(entry, multiplier=value) if entry.id == entry_id else entry
        for entry in entries
    ]


def remove_entry(
    entries: list[FoodEntrySnapshot], entry_id: UUID
) -> list[FoodEntrySnapshot]:
    """Return entries without the given entry."""
    return [entry for entry in entries if entry.id != entry_id]
