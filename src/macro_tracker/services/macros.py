"""Macro aggregation and target comparison."""

import math
from collections.abc import Iterable
from datetime import date
from uuid import UUID

from macro_tracker.domain.foods import DaySummary, FoodEntrySnapshot
from macro_tracker.domain.macros import (
    DayType,
    MacroComparison,
    MacroTotals,
    Progress,
    Targets,
    UserSettings,
    calories_from,
)

NEAR_LOW_PERCENT = 90
NEAR_HIGH_PERCENT = 110


def aggregate(entries: Iterable[FoodEntrySnapshot]) -> MacroTotals:
    """Fold entries into macro totals.

    Calories are derived once from the summed grams, never summed per entry.
    Sums use ``math.fsum`` so the totals do not depend on entry order.
    """
    items = list(entries)
    protein = math.fsum(entry.protein_g * entry.multiplier for entry in items)
    carbs = math.fsum(entry.carbs_g * entry.multiplier for entry in items)
    fat = math.fsum(entry.fat_g * entry.multiplier for entry in items)
    return MacroTotals(
        protein_g=protein,
        carbs_g=carbs,
        fat_g=fat,
        calories=calories_from(protein, carbs, fat),
    )


def percent_of(current: float, target: float) -> int | None:
    """Return current as a whole percent of target, or None without a target."""
    if not target > 0:
        return None
    # Round half up; round() would send 0.5 to the even neighbour.
    return math.floor(current / target * 100 + 0.5)


def classify(percent: int) -> Progress:
    """Bucket a percent: above 110 is over, 90 to 110 inclusive is near."""
    if percent > NEAR_HIGH_PERCENT:
        return Progress.OVER
    if percent >= NEAR_LOW_PERCENT:
        return Progress.NEAR
    return Progress.UNDER


def select_targets(settings: UserSettings, day_type: DayType) -> Targets:
    """Pick the targets for a day type."""
    if day_type is DayType.WORKOUT:
        return settings.workout
    if day_type is DayType.REST:
        return settings.rest
    raise ValueError(f"Unknown day type: {day_type!r}")


def compare(totals: MacroTotals, targets: Targets) -> list[MacroComparison]:
    """Compare totals against targets for every macro and calories."""
    rows = [
        ("protein", totals.protein_g, targets.protein_g),
        ("carbs", totals.carbs_g, targets.carbs_g),
        ("fat", totals.fat_g, targets.fat_g),
        ("calories", totals.calories, targets.calories),
    ]
    comparison: list[MacroComparison] = []
    for name, current, target in rows:
        percent = percent_of(current, target)
        comparison.append(
            MacroComparison(
                name=name,
                current=current,
                target=target,
                percent=percent,
                progress=classify(percent) if percent is not None else None,
            )
        )
    return comparison


def summarize_day(  # noqa: PLR0913
    day: date,
    day_type: DayType,
    record_id: UUID | None,
    entries: list[FoodEntrySnapshot],
    settings: UserSettings,
) -> DaySummary:
    """Build a day summary, recomputing totals from the entries."""
    totals = aggregate(entries)
    return DaySummary(
        day=day,
        day_type=day_type,
        record_id=record_id,
        entries=entries,
        totals=totals,
        comparison=compare(totals, select_targets(settings, day_type)),
    )
