"""Domain models for the food catalog and logged days."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from macro_tracker.domain.macros import DayType, MacroComparison, MacroTotals


@dataclass(frozen=True)
class FoodDraft:
    """User-entered values for a new catalog food."""

    name: str
    portion_size: str
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class Food:
    """A reusable catalog entry with per-serving macros."""

    id: UUID
    name: str
    portion_size: str
    protein_g: float
    carbs_g: float
    fat_g: float
    frequency: int = 0


@dataclass(frozen=True)
class FoodEntrySnapshot:
    """A food logged on a day, copied at logging time.

    ``food_id`` is kept for bookkeeping only. The nutrition fields never follow
    later edits of the catalog food.
    """

    id: UUID
    day_id: UUID
    food_id: UUID | None
    multiplier: float
    food_name: str
    food_portion_size: str
    protein_g: float
    carbs_g: float
    fat_g: float
    created_at: datetime | None = None


@dataclass(frozen=True)
class DayRecord:
    """One calendar date with its day type."""

    id: UUID
    day: date
    day_type: DayType


@dataclass(frozen=True)
class DaySummary:
    """A day with its entries, totals and comparison against targets."""

    day: date
    day_type: DayType
    record_id: UUID | None
    entries: list[FoodEntrySnapshot]
    totals: MacroTotals
    comparison: list[MacroComparison]


@dataclass(frozen=True)
class LogResult:
    """Outcome of logging a food: the refreshed day and re-ranked catalog."""

    day: DaySummary
    entry: FoodEntrySnapshot
    foods: list[Food]
