"""Macro-nutrient domain models."""

from dataclasses import dataclass
from enum import Enum

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9


class DayType(str, Enum):
    """Binary day classification that selects which targets apply."""

    WORKOUT = "workout"
    REST = "rest"


class Progress(str, Enum):
    """Classification of a percent-of-target value."""

    UNDER = "under"
    NEAR = "near"
    OVER = "over"


def calories_from(protein_g: float, carbs_g: float, fat_g: float) -> float:
    """Derive calories from macro grams."""
    return (
        protein_g * PROTEIN_KCAL_PER_G
        + carbs_g * CARBS_KCAL_PER_G
        + fat_g * FAT_KCAL_PER_G
    )


@dataclass(frozen=True)
class MacroTotals:
    """Aggregated macros for a set of entries. Calories are derived."""

    protein_g: float
    carbs_g: float
    fat_g: float
    calories: float


@dataclass(frozen=True)
class Targets:
    """Per-macro gram goals for one day type."""

    protein_g: float
    carbs_g: float
    fat_g: float

    @property
    def calories(self) -> float:
        return calories_from(self.protein_g, self.carbs_g, self.fat_g)


@dataclass(frozen=True)
class UserSettings:
    """A user's target sets, local timezone and current day-type toggle.

    ``day_type`` is the toggle applied when the first food of a day is logged.
    """

    workout: Targets
    rest: Targets
    timezone: str | None = None
    day_type: DayType = DayType.WORKOUT


DEFAULT_SETTINGS = UserSettings(
    workout=Targets(protein_g=180, carbs_g=250, fat_g=80),
    rest=Targets(protein_g=180, carbs_g=150, fat_g=100),
)


@dataclass(frozen=True)
class MacroComparison:
    """Current value of one macro against its target.

    ``percent`` and ``progress`` are None when the target is not positive.
    """

    name: str
    current: float
    target: float
    percent: int | None
    progress: Progress | None
