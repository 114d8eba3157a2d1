"""Pydantic models for API request payloads."""

from uuid import UUID

from pydantic import BaseModel

from macro_tracker.domain.macros import DayType


class FoodPayload(BaseModel):
    """New catalog food."""

    name: str
    portion_size: str
    protein_g: float
    carbs_g: float
    fat_g: float


class FoodPatchPayload(BaseModel):
    """Partial update of a catalog food."""

    name: str | None = None
    portion_size: str | None = None
    protein_g: float | None = None
    carbs_g: float | None = None
    fat_g: float | None = None


class LogFoodPayload(BaseModel):
    """Food to log on a day."""

    food_id: UUID
    multiplier: float | str = 1


class MultiplierPayload(BaseModel):
    """New multiplier for a logged entry."""

    multiplier: float | str
    remove_if_nonpositive: bool = False


class DayTypePayload(BaseModel):
    """Day type toggle."""

    day_type: DayType


class TargetsPayload(BaseModel):
    """Gram goals for one day type."""

    protein_g: float
    carbs_g: float
    fat_g: float


class SettingsPayload(BaseModel):
    """Targets for both day types and the local timezone."""

    workout: TargetsPayload
    rest: TargetsPayload
    timezone: str | None = None
