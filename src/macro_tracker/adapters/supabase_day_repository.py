"""Supabase implementation for day records and food entries."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from macro_tracker.domain.foods import DayRecord, Food, FoodEntrySnapshot
from macro_tracker.domain.macros import DayType
from macro_tracker.services.days import DayRepository


@dataclass
class SupabaseDayRepository(DayRepository):
    """Supabase-backed repository for daily entries and food entries."""

    client: Client

    def get_day(self, user_id: UUID, day: date) -> DayRecord | None:
        """Return the record for a date, if one exists."""
        response = (
            self.client.table("daily_entries")
            .select("*")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_day(response.data[0])

    def get_day_by_id(self, user_id: UUID, day_id: UUID) -> DayRecord | None:
        """Return a record by id."""
        response = (
            self.client.table("daily_entries")
            .select("*")
            .eq("id", str(day_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_day(response.data[0])

    def create_day(self, user_id: UUID, day: date, day_type: DayType) -> DayRecord:
        """Insert the record for a date."""
        response = (
            self.client.table("daily_entries")
            .insert(
                {
                    "user_id": str(user_id),
                    "date": day.isoformat(),
                    "day_type": day_type.value,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create daily entry")
        return _parse_day(response.data[0])

    def update_day_type(
        self, user_id: UUID, day_id: UUID, day_type: DayType
    ) -> DayRecord:
        """Change a record's day type."""
        response = (
            self.client.table("daily_entries")
            .update({"day_type": day_type.value})
            .eq("id", str(day_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update daily entry")
        return _parse_day(response.data[0])

    def list_days_with_entries(
        self, user_id: UUID, limit: int
    ) -> list[tuple[DayRecord, list[FoodEntrySnapshot]]]:
        """Return recent records with their entries embedded."""
        response = (
            self.client.table("daily_entries")
            .select("*, food_entries(*)")
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .limit(limit)
            .execute()
        )
        days: list[tuple[DayRecord, list[FoodEntrySnapshot]]] = []
        for row in response.data or []:
            entries = [_parse_entry(item) for item in row.get("food_entries") or []]
            days.append((_parse_day(row), _in_creation_order(entries)))
        return days

    def list_entries(self, user_id: UUID, day_id: UUID) -> list[FoodEntrySnapshot]:
        """Return a day's entries in creation order."""
        response = (
            self.client.table("food_entries")
            .select("*")
            .eq("daily_entry_id", str(day_id))
            .eq("user_id", str(user_id))
            .order("created_at")
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def get_entry(self, user_id: UUID, entry_id: UUID) -> FoodEntrySnapshot | None:
        """Return an entry by id."""
        response = (
            self.client.table("food_entries")
            .select("*")
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def create_entry(
        self, user_id: UUID, day_id: UUID, food: Food, multiplier: float
    ) -> FoodEntrySnapshot:
        """Insert an entry with a copy of the food's current values."""
        response = (
            self.client.table("food_entries")
            .insert(
                {
                    "user_id": str(user_id),
                    "daily_entry_id": str(day_id),
                    "food_id": str(food.id),
                    "multiplier": multiplier,
                    "food_name": food.name,
                    "food_portion_size": food.portion_size,
                    "food_protein": food.protein_g,
                    "food_carbs": food.carbs_g,
                    "food_fat": food.fat_g,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food entry")
        return _parse_entry(response.data[0])

    def update_entry_multiplier(
        self, user_id: UUID, entry_id: UUID, multiplier: float
    ) -> FoodEntrySnapshot:
        """Change an entry's multiplier."""
        response = (
            self.client.table("food_entries")
            .update({"multiplier": multiplier})
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update food entry")
        return _parse_entry(response.data[0])

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete an entry row."""
        self.client.table("food_entries").delete().eq("id", str(entry_id)).eq(
            "user_id", str(user_id)
        ).execute()


def _parse_day(row: dict[str, object]) -> DayRecord:
    """Parse a daily entry row into a domain model."""
    return DayRecord(
        id=UUID(str(row["id"])),
        day=date.fromisoformat(str(row["date"])),
        day_type=DayType(str(row.get("day_type", DayType.WORKOUT.value))),
    )


def _parse_entry(row: dict[str, object]) -> FoodEntrySnapshot:
    """Parse a food entry row into a domain model."""
    created_raw = row.get("created_at")
    food_id_raw = row.get("food_id")
    return FoodEntrySnapshot(
        id=UUID(str(row["id"])),
        day_id=UUID(str(row["daily_entry_id"])),
        food_id=UUID(str(food_id_raw)) if food_id_raw else None,
        multiplier=float(row.get("multiplier", 1.0)),
        food_name=str(row.get("food_name", "")),
        food_portion_size=str(row.get("food_portion_size", "")),
        protein_g=float(row.get("food_protein", 0.0)),
        carbs_g=float(row.get("food_carbs", 0.0)),
        fat_g=float(row.get("food_fat", 0.0)),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )


def _in_creation_order(entries: list[FoodEntrySnapshot]) -> list[FoodEntrySnapshot]:
    timed = [entry for entry in entries if entry.created_at is not None]
    if len(timed) != len(entries):
        return entries
    return sorted(entries, key=lambda entry: entry.created_at)
