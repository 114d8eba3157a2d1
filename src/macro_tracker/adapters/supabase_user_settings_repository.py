"""Supabase repository for user settings."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from macro_tracker.domain.macros import DayType, Targets, UserSettings
from macro_tracker.services.user_settings import UserSettingsRepository


@dataclass
class SupabaseUserSettingsRepository(UserSettingsRepository):
    """Supabase implementation for user settings."""

    client: Client

    def get_settings(self, user_id: UUID) -> UserSettings | None:
        """Return the stored targets for a user."""
        response = (
            self.client.table("user_settings")
            .select("*")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_settings(response.data[0])

    def upsert_settings(self, user_id: UUID, settings: UserSettings) -> UserSettings:
        """Create or replace the user's settings row."""
        response = (
            self.client.table("user_settings")
            .upsert(
                {
                    "user_id": str(user_id),
                    "workout_protein": settings.workout.protein_g,
                    "workout_carbs": settings.workout.carbs_g,
                    "workout_fat": settings.workout.fat_g,
                    "rest_protein": settings.rest.protein_g,
                    "rest_carbs": settings.rest.carbs_g,
                    "rest_fat": settings.rest.fat_g,
                    "timezone": settings.timezone,
                    "day_type": settings.day_type.value,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="user_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save user settings")
        return _parse_settings(response.data[0])


def _parse_settings(row: dict[str, object]) -> UserSettings:
    return UserSettings(
        workout=Targets(
            protein_g=float(row.get("workout_protein", 0.0)),
            carbs_g=float(row.get("workout_carbs", 0.0)),
            fat_g=float(row.get("workout_fat", 0.0)),
        ),
        rest=Targets(
            protein_g=float(row.get("rest_protein", 0.0)),
            carbs_g=float(row.get("rest_carbs", 0.0)),
            fat_g=float(row.get("rest_fat", 0.0)),
        ),
        timezone=_parse_timezone(row.get("timezone")),
        day_type=DayType(str(row.get("day_type") or DayType.WORKOUT.value)),
    )


def _parse_timezone(raw: object) -> str | None:
    if not isinstance(raw, str) or not raw.strip():
        return None
    return raw.strip()
