"""User settings service."""

import logging
import math
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from macro_tracker.domain.errors import ValidationError
from macro_tracker.domain.macros import (
    DEFAULT_SETTINGS,
    DayType,
    Targets,
    UserSettings,
)

_logger = logging.getLogger(__name__)


class UserSettingsRepository(Protocol):
    """Persistence interface for user settings."""

    def get_settings(self, user_id: UUID) -> UserSettings | None:
        """Return the user's stored settings, if any."""

    def upsert_settings(self, user_id: UUID, settings: UserSettings) -> UserSettings:
        """Create or replace the user's settings."""


@dataclass
class UserSettingsService:
    """Service for user targets, timezone and day-type toggle."""

    repository: UserSettingsRepository

    def get_settings(self, user_id: UUID) -> UserSettings:
        """Return the user's settings or the defaults if unset."""
        return self.repository.get_settings(user_id) or DEFAULT_SETTINGS

    def update_settings(self, user_id: UUID, settings: UserSettings) -> UserSettings:
        """Validate and persist the user's targets and timezone.

        The stored day-type toggle is kept.
        """
        errors: dict[str, str] = {}
        _collect_target_errors("workout", settings.workout, errors)
        _collect_target_errors("rest", settings.rest, errors)
        timezone = _normalize_timezone(settings.timezone)
        if timezone is not None and not _is_valid_timezone(timezone):
            errors["timezone"] = "Unknown timezone"
        if errors:
            raise ValidationError(errors)
        current = self.get_settings(user_id)
        saved = self.repository.upsert_settings(
            user_id,
            replace(settings, timezone=timezone, day_type=current.day_type),
        )
        _logger.info("Settings updated: user_id=%s", user_id)
        return saved

    def get_timezone(self, user_id: UUID) -> str | None:
        """Return the user's timezone if set."""
        return self.get_settings(user_id).timezone

    def get_day_type(self, user_id: UUID) -> DayType:
        """Return the day-type toggle used for a day's first log."""
        return self.get_settings(user_id).day_type

    def set_day_type(self, user_id: UUID, day_type: DayType) -> UserSettings:
        """Persist the day-type toggle."""
        current = self.get_settings(user_id)
        if current.day_type is day_type:
            return current
        return self.repository.upsert_settings(
            user_id, replace(current, day_type=day_type)
        )


def _normalize_timezone(raw: str | None) -> str | None:
    if raw is None:
        return None
    cleaned = raw.strip()
    return cleaned or None


def _is_valid_timezone(value: str) -> bool:
    try:
        ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True


def _collect_target_errors(
    prefix: str, targets: Targets, errors: dict[str, str]
) -> None:
    for name in ("protein_g", "carbs_g", "fat_g"):
        value = getattr(targets, name)
        if isinstance(value, bool) or not isinstance(value, int | float):
            errors[f"{prefix}_{name}"] = "Must be a number"
        elif not math.isfinite(value) or value < 0:
            errors[f"{prefix}_{name}"] = "Must be a non-negative number"
