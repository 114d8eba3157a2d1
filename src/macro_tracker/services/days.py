"""Day records, day-type state and food logging."""

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Protocol
from uuid import UUID

from macro_tracker.dates import local_today
from macro_tracker.domain.foods import (
    DayRecord,
    DaySummary,
    Food,
    FoodEntrySnapshot,
    LogResult,
)
from macro_tracker.domain.macros import DayType
from macro_tracker.services.catalog import CatalogService
from macro_tracker.services.entries import (
    remove_entry,
    set_multiplier,
    set_multiplier_or_remove,
    validate_multiplier,
)
from macro_tracker.services.macros import summarize_day
from macro_tracker.services.user_settings import UserSettingsService

_logger = logging.getLogger(__name__)


class DayRepository(Protocol):
    """Persistence interface for day records and their entries."""

    def get_day(self, user_id: UUID, day: date) -> DayRecord | None:
        """Return the record for a date, if one exists."""

    def get_day_by_id(self, user_id: UUID, day_id: UUID) -> DayRecord | None:
        """Return a record by id."""

    def create_day(self, user_id: UUID, day: date, day_type: DayType) -> DayRecord:
        """Create the record for a date."""

    def update_day_type(
        self, user_id: UUID, day_id: UUID, day_type: DayType
    ) -> DayRecord:
        """Change a record's day type."""

    def list_days_with_entries(
        self, user_id: UUID, limit: int
    ) -> list[tuple[DayRecord, list[FoodEntrySnapshot]]]:
        """Return the most recent records, newest first, with their entries."""

    def list_entries(self, user_id: UUID, day_id: UUID) -> list[FoodEntrySnapshot]:
        """Return a day's entries in creation order."""

    def get_entry(self, user_id: UUID, entry_id: UUID) -> FoodEntrySnapshot | None:
        """Return an entry by id."""

    def create_entry(
        self, user_id: UUID, day_id: UUID, food: Food, multiplier: float
    ) -> FoodEntrySnapshot:
        """Create an entry holding a copy of the food's current values."""

    def update_entry_multiplier(
        self, user_id: UUID, entry_id: UUID, multiplier: float
    ) -> FoodEntrySnapshot:
        """Change an entry's multiplier."""

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete an entry."""


@dataclass(frozen=True)
class DayTypeState:
    """The record for a date, if any, and the toggle used for its first log."""

    record: DayRecord | None
    pending: DayType

    @property
    def day_type(self) -> DayType:
        return self.record.day_type if self.record else self.pending


def toggle_day_type(state: DayTypeState, day_type: DayType | str) -> DayTypeState:
    """Switch the day type.

    Updates the existing record, or only the pending toggle when there is none.
    """
    resolved = DayType(day_type)
    if state.record is None:
        return replace(state, pending=resolved)
    return DayTypeState(
        record=replace(state.record, day_type=resolved), pending=resolved
    )


@dataclass
class DayLogService:
    """Service that logs foods to days and reports progress against targets."""

    repository: DayRepository
    catalog_service: CatalogService
    user_settings_service: UserSettingsService
    timezone: str | None = None

    def today(self, user_id: UUID, now: datetime | None = None) -> date:
        """Return the calendar date in the user's timezone.

        Falls back to the configured timezone, then the host's local zone.
        """
        user_timezone = self.user_settings_service.get_timezone(user_id)
        return local_today(user_timezone or self.timezone, now=now)

    def get_state(self, user_id: UUID, day: date) -> DayTypeState:
        """Return the day-type state for a date."""
        return DayTypeState(
            record=self.repository.get_day(user_id, day),
            pending=self.user_settings_service.get_day_type(user_id),
        )

    def get_summary(self, user_id: UUID, day: date) -> DaySummary:
        """Return entries, totals and target comparison for a date."""
        state = self.get_state(user_id, day)
        entries = (
            self.repository.list_entries(user_id, state.record.id)
            if state.record
            else []
        )
        return self._summarize(user_id, day, state, entries)

    def set_day_type(
        self, user_id: UUID, day: date, day_type: DayType | str
    ) -> DaySummary:
        """Toggle the day type for a date."""
        current = self.get_state(user_id, day)
        updated = toggle_day_type(current, day_type)
        self.user_settings_service.set_day_type(user_id, updated.pending)
        if current.record and updated.record:
            self.repository.update_day_type(
                user_id, current.record.id, updated.record.day_type
            )
            _logger.info(
                "Day type changed: user_id=%s day=%s day_type=%s",
                user_id,
                day,
                updated.day_type.value,
            )
        entries = (
            self.repository.list_entries(user_id, current.record.id)
            if current.record
            else []
        )
        return self._summarize(user_id, day, updated, entries)

    def log_food(
        self, user_id: UUID, day: date, food_id: UUID, multiplier: object = 1
    ) -> LogResult | None:
        """Log a catalog food to a date, creating the day record if needed.

        Returns None when the food is no longer in the catalog.
        """
        value = validate_multiplier(multiplier)
        foods = self.catalog_service.list_foods(user_id)
        food = next((item for item in foods if item.id == food_id), None)
        if food is None:
            _logger.warning(
                "Log of unknown food: user_id=%s food_id=%s", user_id, food_id
            )
            return None

        state = self.get_state(user_id, day)
        record = state.record
        if record is None:
            record = self.repository.create_day(user_id, day, state.pending)
            _logger.info(
                "Day created: user_id=%s day=%s day_type=%s",
                user_id,
                day,
                record.day_type.value,
            )
        entry = self.repository.create_entry(user_id, record.id, food, value)
        ranked = self.catalog_service.record_use(foods, food_id)
        _logger.info(
            "Food logged: user_id=%s day=%s food_id=%s multiplier=%s",
            user_id,
            day,
            food_id,
            value,
        )
        entries = self.repository.list_entries(user_id, record.id)
        summary = self._summarize(
            user_id, day, DayTypeState(record=record, pending=state.pending), entries
        )
        return LogResult(day=summary, entry=entry, foods=ranked)

    def update_multiplier(
        self,
        user_id: UUID,
        entry_id: UUID,
        multiplier: object,
        remove_if_nonpositive: bool = False,
    ) -> DaySummary | None:
        """Change an entry's multiplier.

        By default a non-positive value is rejected. With
        ``remove_if_nonpositive`` it deletes the entry instead.
        """
        entry = self.repository.get_entry(user_id, entry_id)
        if entry is None:
            return None
        entries = self.repository.list_entries(user_id, entry.day_id)
        if remove_if_nonpositive:
            updated = set_multiplier_or_remove(entries, entry_id, multiplier)
        else:
            updated = set_multiplier(entries, entry_id, multiplier)
        changed = next((item for item in updated if item.id == entry_id), None)
        if changed is None:
            self.repository.delete_entry(user_id, entry_id)
            _logger.info("Entry removed by multiplier: entry_id=%s", entry_id)
        else:
            self.repository.update_entry_multiplier(
                user_id, entry_id, changed.multiplier
            )
            _logger.info(
                "Entry multiplier updated: entry_id=%s multiplier=%s",
                entry_id,
                changed.multiplier,
            )
        return self._summarize_by_id(user_id, entry.day_id, updated)

    def remove_entry(self, user_id: UUID, entry_id: UUID) -> DaySummary | None:
        """Delete an entry from its day. Food frequency is unchanged."""
        entry = self.repository.get_entry(user_id, entry_id)
        if entry is None:
            return None
        entries = self.repository.list_entries(user_id, entry.day_id)
        self.repository.delete_entry(user_id, entry_id)
        _logger.info("Entry removed: entry_id=%s", entry_id)
        return self._summarize_by_id(
            user_id, entry.day_id, remove_entry(entries, entry_id)
        )

    def history(self, user_id: UUID, limit: int = 30) -> list[DaySummary]:
        """Return recent days, newest first, each against its own targets."""
        settings = self.user_settings_service.get_settings(user_id)
        return [
            summarize_day(record.day, record.day_type, record.id, entries, settings)
            for record, entries in self.repository.list_days_with_entries(
                user_id, limit
            )
        ]

    def _summarize_by_id(
        self, user_id: UUID, day_id: UUID, entries: list[FoodEntrySnapshot]
    ) -> DaySummary | None:
        record = self.repository.get_day_by_id(user_id, day_id)
        if record is None:
            return None
        state = DayTypeState(
            record=record,
            pending=self.user_settings_service.get_day_type(user_id),
        )
        return self._summarize(user_id, record.day, state, entries)

    def _summarize(
        self,
        user_id: UUID,
        day: date,
        state: DayTypeState,
        entries: list[FoodEntrySnapshot],
    ) -> DaySummary:
        settings = self.user_settings_service.get_settings(user_id)
        return summarize_day(
            day,
            state.day_type,
            state.record.id if state.record else None,
            entries,
            settings,
        )
