"""Tests for user settings service."""

from uuid import uuid4

import pytest

from macro_tracker.domain.errors import ValidationError
from macro_tracker.domain.macros import (
    DEFAULT_SETTINGS,
    DayType,
    Targets,
    UserSettings,
)
from macro_tracker.services.user_settings import UserSettingsService
from tests.conftest import InMemoryUserSettingsRepository


def test_get_settings_defaults_when_unset() -> None:
    service = UserSettingsService(InMemoryUserSettingsRepository())
    user_id = uuid4()

    assert service.get_settings(user_id) == DEFAULT_SETTINGS
    assert service.get_settings(user_id).workout.carbs_g == 250


def test_update_settings_persists() -> None:
    service = UserSettingsService(InMemoryUserSettingsRepository())
    user_id = uuid4()
    custom = UserSettings(
        workout=Targets(protein_g=200, carbs_g=300, fat_g=70),
        rest=Targets(protein_g=200, carbs_g=0, fat_g=90),
    )

    service.update_settings(user_id, custom)

    assert service.get_settings(user_id) == custom


def test_update_settings_rejects_negative_targets() -> None:
    repository = InMemoryUserSettingsRepository()
    service = UserSettingsService(repository)

    with pytest.raises(ValidationError) as excinfo:
        service.update_settings(
            uuid4(),
            UserSettings(
                workout=Targets(protein_g=-1, carbs_g=300, fat_g=70),
                rest=Targets(protein_g=200, carbs_g=100, fat_g=float("nan")),
            ),
        )

    assert set(excinfo.value.errors) == {"workout_protein_g", "rest_fat_g"}
    assert repository.settings == {}


def test_target_calories_use_same_formula() -> None:
    assert Targets(protein_g=180, carbs_g=250, fat_g=80).calories == 2440


def test_update_settings_stores_timezone() -> None:
    service = UserSettingsService(InMemoryUserSettingsRepository())
    user_id = uuid4()

    service.update_settings(
        user_id,
        UserSettings(
            workout=DEFAULT_SETTINGS.workout,
            rest=DEFAULT_SETTINGS.rest,
            timezone=" America/Los_Angeles ",
        ),
    )

    assert service.get_timezone(user_id) == "America/Los_Angeles"


def test_update_settings_rejects_unknown_timezone() -> None:
    repository = InMemoryUserSettingsRepository()
    service = UserSettingsService(repository)

    with pytest.raises(ValidationError) as excinfo:
        service.update_settings(
            uuid4(),
            UserSettings(
                workout=DEFAULT_SETTINGS.workout,
                rest=DEFAULT_SETTINGS.rest,
                timezone="Mars/Olympus_Mons",
            ),
        )

    assert set(excinfo.value.errors) == {"timezone"}
    assert repository.settings == {}


def test_day_type_toggle_is_persisted_and_kept_by_updates() -> None:
    repository = InMemoryUserSettingsRepository()
    user_id = uuid4()

    UserSettingsService(repository).set_day_type(user_id, DayType.REST)
    UserSettingsService(repository).update_settings(
        user_id,
        UserSettings(
            workout=Targets(protein_g=200, carbs_g=300, fat_g=70),
            rest=Targets(protein_g=200, carbs_g=120, fat_g=90),
        ),
    )

    other_instance = UserSettingsService(repository)
    assert other_instance.get_day_type(user_id) is DayType.REST
    assert other_instance.get_settings(user_id).rest.carbs_g == 120
