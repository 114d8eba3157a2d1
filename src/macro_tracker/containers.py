"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from macro_tracker.adapters.supabase_day_repository import SupabaseDayRepository
from macro_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from macro_tracker.adapters.supabase_identity_provider import (
    SupabaseIdentityProvider,
)
from macro_tracker.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from macro_tracker.config import Settings, parse_timezone
from macro_tracker.services.catalog import CatalogService
from macro_tracker.services.days import DayLogService
from macro_tracker.services.user_settings import UserSettingsService
from macro_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    catalog_service: CatalogService
    user_settings_service: UserSettingsService
    day_log_service: DayLogService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_service = UserService(SupabaseIdentityProvider(supabase_client))
    catalog_service = CatalogService(SupabaseFoodRepository(supabase_client))
    user_settings_service = UserSettingsService(
        SupabaseUserSettingsRepository(supabase_client)
    )
    day_log_service = DayLogService(
        repository=SupabaseDayRepository(supabase_client),
        catalog_service=catalog_service,
        user_settings_service=user_settings_service,
        timezone=parse_timezone(resolved_settings.timezone),
    )
    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        catalog_service=catalog_service,
        user_settings_service=user_settings_service,
        day_log_service=day_log_service,
    )
