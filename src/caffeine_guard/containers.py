"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import create_client

from caffeine_guard.adapters.kv_consumption_log_repository import (
    KeyValueConsumptionLogRepository,
)
from caffeine_guard.adapters.supabase_kv_store import SupabaseKeyValueStore
from caffeine_guard.config import Settings
from caffeine_guard.services.consumption import ConsumptionLogService
from caffeine_guard.services.events import EventBus
from caffeine_guard.services.preferences import PreferencesService, UserPreferences
from caffeine_guard.services.recommendations import RecommendationService
from caffeine_guard.services.store import InMemoryKeyValueStore, KeyValueStore
from caffeine_guard.services.tracker import CaffeineTrackerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    store: KeyValueStore
    event_bus: EventBus
    preferences_service: PreferencesService
    consumption_service: ConsumptionLogService
    recommendation_service: RecommendationService
    tracker_service: CaffeineTrackerService
    clock: Callable[[], datetime]


def default_preferences(settings: Settings) -> UserPreferences:
    """Build default preferences from settings."""
    return UserPreferences(
        bedtime=settings.default_bedtime,
        wake_time=settings.default_wake_time,
        timezone=settings.default_timezone,
        daily_limit_mg=settings.default_daily_limit_mg,
        half_life_hours=settings.default_half_life_hours,
        serving_size_oz=settings.default_serving_size_oz,
        shots=settings.default_shots,
    )


def build_container(
    settings: Settings | None = None,
    store: KeyValueStore | None = None,
    clock: Callable[[], datetime] | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if store is None:
        if resolved_settings.has_supabase():
            supabase_client = create_client(
                resolved_settings.supabase_url, resolved_settings.supabase_service_key
            )
            store = SupabaseKeyValueStore(
                supabase_client, table=resolved_settings.kv_table
            )
        else:
            store = InMemoryKeyValueStore()

    event_bus = EventBus()
    preferences_service = PreferencesService(
        store=store,
        defaults=default_preferences(resolved_settings),
        event_bus=event_bus,
    )
    log_repository = KeyValueConsumptionLogRepository(store)
    consumption_service = ConsumptionLogService(log_repository, event_bus=event_bus)
    recommendation_service = RecommendationService()
    tracker_service = CaffeineTrackerService(
        repository=log_repository,
        preferences_service=preferences_service,
        recommendation_service=recommendation_service,
    )

    return AppContainer(
        settings=resolved_settings,
        store=store,
        event_bus=event_bus,
        preferences_service=preferences_service,
        consumption_service=consumption_service,
        recommendation_service=recommendation_service,
        tracker_service=tracker_service,
        clock=clock or (lambda: datetime.now(tz=UTC)),
    )
