"""Build the engine configuration and service from Django settings."""

from collections.abc import Mapping
from decimal import Decimal
from functools import cache
from typing import Any

from django.conf import settings
from django.utils.module_loading import import_string

from studios.domain import DEFAULT_ENGINE_CONFIG, EngineConfig, OperatingWindow
from studios.services.booking_service import BookingService


def _operating_hours(raw: Mapping[Any, Any]) -> dict[int, OperatingWindow]:
    return {
        int(weekday): OperatingWindow(open_hour=int(hours[0]), close_hour=int(hours[1]))
        for weekday, hours in raw.items()
    }


def load_engine_config() -> EngineConfig:
    """Read settings.STUDIO_ENGINE, falling back to the defaults per key."""
    raw = getattr(settings, "STUDIO_ENGINE", {})
    defaults = DEFAULT_ENGINE_CONFIG
    hours = raw.get("OPERATING_HOURS")

    return EngineConfig(
        operating_hours=defaults.operating_hours if hours is None else _operating_hours(hours),
        cooldown_minutes=int(raw.get("COOLDOWN_MINUTES", defaults.cooldown_minutes)),
        surcharge_rate=Decimal(str(raw.get("SURCHARGE_RATE", defaults.surcharge_rate))),
        evening_start_hour=int(raw.get("EVENING_START_HOUR", defaults.evening_start_hour)),
        weekend_days=frozenset(raw.get("WEEKEND_DAYS", defaults.weekend_days)),
        time_zone=raw.get("TIME_ZONE", defaults.time_zone),
        slot_interval_minutes=int(
            raw.get("SLOT_INTERVAL_MINUTES", defaults.slot_interval_minutes)
        ),
    )


def _build_store(store_settings: Mapping[str, Any]) -> Any:
    factory = import_string(store_settings["FACTORY"])
    return factory(**store_settings.get("OPTIONS", {}))


@cache
def get_booking_service() -> BookingService:
    """Build the service once per process from settings.STUDIO_ENGINE.

    Call get_booking_service.cache_clear() to rebuild after a settings change.
    """
    raw = getattr(settings, "STUDIO_ENGINE", {})
    return BookingService(
        content_store=_build_store(raw["CONTENT_STORE"]),
        calendar_store=_build_store(raw["CALENDAR_STORE"]),
        config=load_engine_config(),
    )
