"""Pytest configuration and shared fixtures."""

from datetime import datetime

import pytest
from rest_framework.test import APIClient

from studios.conf import get_booking_service
from studios.domain import DEFAULT_ENGINE_CONFIG, BusyInterval, EngineConfig, Studio
from studios.services.booking_service import BookingService
from studios.stores import InMemoryCalendarStore, InMemoryContentStore

# 2024-06-03 is a Monday.
MONDAY = datetime(2024, 6, 3)

DISCOUNT_RECORDS = [
    {
        "code": "summer10",
        "discount_type": "percentage",
        "discount_value": 10,
        "min_booking_value": None,
        "max_discount_amount": None,
        "usage_limit": None,
        "usage_count": 0,
        "exclusive_email": None,
        "valid_from": "2024-01-01T00:00:00+00:00",
        "valid_until": "2024-12-31T23:59:59+00:00",
        "applicable_studios": None,
        "is_active": True,
    },
    {
        "code": "TENOFF",
        "discount_type": "fixed",
        "discount_value": 10,
        "min_booking_value": 20000,
        "max_discount_amount": None,
        "usage_limit": 5,
        "usage_count": 1,
        "exclusive_email": None,
        "valid_from": "2024-01-01T00:00:00+00:00",
        "valid_until": None,
        "applicable_studios": ["studio-wharf"],
        "is_active": True,
    },
]


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_booking_service():
    get_booking_service.cache_clear()
    yield
    get_booking_service.cache_clear()


@pytest.fixture
def engine_config() -> EngineConfig:
    return DEFAULT_ENGINE_CONFIG


@pytest.fixture
def content_store() -> InMemoryContentStore:
    return InMemoryContentStore.from_records(discount_codes=DISCOUNT_RECORDS)


@pytest.fixture
def calendar_store() -> InMemoryCalendarStore:
    store = InMemoryCalendarStore()
    store.add_busy_interval(
        Studio.DOCK_ONE,
        BusyInterval(start=MONDAY.replace(hour=10), end=MONDAY.replace(hour=12)),
    )
    return store


@pytest.fixture
def booking_service(content_store, calendar_store, engine_config) -> BookingService:
    return BookingService(content_store, calendar_store, engine_config)
