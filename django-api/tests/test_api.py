"""Integration tests for the booking HTTP handlers.

Run with: pytest tests/test_api.py -v
"""

from datetime import date

import pytest
from rest_framework.test import APIClient

from studios.conf import get_booking_service
from studios.domain.config import EngineConfig

MONDAY = date(2024, 6, 3)


@pytest.fixture
def seeded(monkeypatch, booking_service):
    """Route the handlers to the fixture stores."""
    monkeypatch.setattr("studios.handlers.views.get_booking_service", lambda: booking_service)
    return booking_service


class TestSlotList:
    """Tests for GET /api/studios/{studio}/slots"""

    def test_lists_free_slots(self, api_client: APIClient, seeded):
        """Given a busy morning, returns hourly slots from 13:00."""
        response = api_client.get(
            "/api/studios/studio-dock-one/slots", {"date": "2024-06-03", "duration": 1, "interval": 60}
        )
        assert response.status_code == 200
        assert response.json()["slots"][:2] == ["13:00", "14:00"]

    def test_missing_date_is_bad_request(self, api_client: APIClient, seeded):
        """Given no date, returns 400 naming the field."""
        response = api_client.get("/api/studios/studio-dock-one/slots")
        assert response.status_code == 400
        assert "date" in response.json()

    def test_unknown_studio_is_not_found(self, api_client: APIClient, seeded):
        """Given an unknown studio, returns 404 with INVALID_STUDIO."""
        response = api_client.get("/api/studios/studio-attic/slots", {"date": "2024-06-03"})
        assert response.status_code == 404
        assert response.json() == {"code": "INVALID_STUDIO", "message": "Invalid studio selection"}


class TestAvailability:
    """Tests for GET /api/studios/{studio}/availability"""

    def test_conflict(self, api_client: APIClient, seeded):
        """Given a start inside the cooldown, returns SLOT_CONFLICT."""
        response = api_client.get(
            "/api/studios/studio-dock-one/availability",
            {"start_time": "2024-06-03T12:59:00", "duration": 1},
        )
        assert response.status_code == 200
        assert response.json() == {"available": False, "reason": "SLOT_CONFLICT"}

    def test_available(self, api_client: APIClient, seeded):
        """Given a start after the cooldown, returns available."""
        response = api_client.get(
            "/api/studios/studio-dock-one/availability",
            {"start_time": "2024-06-03T13:00:00", "duration": 1},
        )
        assert response.json() == {"available": True, "reason": None}


class TestQuote:
    """Tests for POST /api/quotes"""

    def test_saturday_evening_quote_uses_configured_catalogue(self, api_client: APIClient):
        """Given a Saturday evening booking with a camera, returns the surcharged quote."""
        response = api_client.post(
            "/api/quotes",
            {
                "studio": "studio-dock-one",
                "package_id": "minimum2hrs",
                "starts_at": "2024-06-01T19:00:00",
                "add_ons": {"camera": 1},
            },
            format="json",
        )
        assert response.status_code == 200
        body = response.json()
        assert body["surcharge_applied"] is True
        assert body["total"] == {"pence": 20700, "display": "£207.00"}
        assert [line["label"] for line in body["breakdown"]] == [
            "Studio Dock One (E16) - Minimum 2 Hours",
            "Additional Camera & Lens",
            "Evening/Weekend Surcharge (15%)",
        ]
        assert body["discount"] is None
        assert body["payment"]["payment_type"] == "full"

    def test_add_on_over_cap(self, api_client: APIClient):
        """Given three cameras, returns 400 with ADD_ON_QUANTITY_EXCEEDED."""
        response = api_client.post(
            "/api/quotes",
            {
                "studio": "studio-dock-one",
                "package_id": "minimum2hrs",
                "starts_at": "2024-06-03T10:00:00",
                "add_ons": {"camera": 3},
            },
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["code"] == "ADD_ON_QUANTITY_EXCEEDED"

    def test_unknown_package_is_not_found(self, api_client: APIClient):
        """Given an unknown package, returns 404."""
        response = api_client.post(
            "/api/quotes",
            {"studio": "studio-wharf", "package_id": "weekly", "starts_at": "2024-06-03T10:00:00"},
            format="json",
        )
        assert response.status_code == 404

    def test_invalid_payment_type(self, api_client: APIClient):
        """Given an unsupported payment type, returns 400 naming the field."""
        response = api_client.post(
            "/api/quotes",
            {
                "studio": "studio-wharf",
                "package_id": "minimum2hrs",
                "starts_at": "2024-06-03T10:00:00",
                "payment_type": "instalments",
            },
            format="json",
        )
        assert response.status_code == 400
        assert "payment_type" in response.json()


class TestDiscountValidate:
    """Tests for POST /api/discounts/validate"""

    def test_unknown_code(self, api_client: APIClient, seeded):
        """Given an unknown code, returns NOT_FOUND with its message."""
        response = api_client.post(
            "/api/discounts/validate",
            {"code": "nope", "studio": "studio-dock-one", "booking_total": 17250},
            format="json",
        )
        assert response.status_code == 200
        assert response.json() == {"valid": False, "code": "NOT_FOUND", "error": "Invalid discount code"}

    def test_below_minimum(self, api_client: APIClient, seeded):
        """Given a total under the minimum, returns BELOW_MINIMUM with the amount."""
        response = api_client.post(
            "/api/discounts/validate",
            {"code": "tenoff", "studio": "studio-wharf", "booking_total": 15000},
            format="json",
        )
        body = response.json()
        assert body["valid"] is False
        assert body["code"] == "BELOW_MINIMUM"
        assert body["error"] == "Minimum booking value of £200.00 required for this code"


class TestEngineSettings:
    """Tests for building the engine from Django settings."""

    def test_load_engine_config_from_settings(self, settings):
        """Given overridden engine settings, returns a matching EngineConfig."""
        from studios.conf import load_engine_config

        settings.STUDIO_ENGINE = {
            **settings.STUDIO_ENGINE,
            "OPERATING_HOURS": {"1": [9, 17]},
            "COOLDOWN_MINUTES": 30,
            "SURCHARGE_RATE": "0.2",
        }
        config = load_engine_config()
        assert isinstance(config, EngineConfig)
        assert dict(config.operating_hours).keys() == {1}
        assert config.operating_hours[1].close_hour == 17
        assert config.cooldown_minutes == 30
        assert str(config.surcharge_rate) == "0.2"

    def test_schedule_override_reaches_handlers(self, api_client: APIClient, settings):
        """Given overridden operating hours, returns slots within them."""
        settings.STUDIO_ENGINE = {**settings.STUDIO_ENGINE, "OPERATING_HOURS": {1: (9, 11)}}
        response = api_client.get(
            "/api/studios/studio-wharf/slots", {"date": "2024-06-03", "duration": 1, "interval": 60}
        )
        assert response.json() == {"slots": ["09:00", "10:00"]}

    def test_calendar_seeded_from_settings(self, api_client: APIClient, settings):
        """Given busy records in settings, returns SLOT_CONFLICT inside the cooldown."""
        settings.STUDIO_ENGINE = {
            **settings.STUDIO_ENGINE,
            "CALENDAR_STORE": {
                "FACTORY": "studios.stores.memory_store.calendar_store_from_records",
                "OPTIONS": {
                    "busy": [
                        {
                            "studio": "studio-dock-one",
                            "start": "2024-06-03T10:00:00+01:00",
                            "end": "2024-06-03T12:00:00+01:00",
                        }
                    ]
                },
            },
        }
        conflict = api_client.get(
            "/api/studios/studio-dock-one/availability",
            {"start_time": "2024-06-03T12:59:00", "duration": 1},
        )
        assert conflict.json() == {"available": False, "reason": "SLOT_CONFLICT"}
        free = api_client.get(
            "/api/studios/studio-dock-one/availability",
            {"start_time": "2024-06-03T13:00:00", "duration": 1},
        )
        assert free.json() == {"available": True, "reason": None}

    def test_seeded_calendar_removes_busy_slots(self, api_client: APIClient, settings):
        """Given busy records in settings, returns slots only after the cooldown."""
        settings.STUDIO_ENGINE = {
            **settings.STUDIO_ENGINE,
            "CALENDAR_STORE": {
                "FACTORY": "studios.stores.memory_store.calendar_store_from_records",
                "OPTIONS": {
                    "busy": [
                        {"studio": "studio-wharf", "start": "2024-06-03T09:00:00Z", "end": "2024-06-03T11:00:00Z"}
                    ]
                },
            },
        }
        response = api_client.get(
            "/api/studios/studio-wharf/slots", {"date": "2024-06-03", "duration": 1, "interval": 60}
        )
        assert response.json()["slots"][:2] == ["13:00", "14:00"]


class TestBookingServiceCache:
    """Tests for reusing the service built from settings."""

    def test_service_is_built_once(self):
        """Given repeated calls, returns the same service instance."""
        assert get_booking_service() is get_booking_service()

    def test_settings_change_rebuilds_service(self, settings):
        """Given a change to the engine settings, returns a freshly built service."""
        first = get_booking_service()
        settings.STUDIO_ENGINE = {**settings.STUDIO_ENGINE, "OPERATING_HOURS": {1: (9, 11)}}
        second = get_booking_service()
        assert second is not first
        assert second.list_available_slots("studio-wharf", MONDAY, 1, 60) == ["09:00", "10:00"]
        assert first.list_available_slots("studio-wharf", MONDAY, 1, 60)[0] == "10:00"
