"""Booking feasibility against operating hours and existing bookings."""

from collections.abc import Iterable
from datetime import datetime, timedelta

from studios.domain.config import EngineConfig
from studios.domain.errors import ErrorCode
from studios.domain.models import AvailabilityDecision, BookingRequest, BusyInterval
from studios.domain.schedule import is_within_operating_hours, localize


def with_cooldown(
    busy: Iterable[BusyInterval], config: EngineConfig
) -> tuple[BusyInterval, ...]:
    """Extend each busy interval's end by the cooldown.

    Starts are left alone: a booking may finish right as another begins.
    """
    cooldown = timedelta(minutes=config.cooldown_minutes)
    return tuple(
        BusyInterval(
            start=localize(interval.start, config),
            end=localize(interval.end, config) + cooldown,
        )
        for interval in busy
    )


def overlaps(start: datetime, end: datetime, interval: BusyInterval) -> bool:
    return start < interval.end and end > interval.start


def evaluate_slot(
    start: datetime,
    duration_hours: float,
    busy: Iterable[BusyInterval],
    config: EngineConfig,
) -> AvailabilityDecision:
    """Decide whether a booking can start at a given time.

    Checks run in order and the first failure wins: duration, operating
    hours, then conflicts with cooldown-extended busy intervals.
    """
    if duration_hours <= 0:
        return AvailabilityDecision(available=False, reason=ErrorCode.INVALID_DURATION)

    if not is_within_operating_hours(start, duration_hours, config):
        return AvailabilityDecision(
            available=False, reason=ErrorCode.OUTSIDE_OPERATING_HOURS
        )

    local_start = localize(start, config)
    local_end = local_start + timedelta(hours=duration_hours)
    for interval in with_cooldown(busy, config):
        if overlaps(local_start, local_end, interval):
            return AvailabilityDecision(available=False, reason=ErrorCode.SLOT_CONFLICT)

    return AvailabilityDecision(available=True)


def check_availability(
    request: BookingRequest, busy: Iterable[BusyInterval], config: EngineConfig
) -> AvailabilityDecision:
    """Evaluate a booking request against its studio's busy intervals."""
    return evaluate_slot(request.start_time, request.duration_hours, busy, config)


def is_slot_available(
    start: datetime,
    duration_hours: float,
    busy: Iterable[BusyInterval],
    config: EngineConfig,
) -> bool:
    return evaluate_slot(start, duration_hours, busy, config).available
