"""Candidate start times for a day."""

from collections.abc import Iterable, Iterator
from datetime import date, datetime, time

from studios.domain.availability import is_slot_available
from studios.domain.config import EngineConfig
from studios.domain.models import BusyInterval
from studios.domain.schedule import weekday_index, window_for


def generate_slots(
    day: date, config: EngineConfig, interval_minutes: int | None = None
) -> Iterator[str]:
    """Yield "HH:MM" start times from opening up to, not including, closing.

    Minutes restart at zero every hour, so an interval that does not divide
    60 leaves a short gap before the next hour. Callers still need to check
    that a slot plus its duration fits before closing.
    """
    interval = config.slot_interval_minutes if interval_minutes is None else interval_minutes
    if interval <= 0:
        raise ValueError("Slot interval must be positive")

    window = window_for(weekday_index(day), config)
    if window is None:
        return

    for hour in range(window.open_hour, window.close_hour):
        for minute in range(0, 60, interval):
            yield f"{hour:02d}:{minute:02d}"


def slot_start(day: date, slot: str) -> datetime:
    """Combine a day and an "HH:MM" slot into a naive local datetime."""
    hours, minutes = (int(part) for part in slot.split(":"))
    return datetime.combine(day, time(hours, minutes))


def available_slots(
    day: date,
    duration_hours: float,
    busy: Iterable[BusyInterval],
    config: EngineConfig,
    interval_minutes: int | None = None,
) -> list[str]:
    """Slots on a day where a booking of the given length can start."""
    busy = tuple(busy)
    return [
        slot
        for slot in generate_slots(day, config, interval_minutes)
        if is_slot_available(slot_start(day, slot), duration_hours, busy, config)
    ]
