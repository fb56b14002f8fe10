"""Operating-hours lookups."""

from datetime import date, datetime, timedelta

from studios.domain.config import EngineConfig
from studios.domain.models import OperatingWindow


def weekday_index(day: date) -> int:
    """Return the weekday with Sunday as 0 and Saturday as 6."""
    return (day.weekday() + 1) % 7


def window_for(weekday: int, config: EngineConfig) -> OperatingWindow | None:
    """Return the opening window for a weekday, or None when closed."""
    return config.operating_hours.get(weekday)


def localize(moment: datetime, config: EngineConfig) -> datetime:
    """Express a datetime as wall-clock time in the studio's timezone.

    Naive datetimes are taken to already be local time.
    """
    if moment.tzinfo is None:
        return moment.replace(tzinfo=config.tzinfo)
    return moment.astimezone(config.tzinfo)


def is_within_operating_hours(
    start: datetime, duration_hours: float, config: EngineConfig
) -> bool:
    """Check that a booking starts after opening and ends by closing."""
    local_start = localize(start, config)
    window = window_for(weekday_index(local_start.date()), config)
    if window is None:
        return False

    midnight = local_start.replace(hour=0, minute=0, second=0, microsecond=0)
    opening = midnight + timedelta(hours=window.open_hour)
    closing = midnight + timedelta(hours=window.close_hour)
    return opening <= local_start and local_start + timedelta(hours=duration_hours) <= closing
