"""
Local wall-clock helpers shared by the schedule filter, randomizer and
publication policy.

"Local" always means the active Django time zone (settings.TIME_ZONE, or
whatever zone is active through timezone.override()).
"""
from datetime import datetime, date, time as dt_time, timezone as dt_timezone
from typing import Optional
from django.utils import timezone


def to_aware(value: datetime) -> datetime:
    """Aware datetime for `value`; naive values are taken as local wall-clock time."""
    if timezone.is_naive(value):
        return timezone.make_aware(value)
    return value


def to_utc(value: datetime) -> datetime:
    """The same instant in UTC, so comparisons never depend on wall-clock `fold`."""
    return to_aware(value).astimezone(dt_timezone.utc)


def to_local(value: Optional[datetime] = None) -> datetime:
    """
    Convert an instant to the active local time zone.

    Naive datetimes are interpreted as already being local wall-clock time.
    """
    if value is None:
        value = timezone.now()
    return timezone.localtime(to_aware(value))


def local_instant(day: date, at: dt_time, tzinfo) -> datetime:
    """Build the aware instant for a local calendar day and wall-clock time."""
    return timezone.make_aware(datetime.combine(day, at), tzinfo)


def epoch_millis(value: datetime) -> int:
    """Epoch milliseconds of an aware datetime."""
    return int(value.timestamp()) * 1000 + value.microsecond // 1000


def js_weekday(value: datetime) -> int:
    """Day of week with 0 = Sunday ... 6 = Saturday."""
    return (value.weekday() + 1) % 7
