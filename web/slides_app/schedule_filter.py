"""
Day-of-week and time-of-day visibility windows for slides and tracks.

All checks use local wall-clock time (see slides_app.clock).
"""
import json
import logging
from dataclasses import dataclass
from datetime import datetime, time as dt_time
from typing import FrozenSet, Iterable, List, Optional, Union

from slides_app.clock import to_local, js_weekday

logger = logging.getLogger(__name__)

DAY_NAMES = ['Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday']

# Defaults when only one bound of a time range is set
DAY_START_MINUTES = 0
DAY_END_MINUTES = 1439  # 23:59


@dataclass(frozen=True)
class ScheduleWindow:
    """
    When an item may be shown.

    An empty `days_of_week` means every day. `time_start` / `time_end` are
    "HH:MM" or "HH:MM:SS" strings as stored; a start later than the end
    describes an overnight range (e.g. 22:00 - 03:00).
    """
    days_of_week: FrozenSet[int] = frozenset()
    time_start: Optional[str] = None
    time_end: Optional[str] = None

    def __post_init__(self):
        days = frozenset(self.days_of_week or ())
        invalid = [day for day in days if isinstance(day, bool) or not isinstance(day, int) or not 0 <= day <= 6]
        if invalid:
            raise ValueError(f"days_of_week must be integers 0-6, got {sorted(invalid, key=str)}")
        object.__setattr__(self, 'days_of_week', days)

    @classmethod
    def from_fields(
        cls,
        publish_days: Union[None, str, Iterable] = None,
        time_start: Union[None, str, dt_time] = None,
        time_end: Union[None, str, dt_time] = None,
    ) -> 'ScheduleWindow':
        """Build a window from persisted fields, tolerating legacy JSON strings."""
        return cls(
            days_of_week=parse_days(publish_days),
            time_start=_normalize_time_value(time_start),
            time_end=_normalize_time_value(time_end),
        )

    @property
    def is_unrestricted(self) -> bool:
        return not self.days_of_week and self.time_start is None and self.time_end is None


def _normalize_time_value(value) -> Optional[str]:
    if value is None or value == '':
        return None
    if isinstance(value, dt_time):
        return value.strftime('%H:%M')
    return str(value)


def parse_days(raw) -> FrozenSet[int]:
    """
    Parse a day-of-week list (0 = Sunday ... 6 = Saturday).

    Accepts a list or a JSON-encoded list. Anything malformed is logged and
    treated as "no day restriction".
    """
    if raw is None or raw == '':
        return frozenset()

    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            logger.warning(f"Error parsing publish_days {raw!r}, ignoring day restriction")
            return frozenset()

    if not isinstance(raw, (list, tuple, set, frozenset)):
        logger.warning(f"publish_days must be a list, got {raw!r}; ignoring day restriction")
        return frozenset()

    days = set()
    for value in raw:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 6:
            logger.warning(f"Invalid day {value!r} in publish_days {raw!r}; ignoring day restriction")
            return frozenset()
        days.add(value)
    return frozenset(days)


def parse_time_to_minutes(time_str: Optional[str]) -> Optional[int]:
    """
    Convert "HH:MM" or "HH:MM:SS" to minutes since midnight.

    Returns None for a missing or unparseable value; unparseable values are
    logged so a bad bound never breaks evaluation of other items.
    """
    if time_str is None:
        return None

    parts = str(time_str).strip().split(':')
    try:
        if len(parts) not in (2, 3):
            raise ValueError('expected HH:MM or HH:MM:SS')
        hours = int(parts[0])
        minutes = int(parts[1])
        if len(parts) == 3:
            int(parts[2])
        if not (0 <= hours <= 23 and 0 <= minutes <= 59):
            raise ValueError('out of range')
    except ValueError as e:
        logger.warning(f"Malformed schedule time {time_str!r} ({e}); treating bound as absent")
        return None

    return hours * 60 + minutes


def is_visible(schedule: Optional[ScheduleWindow], now: Optional[datetime] = None) -> bool:
    """
    Check whether `schedule` allows showing an item at `now`.

    Args:
        schedule: The item's window, or None for "always"
        now: Instant to evaluate (defaults to the current time)

    Returns:
        True if the item is inside its window
    """
    if schedule is None or schedule.is_unrestricted:
        return True

    local = to_local(now)

    # Day restriction short-circuits the time check
    if schedule.days_of_week and js_weekday(local) not in schedule.days_of_week:
        return False

    start_minutes = parse_time_to_minutes(schedule.time_start)
    end_minutes = parse_time_to_minutes(schedule.time_end)

    if start_minutes is None and end_minutes is None:
        return True

    if start_minutes is None:
        start_minutes = DAY_START_MINUTES
    if end_minutes is None:
        end_minutes = DAY_END_MINUTES

    current_minutes = local.hour * 60 + local.minute

    if start_minutes > end_minutes:
        # Overnight: visible after the start OR before the end
        return current_minutes >= start_minutes or current_minutes < end_minutes

    return start_minutes <= current_minutes < end_minutes


def format_time_for_display(time_str: Optional[str]) -> str:
    """
    Format a 24-hour "HH:MM" string as 12-hour time, e.g. "2:30 PM".

    Returns "--:--" for an empty or unparseable value.
    """
    minutes = parse_time_to_minutes(_normalize_time_value(time_str))
    if minutes is None:
        return '--:--'

    hours, mins = divmod(minutes, 60)
    ampm = 'PM' if hours >= 12 else 'AM'
    hours = hours % 12 or 12
    return f"{hours}:{mins:02d} {ampm}"


def get_day_names(day_numbers: Iterable[int]) -> List[str]:
    """Map day numbers (0 = Sunday) to names, 'Unknown' for anything else."""
    names = []
    for num in day_numbers:
        if isinstance(num, int) and 0 <= num <= 6:
            names.append(DAY_NAMES[num])
        else:
            names.append('Unknown')
    return names


def describe_schedule(schedule: Optional[ScheduleWindow]) -> str:
    """Human-readable summary used by the admin, e.g. "Mon, Wed 9:00 AM-5:00 PM"."""
    if schedule is None or schedule.is_unrestricted:
        return 'Always'

    parts = []
    if schedule.days_of_week:
        parts.append(', '.join(name[:3] for name in get_day_names(sorted(schedule.days_of_week))))
    else:
        parts.append('Every day')

    if schedule.time_start is not None or schedule.time_end is not None:
        start = format_time_for_display(schedule.time_start) if schedule.time_start else '12:00 AM'
        end = format_time_for_display(schedule.time_end) if schedule.time_end else '11:59 PM'
        parts.append(f"{start}-{end}")

    return ' '.join(parts)
