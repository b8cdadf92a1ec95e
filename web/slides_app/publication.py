"""
Temporary unpublish ("snooze") policy.

A snoozed item stays hidden until its `temp_unpublish_until` instant. The
stored timestamp is never swept in place by the render path: expiry is
decided when the item is read, so a stale value simply stops mattering.
"""
from datetime import datetime, time as dt_time, timedelta
from typing import Optional

from slides_app.clock import to_local, to_utc, local_instant

# Snoozed items come back at the next 1:00 AM local time
REPUBLISH_AT = dt_time(1, 0)


def is_snoozed(temp_unpublish_until: Optional[datetime], now: datetime) -> bool:
    """True while `now` is strictly before the snooze expiry, compared as instants."""
    if temp_unpublish_until is None:
        return False
    return to_utc(now) < to_utc(temp_unpublish_until)


def effective_publish_state(is_published: bool, temp_unpublish_until: Optional[datetime], now: datetime) -> bool:
    """
    Whether an item counts as published at `now`.

    Args:
        is_published: Owner-controlled publish flag
        temp_unpublish_until: Optional snooze expiry
        now: Instant to evaluate

    Returns:
        True if published and not currently snoozed
    """
    return bool(is_published) and not is_snoozed(temp_unpublish_until, now)


def next_republish_instant(now: Optional[datetime] = None) -> datetime:
    """
    When a snooze started at `now` should end.

    Today's 1:00 AM (local) if `now` is before it, otherwise 1:00 AM tomorrow.
    """
    local = to_local(now)
    candidate = local_instant(local.date(), REPUBLISH_AT, local.tzinfo)
    if local >= candidate:
        candidate = local_instant(local.date() + timedelta(days=1), REPUBLISH_AT, local.tzinfo)
    return candidate
