"""
Deterministic rotation for slide rows.

Rows with rotation enabled show a seeded, shuffled subset of their slides.
The seed is the start of the current rotation window (hour, day or week in
local time), so every render inside the same window sees the same subset in
the same order.

The PRNG is Mulberry32. Its constants and the exact Fisher-Yates loop are
part of the contract: other clients (the offline player) compute the same
rotations from the same seeds.
"""
import logging
from datetime import datetime, time as dt_time, timedelta
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

from slides_app.clock import to_local, local_instant, epoch_millis, js_weekday

logger = logging.getLogger(__name__)

T = TypeVar('T')

MASK_32 = 0xFFFFFFFF
MULBERRY_INCREMENT = 0x6D2B79F5
TWO_POW_32 = 4294967296

INTERVAL_HOURLY = 'hourly'
INTERVAL_DAILY = 'daily'
INTERVAL_WEEKLY = 'weekly'
ROTATION_INTERVALS = (INTERVAL_HOURLY, INTERVAL_DAILY, INTERVAL_WEEKLY)


def _imul(a: int, b: int) -> int:
    return (a * b) & MASK_32


def mulberry32_next(state: int) -> Tuple[float, int]:
    """
    Advance the generator one step.

    Args:
        state: Current generator state (any integer, only the low 32 bits matter)

    Returns:
        (value in [0, 1), new state)
    """
    state = (state + MULBERRY_INCREMENT) & MASK_32
    t = state
    t = _imul(t ^ (t >> 15), t | 1)
    t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK_32
    return ((t ^ (t >> 14)) & MASK_32) / TWO_POW_32, state


def seeded_random(seed: int) -> Callable[[], float]:
    """Return a zero-argument generator of floats in [0, 1) seeded with `seed`."""
    state = seed & MASK_32

    def random() -> float:
        nonlocal state
        value, state = mulberry32_next(state)
        return value

    return random


def shuffle_with_seed(items: Sequence[T], seed: int) -> List[T]:
    """Fisher-Yates shuffle of a copy of `items`, driven by Mulberry32."""
    shuffled = list(items)
    random = seeded_random(seed)

    for i in range(len(shuffled) - 1, 0, -1):
        j = int(random() * (i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]

    return shuffled


def select_rotation(items: Sequence[T], count: int, seed: int) -> List[T]:
    """
    Pick `count` items in a deterministic order for `seed`.

    Same items + count + seed always give the same result. When `count`
    covers the whole pool every item is returned, shuffled.
    """
    if not items:
        return []
    if count <= 0:
        return []

    shuffled = shuffle_with_seed(items, seed)
    if count >= len(shuffled):
        return shuffled
    return shuffled[:count]


def current_seed(interval: Optional[str], now: Optional[datetime] = None) -> int:
    """
    Seed for the rotation window containing `now`.

    Returns the epoch milliseconds of the window start in local time:
    the top of the hour, local midnight, or midnight of the most recent
    Sunday. Unknown intervals behave like 'daily'.
    """
    local = to_local(now)

    if interval == INTERVAL_HOURLY:
        start = local.replace(minute=0, second=0, microsecond=0)
    elif interval == INTERVAL_WEEKLY:
        sunday = local.date() - timedelta(days=js_weekday(local))
        start = local_instant(sunday, dt_time.min, local.tzinfo)
    else:
        if interval != INTERVAL_DAILY:
            logger.warning(f"Unknown rotation interval {interval!r}, falling back to daily")
        start = local_instant(local.date(), dt_time.min, local.tzinfo)

    return epoch_millis(start)
