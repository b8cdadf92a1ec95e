"""
Turn a row's stored items into the list that should be shown right now.

Pipeline: publish flag + snooze -> schedule window -> seeded rotation (when
the row has it) or manual display order. Everything here works on immutable
snapshots and an explicit `now`; nothing touches the database.
"""
import logging
import random as _random
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional, Sequence

from slides_app.publication import effective_publish_state
from slides_app.randomizer import current_seed, select_rotation
from slides_app.schedule_filter import ScheduleWindow, is_visible

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentItem:
    """Snapshot of one slide or track as far as visibility is concerned."""
    id: Any
    display_order: int = 0
    is_published: bool = True
    temp_unpublish_until: Optional[datetime] = None
    schedule: Optional[ScheduleWindow] = None
    is_random: bool = False


@dataclass(frozen=True)
class RowConfig:
    """Snapshot of a row's ordering and rotation settings."""
    id: Any
    display_order: int = 0
    rotation_enabled: bool = False
    rotation_count: Optional[int] = None
    rotation_interval: Optional[str] = None

    def __post_init__(self):
        if self.rotation_enabled and (self.rotation_count is None or not self.rotation_interval):
            raise ValueError(
                f"Row {self.id}: rotation_enabled requires rotation_count and rotation_interval"
            )


def visible_pool(items: Sequence[ContentItem], now: datetime) -> List[ContentItem]:
    """Items that are effectively published and inside their window at `now`."""
    published = [
        item for item in items
        if effective_publish_state(item.is_published, item.temp_unpublish_until, now)
    ]
    return [item for item in published if is_visible(item.schedule, now)]


def manual_order(items: Sequence[ContentItem]) -> List[ContentItem]:
    """Sort by display_order; equal orders keep their incoming (insertion) order."""
    return sorted(items, key=lambda item: item.display_order)


def _rotation_active(row: RowConfig) -> bool:
    if not row.rotation_enabled or row.rotation_count is None or not row.rotation_interval:
        return False
    if row.rotation_count < 1:
        logger.warning(
            f"Row {row.id}: invalid rotation_count {row.rotation_count}, showing manual order instead"
        )
        return False
    return True


def materialize(row: RowConfig, items: Sequence[ContentItem], now: datetime) -> List[ContentItem]:
    """
    Visible, ordered items for one row at `now`.

    Args:
        row: Row settings
        items: The row's items, in insertion order
        now: Instant to render for

    Returns:
        The items to display, in display order
    """
    pool = visible_pool(items, now)

    if _rotation_active(row):
        seed = current_seed(row.rotation_interval, now)
        rotated = select_rotation(pool, row.rotation_count, seed)
        logger.debug(
            f"Row {row.id}: rotated {len(pool)} items to {len(rotated)} "
            f"(count: {row.rotation_count}, interval: {row.rotation_interval}, seed: {seed})"
        )
        return rotated

    return manual_order(pool)


def pick_active(
    items: Sequence[ContentItem],
    now: datetime,
    rng: Optional[_random.Random] = None,
) -> Optional[ContentItem]:
    """
    Choose the single item a playlist should play now.

    If any visible item is flagged random, one of those is picked uniformly
    (not seeded); otherwise the first visible item in display order.
    """
    ordered = manual_order(visible_pool(items, now))
    if not ordered:
        return None

    random_pool = [item for item in ordered if item.is_random]
    if random_pool:
        return (rng or _random).choice(random_pool)
    return ordered[0]
