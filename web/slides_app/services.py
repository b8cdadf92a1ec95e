"""
Services for rendering slide rows and the administrative actions on them.

Render-path functions take a snapshot from the database and hand it to the
pure materializer; mutations (snooze, republish, reorder, bulk publish) each
run in a single transaction.
"""
import logging
import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from django.db import DatabaseError, transaction
from django.db.models import QuerySet
from django.utils import timezone

from slides_app.exceptions import InvalidOrdering, ReorderFailed, RowNotFound, SlideNotFound
from slides_app.materializer import materialize, pick_active
from slides_app.models import Slide, SlideRow
from slides_app.publication import next_republish_instant

logger = logging.getLogger(__name__)


@dataclass
class RepublishResult:
    """Outcome of clearing snoozes in a row."""
    count: int = 0
    slide_ids: List[int] = field(default_factory=list)


def get_row(row_id) -> SlideRow:
    """
    Fetch a slide row.

    Raises:
        RowNotFound: If no row has this id
    """
    try:
        return SlideRow.objects.get(pk=row_id)
    except (SlideRow.DoesNotExist, ValueError, TypeError):
        raise RowNotFound(row_id)


def fetch_slides(row: SlideRow) -> List[Slide]:
    """All slides in a row, in stored display order (insertion order for ties)."""
    return list(row.slides.order_by('display_order', 'created_at', 'id'))


def list_published_rows() -> List[SlideRow]:
    """Published rows in display order."""
    return list(SlideRow.objects.filter(is_published=True).order_by('display_order', 'created_at', 'id'))


def list_visible_slides(row_id, now: Optional[datetime] = None) -> List[Slide]:
    """
    Slides to display in a row at `now`.

    Args:
        row_id: SlideRow primary key
        now: Instant to render for (defaults to the current time)

    Returns:
        Ordered list of Slide instances

    Raises:
        RowNotFound: If the row does not exist
    """
    if now is None:
        now = timezone.now()

    row = get_row(row_id)
    slides = fetch_slides(row)
    by_id = {slide.pk: slide for slide in slides}

    items = materialize(row.rotation_config(), [slide.to_content_item() for slide in slides], now)
    return [by_id[item.id] for item in items]


def pick_active_slide(row_id, now: Optional[datetime] = None, rng: Optional[random.Random] = None) -> Optional[Slide]:
    """
    The single slide a playlist row should play now, or None if nothing is visible.

    Raises:
        RowNotFound: If the row does not exist
    """
    if now is None:
        now = timezone.now()

    row = get_row(row_id)
    slides = fetch_slides(row)
    item = pick_active([slide.to_content_item() for slide in slides], now, rng=rng)
    if item is None:
        return None
    return next(slide for slide in slides if slide.pk == item.id)


def snooze_slide(row_id, slide_id, now: Optional[datetime] = None) -> Tuple[Slide, datetime]:
    """
    Temporarily unpublish a slide until the next 1:00 AM local time.

    Returns:
        (updated slide, instant it comes back)

    Raises:
        SlideNotFound: If the slide does not exist in that row
    """
    until = next_republish_instant(now)

    updated = Slide.objects.filter(pk=slide_id, slide_row_id=row_id).update(
        temp_unpublish_until=until,
        updated_at=timezone.now(),
    )
    if not updated:
        raise SlideNotFound(slide_id, row_id)

    logger.info(f"Slide {slide_id} in row {row_id} temporarily unpublished until {until.isoformat()}")
    return Slide.objects.get(pk=slide_id), until


def republish_row(row_id) -> RepublishResult:
    """
    Clear temporary unpublish on every snoozed slide in a row.

    Calling it when nothing is snoozed is a no-op that reports zero.

    Raises:
        RowNotFound: If the row does not exist
    """
    row = get_row(row_id)

    with transaction.atomic():
        snoozed = row.slides.select_for_update().filter(temp_unpublish_until__isnull=False)
        slide_ids = list(snoozed.order_by('display_order', 'id').values_list('pk', flat=True))
        if slide_ids:
            Slide.objects.filter(pk__in=slide_ids).update(temp_unpublish_until=None, updated_at=timezone.now())

    logger.info(f"Republished {len(slide_ids)} slide(s) in row {row.pk}")
    return RepublishResult(count=len(slide_ids), slide_ids=slide_ids)


def persist_display_order(queryset: QuerySet, ordered_ids: Sequence, label: str = 'collection') -> int:
    """
    Assign display_order = position in `ordered_ids` to members of `queryset`.

    All writes commit together or not at all. Members missing from
    `ordered_ids` keep their current display_order.

    Args:
        queryset: The collection being reordered
        ordered_ids: Member ids in their new order
        label: Name of the collection for log messages

    Returns:
        Number of members updated

    Raises:
        InvalidOrdering: Input is not a non-empty list of distinct member ids
        ReorderFailed: The database rejected the update
    """
    if not isinstance(ordered_ids, (list, tuple)):
        raise InvalidOrdering("Invalid request: ids must be an array")
    if len(ordered_ids) == 0:
        raise InvalidOrdering("Invalid request: ids array cannot be empty")

    keys = [str(ident) for ident in ordered_ids]
    if len(set(keys)) != len(keys):
        raise InvalidOrdering("Invalid request: ids must not repeat")

    model = queryset.model
    try:
        with transaction.atomic():
            members = {str(obj.pk): obj for obj in queryset.select_for_update()}

            unknown = [ident for ident in keys if ident not in members]
            if unknown:
                raise InvalidOrdering(f"Invalid request: {', '.join(unknown)} not in {label}")

            updated = []
            for index, key in enumerate(keys):
                obj = members[key]
                obj.display_order = index
                updated.append(obj)

            model.objects.bulk_update(updated, ['display_order'])
    except DatabaseError as e:
        logger.error(f"Failed to reorder {label}: {e}", exc_info=True)
        raise ReorderFailed(f"Failed to reorder {label}") from e

    omitted = len(members) - len(updated)
    if omitted:
        logger.warning(f"Reordered {label} without {omitted} member(s); they keep their previous display_order")

    logger.info(f"Reordered {len(updated)} member(s) of {label}")
    return len(updated)


def reorder_slides(row_id, slide_ids: Sequence) -> int:
    """Reorder the slides of one row."""
    row = get_row(row_id)
    return persist_display_order(row.slides.all(), slide_ids, label=f"row {row.pk}")


def reorder_rows(row_ids: Sequence) -> int:
    """Reorder the slide rows themselves."""
    return persist_display_order(SlideRow.objects.all(), row_ids, label='slide rows')


def bulk_update_publish_status(slide_ids: Sequence, is_published: bool) -> int:
    """
    Publish or unpublish many slides at once.

    Raises:
        ValueError: If slide_ids is empty or is_published is not a bool
    """
    if not isinstance(slide_ids, (list, tuple)) or len(slide_ids) == 0:
        raise ValueError("slide_ids array is required and must not be empty")
    if not isinstance(is_published, bool):
        raise ValueError("is_published must be a boolean value")

    with transaction.atomic():
        count = Slide.objects.filter(pk__in=slide_ids).update(is_published=is_published, updated_at=timezone.now())

    logger.info(f"{'Published' if is_published else 'Unpublished'} {count} slide(s)")
    return count


def clear_expired_snoozes(now: Optional[datetime] = None) -> int:
    """
    Null out temp_unpublish_until values that have already passed.

    Rendering ignores stale values on its own; this only keeps the stored
    data tidy for the admin.
    """
    from spa_app.models import SpaTrack

    if now is None:
        now = timezone.now()

    cleared = 0
    with transaction.atomic():
        for model in (Slide, SpaTrack):
            cleared += model.objects.filter(temp_unpublish_until__lte=now).update(
                temp_unpublish_until=None,
                updated_at=timezone.now(),
            )

    if cleared:
        logger.info(f"Cleared {cleared} expired temporary unpublish timestamp(s)")
    return cleared
