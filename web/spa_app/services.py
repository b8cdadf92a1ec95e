"""
Services for the spa audio playlist.
"""
import logging
import random
from datetime import datetime
from typing import List, Optional, Sequence

from django.utils import timezone

from slides_app.materializer import manual_order, pick_active, visible_pool
from slides_app.services import persist_display_order
from spa_app.models import SpaTrack

logger = logging.getLogger(__name__)


def fetch_tracks() -> List[SpaTrack]:
    return list(SpaTrack.objects.order_by('display_order', 'created_at', 'id'))


def list_visible_tracks(now: Optional[datetime] = None) -> List[SpaTrack]:
    """Tracks playable at `now`, in display order."""
    if now is None:
        now = timezone.now()

    tracks = fetch_tracks()
    by_id = {track.pk: track for track in tracks}
    items = manual_order(visible_pool([track.to_content_item() for track in tracks], now))
    return [by_id[item.id] for item in items]


def get_active_track(now: Optional[datetime] = None, rng: Optional[random.Random] = None) -> Optional[SpaTrack]:
    """
    The track the spa player should play now.

    Picks at random among visible tracks flagged `is_random`, otherwise the
    first visible track by display order. None when nothing is playable.
    """
    if now is None:
        now = timezone.now()

    tracks = fetch_tracks()
    item = pick_active([track.to_content_item() for track in tracks], now, rng=rng)
    if item is None:
        logger.info("No spa tracks available")
        return None
    return next(track for track in tracks if track.pk == item.id)


def reorder_tracks(track_ids: Sequence) -> int:
    """Reorder the spa playlist."""
    return persist_display_order(SpaTrack.objects.all(), track_ids, label='spa tracks')
