"""
JSON views for the spa audio playlist.
"""
from django.contrib.auth.decorators import login_required
from django.core.exceptions import BadRequest
from django.http import JsonResponse
from django.views.decorators.http import require_GET, require_POST

from slides_app.exceptions import InvalidOrdering, ReorderFailed
from slides_app.utils import json_body, parse_at
from spa_app import services


def track_summary(track) -> dict:
    return {
        'id': track.id,
        'title': track.title,
        'audio_url': track.audio_url,
        'display_order': track.display_order,
        'is_random': track.is_random,
    }


@require_GET
def list_tracks(request):
    """Tracks playable now (or at ?at=), in display order."""
    try:
        now = parse_at(request)
    except BadRequest as e:
        return JsonResponse({'error': str(e)}, status=400)

    tracks = services.list_visible_tracks(now=now)
    return JsonResponse({'success': True, 'tracks': [track_summary(track) for track in tracks]})


@require_GET
def active_track(request):
    """The currently active spa track based on publish and schedule rules."""
    try:
        now = parse_at(request)
    except BadRequest as e:
        return JsonResponse({'error': str(e)}, status=400)

    track = services.get_active_track(now=now)
    if track is None:
        return JsonResponse({'success': True, 'track': None, 'message': 'No spa tracks available'})
    return JsonResponse({'success': True, 'track': track_summary(track)})


@login_required
@require_POST
def reorder_tracks(request):
    """Body: {"track_ids": [...]}."""
    try:
        body = json_body(request)
        track_ids = body.get('track_ids')
        updated = services.reorder_tracks(track_ids)
    except (BadRequest, InvalidOrdering) as e:
        return JsonResponse({'error': str(e)}, status=400)
    except ReorderFailed as e:
        return JsonResponse({'error': e.message}, status=500)

    return JsonResponse({
        'success': True,
        'message': 'Tracks reordered successfully',
        'track_ids': track_ids,
        'updated_count': updated,
    })
