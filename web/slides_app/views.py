"""
JSON views for slide rows.
"""
from django.contrib.auth.decorators import login_required
from django.core.exceptions import BadRequest
from django.http import JsonResponse
from django.views.decorators.http import require_GET, require_POST

from slides_app import services
from slides_app.exceptions import InvalidOrdering, NotFoundError, ReorderFailed
from slides_app.utils import isoformat, json_body, parse_at


def slide_summary(slide) -> dict:
    return {
        'id': slide.id,
        'row_id': slide.slide_row_id,
        'title': slide.title,
        'subtitle': slide.subtitle,
        'body_content': slide.body_content,
        'audio_url': slide.audio_url,
        'image_url': slide.image_url,
        'display_order': slide.display_order,
        'is_published': slide.is_published,
        'is_random': slide.is_random,
        'temp_unpublish_until': isoformat(slide.temp_unpublish_until),
    }


def row_summary(row) -> dict:
    return {
        'id': row.id,
        'title': row.title,
        'description': row.description,
        'row_type': row.row_type,
        'display_order': row.display_order,
        'rotation_enabled': row.rotation_enabled,
        'rotation_count': row.rotation_count,
        'rotation_interval': row.rotation_interval,
    }


@require_GET
def list_rows(request):
    """Published slide rows in display order."""
    rows = services.list_published_rows()
    return JsonResponse({'success': True, 'rows': [row_summary(row) for row in rows]})


@require_GET
def visible_slides(request, row_id):
    """Slides to display in a row now (or at ?at=)."""
    try:
        now = parse_at(request)
        slides = services.list_visible_slides(row_id, now=now)
    except BadRequest as e:
        return JsonResponse({'error': str(e)}, status=400)
    except NotFoundError as e:
        return JsonResponse({'error': e.message}, status=404)

    return JsonResponse({
        'success': True,
        'row_id': row_id,
        'count': len(slides),
        'slides': [slide_summary(slide) for slide in slides],
    })


@require_GET
def active_slide(request, row_id):
    """The slide a playlist row should play now."""
    try:
        now = parse_at(request)
        slide = services.pick_active_slide(row_id, now=now)
    except BadRequest as e:
        return JsonResponse({'error': str(e)}, status=400)
    except NotFoundError as e:
        return JsonResponse({'error': e.message}, status=404)

    if slide is None:
        return JsonResponse({'success': True, 'slide': None, 'message': 'No slides available'})
    return JsonResponse({'success': True, 'slide': slide_summary(slide)})


@login_required
@require_POST
def temp_unpublish_slide(request, row_id, slide_id):
    """Temporarily unpublish a slide until the next 1am."""
    try:
        slide, until = services.snooze_slide(row_id, slide_id)
    except NotFoundError as e:
        return JsonResponse({'error': e.message}, status=404)

    return JsonResponse({
        'success': True,
        'message': 'Slide temporarily unpublished until 1am',
        'slide': slide_summary(slide),
        'unpublish_until': until.isoformat(),
    })


@login_required
@require_POST
def bulk_republish_temp(request, row_id):
    """Clear temporary unpublish for every slide in a row."""
    try:
        result = services.republish_row(row_id)
    except NotFoundError as e:
        return JsonResponse({'error': e.message}, status=404)

    return JsonResponse({
        'success': True,
        'message': f"Republished {result.count} slide(s)",
        'count': result.count,
        'slide_ids': result.slide_ids,
    })


@login_required
@require_POST
def reorder_slides(request, row_id):
    """Body: {"slide_ids": [...]}. Reorder slides within a row."""
    try:
        body = json_body(request)
        slide_ids = body.get('slide_ids')
        updated = services.reorder_slides(row_id, slide_ids)
    except NotFoundError as e:
        return JsonResponse({'error': e.message}, status=404)
    except (BadRequest, InvalidOrdering) as e:
        return JsonResponse({'error': str(e)}, status=400)
    except ReorderFailed as e:
        return JsonResponse({'error': e.message}, status=500)

    return JsonResponse({
        'success': True,
        'message': 'Slides reordered successfully',
        'slide_ids': slide_ids,
        'updated_count': updated,
    })


@login_required
@require_POST
def reorder_rows(request):
    """Body: {"row_ids": [...]}. Reorder the slide rows."""
    try:
        body = json_body(request)
        row_ids = body.get('row_ids')
        updated = services.reorder_rows(row_ids)
    except (BadRequest, InvalidOrdering) as e:
        return JsonResponse({'error': str(e)}, status=400)
    except ReorderFailed as e:
        return JsonResponse({'error': e.message}, status=500)

    return JsonResponse({
        'success': True,
        'message': 'Rows reordered successfully',
        'row_ids': row_ids,
        'updated_count': updated,
    })


@login_required
@require_POST
def bulk_publish(request):
    """Body: {"slide_ids": [...], "is_published": bool}."""
    try:
        body = json_body(request)
        is_published = body.get('is_published')
        count = services.bulk_update_publish_status(body.get('slide_ids'), is_published)
    except (BadRequest, ValueError) as e:
        return JsonResponse({'error': str(e)}, status=400)

    return JsonResponse({
        'success': True,
        'message': f"Successfully {'published' if is_published else 'unpublished'} {count} slide(s)",
        'updated_count': count,
    })
