"""
Request parsing helpers shared by the slide and spa views.
"""
import json
from datetime import datetime
from typing import Optional

from django.core.exceptions import BadRequest
from django.utils import timezone
from django.utils.dateparse import parse_datetime


def parse_at(request) -> Optional[datetime]:
    """
    Optional ?at=<ISO datetime> override for the render instant.

    Naive values are taken as local time.
    """
    raw = request.GET.get('at')
    if not raw:
        return None
    try:
        value = parse_datetime(raw)
    except ValueError:
        value = None
    if value is None:
        raise BadRequest(f"Invalid 'at' timestamp: {raw}")
    if timezone.is_naive(value):
        value = timezone.make_aware(value)
    return value


def json_body(request) -> dict:
    try:
        body = json.loads(request.body or b'{}')
    except ValueError:
        raise BadRequest("Request body must be valid JSON")
    if not isinstance(body, dict):
        raise BadRequest("Request body must be a JSON object")
    return body


def isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None
