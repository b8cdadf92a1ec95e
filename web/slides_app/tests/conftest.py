"""
Pytest fixtures for slides_app tests.
"""
import pytest
import logging
from datetime import datetime
from zoneinfo import ZoneInfo
from django.contrib.auth.models import User
from django.utils import timezone
from slides_app.models import Slide, SlideRow

CHICAGO = ZoneInfo('America/Chicago')


def local(*args):
    """Aware datetime in America/Chicago, e.g. local(2025, 1, 8, 14, 37)."""
    return datetime(*args, tzinfo=CHICAGO)


@pytest.fixture
def chicago():
    """Evaluate 'local time' in America/Chicago for the duration of a test."""
    with timezone.override(CHICAGO):
        yield CHICAGO


@pytest.fixture
def user(db):
    """Staff user for administrative endpoints."""
    return User.objects.create_user(
        username='editor',
        email='editor@example.com',
        password='testpass123',
        is_staff=True,
    )


@pytest.fixture
def row(db):
    return SlideRow.objects.create(title='Morning Routine', row_type='ROUTINE', is_published=True)


@pytest.fixture
def make_slide(row):
    """Factory for slides in `row`; display_order defaults to creation order."""
    counter = {'n': 0}

    def _make(title=None, slide_row=None, **fields):
        fields.setdefault('display_order', counter['n'])
        counter['n'] += 1
        return Slide.objects.create(
            slide_row=slide_row or row,
            title=title or f"Slide {counter['n']}",
            **fields
        )

    return _make


@pytest.fixture(autouse=True)
def configure_logging():
    """Make sure slides_app loggers emit at INFO so caplog can see diagnostics."""
    logging.getLogger('slides_app').setLevel(logging.INFO)
