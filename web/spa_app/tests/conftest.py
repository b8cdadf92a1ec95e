"""
Pytest fixtures for spa_app tests.
"""
import pytest
from datetime import datetime
from zoneinfo import ZoneInfo
from django.contrib.auth.models import User
from django.utils import timezone
from spa_app.models import SpaTrack

CHICAGO = ZoneInfo('America/Chicago')


def local(*args):
    return datetime(*args, tzinfo=CHICAGO)


@pytest.fixture
def chicago():
    with timezone.override(CHICAGO):
        yield CHICAGO


@pytest.fixture
def user(db):
    return User.objects.create_user(username='spa-editor', password='testpass123', is_staff=True)


@pytest.fixture
def make_track(db):
    """Factory for spa tracks; display_order defaults to creation order."""
    counter = {'n': 0}

    def _make(title, **fields):
        fields.setdefault('display_order', counter['n'])
        fields.setdefault('audio_url', f"/media/spa/{title.lower().replace(' ', '-')}.mp3")
        counter['n'] += 1
        return SpaTrack.objects.create(title=title, **fields)

    return _make
