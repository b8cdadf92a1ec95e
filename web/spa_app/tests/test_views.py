"""
Tests for spa_app views.
"""
import json
import pytest
from django.test import Client
from spa_app.models import SpaTrack


@pytest.mark.django_db
class TestActiveTrack:
    """Tests for active_track view."""

    def test_active_track(self, chicago, make_track):
        make_track('Off', is_published=False)
        track = make_track('Rain')

        response = Client().get('/spa/tracks/active/', {'at': '2025-01-08T14:00:00'})

        assert response.status_code == 200
        data = response.json()
        assert data['success'] is True
        assert data['track']['id'] == track.pk
        assert data['track']['audio_url'] == '/media/spa/rain.mp3'

    def test_no_tracks(self):
        response = Client().get('/spa/tracks/active/')

        assert response.status_code == 200
        assert response.json()['track'] is None
        assert response.json()['message'] == 'No spa tracks available'

    def test_invalid_at(self):
        assert Client().get('/spa/tracks/active/', {'at': 'soon'}).status_code == 400


@pytest.mark.django_db
class TestListTracks:
    """Tests for list_tracks view."""

    def test_lists_visible(self, chicago, make_track):
        make_track('Morning', publish_time_start='06:00', publish_time_end='09:00')
        make_track('Always')

        response = Client().get('/spa/tracks/', {'at': '2025-01-08T12:00:00'})

        assert response.status_code == 200
        assert [t['title'] for t in response.json()['tracks']] == ['Always']


@pytest.mark.django_db
class TestReorderTracksView:
    """Tests for reorder_tracks view."""

    def test_requires_authentication(self, make_track):
        a = make_track('A')

        response = Client().post('/spa/tracks/reorder/', data=json.dumps({'track_ids': [a.pk]}),
                                 content_type='application/json')

        assert response.status_code == 302

    def test_reorders(self, user, make_track):
        a, b = make_track('A'), make_track('B')
        client = Client()
        client.force_login(user)

        response = client.post('/spa/tracks/reorder/', data=json.dumps({'track_ids': [b.pk, a.pk]}),
                               content_type='application/json')

        assert response.status_code == 200
        assert response.json()['updated_count'] == 2
        assert list(SpaTrack.objects.values_list('title', flat=True)) == ['B', 'A']

    def test_empty_list(self, user, make_track):
        make_track('A')
        client = Client()
        client.force_login(user)

        response = client.post('/spa/tracks/reorder/', data=json.dumps({'track_ids': []}),
                               content_type='application/json')

        assert response.status_code == 400
