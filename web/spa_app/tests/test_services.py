"""
Tests for spa_app services.
"""
import random
import pytest
from unittest.mock import patch
from django.db import DatabaseError
from slides_app.exceptions import InvalidOrdering, ReorderFailed
from spa_app import services
from spa_app.models import SpaTrack
from spa_app.tests.conftest import local

WEDNESDAY_AFTERNOON = local(2025, 1, 8, 14, 37)


@pytest.mark.django_db
class TestListVisibleTracks:
    """Tests for list_visible_tracks."""

    def test_filters_and_orders(self, chicago, make_track):
        make_track('Waves', display_order=2)
        make_track('Rain', display_order=1)
        make_track('Off', is_published=False)
        make_track('Night', publish_time_start='22:00', publish_time_end='03:00')
        make_track('Snoozed', temp_unpublish_until=local(2025, 1, 9, 1, 0))

        result = services.list_visible_tracks(now=WEDNESDAY_AFTERNOON)

        assert [track.title for track in result] == ['Rain', 'Waves']

    def test_overnight_track_late(self, chicago, make_track):
        make_track('Night', publish_time_start='22:00', publish_time_end='03:00')

        assert [t.title for t in services.list_visible_tracks(now=local(2025, 1, 8, 23, 30))] == ['Night']
        assert [t.title for t in services.list_visible_tracks(now=local(2025, 1, 9, 2, 30))] == ['Night']


@pytest.mark.django_db
class TestGetActiveTrack:
    """Tests for get_active_track."""

    def test_no_tracks(self, chicago):
        assert services.get_active_track(now=WEDNESDAY_AFTERNOON) is None

    def test_first_by_display_order(self, chicago, make_track):
        make_track('Second', display_order=2)
        make_track('First', display_order=1)

        assert services.get_active_track(now=WEDNESDAY_AFTERNOON).title == 'First'

    def test_random_pool_preferred(self, chicago, make_track):
        make_track('Fixed', display_order=0)
        make_track('Random A', is_random=True)
        make_track('Random B', is_random=True)
        make_track('Random Off', is_random=True, is_published=False)

        picked = {
            services.get_active_track(now=WEDNESDAY_AFTERNOON, rng=random.Random(seed)).title
            for seed in range(30)
        }

        assert picked == {'Random A', 'Random B'}

    def test_random_track_outside_schedule_not_picked(self, chicago, make_track):
        make_track('Fixed')
        make_track('Weekend Random', is_random=True, publish_days=[0, 6])

        assert services.get_active_track(now=WEDNESDAY_AFTERNOON).title == 'Fixed'


@pytest.mark.django_db
class TestReorderTracks:
    """Tests for reorder_tracks."""

    def test_reorder(self, make_track):
        a, b, c = make_track('A'), make_track('B'), make_track('C')

        assert services.reorder_tracks([c.pk, a.pk, b.pk]) == 3
        assert list(SpaTrack.objects.values_list('title', flat=True)) == ['C', 'A', 'B']

    def test_rejects_unknown(self, make_track):
        a = make_track('A')

        with pytest.raises(InvalidOrdering):
            services.reorder_tracks([a.pk, 999999])

    def test_store_failure_applies_nothing(self, make_track):
        a, b = make_track('A'), make_track('B')

        with patch.object(SpaTrack.objects, 'bulk_update', side_effect=DatabaseError('locked')):
            with pytest.raises(ReorderFailed):
                services.reorder_tracks([b.pk, a.pk])

        assert list(SpaTrack.objects.values_list('title', flat=True)) == ['A', 'B']
