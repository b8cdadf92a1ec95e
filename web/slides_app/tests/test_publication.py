"""
Tests for the temporary unpublish policy.
"""
from datetime import datetime, timedelta, timezone as dt_timezone
from slides_app.publication import effective_publish_state, is_snoozed, next_republish_instant
from slides_app.tests.conftest import local


class TestIsSnoozed:
    """Tests for is_snoozed."""

    def test_no_snooze(self, chicago):
        assert not is_snoozed(None, local(2025, 1, 8, 12, 0))

    def test_future_expiry(self, chicago):
        now = local(2025, 1, 8, 12, 0)
        assert is_snoozed(now + timedelta(minutes=1), now)

    def test_expiry_instant_is_not_snoozed(self, chicago):
        """Test the item is back exactly at its expiry."""
        now = local(2025, 1, 9, 1, 0)
        assert not is_snoozed(now, now)

    def test_past_expiry(self, chicago):
        now = local(2025, 1, 9, 12, 0)
        assert not is_snoozed(local(2025, 1, 9, 1, 0), now)


class TestEffectivePublishState:
    """Tests for effective_publish_state."""

    def test_published_without_snooze(self, chicago):
        assert effective_publish_state(True, None, local(2025, 1, 8, 12, 0))

    def test_unpublished_stays_hidden(self, chicago):
        """Test an expired snooze never publishes an unpublished item."""
        assert not effective_publish_state(False, None, local(2025, 1, 8, 12, 0))
        assert not effective_publish_state(False, local(2025, 1, 1, 1, 0), local(2025, 1, 8, 12, 0))

    def test_active_snooze_hides(self, chicago):
        assert not effective_publish_state(True, local(2025, 1, 9, 1, 0), local(2025, 1, 8, 12, 0))

    def test_expired_snooze_is_ignored(self, chicago):
        assert effective_publish_state(True, local(2025, 1, 9, 1, 0), local(2025, 1, 9, 1, 1))


class TestNextRepublishInstant:
    """Tests for next_republish_instant."""

    def test_afternoon_goes_to_tomorrow(self, chicago):
        assert next_republish_instant(local(2025, 1, 8, 14, 0)) == local(2025, 1, 9, 1, 0)

    def test_before_1am_stays_today(self, chicago):
        assert next_republish_instant(local(2025, 1, 8, 0, 30)) == local(2025, 1, 8, 1, 0)

    def test_exactly_1am_goes_to_tomorrow(self, chicago):
        assert next_republish_instant(local(2025, 1, 8, 1, 0)) == local(2025, 1, 9, 1, 0)

    def test_just_before_midnight(self, chicago):
        assert next_republish_instant(local(2025, 1, 8, 23, 59)) == local(2025, 1, 9, 1, 0)

    def test_result_is_local_1am(self, chicago):
        result = next_republish_instant(local(2025, 1, 8, 14, 0))
        assert (result.hour, result.minute) == (1, 0)
        assert result.utcoffset() == timedelta(hours=-6)

    def test_defaults_to_now(self, chicago):
        result = next_republish_instant()
        assert result > local(2000, 1, 1)


class TestSnoozeAcrossDstOverlap:
    """2025-11-02 01:00-02:00 happens twice in America/Chicago (CDT, then CST)."""

    def test_expiry_in_first_pass_of_repeated_hour(self, chicago):
        """Test 01:15 CST is after a 01:45 CDT expiry even though the wall clock reads earlier."""
        until = datetime(2025, 11, 2, 6, 45, tzinfo=dt_timezone.utc)
        now = datetime(2025, 11, 2, 7, 15, tzinfo=dt_timezone.utc)

        assert not is_snoozed(until, now)
        assert effective_publish_state(True, until, now)

    def test_same_zone_values_compare_as_instants(self, chicago):
        """Test two Chicago wall-clock values sharing a tzinfo still compare by instant."""
        until = local(2025, 11, 2, 1, 45)
        now = local(2025, 11, 2, 1, 15).replace(fold=1)

        assert not is_snoozed(until, now)

    def test_still_snoozed_before_expiry(self, chicago):
        until = local(2025, 11, 2, 1, 15).replace(fold=1)
        now = local(2025, 11, 2, 1, 45)

        assert is_snoozed(until, now)

    def test_naive_values_are_local(self, chicago):
        assert is_snoozed(datetime(2025, 1, 9, 1, 0), local(2025, 1, 8, 14, 0))
        assert not is_snoozed(local(2025, 1, 9, 1, 0), datetime(2025, 1, 9, 1, 0))
