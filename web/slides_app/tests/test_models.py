"""
Tests for slides_app models.
"""
import logging
import pytest
from django.core.exceptions import ValidationError
from slides_app.models import Slide, SlideRow
from slides_app.schedule_filter import ScheduleWindow


@pytest.mark.django_db
class TestSlideRow:
    """Tests for SlideRow model."""

    def test_row_defaults(self):
        row = SlideRow.objects.create(title='Evening Teaching')

        assert row.row_type == 'CUSTOM'
        assert row.is_published is False
        assert row.display_order == 0
        assert row.rotation_enabled is False
        assert row.rotation_count is None
        assert row.rotation_interval is None

    def test_str(self):
        row = SlideRow.objects.create(title='Breathing', row_type='QUICKSLIDE')
        assert str(row) == 'Breathing (Quick Slide)'

    def test_rows_ordered_by_display_order(self):
        second = SlideRow.objects.create(title='Second', display_order=1)
        first = SlideRow.objects.create(title='First', display_order=0)

        assert list(SlideRow.objects.all()) == [first, second]

    def test_clean_requires_rotation_settings(self):
        row = SlideRow(title='Rotating', rotation_enabled=True, rotation_count=0)

        with pytest.raises(ValidationError) as excinfo:
            row.clean()

        assert 'rotation_count' in excinfo.value.message_dict
        assert 'rotation_interval' in excinfo.value.message_dict

    def test_clean_accepts_complete_rotation(self):
        row = SlideRow(title='Rotating', rotation_enabled=True, rotation_count=3, rotation_interval='weekly')
        row.clean()

    def test_rotation_config(self):
        row = SlideRow.objects.create(
            title='Rotating',
            rotation_enabled=True,
            rotation_count=3,
            rotation_interval='hourly',
        )

        config = row.rotation_config()

        assert config.id == row.pk
        assert config.rotation_enabled is True
        assert config.rotation_count == 3
        assert config.rotation_interval == 'hourly'

    def test_incomplete_rotation_config_degrades(self, caplog):
        """Test stored rows with rotation on but no interval render in manual order."""
        row = SlideRow.objects.create(title='Broken', rotation_enabled=True, rotation_count=3)

        with caplog.at_level(logging.WARNING, logger='slides_app.models'):
            config = row.rotation_config()

        assert config.rotation_enabled is False
        assert 'rotation disabled' in caplog.text


@pytest.mark.django_db
class TestSlide:
    """Tests for Slide model."""

    def test_slide_defaults(self, row):
        slide = Slide.objects.create(slide_row=row, title='Welcome')

        assert slide.is_published is True
        assert slide.is_random is False
        assert slide.display_order == 0
        assert slide.temp_unpublish_until is None
        assert slide.publish_days is None

    def test_str(self, row):
        slide = Slide.objects.create(slide_row=row)
        assert str(slide) == 'Untitled (Morning Routine)'

    def test_related_name(self, row, make_slide):
        first = make_slide('One')
        second = make_slide('Two')

        assert list(row.slides.all()) == [first, second]

    def test_cascade_delete(self, row, make_slide):
        make_slide('One')
        row.delete()
        assert Slide.objects.count() == 0

    def test_schedule_window(self, row):
        slide = Slide.objects.create(
            slide_row=row,
            publish_days=[1, 3],
            publish_time_start='09:00',
            publish_time_end='17:00',
        )
        slide.refresh_from_db()

        assert slide.schedule_window() == ScheduleWindow(days_of_week={1, 3}, time_start='09:00', time_end='17:00')

    def test_schedule_window_tolerates_legacy_json_string(self, row):
        slide = Slide.objects.create(slide_row=row, publish_days='[0, 6]')
        slide.refresh_from_db()

        assert slide.schedule_window().days_of_week == frozenset({0, 6})

    def test_to_content_item(self, row):
        slide = Slide.objects.create(slide_row=row, display_order=4, is_random=True, is_published=False)

        item = slide.to_content_item()

        assert item.id == slide.pk
        assert item.display_order == 4
        assert item.is_random is True
        assert item.is_published is False
        assert item.schedule.is_unrestricted

    def test_clean_rejects_bad_schedule(self, row):
        slide = Slide(slide_row=row, publish_time_start='25:00', publish_time_end='9am', publish_days=[8])

        with pytest.raises(ValidationError) as excinfo:
            slide.clean()

        assert set(excinfo.value.message_dict) == {'publish_time_start', 'publish_time_end', 'publish_days'}

    def test_clean_accepts_valid_schedule(self, row):
        slide = Slide(slide_row=row, publish_time_start='22:00', publish_time_end='03:00', publish_days=[5, 6])
        slide.clean()
