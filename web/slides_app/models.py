"""
Models for slide rows and their slides.
"""
import logging
from django.core.exceptions import ValidationError
from django.db import models

from slides_app.materializer import ContentItem, RowConfig
from slides_app.randomizer import ROTATION_INTERVALS
from slides_app.schedule_filter import ScheduleWindow, parse_days, parse_time_to_minutes

logger = logging.getLogger(__name__)


class ScheduledContent(models.Model):
    """Publish, ordering and schedule fields shared by slides and tracks."""

    is_published = models.BooleanField(default=True)
    display_order = models.IntegerField(default=0, db_index=True)

    # Scheduling (local time)
    publish_time_start = models.CharField(max_length=8, null=True, blank=True, help_text="HH:MM, start of daily window")
    publish_time_end = models.CharField(max_length=8, null=True, blank=True, help_text="HH:MM, end of daily window (exclusive)")
    publish_days = models.JSONField(null=True, blank=True, help_text="Day numbers 0-6 (0 = Sunday); empty means every day")

    # Temporary unpublish
    temp_unpublish_until = models.DateTimeField(null=True, blank=True, help_text="Hidden until this instant")

    # Metadata
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ['display_order', 'created_at', 'id']

    def schedule_window(self) -> ScheduleWindow:
        return ScheduleWindow.from_fields(self.publish_days, self.publish_time_start, self.publish_time_end)

    def to_content_item(self) -> ContentItem:
        """Immutable snapshot consumed by the materializer."""
        return ContentItem(
            id=self.pk,
            display_order=self.display_order,
            is_published=self.is_published,
            temp_unpublish_until=self.temp_unpublish_until,
            schedule=self.schedule_window(),
            is_random=getattr(self, 'is_random', False),
        )

    def clean(self):
        super().clean()
        errors = {}
        for field in ('publish_time_start', 'publish_time_end'):
            value = getattr(self, field)
            if value and parse_time_to_minutes(value) is None:
                errors[field] = "Use HH:MM (24-hour)."
        if self.publish_days not in (None, '', []) and not parse_days(self.publish_days):
            errors['publish_days'] = "Use a list of day numbers 0-6."
        if errors:
            raise ValidationError(errors)


class SlideRow(models.Model):
    """An ordered row of slides sharing display and rotation settings."""

    ROW_TYPE_CHOICES = [
        ('ROUTINE', 'Routine'),
        ('COURSE', 'Course'),
        ('TEACHING', 'Teaching'),
        ('CUSTOM', 'Custom'),
        ('QUICKSLIDE', 'Quick Slide'),
    ]

    ROTATION_INTERVAL_CHOICES = [(value, value.title()) for value in ROTATION_INTERVALS]

    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    row_type = models.CharField(max_length=20, choices=ROW_TYPE_CHOICES, default='CUSTOM')
    is_published = models.BooleanField(default=False)
    display_order = models.IntegerField(default=0, db_index=True)

    # Rotation
    rotation_enabled = models.BooleanField(default=False, help_text="Show a rotating subset of slides")
    rotation_count = models.IntegerField(null=True, blank=True, help_text="Slides shown per rotation window")
    rotation_interval = models.CharField(max_length=10, choices=ROTATION_INTERVAL_CHOICES, null=True, blank=True)

    # Metadata
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['display_order', 'created_at', 'id']

    def clean(self):
        super().clean()
        if self.rotation_enabled:
            errors = {}
            if self.rotation_count is None or self.rotation_count < 1:
                errors['rotation_count'] = "Rotation needs a count of at least 1."
            if not self.rotation_interval:
                errors['rotation_interval'] = "Rotation needs an interval."
            if errors:
                raise ValidationError(errors)

    def rotation_config(self) -> RowConfig:
        """
        Snapshot of this row's rotation settings.

        Incomplete rotation settings in stored data degrade to manual order
        instead of breaking rendering.
        """
        enabled = self.rotation_enabled
        if enabled and (self.rotation_count is None or not self.rotation_interval):
            logger.warning(
                f"Row {self.pk}: rotation enabled without count/interval "
                f"(count={self.rotation_count}, interval={self.rotation_interval}); rotation disabled"
            )
            enabled = False

        return RowConfig(
            id=self.pk,
            display_order=self.display_order,
            rotation_enabled=enabled,
            rotation_count=self.rotation_count,
            rotation_interval=self.rotation_interval,
        )

    def __str__(self):
        return f"{self.title} ({self.get_row_type_display()})"


class Slide(ScheduledContent):
    """A single slide within a row."""

    slide_row = models.ForeignKey(SlideRow, on_delete=models.CASCADE, related_name='slides')

    title = models.CharField(max_length=300, blank=True)
    subtitle = models.CharField(max_length=300, blank=True)
    body_content = models.TextField(blank=True)
    audio_url = models.CharField(max_length=500, blank=True)
    image_url = models.CharField(max_length=500, blank=True)

    is_random = models.BooleanField(default=False, help_text="Eligible for random pick when played as a playlist")

    class Meta(ScheduledContent.Meta):
        indexes = [
            models.Index(fields=['slide_row', 'display_order'], name='slide_row_order_idx'),
        ]

    def __str__(self):
        return f"{self.title or 'Untitled'} ({self.slide_row.title})"
