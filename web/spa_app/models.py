"""
Models for the spa audio playlist.
"""
from django.db import models

from slides_app.models import ScheduledContent


class SpaTrack(ScheduledContent):
    """An audio track in the spa playlist."""

    title = models.CharField(max_length=300)
    audio_url = models.CharField(max_length=500)
    is_random = models.BooleanField(default=False, help_text="Include in the random pool when choosing the active track")

    class Meta(ScheduledContent.Meta):
        pass

    def __str__(self):
        return self.title
