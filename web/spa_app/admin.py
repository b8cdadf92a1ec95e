from django.contrib import admin

from slides_app.schedule_filter import describe_schedule
from spa_app.models import SpaTrack


@admin.register(SpaTrack)
class SpaTrackAdmin(admin.ModelAdmin):
    """Admin interface for SpaTrack."""
    list_display = ['title', 'display_order', 'is_published', 'is_random', 'schedule', 'updated_at']
    list_filter = ['is_published', 'is_random']
    search_fields = ['title']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['display_order', 'created_at']

    fieldsets = (
        ('Track', {
            'fields': ('title', 'audio_url')
        }),
        ('Publishing', {
            'fields': ('is_published', 'display_order', 'is_random', 'temp_unpublish_until')
        }),
        ('Schedule', {
            'fields': ('publish_days', 'publish_time_start', 'publish_time_end')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    @admin.display(description='Schedule')
    def schedule(self, obj):
        return describe_schedule(obj.schedule_window())
