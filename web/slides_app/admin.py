from django.contrib import admin, messages

from slides_app import services
from slides_app.models import Slide, SlideRow
from slides_app.schedule_filter import describe_schedule


class SlideInline(admin.TabularInline):
    model = Slide
    extra = 0
    fields = ['title', 'display_order', 'is_published', 'is_random', 'temp_unpublish_until']
    ordering = ['display_order', 'created_at']


@admin.register(SlideRow)
class SlideRowAdmin(admin.ModelAdmin):
    """Admin interface for SlideRow."""
    list_display = ['title', 'row_type', 'display_order', 'is_published',
                    'rotation_enabled', 'rotation_count', 'rotation_interval', 'updated_at']
    list_filter = ['row_type', 'is_published', 'rotation_enabled']
    search_fields = ['title', 'description']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['display_order', 'created_at']
    inlines = [SlideInline]
    actions = ['republish_snoozed']

    fieldsets = (
        ('Row', {
            'fields': ('title', 'description', 'row_type', 'is_published', 'display_order')
        }),
        ('Rotation', {
            'fields': ('rotation_enabled', 'rotation_count', 'rotation_interval')
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    @admin.action(description='Republish snoozed slides')
    def republish_snoozed(self, request, queryset):
        total = 0
        for row in queryset:
            total += services.republish_row(row.pk).count
        self.message_user(request, f"Republished {total} slide(s)", messages.SUCCESS)


@admin.register(Slide)
class SlideAdmin(admin.ModelAdmin):
    """Admin interface for Slide."""
    list_display = ['title', 'slide_row', 'display_order', 'is_published', 'is_random',
                    'schedule', 'temp_unpublish_until']
    list_filter = ['is_published', 'is_random', 'slide_row']
    search_fields = ['title', 'subtitle', 'body_content']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['slide_row', 'display_order', 'created_at']
    actions = ['snooze_until_1am', 'publish', 'unpublish']

    fieldsets = (
        ('Content', {
            'fields': ('slide_row', 'title', 'subtitle', 'body_content', 'audio_url', 'image_url')
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

    @admin.action(description='Snooze until next 1 AM')
    def snooze_until_1am(self, request, queryset):
        for slide in queryset:
            services.snooze_slide(slide.slide_row_id, slide.pk)
        self.message_user(request, f"Snoozed {queryset.count()} slide(s)", messages.SUCCESS)

    @admin.action(description='Publish selected slides')
    def publish(self, request, queryset):
        count = services.bulk_update_publish_status(list(queryset.values_list('pk', flat=True)), True)
        self.message_user(request, f"Published {count} slide(s)", messages.SUCCESS)

    @admin.action(description='Unpublish selected slides')
    def unpublish(self, request, queryset):
        count = services.bulk_update_publish_status(list(queryset.values_list('pk', flat=True)), False)
        self.message_user(request, f"Unpublished {count} slide(s)", messages.SUCCESS)
