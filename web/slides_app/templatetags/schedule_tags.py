"""
Template filters for displaying slide schedules.
"""
from django import template

from slides_app.schedule_filter import describe_schedule, format_time_for_display, get_day_names, parse_days

register = template.Library()


@register.filter
def display_time(value):
    """
    Format a stored "HH:MM" time as 12-hour time.

    Usage: {{ slide.publish_time_start|display_time }}
    """
    return format_time_for_display(value)


@register.filter
def day_names(value):
    """
    Comma-separated day names for a publish_days value.

    Usage: {{ slide.publish_days|day_names }}
    """
    days = parse_days(value)
    if not days:
        return 'Every day'
    return ', '.join(get_day_names(sorted(days)))


@register.filter
def schedule_summary(content):
    """
    One-line summary of a slide or track schedule.

    Usage: {{ slide|schedule_summary }}
    """
    if content is None or not hasattr(content, 'schedule_window'):
        return ''
    return describe_schedule(content.schedule_window())
