"""
Management command to register the daily snooze cleanup with Django-Q.
"""
from django.conf import settings
from django.core.management.base import BaseCommand
from django_q.models import Schedule
from django_q.tasks import schedule
from slides_app.publication import next_republish_instant


class Command(BaseCommand):
    help = 'Schedule the daily cleanup of expired temporary unpublish timestamps'

    def add_arguments(self, parser):
        parser.add_argument(
            '--replace',
            action='store_true',
            help='Delete an existing schedule with the same name and register it again',
        )

    def handle(self, *args, **options):
        name = settings.SNOOZE_CLEANUP_SCHEDULE_NAME
        existing = Schedule.objects.filter(name=name)

        if existing.exists():
            if not options.get('replace'):
                self.stdout.write(self.style.WARNING(f"Schedule '{name}' already exists, leaving it alone"))
                return
            existing.delete()

        next_run = next_republish_instant()
        schedule(
            'slides_app.tasks.clear_expired_snoozes',
            name=name,
            schedule_type=Schedule.DAILY,
            next_run=next_run,
        )

        self.stdout.write(
            self.style.SUCCESS(f"Scheduled '{name}' daily, first run at {next_run.isoformat()}")
        )
