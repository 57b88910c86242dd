import datetime

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.events.grid import FALLBACK_EVENTS
from apps.events.models import CalendarEvent


class Command(BaseCommand):
    help = 'Stores the published HSGA event circular as calendar events'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run', action='store_true',
            help='List the events that would be created without saving them',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        created = 0
        for entry in FALLBACK_EVENTS:
            date = datetime.date.fromisoformat(entry['date'])
            if CalendarEvent.objects.filter(title=entry['title'], date=date).exists():
                continue
            if options['dry_run']:
                self.stdout.write(f"Would create {entry['date']} {entry['title']}")
            else:
                CalendarEvent.objects.create(
                    title=entry['title'], date=date, description=entry['description'],
                )
            created += 1

        verb = 'Would create' if options['dry_run'] else 'Created'
        self.stdout.write(self.style.SUCCESS(f'{verb} {created} calendar events'))
