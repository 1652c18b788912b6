from datetime import timedelta
import random

from django.core.management.base import BaseCommand
from django.utils import timezone

from apps.tasks.models import Task, TaskStatus, TaskPriority
from apps.tasks.services import create_task


SAMPLE_TITLES = [
    ('Buy milk', 'Semi-skimmed, two litres'),
    ('Alpha review', 'Walk through the alpha build with the team'),
    ('Plan rollout', 'Plan alpha rollout to the first customers'),
    ('Update dependencies', ''),
    ('Write release notes', 'Cover API changes and migrations'),
    ('Fix login redirect', 'Users land on a blank page after signing in'),
    ('Book dentist', ''),
    ('Quarterly report', 'Collect numbers from finance'),
    ('Clean up backlog', 'Close stale tickets older than six months'),
    ('Prepare demo', 'Dashboard and search flows'),
]


class Command(BaseCommand):
    help = 'Seeds the database with demo tasks'

    def add_arguments(self, parser):
        parser.add_argument('--count', type=int, default=len(SAMPLE_TITLES), help='Number of tasks to create')
        parser.add_argument('--clear', action='store_true', help='Delete all existing tasks first')

    def handle(self, *args, **options):
        if options['clear']:
            deleted, _ = Task.objects.all().delete()
            self.stdout.write(self.style.WARNING(f'Deleted {deleted} existing tasks'))

        today = timezone.now().date()
        created = 0

        self.stdout.write('Generating tasks...')

        for index in range(options['count']):
            title, description = SAMPLE_TITLES[index % len(SAMPLE_TITLES)]
            if index >= len(SAMPLE_TITLES):
                title = f"{title} #{index // len(SAMPLE_TITLES) + 1}"

            # Roughly half the tasks get a due date within the next two weeks
            due_date = today + timedelta(days=random.randint(0, 14)) if random.random() < 0.5 else None

            create_task({
                'title': title,
                'description': description,
                'status': random.choices(TaskStatus.values, weights=[50, 30, 20], k=1)[0],
                'priority': random.choice(TaskPriority.values),
                'due_date': due_date,
            })
            created += 1

        self.stdout.write(self.style.SUCCESS(f'Successfully created {created} tasks'))
