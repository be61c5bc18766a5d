"""
Seed Workflow Command.

Creates the default video-production workflow template and,
optionally, a starter team roster.
"""

from django.core.management.base import BaseCommand, CommandError

from application.session import TrackerSession
from infrastructure.persistence.stores import get_record_store


DEFAULT_WORKFLOW = [
    ('Script', 2),
    ('Pre-production', 3),
    ('Shoot', 2),
    ('Edit', 5),
    ('Color & Sound', 2),
    ('Review', 1),
    ('Delivery', 1),
]


class Command(BaseCommand):
    help = 'Seed the default video-production workflow template'
    
    def add_arguments(self, parser):
        parser.add_argument(
            '--force',
            action='store_true',
            help='Append the default steps even if a template already exists'
        )
        parser.add_argument(
            '--member',
            action='append',
            default=[],
            dest='members',
            help='Team member to add (repeatable)'
        )
    
    def handle(self, *args, **options):
        session = TrackerSession.open(get_record_store())
        state = session.snapshot
        if state.error:
            raise CommandError(state.error)
        
        if state.workflow_templates and not options['force']:
            self.stdout.write(
                self.style.WARNING(
                    f'Workflow template already has {len(state.workflow_templates)} steps, '
                    'use --force to append the defaults'
                )
            )
        else:
            for name, days in DEFAULT_WORKFLOW:
                state = session.add_workflow_step(name, days)
                if state.error:
                    raise CommandError(state.error)
            self.stdout.write(f'Added {len(DEFAULT_WORKFLOW)} workflow steps')
        
        for name in options['members']:
            state = session.add_member(name)
            if state.error:
                raise CommandError(state.error)
        
        self.stdout.write(
            self.style.SUCCESS('Workflow seeding completed!')
        )
