"""
Management command to create or repair the edit history table
"""
from django.core.management.base import BaseCommand, CommandError
from django.db import DEFAULT_DB_ALIAS

from audit.schema import ensure_schema
from core.exceptions import SchemaError


class Command(BaseCommand):
    help = 'Create the edit history table or add any missing columns'

    def add_arguments(self, parser):
        parser.add_argument(
            '--database',
            default=DEFAULT_DB_ALIAS,
            help='Database alias to check (default: "default")',
        )

    def handle(self, *args, **options):
        try:
            added = ensure_schema(using=options['database'])
        except SchemaError as e:
            raise CommandError(e.message) from e

        if added:
            self.stdout.write(self.style.SUCCESS(f"✓ Added columns: {', '.join(added)}"))
        else:
            self.stdout.write(self.style.SUCCESS('✓ Edit history table is up to date'))
