"""
Audit app configuration
"""

from django.apps import AppConfig
from django.db import connections
from django.db.migrations.recorder import MigrationRecorder
from django.db.models.signals import post_migrate


def _ensure_schema_after_migrate(sender, using, plan=None, **kwargs):
    """
    Self-heal the log table on every activation.

    Skipped while the app's own migrations are unapplied or being reversed,
    so `migrate` stays the owner of the initial CREATE TABLE.
    """
    if plan and any(backwards and migration.app_label == sender.label for migration, backwards in plan):
        return
    applied = MigrationRecorder(connections[using]).applied_migrations()
    if (sender.label, '0001_initial') not in applied:
        return
    from audit.schema import ensure_schema
    ensure_schema(using=using)


class AuditConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'audit'
    verbose_name = 'Edit History'

    def ready(self):
        """Connect content signals and the schema check when app is ready"""
        from audit import signals
        signals.connect_content_signals()
        post_migrate.connect(
            _ensure_schema_after_migrate,
            sender=self,
            dispatch_uid='audit.ensure_schema',
        )
