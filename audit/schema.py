"""
Edit history table management.

ensure_schema() is idempotent: it creates the log table when it is missing
and adds back any of the late-added columns an older install lacks. It runs
after every `migrate` (the app's activation) and from the
`ensure_edit_history_schema` management command.
"""

import logging

from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections

from audit.models import EditHistoryLog
from core.exceptions import SchemaError

logger = logging.getLogger(__name__)

# Columns added after the first release; older tables may lack them
REPAIRABLE_COLUMNS = ('user_ip', 'location', 'activity_name')


def get_existing_columns(connection, table_name):
    """Column names currently present in the table"""
    with connection.cursor() as cursor:
        description = connection.introspection.get_table_description(cursor, table_name)
    return {column.name for column in description}


def table_exists(connection, table_name):
    return table_name in connection.introspection.table_names()


def repair_field(model, name):
    """
    Nullable copy of a model field, used to add it back to a table that
    already has rows (existing rows get NULL instead of failing NOT NULL)
    """
    original = model._meta.get_field(name)
    field_name, _path, args, kwargs = original.deconstruct()
    kwargs["null"] = True
    field = original.__class__(*args, **kwargs)
    field.set_attributes_from_name(field_name)
    field.model = model
    return field


def ensure_schema(using=DEFAULT_DB_ALIAS):
    """
    Make sure the edit history table exists with every required column.

    Returns the names of the columns that were created (all of them when the
    table itself was missing, an empty list when already up to date).

    Raises SchemaError if the database refuses the change.
    """
    connection = connections[using]
    model = EditHistoryLog
    table_name = model._meta.db_table

    try:
        if not table_exists(connection, table_name):
            with connection.schema_editor() as editor:
                editor.create_model(model)
            created = [field.column for field in model._meta.local_concrete_fields]
            logger.info(f"Created edit history table {table_name}")
            return created

        existing = get_existing_columns(connection, table_name)
        missing = [name for name in REPAIRABLE_COLUMNS if name not in existing]
        if missing:
            with connection.schema_editor() as editor:
                for name in missing:
                    editor.add_field(model, repair_field(model, name))
            logger.info(f"Added missing columns to {table_name}: {', '.join(missing)}")
        return missing

    except DatabaseError as e:
        logger.error(f"Edit history schema installation failed: {e}", exc_info=True)
        raise SchemaError(
            table=table_name,
            message=f"Could not install edit history table {table_name}: {e}",
        ) from e
