import django.db.models.functions.datetime
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='EditHistoryLog',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('user_id', models.BigIntegerField(db_index=True, default=0, help_text='User who performed the action (0 = no authenticated user)')),
                ('post_id', models.BigIntegerField(db_index=True, help_text='Content item affected')),
                ('action_time', models.DateTimeField(db_default=django.db.models.functions.datetime.Now(), db_index=True, default=django.utils.timezone.now, help_text='When the action occurred')),
                ('action_type', models.CharField(choices=[('create', 'Create'), ('update', 'Update'), ('draft', 'Draft'), ('delete', 'Delete')], help_text='Type of action performed', max_length=50)),
                ('activity_name', models.CharField(help_text='Human-readable label for the action', max_length=255)),
                ('user_ip', models.CharField(blank=True, help_text='IP address of the user (IPv4 or IPv6)', max_length=45, null=True)),
                ('location', models.CharField(blank=True, help_text='Resolved place for the IP address', max_length=255, null=True)),
            ],
            options={
                'verbose_name': 'Edit History Log',
                'verbose_name_plural': 'Edit History Logs',
                'db_table': 'audit_edit_history_log',
                'ordering': ['-action_time', '-id'],
                'permissions': [('manage_edit_history', 'Can view edit history and change its settings')],
            },
        ),
    ]
