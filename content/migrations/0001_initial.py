import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Post',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(blank=True, default='', max_length=255)),
                ('body', models.TextField(blank=True, default='')),
                ('status', models.CharField(choices=[('draft', 'Draft'), ('pending', 'Pending Review'), ('publish', 'Published'), ('private', 'Private')], db_index=True, default='draft', max_length=20)),
                ('post_type', models.CharField(choices=[('post', 'Post'), ('page', 'Page'), ('revision', 'Revision')], db_index=True, default='post', max_length=20)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('author', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='posts', to=settings.AUTH_USER_MODEL)),
                ('parent', models.ForeignKey(blank=True, help_text='Post this revision belongs to', null=True, on_delete=django.db.models.deletion.CASCADE, related_name='revisions', to='content.post')),
            ],
            options={
                'ordering': ['-updated_at'],
            },
        ),
    ]
