# events/migrations/0001_initial.py

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Event',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('date', models.DateTimeField(help_text='When the event takes place.')),
                ('location', models.CharField(blank=True, max_length=200)),
                ('event_type', models.CharField(
                    blank=True,
                    help_text='Free-form category, e.g. "Seminar" or "Sports".',
                    max_length=100,
                    verbose_name='Type',
                )),
                ('organizer', models.CharField(blank=True, max_length=200)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Event',
                'verbose_name_plural': 'Events',
                'ordering': ['date', 'title'],
            },
        ),
    ]
