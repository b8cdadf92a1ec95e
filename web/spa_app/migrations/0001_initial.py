# Generated manually on 2025-01-12 10:05

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='SpaTrack',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('is_published', models.BooleanField(default=True)),
                ('display_order', models.IntegerField(db_index=True, default=0)),
                ('publish_time_start', models.CharField(blank=True, help_text='HH:MM, start of daily window', max_length=8, null=True)),
                ('publish_time_end', models.CharField(blank=True, help_text='HH:MM, end of daily window (exclusive)', max_length=8, null=True)),
                ('publish_days', models.JSONField(blank=True, help_text='Day numbers 0-6 (0 = Sunday); empty means every day', null=True)),
                ('temp_unpublish_until', models.DateTimeField(blank=True, help_text='Hidden until this instant', null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(max_length=300)),
                ('audio_url', models.CharField(max_length=500)),
                ('is_random', models.BooleanField(default=False, help_text='Include in the random pool when choosing the active track')),
            ],
            options={
                'ordering': ['display_order', 'created_at', 'id'],
                'abstract': False,
            },
        ),
    ]
