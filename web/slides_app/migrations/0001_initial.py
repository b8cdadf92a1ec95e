# Generated manually on 2025-01-12 10:00

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='SlideRow',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=200)),
                ('description', models.TextField(blank=True)),
                ('row_type', models.CharField(choices=[('ROUTINE', 'Routine'), ('COURSE', 'Course'), ('TEACHING', 'Teaching'), ('CUSTOM', 'Custom'), ('QUICKSLIDE', 'Quick Slide')], default='CUSTOM', max_length=20)),
                ('is_published', models.BooleanField(default=False)),
                ('display_order', models.IntegerField(db_index=True, default=0)),
                ('rotation_enabled', models.BooleanField(default=False, help_text='Show a rotating subset of slides')),
                ('rotation_count', models.IntegerField(blank=True, help_text='Slides shown per rotation window', null=True)),
                ('rotation_interval', models.CharField(blank=True, choices=[('hourly', 'Hourly'), ('daily', 'Daily'), ('weekly', 'Weekly')], max_length=10, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'ordering': ['display_order', 'created_at', 'id'],
            },
        ),
        migrations.CreateModel(
            name='Slide',
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
                ('title', models.CharField(blank=True, max_length=300)),
                ('subtitle', models.CharField(blank=True, max_length=300)),
                ('body_content', models.TextField(blank=True)),
                ('audio_url', models.CharField(blank=True, max_length=500)),
                ('image_url', models.CharField(blank=True, max_length=500)),
                ('is_random', models.BooleanField(default=False, help_text='Eligible for random pick when played as a playlist')),
                ('slide_row', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='slides', to='slides_app.sliderow')),
            ],
            options={
                'ordering': ['display_order', 'created_at', 'id'],
                'abstract': False,
                'indexes': [models.Index(fields=['slide_row', 'display_order'], name='slide_row_order_idx')],
            },
        ),
    ]
