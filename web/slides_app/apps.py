from django.apps import AppConfig


class SlidesAppConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'slides_app'
    verbose_name = 'Slides'
