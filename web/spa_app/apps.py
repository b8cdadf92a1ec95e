from django.apps import AppConfig


class SpaAppConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'spa_app'
    verbose_name = 'Spa Audio'
