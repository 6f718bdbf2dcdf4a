from django.apps import AppConfig


class MarketersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "marketers"
