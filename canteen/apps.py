from django.apps import AppConfig


class CanteenConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "canteen"
