from django.apps import AppConfig


class DashboardAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "dashboard"
    verbose_name = "Dashboard access"

    def ready(self):
        # Registers the post_save receiver
        from . import models_access  # noqa: F401
