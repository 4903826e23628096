from django.apps import AppConfig


class CorecodeConfig(AppConfig):
    name = "apps.corecode"
    verbose_name = "Core"

    def ready(self):
        from . import signals  # noqa: F401
