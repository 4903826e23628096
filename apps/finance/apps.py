from django.apps import AppConfig


class FinanceConfig(AppConfig):
    name = "apps.finance"
    verbose_name = "Fees"

    def ready(self):
        from . import signals  # noqa: F401
