# Third-party
from django.apps import AppConfig


class ApiConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "memberportal.api"
    label = "api"

    def ready(self):
        # First-party/Local
        from memberportal.api import rules  # noqa: F401
