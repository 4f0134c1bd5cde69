# Third-party
from django.apps import AppConfig


class CliConfig(AppConfig):
    name = "memberportal.cli"
    label = "cli"
