"""
Base for commands that run an administrative operation on behalf of an admin
member.
"""

# Third-party
from django.core.management.base import BaseCommand, CommandError
from rest_framework.exceptions import APIException

# First-party/Local
from memberportal.api.models import User


class AdminTask(BaseCommand):
    """
    Adds a required --as flag naming the admin the operation runs as.
    Subclasses implement `run(actor, **options)` returning the affected count.
    """

    def add_arguments(self, parser):
        parser.add_argument(
            "--as",
            dest="actor",
            required=True,
            help="auth_id of the admin member running the operation",
        )

    def run(self, actor, **options):
        raise NotImplementedError

    def handle(self, *args, **options):
        try:
            actor = User.objects.get(pk=options["actor"])
        except User.DoesNotExist:
            raise CommandError(f"User {options['actor']} does not exist")

        try:
            count = self.run(actor, **options)
        except APIException as e:
            raise CommandError(str(e.detail))

        self.stdout.write(f"{count} members affected")
        return None
