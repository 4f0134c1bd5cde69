# First-party/Local
from memberportal.api import services
from memberportal.cli.management.admin_task import AdminTask


class Command(AdminTask):
    help = "Make every active student of a generation an alumnus"

    def add_arguments(self, parser):
        super().add_arguments(parser)
        parser.add_argument("generation", type=int, help="Generation to graduate")

    def run(self, actor, **options):
        return services.graduate_generation(actor, options["generation"])
