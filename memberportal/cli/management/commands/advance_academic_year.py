# First-party/Local
from memberportal.api import services
from memberportal.cli.management.admin_task import AdminTask


class Command(AdminTask):
    help = (
        "Recalculate the status of every active student for the new academic year. "
        "Run once in April."
    )

    def add_arguments(self, parser):
        super().add_arguments(parser)
        parser.add_argument(
            "--anchor",
            dest="anchor_generation",
            type=int,
            default=None,
            help="Generation of the high school third-years. Worked out from today's date if omitted",
        )

    def run(self, actor, **options):
        return services.advance_academic_year(actor, options["anchor_generation"])
