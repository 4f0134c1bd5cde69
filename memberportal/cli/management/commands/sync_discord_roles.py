# First-party/Local
from memberportal.api import services
from memberportal.cli.management.admin_task import AdminTask


class Command(AdminTask):
    help = "Ask the Discord bot to sync the roles of every active member"

    def run(self, actor, **options):
        return services.sync_all_roles(actor)
