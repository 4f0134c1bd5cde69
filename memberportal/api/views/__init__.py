# First-party/Local
from memberportal.api.views.generations import GenerationRoleView
from memberportal.api.views.health_check import health_check
from memberportal.api.views.members import (
    MemberViewSet,
    MyDiscordStatusView,
    MyProfileView,
    RegisterView,
    ResyncView,
)
from memberportal.api.views.system import AdvanceYearView, GraduateGenerationView, SyncRolesView
from memberportal.api.views.teams import TeamViewSet
