# Third-party
from django.urls import include, path
from rest_framework import routers

# First-party/Local
from memberportal.api import views

router = routers.DefaultRouter()
router.register("members", views.MemberViewSet, basename="member")
router.register("teams", views.TeamViewSet, basename="team")

urlpatterns = [
    path("members/register/", views.RegisterView.as_view(), name="member-register"),
    path("members/me/", views.MyProfileView.as_view(), name="member-me"),
    path(
        "members/me/discord-status/",
        views.MyDiscordStatusView.as_view(),
        name="member-me-discord-status",
    ),
    path("members/me/resync/", views.ResyncView.as_view(), name="member-me-resync"),
    path("generation-roles/", views.GenerationRoleView.as_view(), name="generation-roles"),
    path("system/sync-roles/", views.SyncRolesView.as_view(), name="system-sync-roles"),
    path("system/graduate/", views.GraduateGenerationView.as_view(), name="system-graduate"),
    path("system/advance-year/", views.AdvanceYearView.as_view(), name="system-advance-year"),
    path("", include(router.urls)),
]
