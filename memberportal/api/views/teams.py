# Third-party
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

# First-party/Local
from memberportal.api import permissions, serializers, services
from memberportal.api.models import Team
from memberportal.api.rules import ensure_admin


class TeamViewSet(viewsets.ModelViewSet):
    resource = "team"

    queryset = Team.objects.all().prefetch_related("leaders")
    serializer_class = serializers.TeamSerializer
    permission_classes = (permissions.TeamPermissions,)

    def perform_create(self, serializer):
        ensure_admin(self.request.user)
        serializer.save()

    def perform_update(self, serializer):
        ensure_admin(self.request.user)
        serializer.save()

    def perform_destroy(self, instance):
        ensure_admin(self.request.user)
        instance.delete()

    @action(detail=True, methods=["put"])
    def leaders(self, request, pk=None):
        team = self.get_object()
        serializer = serializers.TeamLeadersSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.update_team_leaders(request.user, team, serializer.validated_data["member_ids"])
        return Response(self.get_serializer(Team.objects.get(pk=team.pk)).data)
