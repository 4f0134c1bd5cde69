# Third-party
from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.views import APIView

# First-party/Local
from memberportal.api import permissions, serializers, services
from memberportal.api.discord_bot import DiscordBotAPI
from memberportal.api.models import Member


class MemberViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    Administration of members. Deleted members are not listed.
    """

    resource = "member"

    queryset = Member.objects.active().select_related("user").prefetch_related("teams")
    serializer_class = serializers.MemberSerializer
    permission_classes = (permissions.MemberPermissions,)
    filterset_fields = ("generation", "status")
    lookup_field = "user_id"
    lookup_value_regex = "[^/]+"

    def get_serializer_context(self):
        context = super().get_serializer_context()
        if self.action == "list":
            context["names"] = DiscordBotAPI().get_all_member_names()
        return context

    def update(self, request, *args, **kwargs):
        member = self.get_object()
        serializer = serializers.MemberProfileSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        member = services.update_member_admin(request.user, member, serializer.validated_data)
        return Response(self.get_serializer(member).data)

    def destroy(self, request, *args, **kwargs):
        services.delete_member(request.user, self.get_object())
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["post"], url_path="toggle-admin")
    def toggle_admin(self, request, *args, **kwargs):
        member = services.toggle_admin_status(request.user, self.get_object())
        return Response(self.get_serializer(member).data)

    @action(detail=True, methods=["put"])
    def teams(self, request, *args, **kwargs):
        member = self.get_object()
        serializer = serializers.MemberTeamsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.update_member_teams(request.user, member, serializer.validated_data["team_ids"])
        # Reload, the prefetched teams are stale
        return Response(self.get_serializer(self.get_queryset().get(pk=member.pk)).data)


class RegisterView(APIView):
    permission_classes = (permissions.HasRulePermission,)
    permission_required = "api.register_member"

    def post(self, request, *args, **kwargs):
        serializer = serializers.RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        member = services.register_new_member(request.user, serializer.validated_data)
        return Response(
            serializers.MemberSerializer(member).data,
            status=status.HTTP_201_CREATED,
        )


class MyProfileView(APIView):
    """
    The signed in user's own member profile
    """

    def get(self, request, *args, **kwargs):
        member = services.get_active_member(request.user)
        names = {member.discord_uid: DiscordBotAPI().get_display_name(member.discord_uid)}
        return Response(serializers.MemberSerializer(member, context={"names": names}).data)

    def patch(self, request, *args, **kwargs):
        serializer = serializers.MemberProfileSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        member = services.update_my_profile(request.user, serializer.validated_data)
        return Response(serializers.MemberSerializer(member).data)

    put = patch


class MyDiscordStatusView(APIView):
    """
    Whether the signed in member is on the Discord server, with their
    current nickname and roles
    """

    def get(self, request, *args, **kwargs):
        member = services.get_active_member(request.user)
        discord_status = DiscordBotAPI().get_member_status(member.discord_uid)
        if discord_status is None:
            return Response(
                {"detail": "Could not fetch the Discord status"},
                status=status.HTTP_502_BAD_GATEWAY,
            )
        return Response(discord_status)


class ResyncView(APIView):
    def post(self, request, *args, **kwargs):
        serializer = serializers.ResyncSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        services.resync_discord_member(
            request.user,
            serializer.validated_data["last_name"],
            serializer.validated_data["first_name"],
        )
        return Response(status=status.HTTP_204_NO_CONTENT)
