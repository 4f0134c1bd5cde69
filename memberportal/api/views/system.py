# Third-party
from rest_framework.response import Response
from rest_framework.views import APIView

# First-party/Local
from memberportal.api import permissions, serializers, services


class SystemTaskView(APIView):
    """
    Base for administrative batch operations, which respond with the number
    of members they affected
    """

    permission_classes = (permissions.HasRulePermission,)
    permission_required = "api.run_system_task"
    http_method_names = ["post", "options"]

    def run(self, request):
        raise NotImplementedError

    def post(self, request, *args, **kwargs):
        return Response({"count": self.run(request)})


class SyncRolesView(SystemTaskView):
    def run(self, request):
        return services.sync_all_roles(request.user)


class GraduateGenerationView(SystemTaskView):
    def run(self, request):
        serializer = serializers.GenerationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return services.graduate_generation(
            request.user, serializer.validated_data["generation"]
        )


class AdvanceYearView(SystemTaskView):
    def run(self, request):
        serializer = serializers.AdvanceYearSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return services.advance_academic_year(
            request.user, serializer.validated_data.get("anchor_generation")
        )
