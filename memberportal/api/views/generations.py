# Third-party
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

# First-party/Local
from memberportal.api import permissions, serializers, services
from memberportal.api.models import GenerationRole


class GenerationRoleView(APIView):
    """
    Mapping of generations to the Discord role handed to their members
    """

    permission_classes = (permissions.HasRulePermission,)
    permission_required = "api.manage_generationrole"

    def get(self, request, *args, **kwargs):
        roles = GenerationRole.objects.all()
        return Response(serializers.GenerationRoleSerializer(roles, many=True).data)

    def post(self, request, *args, **kwargs):
        serializer = serializers.GenerationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        role = services.create_generation_role(
            request.user, serializer.validated_data["generation"]
        )
        return Response(
            serializers.GenerationRoleSerializer(role).data,
            status=status.HTTP_201_CREATED,
        )

    def put(self, request, *args, **kwargs):
        serializer = serializers.GenerationRoleItemSerializer(data=request.data, many=True)
        serializer.is_valid(raise_exception=True)
        services.update_generation_roles(request.user, serializer.validated_data)
        roles = GenerationRole.objects.all()
        return Response(serializers.GenerationRoleSerializer(roles, many=True).data)
