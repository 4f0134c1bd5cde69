"""
Custom permissions

See: http://www.django-rest-framework.org/api-guide/permissions/#custom-permissions
"""

# Third-party
from rest_framework.permissions import BasePermission

# First-party/Local
from memberportal.api.exceptions import SelfActionForbidden
from memberportal.api.rules import SELF_ADMIN_TOGGLE_MESSAGE, SELF_DELETE_MESSAGE


class RulesBasePermissions(BasePermission):
    """
    Delegate to permissions defined in `memberportal.api.rules`
    """

    resource = None

    def has_permission(self, request, view):
        return request.user.has_perm(f"api.{view.action}_{self.resource}")

    def has_object_permission(self, request, view, obj):
        return request.user.has_perm(f"api.{view.action}_{self.resource}", obj)


class MemberPermissions(RulesBasePermissions):
    resource = "member"

    # Actions a member may never take on their own profile, admin or not
    self_forbidden = {
        "destroy": SELF_DELETE_MESSAGE,
        "toggle_admin": SELF_ADMIN_TOGGLE_MESSAGE,
    }

    def has_permission(self, request, view):
        user = request.user
        if (
            view.action in self.self_forbidden
            and user.is_authenticated
            and view.kwargs.get(view.lookup_field) == user.pk
        ):
            raise SelfActionForbidden(self.self_forbidden[view.action])
        return super().has_permission(request, view)


class TeamPermissions(RulesBasePermissions):
    resource = "team"


class HasRulePermission(BasePermission):
    """
    Checks the rule named by the view's `permission_required`, for views
    which are not viewsets
    """

    def has_permission(self, request, view):
        return request.user.has_perm(view.permission_required)
