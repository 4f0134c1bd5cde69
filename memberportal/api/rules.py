"""
Rules and permissions using django-rules.

Administration is gated on a single flag, `is_admin`, on the caller's own
active member profile. The profile is read from the database on every check
so revoking the flag takes effect immediately.
"""

from rest_framework.exceptions import NotAuthenticated, PermissionDenied
from rules import add_perm, is_authenticated, predicate

from memberportal.api.exceptions import SelfActionForbidden
from memberportal.api.models import Member

ADMIN_REQUIRED_MESSAGE = "Administrator privileges required"
SELF_ADMIN_TOGGLE_MESSAGE = "You cannot change your own admin status"
SELF_DELETE_MESSAGE = "You cannot delete yourself"


@predicate
def is_admin(user):
    """
    Check whether `user` has an active member profile flagged as admin

    :param user User: The user to check
    """
    if user is None or not user.is_authenticated:
        return False

    return Member.objects.active().filter(user_id=user.pk, is_admin=True).exists()


@predicate
def is_registered(user):
    if user is None or not user.is_authenticated:
        return False

    return Member.objects.active().filter(user_id=user.pk).exists()


@predicate
def is_self(user, member):
    """
    Check whether `user` is performing an action on their own profile

    :param user User: The user to check
    :param member Member: The member being acted upon
    """
    if member is None:
        return False

    return member.user_id == user.pk


add_perm("api.register_member", is_authenticated)

add_perm("api.list_member", is_authenticated & is_admin)
add_perm("api.retrieve_member", is_authenticated & is_admin)
add_perm("api.update_member", is_authenticated & is_admin)
add_perm("api.partial_update_member", is_authenticated & is_admin)
add_perm("api.destroy_member", is_authenticated & is_admin)
add_perm("api.toggle_admin_member", is_authenticated & is_admin)
add_perm("api.teams_member", is_authenticated & is_admin)

add_perm("api.list_team", is_authenticated & is_registered)
add_perm("api.retrieve_team", is_authenticated & is_registered)
add_perm("api.create_team", is_authenticated & is_admin)
add_perm("api.update_team", is_authenticated & is_admin)
add_perm("api.partial_update_team", is_authenticated & is_admin)
add_perm("api.destroy_team", is_authenticated & is_admin)
add_perm("api.leaders_team", is_authenticated & is_admin)

add_perm("api.manage_generationrole", is_authenticated & is_admin)

add_perm("api.run_system_task", is_authenticated & is_admin)


def ensure_admin(user):
    """
    Raise unless `user` is signed in and an admin. Services call this before
    any administrative change so the check holds whichever way they are
    invoked.
    """
    if user is None or not user.is_authenticated:
        raise NotAuthenticated()
    if not is_admin(user):
        raise PermissionDenied(ADMIN_REQUIRED_MESSAGE)


def ensure_not_self(user, member, message=None):
    if is_self(user, member):
        raise SelfActionForbidden(message)
