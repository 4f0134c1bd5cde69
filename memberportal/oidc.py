# Standard library
from urllib.parse import urlencode

# Third-party
import structlog
from django.conf import settings
from django.core.exceptions import SuspiciousOperation
from django.http import HttpResponseRedirect
from mozilla_django_oidc.auth import OIDCAuthenticationBackend
from mozilla_django_oidc.views import OIDCAuthenticationCallbackView, OIDCLogoutView

# First-party/Local
from memberportal.api.models import User

log = structlog.getLogger(__name__)


def profile_from_claims(claims):
    """
    The profile fields the provider hands over about a user. Users sign in
    with their Discord account, so the Discord user id comes from here too.
    """
    return {
        "name": claims.get(settings.OIDC_FIELD_NAME) or "",
        "discord_uid": claims.get(settings.OIDC_FIELD_DISCORD_UID) or "",
        "avatar_url": claims.get(settings.OIDC_FIELD_AVATAR) or "",
    }


class OIDCSubAuthenticationBackend(OIDCAuthenticationBackend):
    """
    Authentication backend which matches users by their `sub` claim
    """

    def create_user(self, claims):
        sub = claims.get("sub")
        log.info(f"Creating user {sub} on first login")
        return User.objects.create(
            pk=sub,
            username=claims.get(settings.OIDC_FIELD_USERNAME) or sub,
            **profile_from_claims(claims),
        )

    def update_user(self, user, claims):
        # Keep the provider's profile fields in sync on every login
        changed = False
        for field, value in profile_from_claims(claims).items():
            if value and getattr(user, field) != value:
                setattr(user, field, value)
                changed = True
        if changed:
            user.save()
        return user

    def filter_users_by_claims(self, claims):
        sub = claims.get("sub")
        if not sub:
            return self.UserModel.objects.none()

        return User.objects.filter(pk=sub)

    def verify_claims(self, claims):
        return bool(claims.get("sub"))


class StateMismatchHandler(OIDCAuthenticationCallbackView):
    def get(self, *args, **kwargs):
        try:
            return super().get(*args, **kwargs)
        except SuspiciousOperation as e:
            log.warning(f"Caught {e}: redirecting to login")
            return HttpResponseRedirect(settings.LOGIN_REDIRECT_URL_FAILURE)


def logout(request):
    params = urlencode(
        {
            "returnTo": f"{request.scheme}://{request.get_host()}{settings.LOGOUT_REDIRECT_URL}",
            "client_id": settings.OIDC_RP_CLIENT_ID,
        }
    )
    return f"{settings.OIDC_OP_LOGOUT_ENDPOINT}?{params}"


class LogoutView(OIDCLogoutView):
    def get(self, request):
        return super().post(request)
