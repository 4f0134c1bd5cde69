# Standard library
from unittest.mock import Mock, patch

# Third-party
import pytest
from django.conf import settings
from django.core.exceptions import SuspiciousOperation
from model_bakery import baker
from mozilla_django_oidc.views import OIDCAuthenticationCallbackView

# First-party/Local
from memberportal.api.models import User
from memberportal.oidc import OIDCSubAuthenticationBackend, StateMismatchHandler, logout

CLAIMS = {
    "sub": "oidc|12345",
    settings.OIDC_FIELD_USERNAME: "taro",
    settings.OIDC_FIELD_NAME: "Yamada Taro",
    settings.OIDC_FIELD_DISCORD_UID: "987654321",
    settings.OIDC_FIELD_AVATAR: "https://cdn.example.com/avatar.png",
}


@pytest.mark.django_db
def test_create_user():
    user = OIDCSubAuthenticationBackend().create_user(CLAIMS)

    user = User.objects.get(pk="oidc|12345")
    assert user.username == "taro"
    assert user.name == "Yamada Taro"
    assert user.discord_uid == "987654321"
    assert user.avatar_url == "https://cdn.example.com/avatar.png"
    assert user.member is None


@pytest.mark.django_db
def test_create_user_without_username_claim():
    user = OIDCSubAuthenticationBackend().create_user({"sub": "oidc|12345"})

    assert user.username == "oidc|12345"
    assert user.discord_uid == ""


@pytest.mark.django_db
@pytest.mark.parametrize(
    "claims, expected_name, expected_discord_uid",
    [
        (CLAIMS, "Yamada Taro", "987654321"),
        ({"sub": "oidc|12345", settings.OIDC_FIELD_NAME: ""}, "Old Name", "old-uid"),
    ],
)
def test_update_user(claims, expected_name, expected_discord_uid):
    user = baker.make("api.User", auth_id="oidc|12345", name="Old Name", discord_uid="old-uid")

    user = OIDCSubAuthenticationBackend().update_user(user, claims)

    user.refresh_from_db()
    assert user.name == expected_name
    assert user.discord_uid == expected_discord_uid


@pytest.mark.django_db
def test_filter_users_by_claims():
    user = baker.make("api.User", auth_id="oidc|12345")
    backend = OIDCSubAuthenticationBackend()

    assert list(backend.filter_users_by_claims({"sub": "oidc|12345"})) == [user]
    assert not backend.filter_users_by_claims({}).exists()


def test_verify_claims():
    backend = OIDCSubAuthenticationBackend()

    assert backend.verify_claims({"sub": "oidc|12345"})
    assert not backend.verify_claims({"name": "Nobody"})


def test_state_mismatch_redirects():
    with patch.object(OIDCAuthenticationCallbackView, "get") as get:
        get.side_effect = SuspiciousOperation("state mismatch")
        response = StateMismatchHandler().get(Mock())

    assert response.status_code == 302
    assert response.url == settings.LOGIN_REDIRECT_URL_FAILURE


def test_logout_url():
    request = Mock()
    request.scheme = "https"
    request.get_host.return_value = "members.example.com"

    url = logout(request)

    assert url.startswith("https://oidc.idp.example.com/logout?")
    assert "returnTo=https%3A%2F%2Fmembers.example.com%2F" in url
    assert "client_id=test-client-id" in url
