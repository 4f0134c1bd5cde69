# Standard library
from unittest.mock import Mock, patch

# Third-party
import pytest
from model_bakery import baker

# First-party/Local
from memberportal.api.models import Member


def bot_response(status_code=200, json=None, text=""):
    response = Mock()
    response.ok = status_code < 400
    response.status_code = status_code
    response.json.return_value = {} if json is None else json
    response.text = text
    return response


def _bot_post(url, json=None, **kwargs):
    if url.endswith("/api/generation"):
        generation = json["generation"]
        return bot_response(
            json={"success": True, "generation": generation, "role_id": f"role-{generation}"}
        )
    return bot_response(json={"success": True})


def _bot_get(url, params=None, **kwargs):
    if url.endswith("/api/members"):
        return bot_response(
            json={"success": True, "data": [{"uid": "discord-alice", "name": "Alice Display"}]}
        )
    if url.endswith("/api/nickname"):
        return bot_response(json={"name_only": "Display Name"})
    if url.endswith("/api/member/status"):
        return bot_response(
            json={
                "discord_uid": params["discord_uid"],
                "is_in_server": True,
                "current_nickname": "Display Name",
                "current_roles": ["member"],
            }
        )
    return bot_response(status_code=404)


@pytest.fixture(autouse=True)
def discord_bot():
    """
    Mock calls to the Discord bot
    """
    with patch("memberportal.api.discord_bot.requests") as requests:
        requests.post.side_effect = _bot_post
        requests.get.side_effect = _bot_get
        yield requests


def bot_calls(discord_bot, endpoint):
    """The JSON bodies of POSTs made to the bot's `endpoint`"""
    return [
        call.kwargs["json"]
        for call in discord_bot.post.call_args_list
        if call.args[0].endswith(f"/api/{endpoint}")
    ]


@pytest.fixture
def users(db):
    return {
        "admin": baker.make(
            "api.User",
            auth_id="oidc|alice",
            username="alice",
            name="Alice",
            discord_uid="discord-alice",
        ),
        "member": baker.make(
            "api.User",
            auth_id="oidc|bob",
            username="bob",
            name="Bob",
            discord_uid="discord-bob",
        ),
        "other_member": baker.make(
            "api.User",
            auth_id="oidc|carol",
            username="carol",
            name="Carol",
            discord_uid="discord-carol",
        ),
        "unregistered": baker.make(
            "api.User",
            auth_id="oidc|dave",
            username="dave",
            name="Dave",
            discord_uid="discord-dave",
        ),
    }


@pytest.fixture
def members(users):
    return {
        "admin": baker.make(
            "api.Member",
            user=users["admin"],
            status=Member.ALUMNI,
            generation=8,
            discord_uid="discord-alice",
            is_admin=True,
            deleted_at=None,
        ),
        "member": baker.make(
            "api.Member",
            user=users["member"],
            status=Member.HIGH_SCHOOL,
            generation=10,
            discord_uid="discord-bob",
            is_admin=False,
            deleted_at=None,
        ),
        "other_member": baker.make(
            "api.Member",
            user=users["other_member"],
            status=Member.JUNIOR_HIGH,
            generation=12,
            discord_uid="discord-carol",
            is_admin=False,
            deleted_at=None,
        ),
    }


@pytest.fixture
def teams(db):
    return {
        "robotics": baker.make("api.Team", name="Robotics", discord_role_id="role-robotics"),
        "programming": baker.make(
            "api.Team", name="Programming", discord_role_id="role-programming"
        ),
    }
