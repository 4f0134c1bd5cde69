# Standard library
import json

# Third-party
import pytest
from rest_framework import status
from rest_framework.reverse import reverse

# First-party/Local
from memberportal.api import rules
from memberportal.api.exceptions import SelfActionForbidden


def member_list(client, users, teams):
    return client.get(reverse("member-list"))


def member_detail(client, users, teams):
    return client.get(reverse("member-detail", (users["other_member"].pk,)))


def member_update(client, users, teams):
    return client.put(
        reverse("member-detail", (users["other_member"].pk,)),
        json.dumps({"status": 2, "generation": 3}),
        content_type="application/json",
    )


def member_delete(client, users, teams):
    return client.delete(reverse("member-detail", (users["other_member"].pk,)))


def member_toggle_admin(client, users, teams):
    return client.post(reverse("member-toggle-admin", (users["other_member"].pk,)))


def member_teams(client, users, teams):
    return client.put(
        reverse("member-teams", (users["other_member"].pk,)),
        json.dumps({"team_ids": []}),
        content_type="application/json",
    )


def my_profile(client, users, teams):
    return client.get(reverse("member-me"))


def team_list(client, users, teams):
    return client.get(reverse("team-list"))


def team_create(client, users, teams):
    return client.post(
        reverse("team-list"),
        json.dumps({"name": "Electronics", "discord_role_id": "role-electronics"}),
        content_type="application/json",
    )


def team_delete(client, users, teams):
    return client.delete(reverse("team-detail", (teams["robotics"].pk,)))


def team_leaders(client, users, teams):
    return client.put(
        reverse("team-leaders", (teams["robotics"].pk,)),
        json.dumps({"member_ids": []}),
        content_type="application/json",
    )


def generation_roles(client, users, teams):
    return client.get(reverse("generation-roles"))


@pytest.mark.parametrize(
    "view,user,expected_status",
    [
        (member_list, "admin", status.HTTP_200_OK),
        (member_detail, "admin", status.HTTP_200_OK),
        (member_update, "admin", status.HTTP_200_OK),
        (member_delete, "admin", status.HTTP_204_NO_CONTENT),
        (member_toggle_admin, "admin", status.HTTP_200_OK),
        (member_teams, "admin", status.HTTP_200_OK),
        (my_profile, "admin", status.HTTP_200_OK),
        (team_list, "admin", status.HTTP_200_OK),
        (team_create, "admin", status.HTTP_201_CREATED),
        (team_delete, "admin", status.HTTP_204_NO_CONTENT),
        (team_leaders, "admin", status.HTTP_200_OK),
        (generation_roles, "admin", status.HTTP_200_OK),
        (member_list, "member", status.HTTP_403_FORBIDDEN),
        (member_detail, "member", status.HTTP_403_FORBIDDEN),
        (member_update, "member", status.HTTP_403_FORBIDDEN),
        (member_delete, "member", status.HTTP_403_FORBIDDEN),
        (member_toggle_admin, "member", status.HTTP_403_FORBIDDEN),
        (member_teams, "member", status.HTTP_403_FORBIDDEN),
        (my_profile, "member", status.HTTP_200_OK),
        (team_list, "member", status.HTTP_200_OK),
        (team_create, "member", status.HTTP_403_FORBIDDEN),
        (team_delete, "member", status.HTTP_403_FORBIDDEN),
        (team_leaders, "member", status.HTTP_403_FORBIDDEN),
        (generation_roles, "member", status.HTTP_403_FORBIDDEN),
        (member_list, "unregistered", status.HTTP_403_FORBIDDEN),
        (my_profile, "unregistered", status.HTTP_404_NOT_FOUND),
        (team_list, "unregistered", status.HTTP_403_FORBIDDEN),
        (generation_roles, "unregistered", status.HTTP_403_FORBIDDEN),
    ],
)
def test_permission(client, users, members, teams, view, user, expected_status):
    client.force_login(users[user])
    response = view(client, users, teams)
    assert response.status_code == expected_status


@pytest.mark.parametrize(
    "view",
    [member_list, member_detail, my_profile, team_list, team_create, generation_roles],
)
def test_anonymous(client, users, members, teams, view):
    response = view(client, users, teams)
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_is_admin(users, members):
    assert rules.is_admin(users["admin"])
    assert not rules.is_admin(users["member"])
    assert not rules.is_admin(users["unregistered"])


def test_is_admin_ignores_deleted_profile(users, members):
    members["admin"].soft_delete()

    assert not rules.is_admin(users["admin"])


def test_is_self(users, members):
    assert rules.is_self(users["admin"], members["admin"])
    assert not rules.is_self(users["admin"], members["member"])
    assert not rules.is_self(users["admin"], None)


def test_ensure_not_self(users, members):
    with pytest.raises(SelfActionForbidden, match="nope"):
        rules.ensure_not_self(users["member"], members["member"], "nope")

    rules.ensure_not_self(users["member"], members["other_member"])
