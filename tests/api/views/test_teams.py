# Standard library
import json

# Third-party
import pytest
from rest_framework import status
from rest_framework.reverse import reverse

# First-party/Local
from memberportal.api.models import Team


def test_list(client, users, members, teams):
    client.force_login(users["member"])

    response = client.get(reverse("team-list"))

    assert response.status_code == status.HTTP_200_OK
    assert [team["name"] for team in response.data] == ["Programming", "Robotics"]
    assert set(response.data[0]) == {"id", "name", "discord_role_id", "leaders"}


def test_list_unregistered(client, users, teams):
    client.force_login(users["unregistered"])

    response = client.get(reverse("team-list"))

    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_create(client, users, members):
    client.force_login(users["admin"])

    response = client.post(
        reverse("team-list"),
        json.dumps({"name": "Electronics", "discord_role_id": "role-electronics"}),
        content_type="application/json",
    )

    assert response.status_code == status.HTTP_201_CREATED
    assert Team.objects.filter(name="Electronics").exists()


@pytest.mark.parametrize(
    "data",
    [
        {"name": "", "discord_role_id": "role-x"},
        {"name": "Electronics", "discord_role_id": ""},
        {"name": "Robotics", "discord_role_id": "role-x"},
    ],
)
def test_create_invalid(client, users, members, teams, data):
    client.force_login(users["admin"])

    response = client.post(
        reverse("team-list"), json.dumps(data), content_type="application/json"
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_create_as_member(client, users, members):
    client.force_login(users["member"])

    response = client.post(
        reverse("team-list"),
        json.dumps({"name": "Electronics", "discord_role_id": "role-electronics"}),
        content_type="application/json",
    )

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert not Team.objects.filter(name="Electronics").exists()


def test_update(client, users, members, teams):
    client.force_login(users["admin"])

    response = client.patch(
        reverse("team-detail", (teams["robotics"].pk,)),
        json.dumps({"discord_role_id": "role-robots"}),
        content_type="application/json",
    )

    assert response.status_code == status.HTTP_200_OK
    teams["robotics"].refresh_from_db()
    assert teams["robotics"].discord_role_id == "role-robots"


def test_delete(client, users, members, teams):
    client.force_login(users["admin"])

    response = client.delete(reverse("team-detail", (teams["robotics"].pk,)))

    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert not Team.objects.filter(pk=teams["robotics"].pk).exists()


def test_update_leaders(client, users, members, teams):
    client.force_login(users["admin"])

    response = client.put(
        reverse("team-leaders", (teams["robotics"].pk,)),
        json.dumps({"member_ids": ["oidc|bob", "oidc|carol"]}),
        content_type="application/json",
    )

    assert response.status_code == status.HTTP_200_OK
    assert sorted(response.data["leaders"]) == ["oidc|bob", "oidc|carol"]


def test_update_leaders_unknown_member(client, users, members, teams):
    client.force_login(users["admin"])

    response = client.put(
        reverse("team-leaders", (teams["robotics"].pk,)),
        json.dumps({"member_ids": ["oidc|nobody"]}),
        content_type="application/json",
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert not teams["robotics"].leaders.exists()


def test_update_leaders_duplicate(client, users, members, teams):
    client.force_login(users["admin"])

    response = client.put(
        reverse("team-leaders", (teams["robotics"].pk,)),
        json.dumps({"member_ids": ["oidc|bob", "oidc|bob"]}),
        content_type="application/json",
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "member_ids" in response.data
    assert not teams["robotics"].leaders.exists()
