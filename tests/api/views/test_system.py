# Standard library
import json

# Third-party
import pytest
from rest_framework import status
from rest_framework.reverse import reverse

# First-party/Local
from memberportal.api.models import Member


def test_sync_roles(client, users, members):
    client.force_login(users["admin"])

    response = client.post(reverse("system-sync-roles"))

    assert response.status_code == status.HTTP_200_OK
    assert response.data == {"count": 3}


def test_graduate(client, users, members):
    client.force_login(users["admin"])

    response = client.post(
        reverse("system-graduate"), json.dumps({"generation": 10}), content_type="application/json"
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.data == {"count": 1}
    members["member"].refresh_from_db()
    assert members["member"].status == Member.ALUMNI


def test_graduate_invalid(client, users, members):
    client.force_login(users["admin"])

    response = client.post(
        reverse("system-graduate"), json.dumps({"generation": 0}), content_type="application/json"
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_advance_year(client, users, members):
    client.force_login(users["admin"])

    response = client.post(
        reverse("system-advance-year"),
        json.dumps({"anchor_generation": 11}),
        content_type="application/json",
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.data == {"count": 2}


@pytest.mark.parametrize(
    "url_name", ["system-sync-roles", "system-graduate", "system-advance-year"]
)
def test_system_tasks_need_admin(client, users, members, url_name):
    client.force_login(users["member"])

    response = client.post(
        reverse(url_name), json.dumps({"generation": 10}), content_type="application/json"
    )

    assert response.status_code == status.HTTP_403_FORBIDDEN
    members["member"].refresh_from_db()
    assert members["member"].status == Member.HIGH_SCHOOL


def test_system_tasks_only_accept_post(client, users, members):
    client.force_login(users["admin"])

    response = client.get(reverse("system-sync-roles"))

    assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED


def test_health_check(client, db):
    response = client.get(reverse("health-check"))

    assert response.status_code == status.HTTP_200_OK
