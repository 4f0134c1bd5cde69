# Third-party
from rest_framework.reverse import reverse

# First-party/Local
from memberportal.api.metrics import login_events


def test_responses_are_not_cached(client, db):
    response = client.get(reverse("health-check"))

    assert "no-cache" in response["Cache-Control"]
    assert "no-store" in response["Cache-Control"]


def test_login_is_counted(client, users):
    before = login_events.labels("user")._value.get()

    client.force_login(users["member"])

    assert login_events.labels("user")._value.get() == before + 1
