# Standard library
from io import StringIO

# Third-party
import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

# First-party/Local
from memberportal.api.models import Member


def invoke(*args, **options):
    out = StringIO()
    call_command(*args, stdout=out, **options)
    return out.getvalue()


def test_graduate_generation(users, members):
    output = invoke("graduate_generation", "10", "--as", "oidc|alice")

    assert "1 members affected" in output
    members["member"].refresh_from_db()
    assert members["member"].status == Member.ALUMNI


def test_advance_academic_year(users, members):
    output = invoke("advance_academic_year", "--as", "oidc|alice", "--anchor", "11")

    assert "2 members affected" in output
    members["other_member"].refresh_from_db()
    assert members["other_member"].status == Member.HIGH_SCHOOL


def test_sync_discord_roles(users, members, discord_bot):
    output = invoke("sync_discord_roles", "--as", "oidc|alice")

    assert "3 members affected" in output
    assert discord_bot.post.call_count == 3


def test_command_needs_admin(users, members):
    with pytest.raises(CommandError, match="Administrator privileges required"):
        invoke("graduate_generation", "10", "--as", "oidc|bob")

    members["member"].refresh_from_db()
    assert members["member"].status == Member.HIGH_SCHOOL


def test_command_unknown_user(db):
    with pytest.raises(CommandError, match="does not exist"):
        invoke("sync_discord_roles", "--as", "oidc|nobody")
