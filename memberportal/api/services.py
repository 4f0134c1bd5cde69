"""
Member, team and generation role operations.

Every change that affects how a member should look on Discord is followed by
a best effort call to the Discord bot. Those calls happen after the database
work has been committed and their failures never fail the operation.
"""

# Standard library
import re
from functools import wraps

# Third-party
import structlog
from django.db import DatabaseError, IntegrityError, transaction
from django.utils import timezone
from rest_framework.exceptions import APIException, ValidationError

# First-party/Local
from memberportal.api import generation as generations
from memberportal.api.discord_bot import DiscordBotAPI, DiscordBotAPIException
from memberportal.api.exceptions import (
    AlreadyRegistered,
    DiscordBotError,
    GenerationRoleExists,
    NotRegistered,
    StoreError,
)
from memberportal.api.metrics import registration_events
from memberportal.api.models import GenerationRole, Member, MemberTeamRelation, TeamLeader
from memberportal.api.rules import (
    SELF_ADMIN_TOGGLE_MESSAGE,
    SELF_DELETE_MESSAGE,
    ensure_admin,
    ensure_not_self,
)

log = structlog.getLogger(__name__)

WHITESPACE = re.compile(r"\s")


def handle_store_errors(func):
    """
    Decorates a service function so database failures are logged and
    reported with a generic message instead of leaking details
    """

    @wraps(func)
    def inner(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except APIException:
            raise
        except DatabaseError as e:
            log.error(f"{func.__name__} failed: {e}")
            raise StoreError() from e

    return inner


def full_name(last_name, first_name):
    """The name the Discord nickname is built from, without any spaces"""
    return WHITESPACE.sub("", last_name + first_name)


def get_active_member(user):
    member = user.member
    if member is None:
        raise NotRegistered()
    return member


def resolve_generation(status, grade=None, generation=None):
    resolved = generations.derive_generation(status, grade=grade, generation=generation)
    if resolved is None:
        raise ValidationError({"generation": ["Could not work out the generation, check the input"]})
    return resolved


def sync_roles(member):
    if not member.discord_uid:
        log.warning(f"Member {member.user_id} has no Discord user id, skipping role sync")
        return False
    return DiscordBotAPI().sync_roles(member.discord_uid)


# -- Generation roles


def ensure_generation_role_exists(generation):
    """
    Make sure a Discord role exists for `generation`, asking the bot to
    create one when there is none yet. Failures are logged and ignored.
    """
    if GenerationRole.objects.filter(generation=generation).exists():
        return

    try:
        role = DiscordBotAPI().create_generation_role(generation)
        GenerationRole.objects.get_or_create(
            generation=role["generation"],
            defaults={"discord_role_id": role["discord_role_id"]},
        )
    except (DiscordBotAPIException, DatabaseError) as e:
        log.error(f"Could not ensure generation role for {generation} exists: {e}")


@handle_store_errors
def create_generation_role(actor, generation):
    ensure_admin(actor)

    if GenerationRole.objects.filter(generation=generation).exists():
        raise GenerationRoleExists(f"Generation {generation} already exists")

    try:
        role = DiscordBotAPI().create_generation_role(generation)
    except DiscordBotAPIException as e:
        log.error(f"Error creating generation role: {e}")
        raise DiscordBotError(str(e)) from e

    generation_role, _ = GenerationRole.objects.update_or_create(
        generation=role["generation"],
        defaults={"discord_role_id": role["discord_role_id"]},
    )
    return generation_role


@handle_store_errors
def update_generation_roles(actor, roles):
    """
    Replace every generation role with `roles`, a list of dicts with
    `generation` and `discord_role_id`. Rows with a negative generation or
    a blank role id are dropped.
    """
    ensure_admin(actor)

    valid_roles = [
        GenerationRole(
            generation=role["generation"],
            discord_role_id=str(role["discord_role_id"]).strip(),
        )
        for role in roles
        if role["generation"] >= 0 and str(role["discord_role_id"]).strip() != ""
    ]

    generations_given = [role.generation for role in valid_roles]
    if len(set(generations_given)) != len(generations_given):
        raise ValidationError({"generation": ["Each generation can only be given once"]})

    with transaction.atomic():
        GenerationRole.objects.all().delete()
        GenerationRole.objects.bulk_create(valid_roles)

    return valid_roles


# -- Member profile


@handle_store_errors
def register_new_member(user, data):
    """
    Create the member profile of the signed in `user`.

    `data` is validated registration input: names, `status`, `grade` or
    `generation`, `student_number` and the `teams` to join. New members are
    never admins, whatever the input says.
    """
    if Member.objects.active().filter(user_id=user.pk).exists():
        raise AlreadyRegistered()

    status = data["status"]
    generation = resolve_generation(
        status, grade=data.get("grade"), generation=data.get("generation")
    )

    ensure_generation_role_exists(generation)

    try:
        with transaction.atomic():
            member = Member.objects.create(
                user=user,
                status=status,
                generation=generation,
                student_number=data.get("student_number") or None,
                discord_uid=user.discord_uid,
                avatar_url=user.avatar_url or None,
                is_admin=False,
            )
            MemberTeamRelation.objects.bulk_create(
                [MemberTeamRelation(member=member, team=team) for team in data.get("teams", [])]
            )
    except IntegrityError as e:
        # Another request registered the same user in the meantime
        if Member.objects.active().filter(user_id=user.pk).exists():
            raise AlreadyRegistered() from e
        raise

    registration_events.labels(member.get_status_display()).inc()
    log.info(f"Registered member {user.pk} in generation {generation}")

    if not member.discord_uid:
        log.warning(f"Member {user.pk} has no Discord user id, skipping Discord sync")
        return member

    DiscordBotAPI().update_nickname(
        member.discord_uid, full_name(data["last_name"], data["first_name"])
    )
    sync_roles(member)

    return member


def resync_discord_member(user, last_name, first_name):
    """
    Push the member's nickname and roles to Discord again, for members who
    left the server and came back
    """
    if not user.discord_uid:
        raise ValidationError({"discord_uid": ["No Discord user id is linked to this account"]})

    get_active_member(user)

    bot = DiscordBotAPI()
    bot.update_nickname(user.discord_uid, full_name(last_name, first_name))
    bot.sync_roles(user.discord_uid)


def _apply_profile(member, data):
    status = data["status"]
    member.generation = resolve_generation(
        status, grade=data.get("grade"), generation=data.get("generation")
    )
    member.status = status
    if "student_number" in data:
        member.student_number = data["student_number"] or None

    ensure_generation_role_exists(member.generation)
    member.save()


@handle_store_errors
def update_my_profile(user, data):
    member = get_active_member(user)
    _apply_profile(member, data)
    log.info(f"Member {user.pk} updated their profile")
    sync_roles(member)
    return member


@handle_store_errors
def update_member_admin(actor, member, data):
    ensure_admin(actor)
    _apply_profile(member, data)
    log.info(f"{actor.pk} updated member {member.user_id}")
    sync_roles(member)
    return member


@handle_store_errors
def toggle_admin_status(actor, member):
    ensure_not_self(actor, member, SELF_ADMIN_TOGGLE_MESSAGE)
    ensure_admin(actor)

    member.is_admin = not member.is_admin
    member.save(update_fields=["is_admin"])
    log.info(f"{actor.pk} set admin status of {member.user_id} to {member.is_admin}")
    sync_roles(member)
    return member


@handle_store_errors
def delete_member(actor, member):
    ensure_not_self(actor, member, SELF_DELETE_MESSAGE)
    ensure_admin(actor)

    member.soft_delete()
    log.info(f"{actor.pk} deleted member {member.user_id}")
    return member


@handle_store_errors
def update_member_teams(actor, member, teams):
    """Replace the teams `member` belongs to with `teams`"""
    ensure_admin(actor)

    with transaction.atomic():
        MemberTeamRelation.objects.filter(member=member).delete()
        MemberTeamRelation.objects.bulk_create(
            [MemberTeamRelation(member=member, team=team) for team in teams]
        )

    log.info(f"{actor.pk} set teams of {member.user_id} to {[team.name for team in teams]}")
    sync_roles(member)
    return member


# -- Teams


@handle_store_errors
def update_team_leaders(actor, team, members):
    """Replace the leaders of `team` with `members`"""
    ensure_admin(actor)

    with transaction.atomic():
        TeamLeader.objects.filter(team=team).delete()
        TeamLeader.objects.bulk_create([TeamLeader(team=team, member=member) for member in members])

    log.info(f"{actor.pk} set leaders of {team.name} to {[m.user_id for m in members]}")
    return team


# -- Batch operations


@handle_store_errors
def sync_all_roles(actor):
    """
    Ask the bot to sync the roles of every active member. Returns how many
    members a sync was requested for.
    """
    ensure_admin(actor)

    members = Member.objects.active().exclude(discord_uid="")
    bot = DiscordBotAPI()
    count = 0
    failed = 0
    for member in members:
        count += 1
        if not bot.sync_roles(member.discord_uid):
            failed += 1

    log.info(f"Requested Discord role sync for {count} members ({failed} failed)")
    return count


@handle_store_errors
def graduate_generation(actor, generation):
    """
    Make every active student of `generation` an alumnus. Returns the number
    of members updated.
    """
    ensure_admin(actor)

    graduates = Member.objects.active().students().filter(generation=generation)
    discord_uids = list(graduates.exclude(discord_uid="").values_list("discord_uid", flat=True))
    count = graduates.update(status=Member.ALUMNI)

    log.info(f"{actor.pk} graduated {count} members of generation {generation}")

    bot = DiscordBotAPI()
    for discord_uid in discord_uids:
        bot.sync_roles(discord_uid)
    return count


@handle_store_errors
def advance_academic_year(actor, anchor_generation=None):
    """
    Recalculate the status of every active student for a new academic year.

    `anchor_generation` is the generation of the high school third-years.
    When it is not given it is worked out from today's date. Returns the
    number of members whose status changed.
    """
    ensure_admin(actor)

    if anchor_generation is None:
        anchor_generation = generations.graduating_generation()

    students = Member.objects.active().students()
    changed = []
    for member in students:
        status = generations.status_for_generation(member.generation, anchor_generation)
        if status != member.status:
            member.status = status
            changed.append(member)

    with transaction.atomic():
        Member.objects.bulk_update(changed, ["status"])

    log.info(
        f"{actor.pk} advanced the academic year at {timezone.localdate()} "
        f"(anchor generation {anchor_generation}): {len(changed)} members changed"
    )

    for member in changed:
        sync_roles(member)
    return len(changed)
