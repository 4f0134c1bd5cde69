# Third-party
from rest_framework import serializers

# First-party/Local
from memberportal.api.generation import GRADES
from memberportal.api.models import GenerationRole, Member, Team
from memberportal.api.models.member import STUDENT_NUMBER_REGEX


class TeamSerializer(serializers.ModelSerializer):
    leaders = serializers.SlugRelatedField(slug_field="user_id", many=True, read_only=True)

    class Meta:
        model = Team
        fields = ("id", "name", "discord_role_id", "leaders")


class TeamSimpleSerializer(serializers.ModelSerializer):
    class Meta:
        model = Team
        fields = ("id", "name", "discord_role_id")


def reject_duplicates(objects, message):
    if len(set(objects)) != len(objects):
        raise serializers.ValidationError(message)
    return objects


class MemberSerializer(serializers.ModelSerializer):
    """
    Read only view of a member. Pass a `names` mapping of Discord user id to
    display name in the context to include each member's name.
    """

    id = serializers.CharField(source="user_id", read_only=True)
    teams = TeamSimpleSerializer(many=True, read_only=True)
    name = serializers.SerializerMethodField()

    class Meta:
        model = Member
        fields = (
            "id",
            "name",
            "status",
            "generation",
            "student_number",
            "discord_uid",
            "avatar_url",
            "is_admin",
            "joined_at",
            "teams",
        )
        read_only_fields = fields

    def get_name(self, member):
        names = self.context.get("names") or {}
        return names.get(member.discord_uid) or member.user.name or "Unknown user"


class MemberProfileSerializer(serializers.Serializer):
    """
    Profile input shared by registration and profile edits. Students give
    their grade and the generation is calculated from it; alumni give their
    generation directly.
    """

    status = serializers.ChoiceField(choices=Member.STATUSES)
    grade = serializers.IntegerField(
        min_value=min(GRADES), max_value=max(GRADES), required=False, allow_null=True
    )
    generation = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    student_number = serializers.RegexField(
        STUDENT_NUMBER_REGEX,
        max_length=32,
        required=False,
        allow_null=True,
        allow_blank=True,
        error_messages={"invalid": "Student number must be digits only"},
    )

    def validate(self, data):
        status = data["status"]
        if status in (Member.JUNIOR_HIGH, Member.HIGH_SCHOOL) and not data.get("grade"):
            raise serializers.ValidationError({"grade": ["Grade is required for students"]})
        if status == Member.ALUMNI and not data.get("generation"):
            raise serializers.ValidationError({"generation": ["Generation is required for alumni"]})
        return data


class RegisterSerializer(MemberProfileSerializer):
    last_name = serializers.CharField(min_length=1)
    first_name = serializers.CharField(min_length=1)
    team_ids = serializers.PrimaryKeyRelatedField(
        queryset=Team.objects.all(), many=True, required=False, source="teams"
    )

    def validate_team_ids(self, teams):
        return reject_duplicates(teams, "Each team can only be chosen once")


class ResyncSerializer(serializers.Serializer):
    last_name = serializers.CharField(min_length=1)
    first_name = serializers.CharField(min_length=1)


class MemberTeamsSerializer(serializers.Serializer):
    team_ids = serializers.PrimaryKeyRelatedField(
        queryset=Team.objects.all(), many=True, allow_empty=True
    )

    def validate_team_ids(self, teams):
        return reject_duplicates(teams, "Each team can only be chosen once")


class TeamLeadersSerializer(serializers.Serializer):
    member_ids = serializers.SlugRelatedField(
        slug_field="user_id",
        queryset=Member.objects.active(),
        many=True,
        allow_empty=True,
    )

    def validate_member_ids(self, members):
        return reject_duplicates(members, "Each member can only be chosen once")


class GenerationRoleSerializer(serializers.ModelSerializer):
    class Meta:
        model = GenerationRole
        fields = ("generation", "discord_role_id")


class GenerationRoleItemSerializer(serializers.Serializer):
    """A row of the bulk generation role editor, which may be blank"""

    generation = serializers.IntegerField()
    discord_role_id = serializers.CharField(allow_blank=True)


class GenerationSerializer(serializers.Serializer):
    generation = serializers.IntegerField(min_value=1)


class AdvanceYearSerializer(serializers.Serializer):
    anchor_generation = serializers.IntegerField(min_value=0, required=False, allow_null=True)
