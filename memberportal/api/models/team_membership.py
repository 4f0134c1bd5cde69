from django.db import models
from django_extensions.db.models import TimeStampedModel


class MemberTeamRelation(TimeStampedModel):
    """
    Member's membership of a team. The set of relations for a member is
    replaced wholesale whenever their teams are edited.
    """

    member = models.ForeignKey("Member", on_delete=models.CASCADE, related_name="team_relations")
    team = models.ForeignKey("Team", on_delete=models.CASCADE, related_name="member_relations")

    class Meta:
        db_table = "memberportal_memberteamrelation"
        unique_together = (
            # a member can be in a team only once
            ("member", "team"),
        )


class TeamLeader(TimeStampedModel):
    team = models.ForeignKey("Team", on_delete=models.CASCADE, related_name="leader_relations")
    member = models.ForeignKey("Member", on_delete=models.CASCADE, related_name="leader_relations")

    class Meta:
        db_table = "memberportal_teamleader"
        unique_together = (("team", "member"),)
