# Standard library
import uuid

# Third-party
from django.db import models
from django_extensions.db.models import TimeStampedModel


class Team(TimeStampedModel):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=256, blank=False, unique=True)
    discord_role_id = models.CharField(max_length=64, blank=False)

    leaders = models.ManyToManyField(
        "Member", through="TeamLeader", related_name="led_teams"
    )

    class Meta:
        db_table = "memberportal_team"
        ordering = ("name",)

    def __repr__(self):
        return f"<Team: {self.name}>"
