from django.db import models
from django_extensions.db.models import TimeStampedModel


class GenerationRole(TimeStampedModel):
    """
    The Discord role handed to every member of a generation
    """

    generation = models.PositiveIntegerField(unique=True)
    discord_role_id = models.CharField(max_length=64, blank=False)

    class Meta:
        db_table = "memberportal_generationrole"
        ordering = ("-generation",)

    def __repr__(self):
        return f"<GenerationRole: {self.generation} ({self.discord_role_id})>"
