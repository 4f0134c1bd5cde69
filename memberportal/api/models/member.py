# Third-party
from django.core.validators import MinValueValidator, RegexValidator
from django.db import models
from django.utils import timezone

STUDENT_NUMBER_REGEX = r"^[0-9]+$"


class MemberQuerySet(models.QuerySet):
    def active(self):
        return self.filter(deleted_at__isnull=True)

    def students(self):
        return self.exclude(status=Member.ALUMNI)


class Member(models.Model):
    """
    A registered club member. Members are never removed, they are soft
    deleted by setting `deleted_at`.
    """

    JUNIOR_HIGH = 0
    HIGH_SCHOOL = 1
    ALUMNI = 2

    STATUSES = [
        (JUNIOR_HIGH, "Junior high school"),
        (HIGH_SCHOOL, "High school"),
        (ALUMNI, "Alumni"),
    ]

    user = models.ForeignKey("User", on_delete=models.CASCADE, related_name="members")
    status = models.PositiveSmallIntegerField(choices=STATUSES)
    generation = models.PositiveIntegerField(validators=[MinValueValidator(0)])
    student_number = models.CharField(
        max_length=32,
        blank=True,
        null=True,
        validators=[RegexValidator(STUDENT_NUMBER_REGEX, "Student number must be digits only")],
    )
    discord_uid = models.CharField(max_length=64, blank=True)
    avatar_url = models.URLField(max_length=512, blank=True, null=True)
    is_admin = models.BooleanField(default=False)
    joined_at = models.DateTimeField(auto_now_add=True)
    deleted_at = models.DateTimeField(blank=True, null=True)

    teams = models.ManyToManyField("Team", through="MemberTeamRelation", related_name="members")

    objects = MemberQuerySet.as_manager()

    class Meta:
        db_table = "memberportal_member"
        ordering = ("-generation", "student_number")
        constraints = [
            models.UniqueConstraint(
                fields=["user"],
                condition=models.Q(deleted_at__isnull=True),
                name="unique_active_member_per_user",
            ),
        ]

    def __repr__(self):
        return f"<Member: {self.user_id} (generation {self.generation})>"

    @property
    def is_active(self):
        return self.deleted_at is None

    def soft_delete(self):
        self.deleted_at = timezone.now()
        self.save(update_fields=["deleted_at"])
