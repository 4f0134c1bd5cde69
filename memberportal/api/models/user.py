# Third-party
from django.contrib.auth.models import AbstractUser
from django.contrib.auth.signals import user_logged_in
from django.db import models

# First-party/Local
from memberportal.api.signals import prometheus_login_event


class User(AbstractUser):
    """
    An identity signed in through the OIDC provider. Holding a `User` row
    does not make someone a club member: that needs an active `Member`.
    """

    auth_id = models.CharField(max_length=128, primary_key=True)
    name = models.CharField(max_length=256, blank=True)
    discord_uid = models.CharField(max_length=64, blank=True)
    avatar_url = models.URLField(max_length=512, blank=True)

    REQUIRED_FIELDS = ["auth_id"]

    class Meta:
        db_table = "memberportal_user"
        ordering = ("username",)

    def __repr__(self):
        return f"<User: {self.username} ({self.auth_id})>"

    def get_full_name(self):
        return self.name

    @property
    def id(self):
        return self.pk

    @property
    def member(self):
        """
        The user's active member profile, or None when they have not
        registered (or their profile has been deleted)
        """
        return self.members.active().first()


user_logged_in.connect(prometheus_login_event)
