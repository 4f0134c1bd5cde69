# Third-party
import structlog
from django.dispatch import receiver
from django_structlog.signals import bind_extra_request_metadata

# First-party/Local
from memberportal.api.metrics import login_events


@receiver(bind_extra_request_metadata)
def bind_auth_id(request, logger, **kwargs):
    user = getattr(request, "user", None)
    if user is not None and user.is_authenticated:
        structlog.contextvars.bind_contextvars(auth_id=user.pk)


def prometheus_login_event(sender, user, request, **kwargs):
    login_events.labels("user").inc()
