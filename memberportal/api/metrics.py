# Third-party
from django_prometheus.conf import NAMESPACE
from prometheus_client import Counter

login_events = Counter(
    "django_memberportal_login_events",
    "Counter of login events",
    ["model"],
    namespace=NAMESPACE,
)

registration_events = Counter(
    "django_memberportal_registration_events",
    "Counter of member registrations",
    ["status"],
    namespace=NAMESPACE,
)

discord_bot_calls = Counter(
    "django_memberportal_discord_bot_calls",
    "Counter of calls made to the Discord bot API",
    ["endpoint", "outcome"],
    namespace=NAMESPACE,
)
