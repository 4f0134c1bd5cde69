# First-party/Local
from memberportal.settings.common import *  # noqa: F401,F403

ENV = "test"

LOGGING["loggers"]["django_structlog"]["level"] = "WARNING"  # noqa: F405
LOGGING["loggers"]["memberportal"]["level"] = "WARNING"  # noqa: F405

DATABASES = {
    "default": {
        "ENGINE": "django_prometheus.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

AUTHENTICATION_BACKENDS = [
    "rules.permissions.ObjectPermissionBackend",
    "django.contrib.auth.backends.ModelBackend",
]
MIDDLEWARE.remove("mozilla_django_oidc.middleware.SessionRefresh")  # noqa: F405
REST_FRAMEWORK["DEFAULT_AUTHENTICATION_CLASSES"].remove(  # noqa: F405
    "mozilla_django_oidc.contrib.drf.OIDCAuthentication",
)
OIDC_OP_JWKS_ENDPOINT = "https://example.com/.well-known/jwks.json"
OIDC_OP_LOGOUT_ENDPOINT = "https://oidc.idp.example.com/logout"
OIDC_RP_CLIENT_ID = "test-client-id"
OIDC_ALLOW_UNSECURED_JWT = True

CSRF_COOKIE_SECURE = False
SESSION_COOKIE_SECURE = False

STEM_BOT = {
    "api_url": "https://bot.example.com",
    "api_token": "test-bot-api-token",
    "timeout": 5,
}

TIME_ZONE = "Asia/Tokyo"
