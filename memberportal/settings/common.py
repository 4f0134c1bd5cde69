# Standard library
import os
import sys
from os.path import abspath, dirname, join

# Third-party
import structlog

# Name of the deployment environment (dev/prod)
ENV = os.environ.get("ENV", "dev")

# -- Paths

# Name of the project
PROJECT_NAME = "memberportal"

# Absolute path of project Django directory
DJANGO_ROOT = dirname(dirname(abspath(__file__)))

# Absolute path of project directory
PROJECT_ROOT = dirname(DJANGO_ROOT)

# Directory to collect static files into
STATIC_ROOT = join(PROJECT_ROOT, "run", "static")


# -- Application

INSTALLED_APPS = [
    # Django Admin
    "django.contrib.admin",
    # Django auth system
    "django.contrib.auth",
    # OIDC client
    "mozilla_django_oidc",
    # Django models
    "django.contrib.contenttypes",
    # Django sessions
    "django.contrib.sessions",
    # Django flash messages
    "django.contrib.messages",
    # Django collect static files into a single location
    "django.contrib.staticfiles",
    # Provides shell_plus, runserver_plus, etc
    "django_extensions",
    # Provides filter backend for use with Django REST Framework
    "django_filters",
    # Django REST Framework
    "rest_framework",
    # Django Rules object permissions
    "rules",
    # Member portal API
    "memberportal.api",
    # Member portal CLI tools
    "memberportal.cli",
    # Metrics
    "django_prometheus",
]

MIDDLEWARE = [
    "django_prometheus.middleware.PrometheusBeforeMiddleware",
    "memberportal.middleware.DisableClientSideCachingMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    # Check user's OIDC token is still valid
    "mozilla_django_oidc.middleware.SessionRefresh",
    # Structured logging
    "django_structlog.middlewares.RequestMiddleware",
    "django_prometheus.middleware.PrometheusAfterMiddleware",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ]
        },
    },
]


# -- Auth

# List of classes used when attempting to authenticate a user
AUTHENTICATION_BACKENDS = [
    # Needed for OIDC auth
    "memberportal.oidc.OIDCSubAuthenticationBackend",
    # Needed for the Django admin
    "django.contrib.auth.backends.ModelBackend",
    # Needed for object permissions
    "rules.permissions.ObjectPermissionBackend",
]

# List of validators used to check the strength of users' passwords
AUTH_PASSWORD_VALIDATORS = []

# Custom user model class
AUTH_USER_MODEL = "api.User"

# URL where requests are redirected for login
# This is set to the mozilla-django-oidc login view name
LOGIN_URL = "oidc_authentication_init"

# URL where requests are redirected after login
LOGIN_REDIRECT_URL = os.environ.get("LOGIN_REDIRECT_URL", "/api/v1/members/me/")

# URL where requests are redirected after logging out (if not specified)
LOGOUT_REDIRECT_URL = "/"

# URL where requests are redirected after a failed login
LOGIN_REDIRECT_URL_FAILURE = os.environ.get("LOGIN_REDIRECT_URL_FAILURE", "/")

# Length of time it takes for an OIDC ID token to expire (default 12 hours)
OIDC_RENEW_ID_TOKEN_EXPIRY_SECONDS = 60 * 60 * 12  # 12 hours

# Gracefully handle state mismatch
OIDC_CALLBACK_CLASS = "memberportal.oidc.StateMismatchHandler"

# OIDC endpoints
OIDC_OP_AUTHORIZATION_ENDPOINT = os.environ.get("OIDC_OP_AUTHORIZATION_ENDPOINT")
OIDC_OP_JWKS_ENDPOINT = os.environ.get("OIDC_OP_JWKS_ENDPOINT")
OIDC_OP_TOKEN_ENDPOINT = os.environ.get("OIDC_OP_TOKEN_ENDPOINT")
OIDC_OP_USER_ENDPOINT = os.environ.get("OIDC_OP_USER_ENDPOINT")

# Provider logout endpoint, called by `memberportal.oidc.logout`
OIDC_OP_LOGOUT_ENDPOINT = os.environ.get("OIDC_OP_LOGOUT_ENDPOINT")
OIDC_OP_LOGOUT_URL_METHOD = "memberportal.oidc.logout"

# OIDC client secret
OIDC_RP_CLIENT_ID = os.environ.get("OIDC_CLIENT_ID")
OIDC_RP_CLIENT_SECRET = os.environ.get("OIDC_CLIENT_SECRET")

# OIDC JWT signing algorithm
OIDC_RP_SIGN_ALGO = os.environ.get("OIDC_RP_SIGN_ALGO", "RS256")

OIDC_RP_SCOPES = "openid profile"

# OIDC claims. The provider signs users in with their Discord account and
# exposes the Discord user id as `provider_id`.
OIDC_FIELD_NAME = os.environ.get("OIDC_FIELD_NAME", "name")
OIDC_FIELD_USERNAME = os.environ.get("OIDC_FIELD_USERNAME", "preferred_username")
OIDC_FIELD_DISCORD_UID = os.environ.get("OIDC_FIELD_DISCORD_UID", "provider_id")
OIDC_FIELD_AVATAR = os.environ.get("OIDC_FIELD_AVATAR", "picture")
OIDC_STORE_ID_TOKEN = True


# -- Security

SECRET_KEY = os.environ.get("SECRET_KEY", "change-me")

# Whitelist values for the HTTP Host header, to prevent certain attacks
ALLOWED_HOSTS = [host for host in os.environ.get("ALLOWED_HOSTS", "").split() if host]

# Sets the X-Content-Type-Options: nosniff header
SECURE_CONTENT_TYPE_NOSNIFF = True

# Secure the CSRF cookie
CSRF_COOKIE_SECURE = True
CSRF_COOKIE_HTTPONLY = True

# Secure the session cookie
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SECURE = True


# -- Running Django

# Path to WSGI application
WSGI_APPLICATION = f"{PROJECT_NAME}.wsgi.application"

# Path to root URL configuration
ROOT_URLCONF = f"{PROJECT_NAME}.urls"

# URL path where static files are served
STATIC_URL = "/static/"


# -- Debug

# Activates debugging
DEBUG = str(os.environ.get("DEBUG", False)).lower() == "true"

# -- Database
DB_HOST = os.environ.get("DB_HOST", "127.0.0.1")
ENABLE_DB_SSL = (
    str(os.environ.get("ENABLE_DB_SSL", DB_HOST not in ["127.0.0.1", "localhost"])).lower()
    == "true"
)
DATABASES = {
    "default": {
        "ENGINE": "django_prometheus.db.backends.postgresql",
        "NAME": os.environ.get("DB_NAME", PROJECT_NAME),
        "USER": os.environ.get("DB_USER", ""),
        "PASSWORD": os.environ.get("DB_PASSWORD", ""),
        "HOST": DB_HOST,
        "PORT": os.environ.get("DB_PORT", "5432"),
    }
}

if ENABLE_DB_SSL:
    DATABASES["default"]["OPTIONS"] = {"sslmode": "require"}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# -- Internationalization

USE_I18N = False

LANGUAGE_CODE = "ja"

# Make Django use timezone-aware datetimes internally
USE_TZ = True

# Time zone used to decide "today" for the academic year
TIME_ZONE = os.environ.get("TIME_ZONE", "Asia/Tokyo")


# -- Django REST Framework

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "mozilla_django_oidc.contrib.drf.OIDCAuthentication",
        # Allow the frontend to call the api via session
        "rest_framework.authentication.SessionAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.IsAuthenticated"],
    "DEFAULT_FILTER_BACKENDS": ["django_filters.rest_framework.DjangoFilterBackend"],
}


# -- Sentry error tracking

if os.environ.get("SENTRY_DSN"):
    # Third-party
    import sentry_sdk
    from sentry_sdk.integrations.django import DjangoIntegration

    sentry_sdk.init(
        dsn=os.environ["SENTRY_DSN"],
        environment=ENV,
        integrations=[DjangoIntegration()],
        traces_sample_rate=0.0,
        send_default_pii=True,
    )
    if "shell" in sys.argv:
        sentry_sdk.set_tag("RunningIn", "Shell")


# -- Static files

STATICFILES_FINDERS = [
    "django.contrib.staticfiles.finders.FileSystemFinder",
    "django.contrib.staticfiles.finders.AppDirectoriesFinder",
]


# -- Prometheus

PROMETHEUS_EXPORT_MIGRATIONS = False


# -- Discord bot (STEM bot) API
STEM_BOT = {
    "api_url": os.environ.get("STEM_BOT_API_URL"),
    "api_token": os.environ.get("STEM_BOT_API_BEARER_TOKEN"),
    "timeout": int(os.environ.get("STEM_BOT_API_TIMEOUT", 10)),
}


# -- Structured logging
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json_formatter": {
            "()": structlog.stdlib.ProcessorFormatter,
            "processor": structlog.processors.JSONRenderer(),
        },
        "plain_console": {
            "()": structlog.stdlib.ProcessorFormatter,
            "processor": structlog.dev.ConsoleRenderer(),
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json_formatter",
        },
    },
    "loggers": {
        "django_structlog": {
            "handlers": [
                "console",
            ],
            "level": "INFO",
        },
        "memberportal": {
            "handlers": [
                "console",
            ],
            "level": "INFO",
        },
    },
}

structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)
