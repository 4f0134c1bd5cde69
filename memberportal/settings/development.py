# First-party/Local
from memberportal.settings.common import *  # noqa: F401,F403

# Enable debugging
DEBUG = True

# Allow all hostnames to access the server
ALLOWED_HOSTS = ["*"]

CSRF_COOKIE_SECURE = False
SESSION_COOKIE_SECURE = False

# Human readable logs while developing
LOGGING["handlers"]["console"]["formatter"] = "plain_console"  # noqa: F405

# Reduce log level of Django internals
LOGGING["loggers"]["django"] = {"handlers": ["console"], "level": "WARNING"}  # noqa: F405
