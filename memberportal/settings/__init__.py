# First-party/Local
from memberportal.settings.common import *  # noqa: F401,F403
