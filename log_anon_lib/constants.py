"""
Constants and configuration for the log‑anon library.

All values are loaded from environment variables, allowing the deployment
environment to control behaviour without code changes.  Values are read once,
at import time.
"""

import os


class _DontChangeMe:
    MAIN_ENV_PREFIX = "LOG_ANON_"


# Data types handled by the process-wide default anonymizer, in precedence order
DEFAULT_DATA_TYPES = [
    _t.strip()
    for _t in os.environ.get(
        f"{_DontChangeMe.MAIN_ENV_PREFIX}DEFAULT_DATA_TYPES",
        "Email,CreditCard,IP4,IP6,URL",
    ).split(",")
    if _t.strip()
]

# Size (in bytes) of a randomly generated salt
SALT_LENGTH = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}SALT_LENGTH", "20").strip()
)

# Default logging level
LOG_LEVEL = os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "INFO").strip()

# Separator placed between a tag and an encoded token
TAG_SEPARATOR = ":"
