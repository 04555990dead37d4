"""Runtime configuration.

Values are read from the environment once at import time, with defaults
suitable for local use.

Usage:
    from repokit.config import LOG_LEVEL
"""

import os


# =============================================================================
# LOGGING
# =============================================================================

# Root log level name (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("REPOKIT_LOG_LEVEL", "INFO").upper()

LOG_FORMAT = os.environ.get(
    "REPOKIT_LOG_FORMAT",
    "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)

LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
