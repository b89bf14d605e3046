"""Configuration and constants for the plaincache project."""

import re


# Cache keys
# Only these characters may appear in a key; no path separators, no escaping.
KEY_MAX_LENGTH = 64
KEY_PATTERN: re.Pattern[str] = re.compile(r"^[A-Za-z0-9_.]{1,%d}$" % KEY_MAX_LENGTH)


# On-disk record layout
RECORD_EXPIRES_FIELD = "expires"
RECORD_VALUE_FIELD = "value"


# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
