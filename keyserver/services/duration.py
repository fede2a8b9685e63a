import re
from typing import Optional

# Seconds per unit; a month is 30 days and a year 365 days
UNIT_SECONDS = {
    "min": 60,
    "h": 3600,
    "d": 86400,
    "m": 2592000,
    "y": 31536000,
}

DURATION_RE = re.compile(r"(\d+)(min|[dhmy])", re.IGNORECASE | re.ASCII)

LIFETIME = "lifetime"


def is_lifetime(text: str) -> bool:
    return isinstance(text, str) and text.lower() == LIFETIME


def parse_duration(text: str) -> Optional[int]:
    """Parse ``<integer><unit>`` (e.g. ``30d``, ``1MIN``) into seconds.

    Returns ``None`` for anything else, including ``lifetime`` and zero
    durations. Never raises.
    """
    if not isinstance(text, str):
        return None
    match = DURATION_RE.fullmatch(text)
    if not match:
        return None
    value = int(match.group(1))
    if value == 0:
        return None
    return value * UNIT_SECONDS[match.group(2).lower()]
