import secrets
import string
import time
from typing import Callable, Container, Optional

from ..core.config import settings
from ..core.exceptions import InvalidTimeFormat
from ..models.license_record import LicenseRecord
from .duration import is_lifetime, parse_duration

KEY_ALPHABET = string.ascii_lowercase + string.digits


def now_ms() -> int:
    return int(time.time() * 1000)


class KeyIssuer:
    """Generates unique API keys and builds new, unbound license records."""

    def __init__(self, key_length: Optional[int] = None, clock: Callable[[], int] = now_ms):
        self.key_length = key_length or settings.KEY_LENGTH
        self.clock = clock

    def generate_key(self, existing: Container[str] = ()) -> str:
        # Regenerate on collision with a key already in the registry
        while True:
            key = "".join(secrets.choice(KEY_ALPHABET) for _ in range(self.key_length))
            if key not in existing:
                return key

    def expiry_for(self, time_expression: str) -> Optional[int]:
        if is_lifetime(time_expression):
            return None
        seconds = parse_duration(time_expression)
        if seconds is None:
            raise InvalidTimeFormat()
        return self.clock() + seconds * 1000

    def issue(self, username: str, time_expression: str, existing: Container[str] = ()) -> LicenseRecord:
        expires_at = self.expiry_for(time_expression)
        return LicenseRecord(
            key=self.generate_key(existing),
            username=username,
            hwid=None,
            expires_at=expires_at,
        )
