"""
Lifecycle decisions for a single license record.

Pure functions: no I/O, no mutation. ``now`` is always epoch milliseconds.
"""

from typing import Optional

from ..core.exceptions import HwidMismatch, KeyExpired
from ..models.license_record import LicenseRecord


def is_expired(record: LicenseRecord, now: int) -> bool:
    """True once ``now`` is strictly past the expiry instant; lifetime keys never expire."""
    return record.expires_at is not None and now > record.expires_at


def can_bind(record: LicenseRecord, hwid: Optional[str]) -> bool:
    """An unbound key accepts any hardware id; a bound key only its own."""
    return record.hwid is None or record.hwid == hwid


def check_login(record: LicenseRecord, hwid: Optional[str], now: int) -> None:
    """Raise the first failing login rule. Expiry is checked before the hardware id."""
    if is_expired(record, now):
        raise KeyExpired()
    if not can_bind(record, hwid):
        raise HwidMismatch()
