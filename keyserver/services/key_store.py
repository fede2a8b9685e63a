"""
In-memory key registry.

``KeyStore`` is the only writer of the registry. Each public operation runs
its whole read-modify-persist sequence under one lock, and a mutation only
stands once the registry has been written to disk: if the save fails the
in-memory change is undone and ``PersistenceError`` propagates.
"""

import logging
import threading
from typing import Callable, List, Optional

from ..core.exceptions import InvalidKey, KeyNotFound, MissingField
from ..core.storage import JsonFileGateway, Registry
from ..models.license_record import LicenseRecord
from . import policy
from .issuer import KeyIssuer, now_ms

logger = logging.getLogger(__name__)


class KeyStore:
    def __init__(
        self,
        gateway: JsonFileGateway,
        issuer: Optional[KeyIssuer] = None,
        clock: Callable[[], int] = now_ms,
    ):
        self.gateway = gateway
        self.clock = clock
        self.issuer = issuer or KeyIssuer(clock=clock)
        self._lock = threading.Lock()
        self._keys: Registry = gateway.load()

    def __len__(self) -> int:
        with self._lock:
            return len(self._keys)

    def register(self, username: Optional[str], time_expression: Optional[str]) -> LicenseRecord:
        if not username or not time_expression:
            raise MissingField()

        with self._lock:
            record = self.issuer.issue(username, time_expression, existing=self._keys)
            self._keys[record.key] = record
            try:
                self.gateway.save(self._keys)
            except Exception:
                del self._keys[record.key]
                raise
            logger.info(f"Registered key {record.key} for {username!r}")
            return record.model_copy()

    def login(self, key: Optional[str], hwid: Optional[str]) -> LicenseRecord:
        with self._lock:
            record = self._keys.get(key) if key else None
            if record is None:
                raise InvalidKey()
            policy.check_login(record, hwid, self.clock())

            if record.hwid is None:
                if not hwid:
                    raise MissingField("HWID is required")
                record.hwid = hwid
                try:
                    self.gateway.save(self._keys)
                except Exception:
                    record.hwid = None
                    raise
                logger.info(f"Bound key {key} to a hardware id")
            return record.model_copy()

    def list(self) -> List[LicenseRecord]:
        with self._lock:
            return [record.model_copy() for record in self._keys.values()]

    def reset_hwid(self, key: Optional[str]) -> None:
        with self._lock:
            record = self._keys.get(key) if key else None
            if record is None:
                raise KeyNotFound()
            previous = record.hwid
            record.hwid = None
            try:
                self.gateway.save(self._keys)
            except Exception:
                record.hwid = previous
                raise
            logger.info(f"Reset hardware id for key {key}")

    def delete_key(self, key: Optional[str]) -> None:
        with self._lock:
            if not key or key not in self._keys:
                raise KeyNotFound()
            record = self._keys.pop(key)
            try:
                self.gateway.save(self._keys)
            except Exception:
                self._keys[key] = record
                raise
            logger.info(f"Deleted key {key}")
