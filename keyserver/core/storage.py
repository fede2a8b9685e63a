import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Dict, Mapping

from pydantic import ValidationError

from .exceptions import PersistenceError
from ..models.license_record import LicenseRecord

logger = logging.getLogger(__name__)

Registry = Dict[str, LicenseRecord]


class JsonFileGateway:
    """Reads and rewrites the whole key registry as one JSON object.

    File layout: ``{"<key>": {"username": ..., "hwid": ..., "expiresAt": ...}}``
    with ``expiresAt`` in epoch milliseconds, ``null`` for lifetime keys.
    """

    def __init__(self, path):
        self.path = Path(path)

    def load(self) -> Registry:
        if not self.path.exists():
            logger.info(f"No key store at {self.path}, starting empty")
            return {}

        try:
            raw = self.path.read_text(encoding="utf-8")
            data = json.loads(raw)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read key store {self.path}, starting fresh: {e}")
            return {}

        if not isinstance(data, dict):
            logger.error(f"Key store {self.path} is not a JSON object, starting fresh")
            return {}

        registry: Registry = {}
        for key, entry in data.items():
            try:
                if not isinstance(entry, dict):
                    raise TypeError("entry is not an object")
                record = LicenseRecord.model_validate({**entry, "key": key})
            except (ValidationError, TypeError) as e:
                logger.warning(f"Skipping malformed key store entry {key!r}: {e}")
                continue
            # 0 was historically written for lifetime keys
            if not record.expires_at:
                record.expires_at = None
            registry[key] = record
        return registry

    def _file_mode(self) -> int:
        # mkstemp creates 0600 files; keep the existing mode or the umask default
        if self.path.exists():
            return stat.S_IMODE(self.path.stat().st_mode)
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask

    def save(self, registry: Mapping[str, LicenseRecord]) -> None:
        payload = {
            key: record.model_dump(by_alias=True, exclude={"key"})
            for key, record in registry.items()
        }
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=2)
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            logger.error(f"Failed to write key store {self.path}: {e}")
            raise PersistenceError() from e
