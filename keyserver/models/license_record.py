from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class LicenseRecord(BaseModel):
    """One issued key. ``expires_at`` is epoch milliseconds, ``None`` for lifetime keys."""

    model_config = ConfigDict(populate_by_name=True)

    key: str
    username: str
    hwid: Optional[str] = None
    expires_at: Optional[int] = Field(default=None, alias="expiresAt")

    @field_validator("expires_at", mode="before")
    @classmethod
    def truncate_fractional_millis(cls, value):
        # Older stores may hold fractional or string timestamps
        if isinstance(value, (float, str)):
            try:
                return int(float(value))
            except (ValueError, OverflowError):
                return value
        return value

    @property
    def is_lifetime(self) -> bool:
        return self.expires_at is None

    @property
    def is_bound(self) -> bool:
        return self.hwid is not None
