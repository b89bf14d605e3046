"""Cache entry entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...config import RECORD_EXPIRES_FIELD, RECORD_VALUE_FIELD


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """A stored value with its absolute expiration time.

    ``expires`` is a Unix timestamp, or None for entries that never expire.
    """
    value: Any
    expires: float | None = None

    @classmethod
    def create(cls, value: Any, ttl: int | None, now: float) -> CacheEntry:
        """Build an entry expiring ``ttl`` seconds after ``now``."""
        if ttl is None:
            return cls(value)
        return cls(value, now + ttl)

    def is_expired(self, now: float) -> bool:
        """Check if the entry is stale at ``now``."""
        return self.expires is not None and self.expires < now

    def to_record(self) -> dict[str, Any]:
        return {RECORD_EXPIRES_FIELD: self.expires, RECORD_VALUE_FIELD: self.value}

    @classmethod
    def from_record(cls, record: Any) -> CacheEntry:
        """Rebuild an entry from its on-disk record.

        Raises:
            ValueError: If the record does not have the expected layout
        """
        if not isinstance(record, dict) or RECORD_VALUE_FIELD not in record:
            raise ValueError(f"Malformed cache record: {type(record).__name__}")
        expires = record.get(RECORD_EXPIRES_FIELD)
        if expires is not None and not isinstance(expires, (int, float)):
            raise ValueError(f"Malformed expiration: {expires!r}")
        return cls(record[RECORD_VALUE_FIELD], expires)
