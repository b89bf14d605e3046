"""Cache port - interface for caching."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol, runtime_checkable

from ...domain.value_objects.ttl import TTL


@runtime_checkable
class Cache(Protocol):
    """Port for simple key-value caching operations.

    Keys are strings of 1 to 64 characters from ``[A-Za-z0-9_.]``. Every
    operation raises ``InvalidArgumentError`` for an illegal key, ttl or bulk
    input; storage failures are reported through the boolean results.
    """

    def get(self, key: str, default: Any = None) -> Any:
        """Fetch a value, or ``default`` on a miss or stale entry."""
        ...

    def set(self, key: str, value: Any, ttl: TTL = None) -> bool:
        """Store a value with an optional TTL (seconds or timedelta)."""
        ...

    def delete(self, key: str) -> bool:
        """Delete an item. False if it did not exist or removal failed."""
        ...

    def clear(self) -> bool:
        """Wipe every item."""
        ...

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        """Fetch several values as a key => value mapping."""
        ...

    def set_multiple(
        self,
        values: Mapping[str, Any] | Iterable[tuple[str, Any]],
        ttl: TTL = None,
    ) -> bool:
        """Store several key => value pairs with a shared TTL."""
        ...

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        """Delete several items."""
        ...

    def has(self, key: str) -> bool:
        """Check if an item is present.

        Only suitable for cache warming. Another process may remove the item
        right after this returns True, and expiration is not checked, so do
        not use it to guard a following get.
        """
        ...
