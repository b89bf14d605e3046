"""Domain layer - cache entries, keys and expiration rules."""

from .entities.entry import CacheEntry
from .value_objects.config import CacheConfig
from .value_objects.key import is_valid_key, validate_key
from .value_objects.ttl import TTL, ttl_to_seconds

__all__ = [
    # Entities
    'CacheEntry',
    # Value Objects
    'CacheConfig',
    'TTL',
    'is_valid_key',
    'validate_key',
    'ttl_to_seconds',
]
