"""Domain value objects."""

from .config import CacheConfig
from .key import is_valid_key, validate_key
from .ttl import TTL, ttl_to_seconds

__all__ = [
    'CacheConfig',
    'TTL',
    'is_valid_key',
    'validate_key',
    'ttl_to_seconds',
]
