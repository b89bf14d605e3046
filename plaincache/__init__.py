"""plaincache - a file-system backed key-value cache with TTL expiration."""

__version__ = "1.0.0"

from .adapters.storage.file_cache import FileCache
from .application.ports.cache import Cache
from .domain.value_objects.config import CacheConfig
from .exceptions import (
    PlainCacheError,
    InvalidArgumentError,
)
from .utils.env import setup_logging

__all__ = [
    '__version__',
    'Cache',
    'CacheConfig',
    'FileCache',
    'setup_logging',
    # Exceptions
    'PlainCacheError',
    'InvalidArgumentError',
]
