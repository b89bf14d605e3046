"""Storage adapters."""

from .file_cache import FileCache

__all__ = ['FileCache']
