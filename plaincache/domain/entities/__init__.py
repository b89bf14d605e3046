"""Domain entities."""

from .entry import CacheEntry

__all__ = ['CacheEntry']
