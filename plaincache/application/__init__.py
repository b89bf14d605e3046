"""Application layer - the caching contract."""

from .ports import Cache

__all__ = ['Cache']
