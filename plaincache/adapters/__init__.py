"""Adapters - concrete implementations of the ports."""

from .storage import FileCache

__all__ = ['FileCache']
