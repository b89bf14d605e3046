"""Ports - interfaces for external dependencies (Dependency Inversion)."""

from .cache import Cache

__all__ = ['Cache']
