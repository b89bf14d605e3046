"""Cache key value object."""

from __future__ import annotations

from ...config import KEY_MAX_LENGTH, KEY_PATTERN
from ...exceptions import InvalidArgumentError


def validate_key(key: object) -> str:
    """Check that ``key`` is a legal cache key and return it.

    A legal key is a ``str`` of 1 to 64 characters from ``[A-Za-z0-9_.]``.
    Since the key doubles as a filename inside the cache root, this is the
    only thing keeping callers out of other directories.

    Raises:
        InvalidArgumentError: If the key is not a legal value
    """
    if not isinstance(key, str) or not KEY_PATTERN.fullmatch(key):
        raise InvalidArgumentError(
            f'Key "{key}" is not legal: expected 1 to {KEY_MAX_LENGTH} '
            "characters from [A-Za-z0-9_.]",
            argument="key",
        )
    return key


def is_valid_key(key: object) -> bool:
    """Check whether ``key`` is a legal cache key without raising."""
    return isinstance(key, str) and KEY_PATTERN.fullmatch(key) is not None
