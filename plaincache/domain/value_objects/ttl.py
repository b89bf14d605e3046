"""Time-to-live normalization."""

from __future__ import annotations

from datetime import timedelta
from typing import Union

from ...exceptions import InvalidArgumentError

TTL = Union[int, timedelta, None]


def ttl_to_seconds(ttl: TTL) -> int | None:
    """Convert a ttl argument to a whole number of seconds.

    Args:
        ttl: None, an int number of seconds, or a timedelta

    Returns:
        None when no ttl was given, otherwise the ttl in seconds. The result
        may be zero or negative, which callers treat as already expired.

    Raises:
        InvalidArgumentError: If ttl is of any other type
    """
    if ttl is None:
        return None
    # bool is an int subclass but never a meaningful duration
    if isinstance(ttl, bool):
        raise InvalidArgumentError("Ttl must either be None, int or timedelta.", argument="ttl")
    if isinstance(ttl, int):
        return ttl
    if isinstance(ttl, timedelta):
        return int(ttl.total_seconds())
    raise InvalidArgumentError("Ttl must either be None, int or timedelta.", argument="ttl")
