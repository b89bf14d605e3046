"""File-system cache adapter - one file per key under a root directory."""

from __future__ import annotations

import logging
import os
import pickle
import time
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Callable

from pydantic import ValidationError

from ...domain.entities.entry import CacheEntry
from ...domain.value_objects.config import CacheConfig
from ...domain.value_objects.key import is_valid_key, validate_key
from ...domain.value_objects.ttl import TTL, ttl_to_seconds
from ...exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

# Errors that mean an entry file exists but cannot be turned back into a value
_DECODE_ERRORS = (
    pickle.UnpicklingError,
    EOFError,
    ValueError,
    AttributeError,
    ImportError,
    IndexError,
)


class FileCache:
    """Key-value cache storing each entry as a pickled file.

    The filename of an entry is its key, so the cache root must not be shared
    with unrelated files named like keys. Expired entries are removed lazily
    when they are read; nothing runs in the background.

    Validation problems (illegal key, ttl or bulk input) raise
    ``InvalidArgumentError``. Storage problems never raise: writes and
    deletes report False, reads fall back to the default.

    Example:
        >>> cache = FileCache("/tmp/my-cache")
        >>> cache.set("answer", 42, ttl=60)
        True
        >>> cache.get("answer")
        42
    """

    def __init__(
        self,
        directory: str | os.PathLike[str],
        *,
        default_ttl: int | None = None,
        pickle_protocol: int = pickle.DEFAULT_PROTOCOL,
        clock: Callable[[], float] | None = None,
    ):
        """Initialize the cache.

        Args:
            directory: Existing directory to store entries in
            default_ttl: TTL in seconds applied when set() receives none
            pickle_protocol: Protocol used to serialize entries
            clock: Returns the current Unix time (defaults to time.time)

        Raises:
            InvalidArgumentError: If directory is not an existing directory
                or another option is out of range
        """
        try:
            config = CacheConfig(
                directory=directory,
                default_ttl=default_ttl,
                pickle_protocol=pickle_protocol,
            )
        except ValidationError as e:
            loc = e.errors()[0].get("loc") or ("directory",)
            argument = str(loc[0])
            if argument == "directory":
                message = f'Path "{directory}" is not a directory.'
            else:
                message = f"Invalid {argument}: {e.errors()[0].get('msg')}"
            raise InvalidArgumentError(message, argument=argument) from e

        self._config = config
        self._clock = clock or time.time
        logger.debug(f"File cache rooted at {config.directory}")

    @classmethod
    def from_config(
        cls,
        config: CacheConfig,
        clock: Callable[[], float] | None = None,
    ) -> FileCache:
        """Create a cache from an already validated configuration."""
        return cls(
            config.directory,
            default_ttl=config.default_ttl,
            pickle_protocol=config.pickle_protocol,
            clock=clock,
        )

    @property
    def directory(self) -> Path:
        """Canonical absolute path of the cache root."""
        return self._config.directory

    @property
    def config(self) -> CacheConfig:
        return self._config

    # ------------------------------------------------------------------
    # Single item operations
    # ------------------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        """Fetch a value from the cache.

        Args:
            key: The unique key of this item in the cache
            default: Value to return if the key does not exist or is stale

        Returns:
            The stored value, or default on a miss

        Raises:
            InvalidArgumentError: If the key is not a legal value
        """
        path = self._item_path(key)
        if not self._is_entry(path):
            logger.debug(f"Cache miss: {key}")
            return default

        entry = self._read_entry(path)
        if entry is None:
            return default

        if entry.is_expired(self._clock()):
            logger.debug(f"Cache entry expired: {key}")
            self.delete(key)
            return default

        logger.debug(f"Cache hit: {key}")
        return entry.value

    def set(self, key: str, value: Any, ttl: TTL = None) -> bool:
        """Persist a value, overwriting any existing entry.

        Args:
            key: The key of the item to store
            value: The value to store, must be picklable
            ttl: None, seconds as int, or a timedelta. Zero or negative
                removes the item instead of storing it.

        Returns:
            True on success, False on failure

        Raises:
            InvalidArgumentError: If the key or ttl is not a legal value
        """
        path = self._item_path(key)
        seconds = ttl_to_seconds(ttl)
        if seconds is None:
            seconds = self._config.default_ttl

        if seconds is not None and seconds <= 0:
            if self._is_entry(path):
                return self.delete(key)
            return True

        entry = CacheEntry.create(value, seconds, self._clock())
        try:
            data = pickle.dumps(entry.to_record(), protocol=self._config.pickle_protocol)
        except (pickle.PicklingError, TypeError, AttributeError) as e:
            logger.warning(f"Cannot serialize value for {key}: {e}")
            return False

        try:
            path.write_bytes(data)
        except OSError as e:
            logger.warning(f"Failed to write cache entry {path}: {e}")
            return False

        logger.debug(f"Cached {key} (expires: {entry.expires})")
        return True

    def delete(self, key: str) -> bool:
        """Delete an item by its key.

        Returns:
            True if the item was removed. False if it did not exist or
            could not be removed.

        Raises:
            InvalidArgumentError: If the key is not a legal value
        """
        path = self._item_path(key)
        if not self._is_entry(path):
            return False
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.warning(f"Failed to delete cache entry {path}: {e}")
            return False
        return True

    def has(self, key: str) -> bool:
        """Determine whether an item is present in the cache.

        NOTE: only use this for cache warming. It does not look at the
        expiration time, and another process may remove the item right after
        this returns True.

        Raises:
            InvalidArgumentError: If the key is not a legal value
        """
        return self._is_entry(self._item_path(key))

    def clear(self) -> bool:
        """Wipe every entry in the cache root.

        Subdirectories and files whose names are not legal keys are left
        alone. Every entry is attempted even after a failure.

        Returns:
            True if the root could be listed and every entry was removed
        """
        try:
            children = list(self.directory.iterdir())
        except OSError as e:
            logger.warning(f"Failed to list cache directory {self.directory}: {e}")
            return False

        success = True
        removed = 0
        for child in children:
            if child.is_dir():
                continue
            if not is_valid_key(child.name):
                logger.debug(f"Skipping foreign file in cache root: {child.name}")
                continue
            if self.delete(child.name):
                removed += 1
            else:
                success = False

        logger.debug(f"Cleared {removed} cache entries from {self.directory}")
        return success

    # ------------------------------------------------------------------
    # Bulk operations
    # ------------------------------------------------------------------

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        """Fetch several items at once.

        Args:
            keys: Keys to fetch
            default: Value for keys that do not exist or are stale

        Returns:
            Mapping of each requested key to its value or default, in
            request order

        Raises:
            InvalidArgumentError: If keys is not iterable or any key is not
                a legal value
        """
        _ensure_iterable(keys, "keys")
        return {key: self.get(key, default) for key in keys}

    def set_multiple(
        self,
        values: Mapping[str, Any] | Iterable[tuple[str, Any]],
        ttl: TTL = None,
    ) -> bool:
        """Persist several key => value pairs with a shared TTL.

        Stops at the first item that fails; items already written stay
        written.

        Args:
            values: A mapping, or an iterable of (key, value) pairs
            ttl: Applied to every item, as in set()

        Returns:
            True if every item was stored

        Raises:
            InvalidArgumentError: If values is not iterable or any key or the
                ttl is not a legal value
        """
        _ensure_iterable(values, "values")
        items = values.items() if isinstance(values, Mapping) else values

        for item in items:
            try:
                key, value = item
            except (TypeError, ValueError) as e:
                raise InvalidArgumentError(
                    f"Expected (key, value) pairs, got {item!r}", argument="values"
                ) from e
            if not self.set(key, value, ttl):
                logger.debug(f"set_multiple stopped at {key}")
                return False
        return True

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        """Delete several items.

        Stops at the first item that cannot be deleted, including one that
        does not exist.

        Returns:
            True if every item was removed

        Raises:
            InvalidArgumentError: If keys is not iterable or any key is not
                a legal value
        """
        _ensure_iterable(keys, "keys")
        for key in keys:
            if not self.delete(key):
                logger.debug(f"delete_multiple stopped at {key}")
                return False
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _item_path(self, key: object) -> Path:
        return self.directory / validate_key(key)

    @staticmethod
    def _is_entry(path: Path) -> bool:
        return path.exists() and not path.is_dir()

    def _read_entry(self, path: Path) -> CacheEntry | None:
        """Load the entry stored at ``path``, or None if it is unreadable."""
        try:
            with open(path, 'rb') as f:
                record = pickle.load(f)
        except FileNotFoundError:
            # Removed between the existence check and the read
            return None
        except OSError as e:
            logger.warning(f"Failed to read cache entry {path}: {e}")
            return None
        except _DECODE_ERRORS as e:
            logger.warning(f"Corrupt cache entry {path}: {e}")
            return None

        try:
            return CacheEntry.from_record(record)
        except ValueError as e:
            logger.warning(f"Corrupt cache entry {path}: {e}")
            return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.directory)!r})"


def _ensure_iterable(values: object, argument: str) -> None:
    """Reject scalars passed where a collection is expected.

    Strings and bytes are iterable in Python but are treated as scalars here.
    """
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise InvalidArgumentError(
            f"{argument.capitalize()} are not iterable.", argument=argument
        )
