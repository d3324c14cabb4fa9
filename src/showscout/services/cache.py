"""In-memory TTL cache for pipeline results."""

import logging
import time
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class ResultCache:
    """
    Small key/value cache whose entries expire as a whole after a TTL.

    The pipeline stores a single entry under a fixed key; entries are only
    ever replaced, never partially updated.
    """

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[float, Any]] = {}

    def get(self, key: str) -> Any | None:
        """Return the cached value, or None if missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        expires_at, value = entry
        if self._clock() >= expires_at:
            logger.debug(f"Cache entry expired: {key}")
            del self._entries[key]
            return None

        return value

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        """Store a value, replacing any existing entry."""
        ttl = self.ttl_seconds if ttl is None else ttl
        self._entries[key] = (self._clock() + ttl, value)

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
