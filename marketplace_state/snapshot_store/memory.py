"""In-memory dashboard snapshot store with advisory staleness."""

import threading
from typing import Any, Optional

from marketplace_state.app_types import CacheEntry, Clock, EntityKind, wall_clock_ms
from marketplace_state.snapshot_store.base import DEFAULT_MAX_AGE_MS, KindLike, SnapshotStore, coerce_kind

from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="snapshot_store/in_memory_snapshot_store")


class InMemorySnapshotStore(SnapshotStore):
    """Thread-safe, kind-keyed store of the last fetched dashboard payloads.

    Entries never expire on their own. Staleness is computed on read against a
    caller-supplied window and does not evict anything.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        """Initialize the store with an optional millisecond clock."""
        logger.debug("Initializing InMemorySnapshotStore")
        self._clock = clock or wall_clock_ms
        self._entries: dict[EntityKind, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, kind: KindLike) -> Optional[CacheEntry]:
        """Return the current entry for a kind, or None."""
        return self._entries.get(coerce_kind(kind))

    def set(self, kind: KindLike, payload: Any) -> CacheEntry:
        """Store a payload, replacing any previous entry in a single swap."""
        kind = coerce_kind(kind)
        entry = CacheEntry(kind=kind, payload=payload, stored_at=self._clock())
        with self._lock:
            self._entries[kind] = entry
        logger.debug("Stored %s snapshot", kind.value, extra={"stored_at": entry.stored_at})
        return entry

    def clear(self, kind: KindLike) -> None:
        """Remove the entry for a kind if present."""
        kind = coerce_kind(kind)
        with self._lock:
            removed = self._entries.pop(kind, None)
        if removed is not None:
            logger.debug("Cleared %s snapshot", kind.value)

    def clear_all(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._entries.clear()

    def age_ms(self, kind: KindLike) -> Optional[int]:
        """Return milliseconds elapsed since the entry was stored, or None if absent."""
        entry = self.get(kind)
        if entry is None:
            return None
        return self._clock() - entry.stored_at

    def is_stale(self, kind: KindLike, max_age_ms: int = DEFAULT_MAX_AGE_MS) -> bool:
        """Return True if there is no entry or it is older than max_age_ms."""
        age = self.age_ms(kind)
        if age is None:
            return True
        return age > max_age_ms
