"""Per-session facade over a dashboard snapshot store.

A ``DashboardSession`` is created when a user session starts and closed when
it ends (logout or switching entity). Dashboard hooks receive it explicitly
and use it to decide whether a refetch is needed.
"""
from typing import Any, Callable, Optional

from marketplace_state import config
from marketplace_state.app_types import CacheEntry, Clock
from marketplace_state.errors import SessionClosedError
from marketplace_state.snapshot_store import InMemorySnapshotStore, KindLike, SnapshotStore, coerce_kind
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="dashboard_session")


class DashboardSession:
    """Owns one snapshot store for the lifetime of a user session."""

    def __init__(
        self,
        store: SnapshotStore | None = None,
        *,
        clock: Clock | None = None,
        settings: config.Settings | None = None,
    ) -> None:
        settings = settings or config.settings
        if store is not None and clock is not None:
            raise ValueError("Pass either a store or a clock, not both")
        self._store = store or InMemorySnapshotStore(clock=clock)
        self.default_max_age_ms = settings.dashboard_max_age_ms
        self._closed = False
        logger.debug("Dashboard session opened", extra={"default_max_age_ms": self.default_max_age_ms})

    def __enter__(self) -> "DashboardSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise SessionClosedError("Dashboard session is closed")

    def get_data(self, kind: KindLike) -> Optional[CacheEntry]:
        """Return the cached entry for a kind, or None on a cache miss."""
        self._ensure_open()
        return self._store.get(kind)

    def set_data(self, kind: KindLike, payload: Any) -> CacheEntry:
        """Write a freshly fetched payload through to the store."""
        self._ensure_open()
        return self._store.set(kind, payload)

    def clear_data(self, kind: KindLike) -> None:
        """Drop the cached payload for a kind."""
        self._ensure_open()
        self._store.clear(kind)

    def is_data_stale(self, kind: KindLike, max_age_ms: int | None = None) -> bool:
        """Return True if the kind must be refetched (missing or older than the window)."""
        self._ensure_open()
        if max_age_ms is None:
            max_age_ms = self.default_max_age_ms
        return self._store.is_stale(kind, max_age_ms)

    def load(
        self,
        kind: KindLike,
        fetch: Callable[[], Any],
        *,
        max_age_ms: int | None = None,
        force: bool = False,
    ) -> Any:
        """Return the cached payload when fresh, otherwise fetch and write it through.

        Errors raised by ``fetch`` propagate and leave the previous entry untouched.
        """
        kind = coerce_kind(kind)
        if not force and not self.is_data_stale(kind, max_age_ms):
            entry = self.get_data(kind)
            if entry is not None:
                logger.debug("Serving cached %s dashboard", kind.value)
                return entry.payload
        logger.debug("Fetching %s dashboard", kind.value, extra={"forced": force})
        payload = fetch()
        self.set_data(kind, payload)
        return payload

    def close(self) -> None:
        """Clear every entry and end the session; further use raises SessionClosedError."""
        if self._closed:
            return
        self._store.clear_all()
        self._closed = True
        logger.debug("Dashboard session closed")
