"""Shared protocol and helpers for dashboard snapshot stores."""

from typing import Any, Optional, Protocol, Union

from marketplace_state.app_types import CacheEntry, EntityKind

DEFAULT_MAX_AGE_MS = 5 * 60 * 1000

KindLike = Union[EntityKind, str]


def coerce_kind(kind: KindLike) -> EntityKind:
    """Normalize a kind given as enum or string; unknown values raise ValueError."""
    if isinstance(kind, EntityKind):
        return kind
    return EntityKind(kind)


class SnapshotStore(Protocol):
    """Protocol for kind-keyed dashboard snapshot stores."""
    def get(self, kind: KindLike) -> Optional[CacheEntry]:
        """Return the current entry for a kind, or None if never stored or cleared."""

    def set(self, kind: KindLike, payload: Any) -> CacheEntry:
        """Store a payload under a kind, replacing any previous entry."""

    def clear(self, kind: KindLike) -> None:
        """Remove the entry for a kind without raising if it is absent."""

    def clear_all(self) -> None:
        """Remove every stored entry."""

    def is_stale(self, kind: KindLike, max_age_ms: int = DEFAULT_MAX_AGE_MS) -> bool:
        """Return True if the kind has no entry or its entry is older than max_age_ms."""

    def age_ms(self, kind: KindLike) -> Optional[int]:
        """Return milliseconds since the entry was stored, or None if absent."""
