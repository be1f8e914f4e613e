"""Dashboard snapshot storage backends."""

from .base import DEFAULT_MAX_AGE_MS, KindLike, SnapshotStore, coerce_kind
from .memory import InMemorySnapshotStore

__all__ = [
    "DEFAULT_MAX_AGE_MS",
    "KindLike",
    "SnapshotStore",
    "InMemorySnapshotStore",
    "coerce_kind",
]
