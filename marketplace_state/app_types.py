"""Shared dataclasses and lightweight types used across modules."""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List

from marketplace_state.domain import Offer

Clock = Callable[[], int]


def wall_clock_ms() -> int:
    """Return the current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


class EntityKind(str, Enum):
    """Dashboard partitions held by the snapshot cache."""
    WORKER = "worker"
    CUSTOMER = "customer"


@dataclass(frozen=True)
class CacheEntry:
    """Dashboard payload with the time (ms since epoch) it was stored."""
    kind: EntityKind
    payload: Any
    stored_at: int


@dataclass(frozen=True)
class CategorizedOffers:
    """Offers split into display buckets, each sorted newest first.

    ``dropped`` holds records that matched no bucket rule, in input order.
    """
    active: List[Offer] = field(default_factory=list)
    expired: List[Offer] = field(default_factory=list)
    dropped: List[Offer] = field(default_factory=list)


@dataclass(frozen=True)
class OfferStatusBadge:
    """CSS colour classes and icon used to render an offer status."""
    color_class: str
    icon: str
