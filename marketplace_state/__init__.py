"""Client-side dashboard state for the service marketplace: snapshot cache and offer classification."""

from .app_types import CacheEntry, CategorizedOffers, EntityKind, OfferStatusBadge
from .dashboard_session import DashboardSession
from .domain import Offer, OfferStatus
from .errors import InvalidOfferData, MarketplaceStateError, SessionClosedError
from .offer_classifier import categorize_offers, offer_status_badge
from .snapshot_store import InMemorySnapshotStore, SnapshotStore

__all__ = [
    "CacheEntry",
    "CategorizedOffers",
    "DashboardSession",
    "EntityKind",
    "InMemorySnapshotStore",
    "InvalidOfferData",
    "MarketplaceStateError",
    "Offer",
    "OfferStatus",
    "OfferStatusBadge",
    "SessionClosedError",
    "SnapshotStore",
    "categorize_offers",
    "offer_status_badge",
]
