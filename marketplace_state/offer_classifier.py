"""Offer lifecycle classification for worker and customer offer lists.

Offers are split into an *active* bucket (still actionable) and an *expired*
bucket (no longer actionable), each sorted newest first:

- pending offers are active until they are older than the expiry window
- accepted offers with a payment session are active (checkout in progress)
- rejected and withdrawn offers are expired

Accepted offers without a payment session and completed offers match no rule
and are left out of both buckets. Completed offers surface as bookings; the
accepted-without-session case is kept as-is until product confirms otherwise.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, List, Mapping, Union

from pydantic import ValidationError

from marketplace_state import config
from marketplace_state.app_types import CategorizedOffers, OfferStatusBadge
from marketplace_state.domain import Offer, OfferStatus
from marketplace_state.errors import InvalidOfferData
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="offer_classifier")

OfferLike = Union[Offer, Mapping[str, Any]]

_ACTIVE = "active"
_EXPIRED = "expired"

OFFER_STATUS_BADGES: dict[OfferStatus, OfferStatusBadge] = {
    OfferStatus.PENDING: OfferStatusBadge("bg-yellow-100 text-yellow-800", "⏳"),
    OfferStatus.ACCEPTED: OfferStatusBadge("bg-blue-100 text-blue-800", "💳"),
    OfferStatus.COMPLETED: OfferStatusBadge("bg-green-100 text-green-800", "✅"),
    OfferStatus.REJECTED: OfferStatusBadge("bg-red-100 text-red-800", "❌"),
    OfferStatus.WITHDRAWN: OfferStatusBadge("bg-gray-100 text-gray-800", "↩️"),
}
UNKNOWN_STATUS_BADGE = OfferStatusBadge("bg-gray-100 text-gray-800", "❓")


def _offer_id_of(raw: Any) -> str | None:
    if isinstance(raw, Mapping):
        value = raw.get("id")
        return None if value is None else str(value)
    return None


def _validate_offers(offers: Iterable[OfferLike]) -> List[Offer]:
    """Validate every record up front so a bad record yields no partial output."""
    validated: List[Offer] = []
    for index, raw in enumerate(offers):
        if isinstance(raw, Offer):
            validated.append(raw)
            continue
        try:
            validated.append(Offer.model_validate(raw))
        except ValidationError as exc:
            offer_id = _offer_id_of(raw)
            fields = sorted({".".join(str(p) for p in err["loc"]) or "<record>" for err in exc.errors()})
            logger.warning(
                "Rejecting offer list: record %d (id=%s) has invalid fields %s",
                index,
                offer_id,
                ", ".join(fields),
            )
            raise InvalidOfferData(
                f"Offer at index {index} has missing or invalid fields: {', '.join(fields)}",
                index=index,
                offer_id=offer_id,
            ) from exc
    return validated


def _bucket_for(offer: Offer, cutoff: datetime) -> str | None:
    """Return the bucket name for an offer, or None if no rule matches."""
    status = offer.status
    if status is OfferStatus.PENDING:
        return _EXPIRED if offer.created_at < cutoff else _ACTIVE
    if status is OfferStatus.ACCEPTED:
        return _ACTIVE if offer.has_payment_session else None
    if status in (OfferStatus.REJECTED, OfferStatus.WITHDRAWN):
        return _EXPIRED
    if status is OfferStatus.COMPLETED:
        return None
    raise AssertionError(f"Unhandled offer status: {status!r}")


def _newest_first(offers: List[Offer]) -> List[Offer]:
    # sorted() is stable, so equal timestamps keep input order
    return sorted(offers, key=lambda o: o.created_at, reverse=True)


def categorize_offers(
    offers: Iterable[OfferLike],
    *,
    now: datetime | None = None,
    expiry_days: int | None = None,
) -> CategorizedOffers:
    """Split offers into active and expired buckets, each sorted newest first.

    Raw mappings are validated into ``Offer`` models; any record with a missing
    or unparsable required field raises ``InvalidOfferData`` and nothing is
    classified. Offers matching no rule are returned in ``dropped``.
    """
    if expiry_days is None:
        expiry_days = config.settings.offer_expiry_days
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    cutoff = now - timedelta(days=expiry_days)

    validated = _validate_offers(offers)

    active: List[Offer] = []
    expired: List[Offer] = []
    dropped: List[Offer] = []
    for offer in validated:
        bucket = _bucket_for(offer, cutoff)
        if bucket == _ACTIVE:
            active.append(offer)
        elif bucket == _EXPIRED:
            expired.append(offer)
        else:
            dropped.append(offer)

    if dropped:
        logger.debug(
            "Dropped %d offer(s) with no display bucket: %s",
            len(dropped),
            ", ".join(f"{o.id}:{o.status.value}" for o in dropped),
        )
    logger.debug(
        "Categorized %d offers: %d active, %d expired",
        len(validated),
        len(active),
        len(expired),
    )
    return CategorizedOffers(
        active=_newest_first(active),
        expired=_newest_first(expired),
        dropped=dropped,
    )


def offer_status_badge(status: OfferStatus | str) -> OfferStatusBadge:
    """Return the colour classes and icon for an offer status; unknown values get a neutral badge."""
    try:
        status = OfferStatus(status)
    except ValueError:
        return UNKNOWN_STATUS_BADGE
    return OFFER_STATUS_BADGES.get(status, UNKNOWN_STATUS_BADGE)
