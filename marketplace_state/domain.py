"""Domain vocabulary and schemas for marketplace offers.

Offers arrive from the API as snake_case JSON. This module defines the closed
status vocabulary and the Pydantic model those records are validated into.
Classification rules live in ``offer_classifier``; nothing here interprets an
offer beyond parsing it.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OfferStatus(str, Enum):
    """Lifecycle status of an offer."""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"
    COMPLETED = "completed"


def _as_utc(value: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC so comparisons never mix naive and aware values."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class Offer(BaseModel):
    """A priced proposal from a worker to a customer for a service."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str
    worker_id: str
    customer_id: str
    service_id: str
    service_request_id: str | None = None
    price: float = Field(ge=0)
    estimated_hours: float = Field(ge=0)
    description: str = ""
    status: OfferStatus
    stripe_session_id: str | None = None
    created_at: datetime
    expires_at: datetime | None = None

    # Display fields joined in by the API
    worker_name: str | None = None
    customer_name: str | None = None
    service_title: str | None = None

    @field_validator("id", "worker_id", "customer_id", "service_id", "service_request_id", mode="before")
    @classmethod
    def coerce_reference(cls, v):
        """Accept integer ids from older endpoints."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("stripe_session_id", mode="after")
    @classmethod
    def blank_session_is_absent(cls, v: str | None) -> str | None:
        """An empty session id means checkout has not started."""
        if v is None or v == "":
            return None
        return v

    @field_validator("created_at", "expires_at", mode="after")
    @classmethod
    def assume_utc(cls, v: datetime | None) -> datetime | None:
        return _as_utc(v)

    @property
    def payment_session_ref(self) -> str | None:
        """Payment checkout reference, set once an accepted offer has begun checkout."""
        return self.stripe_session_id

    @property
    def has_payment_session(self) -> bool:
        return self.stripe_session_id is not None
