"""Exception types raised by the dashboard state layer."""

from __future__ import annotations


class MarketplaceStateError(Exception):
    """Base class for errors raised by marketplace_state."""


class InvalidOfferData(MarketplaceStateError, ValueError):
    """An offer record is missing a required field or carries an unparsable one."""

    def __init__(self, message: str, *, index: int | None = None, offer_id: str | None = None) -> None:
        super().__init__(message)
        self.index = index
        self.offer_id = offer_id


class SessionClosedError(MarketplaceStateError, RuntimeError):
    """A dashboard session was used after close()."""
