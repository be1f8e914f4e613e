from datetime import timedelta, timezone
import unittest

from pydantic import ValidationError

from marketplace_state.domain import Offer, OfferStatus


def _record(**overrides):
    record = {
        "id": "o1",
        "worker_id": "w-1",
        "customer_id": "c-1",
        "service_id": "s-1",
        "price": 80,
        "estimated_hours": 2.5,
        "status": "pending",
        "created_at": "2025-09-10T08:30:00.000000Z",
        "expires_at": "2025-09-17T08:30:00.000000Z",
    }
    record.update(overrides)
    return record


class TestOffer(unittest.TestCase):
    def test_parses_api_record(self):
        offer = Offer.model_validate(_record(worker_name="Sam", service_title="Plumbing", unused_field=1))
        self.assertEqual(offer.status, OfferStatus.PENDING)
        self.assertEqual(offer.created_at.utcoffset(), timedelta(0))
        self.assertEqual(offer.worker_name, "Sam")
        self.assertEqual(offer.description, "")
        self.assertIsNone(offer.payment_session_ref)
        self.assertFalse(offer.has_payment_session)

    def test_integer_ids_become_strings(self):
        offer = Offer.model_validate(_record(id=42, service_request_id=7))
        self.assertEqual(offer.id, "42")
        self.assertEqual(offer.service_request_id, "7")

    def test_payment_session_ref(self):
        offer = Offer.model_validate(_record(status="accepted", stripe_session_id="cs_test_1"))
        self.assertEqual(offer.payment_session_ref, "cs_test_1")
        self.assertTrue(offer.has_payment_session)

    def test_empty_session_is_absent(self):
        offer = Offer.model_validate(_record(stripe_session_id=""))
        self.assertIsNone(offer.payment_session_ref)

    def test_whitespace_session_is_kept(self):
        offer = Offer.model_validate(_record(stripe_session_id="  "))
        self.assertEqual(offer.payment_session_ref, "  ")
        self.assertTrue(offer.has_payment_session)

    def test_naive_timestamps_are_utc(self):
        offer = Offer.model_validate(_record(created_at="2025-09-10 08:30:00"))
        self.assertEqual(offer.created_at.tzinfo, timezone.utc)

    def test_negative_price_rejected(self):
        with self.assertRaises(ValidationError):
            Offer.model_validate(_record(price=-1))

    def test_offers_are_frozen(self):
        offer = Offer.model_validate(_record())
        with self.assertRaises(ValidationError):
            offer.status = OfferStatus.REJECTED  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
