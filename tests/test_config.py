import os
import unittest

from pydantic import ValidationError

from marketplace_state.config import Settings
from marketplace_state.snapshot_store import DEFAULT_MAX_AGE_MS


class TestConfig(unittest.TestCase):
    def test_settings_defaults(self):
        previous = os.environ.pop("MARKETPLACE_DASHBOARD_MAX_AGE_MS", None)
        try:
            s = Settings()
            self.assertEqual(s.dashboard_max_age_ms, 300_000)
            self.assertEqual(s.offer_expiry_days, 30)
            self.assertEqual(s.log_level, "INFO")
            self.assertEqual(s.dashboard_max_age_ms, DEFAULT_MAX_AGE_MS)
        finally:
            if previous is not None:
                os.environ["MARKETPLACE_DASHBOARD_MAX_AGE_MS"] = previous

    def test_settings_env_override(self):
        previous = os.environ.get("MARKETPLACE_OFFER_EXPIRY_DAYS")
        try:
            os.environ["MARKETPLACE_OFFER_EXPIRY_DAYS"] = "14"
            s = Settings()
            self.assertEqual(s.offer_expiry_days, 14)
        finally:
            if previous is None:
                os.environ.pop("MARKETPLACE_OFFER_EXPIRY_DAYS", None)
            else:
                os.environ["MARKETPLACE_OFFER_EXPIRY_DAYS"] = previous

    def test_log_level_is_upper_cased(self):
        self.assertEqual(Settings(log_level=" debug ").log_level, "DEBUG")

    def test_rejects_invalid_values(self):
        with self.assertRaises(ValidationError):
            Settings(dashboard_max_age_ms=-1)
        with self.assertRaises(ValidationError):
            Settings(offer_expiry_days=0)


if __name__ == "__main__":
    unittest.main()
