import logging
import unittest

from marketplace_state import config
from utils import logging_utils
from utils.logging_utils import EnsureTagFilter, MaxLevelFilter, build_logging_config, get_tagged_logger


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record: logging.LogRecord) -> None:  # type: ignore[override]
        self.records.append(record)


class TestLoggingUtils(unittest.TestCase):
    def test_build_logging_config_has_expected_handlers_and_filters(self):
        cfg = build_logging_config(job_name="jobtest")
        self.assertIn("stdout", cfg["handlers"])
        self.assertIn("stderr", cfg["handlers"])
        self.assertEqual(cfg["filters"]["job_name"]["job_name"], "jobtest")

    def test_get_tagged_logger_injects_tag(self):
        handler = _ListHandler()
        logger = get_tagged_logger("marketplace_state.tests", tag="custom_tag")
        base_logger = logger.logger
        base_logger.setLevel(logging.DEBUG)
        base_logger.addHandler(handler)
        base_logger.propagate = False
        try:
            logger.info("hello world")
            self.assertEqual(handler.records[-1].tag, "custom_tag")
        finally:
            base_logger.removeHandler(handler)
            base_logger.propagate = True

    def test_default_tag_is_last_name_segment(self):
        self.assertEqual(get_tagged_logger("marketplace_state.offer_classifier").extra["tag"], "offer_classifier")

    def test_filters(self):
        record = logging.LogRecord("marketplace_state.domain", logging.WARNING, __file__, 1, "msg", None, None)
        self.assertTrue(EnsureTagFilter().filter(record))
        self.assertEqual(record.tag, "domain")
        self.assertFalse(MaxLevelFilter(logging.INFO).filter(record))

    def test_configure_logging_applies_settings_level(self):
        root = logging.getLogger()
        orig_handlers = root.handlers[:]
        orig_level = root.level
        try:
            config.configure_logging(config.Settings(log_level="warning"), override_existing=True)
            self.assertEqual(root.level, logging.WARNING)
            self.assertTrue(
                any(
                    any(f.__class__.__name__ == "JobNameFilter" for f in h.filters)
                    for h in root.handlers
                )
            )
        finally:
            root.handlers = orig_handlers
            root.setLevel(orig_level)
            logging_utils._CONFIGURED = False


if __name__ == "__main__":
    unittest.main()
