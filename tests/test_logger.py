import logging
import os
import sys
import tempfile
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from exceptions import NoDurationError
from utils.logger import setup_logging, log_performance

LOGGER_NAME = "timeline_svg.tests"


@log_performance
def reject_input():
    raise NoDurationError()


@log_performance
def fail_unexpectedly():
    raise ValueError("boom")


@log_performance
def succeed():
    return 42


class TestSetupLogging(unittest.TestCase):
    def setUp(self):
        self.tmp_dir = tempfile.TemporaryDirectory()

    def tearDown(self):
        logger = logging.getLogger(LOGGER_NAME)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        self.tmp_dir.cleanup()

    def test_console_only(self):
        logger = setup_logging(level=logging.WARNING, logger_name=LOGGER_NAME)
        self.assertEqual(len(logger.handlers), 1)
        handler = logger.handlers[0]
        self.assertIs(type(handler), logging.StreamHandler)
        self.assertEqual(handler.level, logging.WARNING)
        self.assertEqual(logger.level, logging.WARNING)

    def test_file_output_in_new_directory(self):
        log_file = os.path.join(self.tmp_dir.name, "logs", "export.log")
        logger = setup_logging(level=logging.INFO, log_file=log_file, logger_name=LOGGER_NAME)

        self.assertTrue(os.path.isdir(os.path.dirname(log_file)))
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(file_handlers[0].level, logging.DEBUG)

        logger.debug("lane layout done")
        file_handlers[0].flush()
        with open(log_file, encoding="utf-8") as f:
            self.assertIn("DEBUG - lane layout done", f.read())

    def test_reconfigure_replaces_handlers(self):
        setup_logging(logger_name=LOGGER_NAME)
        logger = setup_logging(console_output=False, logger_name=LOGGER_NAME)
        self.assertEqual(logger.handlers, [])


class TestLogPerformance(unittest.TestCase):
    def test_rejected_input_logged_at_debug(self):
        with self.assertLogs(__name__, level="DEBUG") as logs:
            with self.assertRaises(NoDurationError):
                reject_input()
        self.assertEqual([r.levelno for r in logs.records], [logging.DEBUG])
        self.assertIn("rejected input", logs.output[0])

    def test_unexpected_failure_logged_at_error(self):
        with self.assertLogs(__name__, level="DEBUG") as logs:
            with self.assertRaises(ValueError):
                fail_unexpectedly()
        self.assertEqual([r.levelno for r in logs.records], [logging.ERROR])

    def test_success_returns_result(self):
        with self.assertLogs(__name__, level="DEBUG") as logs:
            self.assertEqual(succeed(), 42)
        self.assertIn("succeed completed", logs.output[0])


if __name__ == "__main__":
    unittest.main()
