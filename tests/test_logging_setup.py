"""Unit tests for loguru configuration."""
import logging
import sys
import unittest

from loguru import logger

from rosterbook.utils.logging_setup import InterceptHandler, normalize_level, setup_logging


class TestLoggingSetup(unittest.TestCase):

    def tearDown(self) -> None:
        logging.basicConfig(handlers=[], force=True)
        logger.remove()
        logger.add(sys.stderr)

    def test_normalize_level(self) -> None:
        self.assertEqual(normalize_level("debug"), "DEBUG")
        self.assertEqual(normalize_level(" warning "), "WARNING")
        self.assertEqual(normalize_level("verbose"), "INFO")
        self.assertEqual(normalize_level(""), "INFO")

    def test_standard_logging_is_intercepted(self) -> None:
        setup_logging("DEBUG")
        messages = []
        logger.add(messages.append, level="DEBUG", format="{message}")
        logging.getLogger("werkzeug").warning("served %s", "/api/players")
        self.assertTrue(any("served /api/players" in m for m in messages))
        self.assertTrue(any(isinstance(h, InterceptHandler) for h in logging.getLogger().handlers))


if __name__ == "__main__":
    unittest.main()
