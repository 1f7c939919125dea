#!/usr/bin/env python3
import logging
import os
import tempfile
import unittest

from autoscaler_webhook import logging_config


class TestSetupLogging(unittest.TestCase):
    def setUp(self):
        logging_config._logging_configured = False
        self.tmpdir = tempfile.TemporaryDirectory()

    def tearDown(self):
        logger = logging.getLogger(logging_config.PACKAGE_LOGGER)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logging_config._logging_configured = False
        self.tmpdir.cleanup()

    def test_file_and_console_handlers(self):
        logger = logging_config.setup_logging(level="DEBUG", log_to_file=True, log_dir=self.tmpdir.name,
                                              log_file="webhook.log")
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(len(logger.handlers), 2)
        logger.info("hello")
        self.assertTrue(os.path.exists(os.path.join(self.tmpdir.name, "webhook.log")))

    def test_configured_only_once(self):
        first = logging_config.setup_logging(log_to_file=False)
        second = logging_config.setup_logging(log_to_file=True, log_dir=self.tmpdir.name)
        self.assertIs(first, second)
        self.assertEqual(len(second.handlers), 1)


if __name__ == "__main__":
    unittest.main()
