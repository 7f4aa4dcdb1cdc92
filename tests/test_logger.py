import logging
import unittest

from weekgrid.layout.engine import logger as engine_logger
from weekgrid.logger import LOGGER_NAME, setup_logger


class TestSetupLogger(unittest.TestCase):
    def tearDown(self) -> None:
        setup_logger("WARNING")

    def test_handler_is_added_once(self) -> None:
        logger = setup_logger("INFO")
        setup_logger("INFO")

        self.assertEqual(logger.name, LOGGER_NAME)
        self.assertEqual(len(logger.handlers), 1)
        self.assertFalse(logger.propagate)

    def test_level_changes_on_every_call(self) -> None:
        setup_logger("ERROR")
        logger = setup_logger("debug")

        self.assertEqual(logger.level, logging.DEBUG)

    def test_module_loggers_inherit_the_package_level(self) -> None:
        setup_logger("DEBUG")

        self.assertTrue(engine_logger.name.startswith(f"{LOGGER_NAME}."))
        self.assertTrue(engine_logger.isEnabledFor(logging.DEBUG))


if __name__ == "__main__":
    unittest.main(verbosity=2)
