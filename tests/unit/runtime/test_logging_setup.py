"""Tests for the file-only log handler setup."""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from lineview.runtime.logs import configure_logging


class ConfigureLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.package_logger = logging.getLogger("lineview")
        self.saved_handlers = list(self.package_logger.handlers)
        self.saved_level = self.package_logger.level
        self.saved_propagate = self.package_logger.propagate

    def tearDown(self) -> None:
        for handler in list(self.package_logger.handlers):
            if handler not in self.saved_handlers:
                self.package_logger.removeHandler(handler)
                handler.close()
        self.package_logger.setLevel(self.saved_level)
        self.package_logger.propagate = self.saved_propagate

    def test_records_are_written_to_the_log_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "logs" / "lineview.log"
            configure_logging("INFO", log_path=log_path)
            logging.getLogger("lineview.buffer").info("loaded %d rows", 3)
            for handler in self.package_logger.handlers:
                handler.flush()
                handler.close()

            content = log_path.read_text(encoding="utf-8")

        self.assertIn(" - lineview.buffer - INFO - loaded 3 rows", content)

    def test_log_file_is_not_created_below_threshold(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "lineview.log"
            configure_logging("WARNING", log_path=log_path)
            logging.getLogger("lineview.viewport").info("quiet")

            self.assertFalse(log_path.exists())

    def test_reconfiguring_replaces_the_handler(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            configure_logging("INFO", log_path=Path(tmp) / "a.log")
            configure_logging("DEBUG", log_path=Path(tmp) / "b.log")

            owned = [h for h in self.package_logger.handlers if getattr(h, "_lineview_handler", False)]
            self.assertEqual(len(owned), 1)
            self.assertEqual(Path(owned[0].baseFilename).name, "b.log")
            self.assertEqual(self.package_logger.level, logging.DEBUG)
            self.assertFalse(self.package_logger.propagate)


if __name__ == "__main__":
    unittest.main()
