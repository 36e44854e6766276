"""Tests for logging setup."""

import logging

from snappath.core.config import setup_logging
from snappath.core.naming import build_file_name


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_logging_disabled_when_verbose_false(self, tmp_path):
        """No log file created when verbose=False."""
        result = setup_logging(verbose=False, log_dir=tmp_path)

        assert result is None
        assert not (tmp_path / "debug.log").exists()

    def test_logging_enabled_creates_file(self, tmp_path):
        """Log file created when verbose=True."""
        log_file = setup_logging(verbose=True, log_dir=tmp_path)

        assert log_file == tmp_path / "debug.log"
        assert log_file.exists()

    def test_creates_missing_log_dir(self, tmp_path):
        """Missing log directory is created."""
        log_dir = tmp_path / "nested" / "logs"

        setup_logging(verbose=True, log_dir=log_dir)

        assert (log_dir / "debug.log").exists()

    def test_logging_writes_debug_messages(self, tmp_path):
        """DEBUG messages from snappath loggers reach the file."""
        setup_logging(verbose=True, log_dir=tmp_path)

        build_file_name("/p/button.test.ts", "renders " * 100, 1, None)

        content = (tmp_path / "debug.log").read_text()
        assert "Truncated test name" in content
        assert "snappath.naming" in content

    def test_logging_format_includes_level(self, tmp_path):
        """Log format includes level."""
        setup_logging(verbose=True, log_dir=tmp_path)

        logging.getLogger("snappath.test").info("Test info")

        content = (tmp_path / "debug.log").read_text()
        assert "[INFO ]" in content

    def test_logging_does_nothing_when_log_dir_none(self):
        """No error when log_dir is None."""
        assert setup_logging(verbose=True, log_dir=None) is None

    def test_multiple_calls_no_duplicate_handlers(self, tmp_path):
        """Calling setup_logging twice doesn't create duplicate handlers."""
        dir1 = tmp_path / "run1"
        dir2 = tmp_path / "run2"

        setup_logging(verbose=True, log_dir=dir1)
        setup_logging(verbose=True, log_dir=dir2)

        logging.getLogger("snappath.test").debug("Single message")

        content = (dir2 / "debug.log").read_text()
        count = content.count("Single message")
        assert count == 1, f"Expected 1 occurrence, found {count}"
        assert "Single message" not in (dir1 / "debug.log").read_text()
