"""Tests for logging setup."""
import logging

from gof_patterns.config.schemas import LoggingConfig
from gof_patterns.infrastructure.logging.logger import LOGGER_NAMESPACE, get_logger, setup_logging


class TestSetupLogging:
    """Test handler configuration."""

    def teardown_method(self):
        package_logger = logging.getLogger(LOGGER_NAMESPACE)
        for handler in package_logger.handlers[:]:
            package_logger.removeHandler(handler)
            handler.close()

    def test_stderr_destination(self, capsys):
        setup_logging(LoggingConfig(level="INFO", destination="stderr"))

        get_logger("gof_patterns.tests").info("Something happened", key="value")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Something happened" in captured.err
        assert "key=value" in captured.err

    def test_level_filters_records(self, capsys):
        setup_logging(LoggingConfig(level="ERROR", destination="stderr"))

        get_logger("gof_patterns.tests").warning("Quiet warning")

        assert "Quiet warning" not in capsys.readouterr().err

    def test_file_destination(self, tmp_path):
        log_file = tmp_path / "logs" / "app.log"
        setup_logging(LoggingConfig(level="DEBUG", destination="file", file_path=str(log_file)))

        get_logger("gof_patterns.tests").debug("Written to file")
        for handler in logging.getLogger(LOGGER_NAMESPACE).handlers:
            handler.flush()

        assert "Written to file" in log_file.read_text()

    def test_setup_replaces_handlers(self, tmp_path):
        setup_logging(LoggingConfig(destination="both", file_path=str(tmp_path / "app.log")))
        setup_logging(LoggingConfig(destination="stderr"))
        assert len(logging.getLogger(LOGGER_NAMESPACE).handlers) == 1
