"""Tests for config and logging."""

import json
import logging
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from estate_sim.config import OutputConfig, SimulatorConfig
from estate_sim.exceptions import ConfigurationError
from estate_sim.logging import JsonFormatter, get_logger, setup_logging

ENV_VARS = ["OUTPUT_DIR", "PRETTY_JSON", "FULL_OCCUPANCY_RATE", "LOG_LEVEL", "LOG_FORMAT"]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every variable read by SimulatorConfig.from_env."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_root_logger():
    """Undo the handler replacement done by setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestOutputConfig:
    """Tests for OutputConfig."""

    def test_default_values(self) -> None:
        config = OutputConfig()

        assert config.json_output_dir == Path("output")
        assert config.pretty_json is False

    def test_custom_values(self) -> None:
        config = OutputConfig(json_output_dir=Path("/tmp/reports"), pretty_json=True)

        assert config.json_output_dir == Path("/tmp/reports")
        assert config.pretty_json is True


class TestSimulatorConfig:
    """Tests for SimulatorConfig."""

    def test_default_values(self) -> None:
        config = SimulatorConfig()

        assert isinstance(config.output, OutputConfig)
        assert config.full_occupancy_rate == 90.0
        assert config.log_level == "INFO"
        assert config.log_format == "standard"

    def test_from_env_default(self, clean_env) -> None:
        config = SimulatorConfig.from_env()

        assert config.output.json_output_dir == Path("output")
        assert config.output.pretty_json is False
        assert config.full_occupancy_rate == 90.0
        assert config.log_level == "INFO"
        assert config.log_format == "standard"

    def test_from_env_custom(self, clean_env) -> None:
        env_vars = {
            "OUTPUT_DIR": "/data/reports",
            "PRETTY_JSON": "TRUE",
            "FULL_OCCUPANCY_RATE": "80",
            "LOG_LEVEL": "DEBUG",
            "LOG_FORMAT": "json",
        }

        with patch.dict("os.environ", env_vars):
            config = SimulatorConfig.from_env()

        assert config.output.json_output_dir == Path("/data/reports")
        assert config.output.pretty_json is True
        assert config.full_occupancy_rate == 80.0
        assert config.log_level == "DEBUG"
        assert config.log_format == "json"

    def test_from_env_invalid_occupancy(self, clean_env) -> None:
        with patch.dict("os.environ", {"FULL_OCCUPANCY_RATE": "ninety"}):
            with pytest.raises(ConfigurationError, match="FULL_OCCUPANCY_RATE"):
                SimulatorConfig.from_env()

    def test_from_env_invalid_log_format(self, clean_env) -> None:
        with patch.dict("os.environ", {"LOG_FORMAT": "xml"}):
            with pytest.raises(ConfigurationError, match="LOG_FORMAT"):
                SimulatorConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_setup_logging_default(self, restore_root_logger) -> None:
        setup_logging()

        assert logging.getLogger("estate_sim").level == logging.INFO

    def test_setup_logging_debug(self, restore_root_logger) -> None:
        setup_logging(level="DEBUG")
        assert restore_root_logger.level == logging.DEBUG

    def test_setup_logging_invalid_level(self, restore_root_logger) -> None:
        """Invalid level defaults to INFO."""
        setup_logging(level="INVALID")
        assert restore_root_logger.level == logging.INFO

    def test_setup_logging_json_format(self, restore_root_logger) -> None:
        setup_logging(format_type="json")

        assert any(isinstance(h.formatter, JsonFormatter) for h in restore_root_logger.handlers)

    def test_setup_logging_replaces_handlers(self, restore_root_logger) -> None:
        restore_root_logger.addHandler(logging.StreamHandler())
        restore_root_logger.addHandler(logging.StreamHandler())

        setup_logging()

        assert len(restore_root_logger.handlers) == 1

    def test_handler_writes_to_stdout(self, restore_root_logger) -> None:
        setup_logging()

        handler = restore_root_logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stdout

    def test_faker_logger_quieted(self, restore_root_logger) -> None:
        setup_logging(level="DEBUG")
        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def _record(self, msg: str, level: int = logging.INFO, exc_info=None) -> logging.LogRecord:
        return logging.LogRecord(
            name="test.logger",
            level=level,
            pathname="/path/to/file.py",
            lineno=42,
            msg=msg,
            args=(),
            exc_info=exc_info,
        )

    def test_format_basic(self) -> None:
        data = json.loads(JsonFormatter().format(self._record("Test message")))

        assert data["level"] == "INFO"
        assert data["logger"] == "test.logger"
        assert data["message"] == "Test message"
        assert "timestamp" in data

    def test_format_non_ascii(self) -> None:
        result = JsonFormatter().format(self._record("大阪府"))
        assert "大阪府" in result

    def test_format_with_exception(self) -> None:
        try:
            raise ValueError("Test error")
        except ValueError:
            exc_info = sys.exc_info()

        data = json.loads(
            JsonFormatter().format(self._record("Error occurred", logging.ERROR, exc_info))
        )

        assert data["level"] == "ERROR"
        assert "ValueError" in data["exception"]

    def test_format_with_extra(self) -> None:
        record = self._record("Test message")
        record.extra = {"estate": "osaka"}

        data = json.loads(JsonFormatter().format(record))

        assert data["estate"] == "osaka"


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger(self) -> None:
        logger = get_logger("test.module")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"

    def test_get_logger_same_instance(self) -> None:
        assert get_logger("test.same") is get_logger("test.same")


class TestPackage:
    """Tests for the package root."""

    def test_version_exported(self) -> None:
        from estate_sim import __version__

        assert isinstance(__version__, str)

    def test_records_exported(self) -> None:
        import estate_sim

        assert estate_sim.PropertyRecord is not None
        assert estate_sim.SimulationRecord is not None
