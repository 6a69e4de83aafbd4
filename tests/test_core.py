"""
Tests for core utilities: configuration, dates, logging and exceptions.
"""

import json
import logging
from datetime import date, datetime

import pytest  # type: ignore
import pytz
from src.reference_et.core import Config, DateUtils, LoggerContext, setup_logger
from src.reference_et.exceptions import (
    DomainMathError,
    InvalidInputError,
    MissingRequiredFieldError,
    ReferenceETError,
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration environment variables."""
    for name in ("CONFIG_FILE", "LOG_LEVEL", "LOG_FILE", "HUMIDITY_SCALE", "WIND_HEIGHT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestConfig:
    """Test cases for Config."""

    def test_defaults(self, clean_env):
        config = Config()
        assert config.log_level == "INFO"
        assert config.log_file is None
        assert config.humidity_scale == "auto"
        assert config.default_wind_height == 2.0
        assert config.default_units["temperature"] == "celsius"

    def test_load_from_file(self, clean_env, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({
            "humidity": {"scale": "percent"},
            "units": {"temperature": "fahrenheit"},
        }))

        config = Config(str(config_file))

        assert config.humidity_scale == "percent"
        assert config.default_units["temperature"] == "fahrenheit"
        assert config.default_units["length"] == "meters", "Unset keys keep defaults"

    def test_config_file_from_env(self, clean_env, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"wind": {"default_height": 10.0}}))
        clean_env.setenv("CONFIG_FILE", str(config_file))

        assert Config().default_wind_height == 10.0

    def test_missing_file(self, clean_env, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(str(tmp_path / "missing.json"))

    @pytest.mark.parametrize("content", ["[1, 2]", '"auto"', "3"])
    def test_non_object_file(self, clean_env, tmp_path, content):
        config_file = tmp_path / "config.json"
        config_file.write_text(content)

        with pytest.raises(ValueError, match="JSON object"):
            Config(str(config_file))

    def test_env_overrides(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "debug")
        clean_env.setenv("HUMIDITY_SCALE", "fraction")
        clean_env.setenv("WIND_HEIGHT", "3.0")

        config = Config()

        assert config.log_level == "DEBUG"
        assert config.humidity_scale == "fraction"
        assert config.default_wind_height == 3.0

    @pytest.mark.parametrize("name, value", [
        ("LOG_LEVEL", "verbose"),
        ("HUMIDITY_SCALE", "permille"),
        ("WIND_HEIGHT", "-1"),
        ("WIND_HEIGHT", "high"),
    ])
    def test_invalid_values(self, clean_env, name, value):
        clean_env.setenv(name, value)
        with pytest.raises(ValueError):
            Config()

    def test_get_dot_notation(self, clean_env):
        config = Config()
        assert config.get("units.angle") == "degrees"
        assert config.get("units.missing", "fallback") == "fallback"
        assert config.get("humidity.scale.deeper", 1) == 1


class TestDateUtils:
    """Test cases for DateUtils."""

    def test_parse_date(self):
        assert DateUtils.parse_date("2000-07-01") == date(2000, 7, 1)

    @pytest.mark.parametrize("value", ["2000/07/01", "2000-13-01", "", 20000701])
    def test_parse_invalid(self, value):
        with pytest.raises(InvalidInputError):
            DateUtils.parse_date(value)

    def test_day_of_year(self):
        assert DateUtils.day_of_year("2023-01-01") == 1
        assert DateUtils.day_of_year(date(2023, 12, 31)) == 365

    def test_day_of_year_leap_year(self):
        assert DateUtils.day_of_year("2020-02-29") == 60
        assert DateUtils.day_of_year("2020-12-31") == 366

    def test_to_utc_datetime_from_date(self):
        dt = DateUtils.to_utc_datetime(date(2000, 7, 1))
        assert dt == pytz.UTC.localize(datetime(2000, 7, 1))
        assert dt.tzinfo is not None

    def test_aware_datetime_is_converted_to_utc(self):
        berlin = pytz.timezone("Europe/Berlin")
        local = berlin.localize(datetime(2000, 7, 1, 1, 0))
        assert DateUtils.parse_date(local) == date(2000, 6, 30)

    def test_format_date(self):
        assert DateUtils().format_date(datetime(2000, 7, 1, 12)) == "2000-07-01"


class TestLogger:
    """Test cases for logger setup."""

    def test_console_only(self, clean_env):
        logger = setup_logger("tests.logger.console", log_level="DEBUG")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_file_handler(self, clean_env, tmp_path):
        log_file = tmp_path / "logs" / "reference_et.log"
        logger = setup_logger("tests.logger.file", log_file=str(log_file), log_level="DEBUG")

        try:
            logger.debug("debug message")
            for handler in logger.handlers:
                handler.flush()

            assert log_file.exists()
            assert "debug message" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in logger.handlers:
                handler.close()

    def test_level_filters_file_output(self, clean_env, tmp_path):
        log_file = tmp_path / "reference_et.log"
        logger = setup_logger("tests.logger.level", log_file=str(log_file), log_level="WARNING")

        try:
            logger.info("info message")
            logger.warning("warning message")
            for handler in logger.handlers:
                handler.flush()

            content = log_file.read_text(encoding="utf-8")
            assert "warning message" in content
            assert "info message" not in content
        finally:
            for handler in logger.handlers:
                handler.close()

    def test_no_duplicate_handlers(self, clean_env):
        setup_logger("tests.logger.repeat")
        logger = setup_logger("tests.logger.repeat")
        assert len(logger.handlers) == 1

    def test_logger_context_success(self, caplog):
        logger = logging.getLogger("tests.logger.context")
        with caplog.at_level(logging.INFO, logger="tests.logger.context"):
            with LoggerContext(logger, "batch"):
                pass
        assert "Starting batch" in caplog.text
        assert "Completed batch" in caplog.text

    def test_logger_context_failure(self, caplog):
        logger = logging.getLogger("tests.logger.context")
        with caplog.at_level(logging.INFO, logger="tests.logger.context"):
            with pytest.raises(DomainMathError):
                with LoggerContext(logger, "batch"):
                    raise DomainMathError("bad")
        assert "Failed batch" in caplog.text


class TestExceptions:
    """Test cases for the exception hierarchy."""

    def test_hierarchy(self):
        for cls in (MissingRequiredFieldError, InvalidInputError, DomainMathError):
            assert issubclass(cls, ReferenceETError)
        assert issubclass(ReferenceETError, ValueError)

    def test_missing_field_message(self):
        error = MissingRequiredFieldError("rhmin", "MaxMinRelativeHumidity")
        assert "rhmin" in str(error)
        assert error.details == {"field": "rhmin", "method": "MaxMinRelativeHumidity"}

    def test_invalid_input_errors(self):
        error = InvalidInputError("Invalid", ["a", "b"])
        assert error.errors == ["a", "b"]
        assert "a" in str(error)

    def test_domain_math_details(self):
        error = DomainMathError("bad log", quantity="wz", value=0.05)
        assert error.details == {"quantity": "wz", "value": 0.05}

    def test_add_detail(self):
        error = ReferenceETError("Something failed")
        assert str(error) == "Something failed"
        error.add_detail("day", 183)
        assert "183" in str(error)
