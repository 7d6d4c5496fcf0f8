"""
Tests for input coercion, environment helpers, settings validation and logging helpers
"""

import logging
import math
import os

import pytest

from coolload import config
from coolload.core.environment import get_env_bool, get_env_float, get_env_list, load_environment
from coolload.errors import ConfigurationError, HVACCalculationError, ValidationError, log_error_with_context
from coolload.utils.logging_utils import log_operation, timed_operation
from coolload.utils.safe_access import safe_float, safe_int, safe_optional_float


class TestSafeAccess:

    @pytest.mark.parametrize("value,expected", [
        ("75", 75.0),
        (" 12.5 ", 12.5),
        (3, 3.0),
        ("", 0.0),
        ("   ", 0.0),
        (None, 0.0),
        ("abc", 0.0),
        ("nan", 0.0),
        (math.inf, 0.0),
        (True, 0.0),
        ([1], 0.0),
    ])
    def test_safe_float(self, value, expected):
        assert safe_float(value) == expected

    def test_safe_float_default(self):
        assert safe_float("", default=101.325) == 101.325

    @pytest.mark.parametrize("value,expected", [("", None), (None, None), ("x", None), ("40", 40.0), (0, 0.0)])
    def test_safe_optional_float(self, value, expected):
        assert safe_optional_float(value) == expected

    def test_safe_int_truncates(self):
        assert safe_int("12.9") == 12
        assert safe_int("", default=1) == 1


class TestEnvironment:

    @pytest.mark.parametrize("raw,expected", [("true", True), ("1", True), ("off", False), ("maybe", True)])
    def test_get_env_bool(self, monkeypatch, raw, expected):
        monkeypatch.setenv("COOLLOAD_TEST_FLAG", raw)
        assert get_env_bool("COOLLOAD_TEST_FLAG", default=True) is expected

    def test_get_env_float(self, monkeypatch):
        monkeypatch.setenv("COOLLOAD_TEST_FLOAT", "0.15")
        assert get_env_float("COOLLOAD_TEST_FLOAT", 0.2) == 0.15
        monkeypatch.setenv("COOLLOAD_TEST_FLOAT", "fifteen")
        assert get_env_float("COOLLOAD_TEST_FLOAT", 0.2) == 0.2

    def test_get_env_list(self, monkeypatch):
        monkeypatch.setenv("COOLLOAD_TEST_LIST", "http://a, http://b,,")
        assert get_env_list("COOLLOAD_TEST_LIST") == ["http://a", "http://b"]
        monkeypatch.delenv("COOLLOAD_TEST_LIST")
        assert get_env_list("COOLLOAD_TEST_LIST", default=["x"]) == ["x"]

    def test_local_file_overrides_base(self, monkeypatch, tmp_path):
        monkeypatch.setenv("COOLLOAD_TEST_VAR", "platform")
        (tmp_path / ".env").write_text("COOLLOAD_TEST_VAR=base\n")
        (tmp_path / ".env.local").write_text("COOLLOAD_TEST_VAR=local\n")
        assert load_environment(tmp_path) == [".env", ".env.local"]
        assert os.environ["COOLLOAD_TEST_VAR"] == "local"


class TestSettings:

    def test_defaults_are_valid(self):
        config.validate_settings()

    @pytest.mark.parametrize("name,value", [
        ("DEFAULT_BYPASS_FACTOR", 1.5),
        ("DEFAULT_PRESSURE_KPA", 1013.25),
        ("BUILDING_DIVERSITY_FACTOR", 0.0),
    ])
    def test_invalid_settings_fail_fast(self, monkeypatch, name, value):
        monkeypatch.setattr(config, name, value)
        with pytest.raises(ConfigurationError) as exc_info:
            config.validate_settings()
        assert exc_info.value.details['value'] == value


class TestLoggingHelpers:

    def test_log_operation_reraises(self, caplog):
        with caplog.at_level(logging.ERROR):
            with pytest.raises(ValueError):
                with log_operation("failing_step", {"room": "A"}):
                    raise ValueError("boom")
        assert "Failed failing_step" in caplog.text

    def test_timed_operation_returns_result(self):
        @timed_operation("double")
        def double(x):
            return 2 * x

        assert double(4) == 8
        assert double.__name__ == "double"

    def test_critical_errors_logged_as_errors(self, caplog):
        with caplog.at_level(logging.WARNING, logger="coolload.errors"):
            log_error_with_context(ValidationError("bad input"), {"path": "/x"})
            log_error_with_context(HVACCalculationError("odd value"), {"path": "/y"})
        levels = [r.levelno for r in caplog.records]
        assert levels == [logging.ERROR, logging.WARNING]
