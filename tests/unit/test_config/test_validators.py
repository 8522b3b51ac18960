"""
Unit tests for configuration validation functionality.

Tests the validation of the monitor, display and logging sections,
including defaults for missing keys and error reporting for bad values.
"""

from pathlib import Path

import pytest

from meminfomon.config.validators import (
    validate_app_config,
    validate_display_config,
    validate_log_level,
    validate_monitor_config,
)
from meminfomon.models import MEMINFO_LINE_PATTERN
from meminfomon.validation import ValidationError, validate_positive_float


@pytest.mark.unit
class TestMonitorConfigValidation:
    """Test cases for the [monitor] section."""

    def test_defaults(self):
        config = validate_monitor_config({})

        assert config.meminfo_path == Path("/proc/meminfo")
        assert config.interval_seconds == 2.0
        assert config.line_pattern == MEMINFO_LINE_PATTERN

    def test_custom_values(self):
        config = validate_monitor_config(
            {"meminfo_path": "/tmp/fake_meminfo", "interval_seconds": 5}
        )

        assert config.meminfo_path == Path("/tmp/fake_meminfo")
        assert config.interval_seconds == 5.0

    @pytest.mark.parametrize(
        "interval",
        [0, -1.0, 0.05, 7200, "soon", True, float("nan"), float("inf"), "nan", "-inf"],
    )
    def test_invalid_interval(self, interval):
        with pytest.raises(ValidationError) as exc_info:
            validate_monitor_config({"interval_seconds": interval})

        assert "interval_seconds" in str(exc_info.value)

    def test_empty_path(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_monitor_config({"meminfo_path": "  "})

        assert "meminfo_path" in str(exc_info.value)

    def test_invalid_pattern(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_monitor_config({"line_pattern": "([A-Z"})

        assert "line_pattern" in str(exc_info.value)

    def test_pattern_needs_three_groups(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_monitor_config({"line_pattern": r"(\w+):\s+(\d+)"})

        assert "three capture groups" in str(exc_info.value)


@pytest.mark.unit
class TestDisplayConfigValidation:
    """Test cases for the [display] section."""

    def test_defaults(self):
        config = validate_display_config({})

        assert config.bar_width == 40
        assert config.redraw is True

    @pytest.mark.parametrize("width", [0, 4, 201, "wide", True])
    def test_invalid_bar_width(self, width):
        with pytest.raises(ValidationError) as exc_info:
            validate_display_config({"bar_width": width})

        assert "bar_width" in str(exc_info.value)

    def test_redraw_must_be_boolean(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_display_config({"redraw": "yes"})

        assert "redraw" in str(exc_info.value)


@pytest.mark.unit
class TestLogLevelValidation:
    """Test cases for the [logging] section."""

    def test_case_insensitive(self):
        assert validate_log_level("debug") == "DEBUG"

    def test_unknown_level(self):
        with pytest.raises(ValidationError):
            validate_log_level("chatty")

    def test_whole_document(self):
        config = validate_app_config(
            {
                "monitor": {"interval_seconds": 1.5},
                "display": {"bar_width": 20, "redraw": False},
                "logging": {"level": "info"},
            }
        )

        assert config.monitor.interval_seconds == 1.5
        assert config.display.bar_width == 20
        assert config.display.redraw is False
        assert config.log_level == "INFO"


@pytest.mark.unit
class TestPositiveFloatValidation:
    """Test cases for the shared numeric validator."""

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), "NaN", "infinity"])
    def test_non_finite_rejected_without_bounds(self, value):
        with pytest.raises(ValidationError) as exc_info:
            validate_positive_float(value, field_name="interval")

        assert "finite" in str(exc_info.value)

    def test_finite_value_accepted(self):
        assert validate_positive_float("2.5") == 2.5
