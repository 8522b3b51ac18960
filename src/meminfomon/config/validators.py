"""
Configuration validation utilities.

Turns the raw TOML tables into validated configuration dataclasses. Missing
keys fall back to the dataclass defaults; present keys must be valid.
"""

import logging
from pathlib import Path
from typing import Any, Dict

from ..collectors.meminfo import compile_line_pattern
from ..models.config import (
    AppConfig,
    DisplayConfig,
    MonitorConfig,
    DEFAULT_INTERVAL_SECONDS,
    MAX_INTERVAL_SECONDS,
    MIN_INTERVAL_SECONDS,
    MEMINFO_LINE_PATTERN,
    DEFAULT_MEMINFO_PATH,
)
from ..validation import (
    ValidationError,
    validate_boolean,
    validate_enum_choice,
    validate_positive_float,
    validate_positive_integer,
    validate_regex_pattern,
)

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def validate_monitor_config(monitor_data: Dict[str, Any]) -> MonitorConfig:
    """
    Validate and create a MonitorConfig from the `[monitor]` table.

    Args:
        monitor_data: Raw monitor configuration from TOML

    Returns:
        Validated MonitorConfig instance

    Raises:
        ValidationError: If validation fails
    """
    try:
        meminfo_path = monitor_data.get("meminfo_path", str(DEFAULT_MEMINFO_PATH))
        if not isinstance(meminfo_path, str) or not meminfo_path.strip():
            raise ValidationError(
                "monitor.meminfo_path must be a non-empty string",
                field_name="monitor.meminfo_path",
                value=meminfo_path,
            )

        interval_seconds = validate_positive_float(
            monitor_data.get("interval_seconds", DEFAULT_INTERVAL_SECONDS),
            min_value=MIN_INTERVAL_SECONDS,
            max_value=MAX_INTERVAL_SECONDS,
            field_name="monitor.interval_seconds",
        )

        line_pattern = validate_regex_pattern(
            monitor_data.get("line_pattern", MEMINFO_LINE_PATTERN),
            field_name="monitor.line_pattern",
        )
        compile_line_pattern(line_pattern, field_name="monitor.line_pattern")

        return MonitorConfig(
            meminfo_path=Path(meminfo_path),
            interval_seconds=interval_seconds,
            line_pattern=line_pattern,
        )

    except ValidationError as e:
        logger.error(f"Monitor configuration validation failed: {e}")
        raise


def validate_display_config(display_data: Dict[str, Any]) -> DisplayConfig:
    """Validate and create a DisplayConfig from the `[display]` table."""
    try:
        bar_width = validate_positive_integer(
            display_data.get("bar_width", 40),
            min_value=5,
            max_value=200,
            field_name="display.bar_width",
        )
        redraw = validate_boolean(
            display_data.get("redraw", True), field_name="display.redraw"
        )
        return DisplayConfig(bar_width=bar_width, redraw=redraw)

    except ValidationError as e:
        logger.error(f"Display configuration validation failed: {e}")
        raise


def validate_log_level(level: Any, field_name: str = "logging.level") -> str:
    """Validate a logging level name, returning its canonical upper-case form."""
    return validate_enum_choice(
        level, LOG_LEVELS, field_name=field_name, case_sensitive=False
    )


def validate_app_config(config_data: Dict[str, Any]) -> AppConfig:
    """
    Validate a whole parsed config.toml document.

    Args:
        config_data: Parsed TOML document (may be empty)

    Returns:
        Validated AppConfig instance

    Raises:
        ValidationError: If any section fails validation
    """
    logging_data = config_data.get("logging", {})
    return AppConfig(
        monitor=validate_monitor_config(config_data.get("monitor", {})),
        display=validate_display_config(config_data.get("display", {})),
        log_level=validate_log_level(logging_data.get("level", "WARNING")),
    )
