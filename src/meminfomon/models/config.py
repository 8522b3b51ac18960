"""
Configuration data models.

These are the validated forms of the sections in `config.toml`.
"""

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_MEMINFO_PATH = Path("/proc/meminfo")
DEFAULT_INTERVAL_SECONDS = 2.0
MIN_INTERVAL_SECONDS = 0.1
MAX_INTERVAL_SECONDS = 3600.0

# <alphabetic key>:<spaces><digits><spaces><alphabetic unit>, one per line.
# Only horizontal whitespace separates the fields so that a unit-less line
# (e.g. "HugePages_Total:       0") never borrows the next line's key as a unit.
MEMINFO_LINE_PATTERN = r"^([A-Za-z]+):[ \t]+([0-9]+)[ \t]+([A-Za-z]+)"


@dataclass
class MonitorConfig:
    """
    Configuration for sampling, loaded from the `[monitor]` section.
    """

    # The meminfo-style text file re-read on every poll cycle.
    meminfo_path: Path = DEFAULT_MEMINFO_PATH
    # Fixed period between poll cycles.
    interval_seconds: float = DEFAULT_INTERVAL_SECONDS
    # Line pattern with three capture groups: key, value, unit.
    line_pattern: str = MEMINFO_LINE_PATTERN


@dataclass
class DisplayConfig:
    """
    Configuration for the terminal display, loaded from the `[display]` section.
    """

    # Number of character cells in each level bar.
    bar_width: int = 40
    # Clear the terminal before each frame instead of appending frames.
    redraw: bool = True


@dataclass
class AppConfig:
    """
    The root configuration object that aggregates all loaded settings.
    """

    monitor: MonitorConfig = field(default_factory=MonitorConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    # Root logger level name from the `[logging]` section.
    log_level: str = "WARNING"
