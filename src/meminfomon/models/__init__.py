"""
Data models for the monitoring system.

Configuration Models:
- Sampling settings (source path, poll interval, line pattern)
- Display settings

Counter Models:
- Parsed meminfo samples
- Per-counter running state and the tracked counter set
"""

from .config import (
    AppConfig,
    DisplayConfig,
    MonitorConfig,
    DEFAULT_INTERVAL_SECONDS,
    MAX_INTERVAL_SECONDS,
    MIN_INTERVAL_SECONDS,
    MEMINFO_LINE_PATTERN,
    DEFAULT_MEMINFO_PATH,
)
from .counters import (
    MemCounts,
    MemRange,
    MeminfoSample,
    MEMINFO_KEY_DIRTY,
    MEMINFO_KEY_WRITEBACK,
    UNKNOWN_UNITS,
)

__all__ = [
    # Configuration
    "AppConfig",
    "DisplayConfig",
    "MonitorConfig",
    "DEFAULT_INTERVAL_SECONDS",
    "MAX_INTERVAL_SECONDS",
    "MIN_INTERVAL_SECONDS",
    "MEMINFO_LINE_PATTERN",
    "DEFAULT_MEMINFO_PATH",
    # Counters
    "MemCounts",
    "MemRange",
    "MeminfoSample",
    "MEMINFO_KEY_DIRTY",
    "MEMINFO_KEY_WRITEBACK",
    "UNKNOWN_UNITS",
]
