"""
meminfomon: Dirty and Writeback page cache monitor.

Polls a `/proc/meminfo`-style source on a fixed interval, tracks the current
value and high-water mark of the "Dirty" and "Writeback" counters, and draws
them as level bars in the terminal.

The package is organized into specialized modules:
- config: Configuration loading and validation
- models: Counter state and configuration data structures
- validation: Input validation and error handling
- collectors: Reading and parsing the meminfo source
- tracking: Value conversion and the high-water-mark update rule
- monitoring: Poll cycle coordination and the timer loop
- display: Terminal rendering
- cli: Command-line interface

Usage:
    From command line:
        meminfo-monitor [options]

    Programmatically:
        from meminfomon import MeminfoCollector, MeminfoMonitor
        monitor = MeminfoMonitor(MeminfoCollector("/proc/meminfo"))
        monitor.poll_once()
        print(monitor.counts.dirty.highest)
"""

from .config import get_config, clear_config_cache, set_config_path
from .collectors import MeminfoCollector, parse_meminfo
from .display import TerminalRenderer, format_kib
from .models import AppConfig, MemCounts, MemRange, MeminfoSample, MonitorConfig
from .monitoring import MeminfoMonitor, PollOutcome
from .tracking import memory_count_update, process_parsed_entry
from .validation import ValidationError
from .cli import main_cli

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "get_config",
    "clear_config_cache",
    "set_config_path",
    "AppConfig",
    "MonitorConfig",
    # Core
    "MeminfoCollector",
    "parse_meminfo",
    "MemCounts",
    "MemRange",
    "MeminfoSample",
    "MeminfoMonitor",
    "PollOutcome",
    "memory_count_update",
    "process_parsed_entry",
    # Presentation
    "TerminalRenderer",
    "format_kib",
    # Errors
    "ValidationError",
    "main_cli",
]
