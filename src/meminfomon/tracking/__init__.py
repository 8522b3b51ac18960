"""
Running-state tracking for the monitored counters.
"""

from .tracker import memory_count_update, process_parsed_entry

__all__ = [
    "memory_count_update",
    "process_parsed_entry",
]
