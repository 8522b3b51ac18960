"""
Counter state data models.

This module defines the records the poll cycle works with:
- MeminfoSample: one parsed `<Key>: <value> <unit>` line, alive for a single poll.
- MemRange: the running state of one tracked counter.
- MemCounts: the fixed set of tracked counters (Dirty and Writeback).
"""

from dataclasses import dataclass, field
from typing import Iterator, Tuple

MEMINFO_KEY_DIRTY = "Dirty"
MEMINFO_KEY_WRITEBACK = "Writeback"

UNKNOWN_UNITS = "Unknown"


@dataclass(frozen=True)
class MeminfoSample:
    """
    A single matched line from the meminfo source.

    Attributes:
        key: The counter name (e.g. "Dirty").
        value: The raw numeric text, not yet converted.
        unit: The unit label as reported (e.g. "kB").
    """

    key: str
    value: str
    unit: str


@dataclass
class MemRange:
    """
    The latest progress of a tracked counter.

    ``highest`` never decreases and is always >= ``current`` after an update.
    Units are adopted from the latest sample; ``highest`` is not rescaled if
    they ever change.
    """

    # The latest observed value of the counter.
    current: float = 0.0
    # The highest value seen for the counter since the process started.
    highest: float = 0.0
    # The units the values are expressed in, expected to be "kB".
    units: str = UNKNOWN_UNITS


@dataclass
class MemCounts:
    """The page cache counters this tool tracks."""

    # Memory waiting to get written back to the disk.
    dirty: MemRange = field(default_factory=MemRange)
    # Memory actively being written back to the disk.
    writeback: MemRange = field(default_factory=MemRange)

    def items(self) -> Iterator[Tuple[str, MemRange]]:
        """Yield ``(meminfo key, state)`` pairs in display order."""
        yield MEMINFO_KEY_DIRTY, self.dirty
        yield MEMINFO_KEY_WRITEBACK, self.writeback
