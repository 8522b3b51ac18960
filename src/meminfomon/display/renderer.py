"""
Terminal presentation of the tracked counters.

Each counter is drawn as a level bar whose value is the current reading and
whose maximum is the high-water mark, followed by a human-readable size.
Everything here is cosmetic: the counter state is only ever read.
"""

import logging
import sys
from dataclasses import dataclass
from typing import List, Optional, TextIO

from ..models.counters import MemCounts, MemRange

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Memory Information"

_BINARY_SUFFIXES = ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB"]

# Cursor home + clear screen.
_CLEAR_SCREEN = "\x1b[H\x1b[2J"


def format_bytes(size: float) -> str:
    """
    Format a byte count with binary prefixes, e.g. ``3276800 -> "3.1 MiB"``.

    One decimal place is kept and a trailing ``.0`` is dropped.
    """
    magnitude = float(size)
    index = 0
    while abs(magnitude) >= 1024.0 and index < len(_BINARY_SUFFIXES) - 1:
        magnitude /= 1024.0
        index += 1
    text = f"{magnitude:.1f}"
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text} {_BINARY_SUFFIXES[index]}"


def format_kib(value: float) -> str:
    """Format a kibibyte magnitude for display. The source reports "kB", which is KiB."""
    return format_bytes(value * 1024.0)


@dataclass(frozen=True)
class LevelView:
    """
    Render model for one counter.

    Attributes:
        name: Counter label shown to the left of the bar.
        value: Bar value (the current reading).
        max_value: Bar maximum (the high-water mark).
        units: Unit label as reported by the source.
        label: Human-readable current size.
        peak_label: Human-readable high-water mark.
    """

    name: str
    value: float
    max_value: float
    units: str
    label: str
    peak_label: str

    @property
    def fill_fraction(self) -> float:
        """Fraction of the bar to fill, 0.0 when nothing has been seen yet."""
        if self.max_value <= 0:
            return 0.0
        return min(max(self.value / self.max_value, 0.0), 1.0)


def build_level_view(name: str, mem_range: MemRange) -> LevelView:
    # kB is assumed; the kernel never reports these lines in any other unit
    return LevelView(
        name=name,
        value=mem_range.current,
        max_value=mem_range.highest,
        units=mem_range.units,
        label=format_kib(mem_range.current),
        peak_label=format_kib(mem_range.highest),
    )


class TerminalRenderer:
    """
    Draws the tracked counters as text level bars.

    Args:
        stream: Where frames are written (defaults to stdout).
        bar_width: Number of character cells per bar.
        redraw: Clear the screen before each frame instead of appending.
    """

    def __init__(self, stream: Optional[TextIO] = None, bar_width: int = 40, redraw: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        self.bar_width = bar_width
        self.redraw = redraw

    def _bar(self, view: LevelView) -> str:
        filled = int(round(view.fill_fraction * self.bar_width))
        return "[" + "#" * filled + "-" * (self.bar_width - filled) + "]"

    def format_frame(self, counts: MemCounts) -> str:
        """Build the text of one frame without writing it."""
        views: List[LevelView] = [build_level_view(name, state) for name, state in counts.items()]
        name_width = max(len(view.name) for view in views)
        lines = [WINDOW_TITLE]
        for view in views:
            lines.append(
                f"{view.name:<{name_width}}  {self._bar(view)}  "
                f"{view.label:>10}  (peak {view.peak_label})"
            )
        return "\n".join(lines) + "\n"

    def render(self, counts: MemCounts) -> None:
        """Write one frame for the current counter state."""
        frame = self.format_frame(counts)
        if self.redraw:
            frame = _CLEAR_SCREEN + frame
        self.stream.write(frame)
        self.stream.flush()
