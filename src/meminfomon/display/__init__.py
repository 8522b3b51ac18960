"""
Presentation of the tracked counters.
"""

from .renderer import (
    LevelView,
    TerminalRenderer,
    WINDOW_TITLE,
    build_level_view,
    format_bytes,
    format_kib,
)

__all__ = [
    "LevelView",
    "TerminalRenderer",
    "WINDOW_TITLE",
    "build_level_view",
    "format_bytes",
    "format_kib",
]
