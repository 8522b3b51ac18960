"""
Sample collection from meminfo-style text sources.
"""

from .meminfo import (
    MEMINFO_LINE_PATTERN,
    MeminfoCollector,
    MeminfoEntries,
    compile_line_pattern,
    iter_meminfo_samples,
    parse_meminfo,
)

__all__ = [
    "MEMINFO_LINE_PATTERN",
    "MeminfoCollector",
    "MeminfoEntries",
    "compile_line_pattern",
    "iter_meminfo_samples",
    "parse_meminfo",
]
