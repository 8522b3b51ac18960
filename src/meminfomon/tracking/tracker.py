"""
Counter state tracking.

Converts a raw (value, unit) entry into a number and applies it to a MemRange
using the high-water-mark rule. A missing or unparseable entry only produces
a diagnostic; the counter state is left exactly as it was so a transient read
glitch cannot corrupt the displayed history.
"""

import logging
import re
from typing import Optional, Tuple

from ..models.config import DEFAULT_MEMINFO_PATH
from ..models.counters import MemRange

logger = logging.getLogger(__name__)

# Values are signed 64-bit integers; anything else is not a numeric field.
_INTEGER_FIELD = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


def process_parsed_entry(
    entry: Optional[Tuple[str, str]],
    key: str = "counter",
    source: str = str(DEFAULT_MEMINFO_PATH),
) -> Optional[Tuple[float, str]]:
    """
    Convert a raw meminfo entry into a numeric value and its unit.

    Args:
        entry: ``(value text, unit text)``, or None if the key was not found.
        key: Counter name, used in diagnostics.
        source: Source path, used in diagnostics.

    Returns:
        ``(value as float, unit)`` on success, otherwise None.
    """
    if entry is None:
        logger.warning(f"Memory count '{key}' not found in {source}")
        return None

    value, unit = entry
    numeric = None
    # 19 significant digits cover the int64 range; longer runs never reach int()
    if _INTEGER_FIELD.fullmatch(value) and len(value.lstrip("+-").lstrip("0")) <= 19:
        numeric = int(value)
    if numeric is None or not _INT64_MIN <= numeric <= _INT64_MAX:
        logger.warning(
            f"The numeric part ('{value}') of the '{key}' meminfo line could not "
            f"be parsed as a 64-bit integer"
        )
        return None

    return float(numeric), unit


def memory_count_update(
    entry: Optional[Tuple[str, str]],
    mem_range: MemRange,
    key: str = "counter",
    source: str = str(DEFAULT_MEMINFO_PATH),
) -> bool:
    """
    Apply the latest entry for a counter to its running state.

    The unit is always replaced by the latest reported one. The kernel prints
    these lines with a fixed "kB" unit, so ``highest`` is not rescaled if the
    unit were ever to change.

    Args:
        entry: ``(value text, unit text)`` from the latest sample, or None.
        mem_range: The counter state, updated in place.
        key: Counter name, used in diagnostics.
        source: Source path, used in diagnostics.

    Returns:
        True if the state was updated, False if it was left untouched.
    """
    parsed = process_parsed_entry(entry, key=key, source=source)
    if parsed is None:
        return False

    numeric, unit = parsed
    mem_range.units = unit
    if numeric > mem_range.highest:
        mem_range.current = numeric
        mem_range.highest = numeric
        logger.debug(f"New high-water mark for '{key}': {numeric} {unit}")
    else:
        mem_range.current = numeric
    return True
