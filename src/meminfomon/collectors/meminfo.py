"""
Sampler for meminfo-style text sources.

This module reads a `/proc/meminfo`-like file and extracts
`(key, value, unit)` triples from lines shaped like::

    Dirty:              1234 kB

Lines that do not match the line pattern are skipped; the source carries many
unrelated lines and that is not an error. A source that cannot be read is
reported to the caller as ``None`` and logged, never raised.
"""

import logging
import re
from pathlib import Path
from typing import Dict, Iterator, Optional, Pattern, Tuple, Union

from ..models.config import MEMINFO_LINE_PATTERN, DEFAULT_MEMINFO_PATH
from ..models.counters import MeminfoSample
from ..validation import ErrorSeverity, ValidationError, handle_file_error

logger = logging.getLogger(__name__)

# key -> (value text, unit text)
MeminfoEntries = Dict[str, Tuple[str, str]]


def compile_line_pattern(
    pattern: str = MEMINFO_LINE_PATTERN, field_name: str = "line_pattern"
) -> Pattern[str]:
    """
    Compile a meminfo line pattern.

    The pattern is compiled in multiline mode so ``^`` anchors at each line.

    Args:
        pattern: Regular expression with exactly three capture groups
                 (key, integer value, unit).
        field_name: Name used for the pattern in error messages.

    Returns:
        The compiled pattern.

    Raises:
        ValidationError: If the pattern does not compile or has the wrong
                         number of groups. This is a startup defect.
    """
    try:
        compiled = re.compile(pattern, re.MULTILINE)
    except re.error as e:
        raise ValidationError(
            f"{field_name} is not a valid regex pattern: {e}",
            field_name=field_name,
            value=pattern,
            severity=ErrorSeverity.CRITICAL,
        ) from e

    if compiled.groups != 3:
        raise ValidationError(
            f"{field_name} must have exactly three capture groups "
            f"(key, value, unit), got {compiled.groups}",
            field_name=field_name,
            value=pattern,
            severity=ErrorSeverity.CRITICAL,
        )
    return compiled


def iter_meminfo_samples(text: str, line_pattern: Pattern[str]) -> Iterator[MeminfoSample]:
    """Lazily yield one MeminfoSample per matching line of ``text``."""
    for match in line_pattern.finditer(text):
        key, value, unit = match.groups()
        yield MeminfoSample(key=key, value=value, unit=unit)


def parse_meminfo(text: str, line_pattern: Pattern[str]) -> MeminfoEntries:
    """
    Build a key -> (value, unit) mapping from meminfo text.

    If a key appears on more than one line the last occurrence wins.

    Args:
        text: The full source text (may be empty or malformed).
        line_pattern: Compiled pattern from compile_line_pattern().

    Returns:
        Mapping of every matched key to its raw value and unit text.
    """
    return {
        sample.key: (sample.value, sample.unit)
        for sample in iter_meminfo_samples(text, line_pattern)
    }


class MeminfoCollector:
    """
    Reads and parses the meminfo source on demand.

    The collector keeps only its configuration; every call re-reads the file
    from scratch since its contents change between polls.

    Attributes:
        path: The source file to read.
        line_pattern: The compiled line pattern.
    """

    def __init__(
        self,
        path: Union[str, Path] = DEFAULT_MEMINFO_PATH,
        line_pattern: Union[str, Pattern[str]] = MEMINFO_LINE_PATTERN,
    ):
        self.path = Path(path)
        if isinstance(line_pattern, str):
            line_pattern = compile_line_pattern(line_pattern)
        self.line_pattern = line_pattern
        logger.info(
            f"Initializing {self.__class__.__name__} with source: '{self.path}', "
            f"pattern: '{self.line_pattern.pattern}'"
        )

    def read_text(self) -> Optional[str]:
        """
        Read the whole source file.

        Returns:
            The file contents, or None if the file could not be read.
        """
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            handle_file_error(
                error=e,
                context=f"reading {self.path}",
                severity=ErrorSeverity.WARNING,
                reraise=False,
                logger=logger,
            )
            return None

    def read_samples(self) -> Optional[MeminfoEntries]:
        """
        Read the source and parse it.

        Returns:
            The key -> (value, unit) mapping, or None on a read failure.
        """
        text = self.read_text()
        if text is None:
            return None
        entries = parse_meminfo(text, self.line_pattern)
        logger.debug(f"Parsed {len(entries)} entries from {self.path}")
        return entries
