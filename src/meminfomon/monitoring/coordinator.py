"""
Poll cycle coordination.

The MeminfoMonitor owns the tracked counter set and ties the sampler, the
tracker and the renderer together. One poll cycle re-reads the source,
updates both counters and renders the result. Nothing that happens during a
cycle at runtime is allowed to stop the monitor; failures only degrade to
diagnostics and the previous counter state is kept.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from ..collectors.meminfo import MeminfoCollector, MeminfoEntries
from ..models.counters import MemCounts
from ..tracking.tracker import memory_count_update
from ..validation import ErrorSeverity, handle_error

logger = logging.getLogger(__name__)


class CounterRenderer(Protocol):
    """Anything that can draw the tracked counters."""

    def render(self, counts: MemCounts) -> None:
        ...


@dataclass
class PollOutcome:
    """Summary of a single poll cycle."""

    # Whether the source could be read at all.
    source_read: bool
    # Keys of the counters whose state was updated this cycle.
    updated_keys: List[str] = field(default_factory=list)


class MeminfoMonitor:
    """
    Drives poll cycles over a meminfo source.

    Attributes:
        collector: Reads and parses the source.
        counts: The tracked counter set, owned by this monitor.
        renderer: Optional presentation collaborator called after each cycle.
    """

    def __init__(
        self,
        collector: MeminfoCollector,
        counts: Optional[MemCounts] = None,
        renderer: Optional[CounterRenderer] = None,
    ):
        self.collector = collector
        self.counts = counts if counts is not None else MemCounts()
        self.renderer = renderer
        self._stop_event = threading.Event()
        self.cycles_completed = 0

    def apply_samples(self, samples: MeminfoEntries) -> List[str]:
        """
        Update each tracked counter from a parsed sample mapping.

        Args:
            samples: key -> (value, unit) mapping from the collector.

        Returns:
            Keys of the counters that were updated.
        """
        updated = []
        source = str(self.collector.path)
        for key, mem_range in self.counts.items():
            if memory_count_update(samples.get(key), mem_range, key=key, source=source):
                updated.append(key)
        return updated

    def poll_once(self) -> PollOutcome:
        """
        Run one complete read, parse, update and render pass.

        Returns:
            A PollOutcome describing what happened.
        """
        samples = self.collector.read_samples()
        if samples is None:
            outcome = PollOutcome(source_read=False)
        else:
            outcome = PollOutcome(source_read=True, updated_keys=self.apply_samples(samples))

        self._render()
        self.cycles_completed += 1
        logger.debug(
            f"Poll cycle {self.cycles_completed} complete: "
            f"read={outcome.source_read}, updated={outcome.updated_keys}"
        )
        return outcome

    def _render(self) -> None:
        if self.renderer is None:
            return
        try:
            self.renderer.render(self.counts)
        except OSError as e:
            handle_error(
                error=e,
                context="rendering counters",
                severity=ErrorSeverity.WARNING,
                reraise=False,
                logger=logger,
            )

    def run(self, interval_seconds: float, max_cycles: Optional[int] = None) -> int:
        """
        Poll immediately and then every ``interval_seconds`` until stopped.

        Cycles never overlap: the wait for the next tick starts only after the
        current cycle has completed. A shutdown request interrupts the wait.

        Args:
            interval_seconds: Fixed period between cycles.
            max_cycles: Stop after this many cycles; None runs until
                        request_shutdown() is called.

        Returns:
            The number of cycles run.
        """
        self._stop_event.clear()
        cycles = 0
        logger.info(f"Starting poll loop every {interval_seconds}s on {self.collector.path}")
        while not self._stop_event.is_set():
            self.poll_once()
            cycles += 1
            if max_cycles is not None and cycles >= max_cycles:
                break
            self._stop_event.wait(interval_seconds)
        logger.info(f"Poll loop stopped after {cycles} cycles")
        return cycles

    def request_shutdown(self) -> None:
        """Ask a running poll loop to stop after the current cycle."""
        self._stop_event.set()

    @property
    def shutdown_requested(self) -> bool:
        return self._stop_event.is_set()
