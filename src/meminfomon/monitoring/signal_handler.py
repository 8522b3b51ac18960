"""
Signal handling for the poll loop.

SIGINT and SIGTERM request a graceful shutdown of the monitor instead of
interrupting a poll cycle halfway.
"""

import logging
import signal
from typing import Any

from .coordinator import MeminfoMonitor

logger = logging.getLogger(__name__)


class SignalHandler:
    """
    Manages signal registration and cleanup for a MeminfoMonitor.
    """

    def __init__(self, monitor: MeminfoMonitor):
        self.monitor = monitor
        self._original_sigint_handler = None
        self._original_sigterm_handler = None
        self._signal_handlers_set = False

    def setup_signal_handlers(self) -> None:
        """Install handlers that request a monitor shutdown."""
        try:
            self._original_sigint_handler = signal.signal(signal.SIGINT, self._handle_signal)
            self._original_sigterm_handler = signal.signal(signal.SIGTERM, self._handle_signal)
            self._signal_handlers_set = True
            logger.debug("Signal handlers set up for monitor")
        except ValueError as e:
            # signal.signal only works in the main thread
            logger.warning(f"Failed to set up signal handlers: {e}")

    def cleanup_signal_handlers(self) -> None:
        """Restore original signal handlers."""
        if not self._signal_handlers_set:
            return

        try:
            if self._original_sigint_handler is not None:
                signal.signal(signal.SIGINT, self._original_sigint_handler)
            if self._original_sigterm_handler is not None:
                signal.signal(signal.SIGTERM, self._original_sigterm_handler)
            logger.debug("Signal handlers restored")
        except ValueError as e:
            logger.warning(f"Failed to restore signal handlers: {e}")
        finally:
            self._signal_handlers_set = False

    def __enter__(self) -> "SignalHandler":
        self.setup_signal_handlers()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup_signal_handlers()

    def _handle_signal(self, signum: int, frame: Any) -> None:
        if self.monitor.shutdown_requested:
            logger.warning("Shutdown already in progress.")
            return
        logger.info(f"Signal {signal.strsignal(signum)} received. Stopping monitor...")
        self.monitor.request_shutdown()
