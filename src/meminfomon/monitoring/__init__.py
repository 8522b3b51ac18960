"""
Poll cycle coordination and the timer loop.
"""

from .coordinator import CounterRenderer, MeminfoMonitor, PollOutcome
from .signal_handler import SignalHandler

__all__ = [
    "CounterRenderer",
    "MeminfoMonitor",
    "PollOutcome",
    "SignalHandler",
]
