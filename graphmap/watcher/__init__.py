"""Change watching - turns vault events into debounced resyncs."""

from .gate import DEFAULT_DEBOUNCE_SECONDS, ChangeGate, EventKind
from .handler import VaultEventHandler, start_watcher

__all__ = [
    "DEFAULT_DEBOUNCE_SECONDS",
    "ChangeGate",
    "EventKind",
    "VaultEventHandler",
    "start_watcher",
]
