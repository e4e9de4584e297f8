"""Change gate - filters vault change events and debounces resyncs."""

import logging
import threading
from collections.abc import Callable
from enum import Enum
from typing import Any, Protocol

from graphmap.storage.settings import SyncConfiguration
from graphmap.vault.nodes import DocumentNode, NodeKind

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 2.0


class EventKind(Enum):
    CREATED = "created"
    DELETED = "deleted"
    RENAMED = "renamed"


class TimerHandle(Protocol):
    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


def _thread_timer(delay: float, fn: Callable[[], None]) -> TimerHandle:
    timer = threading.Timer(delay, fn)
    timer.daemon = True
    return timer


class ChangeGate:
    """Decides which changes warrant a resync and coalesces bursts of them.

    Debouncing is trailing-edge: every accepted event restarts the delay, and
    the action runs once the vault has been quiet for the whole delay.
    """

    def __init__(
        self,
        get_config: Callable[[], SyncConfiguration],
        action: Callable[[], Any],
        delay: float = DEFAULT_DEBOUNCE_SECONDS,
        timer_factory: TimerFactory = _thread_timer,
    ) -> None:
        self.get_config = get_config
        self.action = action
        self.delay = delay
        self.timer_factory = timer_factory
        self._timer: TimerHandle | None = None
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def should_sync(self, node: DocumentNode) -> bool:
        config = self.get_config()
        if not config.auto_sync_enabled:
            return False
        # Our own writes land in the container; never react to them
        if config.index_container_name in node.path:
            return False
        if node.kind is NodeKind.FILE and not node.is_markdown:
            return False
        return True

    def on_change(self, node: DocumentNode, event_kind: EventKind) -> bool:
        """Handle a change event. Returns True if a resync was scheduled."""
        if not self.should_sync(node):
            logger.debug(f"Ignoring {event_kind.value}: {node.path}")
            return False

        logger.debug(f"Change {event_kind.value}: {node.path}")
        self.schedule()
        return True

    def schedule(self) -> None:
        """Restart the debounce window."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            timer = self.timer_factory(self.delay, lambda: self._fire(timer))
            self._timer = timer
        timer.start()

    def cancel(self) -> None:
        """Drop any pending run."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def flush(self) -> bool:
        """Run the pending action now, if there is one."""
        with self._lock:
            if self._timer is None:
                return False
            self._timer.cancel()
            self._timer = None
        self._run()
        return True

    def _fire(self, timer: TimerHandle) -> None:
        with self._lock:
            # A superseded timer that was already firing
            if self._timer is not timer:
                return
            self._timer = None
        self._run()

    def _run(self) -> None:
        try:
            self.action()
        except Exception:
            logger.exception("Error during auto-sync")
