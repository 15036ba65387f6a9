"""Capture event channel between the browser driver and the event store."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional
import logging

from browser_telemetry.capture.views import now_ms

logger = logging.getLogger(__name__)


class EventKind(str, Enum):
    """Kinds of captured browser events."""
    CONSOLE = "console"
    PAGE_ERROR = "pageerror"
    CLICK = "click"
    NAVIGATION = "navigation"


@dataclass
class CaptureEvent:
    """Base class for captured browser events."""

    kind: EventKind = field(init=False)
    timestamp: int = field(default_factory=now_ms)


@dataclass
class ConsoleMessage(CaptureEvent):
    """A console API call on the page."""

    message_type: str = "log"
    text: str = ""

    def __post_init__(self):
        self.kind = EventKind.CONSOLE


@dataclass
class PageError(CaptureEvent):
    """An uncaught exception thrown on the page."""

    message: str = ""

    def __post_init__(self):
        self.kind = EventKind.PAGE_ERROR

    @property
    def text(self) -> str:
        return f"[Uncaught] {self.message}"


@dataclass
class ClickCaptured(CaptureEvent):
    """Click data reported by the in-page listener."""

    data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.kind = EventKind.CLICK


@dataclass
class FrameNavigated(CaptureEvent):
    """The main frame committed a navigation."""

    url: str = ""
    title: str = ""

    def __post_init__(self):
        self.kind = EventKind.NAVIGATION


EventHandler = Callable[[CaptureEvent], Any]


class CaptureEventBus:
    """
    Synchronous publish/subscribe channel for capture events.

    Handlers run in subscription order inside ``publish``, so events of one
    kind reach the store in the order they were published.
    """

    def __init__(self):
        self._handlers: Dict[EventKind, List[EventHandler]] = {}
        self._global_handlers: List[EventHandler] = []

    def subscribe(self, kind: EventKind, handler: EventHandler) -> None:
        """Subscribe a handler to a specific event kind."""
        if kind not in self._handlers:
            self._handlers[kind] = []
        self._handlers[kind].append(handler)

    def subscribe_all(self, handler: EventHandler) -> None:
        """Subscribe a handler to all events."""
        self._global_handlers.append(handler)

    def unsubscribe(self, kind: EventKind, handler: EventHandler) -> None:
        """Unsubscribe a handler from an event kind."""
        if kind in self._handlers:
            self._handlers[kind] = [
                h for h in self._handlers[kind] if h != handler
            ]

    def publish(self, event: CaptureEvent) -> None:
        """Deliver an event to its kind's handlers, then to global handlers."""
        for handler in self._handlers.get(event.kind, []):
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Capture handler error for {event.kind.value}: {e}")

        for handler in self._global_handlers:
            try:
                handler(event)
            except Exception as e:
                logger.warning(f"Global capture handler error: {e}")

    def clear_handlers(self) -> None:
        """Clear all event handlers."""
        self._handlers.clear()
        self._global_handlers.clear()


class EventCounter:
    """Counts published events per kind."""

    def __init__(self, event_bus: CaptureEventBus):
        self.counts: Dict[str, int] = {kind.value: 0 for kind in EventKind}
        self.last_event_at: Optional[int] = None
        event_bus.subscribe_all(self._count)

    def _count(self, event: CaptureEvent) -> None:
        self.counts[event.kind.value] += 1
        self.last_event_at = event.timestamp

    def get_counts(self) -> Dict[str, int]:
        return self.counts.copy()
