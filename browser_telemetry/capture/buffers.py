"""Bounded event buffers for captured telemetry.

Logs are kept oldest-first (append, trim the front). Clicks and navigations
are kept newest-first (prepend, trim the end) so index 0 is always the most
recent record. Either way eviction drops the logically oldest records.
"""

from collections import deque
from typing import Deque, Generic, Iterator, List, Optional, TypeVar

from browser_telemetry.capture.views import ClickRecord, LogRecord, NavigationRecord
from browser_telemetry.core.config import CaptureConfig

# Storage limits
MAX_STORED_LOGS = 50_000
MAX_STORED_CLICKS = 50
MAX_STORED_NAVIGATIONS = 50
DEFAULT_LOGS_RETURN = 10

T = TypeVar("T")


class _CappedBuffer(Generic[T]):
    """Ordered sequence with a fixed maximum length."""

    def __init__(self, capacity: int):
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: Deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def snapshot(self) -> List[T]:
        """Copy of the current contents in storage order."""
        return list(self._items)


class OldestFirstBuffer(_CappedBuffer[T]):
    """Append at the end, evict from the front."""

    def add(self, item: T) -> None:
        self._items.append(item)
        while len(self._items) > self.capacity:
            self._items.popleft()


class NewestFirstBuffer(_CappedBuffer[T]):
    """Prepend at the front, evict from the end."""

    def add(self, item: T) -> None:
        self._items.appendleft(item)
        while len(self._items) > self.capacity:
            self._items.pop()


class EventStore:
    """The three capture buffers of one browser session."""

    def __init__(self, config: Optional[CaptureConfig] = None):
        config = config or CaptureConfig(
            max_logs=MAX_STORED_LOGS,
            max_clicks=MAX_STORED_CLICKS,
            max_navigations=MAX_STORED_NAVIGATIONS,
            default_logs_return=DEFAULT_LOGS_RETURN,
        )
        self.default_logs_return = config.default_logs_return
        self.logs: OldestFirstBuffer[LogRecord] = OldestFirstBuffer(config.max_logs)
        self.clicks: NewestFirstBuffer[ClickRecord] = NewestFirstBuffer(config.max_clicks)
        self.navigations: NewestFirstBuffer[NavigationRecord] = NewestFirstBuffer(
            config.max_navigations
        )

    def add_log(self, record: LogRecord) -> None:
        insert_log(self, record)

    def add_click(self, record: ClickRecord) -> None:
        insert_click(self, record)

    def add_navigation(self, record: NavigationRecord) -> None:
        insert_navigation(self, record)

    def counts(self) -> dict:
        return {
            "logs": len(self.logs),
            "clicks": len(self.clicks),
            "navigations": len(self.navigations),
        }


def insert_log(store: EventStore, record: LogRecord) -> None:
    """Append a log record, trimming the oldest beyond capacity."""
    store.logs.add(record)


def insert_click(store: EventStore, record: ClickRecord) -> None:
    """Prepend a click record, trimming the oldest beyond capacity."""
    store.clicks.add(record)


def insert_navigation(store: EventStore, record: NavigationRecord) -> None:
    """Prepend a navigation record, trimming the oldest beyond capacity."""
    store.navigations.add(record)
