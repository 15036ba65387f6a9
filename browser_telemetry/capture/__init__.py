"""Capture module - records, bounded buffers, and head/tail selection."""

from browser_telemetry.capture.views import (
    LogRecord,
    ClickRecord,
    NavigationRecord,
    PageInfo,
    now_ms,
)
from browser_telemetry.capture.buffers import (
    EventStore,
    NewestFirstBuffer,
    OldestFirstBuffer,
    insert_log,
    insert_click,
    insert_navigation,
    MAX_STORED_LOGS,
    MAX_STORED_CLICKS,
    MAX_STORED_NAVIGATIONS,
    DEFAULT_LOGS_RETURN,
)
from browser_telemetry.capture.selection import (
    SliceRequest,
    select,
    select_logs,
    select_clicks,
    select_navigations,
)

__all__ = [
    "LogRecord",
    "ClickRecord",
    "NavigationRecord",
    "PageInfo",
    "now_ms",
    "EventStore",
    "NewestFirstBuffer",
    "OldestFirstBuffer",
    "insert_log",
    "insert_click",
    "insert_navigation",
    "MAX_STORED_LOGS",
    "MAX_STORED_CLICKS",
    "MAX_STORED_NAVIGATIONS",
    "DEFAULT_LOGS_RETURN",
    "SliceRequest",
    "select",
    "select_logs",
    "select_clicks",
    "select_navigations",
]
