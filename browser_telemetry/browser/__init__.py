"""Browser module - Playwright driver, capture events, enrichment, and session state."""

from browser_telemetry.browser.driver import BrowserDriver
from browser_telemetry.browser.session import SessionState, create_session
from browser_telemetry.browser.events import (
    CaptureEventBus,
    CaptureEvent,
    ConsoleMessage,
    PageError,
    ClickCaptured,
    FrameNavigated,
    EventCounter,
    EventKind,
)
from browser_telemetry.browser.enrichment import enrich_click, enrich_clicks

__all__ = [
    "BrowserDriver",
    "SessionState",
    "create_session",
    "CaptureEventBus",
    "CaptureEvent",
    "ConsoleMessage",
    "PageError",
    "ClickCaptured",
    "FrameNavigated",
    "EventCounter",
    "EventKind",
    "enrich_click",
    "enrich_clicks",
]
