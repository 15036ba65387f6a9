"""Process-scoped session state: event store, capture bus and browser driver."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, AsyncIterator, Callable, Optional
from uuid import uuid4

from browser_telemetry.browser.driver import BrowserDriver
from browser_telemetry.browser.events import (
    CaptureEventBus,
    ClickCaptured,
    ConsoleMessage,
    EventCounter,
    EventKind,
    FrameNavigated,
    PageError,
)
from browser_telemetry.capture.buffers import EventStore, insert_click, insert_log, insert_navigation
from browser_telemetry.capture.views import ClickRecord, LogRecord, NavigationRecord
from browser_telemetry.core.config import Config
from browser_telemetry.core.exceptions import SessionExpiredError
from browser_telemetry.core.logging import log_capture_event

logger = logging.getLogger(__name__)


class SessionState:
    """
    Everything one browser session owns.

    Built once at startup and handed to every request handler. The store is
    only written through the bus subscriptions registered here.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        driver: Optional[BrowserDriver] = None,
        on_browser_close: Optional[Callable[[], Any]] = None,
    ):
        self.config = config or Config.from_env()
        self.session_id = str(uuid4())[:8]

        self.store = EventStore(self.config.capture)
        self.event_bus = driver.event_bus if driver else CaptureEventBus()
        self.counter = EventCounter(self.event_bus)
        self._driver = driver or BrowserDriver(
            self.config.browser,
            event_bus=self.event_bus,
            on_close=on_browser_close,
        )

        self._is_active = False
        self._start_time: Optional[datetime] = None

        self._register_event_handlers()

    def _register_event_handlers(self) -> None:
        """Route capture events into the store."""
        self.event_bus.subscribe(EventKind.CONSOLE, self._handle_console)
        self.event_bus.subscribe(EventKind.PAGE_ERROR, self._handle_page_error)
        self.event_bus.subscribe(EventKind.CLICK, self._handle_click)
        self.event_bus.subscribe(EventKind.NAVIGATION, self._handle_navigation)

    def _handle_console(self, event: ConsoleMessage) -> None:
        insert_log(self.store, LogRecord(
            timestamp=event.timestamp,
            kind=event.message_type,
            text=event.text,
        ))

    def _handle_page_error(self, event: PageError) -> None:
        insert_log(self.store, LogRecord(timestamp=event.timestamp, kind="error", text=event.text))
        log_capture_event("pageerror", message=event.message)

    def _handle_click(self, event: ClickCaptured) -> None:
        record = ClickRecord.model_validate({**event.data, "timestamp": event.timestamp})
        insert_click(self.store, record)
        log_capture_event("click", selector=record.selector)

    def _handle_navigation(self, event: FrameNavigated) -> None:
        insert_navigation(self.store, NavigationRecord(
            timestamp=event.timestamp,
            url=event.url,
            title=event.title,
        ))
        log_capture_event("navigation", url=event.url)

    async def start(self, start_url: Optional[str] = None) -> "SessionState":
        """Launch the browser and optionally open ``start_url``."""
        if self._is_active:
            logger.warning("Session already active")
            return self

        logger.info(f"Starting browser session {self.session_id}")
        await self._driver.launch()
        self._is_active = True
        self._start_time = datetime.now()

        if start_url:
            await self._driver.navigate(start_url)
            logger.info(f"Navigated to: {start_url}")

        return self

    async def stop(self) -> None:
        """Close the browser. Captured records stay readable."""
        if not self._is_active:
            return

        logger.info(f"Stopping browser session {self.session_id}")
        await self._driver.close()
        self._is_active = False

    async def __aenter__(self) -> "SessionState":
        return await self.start()

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.stop()

    def _ensure_active(self) -> None:
        if not self._is_active:
            raise SessionExpiredError(self.session_id)

    @property
    def driver(self) -> BrowserDriver:
        """Get the browser driver."""
        self._ensure_active()
        return self._driver

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def uptime_seconds(self) -> float:
        if not self._start_time:
            return 0.0
        return (datetime.now() - self._start_time).total_seconds()


@asynccontextmanager
async def create_session(
    config: Optional[Config] = None,
    start_url: Optional[str] = None,
    **kwargs
) -> AsyncIterator[SessionState]:
    """
    Context manager for a running session.

    Usage:
        async with create_session(start_url="https://example.com") as state:
            print(state.store.counts())
    """
    state = SessionState(config, **kwargs)
    try:
        yield await state.start(start_url)
    finally:
        await state.stop()
