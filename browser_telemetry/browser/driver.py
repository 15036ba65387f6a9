"""Browser driver using Playwright to capture page telemetry."""

import asyncio
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple
from playwright.async_api import (
    async_playwright,
    BrowserContext,
    ConsoleMessage as PlaywrightConsoleMessage,
    Error as PlaywrightError,
    Frame,
    Page,
    Playwright,
)

from browser_telemetry.browser.events import (
    CaptureEventBus,
    ClickCaptured,
    ConsoleMessage,
    FrameNavigated,
    PageError,
)
from browser_telemetry.browser.scripts import CLICK_CAPTURE_SCRIPT, REPORT_CLICK_BINDING
from browser_telemetry.capture.views import PageInfo, now_ms
from browser_telemetry.core.config import BrowserConfig
from browser_telemetry.core.exceptions import BrowserError, NavigationError

logger = logging.getLogger(__name__)


class BrowserDriver:
    """
    Playwright driver for a single persistent Chromium page.

    Turns console messages, page errors, clicks and main-frame navigations
    into capture events on the bus.
    """

    def __init__(
        self,
        config: Optional[BrowserConfig] = None,
        event_bus: Optional[CaptureEventBus] = None,
        on_close: Optional[Callable[[], Any]] = None,
    ):
        self.config = config or BrowserConfig.from_env()
        self.event_bus = event_bus or CaptureEventBus()
        self.on_close = on_close
        self._playwright: Optional[Playwright] = None
        self._context: Optional[BrowserContext] = None
        self._page: Optional[Page] = None
        self._navigations: "asyncio.Queue[Tuple[int, str]]" = asyncio.Queue()
        self._navigation_task: Optional[asyncio.Task] = None

    async def launch(self) -> None:
        """Launch a persistent browser context and attach capture to its page."""
        logger.info("Launching browser...")

        user_data_dir = Path(self.config.user_data_dir).expanduser()
        user_data_dir.mkdir(parents=True, exist_ok=True)

        self._playwright = await async_playwright().start()

        # no_viewport lets the page follow the real window size
        self._context = await self._playwright.chromium.launch_persistent_context(
            str(user_data_dir),
            headless=self.config.headless,
            slow_mo=self.config.slow_mo,
            no_viewport=True,
        )
        self._context.on("close", self._handle_context_close)

        page = self._context.pages[0] if self._context.pages else await self._context.new_page()
        page.set_default_timeout(self.config.timeout)
        await self.attach(page)

        logger.info(f"Browser launched (headless={self.config.headless}, user_data={user_data_dir})")

    async def attach(self, page: Page) -> None:
        """Wire capture listeners onto ``page`` and start the navigation consumer."""
        self._page = page

        page.on("console", self._handle_console)
        page.on("pageerror", self._handle_page_error)
        page.on("framenavigated", self._handle_frame_navigated)
        page.on("load", self._handle_load)

        await page.expose_function(REPORT_CLICK_BINDING, self._handle_click)
        await page.add_init_script(script=CLICK_CAPTURE_SCRIPT)

        if self._navigation_task is None:
            self._navigation_task = asyncio.create_task(self._drain_navigations())

    async def close(self) -> None:
        """Close the browser instance."""
        logger.info("Closing browser...")

        if self._navigation_task:
            self._navigation_task.cancel()
            try:
                await self._navigation_task
            except asyncio.CancelledError:
                pass
            self._navigation_task = None

        if self._context:
            # Closing on purpose is not the user closing the window
            self._context.remove_listener("close", self._handle_context_close)
            await self._context.close()
            self._context = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        self._page = None
        logger.info("Browser closed")

    @property
    def page(self) -> Page:
        """Get the current page."""
        if not self._page:
            raise BrowserError("Browser not launched")
        return self._page

    # Capture listeners

    def _handle_console(self, message: PlaywrightConsoleMessage) -> None:
        self.event_bus.publish(ConsoleMessage(
            timestamp=now_ms(),
            message_type=message.type,
            text=message.text,
        ))

    def _handle_page_error(self, error: PlaywrightError) -> None:
        self.event_bus.publish(PageError(timestamp=now_ms(), message=error.message))

    def _handle_click(self, data: Dict[str, Any]) -> None:
        self.event_bus.publish(ClickCaptured(timestamp=now_ms(), data=data))

    def _handle_frame_navigated(self, frame: Frame) -> None:
        if frame is not self.page.main_frame:
            return
        # Title lookup suspends; the queue keeps navigations in commit order
        self._navigations.put_nowait((now_ms(), frame.url))

    async def _drain_navigations(self) -> None:
        while True:
            timestamp, url = await self._navigations.get()
            try:
                title = await self.get_title()
                self.event_bus.publish(FrameNavigated(timestamp=timestamp, url=url, title=title))
            finally:
                self._navigations.task_done()

    async def _handle_load(self, page: Page) -> None:
        # The init script covers new documents; same-document loads need a re-run
        try:
            await page.evaluate(CLICK_CAPTURE_SCRIPT)
        except Exception as e:
            logger.debug(f"Click capture re-injection skipped: {e}")

    def _handle_context_close(self, context: BrowserContext) -> None:
        logger.info("Browser window closed")
        self._context = None
        if self.on_close:
            self.on_close()

    # Page access

    async def navigate(self, url: str, wait_until: str = "load") -> None:
        """Navigate to a URL."""
        try:
            logger.info(f"Navigating to: {url}")
            await self.page.goto(url, wait_until=wait_until)
        except Exception as e:
            raise NavigationError(f"Failed to navigate to {url}: {e}")

    async def get_title(self) -> str:
        """Get the current page title."""
        try:
            return await self.page.title()
        except Exception:
            # Execution context destroyed during navigation
            return ""

    async def page_info(self) -> PageInfo:
        """Current URL and title."""
        return PageInfo(url=self.page.url, title=await self.page.title())

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        """Evaluate a function expression in the page."""
        return await self.page.evaluate(script, arg)

    async def wait_for_navigations(self) -> None:
        """Block until every queued navigation has been published."""
        await self._navigations.join()
