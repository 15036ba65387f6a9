"""Fakes standing in for Playwright objects."""

from collections import defaultdict
from typing import Any, Dict, List, Optional

import pytest
import pytest_asyncio

from browser_telemetry.browser.driver import BrowserDriver
from browser_telemetry.browser.events import CaptureEventBus
from browser_telemetry.browser.session import SessionState
from browser_telemetry.capture.views import ClickRecord, LogRecord, NavigationRecord
from browser_telemetry.core.config import BrowserConfig, CaptureConfig, Config


class FakeFrame:
    def __init__(self, url: str = "about:blank"):
        self.url = url


class FakeConsoleMessage:
    def __init__(self, type: str, text: str):
        self.type = type
        self.text = text


class FakeError:
    def __init__(self, message: str):
        self.message = message


class FakePage:
    """Records listeners and answers evaluate() from canned data."""

    def __init__(self, title: str = "Example Domain"):
        self.handlers: Dict[str, List[Any]] = defaultdict(list)
        self.main_frame = FakeFrame()
        self.exposed: Dict[str, Any] = {}
        self.init_scripts: List[str] = []
        self.evaluated: List[tuple] = []
        self.page_title = title
        self.title_error: Optional[Exception] = None
        self.missing_selectors: set = set()
        self.evaluate_error: Optional[Exception] = None

    @property
    def url(self) -> str:
        return self.main_frame.url

    def on(self, event: str, handler) -> None:
        self.handlers[event].append(handler)

    def emit(self, event: str, *args) -> list:
        return [handler(*args) for handler in self.handlers[event]]

    def set_default_timeout(self, timeout: int) -> None:
        self.default_timeout = timeout

    async def expose_function(self, name: str, callback) -> None:
        self.exposed[name] = callback

    async def add_init_script(self, script: Optional[str] = None, path: Optional[str] = None) -> None:
        self.init_scripts.append(script)

    async def title(self) -> str:
        if self.title_error:
            raise self.title_error
        return self.page_title

    async def evaluate(self, script: str, arg: Any = None) -> Any:
        self.evaluated.append((script, arg))
        if self.evaluate_error:
            raise self.evaluate_error
        if arg in self.missing_selectors:
            raise Exception(f"Error: Element not found: {arg}")
        if "parents.push" in script:
            return [{"tagName": "form", "id": "login", "className": None}]
        if "getChildren" in script:
            return [{"tagName": "span", "id": None, "className": "label",
                     "textContent": "Sign in", "children": None}]
        return None

    def navigate(self, url: str, title: Optional[str] = None) -> None:
        """Simulate a committed main-frame navigation."""
        self.main_frame.url = url
        if title is not None:
            self.page_title = title
        self.emit("framenavigated", self.main_frame)


class StubDriver(BrowserDriver):
    """BrowserDriver whose launch attaches to a FakePage instead of Chromium."""

    def __init__(self, page: FakePage, **kwargs):
        super().__init__(BrowserConfig(), event_bus=CaptureEventBus(), **kwargs)
        self.fake_page = page
        self.launched = False

    async def launch(self) -> None:
        await self.attach(self.fake_page)
        self.launched = True

    async def navigate(self, url: str, wait_until: str = "load") -> None:
        self.fake_page.navigate(url)


def make_log(i: int) -> LogRecord:
    return LogRecord(timestamp=i, kind="log", text=f"Log message {i}")


def make_click(i: int) -> ClickRecord:
    return ClickRecord(
        timestamp=i,
        selector=f"#element-{i}",
        tag_name="button",
        attributes={"id": f"element-{i}"},
        text_content=f"Click {i}",
    )


def make_navigation(i: int, url: Optional[str] = None) -> NavigationRecord:
    return NavigationRecord(timestamp=i, url=url or f"https://example.com/{i}", title=f"Page {i}")


@pytest.fixture
def config() -> Config:
    return Config(browser=BrowserConfig(), capture=CaptureConfig())


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest_asyncio.fixture
async def running_state(config, fake_page):
    state = SessionState(config, driver=StubDriver(fake_page))
    await state.start()
    yield state
    await state.stop()
