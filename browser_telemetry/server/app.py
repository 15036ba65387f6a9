"""MCP server exposing captured browser telemetry as tools."""

import logging
from contextlib import asynccontextmanager
from typing import Annotated, Any, AsyncIterator, Callable, Optional

from mcp.server.fastmcp import Context, FastMCP
from pydantic import Field

from browser_telemetry.browser.session import SessionState
from browser_telemetry.core.config import Config
from browser_telemetry.server.service import TelemetryService

logger = logging.getLogger(__name__)

USAGE_PROMPT = """# Browser Telemetry MCP Server

This MCP server opens a persistent Chromium browser window and captures user interactions. You can observe what the user clicks, where they navigate and what the page logs to the console.

## Available Tools

### get_logs
Retrieves console logs from the browser page.

**Examples:**
- `get_logs()` - Returns the last 10 console logs
- `get_logs({ tail: 5 })` - Returns the 5 most recent logs
- `get_logs({ head: 20 })` - Returns the first 20 logs

### get_clicks
Retrieves user click events with CSS selectors and DOM context.

**Examples:**
- `get_clicks()` - Returns recent clicks (most recent first)
- `get_clicks({ head: 3 })` - Returns the 3 most recent clicks
- `get_clicks({ parent_depth: 2 })` - Include 2 parent elements for context
- `get_clicks({ child_depth: 1 })` - Include immediate children of clicked elements

### get_page_info
Returns the current page URL and title.

### get_navigations
Returns navigation history (most recent first).

**Examples:**
- `get_navigations()` - Returns all navigation history
- `get_navigations({ head: 5 })` - Returns the 5 most recent navigations

## Typical Workflow

1. User navigates to a page in the browser window
2. User interacts with the page (clicks buttons, fills forms, etc.)
3. Use `get_clicks()` to see what elements they clicked
4. Use `get_logs()` to check for errors or debug output"""

Count = Optional[int]


def get_service(ctx: Context) -> TelemetryService:
    """Get the telemetry service from the request context."""
    return ctx.request_context.lifespan_context


def build_server(
    config: Optional[Config] = None,
    start_url: Optional[str] = None,
    on_browser_close: Optional[Callable[[], Any]] = None,
    state_factory: Optional[Callable[[], SessionState]] = None,
) -> FastMCP:
    """
    Create the MCP server.

    The browser session starts with the server's lifespan and closes with it.

    Args:
        config: Server configuration (environment by default)
        start_url: Page opened right after launch
        on_browser_close: Called when the user closes the browser window
        state_factory: Builds the session instead of launching Chromium
            from ``config``
    """
    config = config or Config.from_env()

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[TelemetryService]:
        if state_factory is not None:
            state = state_factory()
        else:
            state = SessionState(config, on_browser_close=on_browser_close)
        try:
            await state.start(start_url)
            logger.info("MCP server running")
            yield TelemetryService(state)
        finally:
            logger.info("Shutting down...")
            await state.stop()

    mcp = FastMCP(config.server_name, lifespan=lifespan)

    @mcp.tool(description="Retrieves console logs from the browser")
    async def get_logs(
        ctx: Context,
        head: Annotated[Count, Field(description="Return only the first N logs")] = None,
        tail: Annotated[Count, Field(description="Return only the last N logs")] = None,
    ) -> str:
        service = get_service(ctx)
        return service.render(service.get_logs(head=head, tail=tail))

    @mcp.tool(
        description=(
            "Retrieves captured click events from user interactions. "
            "Returns most recent clicks first."
        )
    )
    async def get_clicks(
        ctx: Context,
        head: Annotated[Count, Field(description="Return only the first N clicks (most recent)")] = None,
        tail: Annotated[Count, Field(description="Return only the last N clicks (oldest)")] = None,
        parent_depth: Annotated[
            Count, Field(description="Include N parent nodes above clicked element")
        ] = None,
        child_depth: Annotated[
            Count, Field(description="Include N levels of child nodes below clicked element")
        ] = None,
    ) -> str:
        service = get_service(ctx)
        clicks = await service.get_clicks(
            head=head,
            tail=tail,
            parent_depth=parent_depth,
            child_depth=child_depth,
        )
        return service.render(clicks)

    @mcp.tool(description="Returns current page URL and title")
    async def get_page_info(ctx: Context) -> str:
        service = get_service(ctx)
        return service.render(await service.get_page_info())

    @mcp.tool(description="Returns navigation history (most recent first)")
    async def get_navigations(
        ctx: Context,
        head: Annotated[Count, Field(description="Return only the first N navigations")] = None,
    ) -> str:
        service = get_service(ctx)
        return service.render(service.get_navigations(head=head))

    @mcp.prompt(
        name="browser-helper",
        description="Explains how the browser helper works and provides usage examples",
    )
    def browser_helper() -> str:
        return USAGE_PROMPT

    return mcp
