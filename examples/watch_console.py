"""
Watch Console Example
=====================

Opens a page, triggers some console output and a click from script, then
prints what the capture buffers hold. Runs without an MCP client.

Usage:
    python examples/watch_console.py https://example.com
"""

import asyncio
import sys

from browser_telemetry.browser.session import create_session
from browser_telemetry.server.service import TelemetryService


async def watch_console(url: str):
    async with create_session(start_url=url) as state:
        await state.driver.evaluate("""() => {
            console.log('hello from the page');
            console.warn('something looks off');
            document.body.click();
        }""")
        await state.driver.wait_for_navigations()

        service = TelemetryService(state)
        print("📋 Logs")
        print(service.render(service.get_logs()))
        print("\n🖱️  Clicks")
        print(service.render(await service.get_clicks(parent_depth=1)))
        print("\n🔗 Navigations")
        print(service.render(service.get_navigations()))


if __name__ == "__main__":
    asyncio.run(watch_console(sys.argv[1] if len(sys.argv) > 1 else "https://example.com"))
