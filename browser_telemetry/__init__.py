"""
Browser Telemetry
=================

Captures console logs, clicks and navigations from a Playwright-driven
Chromium window and serves them to an agent over the Model Context Protocol.

Main Components:
- EventStore: Bounded buffers for logs, clicks and navigations
- select: Head/tail selection over a buffer
- SessionState: The running browser session and its captured data
- build_server: FastMCP server exposing the query tools

Quick Start:
    >>> from browser_telemetry import build_server
    >>>
    >>> server = build_server(start_url="https://example.com")
    >>> server.run("stdio")
"""

__version__ = "1.0.0"
__author__ = "Browser Telemetry Team"

# Lazy imports keep Playwright and MCP out of `import browser_telemetry`
_LAZY_IMPORTS = {
    "EventStore": ("browser_telemetry.capture.buffers", "EventStore"),
    "LogRecord": ("browser_telemetry.capture.views", "LogRecord"),
    "ClickRecord": ("browser_telemetry.capture.views", "ClickRecord"),
    "NavigationRecord": ("browser_telemetry.capture.views", "NavigationRecord"),
    "SliceRequest": ("browser_telemetry.capture.selection", "SliceRequest"),
    "select": ("browser_telemetry.capture.selection", "select"),
    "SessionState": ("browser_telemetry.browser.session", "SessionState"),
    "BrowserDriver": ("browser_telemetry.browser.driver", "BrowserDriver"),
    "TelemetryService": ("browser_telemetry.server.service", "TelemetryService"),
    "build_server": ("browser_telemetry.server.app", "build_server"),
    "Config": ("browser_telemetry.core.config", "Config"),
}


def __getattr__(name: str):
    """Lazy import mechanism for main components."""
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        from importlib import import_module
        module = import_module(module_path)
        attr = getattr(module, attr_name)
        globals()[name] = attr
        return attr
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "EventStore",
    "LogRecord",
    "ClickRecord",
    "NavigationRecord",
    "SliceRequest",
    "select",
    "SessionState",
    "BrowserDriver",
    "TelemetryService",
    "build_server",
    "Config",
    "__version__",
]
