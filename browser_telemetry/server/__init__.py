"""MCP server - tool definitions and query service."""

from browser_telemetry.server.app import build_server, USAGE_PROMPT
from browser_telemetry.server.service import TelemetryService

__all__ = [
    "build_server",
    "TelemetryService",
    "USAGE_PROMPT",
]
