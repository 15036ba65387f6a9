"""Core components - configuration, logging, and exceptions."""

from browser_telemetry.core.config import Config, BrowserConfig, CaptureConfig
from browser_telemetry.core.exceptions import (
    TelemetryError,
    BrowserError,
    EnrichmentError,
    InvalidSliceError,
    SessionError,
    SessionExpiredError,
)
from browser_telemetry.core.logging import setup_logging, get_logger

__all__ = [
    "Config",
    "BrowserConfig",
    "CaptureConfig",
    "TelemetryError",
    "BrowserError",
    "EnrichmentError",
    "InvalidSliceError",
    "SessionError",
    "SessionExpiredError",
    "setup_logging",
    "get_logger",
]
