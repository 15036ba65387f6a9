"""Logging configuration for the browser telemetry server.

stdout carries MCP protocol traffic, so every handler writes to stderr
or to a file.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
import structlog


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_logs: bool = False
) -> logging.Logger:
    """
    Set up logging configuration for the server.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for logging
        json_logs: Whether to output JSON formatted logs

    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    configure_structlog(json_logs)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    line_format = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    if not json_logs:
        console_handler.setFormatter(line_format)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(line_format)
        root_logger.addHandler(file_handler)

    quiet_noisy_loggers()

    logger = logging.getLogger("browser_telemetry")
    logger.setLevel(numeric_level)

    return logger


def configure_structlog(json_logs: bool = False) -> None:
    """Route structlog through stdlib logging so nothing reaches stdout."""
    if json_logs:
        renderer = structlog.processors.JSONRenderer()
        timestamper = structlog.processors.TimeStamper(fmt="iso")
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)
        timestamper = structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S")

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def quiet_noisy_loggers() -> None:
    """Raise third-party loggers to WARNING."""
    for name in ("asyncio", "httpx", "httpcore", "mcp", "playwright"):
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str = "browser_telemetry") -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Logger name (usually module name)

    Returns:
        Bound logger instance
    """
    return structlog.get_logger(name)


def log_capture_event(kind: str, **details):
    """
    Log a captured browser event with consistent formatting.

    Args:
        kind: Event kind (console, pageerror, click, navigation)
        **details: Additional event details
    """
    logger = get_logger("browser_telemetry.capture")
    logger.debug(f"Captured {kind}", kind=kind, **details)


def log_tool_call(tool: str, returned: int, **arguments):
    """Log an MCP tool invocation and how many records it returned."""
    logger = get_logger("browser_telemetry.server")
    logger.info(
        f"Tool {tool}",
        tool=tool,
        returned=returned,
        **{k: v for k, v in arguments.items() if v is not None}
    )
