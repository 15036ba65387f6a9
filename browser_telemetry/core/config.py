"""Configuration management for the browser telemetry server."""

import os
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_USER_DATA_DIR = str(Path.home() / ".browser-telemetry" / "user-data")


class BrowserConfig(BaseModel):
    """Browser-specific configuration."""

    headless: bool = Field(
        default=False,
        description="Run browser in headless mode"
    )
    user_data_dir: str = Field(
        default=DEFAULT_USER_DATA_DIR,
        description="Persistent profile directory (cookies, localStorage)"
    )
    timeout: int = Field(
        default=30000,
        description="Default timeout in milliseconds"
    )
    slow_mo: int = Field(
        default=0,
        description="Slow down operations by specified milliseconds"
    )

    @classmethod
    def from_env(cls) -> "BrowserConfig":
        """Create config from environment variables."""
        return cls(
            headless=os.getenv("BROWSER_HEADLESS", "false").lower() == "true",
            user_data_dir=os.getenv("BROWSER_USER_DATA_DIR", DEFAULT_USER_DATA_DIR),
            timeout=int(os.getenv("BROWSER_TIMEOUT", "30000")),
            slow_mo=int(os.getenv("BROWSER_SLOW_MO", "0")),
        )


class CaptureConfig(BaseModel):
    """Capacities of the capture buffers."""

    max_logs: int = Field(
        default=50_000,
        gt=0,
        description="Maximum console log records kept"
    )
    max_clicks: int = Field(
        default=50,
        gt=0,
        description="Maximum click records kept"
    )
    max_navigations: int = Field(
        default=50,
        gt=0,
        description="Maximum navigation records kept"
    )
    default_logs_return: int = Field(
        default=10,
        ge=0,
        description="Logs returned when neither head nor tail is given"
    )

    @classmethod
    def from_env(cls) -> "CaptureConfig":
        """Create config from environment variables."""
        return cls(
            max_logs=int(os.getenv("CAPTURE_MAX_LOGS", "50000")),
            max_clicks=int(os.getenv("CAPTURE_MAX_CLICKS", "50")),
            max_navigations=int(os.getenv("CAPTURE_MAX_NAVIGATIONS", "50")),
            default_logs_return=int(os.getenv("CAPTURE_DEFAULT_LOGS_RETURN", "10")),
        )


class Config(BaseModel):
    """Main configuration container."""

    browser: BrowserConfig = Field(default_factory=BrowserConfig.from_env)
    capture: CaptureConfig = Field(default_factory=CaptureConfig.from_env)

    server_name: str = Field(
        default="browser-telemetry",
        description="Name advertised to MCP clients"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Log file path"
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON formatted logs"
    )

    @classmethod
    def from_env(cls) -> "Config":
        """Create complete config from environment variables."""
        return cls(
            browser=BrowserConfig.from_env(),
            capture=CaptureConfig.from_env(),
            server_name=os.getenv("MCP_SERVER_NAME", "browser-telemetry"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE"),
            json_logs=os.getenv("LOG_JSON", "false").lower() == "true",
        )

    def ensure_directories(self) -> None:
        """Ensure required directories exist."""
        Path(self.browser.user_data_dir).expanduser().mkdir(parents=True, exist_ok=True)
