"""Data models for captured browser telemetry."""

import time
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_TEXT_CONTENT = 200
MAX_INPUT_VALUE = 500


def now_ms() -> int:
    """Current wall-clock time in integer milliseconds."""
    return int(time.time() * 1000)


class CapturedRecord(BaseModel):
    """Base for records held in the capture buffers.

    Records are frozen once built and serialize with their camelCase wire names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timestamp: int = Field(default_factory=now_ms, description="Capture time (ms)")

    def to_wire(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dict using wire names, dropping None values."""
        return self.model_dump(by_alias=True, exclude_none=True)


class LogRecord(CapturedRecord):
    """A console message or uncaught page error."""

    kind: str = Field(default="log", alias="type", description="log, error, warning, ...")
    text: str = Field(default="", description="Message text")


class ClickRecord(CapturedRecord):
    """A click captured by the in-page listener."""

    selector: str = Field(description="CSS selector for the clicked element")
    tag_name: str = Field(alias="tagName", description="Lower-cased tag name")
    attributes: Dict[str, str] = Field(default_factory=dict, description="HTML attributes")
    text_content: str = Field(default="", alias="textContent", description="Trimmed text")
    input_value: Optional[str] = Field(
        default=None,
        alias="inputValue",
        description="Value of the clicked (or nested) form control"
    )

    @field_validator("text_content")
    @classmethod
    def _truncate_text(cls, value: str) -> str:
        return value[:MAX_TEXT_CONTENT]

    @field_validator("input_value")
    @classmethod
    def _truncate_input(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value[:MAX_INPUT_VALUE]


class NavigationRecord(CapturedRecord):
    """A main-frame navigation."""

    url: str = Field(description="URL navigated to")
    title: str = Field(default="", description="Document title after navigation")


class PageInfo(BaseModel):
    """Current URL and title of the live page."""

    url: str
    title: str = ""

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump()
