"""Query operations exposed to MCP clients."""

import json
import logging
from typing import Any, Dict, List, Optional

from browser_telemetry.browser.enrichment import enrich_clicks, wants_enrichment
from browser_telemetry.browser.session import SessionState
from browser_telemetry.capture.selection import select_clicks, select_logs, select_navigations
from browser_telemetry.core.logging import log_tool_call

logger = logging.getLogger(__name__)


class TelemetryService:
    """Reads the session's capture buffers on behalf of tool calls."""

    def __init__(self, state: SessionState):
        self.state = state

    def get_logs(
        self,
        head: Optional[int] = None,
        tail: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Console logs, oldest first."""
        result = [record.to_wire() for record in select_logs(self.state.store, head, tail)]
        log_tool_call("get_logs", len(result), head=head, tail=tail)
        return result

    async def get_clicks(
        self,
        head: Optional[int] = None,
        tail: Optional[int] = None,
        parent_depth: Optional[int] = None,
        child_depth: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """
        Captured clicks, most recent first.

        With ``parent_depth``/``child_depth`` above zero each click also gets
        ``parents``/``children`` read from the live page. The selection is
        taken before any page round-trip, so clicks arriving meanwhile do not
        change which records are described.
        """
        selected = select_clicks(self.state.store, head, tail)
        if selected and wants_enrichment(parent_depth, child_depth):
            result = await enrich_clicks(
                self._evaluate,
                selected,
                parent_depth=parent_depth,
                child_depth=child_depth,
            )
        else:
            result = [record.to_wire() for record in selected]
        log_tool_call(
            "get_clicks",
            len(result),
            head=head,
            tail=tail,
            parent_depth=parent_depth,
            child_depth=child_depth,
        )
        return result

    async def _evaluate(self, script: str, arg: Any = None) -> Any:
        # A stopped session fails the lookup, not the request
        return await self.state.driver.evaluate(script, arg)

    async def get_page_info(self) -> Dict[str, Any]:
        """Current page URL and title."""
        info = await self.state.driver.page_info()
        return info.to_wire()

    def get_navigations(self, head: Optional[int] = None) -> List[Dict[str, Any]]:
        """Navigation history, most recent first."""
        result = [record.to_wire() for record in select_navigations(self.state.store, head)]
        log_tool_call("get_navigations", len(result), head=head)
        return result

    @staticmethod
    def render(payload: Any) -> str:
        """Serialize a tool result as indented JSON text."""
        return json.dumps(payload, indent=2, ensure_ascii=False)
