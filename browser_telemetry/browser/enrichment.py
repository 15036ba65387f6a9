"""Best-effort DOM context for captured clicks."""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from browser_telemetry.browser.scripts import children_script, parent_chain_script
from browser_telemetry.capture.views import ClickRecord
from browser_telemetry.core.exceptions import EnrichmentError

logger = logging.getLogger(__name__)

# (script, selector) -> evaluation result
Evaluator = Callable[[str, str], Awaitable[Any]]


def wants_enrichment(parent_depth: Optional[int], child_depth: Optional[int]) -> bool:
    return bool(parent_depth and parent_depth > 0) or bool(child_depth and child_depth > 0)


async def _lookup(evaluate: Evaluator, script: str, selector: str) -> Any:
    try:
        return await evaluate(script, selector)
    except Exception as e:
        raise EnrichmentError(selector, details=str(e)) from e


async def enrich_click(
    evaluate: Evaluator,
    click: ClickRecord,
    parent_depth: Optional[int] = None,
    child_depth: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Wire dict for ``click`` with ``parents``/``children`` added when requested.

    Each lookup runs once. A failed lookup leaves its field out and is
    never raised.
    """
    enriched = click.to_wire()

    if parent_depth and parent_depth > 0:
        try:
            enriched["parents"] = await _lookup(
                evaluate, parent_chain_script(parent_depth), click.selector
            )
        except EnrichmentError as e:
            logger.debug(f"Skipping parents: {e}")

    if child_depth and child_depth > 0:
        try:
            enriched["children"] = await _lookup(
                evaluate, children_script(child_depth), click.selector
            )
        except EnrichmentError as e:
            logger.debug(f"Skipping children: {e}")

    return enriched


async def enrich_clicks(
    evaluate: Evaluator,
    clicks: List[ClickRecord],
    parent_depth: Optional[int] = None,
    child_depth: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """Enrich every click concurrently, keeping the input order."""
    if not wants_enrichment(parent_depth, child_depth):
        return [click.to_wire() for click in clicks]

    return list(await asyncio.gather(*(
        enrich_click(evaluate, click, parent_depth, child_depth)
        for click in clicks
    )))
