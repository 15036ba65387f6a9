import pytest

from browser_telemetry.browser.enrichment import enrich_click, enrich_clicks, wants_enrichment
from browser_telemetry.browser.scripts import children_script, parent_chain_script

from conftest import FakePage, make_click


@pytest.mark.parametrize(
    "parent_depth, child_depth, expected",
    [
        (None, None, False),
        (0, 0, False),
        (-1, None, False),
        (1, None, True),
        (None, 2, True),
    ],
)
def test_wants_enrichment(parent_depth, child_depth, expected) -> None:
    assert wants_enrichment(parent_depth, child_depth) is expected


def test_scripts_embed_depth() -> None:
    assert "let d = 3;" in parent_chain_script(3)
    assert "getChildren(el, 2)" in children_script(2)


@pytest.mark.asyncio
async def test_enrich_click_adds_parents_and_children() -> None:
    page = FakePage()
    enriched = await enrich_click(page.evaluate, make_click(1), parent_depth=2, child_depth=1)

    assert enriched["selector"] == "#element-1"
    assert enriched["parents"][0]["tagName"] == "form"
    assert enriched["children"][0]["textContent"] == "Sign in"
    assert [arg for _, arg in page.evaluated] == ["#element-1", "#element-1"]


@pytest.mark.asyncio
async def test_enrich_click_only_requested_fields() -> None:
    page = FakePage()
    enriched = await enrich_click(page.evaluate, make_click(1), parent_depth=1)

    assert "parents" in enriched
    assert "children" not in enriched
    assert len(page.evaluated) == 1


@pytest.mark.asyncio
async def test_missing_element_keeps_base_fields() -> None:
    page = FakePage()
    page.missing_selectors.add("#element-2")
    clicks = [make_click(3), make_click(2), make_click(1)]

    enriched = await enrich_clicks(page.evaluate, clicks, parent_depth=1, child_depth=1)

    assert [c["timestamp"] for c in enriched] == [3, 2, 1]
    assert "parents" in enriched[0] and "children" in enriched[0]
    assert "parents" not in enriched[1] and "children" not in enriched[1]
    assert enriched[1]["selector"] == "#element-2"
    assert "parents" in enriched[2]


@pytest.mark.asyncio
async def test_each_lookup_is_attempted_once() -> None:
    page = FakePage()
    page.evaluate_error = RuntimeError("Target closed")

    enriched = await enrich_clicks(page.evaluate, [make_click(1)], parent_depth=1, child_depth=1)

    assert enriched == [make_click(1).to_wire()]
    assert len(page.evaluated) == 2


@pytest.mark.asyncio
async def test_no_depth_skips_page_round_trips() -> None:
    page = FakePage()
    enriched = await enrich_clicks(page.evaluate, [make_click(1)], parent_depth=0, child_depth=None)

    assert enriched == [make_click(1).to_wire()]
    assert page.evaluated == []
