import json

import pytest
from mcp.shared.memory import create_connected_server_and_client_session

from browser_telemetry.browser.scripts import REPORT_CLICK_BINDING
from browser_telemetry.browser.session import SessionState
from browser_telemetry.server.app import USAGE_PROMPT, build_server

from conftest import FakeConsoleMessage, StubDriver


@pytest.fixture
def server(config):
    return build_server(config)


@pytest.mark.asyncio
async def test_registers_query_tools(server) -> None:
    tools = {tool.name: tool for tool in await server.list_tools()}

    assert set(tools) == {"get_logs", "get_clicks", "get_page_info", "get_navigations"}
    assert set(tools["get_logs"].inputSchema["properties"]) == {"head", "tail"}
    assert set(tools["get_clicks"].inputSchema["properties"]) == {
        "head",
        "tail",
        "parent_depth",
        "child_depth",
    }
    assert set(tools["get_navigations"].inputSchema["properties"]) == {"head"}
    assert tools["get_page_info"].inputSchema.get("properties", {}) == {}


@pytest.mark.asyncio
async def test_tool_arguments_are_optional(server) -> None:
    for tool in await server.list_tools():
        assert not tool.inputSchema.get("required")


@pytest.mark.asyncio
async def test_registers_browser_helper_prompt(server) -> None:
    prompts = await server.list_prompts()
    assert [p.name for p in prompts] == ["browser-helper"]

    result = await server.get_prompt("browser-helper")
    assert result.messages[0].content.text == USAGE_PROMPT


def test_server_uses_configured_name(config) -> None:
    config.server_name = "telemetry-test"
    assert build_server(config).name == "telemetry-test"


@pytest.fixture
def stub_state(config, fake_page):
    return SessionState(config, driver=StubDriver(fake_page))


@pytest.fixture
def stub_server(config, stub_state):
    return build_server(config, state_factory=lambda: stub_state)


def payload(result):
    assert result.isError is False
    return json.loads(result.content[0].text)


@pytest.mark.asyncio
async def test_get_logs_tool_returns_indented_json(stub_server, fake_page) -> None:
    async with create_connected_server_and_client_session(stub_server._mcp_server) as client:
        for i in range(12):
            fake_page.emit("console", FakeConsoleMessage("log", f"message {i}"))

        result = await client.call_tool("get_logs", {})
        logs = payload(result)
        assert [entry["text"] for entry in logs] == [f"message {i}" for i in range(2, 12)]
        assert result.content[0].text.startswith("[\n  {")

        logs = payload(await client.call_tool("get_logs", {"head": 1}))
        assert logs == [{"timestamp": logs[0]["timestamp"], "type": "log", "text": "message 0"}]


@pytest.mark.asyncio
async def test_get_logs_tool_reports_negative_tail(stub_server) -> None:
    async with create_connected_server_and_client_session(stub_server._mcp_server) as client:
        result = await client.call_tool("get_logs", {"tail": -1})
        assert result.isError is True


@pytest.mark.asyncio
async def test_get_clicks_tool(stub_server, fake_page) -> None:
    async with create_connected_server_and_client_session(stub_server._mcp_server) as client:
        report = fake_page.exposed[REPORT_CLICK_BINDING]
        report({"selector": "#old", "tagName": "a", "attributes": {}, "textContent": "Old"})
        report({"selector": "#new", "tagName": "button", "attributes": {}, "textContent": "New"})

        clicks = payload(await client.call_tool("get_clicks", {}))
        assert [c["selector"] for c in clicks] == ["#new", "#old"]
        assert clicks[0]["tagName"] == "button"

        enriched = payload(await client.call_tool("get_clicks", {"head": 1, "parent_depth": 1}))
        assert [c["selector"] for c in enriched] == ["#new"]
        assert "parents" in enriched[0]


@pytest.mark.asyncio
async def test_navigation_and_page_info_tools(stub_server, stub_state, fake_page) -> None:
    async with create_connected_server_and_client_session(stub_server._mcp_server) as client:
        fake_page.navigate("https://a.test/")
        fake_page.navigate("https://b.test/", title="B")
        await stub_state.driver.wait_for_navigations()

        navigations = payload(await client.call_tool("get_navigations", {}))
        assert [n["url"] for n in navigations] == ["https://b.test/", "https://a.test/"]
        assert payload(await client.call_tool("get_navigations", {"head": 0})) == []

        info = payload(await client.call_tool("get_page_info", {}))
        assert info == {"url": "https://b.test/", "title": "B"}

