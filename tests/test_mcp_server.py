"""Tests for the FastMCP wiring, driven through an in-memory MCP client."""

import asyncio
import json

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from conftest import BASE_URL, MockRunPod, make_client
from runpod_mcp.core import config
from runpod_mcp.tools import mcp_server
from runpod_mcp.tools.mcp_server import create_server


def run(coro):
    return asyncio.run(coro)


class TestServer:
    """Tests for create_server()."""

    def test_lists_every_tool_with_schema(self, settings):
        server = create_server(settings, make_client(settings, MockRunPod(json_body={})))

        async def scenario():
            async with Client(server) as client:
                return await client.list_tools()

        tools = {tool.name: tool for tool in run(scenario())}

        assert len(tools) == 26
        create_volume = tools["create-network-volume"]
        assert create_volume.inputSchema["required"] == ["name", "size", "dataCenterId"]
        assert create_volume.description == "Create a new network volume"

    def test_call_tool_returns_text_envelope(self, settings):
        upstream = MockRunPod(json_body=[{"id": "p1"}])
        server = create_server(settings, make_client(settings, upstream))

        async def scenario():
            async with Client(server) as client:
                return await client.call_tool("list-pods", {"computeType": "GPU"})

        result = run(scenario())

        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert json.loads(result.content[0].text) == [{"id": "p1"}]
        assert str(upstream.last.url) == f"{BASE_URL}/pods?computeType=GPU"

    def test_validation_error_becomes_tool_error(self, settings):
        upstream = MockRunPod(json_body={})
        server = create_server(settings, make_client(settings, upstream))

        async def scenario():
            async with Client(server) as client:
                await client.call_tool("get-pod", {})

        with pytest.raises(ToolError):
            run(scenario())
        assert upstream.requests == []

    def test_api_error_becomes_tool_error(self, settings):
        upstream = MockRunPod(status_code=404, text="not found")
        server = create_server(settings, make_client(settings, upstream))

        async def scenario():
            async with Client(server) as client:
                await client.call_tool("get-pod", {"podId": "missing"})

        with pytest.raises(ToolError):
            run(scenario())

    def test_server_survives_consecutive_sessions(self, settings):
        upstream = MockRunPod(json_body=[{"id": "p1"}])
        server = create_server(settings, make_client(settings, upstream))

        async def session():
            async with Client(server) as client:
                return await client.call_tool("list-pods", {})

        async def scenario():
            first = await session()
            second = await session()
            return first, second

        first, second = run(scenario())

        assert json.loads(first.content[0].text) == [{"id": "p1"}]
        assert json.loads(second.content[0].text) == [{"id": "p1"}]
        assert len(upstream.requests) == 2


class TestMain:
    """Tests for the console entry point."""

    @pytest.fixture(autouse=True)
    def no_dotenv(self, monkeypatch):
        monkeypatch.setattr(config, "load_dotenv", lambda: None)

    def test_missing_api_key_exits_before_serving(self, monkeypatch, capsys):
        monkeypatch.delenv("RUNPOD_API_KEY", raising=False)
        built = []
        monkeypatch.setattr(mcp_server, "create_server", lambda *args, **kwargs: built.append(args))

        with pytest.raises(SystemExit) as exc_info:
            mcp_server.main()

        assert exc_info.value.code == 1
        assert built == []
        assert "RUNPOD_API_KEY" in capsys.readouterr().err

    def test_serves_when_configured(self, monkeypatch):
        monkeypatch.setenv("RUNPOD_API_KEY", "k")
        served = []
        clients = []

        class FakeServer:
            def run(self):
                served.append(True)

        def fake_create_server(settings, client):
            clients.append(client)
            return FakeServer()

        monkeypatch.setattr(mcp_server, "create_server", fake_create_server)
        monkeypatch.setattr(mcp_server, "configure_logging", lambda level: None)

        mcp_server.main()

        assert served == [True]
        # The HTTP client is closed once, after the server stops.
        assert clients[0]._http.is_closed
