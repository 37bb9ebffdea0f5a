# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (every RunPod tool in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Publishes every operation in the catalog as an MCP tool and serves them
#   over stdio.  Each tool is a thin wrapper around ToolRegistry.call():
#   FastMCP handles the protocol, the registry handles validation, request
#   building and result formatting.
#
# HOW IT WORKS (the flow):
#   1. An MCP client (Claude Desktop, an agent framework, ...) starts this
#      server as a subprocess
#   2. It asks for tools/list and gets one entry per catalog operation,
#      with the JSON Schema generated from core/schema.py
#   3. It calls a tool by name (e.g., "list-pods")
#   4. RunPodTool.run() forwards the arguments to the registry
#   5. The client receives a single text block of pretty-printed JSON
#
# WHY NOT @mcp.tool()?
#   The decorator builds a tool from a Python function signature.  Our
#   tools are data (core/catalog.py), so we register Tool objects whose
#   parameter schema we already have.
#
# RUNNING THIS SERVER:
#     python -m runpod_mcp          (or the "runpod-mcp" console script)
#   RUNPOD_API_KEY must be set (environment or .env), otherwise the process
#   exits before serving anything.
# =============================================================================

import asyncio
import logging
import sys
from typing import Any, Optional

from fastmcp import FastMCP
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import Field

from runpod_mcp import __version__
from runpod_mcp.core.client import RunPodClient
from runpod_mcp.core.config import Settings, load_settings
from runpod_mcp.core.errors import ConfigurationError
from runpod_mcp.tools.registry import ToolRegistry

SERVER_NAME = "runpod"


# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to its client over STDOUT.
# Anything we printed to stdout would corrupt the JSON-RPC stream.
# =============================================================================
def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


# =============================================================================
# RunPodTool - one catalog operation exposed as an MCP tool
# =============================================================================
class RunPodTool(Tool):
    """MCP tool backed by a ToolRegistry entry."""

    registry: Any = Field(exclude=True)

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        envelope = await self.registry.call(self.name, arguments)
        return ToolResult(
            content=[
                TextContent(type="text", text=item["text"])
                for item in envelope["content"]
            ]
        )


def create_server(settings: Settings, client: Optional[RunPodClient] = None) -> FastMCP:
    """Build the FastMCP server with every RunPod tool registered.

    Args:
        settings: Validated configuration (see core/config.py).
        client: Optional pre-built client; tests inject one backed by
            httpx.MockTransport.
    """
    # The client outlives every MCP session; whoever built it closes it.
    client = client or RunPodClient(settings)
    registry = ToolRegistry(client)

    mcp = FastMCP(SERVER_NAME, version=__version__)
    for operation in registry:
        mcp.add_tool(RunPodTool(
            name=operation.name,
            description=operation.description,
            parameters=operation.schema.json_schema(),
            registry=registry,
        ))

    logging.getLogger(__name__).info(
        "RunPod MCP server ready: %d tools, API at %s", len(registry), settings.api_base_url
    )
    return mcp


def main() -> None:
    """Console entry point: load config, fail fast, serve over stdio."""
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)

    configure_logging(settings.log_level)
    client = RunPodClient(settings)
    mcp = create_server(settings, client)
    try:
        mcp.run()
    finally:
        asyncio.run(client.aclose())


# =============================================================================
# Server entry point
# =============================================================================
if __name__ == "__main__":
    main()
