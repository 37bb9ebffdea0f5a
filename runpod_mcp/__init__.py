# =============================================================================
# runpod_mcp  -  RunPod REST API as Model Context Protocol tools
# =============================================================================
#
# PACKAGE LAYOUT:
#   core/   configuration, errors, schemas, the tool catalog and the HTTP
#           client.  No MCP imports: everything here can be exercised with
#           a stub transport.
#   tools/  the MCP-facing layer: dispatch (registry.py) and the FastMCP
#           server (mcp_server.py).
# =============================================================================

__version__ = "1.0.0"
