# =============================================================================
# tools/__init__.py
# =============================================================================
# The MCP-facing layer.
#
#   registry.py    name -> operation dispatch; validates, builds the request,
#                  calls the client, wraps the result
#   mcp_server.py  registers every operation with FastMCP and runs over stdio
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT talk HTTP themselves (that's core/client.py)
#   - They do NOT declare parameters by hand (that's core/catalog.py)
# =============================================================================
