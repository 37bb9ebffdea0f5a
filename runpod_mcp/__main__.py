# python -m runpod_mcp  ->  start the stdio MCP server
from runpod_mcp.tools.mcp_server import main

if __name__ == "__main__":
    main()
