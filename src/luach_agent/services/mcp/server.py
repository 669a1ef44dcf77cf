from __future__ import annotations

import logging

from fastmcp import FastMCP

from ...api import get_api_functions
from ...bootstrap import configure_logging

INSTRUCTIONS = (
    "Deterministic Hebrew calendar tools: convert dates between the Gregorian and Hebrew calendars, "
    "find a Jewish holiday with its candle lighting and havdalah times, and list a year's holidays."
)

logger = logging.getLogger(__name__)


def build_mcp_server() -> FastMCP:
    server = FastMCP(name="luach-agent", instructions=INSTRUCTIONS)
    for api_function in get_api_functions():
        logger.debug("Registering MCP tool: %s", api_function.name)
        server.tool(
            api_function.func,
            name=api_function.name,
            description=api_function.description,
            tags=set(api_function.tags),
        )
    return server


def run_mcp_server(host: str = "127.0.0.1", port: int = 8765) -> None:
    configure_logging()
    server = build_mcp_server()
    server.run(transport="streamable-http", host=host, port=port)
