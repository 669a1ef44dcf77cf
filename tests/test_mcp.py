"""
FastMCP surface tests using the in-memory client transport.
"""

import asyncio

from fastmcp import Client

from luach_agent.services.mcp import build_mcp_server


def _list_tools(server):
    async def run():
        async with Client(server) as client:
            return await client.list_tools()

    return asyncio.run(run())


def test_registers_the_calendar_tools():
    tools = _list_tools(build_mcp_server())

    assert sorted(tool.name for tool in tools) == [
        "convertDate",
        "findJewishHoliday",
        "listJewishHolidays",
        "todaysDate",
    ]


def test_tool_schema_keeps_parameter_descriptions():
    tools = {tool.name: tool for tool in _list_tools(build_mcp_server())}

    properties = tools["convertDate"].inputSchema["properties"]
    assert properties["fromCalendar"]["enum"] == ["gregorian", "hebrew"]
    assert "YYYY-MM-DD" in properties["inputDate"]["description"]
