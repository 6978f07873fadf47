"""FastMCP registration: one tool per catalog endpoint, all backed by the dispatcher."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any

from fastmcp.exceptions import ToolError
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent, ToolAnnotations
from pydantic import Field

from tools.dispatcher import InvalidArgumentsError, UnknownToolError

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from tools.catalog import ToolDescriptor
    from tools.dispatcher import Dispatcher


_ACRONYMS = {"atm", "etf", "fda", "ftds", "iv", "nope", "ohlc", "oi"}


def _title(name: str) -> str:
    words = name.removeprefix("get_").split("_")
    return " ".join(w.upper() if w in _ACRONYMS else w.capitalize() for w in words)


class EndpointTool(Tool):
    """A catalog endpoint exposed as an MCP tool."""

    dispatcher: Annotated[Any, Field(exclude=True, repr=False)]

    @classmethod
    def from_descriptor(cls, descriptor: ToolDescriptor, dispatcher: Dispatcher) -> EndpointTool:
        return cls(
            name=descriptor.name,
            description=descriptor.description,
            parameters=descriptor.input_schema,
            tags={descriptor.family} if descriptor.family else set(),
            annotations=ToolAnnotations(
                title=_title(descriptor.name),
                readOnlyHint=True,
                destructiveHint=False,
                idempotentHint=True,
                openWorldHint=True,
            ),
            dispatcher=dispatcher,
        )

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        try:
            response = await self.dispatcher.invoke(self.name, arguments)
        except (UnknownToolError, InvalidArgumentsError) as e:
            raise ToolError(str(e)) from e

        if response.is_error:
            raise ToolError(response.text)
        return ToolResult(content=[TextContent(type="text", text=response.text)])


def register(mcp: FastMCP, dispatcher: Dispatcher) -> None:
    for descriptor in dispatcher.list_tools():
        mcp.add_tool(EndpointTool.from_descriptor(descriptor, dispatcher))
