"""Introspection over the tool registry."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from ghprojects.contracts.tool import ToolCategory, WireModel
from ghprojects.tools.base import Tool, ToolContext


class ToolInfo(WireModel):
    id: str
    description: str
    category: ToolCategory
    input_schema: dict[str, Any]
    output_schema: dict[str, Any]


class ToolMetadataInput(WireModel):
    category: Literal["all", "projects", "issues", "tracking", "user", "metadata"] = Field(
        default="all", description="Only list tools of this category"
    )


class ToolMetadataOutput(WireModel):
    tools: list[ToolInfo]


def describe(tool: Tool) -> ToolInfo:
    return ToolInfo(
        id=tool.id,
        description=tool.description,
        category=tool.category,
        input_schema=tool.input_schema(),
        output_schema=tool.output_schema(),
    )


async def get_tool_metadata(params: ToolMetadataInput, ctx: ToolContext) -> ToolMetadataOutput:
    # Imported here: the registry imports this module.
    from ghprojects.tools import ALL_TOOLS

    tools = [tool for tool in ALL_TOOLS if params.category in ("all", tool.category)]
    return ToolMetadataOutput(tools=[describe(tool) for tool in tools])


metadata_tools: list[Tool] = [
    Tool(
        id="GET_TOOL_METADATA",
        description="Get the input and output JSON schemas of every available tool, optionally for one category.",
        category=ToolCategory.METADATA,
        input_model=ToolMetadataInput,
        output_model=ToolMetadataOutput,
        handler=get_tool_metadata,
    ),
]
