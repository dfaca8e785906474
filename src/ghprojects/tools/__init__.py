"""Tool registry."""

from ghprojects.tools.base import EmptyInput, Tool, ToolContext
from ghprojects.tools.dispatch import dispatch_tool, get_tool
from ghprojects.tools.issues import issue_tools
from ghprojects.tools.metadata import metadata_tools
from ghprojects.tools.projects import project_tools
from ghprojects.tools.tracking import tracking_tools
from ghprojects.tools.user import user_tools

ALL_TOOLS: list[Tool] = [*project_tools, *issue_tools, *tracking_tools, *user_tools, *metadata_tools]

TOOLS_BY_ID: dict[str, Tool] = {tool.id: tool for tool in ALL_TOOLS}

if len(TOOLS_BY_ID) != len(ALL_TOOLS):  # pragma: no cover - guarded by tests
    raise RuntimeError("Duplicate tool ids in registry")

__all__ = [
    "ALL_TOOLS",
    "TOOLS_BY_ID",
    "EmptyInput",
    "Tool",
    "ToolContext",
    "dispatch_tool",
    "get_tool",
]
