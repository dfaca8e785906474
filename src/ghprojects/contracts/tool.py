"""Tool contracts shared by every tool module."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ToolCategory(StrEnum):
    PROJECTS = "projects"
    ISSUES = "issues"
    TRACKING = "tracking"
    USER = "user"
    METADATA = "metadata"


class WireModel(BaseModel):
    """Base for tool inputs and outputs.

    Fields are snake_case in Python and camelCase on the wire. Inputs accept
    either spelling.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


@dataclass(frozen=True)
class ToolResult:
    """Outcome of a dispatched tool call.

    ``content`` is JSON on success and a human-readable message on error.
    """

    content: str
    is_error: bool = False
    retry_after: int | None = None
