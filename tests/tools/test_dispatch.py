from __future__ import annotations

import httpx
import pytest

from ghprojects.tools import ToolContext, dispatch_tool, get_tool


def test_get_tool_returns_registered_tool() -> None:
    tool = get_tool("LIST_ISSUES")

    assert tool is not None
    assert tool.category == "issues"
    assert get_tool("NOPE") is None


@pytest.mark.asyncio
async def test_unknown_tool_is_an_error_result(context: ToolContext) -> None:
    result = await dispatch_tool("DO_SOMETHING", {}, context)

    assert result.is_error is True
    assert result.content == "Unknown tool: DO_SOMETHING"


@pytest.mark.asyncio
async def test_missing_required_input_is_reported(github, context: ToolContext) -> None:
    result = await dispatch_tool("GET_ISSUE", {"owner": "octocat"}, context)

    assert result.is_error is True
    assert result.content.startswith("Invalid input for GET_ISSUE: ")
    assert "repo: Field required" in result.content
    assert "issueNumber: Field required" in result.content
    assert github.requests == []


@pytest.mark.asyncio
async def test_page_size_below_one_is_rejected(github, context: ToolContext) -> None:
    result = await dispatch_tool("LIST_GITHUB_PROJECTS", {"first": 0}, context)

    assert result.is_error is True
    assert "first:" in result.content
    assert github.requests == []


@pytest.mark.asyncio
async def test_rate_limit_carries_retry_after(github, context: ToolContext) -> None:
    github.respond(httpx.Response(429, headers={"Retry-After": "30"}))

    result = await dispatch_tool("GET_PROJECT_DETAILS", {"projectId": "PVT_1"}, context)

    assert result.is_error is True
    assert result.retry_after == 30
    assert result.content == "Rate limit exceeded. Retry after 30 seconds."


@pytest.mark.asyncio
async def test_missing_token_is_an_error_result(context: ToolContext) -> None:
    context.token = None

    result = await dispatch_tool("LIST_ISSUES", {"owner": "octocat", "repo": "hello"}, context)

    assert result.is_error is True
    assert result.content.startswith("GitHub token not configured")
    assert result.retry_after is None


@pytest.mark.asyncio
async def test_snake_case_arguments_are_accepted(github, context: ToolContext) -> None:
    github.reply({"addProjectV2ItemById": {"item": {"id": "PVTI_1"}}})

    result = await dispatch_tool("ADD_ITEM_TO_PROJECT", {"project_id": "PVT_1", "content_id": "I_1"}, context)

    assert result.is_error is False
    assert '"id": "PVTI_1"' in result.content


@pytest.mark.asyncio
async def test_none_arguments_are_treated_as_empty(context: ToolContext) -> None:
    result = await dispatch_tool("LIST_TRACKED_PROJECTS", None, context)

    assert result.is_error is False
    assert '"projects": []' in result.content
