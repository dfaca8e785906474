from __future__ import annotations

import json

import httpx
import pytest

from ghprojects.contracts.exceptions import ConfigError, GitHubAPIError, ToolInputError
from ghprojects.tools import ToolContext, dispatch_tool
from ghprojects.tools.projects import (
    AddItemToProjectInput,
    CreateProjectInput,
    DeleteProjectInput,
    GetProjectDetailsInput,
    ListProjectItemsInput,
    ListProjectsInput,
    UpdateProjectInput,
    add_item_to_project,
    create_project,
    delete_project,
    get_project_details,
    list_github_projects,
    list_project_items,
    update_project,
)


@pytest.mark.asyncio
async def test_list_projects_uses_default_organization_and_clamps_page_size(github, context: ToolContext) -> None:
    github.reply(
        {
            "organization": {
                "projectsV2": {
                    "nodes": [
                        {"id": "PVT_1", "title": "Roadmap", "number": 1, "url": "https://github.com/orgs/o/projects/1"},
                        None,
                    ]
                }
            }
        }
    )

    output = await list_github_projects(ListProjectsInput(first=500), context)

    assert github.variables() == {"login": "octo-org", "first": 100}
    assert [project.id for project in output.projects] == ["PVT_1"]


@pytest.mark.asyncio
async def test_list_projects_prefers_explicit_organization(github, context: ToolContext) -> None:
    github.reply({"organization": {"projectsV2": {"nodes": []}}})

    output = await list_github_projects(ListProjectsInput(organization_login="other-org"), context)

    assert github.variables() == {"login": "other-org", "first": 20}
    assert output.projects == []


@pytest.mark.asyncio
async def test_list_projects_requires_an_organization(github, context: ToolContext) -> None:
    context.config = context.config.model_copy(update={"default_organization": None})

    with pytest.raises(ToolInputError, match="Organization login is required"):
        await list_github_projects(ListProjectsInput(), context)

    assert github.requests == []


@pytest.mark.asyncio
async def test_list_projects_raises_for_unknown_organization(github, context: ToolContext) -> None:
    github.reply({"organization": None})

    with pytest.raises(GitHubAPIError, match="Organization not found: octo-org"):
        await list_github_projects(ListProjectsInput(), context)


@pytest.mark.asyncio
async def test_github_tools_require_a_token(github, context: ToolContext) -> None:
    context.token = None

    with pytest.raises(ConfigError, match="GitHub token not configured"):
        await get_project_details(GetProjectDetailsInput(project_id="PVT_1"), context)

    assert github.requests == []


@pytest.mark.asyncio
async def test_get_project_details_flattens_item_count(github, context: ToolContext) -> None:
    github.reply(
        {
            "node": {
                "id": "PVT_1",
                "title": "Roadmap",
                "number": 3,
                "url": "https://github.com/orgs/octo-org/projects/3",
                "shortDescription": "Q3 work",
                "readme": None,
                "closed": False,
                "public": True,
                "items": {"totalCount": 12},
            }
        }
    )

    output = await get_project_details(GetProjectDetailsInput(project_id="PVT_1"), context)

    assert output.to_wire()["project"] == {
        "id": "PVT_1",
        "title": "Roadmap",
        "number": 3,
        "url": "https://github.com/orgs/octo-org/projects/3",
        "shortDescription": "Q3 work",
        "readme": None,
        "closed": False,
        "public": True,
        "itemsCount": 12,
    }


@pytest.mark.asyncio
async def test_get_project_details_raises_for_missing_project(github, context: ToolContext) -> None:
    github.reply({"node": None})

    with pytest.raises(GitHubAPIError, match="Project not found: PVT_missing"):
        await get_project_details(GetProjectDetailsInput(project_id="PVT_missing"), context)


@pytest.mark.asyncio
async def test_create_project_looks_up_owner_then_creates(github, context: ToolContext) -> None:
    github.reply({"organization": {"id": "O_1"}})
    github.reply(
        {"createProjectV2": {"projectV2": {"id": "PVT_9", "title": "New", "url": "https://x/9", "number": 9}}}
    )

    output = await create_project(CreateProjectInput(title="New"), context)

    assert len(github.requests) == 2
    assert github.variables(0) == {"login": "octo-org"}
    assert github.variables(1) == {"ownerId": "O_1", "title": "New"}
    assert output.project.number == 9


@pytest.mark.asyncio
async def test_create_project_applies_description_as_short_description(github, context: ToolContext) -> None:
    github.reply({"organization": {"id": "O_1"}})
    github.reply(
        {"createProjectV2": {"projectV2": {"id": "PVT_9", "title": "New", "url": "https://x/9", "number": 9}}}
    )
    github.reply({"updateProjectV2": {"projectV2": {"id": "PVT_9", "title": "New", "url": "https://x/9"}}})

    await create_project(CreateProjectInput(title="New", description="Tracks the launch"), context)

    assert len(github.requests) == 3
    assert github.variables(2) == {"projectId": "PVT_9", "shortDescription": "Tracks the launch"}


@pytest.mark.asyncio
async def test_update_project_sends_only_given_fields(github, context: ToolContext) -> None:
    github.reply({"updateProjectV2": {"projectV2": {"id": "PVT_1", "title": "Renamed", "url": "https://x/1"}}})

    output = await update_project(UpdateProjectInput(project_id="PVT_1", title="Renamed", public=False), context)

    assert github.variables() == {"projectId": "PVT_1", "title": "Renamed", "public": False}
    assert output.project.title == "Renamed"


@pytest.mark.asyncio
async def test_delete_project_reports_deleted_id(github, context: ToolContext) -> None:
    github.reply({"deleteProjectV2": {"projectV2": {"id": "PVT_1"}}})

    output = await delete_project(DeleteProjectInput(project_id="PVT_1"), context)

    assert output.to_wire() == {"success": True, "deletedProjectId": "PVT_1"}


@pytest.mark.asyncio
async def test_list_project_items_maps_content_and_skips_hidden_items(github, context: ToolContext) -> None:
    github.reply(
        {
            "node": {
                "id": "PVT_1",
                "items": {
                    "nodes": [
                        {
                            "id": "PVTI_1",
                            "content": {
                                "__typename": "Issue",
                                "title": "Bug",
                                "url": "https://github.com/o/r/issues/1",
                                "state": "OPEN",
                                "number": 1,
                            },
                        },
                        {"id": "PVTI_2", "content": {"__typename": "DraftIssue", "title": "Idea"}},
                        {"id": "PVTI_3", "content": None},
                    ]
                }
            }
        }
    )

    output = await list_project_items(ListProjectItemsInput(project_id="PVT_1", first=250), context)

    assert github.variables() == {"projectId": "PVT_1", "first": 100}
    assert output.to_wire()["items"] == [
        {
            "id": "PVTI_1",
            "type": "Issue",
            "title": "Bug",
            "url": "https://github.com/o/r/issues/1",
            "state": "OPEN",
            "number": 1,
        },
        {"id": "PVTI_2", "type": "DraftIssue", "title": "Idea", "url": None, "state": None, "number": None},
    ]


@pytest.mark.asyncio
async def test_add_item_to_project(github, context: ToolContext) -> None:
    github.reply({"addProjectV2ItemById": {"item": {"id": "PVTI_7"}}})

    output = await add_item_to_project(AddItemToProjectInput(project_id="PVT_1", content_id="I_1"), context)

    assert github.variables() == {"projectId": "PVT_1", "contentId": "I_1"}
    assert output.item.id == "PVTI_7"


@pytest.mark.asyncio
async def test_dispatch_reports_graphql_errors_as_error_result(github, context: ToolContext) -> None:
    github.respond(httpx.Response(200, json={"errors": [{"message": "Could not resolve to a node"}]}))

    result = await dispatch_tool("GET_PROJECT_DETAILS", {"projectId": "PVT_bad"}, context)

    assert result.is_error is True
    assert result.content == "GraphQL errors: Could not resolve to a node"


@pytest.mark.asyncio
async def test_dispatch_serializes_camel_case(github, context: ToolContext) -> None:
    github.reply({"deleteProjectV2": {"projectV2": {"id": "PVT_1"}}})

    result = await dispatch_tool("DELETE_PROJECT", {"projectId": "PVT_1"}, context)

    assert result.is_error is False
    assert json.loads(result.content) == {"success": True, "deletedProjectId": "PVT_1"}


@pytest.mark.asyncio
@pytest.mark.parametrize("tool_id", ["GET_PROJECT_DETAILS", "LIST_PROJECT_ITEMS"])
async def test_non_project_node_id_is_reported_as_not_found(github, context: ToolContext, tool_id: str) -> None:
    # An issue id resolves to a node, but the ProjectV2 fragment selects none of its fields.
    github.reply({"node": {}})

    result = await dispatch_tool(tool_id, {"projectId": "I_kwDOissue"}, context)

    assert result.is_error is True
    assert result.content == "Project not found: I_kwDOissue"
