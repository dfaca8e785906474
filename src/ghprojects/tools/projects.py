"""GitHub Projects V2 tools."""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import Field

from ghprojects.contracts.exceptions import GitHubAPIError
from ghprojects.contracts.tool import ToolCategory, WireModel
from ghprojects.github import queries
from ghprojects.github.client import clamp_page_size
from ghprojects.tools.base import Tool, ToolContext, nodes, require_dict

logger = logging.getLogger(__name__)

_PROJECT_ID = "GitHub Project V2 node ID"
_ORG_LOGIN = "GitHub organization login (e.g. 'octo-org'); falls back to the configured default"
_FIRST = "Number of entries to fetch (default: 20, max: 100)"


# ------------------------------------------------------------------
# Models
# ------------------------------------------------------------------


class ProjectRef(WireModel):
    id: str
    title: str
    url: str


class ProjectSummary(WireModel):
    id: str
    title: str
    number: int | None = None
    url: str | None = None


class ProjectDetails(WireModel):
    id: str
    title: str
    number: int
    url: str
    short_description: str | None = None
    readme: str | None = None
    closed: bool
    public: bool
    items_count: int


class CreatedProject(ProjectRef):
    number: int


class ProjectItem(WireModel):
    id: str
    type: Literal["Issue", "PullRequest", "DraftIssue"]
    title: str | None = None
    url: str | None = None
    state: str | None = None
    number: int | None = None


class ProjectItemRef(WireModel):
    id: str


class ListProjectsInput(WireModel):
    organization_login: str | None = Field(default=None, description=_ORG_LOGIN)
    first: int = Field(default=20, ge=1, description=_FIRST)


class ListProjectsOutput(WireModel):
    projects: list[ProjectSummary]


class GetProjectDetailsInput(WireModel):
    project_id: str = Field(description=_PROJECT_ID)


class GetProjectDetailsOutput(WireModel):
    project: ProjectDetails


class CreateProjectInput(WireModel):
    organization_login: str | None = Field(default=None, description=_ORG_LOGIN)
    title: str = Field(description="Project title")
    description: str | None = Field(default=None, description="Short project description")


class CreateProjectOutput(WireModel):
    project: CreatedProject


class UpdateProjectInput(WireModel):
    project_id: str = Field(description=_PROJECT_ID)
    title: str | None = Field(default=None, description="New project title")
    short_description: str | None = Field(default=None, description="New short description")
    readme: str | None = Field(default=None, description="New readme content")
    public: bool | None = Field(default=None, description="Make the project public or private")


class UpdateProjectOutput(WireModel):
    project: ProjectRef


class DeleteProjectInput(WireModel):
    project_id: str = Field(description="GitHub Project V2 node ID to delete")


class DeleteProjectOutput(WireModel):
    success: bool
    deleted_project_id: str


class ListProjectItemsInput(WireModel):
    project_id: str = Field(description=_PROJECT_ID)
    first: int = Field(default=20, ge=1, description=_FIRST)


class ListProjectItemsOutput(WireModel):
    items: list[ProjectItem]


class AddItemToProjectInput(WireModel):
    project_id: str = Field(description=_PROJECT_ID)
    content_id: str = Field(description="Node ID of the issue or pull request to add")


class AddItemToProjectOutput(WireModel):
    item: ProjectItemRef


# ------------------------------------------------------------------
# Handlers
# ------------------------------------------------------------------


def _project_node(data: dict, project_id: str) -> dict:
    missing = f"Project not found: {project_id}"
    node = require_dict(data, "node", missing=missing)
    # Ids of other node types still resolve, but the ProjectV2 fragment selects nothing.
    if not isinstance(node.get("id"), str):
        raise GitHubAPIError(missing)
    return node


async def list_github_projects(params: ListProjectsInput, ctx: ToolContext) -> ListProjectsOutput:
    login = ctx.organization_login(params.organization_login)
    async with ctx.github() as gh:
        data = await gh.graphql(queries.LIST_PROJECTS, {"login": login, "first": clamp_page_size(params.first)})
    organization = require_dict(data, "organization", missing=f"Organization not found: {login}")
    projects = nodes(organization.get("projectsV2"))
    return ListProjectsOutput(projects=[ProjectSummary.model_validate(node) for node in projects])


async def get_project_details(params: GetProjectDetailsInput, ctx: ToolContext) -> GetProjectDetailsOutput:
    async with ctx.github() as gh:
        data = await gh.graphql(queries.GET_PROJECT, {"projectId": params.project_id})
    node = _project_node(data, params.project_id)
    items = node.get("items") or {}
    return GetProjectDetailsOutput(
        project=ProjectDetails.model_validate({**node, "itemsCount": items.get("totalCount", 0)})
    )


async def create_project(params: CreateProjectInput, ctx: ToolContext) -> CreateProjectOutput:
    login = ctx.organization_login(params.organization_login)
    async with ctx.github() as gh:
        owner_id = await gh.get_organization_node_id(login)
        data = await gh.graphql(queries.CREATE_PROJECT, {"ownerId": owner_id, "title": params.title})
        project = require_dict(require_dict(data, "createProjectV2"), "projectV2")
        if params.description:
            # createProjectV2 takes no description; apply it as the short description.
            await gh.graphql(
                queries.UPDATE_PROJECT,
                {"projectId": project["id"], "shortDescription": params.description},
            )
    logger.info("Created project %s in %s", project.get("id"), login)
    return CreateProjectOutput(project=CreatedProject.model_validate(project))


async def update_project(params: UpdateProjectInput, ctx: ToolContext) -> UpdateProjectOutput:
    async with ctx.github() as gh:
        data = await gh.graphql(
            queries.UPDATE_PROJECT,
            {
                "projectId": params.project_id,
                "title": params.title,
                "shortDescription": params.short_description,
                "readme": params.readme,
                "public": params.public,
            },
        )
    project = require_dict(require_dict(data, "updateProjectV2"), "projectV2")
    return UpdateProjectOutput(project=ProjectRef.model_validate(project))


async def delete_project(params: DeleteProjectInput, ctx: ToolContext) -> DeleteProjectOutput:
    async with ctx.github() as gh:
        data = await gh.graphql(queries.DELETE_PROJECT, {"projectId": params.project_id})
    project = require_dict(require_dict(data, "deleteProjectV2"), "projectV2")
    logger.info("Deleted project %s", project.get("id"))
    return DeleteProjectOutput(success=True, deleted_project_id=project["id"])


async def list_project_items(params: ListProjectItemsInput, ctx: ToolContext) -> ListProjectItemsOutput:
    async with ctx.github() as gh:
        data = await gh.graphql(
            queries.LIST_PROJECT_ITEMS,
            {"projectId": params.project_id, "first": clamp_page_size(params.first)},
        )
    node = _project_node(data, params.project_id)

    items: list[ProjectItem] = []
    for item in nodes(node.get("items")):
        content = item.get("content")
        if not isinstance(content, dict):
            # Items the token cannot see come back with null content.
            logger.debug("Skipping project item %s without visible content", item.get("id"))
            continue
        items.append(
            ProjectItem(
                id=item["id"],
                type=content.get("__typename"),
                title=content.get("title"),
                url=content.get("url"),
                state=content.get("state"),
                number=content.get("number"),
            )
        )
    return ListProjectItemsOutput(items=items)


async def add_item_to_project(params: AddItemToProjectInput, ctx: ToolContext) -> AddItemToProjectOutput:
    async with ctx.github() as gh:
        data = await gh.graphql(
            queries.ADD_PROJECT_ITEM,
            {"projectId": params.project_id, "contentId": params.content_id},
        )
    item = require_dict(require_dict(data, "addProjectV2ItemById"), "item")
    return AddItemToProjectOutput(item=ProjectItemRef.model_validate(item))


project_tools: list[Tool] = [
    Tool(
        id="LIST_GITHUB_PROJECTS",
        description="List GitHub Projects V2 for an organization. Returns project IDs and titles.",
        category=ToolCategory.PROJECTS,
        input_model=ListProjectsInput,
        output_model=ListProjectsOutput,
        handler=list_github_projects,
    ),
    Tool(
        id="GET_PROJECT_DETAILS",
        description="Get detailed information about a GitHub Project V2, including its item count.",
        category=ToolCategory.PROJECTS,
        input_model=GetProjectDetailsInput,
        output_model=GetProjectDetailsOutput,
        handler=get_project_details,
    ),
    Tool(
        id="CREATE_PROJECT",
        description="Create a new GitHub Project V2 in an organization. Returns the created project.",
        category=ToolCategory.PROJECTS,
        input_model=CreateProjectInput,
        output_model=CreateProjectOutput,
        handler=create_project,
    ),
    Tool(
        id="UPDATE_PROJECT",
        description="Update a GitHub Project V2's title, short description, readme or visibility.",
        category=ToolCategory.PROJECTS,
        input_model=UpdateProjectInput,
        output_model=UpdateProjectOutput,
        handler=update_project,
    ),
    Tool(
        id="DELETE_PROJECT",
        description="Delete a GitHub Project V2. This is permanent and cannot be undone.",
        category=ToolCategory.PROJECTS,
        input_model=DeleteProjectInput,
        output_model=DeleteProjectOutput,
        handler=delete_project,
    ),
    Tool(
        id="LIST_PROJECT_ITEMS",
        description="List the items (issues, pull requests and draft issues) in a GitHub Project V2.",
        category=ToolCategory.PROJECTS,
        input_model=ListProjectItemsInput,
        output_model=ListProjectItemsOutput,
        handler=list_project_items,
    ),
    Tool(
        id="ADD_ITEM_TO_PROJECT",
        description="Add an issue or pull request to a GitHub Project V2 by its content node ID.",
        category=ToolCategory.PROJECTS,
        input_model=AddItemToProjectInput,
        output_model=AddItemToProjectOutput,
        handler=add_item_to_project,
    ),
]
