"""Tools about the authenticated GitHub user."""

from __future__ import annotations

from pydantic import Field

from ghprojects.contracts.exceptions import GitHubAPIError
from ghprojects.contracts.tool import ToolCategory, WireModel
from ghprojects.github import queries
from ghprojects.github.client import clamp_page_size
from ghprojects.tools.base import EmptyInput, Tool, ToolContext, require_dict


class User(WireModel):
    id: str
    login: str
    name: str | None = None
    url: str


class Organization(WireModel):
    login: str
    id: str
    description: str | None = None


class AuthenticatedUserOutput(WireModel):
    user: User


class ListUserOrganizationsInput(WireModel):
    first: int = Field(default=20, ge=1, description="Number of organizations to fetch (default: 20, max: 100)")


class ListUserOrganizationsOutput(WireModel):
    organizations: list[Organization]


async def get_authenticated_user(params: EmptyInput, ctx: ToolContext) -> AuthenticatedUserOutput:
    async with ctx.github() as gh:
        data = await gh.graphql(queries.GET_VIEWER)
    return AuthenticatedUserOutput(user=User.model_validate(require_dict(data, "viewer")))


async def list_user_organizations(params: ListUserOrganizationsInput, ctx: ToolContext) -> ListUserOrganizationsOutput:
    async with ctx.github() as gh:
        body = await gh.rest("GET", "/user/orgs", params={"per_page": clamp_page_size(params.first)})
    if not isinstance(body, list):
        raise GitHubAPIError("Unexpected response listing organizations")

    # REST returns numeric ids next to the GraphQL node_id; expose the node id.
    organizations = [
        Organization(
            login=org["login"],
            id=org.get("node_id") or str(org.get("id")),
            description=org.get("description"),
        )
        for org in body
        if isinstance(org, dict)
    ]
    return ListUserOrganizationsOutput(organizations=organizations)


user_tools: list[Tool] = [
    Tool(
        id="GET_AUTHENTICATED_USER",
        description="Get the GitHub user that owns the configured token.",
        category=ToolCategory.USER,
        input_model=EmptyInput,
        output_model=AuthenticatedUserOutput,
        handler=get_authenticated_user,
    ),
    Tool(
        id="LIST_USER_ORGANIZATIONS",
        description="List the organizations the authenticated user belongs to.",
        category=ToolCategory.USER,
        input_model=ListUserOrganizationsInput,
        output_model=ListUserOrganizationsOutput,
        handler=list_user_organizations,
    ),
]
