"""Tracking list tools backed by the local store."""

from __future__ import annotations

import asyncio

from pydantic import Field

from ghprojects.contracts.tool import ToolCategory, WireModel
from ghprojects.contracts.tracking import RemovalResult, TrackedProject, TrackedRepository
from ghprojects.tools.base import Tool, ToolContext

_ACTIVE_ONLY = "Only return active records (default: true)"
_HARD_DELETE = "Permanently delete instead of deactivating (default: false)"


class AddTrackedRepositoryInput(WireModel):
    owner: str = Field(min_length=1, description="Repository owner (user or organization)")
    name: str = Field(min_length=1, description="Repository name")


class TrackedRepositoryOutput(WireModel):
    repository: TrackedRepository


class ListTrackedInput(WireModel):
    active_only: bool = Field(default=True, description=_ACTIVE_ONLY)


class TrackedRepositoriesOutput(WireModel):
    repositories: list[TrackedRepository]


class RemoveTrackedInput(WireModel):
    id: int = Field(description="Tracking record ID")
    hard_delete: bool = Field(default=False, description=_HARD_DELETE)


class AddTrackedProjectInput(WireModel):
    project_id: str = Field(min_length=1, description="GitHub Project V2 node ID")
    title: str = Field(min_length=1, description="Project title")
    organization_login: str = Field(min_length=1, description="Organization that owns the project")


class TrackedProjectOutput(WireModel):
    project: TrackedProject


class TrackedProjectsOutput(WireModel):
    projects: list[TrackedProject]


async def add_tracked_repository(params: AddTrackedRepositoryInput, ctx: ToolContext) -> TrackedRepositoryOutput:
    repository = await asyncio.to_thread(ctx.store.add_repository, params.owner, params.name)
    return TrackedRepositoryOutput(repository=repository)


async def list_tracked_repositories(params: ListTrackedInput, ctx: ToolContext) -> TrackedRepositoriesOutput:
    repositories = await asyncio.to_thread(ctx.store.list_repositories, active_only=params.active_only)
    return TrackedRepositoriesOutput(repositories=repositories)


async def remove_tracked_repository(params: RemoveTrackedInput, ctx: ToolContext) -> RemovalResult:
    return await asyncio.to_thread(ctx.store.remove_repository, params.id, hard_delete=params.hard_delete)


async def add_tracked_project(params: AddTrackedProjectInput, ctx: ToolContext) -> TrackedProjectOutput:
    project = await asyncio.to_thread(ctx.store.add_project, params.project_id, params.title, params.organization_login)
    return TrackedProjectOutput(project=project)


async def list_tracked_projects(params: ListTrackedInput, ctx: ToolContext) -> TrackedProjectsOutput:
    projects = await asyncio.to_thread(ctx.store.list_projects, active_only=params.active_only)
    return TrackedProjectsOutput(projects=projects)


async def remove_tracked_project(params: RemoveTrackedInput, ctx: ToolContext) -> RemovalResult:
    return await asyncio.to_thread(ctx.store.remove_project, params.id, hard_delete=params.hard_delete)


tracking_tools: list[Tool] = [
    Tool(
        id="ADD_TRACKED_REPOSITORY",
        description="Add a repository to the tracking list. Re-adding a removed repository reactivates it.",
        category=ToolCategory.TRACKING,
        input_model=AddTrackedRepositoryInput,
        output_model=TrackedRepositoryOutput,
        handler=add_tracked_repository,
    ),
    Tool(
        id="LIST_TRACKED_REPOSITORIES",
        description="List tracked repositories.",
        category=ToolCategory.TRACKING,
        input_model=ListTrackedInput,
        output_model=TrackedRepositoriesOutput,
        handler=list_tracked_repositories,
    ),
    Tool(
        id="REMOVE_TRACKED_REPOSITORY",
        description="Remove a repository from the tracking list (soft delete unless hardDelete is set).",
        category=ToolCategory.TRACKING,
        input_model=RemoveTrackedInput,
        output_model=RemovalResult,
        handler=remove_tracked_repository,
    ),
    Tool(
        id="ADD_TRACKED_PROJECT",
        description="Add a GitHub Project V2 to the tracking list. Re-adding refreshes its title and reactivates it.",
        category=ToolCategory.TRACKING,
        input_model=AddTrackedProjectInput,
        output_model=TrackedProjectOutput,
        handler=add_tracked_project,
    ),
    Tool(
        id="LIST_TRACKED_PROJECTS",
        description="List tracked GitHub projects.",
        category=ToolCategory.TRACKING,
        input_model=ListTrackedInput,
        output_model=TrackedProjectsOutput,
        handler=list_tracked_projects,
    ),
    Tool(
        id="REMOVE_TRACKED_PROJECT",
        description="Remove a project from the tracking list (soft delete unless hardDelete is set).",
        category=ToolCategory.TRACKING,
        input_model=RemoveTrackedInput,
        output_model=RemovalResult,
        handler=remove_tracked_project,
    ),
]
