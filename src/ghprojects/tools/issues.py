"""GitHub Issues tools."""

from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import Field

from ghprojects.contracts.tool import ToolCategory, WireModel
from ghprojects.github import queries
from ghprojects.github.client import clamp_page_size
from ghprojects.tools.base import Tool, ToolContext, nodes, require_dict

logger = logging.getLogger(__name__)

IssueState = Literal["OPEN", "CLOSED"]


class Actor(WireModel):
    login: str


class IssueLabel(WireModel):
    name: str
    color: str


class Milestone(WireModel):
    title: str


class IssueSummary(WireModel):
    id: str
    number: int
    title: str
    body: str | None = None
    state: str
    url: str
    created_at: str
    updated_at: str
    author: Actor | None = None
    labels: list[IssueLabel] = Field(default_factory=list)
    assignees: list[Actor] = Field(default_factory=list)


class IssueDetails(IssueSummary):
    closed_at: str | None = None
    milestone: Milestone | None = None
    comments_count: int


class IssueRef(WireModel):
    id: str
    number: int
    title: str
    url: str


class UpdatedIssue(IssueRef):
    state: str


class ClosedIssue(WireModel):
    id: str
    number: int
    state: str
    state_reason: str | None = None


class Comment(WireModel):
    id: str
    body: str
    url: str
    created_at: str


class CommentWithAuthor(Comment):
    author: Actor | None = None


# ------------------------------------------------------------------
# Inputs / outputs
# ------------------------------------------------------------------


class RepoInput(WireModel):
    owner: str = Field(description="Repository owner (user or organization)")
    repo: str = Field(description="Repository name")


class IssueInput(RepoInput):
    issue_number: int = Field(description="Issue number")


class ListIssuesInput(RepoInput):
    state: IssueState | None = Field(default=None, description="Filter by issue state (OPEN or CLOSED)")
    labels: list[str] | None = Field(default=None, description="Filter by label names")
    assignee: str | None = Field(default=None, description="Filter by assignee username")
    first: int = Field(default=20, ge=1, description="Number of issues to fetch (default: 20, max: 100)")


class ListIssuesOutput(WireModel):
    issues: list[IssueSummary]
    total_count: int


class GetIssueOutput(WireModel):
    issue: IssueDetails


class CreateIssueInput(RepoInput):
    title: str = Field(description="Issue title")
    body: str | None = Field(default=None, description="Issue body (markdown supported)")
    assignee_ids: list[str] | None = Field(default=None, description="Node IDs of users to assign")
    label_ids: list[str] | None = Field(default=None, description="Node IDs of labels to add")
    milestone_id: str | None = Field(default=None, description="Node ID of the milestone")


class CreateIssueOutput(WireModel):
    issue: IssueRef


class UpdateIssueInput(IssueInput):
    title: str | None = Field(default=None, description="New issue title")
    body: str | None = Field(default=None, description="New issue body (markdown supported)")
    state: IssueState | None = Field(default=None, description="New issue state")


class UpdateIssueOutput(WireModel):
    issue: UpdatedIssue


class CloseIssueInput(IssueInput):
    state_reason: Literal["COMPLETED", "NOT_PLANNED"] | None = Field(
        default=None, description="Reason for closing (COMPLETED or NOT_PLANNED)"
    )


class CloseIssueOutput(WireModel):
    issue: ClosedIssue


class AddIssueCommentInput(IssueInput):
    body: str = Field(description="Comment body (markdown supported)")


class AddIssueCommentOutput(WireModel):
    comment: Comment


class ListIssueCommentsInput(IssueInput):
    first: int = Field(default=20, ge=1, description="Number of comments to fetch (default: 20, max: 100)")


class ListIssueCommentsOutput(WireModel):
    comments: list[CommentWithAuthor]


class IssueLabelsInput(IssueInput):
    label_ids: list[str] = Field(description="Label node IDs")


class IssueLabelsOutput(WireModel):
    labels: list[IssueLabel]


class IssueAssigneesInput(IssueInput):
    assignee_ids: list[str] = Field(description="User node IDs")


class IssueAssigneesOutput(WireModel):
    assignees: list[Actor]


# ------------------------------------------------------------------
# Handlers
# ------------------------------------------------------------------


def _flatten_issue(node: dict[str, Any]) -> dict[str, Any]:
    flat = {**node, "labels": nodes(node.get("labels")), "assignees": nodes(node.get("assignees"))}
    comments = node.get("comments")
    if isinstance(comments, dict):
        flat["commentsCount"] = comments.get("totalCount", 0)
    return flat


def _issue_node(data: dict[str, Any], params: IssueInput) -> dict[str, Any]:
    where = f"{params.owner}/{params.repo}"
    repository = require_dict(data, "repository", missing=f"Repository not found: {where}")
    return require_dict(repository, "issue", missing=f"Issue not found: {where}#{params.issue_number}")


def _payload(data: dict[str, Any], mutation: str, *path: str) -> dict[str, Any]:
    current = require_dict(data, mutation)
    for key in path:
        current = require_dict(current, key)
    return current


async def list_issues(params: ListIssuesInput, ctx: ToolContext) -> ListIssuesOutput:
    async with ctx.github() as gh:
        data = await gh.graphql(
            queries.LIST_ISSUES,
            {
                "owner": params.owner,
                "repo": params.repo,
                "states": [params.state] if params.state else None,
                "labels": params.labels,
                "first": clamp_page_size(params.first),
            },
        )
    repository = require_dict(data, "repository", missing=f"Repository not found: {params.owner}/{params.repo}")
    connection = repository.get("issues") or {}
    issues = [IssueSummary.model_validate(_flatten_issue(node)) for node in nodes(connection)]

    # The issues connection has no assignee argument; filter the fetched page.
    if params.assignee:
        wanted = params.assignee.lower()
        issues = [issue for issue in issues if any(a.login.lower() == wanted for a in issue.assignees)]

    return ListIssuesOutput(issues=issues, total_count=connection.get("totalCount", len(issues)))


async def get_issue(params: IssueInput, ctx: ToolContext) -> GetIssueOutput:
    async with ctx.github() as gh:
        data = await gh.graphql(
            queries.GET_ISSUE,
            {"owner": params.owner, "repo": params.repo, "issueNumber": params.issue_number},
        )
    return GetIssueOutput(issue=IssueDetails.model_validate(_flatten_issue(_issue_node(data, params))))


async def create_issue(params: CreateIssueInput, ctx: ToolContext) -> CreateIssueOutput:
    async with ctx.github() as gh:
        repository_id = await gh.get_repository_node_id(params.owner, params.repo)
        data = await gh.graphql(
            queries.CREATE_ISSUE,
            {
                "repositoryId": repository_id,
                "title": params.title,
                "body": params.body,
                "assigneeIds": params.assignee_ids,
                "labelIds": params.label_ids,
                "milestoneId": params.milestone_id,
            },
        )
    issue = IssueRef.model_validate(_payload(data, "createIssue", "issue"))
    logger.info("Created issue %s/%s#%d", params.owner, params.repo, issue.number)
    return CreateIssueOutput(issue=issue)


async def update_issue(params: UpdateIssueInput, ctx: ToolContext) -> UpdateIssueOutput:
    async with ctx.github() as gh:
        issue_id = await gh.get_issue_node_id(params.owner, params.repo, params.issue_number)
        data = await gh.graphql(
            queries.UPDATE_ISSUE,
            {"issueId": issue_id, "title": params.title, "body": params.body, "state": params.state},
        )
    return UpdateIssueOutput(issue=UpdatedIssue.model_validate(_payload(data, "updateIssue", "issue")))


async def close_issue(params: CloseIssueInput, ctx: ToolContext) -> CloseIssueOutput:
    async with ctx.github() as gh:
        issue_id = await gh.get_issue_node_id(params.owner, params.repo, params.issue_number)
        data = await gh.graphql(queries.CLOSE_ISSUE, {"issueId": issue_id, "stateReason": params.state_reason})
    return CloseIssueOutput(issue=ClosedIssue.model_validate(_payload(data, "closeIssue", "issue")))


async def add_issue_comment(params: AddIssueCommentInput, ctx: ToolContext) -> AddIssueCommentOutput:
    async with ctx.github() as gh:
        issue_id = await gh.get_issue_node_id(params.owner, params.repo, params.issue_number)
        data = await gh.graphql(queries.ADD_COMMENT, {"subjectId": issue_id, "body": params.body})
    comment = _payload(data, "addComment", "commentEdge", "node")
    return AddIssueCommentOutput(comment=Comment.model_validate(comment))


async def list_issue_comments(params: ListIssueCommentsInput, ctx: ToolContext) -> ListIssueCommentsOutput:
    async with ctx.github() as gh:
        data = await gh.graphql(
            queries.LIST_COMMENTS,
            {
                "owner": params.owner,
                "repo": params.repo,
                "issueNumber": params.issue_number,
                "first": clamp_page_size(params.first),
            },
        )
    issue = _issue_node(data, params)
    comments = [CommentWithAuthor.model_validate(node) for node in nodes(issue.get("comments"))]
    return ListIssueCommentsOutput(comments=comments)


async def _change_labels(mutation: str, key: str, params: IssueLabelsInput, ctx: ToolContext) -> IssueLabelsOutput:
    async with ctx.github() as gh:
        issue_id = await gh.get_issue_node_id(params.owner, params.repo, params.issue_number)
        data = await gh.graphql(mutation, {"labelableId": issue_id, "labelIds": params.label_ids})
    labelable = _payload(data, key, "labelable")
    return IssueLabelsOutput(labels=[IssueLabel.model_validate(node) for node in nodes(labelable.get("labels"))])


async def add_labels_to_issue(params: IssueLabelsInput, ctx: ToolContext) -> IssueLabelsOutput:
    return await _change_labels(queries.ADD_LABELS, "addLabelsToLabelable", params, ctx)


async def remove_labels_from_issue(params: IssueLabelsInput, ctx: ToolContext) -> IssueLabelsOutput:
    return await _change_labels(queries.REMOVE_LABELS, "removeLabelsFromLabelable", params, ctx)


async def _change_assignees(
    mutation: str, key: str, params: IssueAssigneesInput, ctx: ToolContext
) -> IssueAssigneesOutput:
    async with ctx.github() as gh:
        issue_id = await gh.get_issue_node_id(params.owner, params.repo, params.issue_number)
        data = await gh.graphql(mutation, {"assignableId": issue_id, "assigneeIds": params.assignee_ids})
    assignable = _payload(data, key, "assignable")
    return IssueAssigneesOutput(assignees=[Actor.model_validate(node) for node in nodes(assignable.get("assignees"))])


async def assign_issue(params: IssueAssigneesInput, ctx: ToolContext) -> IssueAssigneesOutput:
    return await _change_assignees(queries.ADD_ASSIGNEES, "addAssigneesToAssignable", params, ctx)


async def unassign_issue(params: IssueAssigneesInput, ctx: ToolContext) -> IssueAssigneesOutput:
    return await _change_assignees(queries.REMOVE_ASSIGNEES, "removeAssigneesFromAssignable", params, ctx)


issue_tools: list[Tool] = [
    Tool(
        id="LIST_ISSUES",
        description="List issues in a GitHub repository with optional filtering by state, labels and assignee.",
        category=ToolCategory.ISSUES,
        input_model=ListIssuesInput,
        output_model=ListIssuesOutput,
        handler=list_issues,
    ),
    Tool(
        id="GET_ISSUE",
        description="Get detailed information about a GitHub issue by its number.",
        category=ToolCategory.ISSUES,
        input_model=IssueInput,
        output_model=GetIssueOutput,
        handler=get_issue,
    ),
    Tool(
        id="CREATE_ISSUE",
        description="Create a GitHub issue with optional assignees, labels and milestone.",
        category=ToolCategory.ISSUES,
        input_model=CreateIssueInput,
        output_model=CreateIssueOutput,
        handler=create_issue,
    ),
    Tool(
        id="UPDATE_ISSUE",
        description="Update a GitHub issue's title, body or state (OPEN/CLOSED).",
        category=ToolCategory.ISSUES,
        input_model=UpdateIssueInput,
        output_model=UpdateIssueOutput,
        handler=update_issue,
    ),
    Tool(
        id="CLOSE_ISSUE",
        description="Close a GitHub issue with an optional state reason (COMPLETED or NOT_PLANNED).",
        category=ToolCategory.ISSUES,
        input_model=CloseIssueInput,
        output_model=CloseIssueOutput,
        handler=close_issue,
    ),
    Tool(
        id="ADD_ISSUE_COMMENT",
        description="Add a comment to a GitHub issue.",
        category=ToolCategory.ISSUES,
        input_model=AddIssueCommentInput,
        output_model=AddIssueCommentOutput,
        handler=add_issue_comment,
    ),
    Tool(
        id="LIST_ISSUE_COMMENTS",
        description="List comments on a GitHub issue.",
        category=ToolCategory.ISSUES,
        input_model=ListIssueCommentsInput,
        output_model=ListIssueCommentsOutput,
        handler=list_issue_comments,
    ),
    Tool(
        id="ADD_LABELS_TO_ISSUE",
        description="Add one or more labels to a GitHub issue by label node IDs.",
        category=ToolCategory.ISSUES,
        input_model=IssueLabelsInput,
        output_model=IssueLabelsOutput,
        handler=add_labels_to_issue,
    ),
    Tool(
        id="REMOVE_LABELS_FROM_ISSUE",
        description="Remove one or more labels from a GitHub issue by label node IDs.",
        category=ToolCategory.ISSUES,
        input_model=IssueLabelsInput,
        output_model=IssueLabelsOutput,
        handler=remove_labels_from_issue,
    ),
    Tool(
        id="ASSIGN_ISSUE",
        description="Assign one or more users to a GitHub issue by user node IDs.",
        category=ToolCategory.ISSUES,
        input_model=IssueAssigneesInput,
        output_model=IssueAssigneesOutput,
        handler=assign_issue,
    ),
    Tool(
        id="UNASSIGN_ISSUE",
        description="Remove one or more assignees from a GitHub issue by user node IDs.",
        category=ToolCategory.ISSUES,
        input_model=IssueAssigneesInput,
        output_model=IssueAssigneesOutput,
        handler=unassign_issue,
    ),
]
