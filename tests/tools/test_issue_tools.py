from __future__ import annotations

import pytest

from ghprojects.contracts.exceptions import GitHubAPIError
from ghprojects.tools import ToolContext, dispatch_tool
from ghprojects.tools.issues import (
    AddIssueCommentInput,
    CloseIssueInput,
    CreateIssueInput,
    IssueAssigneesInput,
    IssueInput,
    IssueLabelsInput,
    ListIssueCommentsInput,
    ListIssuesInput,
    UpdateIssueInput,
    add_issue_comment,
    add_labels_to_issue,
    assign_issue,
    close_issue,
    create_issue,
    get_issue,
    list_issue_comments,
    list_issues,
    remove_labels_from_issue,
    unassign_issue,
    update_issue,
)


def _issue_node(number: int, *, assignees: tuple[str, ...] = ()) -> dict:
    return {
        "id": f"I_{number}",
        "number": number,
        "title": f"Issue {number}",
        "body": "details",
        "state": "OPEN",
        "url": f"https://github.com/octocat/hello/issues/{number}",
        "createdAt": "2024-05-01T12:00:00Z",
        "updatedAt": "2024-05-02T12:00:00Z",
        "author": {"login": "octocat"},
        "labels": {"nodes": [{"name": "bug", "color": "d73a4a"}]},
        "assignees": {"nodes": [{"login": login} for login in assignees]},
    }


def _reply_issue_id(github, issue_id: str = "I_1") -> None:
    github.reply({"repository": {"issue": {"id": issue_id}}})


@pytest.mark.asyncio
async def test_list_issues_flattens_connections(github, context: ToolContext) -> None:
    github.reply({"repository": {"issues": {"totalCount": 1, "nodes": [_issue_node(1, assignees=("hubot",))]}}})

    output = await list_issues(ListIssuesInput(owner="octocat", repo="hello"), context)

    assert github.variables() == {"owner": "octocat", "repo": "hello", "first": 20}
    wire = output.to_wire()
    assert wire["totalCount"] == 1
    assert wire["issues"][0] == {
        "id": "I_1",
        "number": 1,
        "title": "Issue 1",
        "body": "details",
        "state": "OPEN",
        "url": "https://github.com/octocat/hello/issues/1",
        "createdAt": "2024-05-01T12:00:00Z",
        "updatedAt": "2024-05-02T12:00:00Z",
        "author": {"login": "octocat"},
        "labels": [{"name": "bug", "color": "d73a4a"}],
        "assignees": [{"login": "hubot"}],
    }


@pytest.mark.asyncio
async def test_list_issues_passes_state_and_labels_filters(github, context: ToolContext) -> None:
    github.reply({"repository": {"issues": {"totalCount": 0, "nodes": []}}})

    await list_issues(
        ListIssuesInput(owner="octocat", repo="hello", state="CLOSED", labels=["bug"], first=150),
        context,
    )

    assert github.variables() == {
        "owner": "octocat",
        "repo": "hello",
        "states": ["CLOSED"],
        "labels": ["bug"],
        "first": 100,
    }


@pytest.mark.asyncio
async def test_list_issues_filters_by_assignee(github, context: ToolContext) -> None:
    github.reply(
        {
            "repository": {
                "issues": {
                    "totalCount": 3,
                    "nodes": [
                        _issue_node(1, assignees=("hubot",)),
                        _issue_node(2, assignees=("octocat",)),
                        _issue_node(3, assignees=("Hubot", "octocat")),
                    ],
                }
            }
        }
    )

    output = await list_issues(ListIssuesInput(owner="octocat", repo="hello", assignee="hubot"), context)

    assert [issue.number for issue in output.issues] == [1, 3]
    assert output.total_count == 3


@pytest.mark.asyncio
async def test_list_issues_raises_for_missing_repository(github, context: ToolContext) -> None:
    github.reply({"repository": None})

    with pytest.raises(GitHubAPIError, match="Repository not found: octocat/missing"):
        await list_issues(ListIssuesInput(owner="octocat", repo="missing"), context)


@pytest.mark.asyncio
async def test_get_issue_includes_details(github, context: ToolContext) -> None:
    node = {
        **_issue_node(5),
        "closedAt": None,
        "milestone": {"title": "v1.0"},
        "comments": {"totalCount": 4},
    }
    github.reply({"repository": {"issue": node}})

    output = await get_issue(IssueInput(owner="octocat", repo="hello", issue_number=5), context)

    assert github.variables() == {"owner": "octocat", "repo": "hello", "issueNumber": 5}
    wire = output.to_wire()["issue"]
    assert wire["commentsCount"] == 4
    assert wire["milestone"] == {"title": "v1.0"}
    assert wire["closedAt"] is None


@pytest.mark.asyncio
async def test_get_issue_raises_for_missing_issue(github, context: ToolContext) -> None:
    github.reply({"repository": {"issue": None}})

    with pytest.raises(GitHubAPIError, match="Issue not found: octocat/hello#404"):
        await get_issue(IssueInput(owner="octocat", repo="hello", issue_number=404), context)


@pytest.mark.asyncio
async def test_create_issue_resolves_repository_id_first(github, context: ToolContext) -> None:
    github.reply({"repository": {"id": "R_1"}})
    github.reply({"createIssue": {"issue": {"id": "I_9", "number": 9, "title": "New", "url": "https://x/9"}}})

    output = await create_issue(
        CreateIssueInput(owner="octocat", repo="hello", title="New", label_ids=["LA_1"]),
        context,
    )

    assert github.variables(0) == {"owner": "octocat", "repo": "hello"}
    assert github.variables(1) == {"repositoryId": "R_1", "title": "New", "labelIds": ["LA_1"]}
    assert output.issue.number == 9


@pytest.mark.asyncio
async def test_update_issue_resolves_issue_id_first(github, context: ToolContext) -> None:
    _reply_issue_id(github)
    github.reply(
        {"updateIssue": {"issue": {"id": "I_1", "number": 1, "title": "T", "url": "https://x/1", "state": "CLOSED"}}}
    )

    output = await update_issue(
        UpdateIssueInput(owner="octocat", repo="hello", issue_number=1, state="CLOSED"),
        context,
    )

    assert github.variables(0) == {"owner": "octocat", "repo": "hello", "issueNumber": 1}
    assert github.variables(1) == {"issueId": "I_1", "state": "CLOSED"}
    assert output.issue.state == "CLOSED"


@pytest.mark.asyncio
async def test_close_issue_with_state_reason(github, context: ToolContext) -> None:
    _reply_issue_id(github)
    github.reply({"closeIssue": {"issue": {"id": "I_1", "number": 1, "state": "CLOSED", "stateReason": "NOT_PLANNED"}}})

    output = await close_issue(
        CloseIssueInput(owner="octocat", repo="hello", issue_number=1, state_reason="NOT_PLANNED"),
        context,
    )

    assert github.variables(1) == {"issueId": "I_1", "stateReason": "NOT_PLANNED"}
    assert output.to_wire()["issue"]["stateReason"] == "NOT_PLANNED"


@pytest.mark.asyncio
async def test_add_issue_comment(github, context: ToolContext) -> None:
    _reply_issue_id(github)
    github.reply(
        {
            "addComment": {
                "commentEdge": {
                    "node": {"id": "IC_1", "body": "LGTM", "url": "https://x/c1", "createdAt": "2024-05-03T00:00:00Z"}
                }
            }
        }
    )

    output = await add_issue_comment(
        AddIssueCommentInput(owner="octocat", repo="hello", issue_number=1, body="LGTM"),
        context,
    )

    assert github.variables(1) == {"subjectId": "I_1", "body": "LGTM"}
    assert output.comment.id == "IC_1"


@pytest.mark.asyncio
async def test_list_issue_comments(github, context: ToolContext) -> None:
    github.reply(
        {
            "repository": {
                "issue": {
                    "comments": {
                        "nodes": [
                            {
                                "id": "IC_1",
                                "body": "First",
                                "url": "https://x/c1",
                                "createdAt": "2024-05-03T00:00:00Z",
                                "author": None,
                            }
                        ]
                    }
                }
            }
        }
    )

    output = await list_issue_comments(
        ListIssueCommentsInput(owner="octocat", repo="hello", issue_number=1, first=5),
        context,
    )

    assert github.variables() == {"owner": "octocat", "repo": "hello", "issueNumber": 1, "first": 5}
    assert output.to_wire()["comments"][0]["author"] is None


@pytest.mark.asyncio
async def test_add_and_remove_labels(github, context: ToolContext) -> None:
    bug = {"name": "bug", "color": "d73a4a"}
    p1 = {"name": "p1", "color": "ff0000"}
    _reply_issue_id(github)
    github.reply({"addLabelsToLabelable": {"labelable": {"labels": {"nodes": [bug, p1]}}}})
    _reply_issue_id(github)
    github.reply({"removeLabelsFromLabelable": {"labelable": {"labels": {"nodes": [bug]}}}})

    params = IssueLabelsInput(owner="octocat", repo="hello", issue_number=1, label_ids=["LA_2"])
    added = await add_labels_to_issue(params, context)
    removed = await remove_labels_from_issue(params, context)

    assert github.variables(1) == {"labelableId": "I_1", "labelIds": ["LA_2"]}
    assert [label.name for label in added.labels] == ["bug", "p1"]
    assert [label.name for label in removed.labels] == ["bug"]


@pytest.mark.asyncio
async def test_assign_and_unassign(github, context: ToolContext) -> None:
    _reply_issue_id(github)
    github.reply({"addAssigneesToAssignable": {"assignable": {"assignees": {"nodes": [{"login": "hubot"}]}}}})
    _reply_issue_id(github)
    github.reply({"removeAssigneesFromAssignable": {"assignable": {"assignees": {"nodes": []}}}})

    params = IssueAssigneesInput(owner="octocat", repo="hello", issue_number=1, assignee_ids=["U_1"])
    assigned = await assign_issue(params, context)
    unassigned = await unassign_issue(params, context)

    assert github.variables(3) == {"assignableId": "I_1", "assigneeIds": ["U_1"]}
    assert assigned.to_wire() == {"assignees": [{"login": "hubot"}]}
    assert unassigned.assignees == []


@pytest.mark.asyncio
async def test_mutation_on_missing_issue_is_an_error_result(github, context: ToolContext) -> None:
    github.reply({"repository": {"issue": None}})

    result = await dispatch_tool(
        "CLOSE_ISSUE",
        {"owner": "octocat", "repo": "hello", "issueNumber": 404},
        context,
    )

    assert result.is_error is True
    assert result.content == "Issue not found: octocat/hello#404"
    assert len(github.requests) == 1


@pytest.mark.asyncio
async def test_invalid_state_is_rejected_before_any_request(github, context: ToolContext) -> None:
    result = await dispatch_tool("LIST_ISSUES", {"owner": "octocat", "repo": "hello", "state": "MERGED"}, context)

    assert result.is_error is True
    assert result.content.startswith("Invalid input for LIST_ISSUES: state:")
    assert github.requests == []
