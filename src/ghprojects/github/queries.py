"""GraphQL query and mutation constants."""

# ------------------------------------------------------------------
# Node-id lookups
# ------------------------------------------------------------------

GET_REPOSITORY_ID = """
query GetRepositoryId($owner: String!, $repo: String!) {
  repository(owner: $owner, name: $repo) { id }
}
"""

GET_ISSUE_ID = """
query GetIssueId($owner: String!, $repo: String!, $issueNumber: Int!) {
  repository(owner: $owner, name: $repo) {
    issue(number: $issueNumber) { id }
  }
}
"""

GET_ORGANIZATION_ID = """
query GetOrgId($login: String!) {
  organization(login: $login) { id }
}
"""

# ------------------------------------------------------------------
# Projects V2
# ------------------------------------------------------------------

LIST_PROJECTS = """
query ListProjects($login: String!, $first: Int!) {
  organization(login: $login) {
    projectsV2(first: $first) {
      nodes { id title number url }
    }
  }
}
"""

GET_PROJECT = """
query GetProject($projectId: ID!) {
  node(id: $projectId) {
    ... on ProjectV2 {
      id
      title
      number
      url
      shortDescription
      readme
      closed
      public
      items { totalCount }
    }
  }
}
"""

CREATE_PROJECT = """
mutation CreateProject($ownerId: ID!, $title: String!) {
  createProjectV2(input: { ownerId: $ownerId, title: $title }) {
    projectV2 { id title url number }
  }
}
"""

UPDATE_PROJECT = """
mutation UpdateProject(
  $projectId: ID!
  $title: String
  $shortDescription: String
  $readme: String
  $public: Boolean
) {
  updateProjectV2(
    input: {
      projectId: $projectId
      title: $title
      shortDescription: $shortDescription
      readme: $readme
      public: $public
    }
  ) {
    projectV2 { id title url }
  }
}
"""

DELETE_PROJECT = """
mutation DeleteProject($projectId: ID!) {
  deleteProjectV2(input: { projectId: $projectId }) {
    projectV2 { id }
  }
}
"""

LIST_PROJECT_ITEMS = """
query ListProjectItems($projectId: ID!, $first: Int!) {
  node(id: $projectId) {
    ... on ProjectV2 {
      id
      items(first: $first) {
        nodes {
          id
          content {
            __typename
            ... on Issue { title url state number }
            ... on PullRequest { title url state number }
            ... on DraftIssue { title }
          }
        }
      }
    }
  }
}
"""

ADD_PROJECT_ITEM = """
mutation AddItemToProject($projectId: ID!, $contentId: ID!) {
  addProjectV2ItemById(input: { projectId: $projectId, contentId: $contentId }) {
    item { id }
  }
}
"""

# ------------------------------------------------------------------
# Issues
# ------------------------------------------------------------------

LIST_ISSUES = """
query ListIssues(
  $owner: String!
  $repo: String!
  $states: [IssueState!]
  $labels: [String!]
  $first: Int!
) {
  repository(owner: $owner, name: $repo) {
    issues(
      first: $first
      states: $states
      labels: $labels
      orderBy: { field: CREATED_AT, direction: DESC }
    ) {
      totalCount
      nodes {
        id
        number
        title
        body
        state
        url
        createdAt
        updatedAt
        author { login }
        labels(first: 10) { nodes { name color } }
        assignees(first: 10) { nodes { login } }
      }
    }
  }
}
"""

GET_ISSUE = """
query GetIssue($owner: String!, $repo: String!, $issueNumber: Int!) {
  repository(owner: $owner, name: $repo) {
    issue(number: $issueNumber) {
      id
      number
      title
      body
      state
      url
      createdAt
      updatedAt
      closedAt
      author { login }
      labels(first: 50) { nodes { name color } }
      assignees(first: 50) { nodes { login } }
      milestone { title }
      comments { totalCount }
    }
  }
}
"""

CREATE_ISSUE = """
mutation CreateIssue(
  $repositoryId: ID!
  $title: String!
  $body: String
  $assigneeIds: [ID!]
  $labelIds: [ID!]
  $milestoneId: ID
) {
  createIssue(
    input: {
      repositoryId: $repositoryId
      title: $title
      body: $body
      assigneeIds: $assigneeIds
      labelIds: $labelIds
      milestoneId: $milestoneId
    }
  ) {
    issue { id number title url }
  }
}
"""

UPDATE_ISSUE = """
mutation UpdateIssue($issueId: ID!, $title: String, $body: String, $state: IssueState) {
  updateIssue(input: { id: $issueId, title: $title, body: $body, state: $state }) {
    issue { id number title url state }
  }
}
"""

CLOSE_ISSUE = """
mutation CloseIssue($issueId: ID!, $stateReason: IssueClosedStateReason) {
  closeIssue(input: { issueId: $issueId, stateReason: $stateReason }) {
    issue { id number state stateReason }
  }
}
"""

ADD_COMMENT = """
mutation AddComment($subjectId: ID!, $body: String!) {
  addComment(input: { subjectId: $subjectId, body: $body }) {
    commentEdge {
      node { id body url createdAt }
    }
  }
}
"""

LIST_COMMENTS = """
query ListComments($owner: String!, $repo: String!, $issueNumber: Int!, $first: Int!) {
  repository(owner: $owner, name: $repo) {
    issue(number: $issueNumber) {
      comments(first: $first) {
        nodes {
          id
          body
          url
          createdAt
          author { login }
        }
      }
    }
  }
}
"""

ADD_LABELS = """
mutation AddLabels($labelableId: ID!, $labelIds: [ID!]!) {
  addLabelsToLabelable(input: { labelableId: $labelableId, labelIds: $labelIds }) {
    labelable {
      ... on Issue { labels(first: 50) { nodes { name color } } }
    }
  }
}
"""

REMOVE_LABELS = """
mutation RemoveLabels($labelableId: ID!, $labelIds: [ID!]!) {
  removeLabelsFromLabelable(input: { labelableId: $labelableId, labelIds: $labelIds }) {
    labelable {
      ... on Issue { labels(first: 50) { nodes { name color } } }
    }
  }
}
"""

ADD_ASSIGNEES = """
mutation AssignIssue($assignableId: ID!, $assigneeIds: [ID!]!) {
  addAssigneesToAssignable(input: { assignableId: $assignableId, assigneeIds: $assigneeIds }) {
    assignable {
      ... on Issue { assignees(first: 50) { nodes { login } } }
    }
  }
}
"""

REMOVE_ASSIGNEES = """
mutation UnassignIssue($assignableId: ID!, $assigneeIds: [ID!]!) {
  removeAssigneesFromAssignable(input: { assignableId: $assignableId, assigneeIds: $assigneeIds }) {
    assignable {
      ... on Issue { assignees(first: 50) { nodes { login } } }
    }
  }
}
"""

# ------------------------------------------------------------------
# Viewer
# ------------------------------------------------------------------

GET_VIEWER = """
query GetViewer {
  viewer { id login name url }
}
"""
