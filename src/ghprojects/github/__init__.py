"""GitHub API access."""

from ghprojects.github.client import DEFAULT_API_URL, MAX_PAGE_SIZE, GitHubClient, clamp_page_size

__all__ = ["DEFAULT_API_URL", "MAX_PAGE_SIZE", "GitHubClient", "clamp_page_size"]
