"""Exception hierarchy for ghprojects.

All ghprojects exceptions inherit from :class:`GhProjectsError`. Local
precondition failures (configuration, tool input, missing tracking records)
and upstream GitHub failures are kept on separate branches so callers can
tell "fix your call" apart from "GitHub said no".
"""

from __future__ import annotations


class GhProjectsError(Exception):
    """Base exception for all ghprojects errors."""


class ConfigError(GhProjectsError):
    """Configuration loading or validation failure."""


class ToolInputError(GhProjectsError):
    """Tool input is well-formed but cannot be acted on."""


class RecordNotFoundError(GhProjectsError):
    """A tracked repository or project id does not exist."""

    def __init__(self, message: str, *, record_id: int) -> None:
        super().__init__(message)
        self.record_id = record_id


class ProviderError(GhProjectsError):
    """Base upstream (GitHub) failure."""


class AuthenticationError(ProviderError):
    """A GitHub token could not be resolved."""


class GitHubAPIError(ProviderError):
    """GitHub answered with a non-2xx status, GraphQL errors, or no data.

    Attributes:
        status_code: HTTP status of the failed response, or ``None`` when the
            request succeeded at the HTTP level but the payload was unusable.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(GitHubAPIError):
    """GitHub rejected the request with HTTP 429.

    Attributes:
        retry_after: Seconds the caller should wait before trying again.
    """

    def __init__(self, retry_after: int) -> None:
        super().__init__(f"Rate limit exceeded. Retry after {retry_after} seconds.", status_code=429)
        self.retry_after = retry_after
