"""Public contracts for ghprojects."""

from ghprojects.contracts.config import AUTH_MODES, AppConfig
from ghprojects.contracts.exceptions import (
    AuthenticationError,
    ConfigError,
    GhProjectsError,
    GitHubAPIError,
    ProviderError,
    RateLimitError,
    RecordNotFoundError,
    ToolInputError,
)
from ghprojects.contracts.tool import ToolCategory, ToolResult, WireModel
from ghprojects.contracts.tracking import RemovalResult, TrackedProject, TrackedRepository

__all__ = [
    "AUTH_MODES",
    "AppConfig",
    "AuthenticationError",
    "ConfigError",
    "GhProjectsError",
    "GitHubAPIError",
    "ProviderError",
    "RateLimitError",
    "RecordNotFoundError",
    "RemovalResult",
    "ToolCategory",
    "ToolInputError",
    "ToolResult",
    "TrackedProject",
    "TrackedRepository",
    "WireModel",
]
