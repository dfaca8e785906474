"""Public API surface for ghprojects."""

__version__ = "0.1.0"

from ghprojects.auth import create_token_resolver, resolve_token
from ghprojects.config import apply_env_overrides, load_config, resolve_config
from ghprojects.contracts.config import AppConfig
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
from ghprojects.contracts.tool import ToolCategory, ToolResult
from ghprojects.contracts.tracking import RemovalResult, TrackedProject, TrackedRepository
from ghprojects.github import GitHubClient, clamp_page_size
from ghprojects.persistence import TrackingStore
from ghprojects.tools import ALL_TOOLS, TOOLS_BY_ID, Tool, ToolContext, dispatch_tool, get_tool

__all__ = [
    "ALL_TOOLS",
    "TOOLS_BY_ID",
    "AppConfig",
    "AuthenticationError",
    "ConfigError",
    "GhProjectsError",
    "GitHubAPIError",
    "GitHubClient",
    "ProviderError",
    "RateLimitError",
    "RecordNotFoundError",
    "RemovalResult",
    "Tool",
    "ToolCategory",
    "ToolContext",
    "ToolInputError",
    "ToolResult",
    "TrackedProject",
    "TrackedRepository",
    "TrackingStore",
    "__version__",
    "apply_env_overrides",
    "clamp_page_size",
    "create_token_resolver",
    "dispatch_tool",
    "get_tool",
    "load_config",
    "resolve_config",
    "resolve_token",
]
