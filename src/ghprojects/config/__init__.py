"""Configuration loading."""

from ghprojects.config.loader import ENV_DATABASE, ENV_DEFAULT_ORG, apply_env_overrides, load_config, resolve_config

__all__ = ["ENV_DATABASE", "ENV_DEFAULT_ORG", "apply_env_overrides", "load_config", "resolve_config"]
