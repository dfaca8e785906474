"""Config loading and environment overrides."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ghprojects.contracts.config import AppConfig
from ghprojects.contracts.exceptions import ConfigError

ENV_DEFAULT_ORG = "GHPROJECTS_DEFAULT_ORG"
ENV_DATABASE = "GHPROJECTS_DATABASE"


def _resolve_path(value: Path, *, base_dir: Path) -> Path:
    if value.is_absolute():
        return value
    return (base_dir / value).resolve()


def load_config(path: str | Path) -> AppConfig:
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        parsed = AppConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    return parsed.model_copy(
        update={"database_path": _resolve_path(parsed.database_path, base_dir=config_path.parent)}
    )


def apply_env_overrides(config: AppConfig, environ: Mapping[str, str] | None = None) -> AppConfig:
    env = os.environ if environ is None else environ
    updates: dict[str, Any] = {}

    default_org = (env.get(ENV_DEFAULT_ORG) or "").strip()
    if default_org:
        updates["default_organization"] = default_org
    database = (env.get(ENV_DATABASE) or "").strip()
    if database:
        updates["database_path"] = Path(database).expanduser()

    if not updates:
        return config
    return config.model_copy(update=updates)


def resolve_config(path: str | Path | None = None) -> AppConfig:
    """Load ``path`` (or defaults when ``None``) and apply environment overrides."""
    config = load_config(path) if path is not None else AppConfig()
    return apply_env_overrides(config)
