"""Tracked record contracts."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import ConfigDict, field_validator

from ghprojects.contracts.tool import WireModel


def _assume_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo; they are always written as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class TrackedRepository(WireModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    owner: str
    name: str
    is_active: bool
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def normalize_created_at(cls, value: datetime) -> datetime:
        return _assume_utc(value)


class TrackedProject(WireModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    project_id: str
    title: str
    organization_login: str
    is_active: bool
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def normalize_created_at(cls, value: datetime) -> datetime:
        return _assume_utc(value)


class RemovalResult(WireModel):
    success: bool
    deleted_id: int
