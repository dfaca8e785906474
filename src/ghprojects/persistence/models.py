"""SQLAlchemy models for the tracking list."""

from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, Index, Integer, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    pass


class TrackedRepositoryRow(Base):
    """A repository marked for monitoring.

    ``(owner, name)`` is unique by application-level lookup only.
    """

    __tablename__ = "tracked_repositories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    owner: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)

    def __repr__(self) -> str:
        return f"<TrackedRepositoryRow(id={self.id}, repo='{self.owner}/{self.name}', active={self.is_active})>"


class TrackedProjectRow(Base):
    """A GitHub Project V2 marked for monitoring."""

    __tablename__ = "tracked_projects"
    __table_args__ = (Index("tracked_projects_project_id_unique", "project_id", unique=True),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    project_id: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    organization_login: Mapped[str] = mapped_column(Text, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)

    def __repr__(self) -> str:
        return f"<TrackedProjectRow(id={self.id}, project_id='{self.project_id}', active={self.is_active})>"
