"""Tracking list CRUD with soft delete."""

from __future__ import annotations

import logging
from pathlib import Path

from sqlalchemy import create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from ghprojects.contracts.exceptions import RecordNotFoundError
from ghprojects.contracts.tracking import RemovalResult, TrackedProject, TrackedRepository
from ghprojects.persistence.models import Base, TrackedProjectRow, TrackedRepositoryRow, utcnow

logger = logging.getLogger(__name__)


class TrackingStore:
    """Facade over the ``tracked_repositories`` and ``tracked_projects`` tables.

    Every public method runs in its own short transaction. The two tables are
    independent; nothing here spans both.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._sessions = sessionmaker(engine, expire_on_commit=False)

    @classmethod
    def open(cls, database_path: str | Path) -> TrackingStore:
        path = Path(database_path).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        # Tool handlers run store calls on worker threads.
        engine = create_engine(f"sqlite:///{path}", connect_args={"check_same_thread": False})
        store = cls(engine)
        store.create_schema()
        logger.info("Tracking store ready: %s", path)
        return store

    def create_schema(self) -> None:
        Base.metadata.create_all(self._engine)

    def close(self) -> None:
        self._engine.dispose()

    # ------------------------------------------------------------------
    # Repositories
    # ------------------------------------------------------------------

    def add_repository(self, owner: str, name: str) -> TrackedRepository:
        """Track ``owner/name``, reactivating an inactive row instead of duplicating it."""
        with self._sessions.begin() as session:
            row = session.scalars(
                select(TrackedRepositoryRow)
                .where(TrackedRepositoryRow.owner == owner, TrackedRepositoryRow.name == name)
                .order_by(TrackedRepositoryRow.id)
                .limit(1)
            ).first()

            if row is None:
                row = TrackedRepositoryRow(owner=owner, name=name, is_active=True, created_at=utcnow())
                session.add(row)
                session.flush()
                logger.info("Tracking repository %s/%s (id=%d)", owner, name, row.id)
            elif not row.is_active:
                row.is_active = True
                logger.info("Reactivated tracked repository %s/%s (id=%d)", owner, name, row.id)
            else:
                logger.debug("Repository %s/%s already tracked (id=%d)", owner, name, row.id)

            return TrackedRepository.model_validate(row)

    def list_repositories(self, *, active_only: bool = True) -> list[TrackedRepository]:
        stmt = select(TrackedRepositoryRow).order_by(TrackedRepositoryRow.id)
        if active_only:
            stmt = stmt.where(TrackedRepositoryRow.is_active.is_(True))
        with self._sessions() as session:
            return [TrackedRepository.model_validate(row) for row in session.scalars(stmt)]

    def remove_repository(self, record_id: int, *, hard_delete: bool = False) -> RemovalResult:
        with self._sessions.begin() as session:
            row = session.get(TrackedRepositoryRow, record_id)
            if row is None:
                raise RecordNotFoundError(f"Tracked repository with ID {record_id} not found", record_id=record_id)
            if hard_delete:
                session.delete(row)
                logger.info("Deleted tracked repository id=%d", record_id)
            else:
                row.is_active = False
                logger.info("Deactivated tracked repository id=%d", record_id)
        return RemovalResult(success=True, deleted_id=record_id)

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    def add_project(self, project_id: str, title: str, organization_login: str) -> TrackedProject:
        """Track a project by node id; repeated adds refresh the title and reactivate."""
        with self._sessions.begin() as session:
            row = session.scalars(
                select(TrackedProjectRow).where(TrackedProjectRow.project_id == project_id).limit(1)
            ).first()

            if row is None:
                row = TrackedProjectRow(
                    project_id=project_id,
                    title=title,
                    organization_login=organization_login,
                    is_active=True,
                    created_at=utcnow(),
                )
                session.add(row)
                session.flush()
                logger.info("Tracking project %s (id=%d)", project_id, row.id)
            else:
                if not row.is_active:
                    logger.info("Reactivated tracked project %s (id=%d)", project_id, row.id)
                row.is_active = True
                row.title = title

            return TrackedProject.model_validate(row)

    def list_projects(self, *, active_only: bool = True) -> list[TrackedProject]:
        stmt = select(TrackedProjectRow).order_by(TrackedProjectRow.id)
        if active_only:
            stmt = stmt.where(TrackedProjectRow.is_active.is_(True))
        with self._sessions() as session:
            return [TrackedProject.model_validate(row) for row in session.scalars(stmt)]

    def remove_project(self, record_id: int, *, hard_delete: bool = False) -> RemovalResult:
        with self._sessions.begin() as session:
            row = session.get(TrackedProjectRow, record_id)
            if row is None:
                raise RecordNotFoundError(f"Tracked project with ID {record_id} not found", record_id=record_id)
            if hard_delete:
                session.delete(row)
                logger.info("Deleted tracked project id=%d", record_id)
            else:
                row.is_active = False
                logger.info("Deactivated tracked project id=%d", record_id)
        return RemovalResult(success=True, deleted_id=record_id)
