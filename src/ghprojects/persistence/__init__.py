"""Local persistence for the tracking list."""

from ghprojects.persistence.models import Base, TrackedProjectRow, TrackedRepositoryRow
from ghprojects.persistence.tracking_store import TrackingStore

__all__ = ["Base", "TrackedProjectRow", "TrackedRepositoryRow", "TrackingStore"]
