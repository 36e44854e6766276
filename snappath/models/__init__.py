"""Data models for snappath."""

from snappath.models.location import SnapshotLocation

__all__ = [
    "SnapshotLocation",
]
