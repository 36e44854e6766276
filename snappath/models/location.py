"""Resolved snapshot location model."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class SnapshotLocation:
    """Where one snapshot occurrence is stored."""

    file_name: str
    snapshot_path: str
    counter: int
    report_path: str | None = None  # None when reports are disabled

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
