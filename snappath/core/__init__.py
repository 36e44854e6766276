"""Core modules for snappath."""

from snappath.core.config import ConfigLoader, SnappathConfig
from snappath.core.counter import OccurrenceCounter
from snappath.core.naming import NamingStrategy, PatternNaming, build_file_name, kebab_case
from snappath.core.paths import build_report_path, build_report_root_path, build_snapshot_path
from snappath.core.resolver import SnapshotPathResolver

__all__ = [
    "ConfigLoader",
    "NamingStrategy",
    "OccurrenceCounter",
    "PatternNaming",
    "SnappathConfig",
    "SnapshotPathResolver",
    "build_file_name",
    "build_report_path",
    "build_report_root_path",
    "build_snapshot_path",
    "kebab_case",
]
