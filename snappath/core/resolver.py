"""Snapshot location resolution for a test run."""

from __future__ import annotations

import logging
import os

from snappath.core.config import SnappathConfig
from snappath.core.counter import OccurrenceCounter
from snappath.core.naming import build_file_name
from snappath.core.paths import build_report_path, build_report_root_path, build_snapshot_path
from snappath.models.location import SnapshotLocation

logger = logging.getLogger("snappath.resolver")


class SnapshotPathResolver:
    """Resolve snapshot and report paths for successive snapshots of a run.

    Owns the occurrence counter so the path builders only ever see plain
    counter values.
    """

    def __init__(
        self,
        config: SnappathConfig | None = None,
        counter: OccurrenceCounter | None = None,
    ):
        """Initialize resolver.

        Args:
            config: Naming configuration, defaults when None
            counter: Occurrence counter shared with the test run, new one when None

        Raises:
            ValueError: If the configured file name pattern is invalid
        """
        self._config = config or SnappathConfig()
        self._counter = counter if counter is not None else OccurrenceCounter()
        self._naming = self._config.naming()

    @property
    def counter(self) -> OccurrenceCounter:
        return self._counter

    @property
    def report_root(self) -> str:
        return build_report_root_path(self._config.report_dir)

    def resolve(self, test_file_path: str | os.PathLike[str], test_name: str) -> SnapshotLocation:
        """Register a new snapshot of a test and return where it belongs.

        Args:
            test_file_path: Path of the test file
            test_name: Full name of the current test

        Returns:
            Location of the snapshot
        """
        count = self._counter.increment(test_name)
        return self.locate(test_file_path, test_name, count)

    def peek(self, test_file_path: str | os.PathLike[str], test_name: str) -> SnapshotLocation:
        """Location of the latest snapshot of a test, without registering a new one.

        Raises:
            KeyError: If the test has not produced a snapshot yet
        """
        count = self._counter.get(test_name)
        if count is None:
            raise KeyError(test_name)
        return self.locate(test_file_path, test_name, count)

    def locate(
        self, test_file_path: str | os.PathLike[str], test_name: str, count: int
    ) -> SnapshotLocation:
        """Location of a given occurrence of a test. The counter is left alone."""
        cfg = self._config
        report_path = None
        if not cfg.no_report:
            report_path = build_report_path(
                test_file_path, test_name, count, cfg.report_dir, self._naming
            )

        location = SnapshotLocation(
            file_name=build_file_name(test_file_path, test_name, count, self._naming),
            snapshot_path=build_snapshot_path(
                test_file_path, test_name, count, cfg.snapshots_dir, self._naming
            ),
            counter=count,
            report_path=report_path,
        )
        logger.debug(f"Resolved '{test_name}' #{count} -> {location.snapshot_path}")
        return location
