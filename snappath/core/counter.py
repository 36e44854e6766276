"""Per-run snapshot occurrence counting."""

from __future__ import annotations

import logging
from collections.abc import Iterator

logger = logging.getLogger("snappath.counter")


class OccurrenceCounter:
    """Track how many snapshots each test has produced in the current run.

    Not thread safe: one counter belongs to one test run.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def increment(self, test_name: str) -> int:
        """Record a new snapshot for a test.

        Args:
            test_name: Full name of the test

        Returns:
            The new count, 1 for the first snapshot of the test
        """
        count = self._counts.get(test_name, 0) + 1
        self._counts[test_name] = count
        logger.debug(f"Snapshot #{count} for '{test_name}'")
        return count

    def get(self, test_name: str) -> int | None:
        """Current count for a test, or None if it has produced no snapshot."""
        return self._counts.get(test_name)

    def reset(self) -> None:
        self._counts.clear()

    def __contains__(self, test_name: object) -> bool:
        return test_name in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)
