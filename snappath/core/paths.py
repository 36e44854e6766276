"""Snapshot and report path building.

Nothing here touches the filesystem; directories are created by whoever
writes the images. Overrides are always nested under their base directory:
an absolute override loses its leading separator and ``..`` segments are
collapsed, so ``/abs/snaps`` next to ``/project/src/a.test.ts`` ends up in
``/project/src/abs/snaps``.
"""

from __future__ import annotations

import os

from snappath.core.naming import NamingStrategy, build_file_name

DEFAULT_SNAPSHOTS_DIR = "__snapshots__"
DEFAULT_REPORT_DIR = "jest-screenshot-report"
REPORTS_SUBDIR = "reports"

_SEPARATORS = os.sep + (os.altsep or "")


def _join(base: str, *parts: str) -> str:
    """Concatenate all parts under base and normalize the result."""
    return os.path.normpath(os.path.join(base, *(part.lstrip(_SEPARATORS) for part in parts)))


def build_snapshot_path(
    test_file_path: str | os.PathLike[str],
    test_name: str,
    counter: int,
    snapshots_dir: str | None = None,
    naming: NamingStrategy | None = None,
) -> str:
    """Calculate the path of an individual snapshot file.

    Snapshots live in a directory next to the test file.

    Args:
        test_file_path: Path of the test file
        test_name: Full name of the current test
        counter: Occurrence of this snapshot within the test
        snapshots_dir: Directory name overriding ``__snapshots__``
        naming: Optional custom naming strategy

    Returns:
        Path like ``<test dir>/__snapshots__/<file name>``
    """
    file_name = build_file_name(test_file_path, test_name, counter, naming)
    test_dir = os.path.dirname(os.fspath(test_file_path))
    return _join(test_dir, snapshots_dir or DEFAULT_SNAPSHOTS_DIR, file_name)


def build_report_root_path(report_dir: str | None = None) -> str:
    """Report root directory, relative to the current working directory."""
    return _join(os.getcwd(), report_dir or DEFAULT_REPORT_DIR)


def build_report_path(
    test_file_path: str | os.PathLike[str],
    test_name: str,
    counter: int,
    report_dir: str | None = None,
    naming: NamingStrategy | None = None,
) -> str:
    """Calculate the path of the report image for a snapshot.

    Returns:
        Path like ``<cwd>/jest-screenshot-report/reports/<file name>``
    """
    file_name = build_file_name(test_file_path, test_name, counter, naming)
    return _join(build_report_root_path(report_dir), REPORTS_SUBDIR, file_name)
