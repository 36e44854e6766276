"""snappath - deterministic file names and paths for image snapshots."""

__version__ = "0.1.0"
