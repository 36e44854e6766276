"""Configuration loader with layered priority.

Priority order (highest to lowest):
1. Environment variables (SNAPPATH_SNAPSHOTS_DIR, SNAPPATH_REPORT_DIR, ...)
2. Project config (.snappath.yaml in current directory)
3. Global config (~/.snappath.yaml)
4. Default values
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from snappath.core.naming import NamingStrategy, PatternNaming

logger = logging.getLogger("snappath.config")

# Config file paths
GLOBAL_CONFIG = Path.home() / ".snappath.yaml"
PROJECT_CONFIG = Path.cwd() / ".snappath.yaml"

# Environment variable -> config key
ENV_OVERRIDES = {
    "SNAPPATH_SNAPSHOTS_DIR": "snapshots_dir",
    "SNAPPATH_REPORT_DIR": "report_dir",
    "SNAPPATH_FILE_NAME_PATTERN": "file_name_pattern",
    "SNAPPATH_NO_REPORT": "no_report",
    "SNAPPATH_VERBOSE": "verbose",
}


def _parse_bool(value: Any, default: bool = False) -> bool:
    """Parse boolean value from various formats.

    Handles:
    - None -> default
    - bool -> as-is
    - str -> "true", "1", "yes", "on" are True
    - other -> bool(value)
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes", "on")
    return bool(value)


def _optional_str(value: Any) -> str | None:
    """Return non-empty strings, None for anything else."""
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


@dataclass
class SnappathConfig:
    """Resolved snapshot naming configuration."""

    snapshots_dir: str | None = None  # None -> __snapshots__
    report_dir: str | None = None  # None -> jest-screenshot-report
    file_name_pattern: str | None = None  # None -> default naming
    no_report: bool = False
    verbose: bool = False

    def naming(self) -> NamingStrategy | None:
        """Naming strategy for the configured pattern.

        Raises:
            ValueError: If the pattern is invalid
        """
        if self.file_name_pattern is None:
            return None
        return PatternNaming(self.file_name_pattern)


class ConfigLoader:
    """Loads and merges configuration from multiple sources."""

    @classmethod
    def load(cls) -> SnappathConfig:
        """Load configuration with layered priority.

        Returns:
            Merged SnappathConfig instance.
        """
        # Start with defaults
        config_dict: dict[str, Any] = {}

        # Layer 1: Global config (~/.snappath.yaml)
        if GLOBAL_CONFIG.exists():
            config_dict = cls._deep_merge(config_dict, cls._load_yaml(GLOBAL_CONFIG))

        # Layer 2: Project config (.snappath.yaml)
        if PROJECT_CONFIG.exists():
            config_dict = cls._deep_merge(config_dict, cls._load_yaml(PROJECT_CONFIG))

        # Layer 3: Environment variables (highest priority)
        config_dict = cls._deep_merge(config_dict, cls._get_env_overrides())

        return cls._build_config(config_dict)

    @classmethod
    def _load_yaml(cls, path: Path) -> dict[str, Any]:
        """Load YAML file safely."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, OSError) as e:
            logger.warning(f"Ignoring unreadable config {path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    @classmethod
    def _get_env_overrides(cls) -> dict[str, Any]:
        """Get configuration overrides from environment variables."""
        return {key: os.environ[env] for env, key in ENV_OVERRIDES.items() if env in os.environ}

    @classmethod
    def _deep_merge(cls, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries, with override taking precedence."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = cls._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    @classmethod
    def _build_config(cls, config_dict: dict[str, Any]) -> SnappathConfig:
        """Build SnappathConfig from dictionary."""
        return SnappathConfig(
            snapshots_dir=_optional_str(config_dict.get("snapshots_dir")),
            report_dir=_optional_str(config_dict.get("report_dir")),
            file_name_pattern=_optional_str(config_dict.get("file_name_pattern")),
            no_report=_parse_bool(config_dict.get("no_report"), False),
            verbose=_parse_bool(config_dict.get("verbose"), False),
        )


def setup_logging(verbose: bool, log_dir: Path | None) -> Path | None:
    """Configure file-based DEBUG logging.

    Args:
        verbose: Enable logging when True
        log_dir: Directory to write debug.log

    Returns:
        Path to log file if created, None otherwise
    """
    if not verbose or log_dir is None:
        return None

    log_file = log_dir / "debug.log"
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_file, mode="w")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s.%(msecs)03d [%(levelname)-5s] %(name)-20s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))

    # Clear existing handlers to prevent duplicates
    root_logger = logging.getLogger("snappath")
    for old in root_logger.handlers[:]:
        old.close()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(handler)

    return log_file
