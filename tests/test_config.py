"""Tests for ConfigLoader."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from snappath.core.config import ConfigLoader, SnappathConfig
from snappath.core.naming import PatternNaming


@pytest.fixture(autouse=True)
def clean_env():
    """Run every test without SNAPPATH_* variables from the outer shell."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("SNAPPATH_")}
    with patch.dict(os.environ, env, clear=True):
        yield


class TestConfigLoader:
    """Test ConfigLoader behavior."""

    def test_loads_default_config_when_no_files(self):
        """Returns defaults when no config files exist."""
        with patch.object(Path, "exists", return_value=False):
            config = ConfigLoader.load()

        assert config.snapshots_dir is None
        assert config.report_dir is None
        assert config.file_name_pattern is None
        assert config.no_report is False
        assert config.verbose is False

    def test_project_config_overrides_defaults(self, tmp_path):
        """Project .snappath.yaml overrides defaults."""
        config_file = tmp_path / ".snappath.yaml"
        config_file.write_text("""
snapshots_dir: __images__
no_report: yes
""")

        with patch("snappath.core.config.GLOBAL_CONFIG", Path("/nonexistent")):
            with patch("snappath.core.config.PROJECT_CONFIG", config_file):
                config = ConfigLoader.load()

        assert config.snapshots_dir == "__images__"
        assert config.no_report is True
        assert config.report_dir is None  # Still default

    def test_env_var_overrides_config(self, tmp_path):
        """Environment variables override config files."""
        config_file = tmp_path / ".snappath.yaml"
        config_file.write_text("report_dir: from-file")

        with patch("snappath.core.config.PROJECT_CONFIG", config_file):
            with patch.dict(os.environ, {"SNAPPATH_REPORT_DIR": "from-env"}):
                config = ConfigLoader.load()

        assert config.report_dir == "from-env"

    def test_env_bool_parsing(self):
        """Boolean env vars accept common truthy strings."""
        env = {"SNAPPATH_NO_REPORT": "on", "SNAPPATH_VERBOSE": "0"}
        with patch.object(Path, "exists", return_value=False):
            with patch.dict(os.environ, env):
                config = ConfigLoader.load()

        assert config.no_report is True
        assert config.verbose is False


class TestConfigMerging:
    """Test configuration merging from multiple sources."""

    def test_project_overrides_global(self, tmp_path):
        """Project config overrides global config."""
        global_config = tmp_path / "global.snappath.yaml"
        global_config.write_text("""
snapshots_dir: global-snaps
report_dir: global-report
""")
        project_config = tmp_path / "project.snappath.yaml"
        project_config.write_text("snapshots_dir: project-snaps")

        with patch("snappath.core.config.GLOBAL_CONFIG", global_config):
            with patch("snappath.core.config.PROJECT_CONFIG", project_config):
                config = ConfigLoader.load()

        assert config.snapshots_dir == "project-snaps"
        assert config.report_dir == "global-report"

    def test_invalid_yaml_is_ignored(self, tmp_path):
        """Broken YAML files are treated as empty."""
        config_file = tmp_path / ".snappath.yaml"
        config_file.write_text("snapshots_dir: [unclosed")

        with patch("snappath.core.config.GLOBAL_CONFIG", Path("/nonexistent")):
            with patch("snappath.core.config.PROJECT_CONFIG", config_file):
                config = ConfigLoader.load()

        assert config.snapshots_dir is None

    def test_non_mapping_yaml_is_ignored(self, tmp_path):
        """YAML that is not a mapping is treated as empty."""
        config_file = tmp_path / ".snappath.yaml"
        config_file.write_text("- just\n- a list\n")

        with patch("snappath.core.config.GLOBAL_CONFIG", Path("/nonexistent")):
            with patch("snappath.core.config.PROJECT_CONFIG", config_file):
                config = ConfigLoader.load()

        assert config == SnappathConfig()

    def test_blank_strings_fall_back_to_defaults(self, tmp_path):
        """Empty directory values mean the default directory."""
        config_file = tmp_path / ".snappath.yaml"
        config_file.write_text("snapshots_dir: '  '\nreport_dir: 42\n")

        with patch("snappath.core.config.GLOBAL_CONFIG", Path("/nonexistent")):
            with patch("snappath.core.config.PROJECT_CONFIG", config_file):
                config = ConfigLoader.load()

        assert config.snapshots_dir is None
        assert config.report_dir is None


class TestConfigNaming:
    """Test naming strategy resolution."""

    def test_no_pattern_means_default_naming(self):
        assert SnappathConfig().naming() is None

    def test_pattern_builds_strategy(self):
        """A pattern produces a PatternNaming."""
        naming = SnappathConfig(file_name_pattern="{identifier}.png").naming()

        assert isinstance(naming, PatternNaming)
        assert naming("file", "renders", 1) == "renders.png"

    def test_invalid_pattern_raises(self):
        with pytest.raises(ValueError):
            SnappathConfig(file_name_pattern="{bogus}").naming()
