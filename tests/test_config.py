"""Tests for configuration management system."""

import pytest
import tempfile
import shutil
from pathlib import Path
from omegaconf import OmegaConf

from astar_engine.config import (
    ConfigManager, load_config, validate_config, check_config_consistency, ConfigValidationError
)
from astar_engine.search.astar import SearchConfig

PROJECT_CONF = Path(__file__).parent.parent / "conf"


@pytest.fixture
def temp_config_dir():
    """Create temporary configuration directory."""
    temp_dir = tempfile.mkdtemp()
    config_dir = Path(temp_dir) / "conf"
    config_dir.mkdir()

    config_content = """
search:
  goal_test: generate
  skip_predecessor: true
  check_contracts: true
  check_invariants: false

trace:
  enabled: false
  mode: logging
  level: INFO

domain:
  name: river-crossing
  zero_heuristic: false

logging:
  level: WARNING
"""

    with open(config_dir / "config.yaml", 'w') as f:
        f.write(config_content)

    yield config_dir

    shutil.rmtree(temp_dir)


class TestConfigManager:
    """Test ConfigManager functionality."""

    def test_config_manager_initialization(self, temp_config_dir):
        """Test ConfigManager initialization."""
        manager = ConfigManager(temp_config_dir)
        assert manager.config_dir == temp_config_dir.resolve()
        assert manager.config is None

    def test_missing_config_dir(self, tmp_path):
        """Test that a missing config directory is reported."""
        with pytest.raises(FileNotFoundError):
            ConfigManager(tmp_path / "missing")

    def test_load_config_basic(self, temp_config_dir):
        """Test basic configuration loading."""
        manager = ConfigManager(temp_config_dir)
        config = manager.load_config()

        assert config.search.goal_test == "generate"
        assert config.domain.name == "river-crossing"
        assert manager.config is config

    def test_load_config_with_overrides(self, temp_config_dir):
        """Test configuration loading with overrides."""
        manager = ConfigManager(temp_config_dir)
        config = manager.load_config(overrides=[
            "search.goal_test=expand",
            "domain.zero_heuristic=true"
        ])

        assert config.search.goal_test == "expand"
        assert config.domain.zero_heuristic is True

    def test_invalid_override_rejected(self, temp_config_dir):
        """Test that an invalid override fails validation."""
        manager = ConfigManager(temp_config_dir)

        with pytest.raises(ConfigValidationError, match="goal_test"):
            manager.load_config(overrides=["search.goal_test=pop"])
        assert manager.config is None

    def test_get_parameter(self, temp_config_dir):
        """Test dotted-key parameter lookup."""
        manager = ConfigManager(temp_config_dir)
        manager.load_config(overrides=["search.skip_predecessor=false"])

        assert manager.get_parameter("search.skip_predecessor") is False
        assert manager.get_parameter("trace.level") == "INFO"

    def test_save_config_round_trips_overrides(self, temp_config_dir):
        """Test that a saved configuration loads back with its overrides."""
        manager = ConfigManager(temp_config_dir)
        manager.load_config(overrides=["search.goal_test=expand"])
        saved_dir = temp_config_dir / "saved"
        written = manager.save_config(saved_dir / "config.yaml")

        assert written == saved_dir / "config.yaml"
        reloaded = ConfigManager(saved_dir).load_config()
        assert reloaded.search.goal_test == "expand"
        assert SearchConfig.from_config(reloaded).goal_test == "expand"

    def test_config_without_loading(self, temp_config_dir):
        """Test operations that need a loaded configuration."""
        manager = ConfigManager(temp_config_dir)

        with pytest.raises(RuntimeError, match="No configuration loaded"):
            manager.get_parameter("search.goal_test")
        with pytest.raises(RuntimeError, match="No configuration loaded"):
            manager.save_config(temp_config_dir / "out.yaml")


class TestLoadConfigFunction:
    """Test the module-level loader."""

    def test_load_config_from_dir(self, temp_config_dir):
        """Test loading from an explicit directory."""
        config = load_config(config_dir=temp_config_dir)

        assert config.trace.level == "INFO"

    def test_project_config_loads(self):
        """Test that the shipped configuration matches the search defaults."""
        config = load_config(config_dir=PROJECT_CONF)

        assert SearchConfig.from_config(config) == SearchConfig()
        assert config.logging.level == "WARNING"

    def test_search_config_from_overrides(self, temp_config_dir):
        """Test building SearchConfig from an overridden configuration."""
        config = load_config(
            overrides=["search.goal_test=expand", "search.check_invariants=true"],
            config_dir=temp_config_dir
        )
        search_config = SearchConfig.from_config(config)

        assert search_config.goal_test == "expand"
        assert search_config.check_invariants is True
        assert search_config.skip_predecessor is True


class TestConfigValidation:
    """Test configuration validation."""

    @pytest.fixture
    def valid_config(self):
        """Create a complete valid configuration."""
        return OmegaConf.create({
            'search': {'goal_test': 'generate', 'skip_predecessor': True,
                       'check_contracts': True, 'check_invariants': False},
            'trace': {'enabled': False, 'mode': 'logging', 'level': 'INFO'},
            'domain': {'name': 'river-crossing', 'zero_heuristic': False},
            'logging': {'level': 'WARNING'}
        })

    def test_valid_config(self, valid_config):
        """Test validation of a valid configuration."""
        validate_config(valid_config)

    def test_empty_config_sections(self):
        """Test validation with missing sections."""
        validate_config(OmegaConf.create({}))

    @pytest.mark.parametrize("key,value,match", [
        ("search.goal_test", "pop", "goal_test"),
        ("search.skip_predecessor", "yes", "skip_predecessor"),
        ("trace.mode", "stdout", "trace.mode"),
        ("trace.level", "LOUD", "trace.level"),
        ("domain.name", "8-puzzle", "domain.name"),
        ("logging.level", "CHATTY", "logging.level"),
    ])
    def test_invalid_values(self, valid_config, key, value, match):
        """Test that each invalid value is rejected with a descriptive message."""
        OmegaConf.update(valid_config, key, value)

        with pytest.raises(ConfigValidationError, match=match):
            validate_config(valid_config)

    def test_consistent_config_has_no_issues(self, valid_config):
        """Test consistency check on a consistent configuration."""
        assert check_config_consistency(valid_config) == []

    def test_filtered_trace_level_reported(self, valid_config):
        """Test that a trace level below the log level is reported."""
        OmegaConf.update(valid_config, "trace.enabled", True)
        OmegaConf.update(valid_config, "trace.level", "DEBUG")
        OmegaConf.update(valid_config, "logging.level", "ERROR")

        issues = check_config_consistency(valid_config)
        assert len(issues) == 1
        assert "trace.level=DEBUG" in issues[0]

    def test_invariants_without_contracts_reported(self, valid_config):
        """Test that invariant checks without contract checks are reported."""
        OmegaConf.update(valid_config, "search.check_contracts", False)
        OmegaConf.update(valid_config, "search.check_invariants", True)

        issues = check_config_consistency(valid_config)
        assert any("check_invariants" in issue for issue in issues)
