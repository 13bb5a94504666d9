"""Configuration manager using Hydra for hierarchical configuration."""

import logging
from typing import Any, Optional, Union
from pathlib import Path
from omegaconf import DictConfig, OmegaConf
from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra

from .validators import validate_config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads the engine configuration with Hydra and exposes it to the CLI."""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """Initialize configuration manager.

        Args:
            config_dir: Path to configuration directory. If None, uses the
                ``conf`` directory at the project root.
        """
        if config_dir is None:
            project_root = Path(__file__).parent.parent.parent.parent
            config_dir = project_root / "conf"

        self.config_dir = Path(config_dir).resolve()
        self.config: Optional[DictConfig] = None

        if not self.config_dir.exists():
            raise FileNotFoundError(f"Configuration directory not found: {self.config_dir}")

        logger.debug(f"Configuration directory: {self.config_dir}")

    def load_config(self,
                    config_name: str = "config",
                    overrides: Optional[list] = None,
                    validate: bool = True) -> DictConfig:
        """Compose the configuration and apply command line overrides.

        Args:
            config_name: Name of the main config file (without .yaml)
            overrides: Hydra overrides such as ``search.goal_test=expand``
            validate: Whether to run ``validate_config`` on the result

        Returns:
            Composed configuration

        Raises:
            ConfigValidationError: If validation is requested and fails
        """
        # Hydra refuses to initialize twice in one process
        GlobalHydra.instance().clear()

        try:
            with initialize_config_dir(config_dir=str(self.config_dir), version_base=None):
                cfg = compose(config_name=config_name, overrides=overrides or [])
        except Exception as e:
            logger.error(f"Failed to compose configuration {config_name!r}: {e}")
            raise

        if validate:
            validate_config(cfg)

        self.config = cfg
        if overrides:
            logger.info(f"Configuration {config_name!r} loaded with overrides: {overrides}")
        return cfg

    def _require_config(self) -> DictConfig:
        if self.config is None:
            raise RuntimeError("No configuration loaded. Call load_config() first.")
        return self.config

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """Look up a value by dotted key, e.g. ``search.goal_test``."""
        return OmegaConf.select(self._require_config(), key, default=default)

    def save_config(self, output_path: Union[str, Path]) -> Path:
        """Write the loaded configuration, overrides included, as YAML.

        The saved file can be copied into a config directory and loaded back.

        Returns:
            Path that was written
        """
        config = self._require_config()
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        OmegaConf.save(config, output_path, resolve=True)

        logger.info(f"Configuration saved to: {output_path}")
        return output_path


def load_config(config_name: str = "config",
                overrides: Optional[list] = None,
                config_dir: Optional[Union[str, Path]] = None,
                validate: bool = True) -> DictConfig:
    """Load configuration using a fresh config manager.

    Args:
        config_name: Name of the main config file
        overrides: List of configuration overrides
        config_dir: Path to configuration directory
        validate: Whether to validate the configuration

    Returns:
        Loaded configuration
    """
    manager = ConfigManager(config_dir)
    return manager.load_config(config_name, overrides, validate)
