"""Configuration loader for built-in and file-based mission scenarios."""

import json
import logging
from pathlib import Path
from typing import Callable, Dict, List, Tuple

from .base import MissionConfig, reference_config

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """Loads and manages mission configurations."""

    def __init__(self):
        self._loaded_configs: Dict[str, Callable[[], MissionConfig]] = {}
        self._register_builtin_configs()

    def _register_builtin_configs(self):
        """Register built-in configurations."""
        self._loaded_configs['reference'] = reference_config

    def load_config_from_file(self, config_path: Path) -> MissionConfig:
        """Load configuration from a JSON file.

        Args:
            config_path: Path to JSON configuration file

        Returns:
            Mission configuration

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config file is invalid
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Error parsing configuration file {config_path}: {e}")

        config = MissionConfig.from_dict(data, default_name=config_path.stem)
        logger.debug(f"Loaded configuration '{config.name}' from {config_path}")
        return config

    def load_config_by_name(self, config_name: str) -> MissionConfig:
        """Load a built-in configuration by name.

        Raises:
            ValueError: If configuration name is not found
        """
        if config_name not in self._loaded_configs:
            raise ValueError(f"Unknown configuration: {config_name}")

        return self._loaded_configs[config_name]()

    def load_config(self, name_or_path: str) -> MissionConfig:
        """Load a built-in configuration by name, or a JSON file by path."""
        if name_or_path in self._loaded_configs:
            return self.load_config_by_name(name_or_path)
        return self.load_config_from_file(Path(name_or_path))

    def register_config(self, name: str, factory: Callable[[], MissionConfig]):
        """Register a new configuration factory.

        Args:
            name: Name to register the configuration under
            factory: Callable returning a MissionConfig
        """
        if not callable(factory):
            raise ValueError("Configuration factory must be callable")

        self._loaded_configs[name] = factory

    def list_configs(self) -> List[Tuple[str, str]]:
        """List built-in configurations as (name, description) pairs."""
        return [(name, factory().get_description()) for name, factory in sorted(self._loaded_configs.items())]


# Global configuration loader instance
config_loader = ConfigurationLoader()
