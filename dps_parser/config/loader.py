"""
Configuration loader for custom game data mappings.

Allows users to provide custom target aliases via YAML configuration files.
"""

import yaml
import logging
from pathlib import Path
from typing import Dict, Optional, Any

from . import game_data

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Loads and applies custom configuration from YAML files."""

    @staticmethod
    def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to custom config file. If None, looks for:
                        1. dps_config.yaml in current directory
                        2. config/dps_config.yaml
                        3. ~/.dps_parser/dps_config.yaml
                        4. /etc/dps_parser/dps_config.yaml

        Returns:
            Configuration dictionary
        """
        search_paths = [
            Path("dps_config.yaml"),
            Path("config/dps_config.yaml"),
            Path.home() / ".dps_parser" / "dps_config.yaml",
            Path("/etc/dps_parser/dps_config.yaml"),
        ]

        if config_path:
            search_paths.insert(0, Path(config_path))

        for path in search_paths:
            if path.exists():
                try:
                    with open(path, "r", encoding="utf-8") as f:
                        config = yaml.safe_load(f) or {}
                        logger.info(f"Loaded configuration from {path}")
                        return config
                except (OSError, yaml.YAMLError) as e:
                    logger.error(f"Failed to load config from {path}: {e}")

        logger.debug("No custom configuration file found, using defaults")
        return {}

    @staticmethod
    def apply_config(config: Dict[str, Any]) -> None:
        """
        Apply custom configuration to the game_data module.

        Expected layout::

            targets:
              Mannequin: [practice dummy]
              New Boss: [new boss, nb]

        Args:
            config: Configuration dictionary from YAML
        """
        targets = config.get("targets")
        if not targets:
            return

        if not isinstance(targets, dict):
            logger.warning(f"Ignoring 'targets': expected a mapping, got {type(targets).__name__}")
            return

        for target, aliases in targets.items():
            if isinstance(aliases, str):
                aliases = [aliases]
            if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
                logger.warning(f"Invalid aliases for target {target}: {aliases!r}")
                continue

            game_data.add_target(str(target), aliases)
            logger.debug(f"Added target aliases: {target} = {aliases}")

        logger.info("Custom configuration applied successfully")


def load_and_apply_config(config_path: Optional[str] = None) -> None:
    """
    Load and apply configuration in one step.

    Args:
        config_path: Optional path to custom config file
    """
    loader = ConfigLoader()
    config = loader.load_config(config_path)
    if config:
        loader.apply_config(config)
