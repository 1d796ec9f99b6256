"""Configuration loading for l10n-sync.

This module locates the optional YAML configuration file, parses it and
validates it against the Pydantic schema.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..utils.core.exceptions import ConfigurationError
from .schema import SyncConfig


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "l10n-sync.yml"


class ConfigManager:
    """Loads and validates the sync configuration."""

    @staticmethod
    def load_config(config_path: Path) -> SyncConfig:
        """
        Load and validate configuration from a YAML file.

        Relative repository paths in the file are resolved against the
        directory containing it.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            SyncConfig: Validated configuration object

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                raw_config_data: object = yaml.safe_load(f)  # pyright: ignore[reportAny]
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read {config_path}: {e}") from e

        if raw_config_data is None:
            config_data: dict[str, object] = {}
        elif isinstance(raw_config_data, dict):
            config_data = raw_config_data  # pyright: ignore[reportUnknownVariableType]
        else:
            raise ConfigurationError(
                f"Configuration file must contain a YAML dictionary, got {type(raw_config_data).__name__}"
            )

        try:
            config = SyncConfig.model_validate(config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {config_path}:\n{e}") from e

        logger.debug(f"Loaded configuration from {config_path}")
        return config.resolve_paths(config_path.parent.resolve())

    @staticmethod
    def discover(config_path: Path | None = None, cwd: Path | None = None) -> SyncConfig:
        """
        Load the explicitly requested configuration, or the default one if present.

        Args:
            config_path: Path given on the command line, if any
            cwd: Directory searched for the default configuration file

        Returns:
            SyncConfig: Validated configuration, all defaults when no file exists
        """
        if config_path is not None:
            return ConfigManager.load_config(config_path)

        base_dir = (cwd or Path.cwd()).resolve()
        default_path = base_dir / DEFAULT_CONFIG_NAME
        if default_path.exists():
            return ConfigManager.load_config(default_path)

        logger.debug(f"No {DEFAULT_CONFIG_NAME} found in {base_dir}, using defaults")
        return SyncConfig().resolve_paths(base_dir)
