"""
Configuration management for versionbanner.
"""

import copy
import os
import yaml
import toml
import json
from pathlib import Path
from typing import Dict, Any, Optional
from pydantic import BaseModel, ConfigDict, Field

from .constants import CONFIG_FILES, DEFAULT_CONFIG
from .utils import logger, merge_dicts
from .banner import VersionOptions


class BannerConfig(BaseModel):
    """Banner fields; unset fields fall back to the built-in defaults."""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    version: Optional[str] = None
    copyright_name: Optional[str] = None
    license_url: Optional[str] = None
    cr_year: Optional[str] = None


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(default="INFO")
    format: str = Field(default="%(message)s")


class VersionBannerConfig(BaseModel):
    """Main configuration model."""
    banner: BannerConfig = Field(default_factory=BannerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


ENV_OVERRIDES = {
    'VERSIONBANNER_VERSION': 'banner.version',
    'VERSIONBANNER_COPYRIGHT_NAME': 'banner.copyright_name',
    'VERSIONBANNER_LICENSE_URL': 'banner.license_url',
    'VERSIONBANNER_CR_YEAR': 'banner.cr_year',
    'VERSIONBANNER_LOG_LEVEL': 'logging.level',
}


class Config:
    """Configuration manager for versionbanner."""

    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file
        self.config_data = self._load_config()
        self._apply_environment_overrides()
        try:
            self.config = VersionBannerConfig(**self.config_data)
        except ValueError as e:
            logger.error(f"Invalid configuration, using defaults: {e}")
            self.config_data = copy.deepcopy(DEFAULT_CONFIG)
            self._apply_environment_overrides()
            self.config = VersionBannerConfig(**self.config_data)

    def _find_config_file(self) -> Optional[Path]:
        """Find configuration file in current directory or parent directories."""
        current_dir = Path.cwd()

        for parent in [current_dir] + list(current_dir.parents):
            for config_name in CONFIG_FILES:
                config_path = parent / config_name
                if config_path.exists():
                    logger.debug(f"Found config file: {config_path}")
                    return config_path

        return None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file."""
        config = copy.deepcopy(DEFAULT_CONFIG)

        if self.config_file:
            config_path = Path(self.config_file)
        else:
            config_path = self._find_config_file()

        if not config_path or not config_path.exists():
            logger.debug("No config file found, using defaults")
            return config

        try:
            if config_path.suffix in ['.yaml', '.yml']:
                with open(config_path, 'r') as f:
                    file_config = yaml.safe_load(f) or {}
            elif config_path.suffix == '.toml':
                with open(config_path, 'r') as f:
                    file_config = toml.load(f)
            elif config_path.suffix == '.json':
                with open(config_path, 'r') as f:
                    file_config = json.load(f)
            else:
                logger.warning(f"Unknown config file format: {config_path}")
                return config

            if not isinstance(file_config, dict):
                logger.error(f"Config file must contain a mapping, using defaults: {config_path}")
                return config

            # Empty sections such as 'banner:' load as None
            file_config = {k: v for k, v in file_config.items() if v is not None}
            config = merge_dicts(config, file_config)
            logger.debug(f"Loaded config from: {config_path}")

        except (OSError, yaml.YAMLError, toml.TomlDecodeError, json.JSONDecodeError) as e:
            logger.error(f"Error loading config file: {e}")

        return config

    def _apply_environment_overrides(self):
        """Apply environment variable overrides to configuration."""
        for env_name, key in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value is not None:
                self._set_value(key, value)

    def _set_value(self, key: str, value: Any):
        keys = key.split('.')
        config_dict = self.config_data

        for k in keys[:-1]:
            if not isinstance(config_dict.get(k), dict):
                config_dict[k] = {}
            config_dict = config_dict[k]

        config_dict[keys[-1]] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-notation key."""
        keys = key.split('.')
        value = self.config_data

        try:
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any):
        """Set configuration value by dot-notation key."""
        self._set_value(key, value)

        # Recreate config object
        self.config = VersionBannerConfig(**self.config_data)

    def save(self, path: Optional[str] = None) -> Path:
        """Save configuration to file."""
        if path:
            save_path = Path(path)
        else:
            save_path = Path(self.config_file or '.versionbanner.yaml')

        if save_path.suffix in ['.yaml', '.yml']:
            with open(save_path, 'w') as f:
                yaml.dump(self.config_data, f, default_flow_style=False)
        elif save_path.suffix == '.toml':
            with open(save_path, 'w') as f:
                toml.dump(self.config_data, f)
        elif save_path.suffix == '.json':
            with open(save_path, 'w') as f:
                json.dump(self.config_data, f, indent=2)
        else:
            # Default to YAML
            save_path = save_path.with_suffix('.yaml')
            with open(save_path, 'w') as f:
                yaml.dump(self.config_data, f, default_flow_style=False)

        logger.info(f"Configuration saved to: {save_path}")
        return save_path

    def validate(self) -> bool:
        """Validate configuration."""
        try:
            VersionBannerConfig(**self.config_data)
            return True
        except ValueError as e:
            logger.error(f"Configuration validation failed: {e}")
            return False

    def version_options(self, **cli_overrides) -> VersionOptions:
        """Build banner options from configuration and CLI overrides.

        Args:
            **cli_overrides: Banner fields given on the command line; ``None``
                values are ignored.

        Returns:
            VersionOptions with defaults filling unset fields
        """
        fields = self.config.banner.model_dump()

        for key, value in cli_overrides.items():
            if value is not None:
                fields[key] = value

        return VersionOptions.from_overrides(fields)
