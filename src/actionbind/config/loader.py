"""Config loader for YAML configuration files."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from actionbind.config.models import ActionBindConfig
from actionbind.core.errors import ConfigError

CONFIG_FILENAMES = ("actionbind.yaml", "config.yaml")


class ConfigLoader:
    """Load ActionBindConfig from YAML files."""

    @staticmethod
    def load(path: Path | str) -> ActionBindConfig:
        """Load configuration from YAML file.

        Args:
            path: Path to a config directory or YAML file

        Returns:
            Parsed ActionBindConfig instance

        Raises:
            FileNotFoundError: If no config file exists at path
            ConfigError: If the file is not valid YAML or fails validation
        """
        config_path = Path(path)

        if config_path.is_dir():
            for filename in CONFIG_FILENAMES:
                if (config_path / filename).exists():
                    config_path = config_path / filename
                    break
            else:
                raise FileNotFoundError(f"No config file found in {config_path}")
        elif not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, encoding="utf-8") as f:
                data: Any = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML: {e}", path=str(config_path)) from e

        if not isinstance(data, dict):
            raise ConfigError("Config root must be a mapping", path=str(config_path))

        try:
            return ActionBindConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}", path=str(config_path)) from e
