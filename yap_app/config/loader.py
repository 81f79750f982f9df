"""Configuration loader with 3-tier parameter precedence."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    DefaultConfig,
    LoggingParams,
    StorageParams,
    TimerParams,
    get_default_config,
)
from .validation import ConfigValidator

CONFIG_ENV_VAR = "YAP_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/yap/config.yaml")


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_path: Path
    defaults: DefaultConfig
    explicit: bool = False

    @classmethod
    def create(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """
        Create a ConfigLoader instance.

        An explicit path (argument or ``YAP_CONFIG``) must exist; the
        per-user default is optional.
        """
        explicit = True
        if config_path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            if env_path:
                config_path = Path(env_path)
            else:
                config_path = DEFAULT_CONFIG_PATH
                explicit = False

        return cls(
            config_path=Path(config_path).expanduser(),
            defaults=get_default_config(),
            explicit=explicit,
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from the YAML configuration file."""
        if not self.config_path.exists():
            if self.explicit:
                raise ConfigurationError(
                    f"Configuration file not found: {self.config_path}",
                    source=str(self.config_path)
                )
            return {}

        try:
            with open(self.config_path) as f:
                file_config = yaml.safe_load(f)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file {self.config_path}: {e}",
                source=str(self.config_path)
            ) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in {self.config_path}: {e}",
                source=str(self.config_path)
            ) from e

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"Configuration file {self.config_path} must contain a mapping",
                source=str(self.config_path)
            )

        return file_config

    def merge_config(
        self,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Command-line overrides (highest priority)
        2. Configuration file
        3. Built-in defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Merge, validate and build the effective configuration."""
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            details = "; ".join(f"{e.field}: {e.message} (got {e.value!r})" for e in errors)
            raise ConfigurationError(
                f"Invalid configuration: {details}",
                source=str(self.config_path),
                errors=errors
            )

        return DefaultConfig(
            timer=TimerParams(**config["timer"]),
            storage=StorageParams(**config["storage"]),
            logging=LoggingParams(**config["logging"]),
        )

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
