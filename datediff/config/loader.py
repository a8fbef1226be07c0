"""Configuration loader with defaults, YAML file and call-site overrides."""

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import DefaultConfig, DisplayParams, LoggingParams, get_default_config
from .validation import ConfigValidator

CONFIG_FILENAME = "datediff.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with layered precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path.cwd() / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from the YAML config file, if present."""
        if not self.config_file.exists():
            return {}

        with open(self.config_file) as f:
            file_config = yaml.safe_load(f)

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"{self.config_file} must contain a mapping",
                field=str(self.config_file),
                value=file_config,
            )
        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration layers.

        Priority order:
        1. Call-site overrides (highest priority)
        2. YAML config file
        3. Defaults (lowest priority)
        """
        config = asdict(self.defaults)
        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Load, validate and build the configuration.

        Raises:
            ConfigurationError: On the first invalid field
        """
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            first = errors[0]
            raise ConfigurationError(
                f"Invalid configuration for {first.field}: {first.message}",
                field=first.field,
                value=first.value,
                context={"errors": [error.field for error in errors]},
            )

        return DefaultConfig(
            display=self._build(DisplayParams, config["display"]),
            logging=self._build(LoggingParams, config["logging"]),
        )

    def _build(self, params_cls: type, values: dict[str, Any]) -> Any:
        known = {f.name for f in fields(params_cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown {params_cls.__name__} fields: {', '.join(unknown)}",
                field=unknown[0],
                value=values[unknown[0]],
            )
        return params_cls(**values)

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
