"""
Configuration Management for the MIMIC-III Clinical Dashboard

Centralized configuration handling with support for environment variables,
YAML/JSON config files, and built-in defaults.
"""

import os
import json
import logging
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, asdict

logger = logging.getLogger(__name__)


_PROJECT_ROOT = Path(__file__).parent.parent


@dataclass
class PathConfig:
    """Where the pre-processed JSON summaries live."""
    data_dir: Path = _PROJECT_ROOT / "processed_data"
    data_url: Optional[str] = None

    def __post_init__(self):
        """Resolve data_dir against the project root; an empty URL means no URL."""
        self.data_dir = Path(self.data_dir)
        if not self.data_dir.is_absolute():
            self.data_dir = _PROJECT_ROOT / self.data_dir
        if not self.data_url:
            self.data_url = None

    @property
    def source(self) -> Union[str, Path]:
        """Base URL when configured, otherwise the local data directory."""
        return self.data_url or self.data_dir


@dataclass
class LoaderConfig:
    """Data loader settings."""
    max_workers: int = 5


@dataclass
class LoggingConfig:
    """Logging settings applied by configure_logging()."""
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ConfigManager:
    """
    Central configuration manager for the dashboard.

    Loads configuration from multiple sources in priority order:
    1. Environment variables
    2. Local config files (config/local.yaml, config/local.json)
    3. Default config files (config/default.yaml, config/default.json)
    4. Built-in defaults
    """

    ENV_MAPPINGS = {
        'MIMIC_DATA_DIR': ('paths', 'data_dir'),
        'MIMIC_DATA_URL': ('paths', 'data_url'),
        'MIMIC_MAX_WORKERS': ('loader', 'max_workers', int),
        'MIMIC_LOG_LEVEL': ('logging', 'level', lambda x: x.upper()),
    }

    def __init__(self, config_dir: Union[str, Path] = _PROJECT_ROOT / "config"):
        self.config_dir = Path(config_dir)

        self._path_config = None
        self._loader_config = None
        self._logging_config = None

        self._load_all_configs()

    def _load_all_configs(self):
        """Load all configuration components."""
        configs: Dict[str, Dict[str, Any]] = {}

        # 1. Default config files
        for filename in ['default.yaml', 'default.yml', 'default.json']:
            config_file = self.config_dir / filename
            if config_file.exists():
                self._merge(configs, self._load_config_file(config_file))

        # 2. Local config files (override defaults)
        for filename in ['local.yaml', 'local.yml', 'local.json']:
            config_file = self.config_dir / filename
            if config_file.exists():
                self._merge(configs, self._load_config_file(config_file))

        # 3. Environment variables (override file configs)
        self._load_env_overrides(configs)

        self._path_config = PathConfig(**configs.get('paths', {}))
        self._loader_config = LoaderConfig(**configs.get('loader', {}))
        self._logging_config = LoggingConfig(**configs.get('logging', {}))

    @staticmethod
    def _merge(configs: Dict[str, Dict[str, Any]], update: Dict[str, Any]):
        """Merge one file's sections into the accumulated config."""
        for section, values in update.items():
            if isinstance(values, dict):
                configs.setdefault(section, {}).update(values)

    def _load_config_file(self, config_file: Path) -> Dict[str, Any]:
        """Load configuration from YAML or JSON file."""
        try:
            with open(config_file, 'r') as f:
                if config_file.suffix.lower() in ['.yaml', '.yml']:
                    return yaml.safe_load(f) or {}
                elif config_file.suffix.lower() == '.json':
                    return json.load(f) or {}
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.warning(f"Could not load config file {config_file}: {e}")
        return {}

    def _load_env_overrides(self, configs: Dict[str, Dict[str, Any]]):
        """Apply environment variable overrides."""
        for env_var, config_path in self.ENV_MAPPINGS.items():
            value = os.getenv(env_var)
            if value is None:
                continue

            section = config_path[0]
            key = config_path[1]
            transform = config_path[2] if len(config_path) > 2 else str

            try:
                configs.setdefault(section, {})[key] = transform(value)
            except (ValueError, TypeError) as e:
                logger.warning(f"Could not parse {env_var}={value}: {e}")

    @property
    def paths(self) -> PathConfig:
        """Path configuration."""
        return self._path_config

    @property
    def loader(self) -> LoaderConfig:
        """Loader configuration."""
        return self._loader_config

    @property
    def logging(self) -> LoggingConfig:
        """Logging configuration."""
        return self._logging_config

    def as_dict(self) -> Dict[str, Any]:
        """Current configuration as plain data."""
        return {
            'paths': {k: (str(v) if v is not None else None)
                      for k, v in asdict(self._path_config).items()},
            'loader': asdict(self._loader_config),
            'logging': asdict(self._logging_config),
        }


# Global config instance
config = ConfigManager()


def get_config() -> ConfigManager:
    """Get the global configuration manager instance."""
    return config


def configure_logging(cfg: Optional[ConfigManager] = None) -> None:
    """Apply the configured log level and format to the root logger."""
    settings = (cfg or get_config()).logging
    logging.basicConfig(
        level=getattr(logging, settings.level, logging.INFO),
        format=settings.format,
    )
