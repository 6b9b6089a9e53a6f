"""
Configuration manager for postboard.
Handles the YAML settings file and its defaults.
"""
import logging
import yaml
from pathlib import Path
from typing import Dict, Optional, Any
from dataclasses import dataclass

from ...domain.exceptions import ConfigurationError


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("postboard.yaml")
BACKENDS = ('sqlite', 'memory')
SETTING_KEYS = ('backend', 'database', 'default_user', 'log_level')
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class Settings:
    """Resolved settings, file values over defaults."""
    backend: str = 'sqlite'
    database: str = 'outputs/postboard.db'
    default_user: Optional[str] = None
    log_level: str = 'WARNING'

    def __post_init__(self):
        if self.backend not in BACKENDS:
            raise ConfigurationError(
                f"Unknown backend '{self.backend}', expected one of: {', '.join(BACKENDS)}"
            )
        if str(self.log_level).upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level '{self.log_level}', expected one of: {', '.join(LOG_LEVELS)}"
            )


class SettingsManager:
    """Manages postboard settings from a YAML file."""

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._config_data = None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file, empty when the file doesn't exist."""
        if self._config_data is None:
            if not self.config_path.exists():
                logger.debug("No config file at %s, using defaults", self.config_path)
                self._config_data = {}
                return self._config_data

            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

            if data is None:
                data = {}
            if not isinstance(data, dict):
                raise ConfigurationError(f"Configuration in {self.config_path} must be a mapping")
            self._config_data = data

        return self._config_data

    def _save_config(self) -> None:
        """Persist the in-memory configuration back to the YAML file."""
        if self._config_data is None:
            return

        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(self._config_data, f, sort_keys=False, allow_unicode=True)

    def load(self) -> Settings:
        """Resolve settings from the file over built-in defaults."""
        config = self._load_config()
        values = {key: config[key] for key in SETTING_KEYS if config.get(key) is not None}
        unknown = sorted(set(config) - set(SETTING_KEYS))
        if unknown:
            logger.warning("Ignoring unknown settings in %s: %s", self.config_path, ', '.join(unknown))
        return Settings(**values)

    def set_value(self, key: str, value: str) -> None:
        """Set a single key and persist the file.

        The resulting settings are validated before anything is written, so a
        bad value never reaches the file.
        """
        if key not in SETTING_KEYS:
            raise ConfigurationError(f"Unknown setting '{key}', expected one of: {', '.join(SETTING_KEYS)}")

        config = dict(self._load_config())
        config[key] = value
        Settings(**{k: config[k] for k in SETTING_KEYS if config.get(k) is not None})
        self._config_data = config
        self._save_config()
