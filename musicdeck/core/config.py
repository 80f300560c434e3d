"""
Configuration Management Module

Provides configuration management with JSON storage for MusicDeck.
Holds the remembered library folders and the scanner's traversal policy.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from copy import deepcopy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from musicdeck.core.constants import APP_NAME, CONFIG_FILENAME

logger = logging.getLogger(__name__)


# Default configuration values
DEFAULT_CONFIG = {
    # Library settings
    "library": {
        "paths": [],
    },

    # Scanner settings
    "scanner": {
        "follow_symlinks": True,
        # Skip entries whose real path leaves the root's canonical subtree
        "confine_to_root": False,
    },

    # First-launch wizard
    "setup": {
        "completed": False,
    },
}


def get_config_dir() -> Path:
    """
    Get the per-user configuration directory.

    Returns:
        Path: Platform specific configuration directory (not created).
    """
    if sys.platform == "win32":
        base = os.environ.get("APPDATA") or str(Path.home() / "AppData" / "Roaming")
        return Path(base) / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / APP_NAME.lower()


@dataclass
class ConfigManager:
    """
    Manages application configuration with JSON storage.

    Features:
    - Load/save configuration from JSON files
    - Default value fallback
    - Dot-notation access
    """

    config_dir: Path
    config_file: str = CONFIG_FILENAME
    _config: dict = field(default_factory=dict)
    _defaults: dict = field(default_factory=lambda: deepcopy(DEFAULT_CONFIG))
    _loaded: bool = False

    def __post_init__(self):
        """Initialize configuration after dataclass creation."""
        self.config_dir = Path(self.config_dir)
        self._config = deepcopy(self._defaults)

    @property
    def config_path(self) -> Path:
        """Get the full path to the configuration file."""
        return self.config_dir / self.config_file

    def load(self) -> bool:
        """
        Load configuration from file.

        A missing file leaves the defaults in place without writing anything.

        Returns:
            bool: True if loaded successfully, False otherwise.
        """
        try:
            if self.config_path.exists():
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    loaded = json.load(f)

                if not isinstance(loaded, dict):
                    raise ValueError("top-level JSON value must be an object")

                # Merge with defaults (loaded values override defaults)
                self._config = self._merge_config(self._defaults, loaded)
                logger.info(f"Configuration loaded from {self.config_path}")
            else:
                self._config = deepcopy(self._defaults)
                logger.info("Using default configuration")

            self._loaded = True
            return True

        except (json.JSONDecodeError, ValueError) as e:
            logger.error(f"Invalid configuration file: {e}")
            # Fall back to defaults
            self._config = deepcopy(self._defaults)
            self._loaded = True
            return False

        except OSError as e:
            logger.error(f"Failed to load configuration: {e}")
            self._config = deepcopy(self._defaults)
            self._loaded = True
            return False

    def save(self) -> bool:
        """
        Save configuration to file.

        Returns:
            bool: True if saved successfully.
        """
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)

            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(self._config, f, indent=2, ensure_ascii=False)

            logger.info(f"Configuration saved to {self.config_path}")
            return True

        except PermissionError as e:
            logger.error(f"Permission denied saving configuration to {self.config_path}: {e}")
            return False
        except OSError as e:
            logger.error(f"Failed to save configuration to {self.config_path}: {e}", exc_info=True)
            return False

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "library.paths", "scanner.follow_symlinks")
            default: Default value if key not found

        Returns:
            The configuration value or default.
        """
        if not self._loaded:
            self.load()

        value = self._config
        try:
            for part in key.split('.'):
                value = value[part]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any, save: bool = True) -> None:
        """
        Set a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "library.paths")
            value: Value to set
            save: Whether to save immediately
        """
        if not self._loaded:
            self.load()

        parts = key.split('.')
        config = self._config

        # Navigate to the parent
        for part in parts[:-1]:
            if not isinstance(config.get(part), dict):
                config[part] = {}
            config = config[part]

        config[parts[-1]] = value

        if save:
            self.save()

    def reset(self, key: Optional[str] = None, save: bool = True) -> None:
        """
        Reset configuration to defaults.

        Args:
            key: Specific key to reset, or None to reset all.
            save: Whether to save immediately
        """
        if key is None:
            self._config = deepcopy(self._defaults)
            self._loaded = True
        else:
            default_value = self._get_default(key)
            if default_value is not None:
                self.set(key, default_value, save=False)

        if save:
            self.save()

    def _get_default(self, key: str) -> Any:
        value = self._defaults
        try:
            for part in key.split('.'):
                value = value[part]
            return deepcopy(value)
        except (KeyError, TypeError):
            return None

    def _merge_config(self, defaults: dict, loaded: dict) -> dict:
        """Recursively merge loaded config with defaults."""
        result = deepcopy(defaults)

        for key, value in loaded.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value

        return result

    def get_all(self) -> dict:
        """Get the entire configuration dictionary."""
        if not self._loaded:
            self.load()
        return deepcopy(self._config)


# Global configuration instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """
    Get the global configuration manager.

    Returns:
        ConfigManager: The configuration manager instance.
    """
    global _config_manager

    if _config_manager is None:
        _config_manager = ConfigManager(config_dir=get_config_dir())
        _config_manager.load()

    return _config_manager


def set_config_manager(manager: Optional[ConfigManager]) -> None:
    """Replace the global configuration manager (None clears it)."""
    global _config_manager
    _config_manager = manager
