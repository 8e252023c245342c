"""
Settings for the ink invoice parser.

Line tolerances, look-ahead windows, page limits, logging and export
options are read from settings.yaml through a shared ConfigurationManager.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional


DEFAULT_SETTINGS_PATH = Path(__file__).parent / "settings.yaml"


class ConfigurationManager:
    """
    Process-wide holder of the parsed settings file.

    The first construction loads the file; later constructions return the
    same object and ignore `config_path`. Call reset() to load another file.

    Example:
        >>> ConfigurationManager().get("vendors.eternal.line_tolerance")
        2
    """

    _instance: Optional['ConfigurationManager'] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[str] = None) -> 'ConfigurationManager':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[str] = None) -> None:
        if self._initialized:
            return

        self.config_path = DEFAULT_SETTINGS_PATH if config_path is None else Path(config_path)
        self._load_config()
        self._initialized = True

    def _load_config(self) -> None:
        if not self.config_path.exists():
            raise FileNotFoundError(f"Settings file missing: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            # An empty file parses to None
            self._config = yaml.safe_load(f) or {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a dotted key such as "extraction.max_pages".

        Missing segments, or a segment that lands on a scalar, yield `default`.
        """
        node = self._config
        try:
            for part in key.split('.'):
                node = node[part]
        except (KeyError, TypeError):
            return default
        return node

    def get_all(self) -> Dict[str, Any]:
        """Shallow copy of the whole settings tree."""
        return self._config.copy()

    def reload(self) -> None:
        self._load_config()

    @classmethod
    def reset(cls) -> None:
        """Forget the shared instance; the next construction reloads."""
        cls._instance = None


def get_config(key: str, default: Any = None) -> Any:
    """Shortcut for ConfigurationManager().get(key, default)."""
    return ConfigurationManager().get(key, default)


__all__ = ['ConfigurationManager', 'get_config', 'DEFAULT_SETTINGS_PATH']
