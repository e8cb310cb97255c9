"""Configuration management for the SPK generator."""

import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional


DEFAULT_CONFIG: Dict[str, Any] = {
    'paths': {
        'settings_store': 'data/settings.json',
        'output_dir': 'output',
    },
    'settings': {
        'logging': {'level': 'INFO'},
    },
    'document': {
        'title': 'SURAT PERINTAH KERJA',
        'approver_title': 'Direktur',
        'export_pixel_ratio': 2,
    },
}


def load_yaml_file(file_path: Path) -> Dict[str, Any]:
    """Load a YAML file and return its contents."""
    if not file_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def merge_dicts(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two dictionaries, overlay taking precedence."""
    result = base.copy()
    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


class Config:
    """Configuration manager layering a YAML file over built-in defaults."""

    def __init__(self, config_path: str = 'configs/config.yaml'):
        """Initialize configuration from a YAML file.

        Args:
            config_path: Path to main configuration file
        """
        self.config_path = Path(config_path)
        self._init_from(load_yaml_file(self.config_path), self.config_path.parent)

    @classmethod
    def from_dict(cls, main_config: Dict[str, Any], config_dir: Path) -> "Config":
        """Create Config instance from dictionary (for Streamlit integration).

        Args:
            main_config: Configuration dictionary (already loaded)
            config_dir: Directory containing the config file (for path resolution)

        Returns:
            Configured Config instance
        """
        config = cls.__new__(cls)
        config.config_path = config_dir / "config.yaml"  # Virtual path
        config._init_from(main_config, config_dir)
        return config

    def _init_from(self, main_config: Dict[str, Any], config_dir: Path) -> None:
        self._config = merge_dicts(DEFAULT_CONFIG, main_config or {})

        # Set up project_root from paths.project_root if present
        paths_config = self._config.get('paths', {})
        if 'project_root' in paths_config:
            self.project_root = (config_dir / paths_config['project_root']).resolve()
        else:
            self.project_root = Path.cwd()

        self._paths = paths_config
        self._setup_logging()
        logging.debug(f"Loaded config from: {self.config_path}")

    def _resolve_path_value(self, value: str) -> Path:
        """Resolve a path value relative to project_root if not absolute.

        Args:
            value: Path string to resolve

        Returns:
            Resolved Path object
        """
        p = Path(value)
        if not p.is_absolute():
            return self.project_root / p
        return p.resolve()

    def _setup_logging(self):
        """Setup logging based on configuration."""
        log_level = str(self.get('settings.logging.level', 'INFO'))
        numeric_level = getattr(logging, log_level.upper(), logging.INFO)
        logging.basicConfig(
            level=numeric_level,
            format='%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get configuration value using dot notation.

        Args:
            key_path: Dot-separated path to config value (e.g., 'document.title')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_path(self, key: str) -> Path:
        """Get a path from configuration, resolved relative to project_root.

        Args:
            key: Path key in config (e.g., 'settings_store', 'output_dir')

        Returns:
            Resolved Path object
        """
        path_str = self._paths.get(key)
        if not path_str:
            raise ValueError(f"Path '{key}' not found in configuration")
        return self._resolve_path_value(path_str)

    def get_optional_path(self, key: str) -> Optional[Path]:
        """Like get_path, but returns None when the key is not configured."""
        if not self._paths.get(key):
            return None
        return self.get_path(key)

    @property
    def settings_store_path(self) -> Path:
        """Get the JSON settings store path."""
        return self.get_path('settings_store')

    @property
    def output_dir(self) -> Path:
        """Get the directory the CLI writes documents to."""
        return self.get_path('output_dir')

    @property
    def font_regular(self) -> Optional[Path]:
        return self.get_optional_path('font_regular')

    @property
    def font_bold(self) -> Optional[Path]:
        return self.get_optional_path('font_bold')

    @property
    def document_title(self) -> str:
        return self.get('document.title')

    @property
    def approver_title(self) -> str:
        return self.get('document.approver_title')

    @property
    def export_pixel_ratio(self) -> int:
        """Scale factor between layout units and exported pixels.

        Raises:
            ValueError: If the configured value is not a positive integer
        """
        value = self.get('document.export_pixel_ratio', 2)
        try:
            ratio = int(value)
        except (TypeError, ValueError):
            ratio = 0
        if ratio < 1:
            raise ValueError(f"document.export_pixel_ratio must be a positive integer, got {value!r}")
        return ratio
