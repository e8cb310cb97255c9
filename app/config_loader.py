"""Configuration loading utilities."""

from pathlib import Path
from typing import Any

from spk_generator.config import Config, load_yaml_file

from app.constants import CONFIG_DIR


def load_app_config(config_path: Path | None = None) -> tuple[dict[str, Any], Config]:
    """Load config.yaml as both a raw dict (for the UI) and a Config object.

    Args:
        config_path: Optional path to config file. Defaults to CONFIG_DIR / "config.yaml"

    Returns:
        Tuple of (base_config, Config) where Config resolves paths against
        the config file's directory

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    if config_path is None:
        config_path = CONFIG_DIR / "config.yaml"

    base_config = load_yaml_file(config_path)
    return base_config, Config.from_dict(base_config, config_path.parent)
