"""
Configuration loader
"""
import os

import yaml
from pathlib import Path
from coderscup.models import ScoreboardConfig


DEFAULT_CONFIG_PATH = "config/scoreboard.yaml"
CONFIG_ENV_VAR = "SCOREBOARD_CONFIG"


def resolve_config_path() -> str:
    """Config path from the environment, or the default"""
    return os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> ScoreboardConfig:
    """
    Load configuration from YAML file

    Args:
        config_path: Path to config file

    Returns:
        ScoreboardConfig object
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    return ScoreboardConfig(**(data or {}))
