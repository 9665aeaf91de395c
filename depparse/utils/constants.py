import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


def get_root_path():
    return Path(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


ROOT_PATH = get_root_path()

# Config path
CONFIG_PATH = ROOT_PATH / "configs"
CONFIG_FILE = CONFIG_PATH / "config.yaml"

ROOT_TOKEN = "ROOT"
ROOT_NODE_ID = "ROOT"


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Load a YAML configuration file (the packaged defaults when no path is given)."""
    config_file = Path(path) if path is not None else CONFIG_FILE
    with open(config_file, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config file {config_file} must contain a mapping")
    return loaded


# Load config
config = load_config()
