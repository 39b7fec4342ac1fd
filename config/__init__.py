"""Configuration module for batch graph generation."""

from pathlib import Path
import yaml
from typing import Any, Dict, List

CONFIG_DIR = Path(__file__).parent


def load_config(config_name: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Parameters
    ----------
    config_name : str
        Name of the configuration file (without .yaml extension)

    Returns
    -------
    Dict[str, Any]
        Configuration dictionary
    """
    config_path = CONFIG_DIR / f"{config_name}.yaml"
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def load_generator_config(config_name: str = "generators") -> List[Dict[str, Any]]:
    """
    Load the list of generator runs.

    Each run has a unique ``name``, a ``generator`` registered in
    ``sparsegen.generators.GENERATORS``, a ``params`` mapping and an
    optional integer ``seed``.
    """
    config = load_config(config_name)
    runs = config.get("runs", [])
    names = [run["name"] for run in runs]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ValueError(f"Duplicate run names in {config_name}.yaml: {duplicates}")
    return runs


__all__ = [
    "load_config",
    "load_generator_config",
    "CONFIG_DIR",
]
