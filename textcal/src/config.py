"""Load and provide typed access to config.yaml."""

from pathlib import Path

import yaml

DEFAULTS = {
    "output": {
        "directory": ".",
        "overwrite": False,
        "csv": False,
    },
}


def load_config(path: Path | None = None) -> dict:
    """Load config.yaml and return as dict with defaults merged."""
    if path is None:
        path = package_root() / "config.yaml"
    with open(path) as f:
        cfg = yaml.safe_load(f) or {}

    for section, defaults in DEFAULTS.items():
        cfg[section] = {**defaults, **(cfg.get(section) or {})}
    return cfg


def package_root() -> Path:
    """Return the textcal package directory (holds config.yaml)."""
    return Path(__file__).parent.parent
