"""Loads YAML/JSON configuration files and the solver's runtime settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG: Dict[str, Any] = {
    "tile_count": 5,
    "log_level": "INFO",
    "log_file": None,
    "show_timing": True,
}


def load_config(path: str | Path) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError(f"Unsupported config format: {path_p.suffix or path_p.name}")


def default_config_path() -> Path:
    return Path(__file__).resolve().parents[3] / "configs" / "solver_config.yaml"


def _validate(config: Dict[str, Any]) -> Dict[str, Any]:
    tile_count = config["tile_count"]
    if isinstance(tile_count, bool) or not isinstance(tile_count, int):
        raise ValueError(f"tile_count must be an integer, got {tile_count!r}")

    level = config["log_level"]
    if not isinstance(level, str) or not isinstance(
        logging.getLevelName(level.upper()), int
    ):
        raise ValueError(f"log_level must be a logging level name, got {level!r}")
    config["log_level"] = level.upper()

    if not isinstance(config["show_timing"], bool):
        raise ValueError(f"show_timing must be true or false, got {config['show_timing']!r}")
    log_file = config["log_file"]
    if log_file is not None and not isinstance(log_file, str):
        raise ValueError(f"log_file must be a path string, got {log_file!r}")
    return config


def load_solver_config(path: Optional[str | Path] = None) -> Dict[str, Any]:
    """Return the solver configuration merged over :data:`DEFAULT_CONFIG`.

    A missing file at the default location yields the defaults; an explicit
    ``path`` must exist. Values of the wrong type raise ``ValueError``.
    """
    config = dict(DEFAULT_CONFIG)
    if path is None:
        path = default_config_path()
        if not path.exists():
            return config
    loaded = load_config(path)
    if not isinstance(loaded, dict):
        raise ValueError(f"Config {path} must hold a mapping, got {type(loaded).__name__}")
    config.update(loaded)
    return _validate(config)


SOLVER_CONFIG: Dict[str, Any] = load_solver_config()
LOG_LEVEL: str = SOLVER_CONFIG["log_level"]


__all__ = [
    "DEFAULT_CONFIG",
    "SOLVER_CONFIG",
    "LOG_LEVEL",
    "load_config",
    "load_solver_config",
]
