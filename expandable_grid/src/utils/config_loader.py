"""Loads YAML/JSON configuration files and global growth settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_grid_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the grid growth configuration."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "grid_config.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


GRID_CONFIG: Dict[str, Any] = load_grid_config()
_GROWTH_CONF = GRID_CONFIG.get("growth", {})
GROWTH_FACTOR: float = float(_GROWTH_CONF.get("factor", 2.0))
MAX_CELLS: int = int(_GROWTH_CONF.get("max_cells", 2**31 - 1))
_LOGGING_CONF = GRID_CONFIG.get("logging", {})
LOG_REALLOCATIONS: bool = bool(_LOGGING_CONF.get("log_reallocations", True))


def validate_growth_factor(value: float) -> float:
    """Return ``value`` as float, rejecting factors that would not grow."""
    value = float(value)
    if value <= 1.0:
        raise ValueError(f"growth factor must be greater than 1, got {value}")
    return value


def set_growth_factor(value: float) -> None:
    """Override the default growth factor at runtime."""
    global GROWTH_FACTOR
    GROWTH_FACTOR = validate_growth_factor(value)
    GRID_CONFIG.setdefault("growth", {})["factor"] = GROWTH_FACTOR


def set_max_cells(value: int) -> None:
    """Override the default capacity limit at runtime."""
    global MAX_CELLS
    if value < 0:
        raise ValueError("max_cells must be non-negative")
    MAX_CELLS = int(value)
    GRID_CONFIG.setdefault("growth", {})["max_cells"] = MAX_CELLS


def set_log_reallocations(value: bool) -> None:
    """Enable or disable reallocation logging."""
    global LOG_REALLOCATIONS
    LOG_REALLOCATIONS = bool(value)
    GRID_CONFIG.setdefault("logging", {})["log_reallocations"] = LOG_REALLOCATIONS


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "growth_factor": GROWTH_FACTOR,
        "max_cells": MAX_CELLS,
        "log_reallocations": LOG_REALLOCATIONS,
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
