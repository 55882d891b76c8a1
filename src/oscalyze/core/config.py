"""3-layer configuration for oscalyze.

Loads and merges configuration from:
1. Default settings (built-in)
2. Project config (.oscalyze/config.yaml)
3. CLI parameters (override)
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Optional

import yaml

from ..readers.limits import DEFAULT_MAX_DEPTH

CONFIG_DIR = ".oscalyze"

DEFAULT_CONFIG: dict = {
    "analysis": {
        "max_depth": DEFAULT_MAX_DEPTH,
    },
    "output": {
        "format": "json",
        "indent": 2,
    },
}


def deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dicts. Arrays are replaced, not merged."""
    result = dict(base)
    for key, value in override.items():
        base_value = result.get(key)
        if isinstance(base_value, dict) and isinstance(value, dict):
            result[key] = deep_merge(base_value, value)
        else:
            result[key] = value
    return result


def load_project_config(project_path: Path) -> dict:
    """Load project configuration from .oscalyze/config.yaml."""
    config_path = project_path / CONFIG_DIR / "config.yaml"
    if not config_path.exists():
        return {}
    try:
        content = config_path.read_text(encoding="utf-8-sig")  # utf-8-sig strips BOM
        loaded = yaml.safe_load(content)
    except (OSError, UnicodeDecodeError, yaml.YAMLError):
        return {}
    return loaded if isinstance(loaded, dict) else {}


def _as_int(value: object, default: int, minimum: int) -> int:
    """Coerce a config value to an int, falling back to the default when invalid."""
    if isinstance(value, bool):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        return default
    return number if number >= minimum else default


def normalize_config(config: dict) -> dict:
    """Replace malformed sections and values with their defaults."""
    for section, defaults in DEFAULT_CONFIG.items():
        if not isinstance(config.get(section), dict):
            config[section] = copy.deepcopy(defaults)

    analysis = config["analysis"]
    analysis["max_depth"] = _as_int(analysis.get("max_depth"), DEFAULT_MAX_DEPTH, minimum=1)

    output = config["output"]
    output["indent"] = _as_int(output.get("indent"), DEFAULT_CONFIG["output"]["indent"], minimum=0)
    if output.get("format") not in ("json", "markdown"):
        output["format"] = DEFAULT_CONFIG["output"]["format"]

    return config


def get_effective_config(
    project_path: Path,
    cli_overrides: Optional[dict] = None,
) -> dict:
    """Get the fully resolved configuration for a run."""
    config = copy.deepcopy(DEFAULT_CONFIG)

    project_config = load_project_config(project_path)
    if project_config:
        config = deep_merge(config, project_config)

    if cli_overrides:
        config = deep_merge(config, cli_overrides)

    return normalize_config(config)
