from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

SCORING_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "scoring.yaml"


def load_scoring_config(path: str | Path = SCORING_CONFIG_PATH) -> dict[str, Any]:
    """Parse a scoring YAML file. Missing, unreadable or malformed files raise RuntimeError."""
    config_path = Path(path)
    try:
        raw = config_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise RuntimeError(f"Scoring config not found at '{config_path}'.") from exc
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{config_path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in scoring config '{config_path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{config_path}': expected a top-level mapping.")
    return parsed


@lru_cache(maxsize=1)
def get_scoring_config() -> dict[str, Any]:
    return load_scoring_config()


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Nested lookup by dot path, e.g. 'general.weights.sections'."""
    if not path:
        return default

    node: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(node, dict) or key not in node:
            return default
        node = node[key]
    return node


def get_scoring_table(path: str) -> dict[str, float]:
    """Return a mapping of name -> float at `path`, or an empty mapping when absent."""
    raw = get_scoring_value(path, {})
    if not isinstance(raw, dict):
        raise RuntimeError(f"Invalid scoring config: '{path}' must be a mapping.")
    table: dict[str, float] = {}
    for key, value in raw.items():
        try:
            table[str(key)] = float(value)
        except (TypeError, ValueError) as exc:
            raise RuntimeError(
                f"Invalid scoring config: '{path}.{key}' must be numeric, got {value!r}."
            ) from exc
    return table
