from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

_DEFAULT_SCORING_CONFIG_PATH = Path(__file__).resolve().with_name("scoring.yaml")
_REQUIRED_SECTIONS = ("weights", "indicators", "ats", "recruiter_ux", "pm_intelligence")

_SCORING_CONFIG_CACHE: dict[str, Any] | None = None


def scoring_config_path() -> Path:
    override = (os.getenv("SCORING_CONFIG_PATH") or "").strip()
    return Path(override) if override else _DEFAULT_SCORING_CONFIG_PATH


def _load_scoring_config(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise RuntimeError(
            f"Scoring config not found at '{path}'. Set SCORING_CONFIG_PATH or reinstall the package data."
        )

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in scoring config '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{path}': expected a top-level mapping.")

    missing = [section for section in _REQUIRED_SECTIONS if not isinstance(parsed.get(section), dict)]
    if missing:
        raise RuntimeError(
            f"Invalid scoring config '{path}': missing stage sections {', '.join(missing)}."
        )
    return parsed


def get_scoring_config() -> dict[str, Any]:
    """Stage points, caps, bands and weights from the packaged scoring.yaml, cached after first load.

    SCORING_CONFIG_PATH points the loader at another file.
    """
    global _SCORING_CONFIG_CACHE

    if _SCORING_CONFIG_CACHE is None:
        _SCORING_CONFIG_CACHE = _load_scoring_config(scoring_config_path())
    return _SCORING_CONFIG_CACHE


def clear_scoring_config_cache() -> None:
    global _SCORING_CONFIG_CACHE
    _SCORING_CONFIG_CACHE = None


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'weights.ats'."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current


def get_scoring_int(path: str, default: int) -> int:
    value = get_scoring_value(path, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise RuntimeError(f"Invalid scoring config: '{path}' must be an integer, got {value!r}.")
    return value
