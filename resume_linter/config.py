"""YAML configuration for the linter surfaces (CLI and web)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/config.yaml"
LOCAL_CONFIG_NAME = "config.local.yaml"
CONFIG_ENV_VAR = "RESUME_LINTER_CONFIG"

RENDER_FORMATS = ("html", "rtf")


@dataclass
class LinterConfig:
    """Resolved settings; ``rules`` maps rule id -> ``{enabled, params}``."""

    log_level: str = "WARNING"
    max_input_chars: int = 200_000
    default_render_format: str = "html"
    rules: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LinterConfig":
        return cls(
            log_level=str(data.get("log_level", "WARNING")).upper(),
            max_input_chars=int(data.get("max_input_chars", 200_000)),
            default_render_format=str(data.get("default_render_format", "html")).lower(),
            rules=dict(data.get("rules") or {}),
        )


def load_raw_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load the raw configuration mapping.

    With no explicit path (and no ``RESUME_LINTER_CONFIG``), ``config/config.yaml``
    is loaded and ``config/config.local.yaml`` overlaid on it; both may be
    missing, giving ``{}``. An explicit path is loaded as-is and must exist.
    """
    explicit = config_path or os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = _resolve(explicit)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {explicit}")
        return _load_yaml(path)

    base_path = _resolve(DEFAULT_CONFIG_PATH)
    local_path = base_path.with_name(LOCAL_CONFIG_NAME)
    return _deep_merge(_load_yaml(base_path), _load_yaml(local_path))


def load_config(config_path: Optional[str] = None) -> LinterConfig:
    """Load and resolve configuration into a :class:`LinterConfig`."""
    return LinterConfig.from_dict(load_raw_config(config_path))


def _resolve(candidate: str) -> Path:
    path = Path(candidate)
    if path.exists() or path.is_absolute():
        return path
    repo_root = Path(__file__).resolve().parents[1]
    alt = repo_root / candidate
    return alt if alt.exists() else path


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must be a mapping: {path}")
    logger.debug("Loaded config from %s", path)
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        base_value = merged.get(key)
        if isinstance(base_value, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(base_value, value)
        else:
            merged[key] = value
    return merged
