"""Configuration validator for Resume Linter startup checks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List

from .config import RENDER_FORMATS
from .domain.linting.grammar_rules import GRAMMAR_RULES
from .domain.linting.prompt_rules import PROMPT_RULES

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
KNOWN_RULE_IDS = {cfg["id"] for cfg in PROMPT_RULES + GRAMMAR_RULES}


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass
class ConfigError:
    """A single configuration issue."""
    field: str
    message: str
    severity: Severity


def validate_config(raw_config: Dict[str, Any]) -> List[ConfigError]:
    """Validate raw configuration and return a list of issues.

    Args:
        raw_config: Raw config dict from YAML

    Returns:
        List of ConfigError (empty = valid)
    """
    errors: List[ConfigError] = []

    # --- Log level ---
    log_level = raw_config.get("log_level", "WARNING")
    if not isinstance(log_level, str) or log_level.upper() not in LOG_LEVELS:
        errors.append(ConfigError(
            field="log_level",
            message=f"log_level must be one of {sorted(LOG_LEVELS)}, got {log_level!r}",
            severity=Severity.ERROR,
        ))

    # --- Input size ---
    max_chars = raw_config.get("max_input_chars", 200_000)
    if not isinstance(max_chars, int) or isinstance(max_chars, bool) or max_chars <= 0:
        errors.append(ConfigError(
            field="max_input_chars",
            message=f"max_input_chars must be a positive integer, got {max_chars!r}",
            severity=Severity.ERROR,
        ))

    # --- Render format ---
    fmt = raw_config.get("default_render_format", "html")
    if not isinstance(fmt, str) or fmt.lower() not in RENDER_FORMATS:
        errors.append(ConfigError(
            field="default_render_format",
            message=f"default_render_format must be \"html\" or \"rtf\", got {fmt!r}",
            severity=Severity.ERROR,
        ))

    # --- Rules ---
    rules = raw_config.get("rules") or {}
    if not isinstance(rules, dict):
        errors.append(ConfigError(
            field="rules",
            message="rules must be a mapping of rule id to {enabled, params}",
            severity=Severity.ERROR,
        ))
        return errors

    for rule_id, override in rules.items():
        errors.extend(_validate_rule(str(rule_id), override))

    return errors


def _validate_rule(rule_id: str, override: Any) -> List[ConfigError]:
    prefix = f"rules.{rule_id}"
    if rule_id not in KNOWN_RULE_IDS:
        return [ConfigError(
            field=prefix,
            message=f"Unknown rule id {rule_id!r} (ignored)",
            severity=Severity.WARNING,
        )]
    if not isinstance(override, dict):
        return [ConfigError(
            field=prefix,
            message="rule override must be a mapping with optional enabled/params",
            severity=Severity.ERROR,
        )]

    issues: List[ConfigError] = []
    if "enabled" in override and not isinstance(override["enabled"], bool):
        issues.append(ConfigError(
            field=f"{prefix}.enabled",
            message=f"enabled must be true or false, got {override['enabled']!r}",
            severity=Severity.ERROR,
        ))

    params = override.get("params", {})
    if params is not None and not isinstance(params, dict):
        issues.append(ConfigError(
            field=f"{prefix}.params",
            message="params must be a mapping",
            severity=Severity.ERROR,
        ))
    elif rule_id == "word_count" and params:
        issues.extend(_validate_word_count(prefix, params))
    return issues


def _validate_word_count(prefix: str, params: Dict[str, Any]) -> List[ConfigError]:
    issues: List[ConfigError] = []
    bounds = {}
    for key in ("min_words", "max_words"):
        if key not in params:
            continue
        value = params[key]
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            issues.append(ConfigError(
                field=f"{prefix}.params.{key}",
                message=f"{key} must be a non-negative integer, got {value!r}",
                severity=Severity.ERROR,
            ))
        else:
            bounds[key] = value

    if len(bounds) == 2 and bounds["min_words"] > bounds["max_words"]:
        issues.append(ConfigError(
            field=f"{prefix}.params",
            message="min_words must not exceed max_words",
            severity=Severity.ERROR,
        ))
    return issues


def has_errors(issues: List[ConfigError]) -> bool:
    """Check if any issues are errors (not just warnings)."""
    return any(e.severity == Severity.ERROR for e in issues)
