"""Config-driven rule runner shared by the prompt and grammar linters."""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..models import Diagnostic
from .markdown_source import MarkdownSource

logger = logging.getLogger(__name__)

RuleFn = Callable[[MarkdownSource, Dict[str, Any]], List[Diagnostic]]


class RuleRunner:
    """Run registered rules in configured order."""

    def __init__(self, rules: List[Dict[str, Any]], registry: Dict[str, RuleFn]):
        self.rules = rules
        self.registry = registry

    @property
    def rule_ids(self) -> List[str]:
        return [str(cfg.get("id", "")) for cfg in self.rules]

    def run(self, source: MarkdownSource) -> List[Diagnostic]:
        findings: List[Diagnostic] = []
        for cfg in self.rules:
            if not bool(cfg.get("enabled", True)):
                continue

            rule_id = str(cfg.get("id", "")).strip()
            if not rule_id:
                continue
            rule_fn = self.registry.get(rule_id)
            if rule_fn is None:
                logger.debug("Skipping unknown rule id %r", rule_id)
                continue

            params = cfg.get("params", {}) or {}
            findings.extend(rule_fn(source, params))
        return findings


def apply_overrides(
    defaults: List[Dict[str, Any]],
    overrides: Optional[Mapping[str, Mapping[str, Any]]] = None,
) -> List[Dict[str, Any]]:
    """Merge per-rule ``{enabled, params}`` overrides into the default rule list."""
    rules = copy.deepcopy(defaults)
    if not overrides:
        return rules

    for cfg in rules:
        override = overrides.get(cfg["id"])
        if not isinstance(override, Mapping):
            if override is not None:
                logger.warning("Ignoring non-mapping override for rule %r", cfg["id"])
            continue
        if "enabled" in override:
            cfg["enabled"] = bool(override["enabled"])
        params = override.get("params") or {}
        if isinstance(params, Mapping):
            cfg["params"] = {**cfg.get("params", {}), **params}
    return rules
