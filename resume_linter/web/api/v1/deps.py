"""Dependency providers for v1 API."""

from __future__ import annotations

from fastapi import Request

from ....config import LinterConfig
from ...errors import payload_too_large


def get_config(request: Request) -> LinterConfig:
    """Access the linter configuration loaded at app creation."""
    return request.app.state.linter_config


def enforce_input_limit(text: str, config: LinterConfig) -> str:
    if len(text) > config.max_input_chars:
        raise payload_too_large(len(text), config.max_input_chars)
    return text
