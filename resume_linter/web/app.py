"""FastAPI app entrypoint for Resume Linter web APIs."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from ..config import LinterConfig, load_raw_config
from ..config_validator import Severity, has_errors, validate_config
from ..observability import configure_logging
from .api.v1.router import api_v1_router
from .errors import APIError, api_error_handler, validation_error_handler

logger = logging.getLogger("resume_linter.web.api")


def load_validated_config(config_path: Optional[str] = None) -> LinterConfig:
    """Load YAML configuration and refuse to start on validation errors."""
    raw_config = load_raw_config(config_path)
    issues = validate_config(raw_config)
    for issue in issues:
        log = logger.error if issue.severity == Severity.ERROR else logger.warning
        log("Config [%s] %s", issue.field, issue.message)
    if has_errors(issues):
        fields = ", ".join(issue.field for issue in issues if issue.severity == Severity.ERROR)
        raise ValueError(f"Invalid configuration: {fields}")
    return LinterConfig.from_dict(raw_config)


def create_app(config: Optional[LinterConfig] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Without *config*, settings are loaded from the YAML configuration
    (``RESUME_LINTER_CONFIG`` or ``config/config.yaml``).
    """
    linter_config = config or load_validated_config()

    app = FastAPI(title="Resume Linter API", version="0.1.0")
    app.state.linter_config = linter_config
    app.include_router(api_v1_router)

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        start = perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (perf_counter() - start) * 1000
            logger.info(
                "api_request method=%s path=%s status=%s duration_ms=%.2f",
                request.method,
                request.url.path,
                500,
                duration_ms,
            )
            raise

        duration_ms = (perf_counter() - start) * 1000
        logger.info(
            "api_request method=%s path=%s status=%s duration_ms=%.2f",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    @app.get("/healthz", tags=["system"])
    async def healthz() -> dict:
        return {"status": "ok"}

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    return app


def main() -> None:
    """Run development API server."""
    import uvicorn

    config = load_validated_config()
    configure_logging(level=config.log_level)
    uvicorn.run(create_app(config), host="127.0.0.1", port=8000)
