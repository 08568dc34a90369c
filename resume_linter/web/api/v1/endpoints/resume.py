"""Resume parse/render/lint endpoints for Web API v1."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from .....config import LinterConfig
from .....domain import (
    Severity,
    build_grammar_runner,
    build_prompt_runner,
    format_as_html,
    format_as_html_document,
    format_as_rtf,
    parse_resume_text,
    perform_ats_checks,
    text_metadata,
    validate_markdown_resume_prompt,
    validate_resume,
)
from .....observability import log_duration
from ..deps import enforce_input_limit, get_config

router = APIRouter(prefix="/resume", tags=["resume"])


class ResumeTextRequest(BaseModel):
    text: str


class ParseResponse(BaseModel):
    resume: Dict[str, Any]
    metadata: Dict[str, int]


class RenderRequest(ResumeTextRequest):
    format: Optional[Literal["html", "rtf"]] = None
    standalone: bool = Field(default=False)


class RenderResponse(BaseModel):
    format: str
    content: str


class ATSCheckResponse(BaseModel):
    type: str
    category: str
    message: str
    suggestion: Optional[str] = None


class ATSChecksResponse(BaseModel):
    checks: List[ATSCheckResponse]


class ValidateRequest(ResumeTextRequest):
    mode: Literal["full", "prompt"] = Field(default="full")


class DiagnosticResponse(BaseModel):
    type: str
    message: str
    lineRef: Optional[int] = None


class ValidateResponse(BaseModel):
    mode: str
    diagnostics: List[DiagnosticResponse]
    summary: Dict[str, int]


@router.post("/parse", response_model=ParseResponse)
async def parse_resume(
    request: ResumeTextRequest,
    config: LinterConfig = Depends(get_config),
) -> ParseResponse:
    text = enforce_input_limit(request.text, config)
    with log_duration("api:parse"):
        doc = parse_resume_text(text)
    return ParseResponse(resume=doc.to_dict(), metadata=text_metadata(text).to_dict())


@router.post("/render", response_model=RenderResponse)
async def render_resume(
    request: RenderRequest,
    config: LinterConfig = Depends(get_config),
) -> RenderResponse:
    text = enforce_input_limit(request.text, config)
    fmt = request.format or config.default_render_format
    with log_duration(f"api:render:{fmt}"):
        doc = parse_resume_text(text)
        if fmt == "rtf":
            content = format_as_rtf(doc)
        elif request.standalone:
            content = format_as_html_document(doc)
        else:
            content = format_as_html(doc)
    return RenderResponse(format=fmt, content=content)


@router.post("/ats-checks", response_model=ATSChecksResponse)
async def ats_checks(
    request: ResumeTextRequest,
    config: LinterConfig = Depends(get_config),
) -> ATSChecksResponse:
    text = enforce_input_limit(request.text, config)
    with log_duration("api:ats"):
        checks = perform_ats_checks(parse_resume_text(text), text)
    return ATSChecksResponse(checks=[ATSCheckResponse(**check.to_dict()) for check in checks])


@router.post("/validate", response_model=ValidateResponse)
async def validate(
    request: ValidateRequest,
    config: LinterConfig = Depends(get_config),
) -> ValidateResponse:
    text = enforce_input_limit(request.text, config)
    prompt_runner = build_prompt_runner(config.rules)
    with log_duration(f"api:validate:{request.mode}"):
        if request.mode == "prompt":
            findings = validate_markdown_resume_prompt(text, runner=prompt_runner)
        else:
            findings = validate_resume(
                text,
                runner=build_grammar_runner(config.rules),
                prompt_runner=prompt_runner,
            )

    summary = {severity.value: 0 for severity in Severity}
    for finding in findings:
        summary[finding.severity.value] += 1
    return ValidateResponse(
        mode=request.mode,
        diagnostics=[DiagnosticResponse(**finding.to_dict()) for finding in findings],
        summary=summary,
    )
