"""Deterministic resume endpoints: classification, preview, format check, export."""

from __future__ import annotations

from typing import List, Literal

from fastapi import APIRouter
from fastapi.responses import Response
from pydantic import BaseModel, Field

from .....domain import (
    DEFAULT_THEME,
    PREVIEW_THEMES,
    check_format,
    classify,
    keyword_coverage,
    render_preview_document,
    render_preview_html,
)
from .....tools import render_export
from ....errors import APIError

router = APIRouter(tags=["preview"])


class TextRequest(BaseModel):
    text: str = ""


class PreviewRequest(BaseModel):
    text: str = ""
    theme: str = Field(default=DEFAULT_THEME)


class LineRecordItem(BaseModel):
    index: int
    raw_text: str
    trimmed_text: str
    kind: str


class ClassifyResponse(BaseModel):
    records: List[LineRecordItem]


class PreviewResponse(BaseModel):
    theme: str
    html: str
    document: str


class FormatCheckItemResponse(BaseModel):
    title: str
    description: str
    severity: str
    source: str


class FormatCheckResponse(BaseModel):
    items: List[FormatCheckItemResponse]
    section_count: int
    has_name: bool
    has_contact_info: bool


class KeywordCoverageRequest(BaseModel):
    text: str = ""
    keywords: List[str] = Field(default_factory=list)


class KeywordCoverageResponse(BaseModel):
    present: List[str]
    missing: List[str]
    ratio: float


class ExportRequest(BaseModel):
    text: str = ""
    format: Literal["txt", "html"] = "txt"
    theme: str = Field(default=DEFAULT_THEME)


_MEDIA_TYPES = {"txt": "text/plain; charset=utf-8", "html": "text/html; charset=utf-8"}


@router.post("/classify", response_model=ClassifyResponse)
async def classify_text(request: TextRequest) -> ClassifyResponse:
    return ClassifyResponse(records=[LineRecordItem(**r.to_dict()) for r in classify(request.text)])


@router.post("/preview", response_model=PreviewResponse)
async def preview(request: PreviewRequest) -> PreviewResponse:
    _require_theme(request.theme)
    return PreviewResponse(
        theme=request.theme,
        html=render_preview_html(classify(request.text)),
        document=render_preview_document(request.text, theme=request.theme),
    )


@router.post("/format-check", response_model=FormatCheckResponse)
async def format_check(request: TextRequest) -> FormatCheckResponse:
    result = check_format(classify(request.text))
    return FormatCheckResponse(
        items=[
            FormatCheckItemResponse(
                title=item.title,
                description=item.description,
                severity=item.severity,
                source=item.source,
            )
            for item in result.items
        ],
        section_count=result.section_count,
        has_name=result.has_name,
        has_contact_info=result.has_contact_info,
    )


@router.post("/keywords/coverage", response_model=KeywordCoverageResponse)
async def keywords_coverage(request: KeywordCoverageRequest) -> KeywordCoverageResponse:
    coverage = keyword_coverage(request.text, request.keywords)
    return KeywordCoverageResponse(present=coverage.present, missing=coverage.missing, ratio=coverage.ratio)


@router.post("/export")
async def export(request: ExportRequest) -> Response:
    if not request.text.strip():
        raise APIError(400, "MISSING_INPUT", "Nothing to export: resume text is empty")
    _require_theme(request.theme)
    content = render_export(request.text, f".{request.format}", theme=request.theme)
    return Response(
        content=content,
        media_type=_MEDIA_TYPES[request.format],
        headers={"Content-Disposition": f'attachment; filename="resume.{request.format}"'},
    )


def _require_theme(theme: str) -> None:
    if theme not in PREVIEW_THEMES:
        raise APIError(
            400,
            "UNKNOWN_THEME",
            f"Unknown theme '{theme}'",
            {"themes": list(PREVIEW_THEMES)},
        )
