"""AI flow endpoints: keyword optimization and section rewrites.

Inputs are checked before the provider is resolved, so a blank request is
a 400 even when no model backend is configured.
"""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from .....config import TunerConfig
from .....flows import (
    improve_experience,
    improve_summary,
    optimize_resume,
    require_optimize_inputs,
    require_resume,
)
from .....observability import FlowObserver
from .....retry import RetryConfig
from ..deps import get_config, get_observer, get_provider, get_retry_config

router = APIRouter(tags=["flows"])


class OptimizeRequest(BaseModel):
    resume_text: str = Field(default="")
    job_description: str = Field(default="")


class OptimizeResponse(BaseModel):
    optimized_resume: str
    missing_keywords: List[str]
    suggested_keywords: List[str]


class ImproveRequest(BaseModel):
    resume_text: str = Field(default="")


class ImproveSummaryResponse(BaseModel):
    improved_summary: str


class ImproveExperienceResponse(BaseModel):
    improved_experience: str


def _flow_settings(
    config: TunerConfig = Depends(get_config),
    retry: RetryConfig = Depends(get_retry_config),
    observer: FlowObserver = Depends(get_observer),
) -> Dict[str, Any]:
    return {
        "retry": retry,
        "observer": observer,
        "max_tokens": config.max_tokens,
        "temperature": config.temperature,
    }


@router.post("/optimize", response_model=OptimizeResponse)
async def optimize(
    payload: OptimizeRequest,
    request: Request,
    settings: Dict[str, Any] = Depends(_flow_settings),
) -> OptimizeResponse:
    require_optimize_inputs(payload.resume_text, payload.job_description)
    result = await optimize_resume(
        get_provider(request),
        payload.resume_text,
        payload.job_description,
        **settings,
    )
    return OptimizeResponse(
        optimized_resume=result.optimized_resume,
        missing_keywords=result.missing_keywords,
        suggested_keywords=result.suggested_keywords,
    )


@router.post("/improve/summary", response_model=ImproveSummaryResponse)
async def improve_summary_endpoint(
    payload: ImproveRequest,
    request: Request,
    settings: Dict[str, Any] = Depends(_flow_settings),
) -> ImproveSummaryResponse:
    require_resume(payload.resume_text)
    result = await improve_summary(get_provider(request), payload.resume_text, **settings)
    return ImproveSummaryResponse(improved_summary=result.improved_summary)


@router.post("/improve/experience", response_model=ImproveExperienceResponse)
async def improve_experience_endpoint(
    payload: ImproveRequest,
    request: Request,
    settings: Dict[str, Any] = Depends(_flow_settings),
) -> ImproveExperienceResponse:
    require_resume(payload.resume_text)
    result = await improve_experience(get_provider(request), payload.resume_text, **settings)
    return ImproveExperienceResponse(improved_experience=result.improved_experience)
