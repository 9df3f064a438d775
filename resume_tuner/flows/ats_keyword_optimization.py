"""Keyword optimization flow: missing/suggested keywords plus an optimized resume."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..errors import MissingInputError
from ..observability import FlowObserver
from ..providers import ChatProvider
from ..retry import RetryConfig
from .base import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, run_flow
from .prompts import ATS_KEYWORD_OPTIMIZATION_PROMPT

MISSING_INPUT_MESSAGE = "Please provide both your resume and a job description."


class ATSKeywordOptimizationInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume_text: str = Field(alias="resumeText", description="The text content of the resume to be optimized.")
    job_description: str = Field(
        alias="jobDescription", description="The job description used to identify missing keywords."
    )


class ATSKeywordOptimizationOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    optimized_resume: str = Field(
        alias="optimizedResume", description="The resume text optimized with relevant keywords."
    )
    missing_keywords: List[str] = Field(
        default_factory=list, alias="missingKeywords", description="Keywords missing from the resume."
    )
    suggested_keywords: List[str] = Field(
        default_factory=list, alias="suggestedKeywords", description="Keywords to add to the resume."
    )


async def ats_keyword_optimization(
    provider: ChatProvider,
    flow_input: ATSKeywordOptimizationInput,
    *,
    retry: Optional[RetryConfig] = None,
    observer: Optional[FlowObserver] = None,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    temperature: Optional[float] = DEFAULT_TEMPERATURE,
) -> ATSKeywordOptimizationOutput:
    prompt = ATS_KEYWORD_OPTIMIZATION_PROMPT.format(
        resume_text=flow_input.resume_text,
        job_description=flow_input.job_description,
    )
    return await run_flow(
        provider,
        name="ats_keyword_optimization",
        prompt=prompt,
        output_model=ATSKeywordOptimizationOutput,
        retry=retry,
        observer=observer,
        max_tokens=max_tokens,
        temperature=temperature,
    )


async def optimize_resume(
    provider: ChatProvider,
    resume_text: str,
    job_description: str,
    *,
    retry: Optional[RetryConfig] = None,
    observer: Optional[FlowObserver] = None,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    temperature: Optional[float] = DEFAULT_TEMPERATURE,
) -> ATSKeywordOptimizationOutput:
    """Validate inputs, then run :func:`ats_keyword_optimization`.

    Raises :class:`MissingInputError` before any model call when either
    input is blank.
    """
    require_optimize_inputs(resume_text, job_description)

    return await ats_keyword_optimization(
        provider,
        ATSKeywordOptimizationInput(resume_text=resume_text, job_description=job_description),
        retry=retry,
        observer=observer,
        max_tokens=max_tokens,
        temperature=temperature,
    )


def require_optimize_inputs(resume_text: str, job_description: str) -> None:
    """Raise :class:`MissingInputError` when either input is blank."""
    if not resume_text.strip() or not job_description.strip():
        raise MissingInputError(MISSING_INPUT_MESSAGE)

