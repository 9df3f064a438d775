"""Rewrite flows for the summary and the work experience sections."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..errors import MissingInputError
from ..observability import FlowObserver
from ..providers import ChatProvider
from ..retry import RetryConfig
from .base import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, run_flow
from .prompts import EXPERIENCE_IMPROVEMENT_PROMPT, SUMMARY_IMPROVEMENT_PROMPT

RESUME_REQUIRED_MESSAGE = "Please provide your resume."


class ResumeTextInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume_text: str = Field(alias="resumeText", description="The text content of the resume to be improved.")


class SummaryImprovementOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    improved_summary: str = Field(
        alias="improvedSummary", description="The suggested improved summary for the resume."
    )


class ExperienceImprovementOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    improved_experience: str = Field(
        alias="improvedExperience",
        description="The suggested improved work experience section for the resume.",
    )


async def improve_summary(
    provider: ChatProvider,
    resume_text: str,
    *,
    retry: Optional[RetryConfig] = None,
    observer: Optional[FlowObserver] = None,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    temperature: Optional[float] = DEFAULT_TEMPERATURE,
) -> SummaryImprovementOutput:
    flow_input = require_resume(resume_text)
    return await run_flow(
        provider,
        name="summary_improvement",
        prompt=SUMMARY_IMPROVEMENT_PROMPT.format(resume_text=flow_input.resume_text),
        output_model=SummaryImprovementOutput,
        retry=retry,
        observer=observer,
        max_tokens=max_tokens,
        temperature=temperature,
    )


async def improve_experience(
    provider: ChatProvider,
    resume_text: str,
    *,
    retry: Optional[RetryConfig] = None,
    observer: Optional[FlowObserver] = None,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    temperature: Optional[float] = DEFAULT_TEMPERATURE,
) -> ExperienceImprovementOutput:
    flow_input = require_resume(resume_text)
    return await run_flow(
        provider,
        name="experience_improvement",
        prompt=EXPERIENCE_IMPROVEMENT_PROMPT.format(resume_text=flow_input.resume_text),
        output_model=ExperienceImprovementOutput,
        retry=retry,
        observer=observer,
        max_tokens=max_tokens,
        temperature=temperature,
    )


def require_resume(resume_text: str) -> ResumeTextInput:
    """Wrap *resume_text*, raising :class:`MissingInputError` when it is blank."""
    if not resume_text.strip():
        raise MissingInputError(RESUME_REQUIRED_MESSAGE)
    return ResumeTextInput(resume_text=resume_text)
