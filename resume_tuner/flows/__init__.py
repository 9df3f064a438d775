"""AI flows: schema-validated model calls over resume text."""

from .ats_keyword_optimization import (
    ATSKeywordOptimizationInput,
    ATSKeywordOptimizationOutput,
    ats_keyword_optimization,
    optimize_resume,
    require_optimize_inputs,
)
from .base import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, USER_FACING_FAILURE, parse_flow_output, run_flow
from .section_improvement import (
    ExperienceImprovementOutput,
    SummaryImprovementOutput,
    improve_experience,
    improve_summary,
    require_resume,
)

__all__ = [
    "ATSKeywordOptimizationInput",
    "ATSKeywordOptimizationOutput",
    "ats_keyword_optimization",
    "optimize_resume",
    "require_optimize_inputs",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_TEMPERATURE",
    "USER_FACING_FAILURE",
    "parse_flow_output",
    "run_flow",
    "SummaryImprovementOutput",
    "ExperienceImprovementOutput",
    "improve_summary",
    "improve_experience",
    "require_resume",
]
