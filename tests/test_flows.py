"""Tests for the AI flows, driven by a scripted provider."""

import json

import pytest

from resume_tuner.errors import FlowOutputError, MissingInputError, OptimizationError
from resume_tuner.flows import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    USER_FACING_FAILURE,
    ATSKeywordOptimizationOutput,
    SummaryImprovementOutput,
    improve_experience,
    improve_summary,
    optimize_resume,
    parse_flow_output,
)
from resume_tuner.observability import FlowObserver
from resume_tuner.retry import RetryConfig, TransientError

FAST_RETRY = RetryConfig(max_attempts=3, base_delay=0.0)

OPTIMIZE_REPLY = json.dumps(
    {
        "optimizedResume": "Jane Smith\nSkills\nPython, Kubernetes, Terraform",
        "missingKeywords": ["Terraform"],
        "suggestedKeywords": ["Terraform", "CI/CD"],
    }
)


class TestParseFlowOutput:
    def test_bare_json(self):
        result = parse_flow_output(OPTIMIZE_REPLY, ATSKeywordOptimizationOutput)
        assert result.missing_keywords == ["Terraform"]

    def test_fenced_json_with_prose(self):
        reply = 'Here you go:\n```json\n{"improvedSummary": "Seasoned engineer."}\n```\nGood luck!'
        result = parse_flow_output(reply, SummaryImprovementOutput)
        assert result.improved_summary == "Seasoned engineer."

    def test_snake_case_keys_are_accepted(self):
        result = parse_flow_output('{"improved_summary": "x"}', SummaryImprovementOutput)
        assert result.improved_summary == "x"

    def test_keyword_lists_default_to_empty(self):
        result = parse_flow_output('{"optimizedResume": "text"}', ATSKeywordOptimizationOutput)
        assert result.missing_keywords == []
        assert result.suggested_keywords == []

    @pytest.mark.parametrize(
        "reply,message",
        [
            ("", "empty"),
            ("no json here", "did not contain"),
            ("{not: valid}", "not valid JSON"),
            ('{"somethingElse": 1}', "does not match"),
        ],
    )
    def test_bad_replies(self, reply, message):
        with pytest.raises(FlowOutputError, match=message):
            parse_flow_output(reply, SummaryImprovementOutput)


class TestOptimizeResume:
    @pytest.mark.asyncio
    async def test_success(self, fake_provider_factory, sample_resume):
        provider = fake_provider_factory([OPTIMIZE_REPLY])
        observer = FlowObserver()

        result = await optimize_resume(
            provider, sample_resume, "Need Terraform", retry=FAST_RETRY, observer=observer
        )

        assert result.optimized_resume.endswith("Terraform")
        assert result.suggested_keywords == ["Terraform", "CI/CD"]
        messages, config = provider.calls[0]
        assert config.json_output is True
        assert sample_resume in messages[0].text
        assert "Need Terraform" in messages[0].text
        assert observer.get_summary()["llm_requests"] == 1
        assert observer.get_summary()["total_tokens"] == 42

    @pytest.mark.asyncio
    @pytest.mark.parametrize("resume,job", [("", "job"), ("resume", "   "), ("\n", "")])
    async def test_blank_inputs_skip_the_model(self, fake_provider_factory, resume, job):
        provider = fake_provider_factory([])
        with pytest.raises(MissingInputError, match="Please provide both your resume and a job description."):
            await optimize_resume(provider, resume, job)
        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_transient_failure_is_retried(self, fake_provider_factory):
        provider = fake_provider_factory([TransientError("503 unavailable"), OPTIMIZE_REPLY])
        result = await optimize_resume(provider, "resume", "job", retry=FAST_RETRY)
        assert result.missing_keywords == ["Terraform"]
        assert len(provider.calls) == 2

    @pytest.mark.asyncio
    async def test_invalid_reply_becomes_user_facing_error(self, fake_provider_factory):
        provider = fake_provider_factory(["I cannot help with that."])
        observer = FlowObserver()

        with pytest.raises(OptimizationError) as exc_info:
            await optimize_resume(provider, "resume", "job", retry=FAST_RETRY, observer=observer)

        assert str(exc_info.value) == USER_FACING_FAILURE
        assert isinstance(exc_info.value.__cause__, FlowOutputError)
        assert observer.get_summary()["errors"] == 1

    @pytest.mark.asyncio
    async def test_provider_failure_becomes_user_facing_error(self, fake_provider_factory):
        provider = fake_provider_factory([ValueError("invalid api key")])
        with pytest.raises(OptimizationError, match="Failed to optimize resume"):
            await optimize_resume(provider, "resume", "job", retry=FAST_RETRY)
        assert len(provider.calls) == 1


class TestSectionImprovement:
    @pytest.mark.asyncio
    async def test_improve_summary(self, fake_provider_factory, sample_resume):
        provider = fake_provider_factory(['{"improvedSummary": "Backend leader."}'])
        result = await improve_summary(provider, sample_resume, retry=FAST_RETRY)
        assert result.improved_summary == "Backend leader."
        assert sample_resume in provider.calls[0][0][0].text

    @pytest.mark.asyncio
    async def test_improve_experience(self, fake_provider_factory, sample_resume):
        provider = fake_provider_factory(['```\n{"improvedExperience": "- Shipped X"}\n```'])
        result = await improve_experience(provider, sample_resume, retry=FAST_RETRY)
        assert result.improved_experience == "- Shipped X"

    @pytest.mark.asyncio
    async def test_blank_resume(self, fake_provider_factory):
        provider = fake_provider_factory([])
        with pytest.raises(MissingInputError):
            await improve_summary(provider, "  ")
        with pytest.raises(MissingInputError):
            await improve_experience(provider, "")


class TestGenerationSettings:
    @pytest.mark.asyncio
    async def test_defaults(self, fake_provider_factory):
        provider = fake_provider_factory(['{"improvedSummary": "x"}'])
        await improve_summary(provider, "resume", retry=FAST_RETRY)
        config = provider.calls[0][1]
        assert config.temperature == DEFAULT_TEMPERATURE
        assert config.max_tokens == DEFAULT_MAX_TOKENS

    @pytest.mark.asyncio
    async def test_optimize_passes_settings(self, fake_provider_factory):
        provider = fake_provider_factory([OPTIMIZE_REPLY])
        await optimize_resume(provider, "resume", "job", retry=FAST_RETRY, max_tokens=256, temperature=0.1)
        config = provider.calls[0][1]
        assert config.temperature == 0.1
        assert config.max_tokens == 256

    @pytest.mark.asyncio
    async def test_improve_experience_passes_settings(self, fake_provider_factory):
        provider = fake_provider_factory(['{"improvedExperience": "x"}'])
        await improve_experience(provider, "resume", retry=FAST_RETRY, max_tokens=1024, temperature=None)
        config = provider.calls[0][1]
        assert config.temperature is None
        assert config.max_tokens == 1024
