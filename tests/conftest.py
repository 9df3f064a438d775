"""Global pytest fixtures for deterministic test environment."""

from __future__ import annotations

from typing import List, Optional, Union

import pytest

from resume_tuner.providers import GenerationConfig, LLMResponse, Message


@pytest.fixture(autouse=True)
def _isolate_runtime_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear local runtime env that can leak into tests on developer machines."""
    for key in (
        "RESUME_TUNER_PROVIDER",
        "RESUME_TUNER_MODEL",
        "RESUME_TUNER_API_BASE",
        "RESUME_TUNER_CONFIG",
        "RESUME_TUNER_MAX_UPLOAD_BYTES",
        "RESUME_TUNER_RETRY_MAX_ATTEMPTS",
        "GEMINI_API_KEY",
        "OPENAI_API_KEY",
        "DEEPSEEK_API_KEY",
        "KIMI_API_KEY",
        "GLM_API_KEY",
    ):
        monkeypatch.delenv(key, raising=False)


class FakeProvider:
    """Scripted ChatProvider: returns (or raises) queued items in order."""

    def __init__(self, replies: Optional[List[Union[str, Exception]]] = None, model: str = "fake-model"):
        self.model = model
        self.replies = list(replies or [])
        self.calls: List[tuple[List[Message], GenerationConfig]] = []

    async def generate(self, messages: List[Message], config: GenerationConfig) -> LLMResponse:
        self.calls.append((messages, config))
        if not self.replies:
            raise AssertionError("FakeProvider ran out of scripted replies")
        item = self.replies.pop(0)
        if isinstance(item, Exception):
            raise item
        return LLMResponse(text=item, usage={"total_tokens": 42})


@pytest.fixture
def fake_provider_factory():
    return FakeProvider


SAMPLE_RESUME = """Jane Smith
jane.smith@email.com | (555) 123-4567

Summary
Backend engineer with 8 years of Python experience.

Experience
Senior Engineer, Acme Corp (2020 - Present)
- Led migration to Kubernetes, cutting deploy time by 40%

Skills:
Python, Go, PostgreSQL
"""


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME
