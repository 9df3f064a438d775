"""Provider factory and response normalization tests."""

import os
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from resume_tuner.providers import (
    GeminiProvider,
    GenerationConfig,
    Message,
    OpenAICompatibleProvider,
    create_provider,
    resolve_api_key,
)


def _openai_provider() -> OpenAICompatibleProvider:
    return OpenAICompatibleProvider(api_key="test-key", model="kimi-k2", api_base="https://api.moonshot.cn/v1")


def _completion(content, finish_reason="stop"):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content), finish_reason=finish_reason)],
        usage=SimpleNamespace(prompt_tokens=10, completion_tokens=20, total_tokens=30),
    )


class TestCreateProvider:
    def test_gemini(self):
        provider = create_provider("gemini", "literal-key", "gemini-2.5-flash")
        assert isinstance(provider, GeminiProvider)
        assert provider.model == "gemini-2.5-flash"

    def test_openai_compatible_uses_default_base(self):
        provider = create_provider("DeepSeek", "literal-key", "deepseek-chat")
        assert isinstance(provider, OpenAICompatibleProvider)
        assert provider.api_base == "https://api.deepseek.com"

    def test_explicit_api_base_wins(self):
        provider = create_provider("openai", "literal-key", "gpt-4o-mini", api_base="http://localhost:8000/v1")
        assert provider.api_base == "http://localhost:8000/v1"

    def test_missing_key(self):
        with pytest.raises(ValueError, match="GEMINI_API_KEY not set"):
            create_provider("gemini", "", "gemini-2.5-flash")


class TestResolveApiKey:
    @patch.dict(os.environ, {"OPENAI_API_KEY": "from-env"}, clear=True)
    def test_env_first(self):
        assert resolve_api_key("openai", "literal") == "from-env"

    @patch.dict(os.environ, {"CUSTOM": "custom-value"}, clear=True)
    def test_placeholder(self):
        assert resolve_api_key("glm", "${CUSTOM}") == "custom-value"

    @patch.dict(os.environ, {}, clear=True)
    def test_unresolved_placeholder(self):
        with pytest.raises(ValueError, match="GLM_API_KEY"):
            resolve_api_key("glm", "${CUSTOM}")

    @patch.dict(os.environ, {}, clear=True)
    def test_unknown_provider_without_key(self):
        with pytest.raises(ValueError, match="API key not set"):
            resolve_api_key("acme", "")


class TestOpenAICompatible:
    def test_messages_and_kwargs(self):
        provider = _openai_provider()
        config = GenerationConfig(system_prompt="Be brief.", max_tokens=100, temperature=0.2, json_output=True)

        messages = provider._to_openai_messages([Message.user("hi"), Message.assistant("hello")], config.system_prompt)
        kwargs = provider._build_chat_kwargs(messages, config)

        assert kwargs["messages"] == [
            {"role": "system", "content": "Be brief."},
            {"role": "user", "content": "hi"},
            {"role": "assistant", "content": "hello"},
        ]
        assert kwargs["max_tokens"] == 100
        assert kwargs["temperature"] == 0.2
        assert kwargs["response_format"] == {"type": "json_object"}

    def test_plain_text_has_no_response_format(self):
        provider = _openai_provider()
        kwargs = provider._build_chat_kwargs([], GenerationConfig(temperature=None))
        assert "response_format" not in kwargs
        assert "temperature" not in kwargs

    def test_list_content_is_joined(self):
        response = _openai_provider()._from_openai_completion(
            _completion([{"type": "text", "text": "hello "}, SimpleNamespace(text="world")])
        )
        assert response.text == "hello world"
        assert response.usage == {"prompt_tokens": 10, "completion_tokens": 20, "total_tokens": 30}
        assert response.finish_reasons == ["stop"]

    def test_no_choices(self):
        with pytest.raises(RuntimeError, match="no choices"):
            _openai_provider()._from_openai_completion(SimpleNamespace(choices=[], usage=None))

    @pytest.mark.asyncio
    async def test_forced_temperature_retry(self):
        provider = _openai_provider()
        create = AsyncMock(
            side_effect=[
                RuntimeError("Error code: 400 - invalid temperature: only 1 is allowed for this model"),
                _completion('{"ok": true}'),
            ]
        )
        provider.client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))

        response = await provider.generate([Message.user("hi")], GenerationConfig(temperature=0.7))

        assert response.text == '{"ok": true}'
        assert create.await_args_list[1].kwargs["temperature"] == 1.0
        assert provider._forced_temperature == 1.0


class TestGemini:
    def _provider(self) -> GeminiProvider:
        return GeminiProvider(api_key="test-key", model="gemini-2.5-flash")

    def test_response_text_and_usage(self):
        response = SimpleNamespace(
            candidates=[
                SimpleNamespace(
                    content=SimpleNamespace(parts=[SimpleNamespace(text='{"a": '), SimpleNamespace(text="1}")]),
                    finish_reason="STOP",
                )
            ],
            usage_metadata=SimpleNamespace(prompt_token_count=5, candidates_token_count=7, total_token_count=12),
        )

        result = self._provider()._from_gemini_response(response)

        assert result.text == '{"a": 1}'
        assert result.usage == {"prompt_tokens": 5, "completion_tokens": 7, "total_tokens": 12}
        assert result.finish_reasons == ["STOP"]

    def test_no_candidates(self):
        with pytest.raises(RuntimeError, match="no candidates"):
            self._provider()._from_gemini_response(SimpleNamespace(candidates=[], usage_metadata=None))

    def test_roles_are_mapped(self):
        contents = self._provider()._to_gemini_contents([Message.user("hi"), Message.assistant("hello")])
        assert [c.role for c in contents] == ["user", "model"]
        assert contents[1].parts[0].text == "hello"
