"""Shared plumbing for schema-validated model calls."""

from __future__ import annotations

import json
import logging
import re
import time
from typing import Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..errors import FlowOutputError, OptimizationError
from ..observability import FlowObserver
from ..providers import ChatProvider, GenerationConfig, LLMResponse, Message
from ..retry import RetryConfig, retry_with_backoff

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)

USER_FACING_FAILURE = "Failed to optimize resume. Please try again."

DEFAULT_MAX_TOKENS = 4096
DEFAULT_TEMPERATURE = 0.7

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)


def parse_flow_output(reply: str, output_model: Type[OutputT]) -> OutputT:
    """Parse a model *reply* into *output_model*.

    Accepts bare JSON, JSON inside a Markdown code fence, or JSON preceded
    and followed by prose. Anything else raises :class:`FlowOutputError`.
    """
    if not reply or not reply.strip():
        raise FlowOutputError("Model returned an empty reply")

    payload = _extract_json_object(reply)
    if payload is None:
        raise FlowOutputError("Model reply did not contain a JSON object")

    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise FlowOutputError(f"Model reply is not valid JSON: {e.msg}") from e

    try:
        return output_model.model_validate(data)
    except ValidationError as e:
        raise FlowOutputError(f"Model reply does not match {output_model.__name__}: {e.error_count()} error(s)") from e


async def run_flow(
    provider: ChatProvider,
    *,
    name: str,
    prompt: str,
    output_model: Type[OutputT],
    system_prompt: str = "",
    retry: Optional[RetryConfig] = None,
    observer: Optional[FlowObserver] = None,
    max_tokens: int = DEFAULT_MAX_TOKENS,
    temperature: Optional[float] = DEFAULT_TEMPERATURE,
) -> OutputT:
    """Send *prompt* to *provider* and validate the reply against *output_model*.

    Transient provider failures are retried. Any final failure is reported
    once as :class:`OptimizationError` carrying a user-facing message; the
    underlying exception is chained as ``__cause__``.
    """
    config = GenerationConfig(
        system_prompt=system_prompt,
        max_tokens=max_tokens,
        temperature=temperature,
        json_output=True,
    )
    messages = [Message.user(prompt)]
    model_name = getattr(provider, "model", "unknown")

    started = time.perf_counter()
    try:
        response: LLMResponse = await retry_with_backoff(provider.generate, retry or RetryConfig(), messages, config)
        duration_ms = (time.perf_counter() - started) * 1000
        if observer is not None:
            observer.log_llm_request(name, model_name, duration_ms, response.usage)
        return parse_flow_output(response.text, output_model)
    except Exception as e:
        if observer is not None:
            observer.log_error(name, e)
        else:
            logger.error("%s failed: %s", name, e)
        raise OptimizationError(USER_FACING_FAILURE) from e


def _extract_json_object(reply: str) -> Optional[str]:
    fenced = _FENCE_RE.search(reply)
    candidate = fenced.group(1) if fenced else reply

    start = candidate.find("{")
    end = candidate.rfind("}")
    if start == -1 or end < start:
        return None
    return candidate[start : end + 1]
