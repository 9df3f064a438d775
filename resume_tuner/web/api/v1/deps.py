"""Dependency providers for v1 API."""

from __future__ import annotations

import logging

from fastapi import Request

from ....config import TunerConfig
from ....observability import FlowObserver
from ....providers import ChatProvider
from ....retry import RetryConfig
from ...errors import APIError

logger = logging.getLogger("resume_tuner.web.api")


def get_provider(request: Request) -> ChatProvider:
    """Return the shared chat provider, building it on first use."""
    state = request.app.state
    if state.provider is None:
        try:
            state.provider = state.provider_factory()
        except (ValueError, FileNotFoundError) as e:
            logger.warning("Model provider unavailable: %s", e)
            raise APIError(503, "PROVIDER_UNAVAILABLE", "Model provider is not configured", {"reason": str(e)})
    return state.provider


def get_config(request: Request) -> TunerConfig:
    return request.app.state.config


def get_retry_config(request: Request) -> RetryConfig:
    return request.app.state.retry_config


def get_observer(request: Request) -> FlowObserver:
    return request.app.state.observer


def get_max_upload_bytes(request: Request) -> int:
    return request.app.state.max_upload_bytes
