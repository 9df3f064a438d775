"""FastAPI app entrypoint for Resume Tuner web APIs."""

from __future__ import annotations

import logging
import os
from functools import partial
from time import perf_counter
from typing import Callable, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from ..config import DEFAULT_CONFIG_PATH, TunerConfig, load_config
from ..errors import ResumeTunerError
from ..observability import FlowObserver
from ..providers import ChatProvider, create_provider
from ..retry import RetryConfig
from .api.v1.router import api_v1_router
from .errors import APIError, api_error_handler, resume_tuner_error_handler, validation_error_handler

logger = logging.getLogger("resume_tuner.web.api")


def _load_app_config() -> TunerConfig:
    config_path = os.getenv("RESUME_TUNER_CONFIG", DEFAULT_CONFIG_PATH)
    try:
        return load_config(config_path)
    except FileNotFoundError:
        logger.info("No config file at %s, using defaults", config_path)
        return TunerConfig.from_dict({})


def _provider_from_config(config: TunerConfig) -> ChatProvider:
    return create_provider(config.provider, config.api_key, config.model, config.api_base)


def create_app(
    provider: Optional[ChatProvider] = None,
    provider_factory: Optional[Callable[[], ChatProvider]] = None,
    retry_config: Optional[RetryConfig] = None,
    config: Optional[TunerConfig] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    *provider* is used as-is when given; otherwise *provider_factory*
    (default: built from *config*) builds one on the first AI request.
    *config* defaults to the file named by ``RESUME_TUNER_CONFIG``; its
    generation and retry settings apply to every flow.
    """
    max_upload_bytes = int(os.getenv("RESUME_TUNER_MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))
    config = config or _load_app_config()
    retry_attempts = int(os.getenv("RESUME_TUNER_RETRY_MAX_ATTEMPTS", str(config.retry_max_attempts)))

    app = FastAPI(title="Resume Tuner API", version="0.1.0")
    app.state.provider = provider
    app.state.config = config
    app.state.provider_factory = provider_factory or partial(_provider_from_config, config)
    app.state.retry_config = retry_config or RetryConfig(max_attempts=max(retry_attempts, 1))
    app.state.observer = FlowObserver()
    app.state.max_upload_bytes = max_upload_bytes
    app.include_router(api_v1_router)

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        start = perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (perf_counter() - start) * 1000
            logger.info(
                "api_request method=%s path=%s status=%s duration_ms=%.2f",
                request.method,
                request.url.path,
                500,
                duration_ms,
            )
            raise

        duration_ms = (perf_counter() - start) * 1000
        logger.info(
            "api_request method=%s path=%s status=%s duration_ms=%.2f",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    @app.get("/healthz", tags=["system"])
    async def healthz() -> dict:
        return {"status": "ok"}

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(ResumeTunerError, resume_tuner_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    return app


def main() -> None:
    """Run development API server."""
    import uvicorn

    load_dotenv()
    uvicorn.run(
        "resume_tuner.web.app:create_app",
        factory=True,
        host=os.getenv("RESUME_TUNER_HOST", "127.0.0.1"),
        port=int(os.getenv("RESUME_TUNER_PORT", "8000")),
    )
