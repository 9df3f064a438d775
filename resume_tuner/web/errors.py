"""API error helpers and exception handlers."""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple, Type

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..errors import (
    MissingInputError,
    OptimizationError,
    ResumeReadError,
    ResumeTunerError,
    UnsupportedFormatError,
    UploadTooLargeError,
)


class APIError(Exception):
    """Application-level API error with status/code mapping."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


_DOMAIN_ERROR_MAP: Tuple[Tuple[Type[ResumeTunerError], int, str], ...] = (
    (MissingInputError, 400, "MISSING_INPUT"),
    (UnsupportedFormatError, 415, "UNSUPPORTED_FORMAT"),
    (ResumeReadError, 422, "UNREADABLE_FILE"),
    (UploadTooLargeError, 422, "UPLOAD_TOO_LARGE"),
    (OptimizationError, 502, "OPTIMIZATION_FAILED"),
)


def to_api_error(exc: ResumeTunerError) -> APIError:
    """Map a domain/flow exception to its API status and code."""
    for error_type, status_code, code in _DOMAIN_ERROR_MAP:
        if isinstance(exc, error_type):
            details: Dict[str, Any] = {}
            if isinstance(exc, UnsupportedFormatError):
                details = {"suffix": exc.suffix, "supported": list(exc.supported)}
            elif isinstance(exc, UploadTooLargeError):
                details = {"filename": exc.filename, "max_upload_bytes": exc.max_bytes}
            return APIError(status_code, code, str(exc), details)
    return APIError(500, "INTERNAL_ERROR", str(exc))


async def api_error_handler(_: Request, exc: APIError) -> JSONResponse:
    """Render contract-compliant error response."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def resume_tuner_error_handler(_: Request, exc: ResumeTunerError) -> JSONResponse:
    err = to_api_error(exc)
    return JSONResponse(status_code=err.status_code, content=err.to_dict())


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Normalize FastAPI validation errors to API contract shape."""
    return JSONResponse(
        status_code=400,
        content={
            "error": {
                "code": "BAD_REQUEST",
                "message": "Invalid request payload",
                "details": {"errors": exc.errors()},
            }
        },
    )
