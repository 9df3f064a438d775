"""Top-level v1 API router."""

from __future__ import annotations

from fastapi import APIRouter

from .endpoints.files import router as files_router
from .endpoints.flows import router as flows_router
from .endpoints.preview import router as preview_router

api_v1_router = APIRouter(prefix="/api/v1")
api_v1_router.include_router(preview_router)
api_v1_router.include_router(flows_router)
api_v1_router.include_router(files_router)
