"""File upload endpoint: extract resume text from PDF/DOCX/TXT/MD."""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, File, UploadFile
from pydantic import BaseModel

from .....errors import UploadTooLargeError
from .....tools import read_resume_bytes
from ..deps import get_max_upload_bytes

router = APIRouter(tags=["files"])

_CHUNK_SIZE = 64 * 1024


class ExtractResponse(BaseModel):
    filename: str
    format: str
    text: str
    metadata: Dict[str, Any]


@router.post("/extract", response_model=ExtractResponse)
async def extract(
    file: UploadFile = File(...),
    max_bytes: int = Depends(get_max_upload_bytes),
) -> ExtractResponse:
    filename = file.filename or ""
    extracted = read_resume_bytes(await _read_resume_upload(file, filename, max_bytes), filename)
    return ExtractResponse(
        filename=filename,
        format=extracted.format,
        text=extracted.text,
        metadata=extracted.metadata,
    )


async def _read_resume_upload(file: UploadFile, filename: str, max_bytes: int) -> bytes:
    """Buffer the upload chunk by chunk, stopping as soon as it passes *max_bytes*."""
    chunks: List[bytes] = []
    total = 0
    while True:
        chunk = await file.read(_CHUNK_SIZE)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            raise UploadTooLargeError(filename, max_bytes)
        chunks.append(chunk)
    return b"".join(chunks)
