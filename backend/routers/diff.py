"""Diff API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from models.diff import DiffRequest, DiffResult
from services.diff_generator import DiffGenerator

router = APIRouter()
diff_generator = DiffGenerator()


@router.post("", response_model=DiffResult)
async def diff_texts(request: DiffRequest) -> DiffResult:
    """Diff two arbitrary texts into hunks and side-by-side blocks"""
    if request.context_size < 0:
        raise HTTPException(status_code=400, detail="context_size must be non-negative")
    return diff_generator.generate_diff(request.original, request.modified, request.context_size)
