"""Editor session API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from models.diff import DiffResult
from models.session import ReviewRequest, SessionState, SetContentRequest
from services.editor_session import EditorSession
from services.session_registry import SessionRegistry

from .dependencies import get_registry, get_session

router = APIRouter()


@router.post("", response_model=SessionState, status_code=201)
async def create_session(registry: SessionRegistry = Depends(get_registry)) -> SessionState:
    """Start a new editing session"""
    return registry.create().state()


@router.get("/{session_id}", response_model=SessionState)
async def read_session(session: EditorSession = Depends(get_session)) -> SessionState:
    """Current content, stack lengths and messages"""
    return session.state()


@router.delete("/{session_id}")
async def delete_session(
    session_id: str,
    registry: SessionRegistry = Depends(get_registry),
) -> dict[str, str]:
    """Discard a session"""
    if not registry.drop(session_id):
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return {"status": "success", "message": "Session deleted"}


@router.put("/{session_id}/content", response_model=SessionState)
async def set_content(
    request: SetContentRequest,
    session: EditorSession = Depends(get_session),
) -> SessionState:
    """Replace the content (live edit), optionally creating an undo point"""
    session.history.set_content(request.content)
    if request.commit:
        session.history.commit()
    return session.state()


@router.post("/{session_id}/commit", response_model=SessionState)
async def commit(session: EditorSession = Depends(get_session)) -> SessionState:
    """Snapshot the current content"""
    session.history.commit()
    return session.state()


@router.post("/{session_id}/undo", response_model=SessionState)
async def undo(session: EditorSession = Depends(get_session)) -> SessionState:
    session.history.undo()
    return session.state()


@router.post("/{session_id}/redo", response_model=SessionState)
async def redo(session: EditorSession = Depends(get_session)) -> SessionState:
    session.history.redo()
    return session.state()


@router.post("/{session_id}/clear", response_model=SessionState)
async def clear(session: EditorSession = Depends(get_session)) -> SessionState:
    """Reset content, history and messages"""
    return session.clear()


@router.get("/{session_id}/diff", response_model=DiffResult)
async def session_diff(
    base: int | None = None,
    context: int | None = None,
    session: EditorSession = Depends(get_session),
) -> DiffResult:
    """Diff a past snapshot (default: the undo target) against the current content"""
    if context is not None and context < 0:
        raise HTTPException(status_code=400, detail="context must be non-negative")
    try:
        return session.diff(base=base, context_size=context)
    except IndexError:
        raise HTTPException(status_code=404, detail=f"No snapshot at index {base}")


@router.post("/{session_id}/review", response_model=SessionState)
async def review(
    request: ReviewRequest,
    session: EditorSession = Depends(get_session),
) -> SessionState:
    """Accept some changed regions of the session diff and revert the others"""
    try:
        return session.apply_review(request.accepted, base=request.base)
    except IndexError:
        raise HTTPException(status_code=404, detail=f"No snapshot at index {request.base}")
