"""Shared request dependencies"""

from __future__ import annotations

from fastapi import HTTPException, Request

from services.editor_session import EditorSession
from services.session_registry import SessionRegistry


def get_registry(request: Request) -> SessionRegistry:
    """Session registry created in the application lifespan"""
    return request.app.state.registry


def get_session(session_id: str, request: Request) -> EditorSession:
    """Resolve the session in the path or fail with 404"""
    session = get_registry(request).get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session not found: {session_id}")
    return session
