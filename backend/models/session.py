"""Editor session data models"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .chat import ChatMessage, now_ms


class Snapshot(BaseModel):
    """Immutable copy of document content at a commit point"""

    model_config = ConfigDict(frozen=True)

    content: str
    committed_at: int = Field(default_factory=now_ms)


class HistoryView(BaseModel):
    """Observation of the history store after an operation"""

    content: str
    past_length: int
    future_length: int
    can_undo: bool
    can_redo: bool
    last_updated_at: int | None = None


class SessionState(BaseModel):
    """Full observable state of an editor session"""

    session_id: str
    history: HistoryView
    messages: list[ChatMessage] = []


class SetContentRequest(BaseModel):
    """Request to replace the editor content"""

    content: str
    commit: bool = False  # also push a snapshot


class ReviewRequest(BaseModel):
    """Changed regions of a diff to keep; the rest revert to the base snapshot"""

    accepted: list[int] = []
    base: int | None = None
