"""Models module - Pydantic data models"""

from .chat import (
    STREAMING_ID,
    AppendMessageRequest,
    ChatMessage,
    FinalizedMessage,
    FinalizeRequest,
    MessageListResponse,
    Role,
    StreamEvent,
    StreamingMessage,
    StreamingUpdateRequest,
    StreamRequest,
)
from .diff import DiffRequest, DiffResult, Hunk, HunkKind, InlineBlock, LabeledLine
from .session import HistoryView, ReviewRequest, SessionState, SetContentRequest, Snapshot

__all__ = [
    # Chat models
    "STREAMING_ID",
    "AppendMessageRequest",
    "ChatMessage",
    "FinalizedMessage",
    "FinalizeRequest",
    "MessageListResponse",
    "Role",
    "StreamEvent",
    "StreamingMessage",
    "StreamingUpdateRequest",
    "StreamRequest",
    # Diff models
    "DiffRequest",
    "DiffResult",
    "Hunk",
    "HunkKind",
    "InlineBlock",
    "LabeledLine",
    # Session models
    "HistoryView",
    "ReviewRequest",
    "SessionState",
    "SetContentRequest",
    "Snapshot",
]
