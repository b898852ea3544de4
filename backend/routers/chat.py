"""Chat message API endpoints"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from fastapi import APIRouter, Depends, HTTPException
from sse_starlette.sse import EventSourceResponse

from models.chat import (
    AppendMessageRequest,
    FinalizedMessage,
    FinalizeRequest,
    MessageListResponse,
    StreamEvent,
    StreamingMessage,
    StreamingUpdateRequest,
    StreamRequest,
)
from models.session import SessionState
from services.editor_session import EditorSession
from services.stream_relay import relay_stream

from .dependencies import get_session

logger = logging.getLogger(__name__)

router = APIRouter()


def _message_list(session: EditorSession) -> MessageListResponse:
    return MessageListResponse(
        session_id=session.session_id,
        messages=session.chat.messages,
        streaming=session.chat.is_streaming,
    )


@router.get("/{session_id}/messages", response_model=MessageListResponse)
async def list_messages(session: EditorSession = Depends(get_session)) -> MessageListResponse:
    return _message_list(session)


@router.get("/{session_id}/history")
async def conversation_history(session: EditorSession = Depends(get_session)) -> list[dict[str, str]]:
    """Finalized turns as role/content pairs, ready for prompt assembly"""
    return session.chat.conversation_history()


@router.post("/{session_id}/messages", response_model=MessageListResponse)
async def append_message(
    request: AppendMessageRequest,
    session: EditorSession = Depends(get_session),
) -> MessageListResponse:
    """Append a fully-formed message (typically from the user)"""
    fields = request.model_dump(exclude_none=True)
    session.chat.append_message(FinalizedMessage(**fields))
    return _message_list(session)


@router.put("/{session_id}/streaming", response_model=MessageListResponse)
async def upsert_streaming(
    request: StreamingUpdateRequest,
    session: EditorSession = Depends(get_session),
) -> MessageListResponse:
    """Merge the cumulative text of the in-flight assistant reply"""
    session.chat.upsert_streaming_assistant(request.content)
    return _message_list(session)


@router.post("/{session_id}/finalize", response_model=SessionState)
async def finalize(
    request: FinalizeRequest,
    session: EditorSession = Depends(get_session),
) -> SessionState:
    """Finalize the last message; a site document reply becomes the new content"""
    if not len(session.chat):
        raise HTTPException(status_code=409, detail="No message to finalize")
    return session.complete_stream(request.content, apply_to_content=request.apply_to_content)


@router.delete("/{session_id}/messages", response_model=MessageListResponse)
async def clear_messages(session: EditorSession = Depends(get_session)) -> MessageListResponse:
    """Empty the chat; content and history are untouched"""
    session.chat.clear_messages()
    return _message_list(session)


@router.post("/{session_id}/stream")
async def chat_stream(
    request: StreamRequest,
    session: EditorSession = Depends(get_session),
):
    """Relay reply chunks into the session and report progress (SSE)"""

    async def chunk_source() -> AsyncIterator[str]:
        for chunk in request.chunks:
            yield chunk

    async def event_generator():
        try:
            async for update in relay_stream(session, chunk_source(), request.apply_to_content):
                if isinstance(update, StreamingMessage):
                    event = StreamEvent(type="content", content=update.content, message=update)
                else:
                    event = StreamEvent(
                        type="done",
                        done=True,
                        message=update.messages[-1],
                        metadata={
                            "session_id": session.session_id,
                            "past_length": update.history.past_length,
                        },
                    )
                yield {"event": "message", "data": event.model_dump_json()}

        except Exception as e:
            logger.exception("[Chat] Stream failed for session %s", session.session_id)
            event = StreamEvent(type="error", error=str(e))
            yield {"event": "message", "data": event.model_dump_json()}

    return EventSourceResponse(event_generator())
