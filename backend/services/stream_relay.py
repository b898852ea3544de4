"""
Stream Relay - Merge incrementally arriving reply chunks into one chat entry
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable, AsyncIterator

from models.chat import StreamingMessage
from models.session import SessionState

from .editor_session import EditorSession

logger = logging.getLogger(__name__)


async def relay_stream(
    session: EditorSession,
    chunks: AsyncIterable[str],
    apply_to_content: bool | None = None,
) -> AsyncIterator[StreamingMessage | SessionState]:
    """Feed chunk deltas into the session's streaming placeholder.

    Yields the placeholder after every non-empty chunk and, once the source is
    exhausted, the session state after finalization. If the source fails or
    the consumer is cancelled the placeholder is left in place and the error
    propagates; the next stream or an explicit clear replaces it.
    """
    full_content = ""
    async for chunk in chunks:
        if not chunk:
            continue
        full_content += chunk
        messages = session.chat.upsert_streaming_assistant(full_content)
        yield messages[-1]

    logger.info(
        "[StreamRelay] %s: stream complete (length: %d chars)", session.session_id, len(full_content)
    )
    yield session.complete_stream(full_content, apply_to_content=apply_to_content)
