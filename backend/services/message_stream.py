"""
Message Stream - Chat message list with a single in-flight streaming reply
"""

from __future__ import annotations

import logging

from models.chat import ChatMessage, FinalizedMessage, Role, StreamingMessage, now_ms

logger = logging.getLogger(__name__)


class NoMessageToReplaceError(LookupError):
    """Raised when finalizing a reply on an empty message list"""


class MessageStream:
    """Ordered chat messages; at most one StreamingMessage at any time"""

    def __init__(self):
        self._messages: list[ChatMessage] = []

    @property
    def messages(self) -> list[ChatMessage]:
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    @property
    def is_streaming(self) -> bool:
        return self.streaming_message() is not None

    def streaming_message(self) -> StreamingMessage | None:
        for message in self._messages:
            if isinstance(message, StreamingMessage):
                return message
        return None

    def _drop_abandoned_placeholder(self) -> None:
        """Remove a placeholder left behind by a stream that was never finalized"""
        kept = [m for m in self._messages if not isinstance(m, StreamingMessage)]
        if len(kept) != len(self._messages):
            logger.warning("[MessageStream] Dropping abandoned streaming placeholder")
            self._messages = kept

    def append_message(self, message: FinalizedMessage) -> list[ChatMessage]:
        """Append a fully-formed message"""
        if not isinstance(message, FinalizedMessage):
            raise TypeError("Use upsert_streaming_assistant() for in-flight replies")
        self._messages.append(message)
        return self.messages

    def upsert_streaming_assistant(self, partial_text: str) -> list[ChatMessage]:
        """Merge cumulative reply text into the streaming placeholder.

        Callers pass the whole text received so far, not a delta, so repeating
        the same call is harmless.
        """
        if self._messages and isinstance(self._messages[-1], StreamingMessage):
            self._messages[-1] = self._messages[-1].model_copy(update={"content": partial_text})
            return self.messages

        self._drop_abandoned_placeholder()
        self._messages.append(StreamingMessage(content=partial_text))
        return self.messages

    def replace_last_assistant_message(self, final_text: str) -> list[ChatMessage]:
        """Rewrite the last message as a finalized assistant reply with a fresh id.

        The last message is overwritten whatever its role. A user message sent
        after an abandoned stream is lost, so callers upsert the placeholder
        before finalizing (as `EditorSession.complete_stream` does).
        """
        if not self._messages:
            raise NoMessageToReplaceError("No message to finalize")
        if not isinstance(self._messages[-1], StreamingMessage):
            self._drop_abandoned_placeholder()
        self._messages[-1] = FinalizedMessage(
            role=Role.ASSISTANT,
            content=final_text,
            timestamp=now_ms(),
        )
        return self.messages

    def clear_messages(self) -> list[ChatMessage]:
        self._messages.clear()
        return self.messages

    def conversation_history(self) -> list[dict[str, str]]:
        """Finalized, non-empty messages as role/content pairs"""
        return [
            {"role": m.role.value, "content": m.content}
            for m in self._messages
            if isinstance(m, FinalizedMessage) and m.content.strip()
        ]
