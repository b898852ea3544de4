"""
Editor Session - Document history and chat messages of one editing session
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable

from models.chat import ChatMessage, StreamingMessage
from models.diff import DiffResult
from models.session import SessionState

from .diff_engine import apply_hunks, compute_hunks
from .diff_generator import DiffGenerator
from .history_store import DEFAULT_MAX_DEPTH, HistoryStore
from .message_stream import MessageStream

logger = logging.getLogger(__name__)


def looks_like_site_document(text: str) -> bool:
    """True when an assistant reply is a complete HTML page"""
    return "<!DOCTYPE html>" in text or ("<html" in text and "</html>" in text)


class EditorSession:
    """Owns one HistoryStore and one MessageStream.

    The two are independent: clearing messages leaves content and history
    alone, and undo/redo never touch the chat.
    """

    def __init__(
        self,
        session_id: str | None = None,
        max_depth: int | None = DEFAULT_MAX_DEPTH,
        diff_generator: DiffGenerator | None = None,
    ):
        self.session_id = session_id or str(uuid.uuid4())
        self.history = HistoryStore(max_depth=max_depth)
        self.chat = MessageStream()
        self.diff_generator = diff_generator or DiffGenerator()

    @property
    def messages(self) -> list[ChatMessage]:
        return self.chat.messages

    def state(self) -> SessionState:
        return SessionState(
            session_id=self.session_id,
            history=self.history.view(),
            messages=self.chat.messages,
        )

    def clear(self) -> SessionState:
        """Reset content, history and messages (new document)"""
        self.history.clear()
        self.chat.clear_messages()
        return self.state()

    def complete_stream(self, final_text: str, apply_to_content: bool | None = None) -> SessionState:
        """Finalize the in-flight reply, then optionally commit it as content.

        A reply that never streamed gets a placeholder first so finalization
        always rewrites an assistant entry. With `apply_to_content` left as
        None the reply is applied only when it is a full site document.
        """
        last = self.chat.messages[-1] if len(self.chat) else None
        if not isinstance(last, StreamingMessage):
            self.chat.upsert_streaming_assistant(final_text)
        self.chat.replace_last_assistant_message(final_text)

        if apply_to_content is None:
            apply_to_content = looks_like_site_document(final_text)
        if apply_to_content:
            logger.info("[EditorSession] %s: committing assistant reply as content", self.session_id)
            self.history.set_content(final_text)
            self.history.commit()
        return self.state()

    def _base_content(self, base: int | None) -> str:
        if base is None:
            return self.history.previous_content()
        return self.history.snapshot_at(base).content

    def diff(self, base: int | None = None, context_size: int | None = None) -> DiffResult:
        """Diff a past snapshot (default: what undo would restore) against current content"""
        original = self._base_content(base)
        return self.diff_generator.generate_diff(original, self.history.content, context_size)

    def apply_review(self, accepted: Iterable[int], base: int | None = None) -> SessionState:
        """Keep only the accepted changed regions of the current content.

        Regions are numbered as in `diff()` against the same `base`. Rejected
        regions fall back to the base text. When anything was rejected the
        result replaces the content and is committed as a new undo point.
        """
        accepted = set(accepted)
        hunks = compute_hunks(self._base_content(base), self.history.content)
        reviewed = apply_hunks(hunks, accept=accepted.__contains__)
        if reviewed != apply_hunks(hunks):
            logger.info("[EditorSession] %s: review kept regions %s", self.session_id, sorted(accepted))
            self.history.set_content(reviewed)
            self.history.commit()
        return self.state()
