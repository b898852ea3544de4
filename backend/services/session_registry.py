"""
Session Registry - In-memory editor sessions keyed by id
"""

from __future__ import annotations

import logging

from .diff_generator import DiffGenerator
from .editor_session import EditorSession
from .history_store import DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)


class SessionRegistry:
    """Holds the editor sessions served by one application instance"""

    def __init__(self, max_depth: int | None = DEFAULT_MAX_DEPTH, context_size: int = 2):
        self.max_depth = max_depth
        self.context_size = context_size
        self._sessions: dict[str, EditorSession] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def create(self, session_id: str | None = None) -> EditorSession:
        session = EditorSession(
            session_id=session_id,
            max_depth=self.max_depth,
            diff_generator=DiffGenerator(self.context_size),
        )
        self._sessions[session.session_id] = session
        logger.info("[SessionRegistry] Created session %s", session.session_id)
        return session

    def get(self, session_id: str) -> EditorSession | None:
        return self._sessions.get(session_id)

    def get_or_create(self, session_id: str) -> EditorSession:
        return self._sessions.get(session_id) or self.create(session_id)

    def drop(self, session_id: str) -> bool:
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.clear()
        logger.info("[SessionRegistry] Dropped session %s", session_id)
        return True
