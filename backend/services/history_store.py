"""
History Store - Committed content snapshots with undo/redo stack discipline
"""

from __future__ import annotations

import logging

from models.chat import now_ms
from models.session import HistoryView, Snapshot

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 100


class HistoryStore:
    """Current content plus undo ("past") and redo ("future") stacks.

    `past` is ordered oldest to newest and its top is the most recent commit.
    `future` is ordered nearest-undo first. Snapshots are frozen, so only stack
    membership ever changes.

    With `max_depth` set, `len(past) + len(future)` never exceeds it: a commit
    that overflows evicts the oldest snapshot, which becomes the floor that
    `undo()` falls back to once `past` is exhausted.
    """

    def __init__(self, max_depth: int | None = DEFAULT_MAX_DEPTH):
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.max_depth = max_depth or None
        self.content = ""
        self.past: list[Snapshot] = []
        self.future: list[Snapshot] = []
        self.last_updated_at: int | None = None
        self._floor = ""

    @property
    def can_undo(self) -> bool:
        return bool(self.past)

    @property
    def can_redo(self) -> bool:
        return bool(self.future)

    def _touch(self) -> HistoryView:
        self.last_updated_at = now_ms()
        return self.view()

    def view(self) -> HistoryView:
        return HistoryView(
            content=self.content,
            past_length=len(self.past),
            future_length=len(self.future),
            can_undo=self.can_undo,
            can_redo=self.can_redo,
            last_updated_at=self.last_updated_at,
        )

    def set_content(self, text: str) -> HistoryView:
        """Replace content without creating a snapshot"""
        self.content = text
        return self._touch()

    def commit(self) -> HistoryView:
        """Snapshot the current content and invalidate redo"""
        self.past.append(Snapshot(content=self.content))
        self.future.clear()
        if self.max_depth is not None and len(self.past) > self.max_depth:
            evicted = self.past.pop(0)
            self._floor = evicted.content
            logger.debug("[HistoryStore] Evicted oldest snapshot (max_depth=%d)", self.max_depth)
        return self._touch()

    def previous_content(self) -> str:
        """Content that undo() would restore"""
        return self.past[-2].content if len(self.past) > 1 else self._floor

    def undo(self) -> HistoryView:
        if not self.past:
            return self.view()
        restored = self.previous_content()
        self.past.pop()
        self.future.insert(0, Snapshot(content=self.content))
        self.content = restored
        return self._touch()

    def redo(self) -> HistoryView:
        if not self.future:
            return self.view()
        snapshot = self.future.pop(0)
        self.past.append(snapshot)
        self.content = snapshot.content
        return self._touch()

    def snapshot_at(self, index: int) -> Snapshot:
        """Snapshot from `past` by position (negative indexes count from newest)"""
        return self.past[index]

    def clear(self) -> HistoryView:
        self.content = ""
        self.past.clear()
        self.future.clear()
        self._floor = ""
        return self._touch()
