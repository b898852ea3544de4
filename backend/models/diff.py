"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class HunkKind(str, Enum):
    """Classification of a run of lines in a diff"""

    CONTEXT = "context"
    ADD = "add"
    REMOVE = "remove"


class Hunk(BaseModel):
    """A maximal run of lines sharing one classification"""

    kind: HunkKind
    lines: list[str]


class LabeledLine(BaseModel):
    """A single line in a side-by-side block"""

    type: HunkKind
    text: str


class InlineBlock(BaseModel):
    """Side-by-side grouping of one or more changed regions"""

    left: list[LabeledLine] = []  # context + remove
    right: list[LabeledLine] = []  # context + add


class DiffRequest(BaseModel):
    """Request to diff two arbitrary texts"""

    original: str
    modified: str
    context_size: int = 2


class DiffResult(BaseModel):
    """Complete diff result between two snapshots"""

    hunks: list[Hunk]
    blocks: list[InlineBlock]
    additions: int
    deletions: int
