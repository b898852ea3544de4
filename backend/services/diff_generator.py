"""
Diff Generator Service - Structured diffs for change review
"""

from __future__ import annotations

from models.diff import DiffResult

from .diff_engine import compute_hunks, count_changes
from .inline_blocks import build_inline_blocks

DEFAULT_CONTEXT_SIZE = 2


class DiffGenerator:
    """Generate hunks and side-by-side blocks between two snapshots"""

    def __init__(self, context_size: int = DEFAULT_CONTEXT_SIZE):
        self.context_size = context_size

    def generate_diff(
        self,
        original_content: str,
        new_content: str,
        context_size: int | None = None,
    ) -> DiffResult:
        """Generate structured diff from original and new content"""
        if context_size is None:
            context_size = self.context_size

        hunks = compute_hunks(original_content, new_content)
        additions, deletions = count_changes(hunks)

        return DiffResult(
            hunks=hunks,
            blocks=build_inline_blocks(original_content, hunks, context_size),
            additions=additions,
            deletions=deletions,
        )
