"""
Inline Block Builder - Group diff hunks into side-by-side review blocks
"""

from __future__ import annotations

from collections.abc import Sequence

from models.diff import Hunk, HunkKind, InlineBlock, LabeledLine


def _add_context(block: InlineBlock, lines: Sequence[str]) -> None:
    for text in lines:
        block.left.append(LabeledLine(type=HunkKind.CONTEXT, text=text))
        block.right.append(LabeledLine(type=HunkKind.CONTEXT, text=text))


def _head(lines: list[str], count: int) -> list[str]:
    return lines[:count] if count else []


def _tail(lines: list[str], count: int) -> list[str]:
    # lines[-0:] would return everything
    return lines[-count:] if count else []


def build_inline_blocks(
    original: str,
    hunks: Sequence[Hunk],
    context_size: int = 2,
) -> list[InlineBlock]:
    """Build side-by-side blocks from hunks computed against `original`.

    Each changed region is padded with up to `context_size` context lines on
    both sides. Two regions share a block unless the context between them is
    longer than `2 * context_size`. Hunks carry their own lines, so
    `original` is not re-split here.
    """
    if context_size < 0:
        raise ValueError(f"context_size must be non-negative, got {context_size}")
    if all(h.kind is HunkKind.CONTEXT for h in hunks):
        return []

    blocks: list[InlineBlock] = []
    block = InlineBlock()
    gap: list[str] = []  # context lines since the last changed region
    seen_change = False

    for hunk in hunks:
        if hunk.kind is HunkKind.CONTEXT:
            gap.extend(hunk.lines)
            continue

        if not seen_change:
            _add_context(block, _tail(gap, context_size))
        elif len(gap) > 2 * context_size:
            _add_context(block, _head(gap, context_size))
            blocks.append(block)
            block = InlineBlock()
            _add_context(block, _tail(gap, context_size))
        else:
            _add_context(block, gap)
        gap = []
        seen_change = True

        if hunk.kind is HunkKind.REMOVE:
            block.left.extend(LabeledLine(type=HunkKind.REMOVE, text=t) for t in hunk.lines)
        else:
            block.right.extend(LabeledLine(type=HunkKind.ADD, text=t) for t in hunk.lines)

    _add_context(block, _head(gap, context_size))
    blocks.append(block)
    return blocks
