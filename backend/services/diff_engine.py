"""
Diff Engine - Line-based minimal edit script between two content snapshots
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence

from models.diff import Hunk, HunkKind

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    """Split text into lines with terminators stripped (always at least one line)"""
    return _LINE_BREAK.split(text)


def _push(hunks: list[Hunk], kind: HunkKind, lines: Sequence[str]) -> None:
    """Append lines to the trailing hunk if it has the same kind"""
    if not lines:
        return
    if hunks and hunks[-1].kind is kind:
        hunks[-1].lines.extend(lines)
    else:
        hunks.append(Hunk(kind=kind, lines=list(lines)))


def _lcs_table(a: Sequence[str], b: Sequence[str]) -> list[list[int]]:
    """Suffix LCS lengths: table[i][j] = LCS(a[i:], b[j:])"""
    n, m = len(a), len(b)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        row, below = table[i], table[i + 1]
        for j in range(m - 1, -1, -1):
            if a[i] == b[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])
    return table


def compute_hunks(a: str, b: str) -> list[Hunk]:
    r"""Compute ordered context/remove/add hunks turning `a` into `b`.

    Alignment is a longest-common-subsequence over lines. Common leading and
    trailing runs are matched first, and inside every changed region the
    removed lines come before the added ones.

    Lines are split on `\r?\n`, so CRLF and LF inputs with the same text
    produce the same hunks. Terminators are not kept: `apply_hunks` joins with
    "\n" unless told otherwise.
    """
    if a == b:
        return [Hunk(kind=HunkKind.CONTEXT, lines=split_lines(a))] if a else []

    # An empty side contributes no lines, so "" -> "x" is a single add hunk
    a_lines = split_lines(a) if a else []
    b_lines = split_lines(b) if b else []
    n, m = len(a_lines), len(b_lines)

    prefix = 0
    while prefix < min(n, m) and a_lines[prefix] == b_lines[prefix]:
        prefix += 1
    suffix = 0
    while suffix < min(n, m) - prefix and a_lines[n - 1 - suffix] == b_lines[m - 1 - suffix]:
        suffix += 1

    a_mid = a_lines[prefix : n - suffix]
    b_mid = b_lines[prefix : m - suffix]
    table = _lcs_table(a_mid, b_mid)

    hunks: list[Hunk] = []
    _push(hunks, HunkKind.CONTEXT, a_lines[:prefix])

    removed: list[str] = []
    added: list[str] = []
    i = j = 0
    while i < len(a_mid) or j < len(b_mid):
        if i < len(a_mid) and j < len(b_mid) and a_mid[i] == b_mid[j]:
            _push(hunks, HunkKind.REMOVE, removed)
            _push(hunks, HunkKind.ADD, added)
            removed, added = [], []
            _push(hunks, HunkKind.CONTEXT, [a_mid[i]])
            i += 1
            j += 1
        elif j == len(b_mid) or (i < len(a_mid) and table[i + 1][j] >= table[i][j + 1]):
            removed.append(a_mid[i])
            i += 1
        else:
            added.append(b_mid[j])
            j += 1

    _push(hunks, HunkKind.REMOVE, removed)
    _push(hunks, HunkKind.ADD, added)
    _push(hunks, HunkKind.CONTEXT, a_lines[n - suffix :])
    return hunks


def apply_hunks(
    hunks: Sequence[Hunk],
    accept: Callable[[int], bool] | None = None,
    newline: str = "\n",
) -> str:
    r"""Rebuild the target text from hunks.

    `accept` receives the index of each changed region (a run of remove/add
    hunks between context) and decides whether it is applied. Rejected
    regions keep their removed lines and drop their added ones. Pass
    `newline="\r\n"` to rebuild a CRLF document byte for byte.
    """
    lines: list[str] = []
    region = -1
    in_region = False
    for hunk in hunks:
        if hunk.kind is HunkKind.CONTEXT:
            in_region = False
            lines.extend(hunk.lines)
            continue
        if not in_region:
            region += 1
            in_region = True
        applied = accept is None or accept(region)
        if (hunk.kind is HunkKind.ADD) == applied:
            lines.extend(hunk.lines)
    return newline.join(lines)


def count_changes(hunks: Sequence[Hunk]) -> tuple[int, int]:
    """Return (additions, deletions) line counts"""
    additions = sum(len(h.lines) for h in hunks if h.kind is HunkKind.ADD)
    deletions = sum(len(h.lines) for h in hunks if h.kind is HunkKind.REMOVE)
    return additions, deletions
