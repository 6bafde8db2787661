"""Selection adjustment for changes made elsewhere in the document."""

from __future__ import annotations

from typing import Iterable

from .changes import ChangeKind, ChangeRecord, SelectionRange


def _shift(offset: int, change: ChangeRecord) -> int:
    size = len(change.text)
    if change.kind is ChangeKind.ADDED:
        # A caret sitting exactly at the insertion point stays in front of it.
        return offset + size if offset > change.position else offset
    if offset >= change.end:
        return offset - size
    return min(offset, change.position)


def adjust_selection(
    selection: SelectionRange, changes: Iterable[ChangeRecord]
) -> SelectionRange:
    """Return ``selection`` as it reads after ``changes`` were applied in order."""

    start, end = selection.start, selection.end
    for change in changes:
        start = _shift(start, change)
        end = _shift(end, change)
    return SelectionRange(start, end)


__all__ = ["adjust_selection"]
