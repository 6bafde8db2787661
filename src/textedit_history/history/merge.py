"""Decide whether a new edit folds into the previous undo step.

Only "simple" edits fold: a single change, a collapsed caret afterwards, the
same editor as the previous record, and a position contiguous with the
previous change. Runs of typing, backspace, or forward delete therefore undo
as one step, while find/replace, paste over a selection, or edits from a
sibling editor stay separate.

Contiguity is judged on change positions, not carets.

Changes made of newlines only never fold.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from textedit_history.diffing import ChangeKind, ChangeRecord

from .records import EditRecord

_NEWLINES_ONLY = re.compile(r"\n+")


class MergeAction(str, Enum):
    APPEND = "append"
    FOLD = "fold"


@dataclass(frozen=True, slots=True)
class MergeDecision:
    """``result`` is pushed on APPEND and replaces the undo top on FOLD."""

    action: MergeAction
    result: EditRecord


def _is_newlines(text: str) -> bool:
    return _NEWLINES_ONLY.fullmatch(text) is not None


def _combine(last: ChangeRecord, current: ChangeRecord) -> Optional[ChangeRecord]:
    if _is_newlines(last.text) or _is_newlines(current.text):
        return None

    if last.kind is ChangeKind.ADDED and current.kind is ChangeKind.ADDED:
        if current.position == last.end:
            return ChangeRecord(last.position, ChangeKind.ADDED, last.text + current.text)
        return None

    if last.kind is ChangeKind.REMOVED and current.kind is ChangeKind.REMOVED:
        # delete key: the text keeps sliding left into the same offset
        if current.position == last.position:
            return ChangeRecord(
                last.position, ChangeKind.REMOVED, last.text + current.text
            )
        # backspace: each removal sits right before the previous one
        if current.position == last.position - len(current.text):
            return ChangeRecord(
                current.position, ChangeKind.REMOVED, current.text + last.text
            )
        return None

    return None


def decide_merge(last: Optional[EditRecord], candidate: EditRecord) -> MergeDecision:
    append = MergeDecision(MergeAction.APPEND, candidate)
    if (
        last is None
        or len(candidate.changes) > 1
        or not candidate.selection_after.collapsed
        or not candidate.editor_identity.equals(last.editor_identity)
    ):
        return append

    combined = _combine(last.changes[-1], candidate.changes[0])
    if combined is None:
        return append

    folded = EditRecord(
        editor_identity=candidate.editor_identity,
        selection_before=last.selection_before,
        selection_after=candidate.selection_after,
        changes=last.changes[:-1] + (combined,),
    )
    return MergeDecision(MergeAction.FOLD, folded)


__all__ = ["MergeAction", "MergeDecision", "decide_merge"]
