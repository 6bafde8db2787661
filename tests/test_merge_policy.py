from __future__ import annotations

from textedit_history.diffing import ChangeKind, ChangeRecord, SelectionRange
from textedit_history.history import (
    MergeAction,
    NamedEditorIdentity,
    decide_merge,
    make_edit_record,
)

EDITOR = NamedEditorIdentity("left")
OTHER = NamedEditorIdentity("right")


def caret(offset: int) -> SelectionRange:
    return SelectionRange.caret(offset)


def added(position: int, text: str) -> ChangeRecord:
    return ChangeRecord(position, ChangeKind.ADDED, text)


def removed(position: int, text: str) -> ChangeRecord:
    return ChangeRecord(position, ChangeKind.REMOVED, text)


def record(*changes: ChangeRecord, before: int = 0, after: int = 0, identity=EDITOR):
    return make_edit_record(identity, caret(before), caret(after), changes)


def test_first_record_is_appended() -> None:
    candidate = record(added(0, "a"), after=1)

    decision = decide_merge(None, candidate)

    assert decision.action is MergeAction.APPEND
    assert decision.result is candidate


def test_contiguous_insertions_fold() -> None:
    last = record(added(1, "b"), before=1, after=2)
    candidate = record(added(2, "d"), before=2, after=3)

    decision = decide_merge(last, candidate)

    assert decision.action is MergeAction.FOLD
    assert decision.result.changes == (added(1, "bd"),)
    assert decision.result.selection_before == caret(1)
    assert decision.result.selection_after == caret(3)


def test_gap_between_insertions_appends() -> None:
    last = record(added(0, "a"), after=1)
    candidate = record(added(5, "b"), before=5, after=6)

    assert decide_merge(last, candidate).action is MergeAction.APPEND


def test_forward_delete_folds_at_same_offset() -> None:
    last = record(removed(0, "a"), before=0, after=0)
    candidate = record(removed(0, "b"))

    decision = decide_merge(last, candidate)

    assert decision.action is MergeAction.FOLD
    assert decision.result.changes == (removed(0, "ab"),)


def test_backspace_folds_before_previous_removal() -> None:
    last = record(removed(2, "c"), before=3, after=2)
    candidate = record(removed(1, "b"), before=2, after=1)

    decision = decide_merge(last, candidate)

    assert decision.action is MergeAction.FOLD
    assert decision.result.changes == (removed(1, "bc"),)
    assert decision.result.selection_before == caret(3)
    assert decision.result.selection_after == caret(1)


def test_unrelated_removal_appends() -> None:
    last = record(removed(4, "x"))
    candidate = record(removed(1, "y"))

    assert decide_merge(last, candidate).action is MergeAction.APPEND


def test_mixed_kinds_append() -> None:
    last = record(added(0, "a"), after=1)
    candidate = record(removed(0, "a"))

    assert decide_merge(last, candidate).action is MergeAction.APPEND


def test_different_editors_never_fold() -> None:
    last = record(added(0, "a"), after=1, identity=OTHER)
    candidate = record(added(1, "b"), before=1, after=2)

    assert decide_merge(last, candidate).action is MergeAction.APPEND


def test_newline_insertions_never_fold() -> None:
    after_newline = record(added(2, "b"), before=2, after=3)
    newline = record(added(1, "\n"), before=1, after=2)
    typed = record(added(0, "a"), after=1)

    assert decide_merge(typed, newline).action is MergeAction.APPEND
    assert decide_merge(newline, after_newline).action is MergeAction.APPEND


def test_text_with_embedded_newline_still_folds() -> None:
    last = record(added(0, "a\nb"), after=3)
    candidate = record(added(3, "c"), before=3, after=4)

    assert decide_merge(last, candidate).action is MergeAction.FOLD


def test_multi_change_candidate_appends() -> None:
    last = record(added(0, "a"), after=1)
    candidate = record(added(1, "b"), added(5, "b"), before=1, after=2)

    assert decide_merge(last, candidate).action is MergeAction.APPEND


def test_expanded_selection_appends() -> None:
    last = record(added(0, "a"), after=1)
    candidate = make_edit_record(EDITOR, caret(1), SelectionRange(1, 2), (added(1, "b"),))

    assert decide_merge(last, candidate).action is MergeAction.APPEND


def test_fold_keeps_earlier_changes_of_previous_record() -> None:
    last = record(removed(0, "x"), added(3, "a"), after=4)
    candidate = record(added(4, "b"), before=4, after=5)

    decision = decide_merge(last, candidate)

    assert decision.action is MergeAction.FOLD
    assert decision.result.changes == (removed(0, "x"), added(3, "ab"))
