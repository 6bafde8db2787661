"""Reverse and replay edit records against text snapshots."""

from __future__ import annotations

from dataclasses import dataclass

from textedit_history.diffing import SelectionRange, TextDiffPatch

from .records import EditRecord


@dataclass(frozen=True, slots=True)
class ReplayResult:
    text: str
    selection: SelectionRange


def reverse_record(record: EditRecord, patcher: TextDiffPatch) -> EditRecord:
    """Return the record that undoes ``record``: selections swapped, changes inverted."""

    return EditRecord(
        editor_identity=record.editor_identity,
        selection_before=record.selection_after,
        selection_after=record.selection_before,
        changes=patcher.reverse(record.changes),
    )


def apply_record(record: EditRecord, text: str, patcher: TextDiffPatch) -> ReplayResult:
    return ReplayResult(
        text=patcher.apply(text, record.changes),
        selection=record.selection_after,
    )


__all__ = ["ReplayResult", "apply_record", "reverse_record"]
