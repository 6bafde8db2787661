"""Edit records: the unit stored in undo and redo history."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Tuple

from textedit_history.diffing import ChangeKind, ChangeRecord, SelectionRange

from .identity import EditorIdentity
from .validation import ensure_changes


class ActionKind(str, Enum):
    """Why an ``action.create`` notification was emitted."""

    UPDATE = "update"  # typed, pasted, auto-completed in this editor
    RESTORE = "restore"  # produced by undo or redo


@dataclass(frozen=True, slots=True)
class EditRecord:
    """Immutable, reversible description of one text edit."""

    editor_identity: EditorIdentity
    selection_before: SelectionRange
    selection_after: SelectionRange
    changes: Tuple[ChangeRecord, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "changes", ensure_changes(self.changes))

    def restamp(self, identity: EditorIdentity) -> "EditRecord":
        """Return the same edit attributed to ``identity``."""

        return replace(self, editor_identity=identity)


def make_edit_record(
    identity: EditorIdentity,
    selection_before: SelectionRange,
    selection_after: SelectionRange,
    changes: Iterable[ChangeRecord],
) -> EditRecord:
    return EditRecord(
        editor_identity=identity,
        selection_before=selection_before,
        selection_after=selection_after,
        changes=tuple(changes),
    )


__all__ = [
    "ActionKind",
    "ChangeKind",
    "ChangeRecord",
    "EditRecord",
    "SelectionRange",
    "make_edit_record",
]
