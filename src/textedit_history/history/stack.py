"""Undo/redo action stack for one editor instance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from textedit_history.diffing import (
    ChangeRecord,
    SelectionRange,
    TextDiffPatch,
    adjust_selection,
)
from textedit_history.runtime import telemetry
from textedit_history.runtime.settings import load_settings

from .channel import ACTION_CREATE, ActionChannel, ActionCreated
from .identity import EditorIdentity
from .merge import MergeAction, decide_merge
from .records import ActionKind, EditRecord, make_edit_record
from .replay import ReplayResult, apply_record, reverse_record

SelectionPatch = Callable[[SelectionRange, Iterable[ChangeRecord]], SelectionRange]


@dataclass(frozen=True, slots=True)
class RestoreResult:
    """Outcome of ``undo``/``redo``: the new snapshot and the record replayed."""

    text: str
    selection: SelectionRange
    record: EditRecord


class ActionStack:
    """Stores edits as change records (not full text) for undo and redo.

    Local edits are diffed, announced on ``channel`` as ``action.create`` and
    folded into the previous step when ``decide_merge`` allows it. Edits
    relayed from sibling editors go through ``record_external_edit`` and are
    stored as received. ``clear`` should be called whenever the editor loads
    fresh content, starts a new document, or rolls its content back.
    """

    def __init__(
        self,
        editor_identity: EditorIdentity,
        *,
        channel: Optional[ActionChannel] = None,
        patcher: Optional[TextDiffPatch] = None,
        selection_patch: SelectionPatch = adjust_selection,
        history_limit: Optional[int] = None,
        logger_name: str | None = None,
    ) -> None:
        if history_limit is None or patcher is None:
            settings = load_settings()
            if history_limit is None:
                history_limit = settings.history_limit
            if patcher is None:
                patcher = TextDiffPatch(timeout=settings.diff_timeout)
        if history_limit is not None and history_limit <= 0:
            raise ValueError("history_limit must be positive")

        self.editor_identity = editor_identity
        self.channel = channel or ActionChannel()
        self.patcher = patcher
        self.selection_patch = selection_patch
        self.history_limit = history_limit
        self._logger_name = logger_name
        self._undo: List[EditRecord] = []
        self._redo: List[EditRecord] = []

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_history(self) -> Tuple[EditRecord, ...]:
        return tuple(self._undo)

    @property
    def redo_history(self) -> Tuple[EditRecord, ...]:
        return tuple(self._redo)

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()
        telemetry.record_event("history.clear", level="debug", logger_name=self._logger_name)

    def record_local_edit(
        self,
        last_text: str,
        text: str,
        selection_before: SelectionRange,
        selection_after: SelectionRange,
    ) -> EditRecord:
        """Diff two snapshots of this editor and record the result.

        The texts must differ; identical snapshots raise ``InvariantViolation``.
        """

        with telemetry.span(
            "history::record",
            logger_name=self._logger_name,
            component="history",
            metadata={"length_before": len(last_text), "length_after": len(text)},
        ) as handle:
            changes = self.patcher.diff(last_text, text)
            handle.note("changes", len(changes))
            record = self.record_changes(changes, selection_before, selection_after)
            handle.note("depth", len(self._undo))
            return record

    def record_changes(
        self,
        changes: Iterable[ChangeRecord],
        selection_before: SelectionRange,
        selection_after: SelectionRange,
    ) -> EditRecord:
        """Record an edit whose change sequence the caller already knows."""

        candidate = make_edit_record(
            self.editor_identity, selection_before, selection_after, changes
        )
        self.channel.emit(ACTION_CREATE, ActionCreated(ActionKind.UPDATE, candidate))

        decision = decide_merge(self._undo[-1] if self._undo else None, candidate)
        if decision.action is MergeAction.FOLD:
            self._undo[-1] = decision.result
        else:
            self._push_undo(decision.result)
        self._redo.clear()
        telemetry.record_event(
            f"history.{decision.action.value}",
            level="debug",
            data={"depth": len(self._undo), "changes": len(decision.result.changes)},
            logger_name=self._logger_name,
        )
        return candidate

    def record_external_edit(
        self,
        record: EditRecord,
        last_text: str,
        last_selection: SelectionRange,
    ) -> ReplayResult:
        """Store an edit relayed from a sibling editor and replay it locally.

        The record is kept as received: no folding, no identity re-stamp, and
        the redo history is left alone. ``last_selection`` is shifted by the
        change sequence so the local caret follows the text around it.
        """

        text = self.patcher.apply(last_text, record.changes)
        selection = self.selection_patch(last_selection, record.changes)
        self._push_undo(record)
        telemetry.record_event(
            "history.external",
            level="debug",
            data={"depth": len(self._undo), "changes": len(record.changes)},
            logger_name=self._logger_name,
        )
        return ReplayResult(text=text, selection=selection)

    def undo(self, current_text: str) -> Optional[RestoreResult]:
        if not self.can_undo:
            return None

        with telemetry.span(
            "history::undo",
            logger_name=self._logger_name,
            component="history",
            metadata={"depth": len(self._undo)},
        ) as handle:
            record = self._undo[-1].restamp(self.editor_identity)
            handle.note("changes", len(record.changes))
            reversal = reverse_record(record, self.patcher)
            result = self._replay(reversal, current_text)
            self._undo.pop()
            self._redo.append(record)
            self.channel.emit(ACTION_CREATE, ActionCreated(ActionKind.RESTORE, reversal))
            return result

    def redo(self, current_text: str) -> Optional[RestoreResult]:
        if not self.can_redo:
            return None

        with telemetry.span(
            "history::redo",
            logger_name=self._logger_name,
            component="history",
            metadata={"depth": len(self._redo)},
        ) as handle:
            record = self._redo[-1].restamp(self.editor_identity)
            handle.note("changes", len(record.changes))
            result = self._replay(record, current_text)
            self._redo.pop()
            self._push_undo(record)
            self.channel.emit(ACTION_CREATE, ActionCreated(ActionKind.RESTORE, record))
            return result

    def _replay(self, record: EditRecord, current_text: str) -> RestoreResult:
        # Raises PatchError before any history is touched.
        replay = apply_record(record, current_text, self.patcher)
        return RestoreResult(text=replay.text, selection=replay.selection, record=record)

    def _push_undo(self, record: EditRecord) -> None:
        self._undo.append(record)
        if self.history_limit is not None and len(self._undo) > self.history_limit:
            dropped = len(self._undo) - self.history_limit
            del self._undo[:dropped]
            telemetry.record_event(
                "history.trim",
                level="debug",
                data={"dropped": dropped},
                logger_name=self._logger_name,
            )


__all__ = ["ActionStack", "RestoreResult", "SelectionPatch"]
