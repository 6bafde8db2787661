"""Editor sessions that mirror one document across several editors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from textedit_history.diffing import SelectionRange, TextDiffPatch

from .channel import ACTION_CREATE, ActionChannel, ActionCreated
from .identity import EditorIdentity
from .records import EditRecord
from .stack import ActionStack


@dataclass(slots=True)
class EditorMirror:
    """Host-friendly snapshot of one editor."""

    text: str
    selection: SelectionRange


class EditorSession:
    """One live editor: its text, caret, and private action stack.

    Sessions never touch each other's stacks. ``link`` subscribes to a
    sibling's channel and replays every record it announces through this
    session's own ``record_external_edit``.
    """

    def __init__(
        self,
        identity: EditorIdentity,
        *,
        text: str = "",
        selection: Optional[SelectionRange] = None,
        channel: Optional[ActionChannel] = None,
        patcher: Optional[TextDiffPatch] = None,
        history_limit: Optional[int] = None,
    ) -> None:
        self.identity = identity
        self.text = text
        self.selection = selection or SelectionRange.caret(0)
        self.stack = ActionStack(
            identity,
            channel=channel,
            patcher=patcher,
            history_limit=history_limit,
        )

    @property
    def channel(self) -> ActionChannel:
        return self.stack.channel

    def mirror(self) -> EditorMirror:
        return EditorMirror(text=self.text, selection=self.selection)

    def load(self, text: str, selection: Optional[SelectionRange] = None) -> None:
        self.text = text
        self.selection = selection or SelectionRange.caret(0)
        self.stack.clear()

    def edit(self, text: str, selection: SelectionRange) -> Optional[EditRecord]:
        """Record the user's change from the current text to ``text``."""

        if text == self.text:
            self.selection = selection
            return None
        record = self.stack.record_local_edit(self.text, text, self.selection, selection)
        self.text = text
        self.selection = selection
        return record

    def undo(self) -> bool:
        result = self.stack.undo(self.text)
        if result is None:
            return False
        self.text, self.selection = result.text, result.selection
        return True

    def redo(self) -> bool:
        result = self.stack.redo(self.text)
        if result is None:
            return False
        self.text, self.selection = result.text, result.selection
        return True

    def apply_external(self, record: EditRecord) -> EditorMirror:
        replay = self.stack.record_external_edit(record, self.text, self.selection)
        self.text, self.selection = replay.text, replay.selection
        return self.mirror()

    def link(self, other: "EditorSession") -> None:
        """Follow every edit ``other`` announces."""

        if not other.channel.subscribed(ACTION_CREATE, self._on_sibling_action):
            other.channel.subscribe(ACTION_CREATE, self._on_sibling_action)

    def unlink(self, other: "EditorSession") -> None:
        other.channel.unsubscribe(ACTION_CREATE, self._on_sibling_action)

    def _on_sibling_action(self, payload: object) -> None:
        if not isinstance(payload, ActionCreated):
            return
        # A channel shared with siblings also carries this session's own records.
        if payload.record.editor_identity.equals(self.identity):
            return
        self.apply_external(payload.record)


def link_sessions(*sessions: EditorSession) -> None:
    """Link every pair of ``sessions`` both ways."""

    for session in sessions:
        for other in sessions:
            if other is not session:
                session.link(other)


__all__ = ["EditorMirror", "EditorSession", "link_sessions"]
