from __future__ import annotations

from textedit_history.diffing import SelectionRange
from textedit_history.history import (
    ActionChannel,
    ActionKind,
    EditorSession,
    NamedEditorIdentity,
    link_sessions,
)


def caret(offset: int) -> SelectionRange:
    return SelectionRange.caret(offset)


def make_pair(text: str = "") -> tuple[EditorSession, EditorSession]:
    left = EditorSession(NamedEditorIdentity("left"), text=text)
    right = EditorSession(NamedEditorIdentity("right"), text=text)
    link_sessions(left, right)
    return left, right


def test_local_edit_reaches_sibling() -> None:
    left, right = make_pair()

    left.edit("a", caret(1))
    left.edit("ab", caret(2))

    assert right.text == "ab"
    assert len(left.stack.undo_history) == 1
    assert len(right.stack.undo_history) == 2


def test_sibling_caret_follows_text() -> None:
    left, right = make_pair("world")
    right.selection = caret(5)

    left.edit("hello world", caret(6))

    assert right.mirror().selection == caret(11)


def test_undo_is_mirrored() -> None:
    left, right = make_pair()
    left.edit("abc", caret(3))
    right.edit("abc!", caret(4))

    assert left.undo() is True

    assert left.text == right.text == "abc"
    assert right.stack.undo_history[-1].changes[0].text == "!"


def test_undo_and_redo_keep_sessions_converged() -> None:
    left, right = make_pair("draft")
    left.edit("draft one", caret(9))
    right.edit("a draft one", caret(2))

    assert right.undo() is True
    assert left.text == right.text == "draft one"

    assert right.redo() is True
    assert left.text == right.text == "a draft one"


def test_unchanged_text_records_nothing() -> None:
    left, right = make_pair("same")

    assert left.edit("same", caret(2)) is None
    assert left.selection == caret(2)
    assert not left.stack.can_undo
    assert not right.stack.can_undo


def test_empty_history_undo_returns_false() -> None:
    session = EditorSession(NamedEditorIdentity("solo"))

    assert session.undo() is False
    assert session.redo() is False


def test_load_resets_history() -> None:
    session = EditorSession(NamedEditorIdentity("solo"))
    session.edit("x", caret(1))

    session.load("fresh")

    assert session.text == "fresh"
    assert session.selection == caret(0)
    assert not session.stack.can_undo


def test_unlink_stops_mirroring() -> None:
    left, right = make_pair()
    right.unlink(left)

    left.edit("a", caret(1))

    assert right.text == ""


def test_restore_notifications_reach_subscribers() -> None:
    session = EditorSession(NamedEditorIdentity("solo"))
    kinds = []
    session.channel.subscribe("action.create", lambda payload: kinds.append(payload.kind))

    session.edit("x", caret(1))
    session.undo()
    session.redo()

    assert kinds == [ActionKind.UPDATE, ActionKind.RESTORE, ActionKind.RESTORE]


def test_shared_channel_does_not_replay_own_edits() -> None:
    bus = ActionChannel()
    left = EditorSession(NamedEditorIdentity("left"), channel=bus)
    right = EditorSession(NamedEditorIdentity("right"), channel=bus)
    link_sessions(left, right)

    left.edit("a", caret(1))

    assert len(left.stack.undo_history) == 1
    assert len(right.stack.undo_history) == 1
    assert right.text == "a"

    assert left.undo() is True
    assert left.text == right.text == ""
    assert not left.stack.can_undo


def test_shared_channel_subscribes_each_session_once() -> None:
    bus = ActionChannel()
    sessions = [
        EditorSession(NamedEditorIdentity(name), channel=bus)
        for name in ("one", "two", "three")
    ]
    link_sessions(*sessions)

    sessions[0].edit("x", caret(1))

    assert [len(s.stack.undo_history) for s in sessions] == [1, 1, 1]
    assert [s.text for s in sessions] == ["x", "x", "x"]


def test_new_session_caret_matches_load() -> None:
    opened = EditorSession(NamedEditorIdentity("solo"), text="fresh")
    reloaded = EditorSession(NamedEditorIdentity("solo"))
    reloaded.load("fresh")

    assert opened.selection == reloaded.selection == caret(0)
