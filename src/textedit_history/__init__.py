"""Undo/redo history for text editors that mirror one document."""

from .diffing import ChangeKind, ChangeRecord, PatchError, SelectionRange, TextDiffPatch
from .history import (
    ACTION_CREATE,
    ActionChannel,
    ActionCreated,
    ActionKind,
    ActionStack,
    EditorIdentity,
    EditorSession,
    EditRecord,
    InvariantViolation,
    NamedEditorIdentity,
)

__all__ = [
    "ACTION_CREATE",
    "ActionChannel",
    "ActionCreated",
    "ActionKind",
    "ActionStack",
    "ChangeKind",
    "ChangeRecord",
    "EditRecord",
    "EditorIdentity",
    "EditorSession",
    "InvariantViolation",
    "NamedEditorIdentity",
    "PatchError",
    "SelectionRange",
    "TextDiffPatch",
]

__version__ = "0.1.0"
