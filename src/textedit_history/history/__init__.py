"""Edit records, merge policy, and the undo/redo action stack."""

from .channel import ACTION_CREATE, ActionChannel, ActionCreated
from .identity import EditorIdentity, NamedEditorIdentity
from .merge import MergeAction, MergeDecision, decide_merge
from .records import ActionKind, EditRecord, make_edit_record
from .replay import ReplayResult, apply_record, reverse_record
from .stack import ActionStack, RestoreResult
from .sync import EditorMirror, EditorSession, link_sessions
from .validation import InvariantViolation, ensure_changes

__all__ = [
    "ACTION_CREATE",
    "ActionChannel",
    "ActionCreated",
    "ActionKind",
    "ActionStack",
    "EditRecord",
    "EditorIdentity",
    "EditorMirror",
    "EditorSession",
    "InvariantViolation",
    "MergeAction",
    "MergeDecision",
    "NamedEditorIdentity",
    "ReplayResult",
    "RestoreResult",
    "apply_record",
    "decide_merge",
    "ensure_changes",
    "link_sessions",
    "make_edit_record",
    "reverse_record",
]
