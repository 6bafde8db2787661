"""Diffing, patching, and selection adjustment collaborators."""

from .changes import ChangeKind, ChangeRecord, SelectionRange
from .cursor import adjust_selection
from .patch import Changes, PatchError, TextDiffPatch

__all__ = [
    "ChangeKind",
    "ChangeRecord",
    "Changes",
    "PatchError",
    "SelectionRange",
    "TextDiffPatch",
    "adjust_selection",
]
