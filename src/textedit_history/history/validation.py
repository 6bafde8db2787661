"""Invariant checks shared by record construction and the stack."""

from __future__ import annotations

from typing import Iterable, Tuple

from textedit_history.diffing import ChangeRecord


class InvariantViolation(RuntimeError):
    """Raised when an edit record would be built from an empty change list."""

    def __init__(self, message: str, *, changes: Tuple[ChangeRecord, ...] = ()) -> None:
        super().__init__(message)
        self.changes = changes


def ensure_changes(changes: Iterable[ChangeRecord]) -> Tuple[ChangeRecord, ...]:
    normalized = tuple(changes)
    if not normalized:
        raise InvariantViolation("edit record requires at least one change")
    return normalized


__all__ = ["InvariantViolation", "ensure_changes"]
