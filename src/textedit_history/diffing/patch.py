"""Text diff/patch engine producing ordered ``ChangeRecord`` sequences."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from diff_match_patch import diff_match_patch

from .changes import ChangeKind, ChangeRecord

Changes = Tuple[ChangeRecord, ...]


class PatchError(ValueError):
    """Raised when a change does not fit the text it is applied to."""

    def __init__(self, message: str, *, change: ChangeRecord | None = None) -> None:
        super().__init__(message)
        self.change = change


class TextDiffPatch:
    """Character-level diffing on top of diff-match-patch.

    ``diff`` walks the diff operations while tracking the offset inside the
    partially patched text: equal runs advance the offset, insertions are
    recorded at the offset and then advance it, deletions are recorded at the
    offset and leave it in place. The resulting sequence therefore replays
    left to right with ``apply``.
    """

    def __init__(self, *, timeout: Optional[float] = None) -> None:
        self._engine = diff_match_patch()
        if timeout is not None:
            self._engine.Diff_Timeout = timeout

    @property
    def timeout(self) -> float:
        return self._engine.Diff_Timeout

    def diff(self, old_text: str, new_text: str) -> Changes:
        changes: list[ChangeRecord] = []
        offset = 0
        for op, chunk in self._engine.diff_main(old_text, new_text, False):
            if op == diff_match_patch.DIFF_EQUAL:
                offset += len(chunk)
            elif op == diff_match_patch.DIFF_INSERT:
                changes.append(ChangeRecord(offset, ChangeKind.ADDED, chunk))
                offset += len(chunk)
            else:
                changes.append(ChangeRecord(offset, ChangeKind.REMOVED, chunk))
        return tuple(changes)

    def apply(self, text: str, changes: Iterable[ChangeRecord]) -> str:
        for change in changes:
            if change.position > len(text):
                raise PatchError(
                    f"change at {change.position} is past the end of the text "
                    f"({len(text)})",
                    change=change,
                )
            if change.kind is ChangeKind.ADDED:
                text = text[: change.position] + change.text + text[change.position :]
                continue
            found = text[change.position : change.end]
            if found != change.text:
                raise PatchError(
                    f"expected {change.text!r} at {change.position}, found {found!r}",
                    change=change,
                )
            text = text[: change.position] + text[change.end :]
        return text

    def reverse(self, changes: Sequence[ChangeRecord]) -> Changes:
        # Each change keeps its position: it is valid both right before and
        # right after itself in the replay order.
        return tuple(change.inverted() for change in reversed(changes))


__all__ = ["Changes", "PatchError", "TextDiffPatch"]
