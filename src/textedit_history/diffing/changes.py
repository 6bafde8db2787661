"""Value types exchanged between the diff engine and the history stack."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ChangeKind(str, Enum):
    """Direction of a single text change."""

    ADDED = "added"
    REMOVED = "removed"

    @property
    def inverse(self) -> "ChangeKind":
        return ChangeKind.REMOVED if self is ChangeKind.ADDED else ChangeKind.ADDED


@dataclass(frozen=True, slots=True)
class ChangeRecord:
    """One contiguous insertion or deletion.

    ``position`` is relative to the text as it stands when this change is
    applied, so a sequence of changes must be replayed in order.
    """

    position: int
    kind: ChangeKind
    text: str

    def __post_init__(self) -> None:
        if self.position < 0:
            raise ValueError("position cannot be negative")
        object.__setattr__(self, "kind", ChangeKind(self.kind))

    @property
    def end(self) -> int:
        return self.position + len(self.text)

    def inverted(self) -> "ChangeRecord":
        return ChangeRecord(self.position, self.kind.inverse, self.text)


@dataclass(frozen=True, slots=True)
class SelectionRange:
    """Single contiguous selection; ``start == end`` is a plain caret."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < 0:
            raise ValueError("selection offsets cannot be negative")

    @classmethod
    def caret(cls, offset: int) -> "SelectionRange":
        return cls(offset, offset)

    @property
    def collapsed(self) -> bool:
        return self.start == self.end


__all__ = ["ChangeKind", "ChangeRecord", "SelectionRange"]
