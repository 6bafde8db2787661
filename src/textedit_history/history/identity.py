"""Editor identity tokens.

When the same document is open in several editors (split panes, several
application instances) an edit may come from the local editor or from a
sibling. Each editor carries an identity so the stack can tell them apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class EditorIdentity(Protocol):
    """Anything that can say whether it denotes the same editor as ``other``."""

    def equals(self, other: object) -> bool:
        ...


@dataclass(frozen=True, slots=True)
class NamedEditorIdentity:
    """Identity keyed by a plain name, e.g. ``"pane-left"``."""

    name: str

    def equals(self, other: object) -> bool:
        return isinstance(other, NamedEditorIdentity) and other.name == self.name


__all__ = ["EditorIdentity", "NamedEditorIdentity"]
