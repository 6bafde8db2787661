"""In-process notification channel for newly created edit records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from .records import ActionKind, EditRecord

ACTION_CREATE = "action.create"


@dataclass(frozen=True, slots=True)
class ActionCreated:
    """Payload of ``action.create``.

    ``record`` is always the literal edit, never the folded history entry, so
    sibling editors can replay it verbatim.
    """

    kind: ActionKind
    record: EditRecord


class ActionChannel:
    """Minimal synchronous event bus; callbacks run in subscription order."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def subscribed(self, event: str, callback: Callable[[object], None]) -> bool:
        return callback in self._subscribers.get(event, [])

    def unsubscribe(self, event: str, callback: Callable[[object], None]) -> None:
        callbacks = self._subscribers.get(event, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in list(self._subscribers.get(event, [])):
            callback(payload)


__all__ = ["ACTION_CREATE", "ActionChannel", "ActionCreated"]
