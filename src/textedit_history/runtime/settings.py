"""Environment-driven defaults for stacks and diff engines."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .telemetry import ENV_PREFIX

DEFAULT_DIFF_TIMEOUT = 1.0


@dataclass(frozen=True, slots=True)
class HistorySettings:
    """Resolved configuration shared by ``ActionStack`` and ``TextDiffPatch``.

    ``diff_timeout`` is handed to diff-match-patch (seconds, ``0`` disables the
    deadline). ``history_limit`` bounds the undo history; ``None`` keeps every
    entry.
    """

    diff_timeout: float = DEFAULT_DIFF_TIMEOUT
    history_limit: Optional[int] = None


def _read(environ: Mapping[str, str], name: str) -> Optional[str]:
    raw = environ.get(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def load_settings(environ: Optional[Mapping[str, str]] = None) -> HistorySettings:
    env = os.environ if environ is None else environ

    timeout = DEFAULT_DIFF_TIMEOUT
    raw_timeout = _read(env, "DIFF_TIMEOUT")
    if raw_timeout is not None:
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            raise ValueError(
                f"{ENV_PREFIX}DIFF_TIMEOUT must be a number, got {raw_timeout!r}"
            ) from exc
        if timeout < 0:
            raise ValueError(f"{ENV_PREFIX}DIFF_TIMEOUT cannot be negative")

    limit: Optional[int] = None
    raw_limit = _read(env, "LIMIT")
    if raw_limit is not None:
        try:
            limit = int(raw_limit)
        except ValueError as exc:
            raise ValueError(
                f"{ENV_PREFIX}LIMIT must be an integer, got {raw_limit!r}"
            ) from exc
        if limit < 0:
            raise ValueError(f"{ENV_PREFIX}LIMIT cannot be negative")
        limit = limit or None

    return HistorySettings(diff_timeout=timeout, history_limit=limit)


__all__ = ["DEFAULT_DIFF_TIMEOUT", "HistorySettings", "load_settings"]
