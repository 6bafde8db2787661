"""Structured logging for history transitions, backed by telelog.

``record_event`` writes one ``event::history.*`` line per fold, append,
external replay, trim or clear. ``span`` profiles ``record``/``undo``/``redo``
as the ``history`` component and lets the body attach what it learned
(merge outcome, history depth) before the span closes.

Environment (``TEXTEDIT_HISTORY_`` prefix): ``LOG_LEVEL``, ``LOG_FILE``,
``LOG_JSON``, ``DISABLE_CONSOLE``, ``NO_COLOR``.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "TEXTEDIT_HISTORY_"
LOGGER_NAME = "textedit_history"

_loggers: MutableMapping[str, Any] = {}
_config: Optional[Any] = None


def _flag(name: str) -> bool:
    return os.getenv(f"{ENV_PREFIX}{name}", "").lower() in {"1", "true", "yes", "on"}


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [
        (str(key), value if isinstance(value, str) else repr(value))
        for key, value in data.items()
    ]


def _config_from_env() -> Any:
    config = tl.Config()
    config.with_min_level(os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper())
    config.with_console_output(not _flag("DISABLE_CONSOLE"))
    config.with_colored_output(not _flag("NO_COLOR"))
    config.with_json_format(_flag("LOG_JSON"))
    log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    config.with_profiling(True)
    return config


def _silent_config() -> Any:
    config = tl.Config()
    config.with_min_level("ERROR")
    config.with_console_output(False)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Adopt ``config``, the ``"silent"`` preset, or (neither given) the environment."""

    global _config
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")
    if preset is not None:
        if preset.lower() != "silent":
            raise ValueError(f"Unknown preset '{preset}'.")
        config = _silent_config()
    _config = config if config is not None else _config_from_env()
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    if _config is None:
        configure()
    logger_name = name or LOGGER_NAME
    if logger_name not in _loggers:
        _loggers[logger_name] = tl.Logger.with_config(logger_name, _config)
    return _loggers[logger_name]


def _emit(logger: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        structured(message, _pairs(data))
        return
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {data}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level.lower(), f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Yielded by ``span``; ``note`` values are logged when the span ends."""

    logger: Any
    name: str
    notes: Dict[str, Any] = field(default_factory=dict)

    def note(self, key: str, value: Any) -> None:
        self.notes[key] = value

    def fail(self, reason: str) -> None:
        payload = {"span": self.name, "reason": reason, **self.notes}
        _emit(self.logger, "error", "span::fail", payload)

    def finish(self) -> None:
        if self.notes:
            _emit(self.logger, "debug", "span::done", {"span": self.name, **self.notes})


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block as ``name``; ``metadata`` rides along as logger context."""

    log = get_logger(logger_name)
    context: Tuple[Tuple[str, str], ...] = tuple(_pairs(metadata or {}))
    for key, value in context:
        log.add_context(key, value)

    with ExitStack() as stack:
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))
        handle = SpanHandle(logger=log, name=name)
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        else:
            handle.finish()
        finally:
            for key, _ in context:
                log.remove_context(key)


__all__ = ["SpanHandle", "configure", "get_logger", "record_event", "span"]
