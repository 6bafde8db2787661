"""Logging and configuration services."""

from . import telemetry
from .settings import HistorySettings, load_settings

__all__ = ["telemetry", "HistorySettings", "load_settings"]
