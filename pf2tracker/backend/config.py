"""Configuration helpers for the rules engine runtime."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class TrackerSettings:
    log_level: str
    log_format: str


def load_settings() -> TrackerSettings:
    return TrackerSettings(
        log_level=os.getenv("PF2TRACKER_LOG_LEVEL", "WARNING").upper(),
        log_format=os.getenv("PF2TRACKER_LOG_FORMAT", DEFAULT_LOG_FORMAT),
    )


def configure_logging(settings: TrackerSettings | None = None) -> None:
    """Attach a root handler using ``settings`` or the environment defaults."""
    active = settings if settings is not None else load_settings()
    logging.basicConfig(level=active.log_level, format=active.log_format)
