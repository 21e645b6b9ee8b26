# src/core/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from PySide6.QtCore import QStandardPaths

from player.playback import TICK_INTERVAL_MS

logger = logging.getLogger(__name__)

LIBRARY_FILE_NAME = "library.json"


@dataclass(frozen=True)
class AppConfig:
    app_data_dir: str
    library_path: str
    tick_interval_ms: int = TICK_INTERVAL_MS
    debug: bool = False


def get_app_data_dir() -> str:
    base = QStandardPaths.writableLocation(QStandardPaths.AppDataLocation)
    if not base:
        base = os.path.join(os.path.expanduser("~"), ".pytunes")
    os.makedirs(base, exist_ok=True)
    return base


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer)", name, raw)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r (must be positive)", name, raw)
        return default
    return value


def load_config(app_data_dir: str | None = None) -> AppConfig:
    """
    PYTUNES_LIBRARY   path of the library JSON file
    PYTUNES_TICK_MS   playback tick interval in milliseconds
    PYTUNES_DEBUG     "1" turns on debug logging
    """
    data_dir = app_data_dir or get_app_data_dir()
    library_path = os.getenv("PYTUNES_LIBRARY") or os.path.join(data_dir, LIBRARY_FILE_NAME)

    return AppConfig(
        app_data_dir=data_dir,
        library_path=library_path,
        tick_interval_ms=_env_int("PYTUNES_TICK_MS", TICK_INTERVAL_MS),
        debug=os.getenv("PYTUNES_DEBUG") == "1",
    )
