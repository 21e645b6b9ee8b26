# src/core/state.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping

from PySide6.QtCore import QObject, Signal, Slot

from core.columns import ColumnKind
from core.config import AppConfig
from core.errors import TrackDecodeError
from core.track import Track, TrackId, create_track
from library.persist import LibrarySource, load_library_or_empty, save_library
from library.scanner import LibraryScanner
from library.store import LibraryStore
from player.playback import TICK_INTERVAL_MS, CurrentTrack, PlaybackState

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Notify:
    message: str
    notify_type: str = "info"   # info/success/warn/error

class AppState(QObject):
    """
    Single owner of the library and the playback state.

    The presentation layer calls the command methods and listens to the
    signals; signals are hints to re-read library.snapshot() and
    playback.current, not data to rely on.
    """
    notification = Signal(object)   # emits Notify
    status_changed = Signal(str)    # generic status text
    scan_progress = Signal(int, int)  # current, total
    library_changed = Signal()
    time_advanced = Signal(int)     # current_time in seconds
    track_ended = Signal(object)    # CurrentTrack

    def __init__(self, config: AppConfig | None = None):
        super().__init__()
        self.config = config

        tick_ms = config.tick_interval_ms if config else TICK_INTERVAL_MS
        self.library = LibraryStore(parent=self)
        self.playback = PlaybackState(tick_interval_ms=tick_ms, parent=self)
        self._scanner: LibraryScanner | None = None

        self.library.library_changed.connect(self.library_changed.emit)
        self.playback.time_advanced.connect(self.time_advanced.emit)
        self.playback.track_ended.connect(self._on_track_ended)

    @Slot(str, str)
    def notify(self, message: str, notify_type: str = "info"):
        self.notification.emit(Notify(message=message, notify_type=notify_type))

    # -------------------------------
    # LIBRARY
    # -------------------------------
    def load_library(self, source: LibrarySource | None = None) -> bool:
        if source is None:
            source = self._library_path()
        library, error = load_library_or_empty(source)
        self.library.replace(library)
        if error is not None:
            self.notify(f"Could not load library: {error}", "error")
            return False
        self.status_changed.emit(f"{len(library)} tracks")
        return True

    def save_library(self, path: str | os.PathLike | None = None) -> None:
        save_library(self.library.snapshot(), path or self._library_path())

    def sort_by_column(self, kind: ColumnKind) -> None:
        self.library.sort_by_column(kind)

    def set_column_width(self, kind: ColumnKind, width: float | None) -> None:
        self.library.set_column_width(kind, width)

    def set_column_enabled(self, kind: ColumnKind, enabled: bool) -> None:
        self.library.set_column_enabled(kind, enabled)

    def add_track(self, record: Mapping[str, Any]) -> Track:
        track = create_track(record)
        self.library.add_track(track)
        return track

    def remove_track(self, track_id: TrackId) -> None:
        self.library.remove_track(track_id)

    def _library_path(self) -> str:
        if self.config is None:
            raise RuntimeError("No library path configured")
        return self.config.library_path

    # -------------------------------
    # PLAYBACK
    # -------------------------------
    def play_track(self, track_id: TrackId) -> None:
        track = self.library.snapshot().track(track_id)
        self.playback.play_track(track)

    def pause(self) -> None:
        self.playback.pause()

    def resume(self) -> None:
        self.playback.resume()

    def stop(self) -> None:
        self.playback.stop()

    def _on_track_ended(self, current: CurrentTrack) -> None:
        self.library.increment_plays(current.track.id)
        self.track_ended.emit(current)

    # -------------------------------
    # SCANNING
    # -------------------------------
    def scan_directories(self, directories: list[str]) -> LibraryScanner:
        if self._scanner is not None and self._scanner.isRunning():
            raise RuntimeError("A library scan is already running")

        scanner = LibraryScanner(directories)
        scanner.records_ready.connect(self._on_scanned_records)
        scanner.progress_signal.connect(self.scan_progress)
        scanner.finished_signal.connect(self._on_scan_finished)
        self._scanner = scanner
        scanner.start()
        return scanner

    @Slot(list)
    def _on_scanned_records(self, records: list) -> None:
        tracks = []
        for record in records:
            try:
                tracks.append(create_track(record))
            except TrackDecodeError as e:
                logger.warning("Skipping scanned file: %s", e)
        if tracks:
            self.library.add_tracks(tracks)

    @Slot(bool, str)
    def _on_scan_finished(self, ok: bool, message: str) -> None:
        self.notify(message, "success" if ok else "error")

    def shutdown(self) -> None:
        self.playback.shutdown()
        if self._scanner is not None and self._scanner.isRunning():
            self._scanner.requestInterruption()
            self._scanner.wait()
