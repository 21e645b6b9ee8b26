# src/player/playback.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from core.track import Track

logger = logging.getLogger(__name__)

TICK_SECONDS = 1
TICK_INTERVAL_MS = 1000


class PlaybackStatus(Enum):
    IDLE = auto()
    PAUSED = auto()
    PLAYING = auto()


@dataclass
class CurrentTrack:
    track: Track               # detached copy, catalog edits do not reach it
    current_time: int = 0      # seconds
    is_playing: bool = False

    @property
    def duration(self) -> int:
        return self.track.duration

    @property
    def progress(self) -> float:
        if self.duration <= 0:
            return 0.0
        return min(1.0, max(0.0, self.current_time / self.duration))

    @property
    def time_remaining(self) -> int:
        return self.duration - self.current_time

    @property
    def at_end(self) -> bool:
        return self.current_time >= self.duration


class PlaybackState(QObject):
    """
    Now-playing state machine: IDLE -> PLAYING <-> PAUSED.

    While PLAYING a QTimer calls tick() every tick_interval_ms and each tick
    moves current_time forward by TICK_SECONDS. The timer only runs while
    PLAYING, so is_playing and the timer being active always agree.
    """

    time_advanced = Signal(int)      # current_time
    track_ended = Signal(object)     # CurrentTrack
    status_changed = Signal(object)  # PlaybackStatus
    track_changed = Signal(object)   # CurrentTrack | None

    def __init__(self, tick_interval_ms: int = TICK_INTERVAL_MS, parent: QObject | None = None):
        super().__init__(parent)
        self.current: CurrentTrack | None = None
        self.status = PlaybackStatus.IDLE

        self._ticker = QTimer(self)
        self._ticker.setInterval(int(tick_interval_ms))
        self._ticker.timeout.connect(self.tick)

    # ----------------------------
    # Queries
    # ----------------------------

    @property
    def is_playing(self) -> bool:
        return self.current is not None and self.current.is_playing

    def ticker_active(self) -> bool:
        return self._ticker.isActive()

    # ----------------------------
    # Shared helpers
    # ----------------------------

    def _set_status(self, new_status: PlaybackStatus) -> None:
        if self.status != new_status:
            self.status = new_status
            self.status_changed.emit(self.status)

    def _start_ticker(self) -> None:
        if not self._ticker.isActive():
            self._ticker.start()

    def _stop_ticker(self) -> None:
        if self._ticker.isActive():
            self._ticker.stop()

    # ----------------------------
    # Transitions
    # ----------------------------

    def play_track(self, track: Track) -> None:
        # always a fresh CurrentTrack at 0, even when it is the same track
        self.current = CurrentTrack(track=track.copy(), current_time=0, is_playing=True)
        logger.debug("Playing %s", track.id)
        self.track_changed.emit(self.current)
        self._start_ticker()
        self._set_status(PlaybackStatus.PLAYING)

    def pause(self) -> None:
        if self.status != PlaybackStatus.PLAYING:
            return
        self.current.is_playing = False
        self._stop_ticker()
        self._set_status(PlaybackStatus.PAUSED)

    def resume(self) -> None:
        if self.status != PlaybackStatus.PAUSED:
            return
        if self.current.at_end:
            self.current.current_time = 0
            self.time_advanced.emit(0)
        self.current.is_playing = True
        self._start_ticker()
        self._set_status(PlaybackStatus.PLAYING)

    def toggle_play_pause(self) -> None:
        if self.status == PlaybackStatus.PLAYING:
            self.pause()
        else:
            self.resume()

    def stop(self) -> None:
        self._stop_ticker()
        if self.current is None:
            return
        self.current = None
        self.track_changed.emit(None)
        self._set_status(PlaybackStatus.IDLE)

    @Slot()
    def tick(self) -> None:
        if self.status != PlaybackStatus.PLAYING:
            return

        cur = self.current
        new_time = cur.current_time + TICK_SECONDS
        if new_time >= cur.duration:
            cur.current_time = cur.duration
            cur.is_playing = False
            cur.track.plays += 1
            self._stop_ticker()
            self._set_status(PlaybackStatus.PAUSED)
            logger.debug("Track ended: %s", cur.track.id)
            self.track_ended.emit(cur)
            return

        cur.current_time = new_time
        self.time_advanced.emit(new_time)

    def shutdown(self) -> None:
        self._stop_ticker()
