# src/library/store.py
from __future__ import annotations

import logging
from typing import Callable, Iterable

from PySide6.QtCore import QObject, Signal

from core.columns import Column, ColumnKind
from core.track import Track, TrackId
from library.catalog import Library

logger = logging.getLogger(__name__)


class LibraryStore(QObject):
    """
    Holds the authoritative Library snapshot.

    Every mutation runs on a private copy which replaces the snapshot only
    once the mutator has finished, so a reader that grabbed snapshot()
    earlier keeps a consistent, unchanged library.
    """

    library_changed = Signal()

    def __init__(self, library: Library | None = None, parent: QObject | None = None):
        super().__init__(parent)
        self._library = library if library is not None else Library.new_empty()

    def snapshot(self) -> Library:
        return self._library

    def replace(self, library: Library) -> None:
        library.check_invariants()
        self._library = library
        self.library_changed.emit()

    def update(self, mutator: Callable[[Library], object]) -> Library:
        draft = self._library.copy()
        mutator(draft)
        draft.check_invariants()
        self._library = draft
        self.library_changed.emit()
        return draft

    # -------------------------
    # Commands
    # -------------------------
    def sort_by_column(self, kind: ColumnKind) -> None:
        logger.debug("Sorting library by %s", kind.value)
        self.update(lambda lib: lib.sort_by_column(kind))

    def set_columns(self, columns: Iterable[Column]) -> None:
        columns = [c.copy() for c in columns]
        self.update(lambda lib: lib.set_columns(columns))

    def set_column_width(self, kind: ColumnKind, width: float | None) -> None:
        def _apply(lib: Library) -> None:
            column = lib.column(kind)
            if column is not None:
                column.set_width(width)

        self.update(_apply)

    def set_column_enabled(self, kind: ColumnKind, enabled: bool) -> None:
        def _apply(lib: Library) -> None:
            column = lib.column(kind)
            if column is not None:
                column.set_enabled(enabled)

        self.update(_apply)

    def add_track(self, track: Track) -> None:
        self.update(lambda lib: lib.add_track(track))

    def add_tracks(self, tracks: Iterable[Track]) -> None:
        tracks = list(tracks)

        def _apply(lib: Library) -> None:
            for t in tracks:
                lib.add_track(t)

        self.update(_apply)

    def remove_track(self, track_id: TrackId) -> None:
        self.update(lambda lib: lib.remove_track(track_id))

    def increment_plays(self, track_id: TrackId) -> None:
        if track_id not in self._library:
            # removed while it was playing
            return

        def _apply(lib: Library) -> None:
            lib.track(track_id).plays += 1

        self.update(_apply)
