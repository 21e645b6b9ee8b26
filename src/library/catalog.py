# src/library/catalog.py
from __future__ import annotations

from typing import Callable, Iterable, Iterator

from core.columns import Column, ColumnKind, default_columns
from core.errors import LibraryInvariantError, TrackNotFoundError
from core.track import Track, TrackId

SortKey = Callable[[Track], object]

# Tie-breaks are part of each key; sorted() keeps equal keys in their
# previous relative order.
SORT_KEYS: dict[ColumnKind, SortKey] = {
    ColumnKind.TITLE: lambda t: t.title,
    ColumnKind.ARTIST: lambda t: (t.artist, t.album, t.track_number),
    ColumnKind.ALBUM: lambda t: (t.album, t.artist, t.track_number),
    ColumnKind.DURATION: lambda t: t.duration,
    ColumnKind.TRACK_NUMBER: lambda t: t.track_number,
    ColumnKind.KIND: lambda t: t.kind,
    ColumnKind.DATE_ADDED: lambda t: t.date_added,
}

DEFAULT_SORT = ColumnKind.ARTIST


class Library:
    """
    The track catalog.

    tracks maps TrackId -> Track, track_order is the display order and is
    always a permutation of the tracks' keys. A Library held by a
    LibraryStore is treated as a value: mutate a copy, never the published
    instance.
    """

    def __init__(self):
        self.tracks: dict[TrackId, Track] = {}
        self.track_order: list[TrackId] = []
        self._columns: list[Column] = []

    @classmethod
    def new_empty(cls) -> "Library":
        return cls()

    @classmethod
    def from_tracks(cls, tracks: Iterable[Track], columns: Iterable[Column] = ()) -> "Library":
        lib = cls()
        for track in tracks:
            lib.tracks[track.id] = track
        lib.track_order = list(lib.tracks.keys())
        lib._columns = [c.copy() for c in columns] or default_columns()
        lib.sort_by_column(DEFAULT_SORT)
        return lib

    def copy(self) -> "Library":
        """Full copy: new dict, new order list, copied tracks and columns."""
        lib = Library()
        lib.tracks = {tid: t.copy() for tid, t in self.tracks.items()}
        lib.track_order = list(self.track_order)
        lib._columns = [c.copy() for c in self._columns]
        return lib

    # -------------------------
    # Columns
    # -------------------------
    def columns(self) -> list[Column]:
        return [c.copy() for c in self._columns]

    def set_columns(self, columns: Iterable[Column]) -> None:
        self._columns = [c.copy() for c in columns]

    def column(self, kind: ColumnKind) -> Column | None:
        # live column, for mutation inside LibraryStore.update
        for c in self._columns:
            if c.kind == kind:
                return c
        return None

    # -------------------------
    # Tracks
    # -------------------------
    def __len__(self) -> int:
        return len(self.track_order)

    def __contains__(self, track_id: object) -> bool:
        return track_id in self.tracks

    def track(self, track_id: TrackId) -> Track:
        try:
            return self.tracks[track_id]
        except KeyError:
            raise TrackNotFoundError(track_id) from None

    def _ordered(self, track_id: TrackId) -> Track:
        try:
            return self.tracks[track_id]
        except KeyError:
            raise LibraryInvariantError(
                f"track_order references {track_id} which is not in the catalog"
            ) from None

    def ordered_tracks(self) -> Iterator[Track]:
        for tid in self.track_order:
            yield self._ordered(tid)

    def add_track(self, track: Track) -> None:
        if track.id in self.tracks:
            raise ValueError(f"track {track.id} is already in the library")
        self.tracks[track.id] = track
        self.track_order.append(track.id)

    def remove_track(self, track_id: TrackId) -> Track:
        track = self.track(track_id)
        del self.tracks[track_id]
        self.track_order.remove(track_id)
        return track

    # -------------------------
    # Sorting
    # -------------------------
    def sort_by_column(self, kind: ColumnKind) -> None:
        key = SORT_KEYS.get(kind)
        if key is None:
            # Playing has nothing to sort on
            return
        self.track_order.sort(key=lambda tid: key(self._ordered(tid)))

    def check_invariants(self) -> None:
        if len(self.track_order) != len(self.tracks) or set(self.track_order) != self.tracks.keys():
            raise LibraryInvariantError(
                f"track_order ({len(self.track_order)} ids) is not a permutation "
                f"of the catalog ({len(self.tracks)} tracks)"
            )
