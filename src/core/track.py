# src/core/track.py
from __future__ import annotations

import dataclasses
import uuid
from dataclasses import dataclass
from typing import Any, Mapping

from core.errors import TrackDecodeError

REQUIRED_TEXT_FIELDS = ("title", "artist", "album")


@dataclass(frozen=True)
class TrackId:
    value: str

    def __str__(self) -> str:
        return self.value


def new_track_id(title: str, artist: str, album: str) -> TrackId:
    # "<title>-<artist>-<album>-<uuid4>"
    return TrackId(f"{title}-{artist}-{album}-{uuid.uuid4()}")


@dataclass(eq=False)
class Track:
    id: TrackId
    title: str
    artist: str
    album: str
    duration: int = 0          # seconds
    kind: str = ""             # "MPEG audio file", "FLAC audio file", ...
    date_added: str = ""
    plays: int = 0
    track_number: int = 1
    total_tracks: int = 1

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Track.id cannot be reassigned")
        super().__setattr__(name, value)

    # identity, never content
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Track):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def copy(self) -> "Track":
        """Field-for-field copy that keeps the same id."""
        return dataclasses.replace(self)

    def track_number_label(self) -> str:
        return f"{self.track_number} of {self.total_tracks}"

    def to_record(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "artist": self.artist,
            "album": self.album,
            "duration": self.duration,
            "kind": self.kind,
            "date_added": self.date_added,
            "plays": self.plays,
            "track_number": self.track_number,
            "total_tracks": self.total_tracks,
        }


def _text(record: Mapping[str, Any], key: str, default: str | None = None) -> str:
    value = record.get(key)
    if value is None:
        if default is None:
            raise TrackDecodeError(f"track record is missing '{key}'")
        return default
    if not isinstance(value, str):
        raise TrackDecodeError(f"track field '{key}' must be text, got {type(value).__name__}")
    return value


def _count(record: Mapping[str, Any], key: str, default: int) -> int:
    value = record.get(key, default)
    if value is None:
        return default
    # bool is an int subclass; a flag in a numeric slot is a malformed record
    if isinstance(value, bool):
        raise TrackDecodeError(f"track field '{key}' must be an integer")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int):
        raise TrackDecodeError(f"track field '{key}' must be an integer, got {value!r}")
    if value < 0:
        raise TrackDecodeError(f"track field '{key}' must not be negative, got {value}")
    return value


def create_track(record: Mapping[str, Any]) -> Track:
    """
    Build a Track from a plain record (a decoded JSON object or a scan result)
    and assign it a fresh TrackId.

    title, artist and album are required. Everything else falls back to a
    default. Raises TrackDecodeError for a missing text field or a bad number.
    """
    if not isinstance(record, Mapping):
        raise TrackDecodeError(f"track record must be an object, got {type(record).__name__}")

    missing = [k for k in REQUIRED_TEXT_FIELDS if record.get(k) is None]
    if missing:
        raise TrackDecodeError(f"track record is missing {', '.join(missing)}")

    title = _text(record, "title")
    artist = _text(record, "artist")
    album = _text(record, "album")

    return Track(
        id=new_track_id(title, artist, album),
        title=title,
        artist=artist,
        album=album,
        duration=_count(record, "duration", 0),
        kind=_text(record, "kind", ""),
        date_added=_text(record, "date_added", ""),
        plays=_count(record, "plays", 0),
        track_number=_count(record, "track_number", 1),
        total_tracks=_count(record, "total_tracks", 1),
    )
