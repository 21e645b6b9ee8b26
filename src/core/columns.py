# src/core/columns.py
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class ColumnKind(Enum):
    PLAYING = "Playing"
    TITLE = "Title"
    ARTIST = "Artist"
    ALBUM = "Album"
    DURATION = "Duration"
    TRACK_NUMBER = "TrackNumber"
    KIND = "Kind"
    DATE_ADDED = "DateAdded"


TITLE_COLUMN_WIDTH = 300.0

DEFAULT_WIDTHS: dict[ColumnKind, float] = {
    ColumnKind.PLAYING: 17.0,
    ColumnKind.TITLE: TITLE_COLUMN_WIDTH,
    ColumnKind.ARTIST: 150.0,
    ColumnKind.ALBUM: 150.0,
    ColumnKind.DURATION: 100.0,
    ColumnKind.TRACK_NUMBER: 50.0,
    ColumnKind.KIND: 100.0,
    ColumnKind.DATE_ADDED: 150.0,
}

DISPLAY_NAMES: dict[ColumnKind, str] = {
    ColumnKind.PLAYING: "",
    ColumnKind.TITLE: "Name",
    ColumnKind.ARTIST: "Artist",
    ColumnKind.ALBUM: "Album",
    ColumnKind.DURATION: "Time",
    ColumnKind.TRACK_NUMBER: "Track Number",
    ColumnKind.KIND: "Kind",
    ColumnKind.DATE_ADDED: "Date Added",
}


def check_width(width) -> float:
    """Width override as a float; raises ValueError unless finite and >= 0."""
    if isinstance(width, bool) or not isinstance(width, (int, float)):
        raise ValueError(f"column width must be a number, got {width!r}")
    try:
        value = float(width)
    except OverflowError:
        raise ValueError(f"column width is out of range: {width}") from None
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"column width must be finite and not negative, got {value}")
    return value


@dataclass
class Column:
    kind: ColumnKind
    width: float | None = None   # None -> kind default
    enabled: bool = True         # visibility only, sorting ignores it

    def effective_width(self) -> float:
        if self.width is not None:
            return self.width
        return DEFAULT_WIDTHS[self.kind]

    def display_name(self) -> str:
        return DISPLAY_NAMES[self.kind]

    def set_width(self, width: float | None) -> None:
        self.width = None if width is None else check_width(width)

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = bool(enabled)

    def copy(self) -> "Column":
        return Column(kind=self.kind, width=self.width, enabled=self.enabled)

    def to_record(self) -> dict[str, Any]:
        record: dict[str, Any] = {"kind": self.kind.value}
        if self.width is not None:
            record["width"] = self.width
        record["enabled"] = self.enabled
        return record


def column_from_record(record: Mapping[str, Any]) -> Column:
    """
    Parse {"kind": "Title", "width": 250.0, "enabled": true}.
    Raises ValueError for an unknown kind tag or a bad width.
    """
    if not isinstance(record, Mapping):
        raise ValueError(f"column record must be an object, got {type(record).__name__}")

    kind = ColumnKind(record["kind"])

    width = record.get("width")
    if width is not None:
        width = check_width(width)

    enabled = record.get("enabled", True)
    if not isinstance(enabled, bool):
        raise ValueError(f"column 'enabled' must be a boolean, got {enabled!r}")

    return Column(kind=kind, width=width, enabled=enabled)


def default_columns() -> list[Column]:
    return [Column(kind) for kind in ColumnKind]
