# src/library/persist.py
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import IO, Any, Union

from core.columns import column_from_record, default_columns
from core.errors import LoadError, TrackDecodeError
from core.track import create_track
from library.catalog import Library

logger = logging.getLogger(__name__)

LibrarySource = Union[str, os.PathLike, bytes, bytearray, IO[bytes]]


def _read_source(source: LibrarySource) -> bytes:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source)
    try:
        if hasattr(source, "read"):
            data = source.read()
            return data.encode("utf-8") if isinstance(data, str) else data
        return Path(source).read_bytes()
    except (OSError, ValueError) as e:
        # ValueError: paths with an embedded NUL byte
        raise LoadError(f"Cannot read library from {source}: {e}") from e


def parse_library(payload: Any) -> Library:
    """
    Build a Library from a decoded {"tracks": [...], "columns": [...]} object.
    All or nothing: one bad record fails the whole payload.
    """
    if not isinstance(payload, dict):
        raise LoadError("Library payload must be a JSON object")

    raw_tracks = payload.get("tracks", [])
    raw_columns = payload.get("columns", [])
    if not isinstance(raw_tracks, list) or not isinstance(raw_columns, list):
        raise LoadError("'tracks' and 'columns' must be lists")

    tracks = []
    for i, record in enumerate(raw_tracks):
        try:
            tracks.append(create_track(record))
        except TrackDecodeError as e:
            raise LoadError(f"Bad track record #{i}: {e}") from e

    columns = []
    for i, record in enumerate(raw_columns):
        try:
            columns.append(column_from_record(record))
        except (KeyError, ValueError, TypeError, OverflowError) as e:
            raise LoadError(f"Bad column record #{i}: {e}") from e

    return Library.from_tracks(tracks, columns)


def load_library(source: LibrarySource) -> Library:
    """
    Load a library from a path, a raw JSON payload or a binary file object.
    Empty column lists get the default columns; tracks start in artist order.
    """
    data = _read_source(source)
    try:
        payload = json.loads(data)
    except (ValueError, RecursionError) as e:
        # ValueError covers JSONDecodeError, UnicodeDecodeError and the int digit limit
        raise LoadError(f"Library is not valid JSON: {e}") from e

    library = parse_library(payload)
    logger.info("Loaded library: %d tracks, %d columns", len(library), len(library.columns()))
    return library


def empty_library() -> Library:
    lib = Library.new_empty()
    lib.set_columns(default_columns())
    return lib


def load_library_or_empty(source: LibrarySource) -> tuple[Library, LoadError | None]:
    """
    Fallback used by the app: a failed load gives an empty, usable library
    with the default columns, plus the error so it can be shown to the user.
    """
    try:
        return load_library(source), None
    except LoadError as e:
        logger.warning("Falling back to an empty library: %s", e)
        return empty_library(), e


def library_to_record(library: Library) -> dict[str, Any]:
    return {
        "tracks": [t.to_record() for t in library.ordered_tracks()],
        "columns": [c.to_record() for c in library.columns()],
    }


def serialize_library(library: Library) -> bytes:
    return json.dumps(library_to_record(library), indent=2, ensure_ascii=False).encode("utf-8")


def save_library(library: Library, path: str | os.PathLike) -> None:
    """Write atomically: temp file in the same directory, then replace."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = serialize_library(library)

    fd, tmp = tempfile.mkstemp(prefix=".library-", suffix=".json", dir=str(path.parent))
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.replace(tmp, path)
    except OSError:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise
    logger.info("Saved library (%d tracks) to %s", len(library), path)
