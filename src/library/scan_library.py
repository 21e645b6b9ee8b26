# src/library/scan_library.py
from __future__ import annotations

import datetime as dt
import logging
import os
from typing import Any, Optional, Tuple

from mutagen import File as MutagenFile
from mutagen._util import MutagenError

logger = logging.getLogger(__name__)

AUDIO_EXTS = {".mp3", ".m4a", ".flac", ".ogg", ".opus", ".wav"}

KIND_LABELS = {
    ".mp3": "MPEG audio file",
    ".m4a": "AAC audio file",
    ".flac": "FLAC audio file",
    ".ogg": "Ogg Vorbis audio file",
    ".opus": "Opus audio file",
    ".wav": "WAV audio file",
}

def iter_audio_paths(directories: list[str]) -> list[str]:
    paths: list[str] = []
    for root in directories:
        if not root or not os.path.isdir(root):
            continue
        for dirpath, _, filenames in os.walk(root):
            for fn in sorted(filenames):
                ext = os.path.splitext(fn)[1].lower()
                if ext in AUDIO_EXTS:
                    paths.append(os.path.join(dirpath, fn))
    return paths

def _first(easy, key: str) -> str | None:
    v = easy.get(key)
    if not v:
        return None
    if isinstance(v, list):
        return (str(v[0]).strip() if v else None) or None
    s = str(v).strip()
    return s or None

def parse_track_number(raw: str | None) -> Tuple[Optional[int], Optional[int]]:
    """'3/12' -> (3, 12), '7' -> (7, None), junk -> (None, None)."""
    if not raw:
        return None, None
    head, _, tail = str(raw).partition("/")
    try:
        number = int(head.strip())
    except ValueError:
        return None, None
    try:
        total = int(tail.strip()) if tail.strip() else None
    except ValueError:
        total = None
    return number, total

def kind_for_path(path: str) -> str:
    ext = os.path.splitext(path)[1].lower()
    return KIND_LABELS.get(ext, f"{ext.lstrip('.').upper()} audio file")

def _date_added(path: str) -> str:
    try:
        ts = os.path.getmtime(path)
    except OSError:
        return dt.date.today().isoformat()
    return dt.datetime.fromtimestamp(ts).strftime("%Y-%m-%d %H:%M:%S")


def track_record_from_path(path: str) -> dict[str, Any] | None:
    """
    Read tags from an audio file into a track record (the same shape the
    library file stores). Returns None for files mutagen cannot parse.
    """
    try:
        audio = MutagenFile(path, easy=True)
    except (MutagenError, OSError) as e:
        logger.warning("Failed to read tags from %s: %s", path, e)
        return None
    if audio is None:
        return None

    title = _first(audio, "title") or os.path.splitext(os.path.basename(path))[0]
    album = _first(audio, "album") or "Unknown Album"
    artist = _first(audio, "artist") or "Unknown Artist"

    track_number, total_tracks = parse_track_number(_first(audio, "tracknumber"))
    track_number = track_number or 1
    total_tracks = max(total_tracks or track_number, track_number)

    duration = 0
    info = getattr(audio, "info", None)
    if info is not None and getattr(info, "length", None):
        duration = int(round(float(info.length)))

    return {
        "title": title,
        "artist": artist,
        "album": album,
        "duration": duration,
        "kind": kind_for_path(path),
        "date_added": _date_added(path),
        "plays": 0,
        "track_number": track_number,
        "total_tracks": total_tracks,
    }
