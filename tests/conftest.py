"""Pytest configuration: src/ on the path and one QCoreApplication per session."""

import sys
from pathlib import Path

import pytest

src_dir = Path(__file__).parent.parent / "src"
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

from PySide6.QtCore import QCoreApplication  # noqa: E402

from core.track import create_track  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """QTimer needs an application instance with an event dispatcher."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


def make_record(title="Song", artist="Artist", album="Album", track_number=1, **extra):
    record = {
        "title": title,
        "artist": artist,
        "album": album,
        "duration": 180,
        "kind": "MPEG audio file",
        "date_added": "2024-01-01 10:00:00",
        "plays": 0,
        "track_number": track_number,
        "total_tracks": 10,
    }
    record.update(extra)
    return record


@pytest.fixture
def track_record():
    return make_record


@pytest.fixture
def make_track():
    def _make(*args, **kwargs):
        return create_track(make_record(*args, **kwargs))
    return _make
