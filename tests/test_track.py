"""Tests for track construction and identity."""

import pytest

from core.errors import TrackDecodeError
from core.track import Track, create_track
from core.utils import format_playback_time


class TestCreateTrack:
    """Test building tracks from plain records."""

    def test_copies_all_fields(self, track_record):
        """Every record field ends up on the track."""
        track = create_track(track_record(title="Hey", artist="B", album="C", track_number=3, plays=7))
        assert track.title == "Hey"
        assert track.artist == "B"
        assert track.album == "C"
        assert track.duration == 180
        assert track.kind == "MPEG audio file"
        assert track.date_added == "2024-01-01 10:00:00"
        assert track.plays == 7
        assert track.track_number == 3
        assert track.total_tracks == 10

    def test_id_contains_metadata(self, track_record):
        """Ids start with title-artist-album."""
        track = create_track(track_record(title="T", artist="A", album="L"))
        assert str(track.id).startswith("T-A-L-")

    def test_same_metadata_gives_distinct_tracks(self, track_record):
        """Two constructions from one record are different tracks."""
        record = track_record()
        a = create_track(record)
        b = create_track(record)
        assert a.id != b.id
        assert a != b
        assert len({a, b}) == 2

    def test_equality_is_by_id_only(self, make_track):
        """A copy keeps the id and compares equal even after edits."""
        track = make_track()
        other = track.copy()
        other.title = "Renamed"
        assert other == track
        assert other is not track

    def test_id_cannot_be_reassigned(self, make_track):
        """The id is fixed once the track exists."""
        track = make_track()
        with pytest.raises(AttributeError):
            track.id = make_track().id

    def test_optional_fields_default(self):
        """Only title, artist and album are required."""
        track = create_track({"title": "T", "artist": "A", "album": "L"})
        assert track.duration == 0
        assert track.kind == ""
        assert track.date_added == ""
        assert track.plays == 0
        assert track.track_number == 1
        assert track.total_tracks == 1

    @pytest.mark.parametrize("missing", ["title", "artist", "album"])
    def test_missing_text_field_fails(self, track_record, missing):
        """A record without a required text field is rejected."""
        record = track_record()
        del record[missing]
        with pytest.raises(TrackDecodeError, match=missing):
            create_track(record)

    def test_negative_duration_fails(self, track_record):
        with pytest.raises(TrackDecodeError):
            create_track(track_record(duration=-1))

    def test_non_integer_count_fails(self, track_record):
        with pytest.raises(TrackDecodeError):
            create_track(track_record(plays="many"))

    def test_integral_float_is_accepted(self, track_record):
        assert create_track(track_record(duration=200.0)).duration == 200

    def test_record_round_trip(self, track_record):
        """to_record gives back the record the track was built from."""
        record = track_record()
        assert create_track(record).to_record() == record

    def test_not_a_mapping_fails(self):
        with pytest.raises(TrackDecodeError):
            create_track(["title", "artist"])


class TestTrackHelpers:
    def test_track_number_label(self, make_track):
        assert make_track(track_number=4).track_number_label() == "4 of 10"

    def test_format_playback_time(self):
        assert format_playback_time(0) == "00:00"
        assert format_playback_time(185) == "03:05"
        assert format_playback_time(3600) == "60:00"

    def test_is_a_track(self, make_track):
        assert isinstance(make_track(), Track)
