"""Tests for the column model."""

import pytest

from core.columns import (
    TITLE_COLUMN_WIDTH,
    Column,
    ColumnKind,
    column_from_record,
    default_columns,
)


class TestDefaultColumns:
    def test_canonical_order(self):
        """All eight kinds, in display order."""
        kinds = [c.kind for c in default_columns()]
        assert kinds == [
            ColumnKind.PLAYING,
            ColumnKind.TITLE,
            ColumnKind.ARTIST,
            ColumnKind.ALBUM,
            ColumnKind.DURATION,
            ColumnKind.TRACK_NUMBER,
            ColumnKind.KIND,
            ColumnKind.DATE_ADDED,
        ]

    def test_enabled_without_override(self):
        for column in default_columns():
            assert column.enabled is True
            assert column.width is None

    def test_fresh_list_each_call(self):
        a = default_columns()
        a[0].set_enabled(False)
        assert default_columns()[0].enabled is True


class TestColumn:
    @pytest.mark.parametrize(
        "kind,width",
        [
            (ColumnKind.PLAYING, 17.0),
            (ColumnKind.TITLE, TITLE_COLUMN_WIDTH),
            (ColumnKind.ARTIST, 150.0),
            (ColumnKind.ALBUM, 150.0),
            (ColumnKind.DURATION, 100.0),
            (ColumnKind.TRACK_NUMBER, 50.0),
            (ColumnKind.KIND, 100.0),
            (ColumnKind.DATE_ADDED, 150.0),
        ],
    )
    def test_default_widths(self, kind, width):
        assert Column(kind).effective_width() == width

    def test_override_wins(self):
        column = Column(ColumnKind.ARTIST)
        column.set_width(220)
        assert column.effective_width() == 220.0

    def test_clearing_override_restores_default(self):
        column = Column(ColumnKind.ARTIST, width=220.0)
        column.set_width(None)
        assert column.effective_width() == 150.0

    @pytest.mark.parametrize("width", [-1, -0.5, float("nan"), float("inf"), 10**400, True, "wide"])
    def test_bad_width_is_rejected(self, width):
        column = Column(ColumnKind.ARTIST, width=220.0)
        with pytest.raises(ValueError):
            column.set_width(width)
        assert column.width == 220.0

    def test_zero_width_is_allowed(self):
        column = Column(ColumnKind.ARTIST)
        column.set_width(0)
        assert column.effective_width() == 0.0

    def test_display_names(self):
        names = [c.display_name() for c in default_columns()]
        assert names == ["", "Name", "Artist", "Album", "Time", "Track Number", "Kind", "Date Added"]

    def test_set_enabled(self):
        column = Column(ColumnKind.KIND)
        column.set_enabled(False)
        assert column.enabled is False


class TestColumnRecords:
    def test_width_omitted_when_unset(self):
        assert Column(ColumnKind.TITLE).to_record() == {"kind": "Title", "enabled": True}

    def test_width_written_when_set(self):
        record = Column(ColumnKind.DATE_ADDED, width=120.0, enabled=False).to_record()
        assert record == {"kind": "DateAdded", "width": 120.0, "enabled": False}

    def test_parse(self):
        column = column_from_record({"kind": "TrackNumber", "width": 60, "enabled": False})
        assert column.kind == ColumnKind.TRACK_NUMBER
        assert column.width == 60.0
        assert column.enabled is False

    def test_null_width_is_unset(self):
        assert column_from_record({"kind": "Album", "width": None, "enabled": True}).width is None

    def test_unknown_kind_fails(self):
        with pytest.raises(ValueError):
            column_from_record({"kind": "Genre", "enabled": True})

    def test_bad_width_fails(self):
        with pytest.raises(ValueError):
            column_from_record({"kind": "Album", "width": "wide", "enabled": True})

    @pytest.mark.parametrize("width", [-5, 1e308 * 10, float("nan")])
    def test_out_of_range_width_fails(self, width):
        with pytest.raises(ValueError):
            column_from_record({"kind": "Album", "width": width, "enabled": True})
