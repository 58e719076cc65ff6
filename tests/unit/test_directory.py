"""Unit tests for table directory parsing and head/maxp/loca reads."""

import struct

import pytest
from sfnt_builder import (
    SQUARE,
    build_font,
    build_sfnt,
    encode_glyph,
    head_table,
    maxp_table,
)

from glyphcore.core.directory import (
    RawFont,
    find_table,
    parse_table_directory,
    require_tables,
)
from glyphcore.core.head import read_font_bounding_box, read_units_per_em
from glyphcore.core.location import (
    read_num_glyphs,
    resolve_glyph_offsets,
    resolve_glyph_spans,
)
from glyphcore.domain import TableDirectoryEntry
from glyphcore.exceptions import BufferOverrunError, MalformedGlyphError, TableNotFoundError


class TestParseTableDirectory:
    """Tests for parse_table_directory."""

    def test_entries_in_file_order(self):
        """Test tags, offsets and lengths are read from each record."""
        data = build_sfnt({"head": b"\0" * 54, "maxp": b"\0" * 6})
        entries = parse_table_directory(data)

        assert [e.tag for e in entries] == ["head", "maxp"]
        assert entries[0].offset == 12 + 2 * 16
        assert entries[0].length == 54
        # head is padded to 56 bytes
        assert entries[1].offset == entries[0].offset + 56
        assert entries[1].length == 6

    def test_tag_with_trailing_space(self):
        """Test tags keep their trailing spaces."""
        data = build_sfnt({"CFF ": b"\0\0\0\0"})
        assert parse_table_directory(data)[0].tag == "CFF "

    def test_no_tables(self):
        """Test a header declaring zero tables."""
        data = struct.pack(">IHHHH", 0x00010000, 0, 0, 0, 0)
        assert parse_table_directory(data) == ()

    def test_truncated_header(self):
        """Test a buffer too short to hold numTables."""
        with pytest.raises(BufferOverrunError):
            parse_table_directory(b"\0\1\0")

    def test_truncated_directory(self):
        """Test a directory declaring more records than the buffer holds."""
        data = struct.pack(">IHHHH", 0x00010000, 3, 0, 0, 0) + b"\0" * 20
        with pytest.raises(BufferOverrunError):
            parse_table_directory(data)


class TestFindTable:
    """Tests for table lookup by tag."""

    def test_find_existing(self):
        """Test lookup of a present tag."""
        entries = [TableDirectoryEntry("head", 10, 54), TableDirectoryEntry("glyf", 64, 8)]
        assert find_table(entries, "glyf").offset == 64

    def test_first_match_wins(self):
        """Test duplicate tags resolve to the first record."""
        entries = [TableDirectoryEntry("glyf", 1, 1), TableDirectoryEntry("glyf", 2, 2)]
        assert find_table(entries, "glyf").offset == 1

    def test_missing_tag(self):
        """Test a missing tag raises TableNotFoundError."""
        with pytest.raises(TableNotFoundError) as exc_info:
            find_table([TableDirectoryEntry("head", 0, 0)], "cmap")
        assert exc_info.value.tag == "cmap"

    def test_require_tables_reports_first_missing(self):
        """Test require_tables fails on the first missing required table."""
        entries = [TableDirectoryEntry(tag, 0, 0) for tag in ("head", "maxp", "glyf", "cmap")]
        with pytest.raises(TableNotFoundError, match="loca"):
            require_tables(entries)

    def test_raw_font_table(self):
        """Test RawFont exposes lookup and membership."""
        font = RawFont.from_bytes(build_sfnt({"head": head_table()}))
        assert font.has_table("head")
        assert not font.has_table("glyf")
        with pytest.raises(TableNotFoundError):
            font.table("glyf")


class TestHeadMetrics:
    """Tests for font-wide metrics read from head."""

    def test_bounding_box_order(self):
        """Test the bbox is returned as (xmin, ymin, xmax, ymax)."""
        font = RawFont.from_bytes(build_sfnt({"head": head_table((-50, -200, 1200, 950))}))
        assert read_font_bounding_box(font) == (-50, -200, 1200, 950)

    def test_units_per_em(self):
        """Test unitsPerEm."""
        font = RawFont.from_bytes(build_sfnt({"head": head_table(units_per_em=2048)}))
        assert read_units_per_em(font) == 2048

    def test_truncated_head(self):
        """Test a head table cut off before the bbox."""
        font = RawFont.from_bytes(build_sfnt({"head": head_table()[:30]}))
        with pytest.raises(BufferOverrunError):
            read_font_bounding_box(font)


class TestGlyphLocations:
    """Tests for loca resolution."""

    @pytest.mark.parametrize("long_loca", [False, True])
    def test_offsets_match_records(self, long_loca):
        """Test short and long loca formats yield the same absolute offsets."""
        first = encode_glyph([SQUARE])
        second = encode_glyph([SQUARE, SQUARE])
        font = RawFont.from_bytes(build_font([first, second], long_loca=long_loca))
        glyf = font.table("glyf")

        offsets = resolve_glyph_offsets(font)

        assert offsets == [glyf.offset, glyf.offset + len(first)]

    def test_short_entries_are_doubled(self):
        """Test short loca entries store half the byte offset."""
        loca = struct.pack(">HH", 0, 7)
        data = build_sfnt(
            {
                "glyf": b"\0" * 16,
                "head": head_table(index_to_loc_format=0),
                "loca": loca,
                "maxp": maxp_table(2),
            }
        )
        font = RawFont.from_bytes(data)
        glyf = font.table("glyf")
        assert resolve_glyph_offsets(font) == [glyf.offset, glyf.offset + 14]

    def test_terminal_entry_not_needed(self):
        """Test offsets resolve when loca holds only numGlyphs entries."""
        data = build_sfnt(
            {
                "glyf": b"\0" * 8,
                "head": head_table(index_to_loc_format=1),
                "loca": struct.pack(">II", 0, 4),
                "maxp": maxp_table(2),
            }
        )
        font = RawFont.from_bytes(data)
        assert len(resolve_glyph_offsets(font)) == 2

    def test_num_glyphs(self):
        """Test numGlyphs is read from maxp."""
        font = RawFont.from_bytes(build_font([encode_glyph([SQUARE])] * 3))
        assert read_num_glyphs(font) == 3

    def test_spans_detect_empty_records(self):
        """Test zero-length records are reported with length 0."""
        square = encode_glyph([SQUARE])
        font = RawFont.from_bytes(build_font([square, b"", square]))

        spans = resolve_glyph_spans(font)

        assert [length for _, length in spans] == [len(square), 0, len(square)]
        assert spans[1][0] == spans[2][0]

    def test_spans_without_terminal_entry(self):
        """Test the last glyph runs to the end of glyf when loca has no terminal entry."""
        # loca is the last table, so reading a third entry would overrun the file.
        data = build_sfnt(
            {
                "head": head_table(index_to_loc_format=0),
                "maxp": maxp_table(2),
                "glyf": b"\0" * 10,
                "loca": struct.pack(">HH", 0, 3),
            }
        )
        font = RawFont.from_bytes(data)
        glyf = font.table("glyf")

        assert resolve_glyph_spans(font) == [(glyf.offset, 6), (glyf.offset + 6, 4)]

    def test_spans_terminal_entry_not_read_past_loca(self):
        """Test bytes after a short loca table are not taken as its terminal entry."""
        data = build_sfnt(
            {
                "head": head_table(index_to_loc_format=0),
                "loca": struct.pack(">H", 0),
                "maxp": maxp_table(1),
                "glyf": b"\0" * 12,
            }
        )
        font = RawFont.from_bytes(data)
        assert resolve_glyph_spans(font) == [(font.table("glyf").offset, 12)]

    def test_spans_decreasing_offsets(self):
        """Test a loca whose offsets go backwards is rejected."""
        data = build_sfnt(
            {
                "glyf": b"\0" * 40,
                "head": head_table(index_to_loc_format=0),
                "loca": struct.pack(">HHH", 0, 10, 5),
                "maxp": maxp_table(2),
            }
        )
        with pytest.raises(MalformedGlyphError) as exc_info:
            resolve_glyph_spans(RawFont.from_bytes(data))
        assert exc_info.value.glyph_id == 1

    def test_truncated_loca(self):
        """Test a loca table shorter than numGlyphs entries."""
        data = build_sfnt(
            {
                "glyf": b"",
                "head": head_table(),
                "loca": struct.pack(">H", 0),
                "maxp": maxp_table(40),
            }
        )
        with pytest.raises(BufferOverrunError, match="loca"):
            resolve_glyph_offsets(RawFont.from_bytes(data))
