"""Character-to-glyph mapping from the ``cmap`` table.

Only the Unicode BMP is supported: a (3, 1) Windows Unicode BMP subtable is
preferred, then a (0, 3) Unicode BMP subtable, and the selected subtable
must be format 4 (segment mapping to delta values). Anything else fails
loudly rather than producing a partial mapping.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from glyphcore.core.byte_reader import read_i16, read_u16, read_u32
from glyphcore.core.directory import RawFont
from glyphcore.exceptions import NoUnicodeCmapFoundError, UnsupportedCmapFormatError

logger = logging.getLogger(__name__)

WINDOWS_UNICODE_BMP = (3, 1)
UNICODE_BMP = (0, 3)
DEFAULT_PREFERENCES: tuple[tuple[int, int], ...] = (WINDOWS_UNICODE_BMP, UNICODE_BMP)

CMAP_HEADER_SIZE = 4
ENCODING_RECORD_SIZE = 8


@dataclass(frozen=True, slots=True)
class EncodingRecord:
    """One cmap encoding record.

    Attributes:
        platform_id: Platform identifier (0 = Unicode, 3 = Windows)
        encoding_id: Platform-specific encoding identifier
        offset: Subtable offset relative to the start of the cmap table
    """

    platform_id: int
    encoding_id: int
    offset: int

    @property
    def key(self) -> tuple[int, int]:
        return (self.platform_id, self.encoding_id)


def read_encoding_records(buf: bytes, cmap_offset: int) -> list[EncodingRecord]:
    """Read the cmap header and its encoding records."""
    num_tables = read_u16(buf, cmap_offset + 2, "cmap.numTables")
    records: list[EncodingRecord] = []
    for i in range(num_tables):
        record = cmap_offset + CMAP_HEADER_SIZE + i * ENCODING_RECORD_SIZE
        records.append(
            EncodingRecord(
                platform_id=read_u16(buf, record, "cmap platformID"),
                encoding_id=read_u16(buf, record + 2, "cmap encodingID"),
                offset=read_u32(buf, record + 4, "cmap subtable offset"),
            )
        )
    return records


def select_subtable(
    records: Sequence[EncodingRecord],
    preferences: Sequence[tuple[int, int]] = DEFAULT_PREFERENCES,
) -> EncodingRecord:
    """Pick the encoding record to decode.

    Args:
        records: Encoding records from the cmap header
        preferences: (platform, encoding) pairs, most preferred first

    Returns:
        The first record matching the highest-ranked preference

    Raises:
        NoUnicodeCmapFoundError: If no record matches any preference
    """
    for wanted in preferences:
        for record in records:
            if record.key == tuple(wanted):
                return record
    raise NoUnicodeCmapFoundError([r.key for r in records])


def decode_format_4(buf: bytes, offset: int) -> dict[int, int]:
    """Decode a format 4 subtable into a codepoint -> glyph id mapping.

    Args:
        buf: Whole font buffer
        offset: Absolute offset of the subtable (its format field)

    Returns:
        Mapping of every codepoint covered by a segment to its glyph id
    """
    # format, length, language
    pos = offset + 6
    seg_count = read_u16(buf, pos, "cmap segCountX2") // 2
    # segCountX2, searchRange, entrySelector, rangeShift
    pos += 8

    end_codes = [read_u16(buf, pos + 2 * i, "cmap endCode") for i in range(seg_count)]
    # reservedPad
    pos += 2 * seg_count + 2
    start_codes = [read_u16(buf, pos + 2 * i, "cmap startCode") for i in range(seg_count)]
    pos += 2 * seg_count
    id_deltas = [read_i16(buf, pos + 2 * i, "cmap idDelta") for i in range(seg_count)]
    pos += 2 * seg_count
    range_offset_pos = pos
    id_range_offsets = [
        read_u16(buf, range_offset_pos + 2 * i, "cmap idRangeOffset") for i in range(seg_count)
    ]

    mapping: dict[int, int] = {}
    for i in range(seg_count):
        start, end = start_codes[i], end_codes[i]
        delta, range_offset = id_deltas[i], id_range_offsets[i]
        if start > end:
            logger.debug("Skipping inverted cmap segment %d (start %d > end %d)", i, start, end)
            continue

        if range_offset == 0:
            for code in range(start, end + 1):
                mapping[code] = (code + delta) % 65536
            continue

        # idRangeOffset is relative to the location of idRangeOffset[i] itself.
        base = range_offset_pos + 2 * i + range_offset
        for code in range(start, end + 1):
            raw = read_u16(buf, base + 2 * (code - start), "cmap glyphIdArray")
            mapping[code] = 0 if raw == 0 else (raw + delta) % 65536
    return mapping


def decode_cmap(
    font: RawFont,
    preferences: Sequence[tuple[int, int]] = DEFAULT_PREFERENCES,
) -> dict[int, int]:
    """Build the codepoint -> glyph id mapping for a font.

    Args:
        font: Raw font with its table directory
        preferences: (platform, encoding) pairs, most preferred first

    Returns:
        Mapping of BMP codepoint to glyph id

    Raises:
        TableNotFoundError: If the font has no cmap table
        NoUnicodeCmapFoundError: If no preferred subtable exists
        UnsupportedCmapFormatError: If the selected subtable is not format 4
    """
    buf = font.data
    cmap = font.table("cmap")
    records = read_encoding_records(buf, cmap.offset)
    selected = select_subtable(records, preferences)

    subtable_offset = cmap.offset + selected.offset
    fmt = read_u16(buf, subtable_offset, "cmap subtable format")
    logger.debug(
        "Selected cmap subtable (%d, %d), format %d",
        selected.platform_id,
        selected.encoding_id,
        fmt,
    )
    if fmt != 4:
        raise UnsupportedCmapFormatError(fmt)
    return decode_format_4(buf, subtable_offset)
