"""Glyph location resolution via the ``maxp``, ``head`` and ``loca`` tables."""

from glyphcore.core.byte_reader import read_u16, read_u32
from glyphcore.core.directory import RawFont
from glyphcore.core.head import read_index_to_loc_format
from glyphcore.exceptions import MalformedGlyphError

NUM_GLYPHS_OFFSET = 4


def read_num_glyphs(font: RawFont) -> int:
    """Read ``numGlyphs`` from the ``maxp`` table."""
    maxp = font.table("maxp")
    return read_u16(font.data, maxp.offset + NUM_GLYPHS_OFFSET, "maxp.numGlyphs")


def _read_loca_entries(font: RawFont, count: int) -> list[int]:
    """Read ``count`` loca entries as byte offsets relative to ``glyf``."""
    short_entries = read_index_to_loc_format(font) == 0
    loca = font.table("loca")
    buf = font.data

    if short_entries:
        return [read_u16(buf, loca.offset + i * 2, "loca entry") * 2 for i in range(count)]
    return [read_u32(buf, loca.offset + i * 4, "loca entry") for i in range(count)]


def resolve_glyph_offsets(font: RawFont) -> list[int]:
    """Compute the absolute offset of every glyph record inside ``glyf``.

    Short ``loca`` entries (indexToLocFormat 0) store half the byte offset
    and are doubled; long entries are byte offsets already. Only the start
    of each glyph is returned, the trailing terminal entry is not read.

    Args:
        font: Raw font with its table directory

    Returns:
        One absolute buffer offset per glyph id

    Raises:
        TableNotFoundError: If maxp, head, loca or glyf is missing
        BufferOverrunError: If the loca table is truncated
    """
    glyf = font.table("glyf")
    return [glyf.offset + entry for entry in _read_loca_entries(font, read_num_glyphs(font))]


def resolve_glyph_spans(font: RawFont) -> list[tuple[int, int]]:
    """Compute (absolute offset, record length) for every glyph.

    Unlike resolve_glyph_offsets this also uses the terminal loca entry, so
    zero-length records (glyphs without outline data such as a space) can be
    told apart from the record that follows them. When the loca table is too
    short to hold the terminal entry, the last glyph runs to the end of glyf.

    Returns:
        One (offset, length) pair per glyph id

    Raises:
        TableNotFoundError: If maxp, head, loca or glyf is missing
        BufferOverrunError: If the loca table is truncated
        MalformedGlyphError: If loca offsets decrease
    """
    glyf = font.table("glyf")
    loca = font.table("loca")
    num_glyphs = read_num_glyphs(font)
    entry_size = 2 if read_index_to_loc_format(font) == 0 else 4

    if loca.length >= (num_glyphs + 1) * entry_size:
        entries = _read_loca_entries(font, num_glyphs + 1)
    else:
        entries = _read_loca_entries(font, num_glyphs) + [glyf.length]

    spans: list[tuple[int, int]] = []
    for glyph_id, (start, end) in enumerate(zip(entries, entries[1:])):
        if end < start:
            raise MalformedGlyphError(glyph_id, f"loca offsets decrease ({start} then {end})")
        spans.append((glyf.offset + start, end - start))
    return spans
