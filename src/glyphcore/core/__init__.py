"""Core decoding algorithms for glyphcore.

This module contains the TrueType decoding pipeline:

- Byte reading (bounds-checked big-endian accessors)
- Table directory parsing
- Glyph location resolution (maxp, head, loca)
- Simple glyph outline decoding (glyf)
- Contour normalization (implied on/off-curve points)
- Character mapping (cmap format 4)

All functions are pure: they read from an immutable buffer and return new
values.

Key functions:
- parse_table_directory: Parse the SFNT table directory
- resolve_glyph_offsets: Absolute offset of every glyph record
- decode_glyph: Decode one glyph record into a GlyphOutline
- normalize_outline: Make on/off-curve points alternate
- decode_cmap: Build the codepoint -> glyph id mapping
- load_font: Run the whole pipeline over a font buffer

Key classes:
- RawFont: Font buffer with its table directory
- FontLoader: Pipeline orchestrator collecting load statistics
"""

from glyphcore.core.byte_reader import bit, read_i16, read_tag, read_u8, read_u16, read_u32
from glyphcore.core.cmap import decode_cmap, decode_format_4, select_subtable
from glyphcore.core.directory import (
    RawFont,
    find_table,
    parse_table_directory,
    require_tables,
)
from glyphcore.core.glyf import decode_glyph
from glyphcore.core.head import read_font_bounding_box, read_units_per_em
from glyphcore.core.loader import FontLoader, load_font
from glyphcore.core.location import resolve_glyph_offsets, resolve_glyph_spans
from glyphcore.core.normalizer import normalize_contour, normalize_outline

__all__ = [
    # Loader
    "FontLoader",
    # Directory
    "RawFont",
    # Byte reader
    "bit",
    # Decoders
    "decode_cmap",
    "decode_format_4",
    "decode_glyph",
    "find_table",
    "load_font",
    "normalize_contour",
    "normalize_outline",
    "parse_table_directory",
    "read_font_bounding_box",
    "read_i16",
    "read_tag",
    "read_u8",
    "read_u16",
    "read_u32",
    "read_units_per_em",
    "require_tables",
    "resolve_glyph_offsets",
    "resolve_glyph_spans",
    "select_subtable",
]
