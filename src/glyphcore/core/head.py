"""Font-wide metrics from the ``head`` table."""

from glyphcore.core.byte_reader import read_i16, read_u16
from glyphcore.core.directory import RawFont
from glyphcore.domain import BoundingBox

UNITS_PER_EM_OFFSET = 18
XMIN_OFFSET = 36
YMIN_OFFSET = 38
XMAX_OFFSET = 40
YMAX_OFFSET = 42
INDEX_TO_LOC_FORMAT_OFFSET = 50


def read_units_per_em(font: RawFont) -> int:
    """Read ``unitsPerEm``."""
    head = font.table("head")
    return read_u16(font.data, head.offset + UNITS_PER_EM_OFFSET, "head.unitsPerEm")


def read_font_bounding_box(font: RawFont) -> BoundingBox:
    """Read the font-wide bounding box as (xmin, ymin, xmax, ymax)."""
    head = font.table("head")
    buf = font.data
    return (
        read_i16(buf, head.offset + XMIN_OFFSET, "head.xMin"),
        read_i16(buf, head.offset + YMIN_OFFSET, "head.yMin"),
        read_i16(buf, head.offset + XMAX_OFFSET, "head.xMax"),
        read_i16(buf, head.offset + YMAX_OFFSET, "head.yMax"),
    )


def read_index_to_loc_format(font: RawFont) -> int:
    """Read ``indexToLocFormat``: 0 for short loca entries, else long."""
    head = font.table("head")
    return read_i16(
        font.data, head.offset + INDEX_TO_LOC_FORMAT_OFFSET, "head.indexToLocFormat"
    )
