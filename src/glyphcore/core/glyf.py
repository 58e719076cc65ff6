"""Simple glyph decoding from the ``glyf`` table.

A simple glyph record is laid out as:

    int16   numberOfContours
    int16   xMin, yMin, xMax, yMax
    uint16  endPtsOfContours[numberOfContours]
    uint16  instructionLength
    uint8   instructions[instructionLength]
    uint8   flags[]          (run-length encoded)
    x deltas                 (1 or 2 bytes each, or none)
    y deltas                 (1 or 2 bytes each, or none)

Coordinates are deltas accumulated across the whole glyph, not per contour.
Records with a negative contour count are composite glyphs; they are not
resolved and decode to an outline carrying only the bounding box.
"""

from glyphcore.core.byte_reader import bit, check_range, read_i16, read_u8, read_u16
from glyphcore.domain import Contour, GlyphOutline, Point
from glyphcore.exceptions import MalformedGlyphError

# Flag bits
ON_CURVE_POINT = 0
X_SHORT_VECTOR = 1
Y_SHORT_VECTOR = 2
REPEAT_FLAG = 3
X_IS_SAME_OR_POSITIVE = 4
Y_IS_SAME_OR_POSITIVE = 5

GLYPH_HEADER_SIZE = 10


def read_glyph_header(buf: bytes, offset: int) -> tuple[int, tuple[int, int, int, int]]:
    """Read ``numberOfContours`` and the bounding box of a glyph record.

    Returns:
        Tuple of (number_of_contours, (xmin, ymin, xmax, ymax))
    """
    number_of_contours = read_i16(buf, offset, "numberOfContours")
    bbox = (
        read_i16(buf, offset + 2, "glyph xMin"),
        read_i16(buf, offset + 4, "glyph yMin"),
        read_i16(buf, offset + 6, "glyph xMax"),
        read_i16(buf, offset + 8, "glyph yMax"),
    )
    return number_of_contours, bbox


def decode_flags(buf: bytes, offset: int, point_count: int) -> tuple[list[int], int]:
    """Expand the run-length encoded flag array.

    A flag with the repeat bit set is followed by a count byte ``R``; the
    flag then applies to ``R + 1`` points in total. A run reaching past
    ``point_count`` is cut off at ``point_count``.

    Args:
        buf: Font buffer
        offset: Offset of the first flag byte
        point_count: Number of points in the glyph

    Returns:
        Tuple of (one flag per point, offset just past the flag array)
    """
    flags: list[int] = []
    while len(flags) < point_count:
        flag = read_u8(buf, offset, "glyph flag")
        offset += 1
        run = 1
        if bit(flag, REPEAT_FLAG):
            run += read_u8(buf, offset, "glyph flag repeat count")
            offset += 1
        flags.extend([flag] * min(run, point_count - len(flags)))
    return flags, offset


def decode_coordinates(
    buf: bytes,
    offset: int,
    flags: list[int],
    short_bit: int,
    same_bit: int,
    axis: str,
) -> tuple[list[int], int]:
    """Decode one axis of delta-encoded coordinates.

    For each point: with the short bit set one unsigned byte follows and the
    same bit gives its sign (set = positive); with the short bit clear a
    signed 16-bit delta follows unless the same bit is set, in which case
    the delta is zero and nothing is read.

    Args:
        buf: Font buffer
        offset: Offset of the first delta byte for this axis
        flags: Expanded per-point flags
        short_bit: X_SHORT_VECTOR or Y_SHORT_VECTOR
        same_bit: X_IS_SAME_OR_POSITIVE or Y_IS_SAME_OR_POSITIVE
        axis: "x" or "y", used in error messages

    Returns:
        Tuple of (absolute coordinates, offset just past this axis' data)
    """
    values: list[int] = []
    current = 0
    for flag in flags:
        if bit(flag, short_bit):
            delta = read_u8(buf, offset, f"{axis} coordinate")
            offset += 1
            current += delta if bit(flag, same_bit) else -delta
        elif not bit(flag, same_bit):
            current += read_i16(buf, offset, f"{axis} coordinate")
            offset += 2
        values.append(current)
    return values, offset


def split_contours(points: list[Point], end_points: list[int]) -> tuple[Contour, ...]:
    """Partition ``points`` into contours using inclusive end indices."""
    contours: list[Contour] = []
    start = 0
    for end in end_points:
        contours.append(Contour(points=tuple(points[start : end + 1])))
        start = end + 1
    return tuple(contours)


def decode_glyph(buf: bytes, offset: int, glyph_id: int | None = None) -> GlyphOutline:
    """Decode the glyph record starting at ``offset``.

    Args:
        buf: Whole font buffer
        offset: Absolute offset of the glyph record
        glyph_id: Glyph id, used only in error messages

    Returns:
        The decoded outline. Composite and contourless records yield an
        outline with the header bounding box and no contours.

    Raises:
        BufferOverrunError: If the record runs past the end of the buffer
        MalformedGlyphError: If contour end points are not increasing
    """
    number_of_contours, bbox = read_glyph_header(buf, offset)
    if number_of_contours <= 0:
        return GlyphOutline(bounding_box=bbox, is_composite=number_of_contours < 0)
    offset += GLYPH_HEADER_SIZE

    end_points: list[int] = []
    for i in range(number_of_contours):
        end = read_u16(buf, offset + i * 2, "endPtsOfContours")
        if end_points and end <= end_points[-1]:
            raise MalformedGlyphError(
                glyph_id,
                f"contour end points not increasing ({end_points[-1]} then {end})",
            )
        end_points.append(end)
    offset += number_of_contours * 2
    point_count = end_points[-1] + 1

    instruction_length = read_u16(buf, offset, "instructionLength")
    offset += 2
    # Hinting instructions are not interpreted, only skipped.
    check_range(buf, offset, instruction_length, "instructions")
    offset += instruction_length

    flags, offset = decode_flags(buf, offset, point_count)
    xs, offset = decode_coordinates(
        buf, offset, flags, X_SHORT_VECTOR, X_IS_SAME_OR_POSITIVE, "x"
    )
    ys, offset = decode_coordinates(
        buf, offset, flags, Y_SHORT_VECTOR, Y_IS_SAME_OR_POSITIVE, "y"
    )

    points = [
        Point(float(x), float(y), bit(flag, ON_CURVE_POINT))
        for x, y, flag in zip(xs, ys, flags)
    ]
    return GlyphOutline(bounding_box=bbox, contours=split_contours(points, end_points))
