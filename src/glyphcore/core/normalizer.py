"""Contour normalization for quadratic outline consumers.

TrueType contours may contain two consecutive on-curve points (a straight
segment) or two consecutive off-curve points (an implied on-curve point at
their midpoint). Renderers evaluating quadratic curves want strict
on/off alternation, so the missing points are made explicit here.
"""

from glyphcore.domain import Contour, GlyphOutline, Point


def normalize_contour(contour: Contour) -> Contour:
    """Insert midpoints so on-curve and off-curve points alternate.

    For each pair (current, next), wrapping around at the end, that shares
    the same on-curve state, a point at their midpoint with the opposite
    state is inserted after ``current``. A single point is paired with
    itself and gains a copy with the opposite state. Applying this to an
    already alternating contour returns it unchanged.

    Args:
        contour: Contour to normalize

    Returns:
        The normalized contour
    """
    points = contour.points
    n = len(points)
    if n == 0:
        return contour

    result: list[Point] = []
    for i, current in enumerate(points):
        following = points[(i + 1) % n]
        result.append(current)
        if current.on_curve == following.on_curve:
            result.append(current.midpoint(following, on_curve=not current.on_curve))

    if len(result) == n:
        return contour
    return Contour(points=tuple(result))


def normalize_outline(outline: GlyphOutline) -> GlyphOutline:
    """Normalize every contour of an outline.

    End indices of the result (``GlyphOutline.end_points``) are cumulative
    counts into the expanded point sequence.
    """
    if outline.is_empty():
        return outline
    return GlyphOutline(
        bounding_box=outline.bounding_box,
        contours=tuple(normalize_contour(c) for c in outline.contours),
        is_composite=outline.is_composite,
    )


def inserted_point_count(before: GlyphOutline, after: GlyphOutline) -> int:
    """Number of synthetic points added by normalization."""
    return after.point_count - before.point_count
