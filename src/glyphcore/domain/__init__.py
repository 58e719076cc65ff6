"""Domain models for glyphcore.

This module contains the decoded representation of a font: points,
contours, glyph outlines and the loaded font itself. All models are:

- Immutable (frozen dataclasses, tuples)
- Independent of the binary layout they were decoded from

Key classes:
- Point: A 2D point with its on-curve state
- Contour: A closed loop of points
- GlyphOutline: A glyph's bounding box and contours
- TableDirectoryEntry: One record of the SFNT table directory
- LoadedFont: Glyph table, codepoint map and font metrics
"""

from glyphcore.domain.contour import Contour, Point
from glyphcore.domain.font import LoadedFont, TableDirectoryEntry
from glyphcore.domain.glyph import BoundingBox, GlyphOutline

__all__: list[str] = [
    "BoundingBox",
    "Contour",
    "GlyphOutline",
    "LoadedFont",
    "Point",
    "TableDirectoryEntry",
]
