"""Glyph outline representation.

This module defines the decoded outline of a single glyph. A glyph has no
name here: its glyph id (its index in the font's glyph table) is its only
identity.
"""

from dataclasses import dataclass, field
from typing import Any

from glyphcore.domain.contour import Contour, Point

BoundingBox = tuple[int, int, int, int]


@dataclass(frozen=True)
class GlyphOutline:
    """Decoded outline of one glyph.

    Attributes:
        bounding_box: (xmin, ymin, xmax, ymax) as stored in the glyph header
        contours: Closed contours in outline order
        is_composite: True if the record was a composite glyph; such
            outlines carry only their bounding box
    """

    bounding_box: BoundingBox
    contours: tuple[Contour, ...] = field(default_factory=tuple)
    is_composite: bool = False

    def is_empty(self) -> bool:
        """Check if glyph has no outlines.

        Empty glyphs include spaces, contourless records and composites.

        Returns:
            True if glyph has no contours, False otherwise
        """
        return len(self.contours) == 0

    @property
    def point_count(self) -> int:
        """Total number of points across all contours."""
        return sum(len(c) for c in self.contours)

    @property
    def points(self) -> list[Point]:
        """All points flattened in contour order."""
        return [p for c in self.contours for p in c.points]

    @property
    def end_points(self) -> list[int]:
        """Inclusive index of the last point of each contour.

        Indices are cumulative into ``points``, matching the TrueType
        ``endPtsOfContours`` layout.
        """
        ends: list[int] = []
        total = 0
        for contour in self.contours:
            total += len(contour)
            ends.append(total - 1)
        return ends

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the outline
        """
        return {
            "bounding_box": list(self.bounding_box),
            "contours": [c.to_dict() for c in self.contours],
            "is_composite": self.is_composite,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphOutline":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of an outline

        Returns:
            GlyphOutline instance
        """
        xmin, ymin, xmax, ymax = data["bounding_box"]
        return cls(
            bounding_box=(xmin, ymin, xmax, ymax),
            contours=tuple(Contour.from_dict(c) for c in data["contours"]),
            is_composite=data.get("is_composite", False),
        )
