"""Core geometric types for outline representation.

This module defines the two building blocks of a decoded outline:
- Point: A 2D point in font design units with its on-curve state
- Contour: A closed loop of points
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in font design units.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
        on_curve: True for points on the outline, False for quadratic
            control points
    """

    x: float
    y: float
    on_curve: bool = True

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def midpoint(self, other: "Point", on_curve: bool) -> "Point":
        """Return the arithmetic midpoint between this point and ``other``.

        Args:
            other: The second point
            on_curve: On-curve state of the new point

        Returns:
            New Point halfway between the two
        """
        return Point((self.x + other.x) / 2.0, (self.y + other.y) / 2.0, on_curve)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x, y, and on_curve fields
        """
        return {"x": self.x, "y": self.y, "on_curve": self.on_curve}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y, and on_curve fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"], on_curve=data["on_curve"])


@dataclass(frozen=True)
class Contour:
    """A closed contour.

    The last point connects back to the first; there is no explicit closing
    point.

    Attributes:
        points: Points forming the contour, in outline order
    """

    points: tuple[Point, ...]

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def is_alternating(self) -> bool:
        """Check that every adjacent pair, including the wraparound, differs
        in on-curve state.

        Returns:
            True if on-curve and off-curve points strictly alternate
        """
        n = len(self.points)
        return all(
            self.points[i].on_curve != self.points[(i + 1) % n].on_curve
            for i in range(n)
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the contour
        """
        return {"points": [p.to_dict() for p in self.points]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contour":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a contour

        Returns:
            Contour instance
        """
        return cls(points=tuple(Point.from_dict(p) for p in data["points"]))
