"""Tests for domain models to verify they work correctly."""

from types import MappingProxyType

import pytest

from glyphcore.domain import (
    Contour,
    GlyphOutline,
    LoadedFont,
    Point,
    TableDirectoryEntry,
)


def _square() -> Contour:
    return Contour(points=(Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)))


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0)
        assert p.x == 100.0
        assert p.y == 200.0
        assert p.on_curve

    def test_point_off_curve(self) -> None:
        """Test point with explicit on-curve state."""
        p = Point(100.0, 200.0, on_curve=False)
        assert not p.on_curve

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        p = Point(100.0, 200.0)
        assert p.to_tuple() == (100.0, 200.0)

    def test_midpoint(self) -> None:
        """Test midpoint takes the requested on-curve state."""
        mid = Point(0, 0).midpoint(Point(10, 5), on_curve=False)
        assert mid == Point(5.0, 2.5, False)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.0, 200.0, on_curve=False)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Test that equal points hash equally."""
        assert len({Point(1, 2), Point(1, 2), Point(1, 2, False)}) == 2


class TestContour:
    """Tests for Contour class."""

    def test_contour_creation(self) -> None:
        """Test basic contour creation."""
        contour = _square()
        assert len(contour) == 4
        assert list(contour)[2] == Point(100, 100)

    def test_all_on_curve_is_not_alternating(self) -> None:
        """Test adjacent on-curve points break alternation."""
        assert not _square().is_alternating()

    def test_alternating(self) -> None:
        """Test alternation including the wraparound pair."""
        contour = Contour(points=(Point(0, 0), Point(5, 5, False), Point(10, 0), Point(5, -5, False)))
        assert contour.is_alternating()

    def test_odd_length_cannot_alternate(self) -> None:
        """Test the wraparound pair is checked."""
        contour = Contour(points=(Point(0, 0), Point(5, 5, False), Point(10, 0)))
        assert not contour.is_alternating()

    def test_single_point_is_not_alternating(self) -> None:
        """Test a lone point fails against itself across the wraparound."""
        assert not Contour(points=(Point(5, 5),)).is_alternating()

    def test_contour_serialization(self) -> None:
        """Test contour round-trips through a dictionary."""
        contour = _square()
        assert Contour.from_dict(contour.to_dict()) == contour


class TestGlyphOutline:
    """Tests for GlyphOutline class."""

    def test_empty_outline(self) -> None:
        """Test an outline without contours."""
        outline = GlyphOutline(bounding_box=(0, 0, 0, 0))
        assert outline.is_empty()
        assert outline.point_count == 0
        assert outline.end_points == []
        assert not outline.is_composite

    def test_end_points_are_cumulative(self) -> None:
        """Test end indices run across contours."""
        outline = GlyphOutline(
            bounding_box=(0, 0, 100, 100),
            contours=(_square(), Contour(points=(Point(1, 1), Point(2, 2)))),
        )
        assert outline.end_points == [3, 5]
        assert outline.point_count == 6
        assert outline.points[4] == Point(1, 1)

    def test_outline_serialization(self) -> None:
        """Test outline serialization keeps the composite flag."""
        outline = GlyphOutline(bounding_box=(-1, -2, 3, 4), is_composite=True)
        data = outline.to_dict()

        assert data["bounding_box"] == [-1, -2, 3, 4]
        assert GlyphOutline.from_dict(data) == outline


class TestLoadedFont:
    """Tests for LoadedFont class."""

    @pytest.fixture
    def font(self) -> LoadedFont:
        outline = GlyphOutline(bounding_box=(0, 0, 100, 100), contours=(_square(),))
        return LoadedFont(
            glyphs=(GlyphOutline(bounding_box=(0, 0, 0, 0)), outline),
            codepoint_map=MappingProxyType({65: 1, 66: 9}),
            bounding_box=(0, 0, 100, 100),
            units_per_em=1000,
            tables=(TableDirectoryEntry("glyf", 100, 40),),
        )

    def test_num_glyphs(self, font: LoadedFont) -> None:
        """Test glyph count."""
        assert font.num_glyphs == 2

    def test_lookup(self, font: LoadedFont) -> None:
        """Test codepoint lookups."""
        assert font.glyph_id_for(65) == 1
        assert font.glyph_for_codepoint(65) is font.glyphs[1]

    def test_unmapped_codepoint(self, font: LoadedFont) -> None:
        """Test an unmapped codepoint has neither id nor outline."""
        assert font.glyph_id_for(67) is None
        assert font.glyph_for_codepoint(67) is None

    def test_glyph_id_out_of_range(self, font: LoadedFont) -> None:
        """Test a mapped id past the glyph table has no outline."""
        assert font.glyph_id_for(66) == 9
        assert font.glyph_for_codepoint(66) is None

    def test_font_immutable(self, font: LoadedFont) -> None:
        """Test that the loaded font is immutable."""
        with pytest.raises(AttributeError):
            font.units_per_em = 2048  # type: ignore
