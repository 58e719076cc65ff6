"""Font-level domain types: the table directory and the loaded font."""

from collections.abc import Mapping
from dataclasses import dataclass

from glyphcore.domain.glyph import BoundingBox, GlyphOutline


@dataclass(frozen=True, slots=True)
class TableDirectoryEntry:
    """One record of the SFNT table directory.

    Attributes:
        tag: 4-character table identifier (e.g. "glyf", "cmap")
        offset: Absolute byte offset of the table in the font
        length: Table length in bytes
    """

    tag: str
    offset: int
    length: int


@dataclass(frozen=True)
class LoadedFont:
    """A fully decoded font, ready for rendering.

    Built once by the loader and never mutated afterwards, so it can be read
    from any number of threads.

    Attributes:
        glyphs: Outlines indexed by glyph id
        codepoint_map: Read-only mapping of BMP codepoint to glyph id
        bounding_box: Font-wide (xmin, ymin, xmax, ymax) from the head table
        units_per_em: Design units per em from the head table
        tables: The table directory the font was decoded from
    """

    glyphs: tuple[GlyphOutline, ...]
    codepoint_map: Mapping[int, int]
    bounding_box: BoundingBox
    units_per_em: int
    tables: tuple[TableDirectoryEntry, ...] = ()

    @property
    def num_glyphs(self) -> int:
        """Number of glyphs in the font."""
        return len(self.glyphs)

    def glyph_id_for(self, codepoint: int) -> int | None:
        """Look up the glyph id for a codepoint, or None if unmapped."""
        return self.codepoint_map.get(codepoint)

    def glyph_for_codepoint(self, codepoint: int) -> GlyphOutline | None:
        """Look up the outline for a codepoint.

        Returns:
            The outline, or None if the codepoint is unmapped or maps to a
            glyph id outside the glyph table
        """
        glyph_id = self.glyph_id_for(codepoint)
        if glyph_id is None or glyph_id >= len(self.glyphs):
            return None
        return self.glyphs[glyph_id]
