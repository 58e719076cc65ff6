"""glyphcore - Decode TrueType glyph outlines and character maps.

glyphcore reads a raw SFNT/TrueType font into glyph outlines (contours of
on-curve and off-curve points in font design units) and a Unicode codepoint
to glyph id mapping, ready for a rendering layer to consume.

Example:
    >>> from pathlib import Path
    >>> from glyphcore.io import FontReader
    >>> font = FontReader(Path("Roboto-Regular.ttf")).load()
    >>> outline = font.glyph_for_codepoint(ord("A"))
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
