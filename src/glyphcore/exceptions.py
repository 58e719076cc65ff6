"""Exception hierarchy for glyphcore."""


class GlyphcoreError(Exception):
    """Base exception for all glyphcore errors."""

    pass


class FontError(GlyphcoreError):
    """Errors related to obtaining font data."""

    pass


class FontLoadError(FontError):
    """Error reading a font file from disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontParseError(GlyphcoreError):
    """Errors decoding the binary font data.

    All parse errors are fatal to the load: no partially decoded font is
    ever handed out.
    """

    pass


class TableNotFoundError(FontParseError):
    """A required table is missing from the table directory."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Table '{tag}' not found in font")


class BufferOverrunError(FontParseError):
    """A read would run past the end of the font buffer."""

    def __init__(
        self,
        offset: int,
        width: int,
        buffer_len: int,
        field: str | None = None,
    ) -> None:
        self.offset = offset
        self.width = width
        self.buffer_len = buffer_len
        self.field = field
        target = f" reading {field}" if field else ""
        super().__init__(
            f"Buffer overrun{target}: {width} byte(s) at offset {offset} "
            f"exceeds buffer of {buffer_len} bytes"
        )


class NoUnicodeCmapFoundError(FontParseError):
    """The cmap table has no Unicode subtable we know how to use."""

    def __init__(self, available: list[tuple[int, int]] | None = None) -> None:
        self.available = available or []
        listed = ", ".join(f"({p}, {e})" for p, e in self.available) or "none"
        super().__init__(f"No Unicode cmap subtable found (available: {listed})")


class UnsupportedCmapFormatError(FontParseError):
    """The selected cmap subtable uses a format we do not decode."""

    def __init__(self, format_number: int) -> None:
        self.format_number = format_number
        super().__init__(f"Unsupported cmap format: {format_number}")


class MalformedGlyphError(FontParseError):
    """A glyph record is structurally invalid."""

    def __init__(self, glyph_id: int | None, reason: str) -> None:
        self.glyph_id = glyph_id
        self.reason = reason
        where = f"glyph {glyph_id}" if glyph_id is not None else "glyph"
        super().__init__(f"Malformed {where}: {reason}")
