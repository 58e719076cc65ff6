"""Font loading orchestration.

Runs the decoding pipeline over an in-memory font buffer:
1. Parse the table directory and check the required tables
2. Read font-wide metrics from head
3. Resolve glyph locations from maxp/head/loca
4. Decode each glyph record and normalize its contours
5. Decode the cmap

Any error aborts the whole load; a LoadedFont is only returned when every
step succeeded.
"""

import time
from types import MappingProxyType

import structlog

from glyphcore.config import GlyphcoreSettings
from glyphcore.core.cmap import decode_cmap
from glyphcore.core.directory import RawFont, require_tables
from glyphcore.core.glyf import decode_glyph
from glyphcore.core.head import read_font_bounding_box, read_units_per_em
from glyphcore.core.location import resolve_glyph_spans
from glyphcore.core.normalizer import inserted_point_count, normalize_outline
from glyphcore.domain import GlyphOutline, LoadedFont
from glyphcore.exceptions import FontParseError
from glyphcore.utils import LoadLogger, LoadStats, configure_logging


class FontLoader:
    """Decodes a font buffer into a LoadedFont.

    Example:
        loader = FontLoader(settings)
        font = loader.load(data)
        outline = font.glyph_for_codepoint(ord("A"))
    """

    def __init__(
        self,
        settings: GlyphcoreSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the loader.

        Args:
            settings: Settings to use (defaults if None)
            logger: Logger to use (configured from settings.logging if None)
        """
        self.settings = settings or GlyphcoreSettings()
        if logger is None:
            logger = configure_logging(
                log_file=self.settings.logging.log_file,
                console_level=self.settings.logging.log_level,
                file_level=self.settings.logging.file_log_level,
            )
        self.logger = logger
        self._load_logger = LoadLogger(self.logger)

    @property
    def stats(self) -> LoadStats:
        """Statistics of the most recent load."""
        return self._load_logger.stats

    def load(self, data: bytes) -> LoadedFont:
        """Decode a whole font.

        Args:
            data: The complete font file contents

        Returns:
            The decoded font

        Raises:
            FontParseError: If any part of the font cannot be decoded
        """
        self._load_logger = LoadLogger(self.logger)
        stats = self._load_logger.stats
        stats.start_time = time.time()

        font = RawFont.from_bytes(data)
        require_tables(font.tables)

        bounding_box = read_font_bounding_box(font)
        units_per_em = read_units_per_em(font)
        glyphs = self._decode_glyphs(font)

        codepoint_map = decode_cmap(font, self.settings.parsing.cmap_preferences)
        self._load_logger.log_cmap(len(codepoint_map))

        stats.glyph_count = len(glyphs)
        stats.end_time = time.time()
        self.logger.info(
            "Font loaded",
            glyphs=stats.glyph_count,
            simple=stats.simple_count,
            composite=stats.composite_count,
            empty=stats.empty_count,
            inserted_points=stats.inserted_points,
            codepoints=stats.mapped_codepoints,
            upm=units_per_em,
            duration_ms=round(stats.duration_seconds * 1000, 2),
        )

        return LoadedFont(
            glyphs=tuple(glyphs),
            codepoint_map=MappingProxyType(codepoint_map),
            bounding_box=bounding_box,
            units_per_em=units_per_em,
            tables=font.tables,
        )

    def _decode_glyphs(self, font: RawFont) -> list[GlyphOutline]:
        normalize = self.settings.parsing.normalize_contours
        glyphs: list[GlyphOutline] = []

        for glyph_id, (offset, length) in enumerate(resolve_glyph_spans(font)):
            if length == 0:
                glyphs.append(GlyphOutline(bounding_box=(0, 0, 0, 0)))
                self._load_logger.log_glyph_skipped(glyph_id, "no outline data")
                continue

            try:
                outline = decode_glyph(font.data, offset, glyph_id)
            except FontParseError as e:
                self._load_logger.log_glyph_error(glyph_id, offset, e)
                raise

            if outline.is_empty():
                reason = "composite glyph" if outline.is_composite else "no contours"
                self._load_logger.log_glyph_skipped(glyph_id, reason)
                glyphs.append(outline)
                continue

            decoded = outline
            if normalize:
                outline = normalize_outline(outline)
            self._load_logger.log_glyph_decoded(
                glyph_id,
                contours=len(outline.contours),
                points=outline.point_count,
                inserted=inserted_point_count(decoded, outline),
            )
            glyphs.append(outline)

        return glyphs


def load_font(
    data: bytes,
    settings: GlyphcoreSettings | None = None,
    logger: structlog.stdlib.BoundLogger | None = None,
) -> LoadedFont:
    """Decode a whole font buffer. See FontLoader.load."""
    return FontLoader(settings, logger).load(data)
