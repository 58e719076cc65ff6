"""Font reader for loading TrueType fonts from disk.

This module provides the FontReader class, which performs the single
upfront read of a font file and hands the bytes to the decoder.
"""

from pathlib import Path

import structlog

from glyphcore.config import GlyphcoreSettings
from glyphcore.core.loader import FontLoader
from glyphcore.domain import LoadedFont
from glyphcore.exceptions import FontLoadError
from glyphcore.utils import LoadStats


class FontReader:
    """Loads a font file and decodes it.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            font = reader.font
            print(font.num_glyphs)
    """

    def __init__(
        self,
        font_path: Path,
        settings: GlyphcoreSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF font file
            settings: Settings passed to the loader
            logger: Logger passed to the loader
        """
        self._font_path = font_path
        self._loader = FontLoader(settings, logger)
        self._font: LoadedFont | None = None

    def load(self) -> LoadedFont:
        """Read and decode the font file.

        Returns:
            The decoded font

        Raises:
            FileNotFoundError: If font file does not exist
            FontLoadError: If the file cannot be read
            FontParseError: If the font data cannot be decoded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        try:
            data = self._font_path.read_bytes()
        except OSError as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

        self._font = self._loader.load(data)
        return self._font

    @property
    def font(self) -> LoadedFont:
        """Return the decoded font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def stats(self) -> LoadStats:
        """Statistics of the last load."""
        return self._loader.stats

    def close(self) -> None:
        """Drop the decoded font."""
        self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
