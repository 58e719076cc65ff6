"""Font I/O layer for glyphcore.

This module performs the one upfront read of a font file and hands the
bytes to the decoder. The decoder itself never touches the filesystem.

Key classes:
- FontReader: Load and decode a font file
"""

from glyphcore.io.reader import FontReader

__all__ = [
    "FontReader",
]
