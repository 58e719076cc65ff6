"""SFNT table directory parsing.

The SFNT header stores the table count at offset 4, followed at offset 12
by one 16-byte record per table: tag, checksum (unused here), offset and
length.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from glyphcore.core.byte_reader import read_tag, read_u16, read_u32
from glyphcore.domain import TableDirectoryEntry
from glyphcore.exceptions import TableNotFoundError

NUM_TABLES_OFFSET = 4
DIRECTORY_OFFSET = 12
DIRECTORY_ENTRY_SIZE = 16

REQUIRED_TABLES = ("head", "maxp", "loca", "glyf", "cmap")


def parse_table_directory(buf: bytes) -> tuple[TableDirectoryEntry, ...]:
    """Parse the table directory of an SFNT font.

    Args:
        buf: Whole font file

    Returns:
        Directory entries in file order

    Raises:
        BufferOverrunError: If the header or any record is truncated
    """
    num_tables = read_u16(buf, NUM_TABLES_OFFSET, "numTables")
    entries: list[TableDirectoryEntry] = []
    for i in range(num_tables):
        record = DIRECTORY_OFFSET + i * DIRECTORY_ENTRY_SIZE
        entries.append(
            TableDirectoryEntry(
                tag=read_tag(buf, record, "table tag"),
                offset=read_u32(buf, record + 8, "table offset"),
                length=read_u32(buf, record + 12, "table length"),
            )
        )
    return tuple(entries)


def find_table(directory: Iterable[TableDirectoryEntry], tag: str) -> TableDirectoryEntry:
    """Return the first directory entry with the given tag.

    Raises:
        TableNotFoundError: If no entry has that tag
    """
    for entry in directory:
        if entry.tag == tag:
            return entry
    raise TableNotFoundError(tag)


def require_tables(
    directory: Iterable[TableDirectoryEntry],
    tags: Sequence[str] = REQUIRED_TABLES,
) -> None:
    """Fail fast if any of ``tags`` is missing from the directory.

    Raises:
        TableNotFoundError: For the first missing tag, in ``tags`` order
    """
    present = {entry.tag for entry in directory}
    for tag in tags:
        if tag not in present:
            raise TableNotFoundError(tag)


@dataclass(frozen=True)
class RawFont:
    """An immutable font buffer together with its table directory.

    Attributes:
        data: The whole font file
        tables: Parsed table directory
    """

    data: bytes
    tables: tuple[TableDirectoryEntry, ...]

    @classmethod
    def from_bytes(cls, data: bytes) -> "RawFont":
        """Copy ``data`` and parse its table directory."""
        data = bytes(data)
        return cls(data=data, tables=parse_table_directory(data))

    def table(self, tag: str) -> TableDirectoryEntry:
        """Look up a table by tag.

        Raises:
            TableNotFoundError: If the font has no such table
        """
        return find_table(self.tables, tag)

    def has_table(self, tag: str) -> bool:
        """Check whether the font declares a table."""
        return any(entry.tag == tag for entry in self.tables)
