"""Bounds-checked big-endian reads over a font buffer.

Every accessor verifies that the requested bytes lie inside the buffer
before unpacking, and raises BufferOverrunError naming the field being read
otherwise. Nothing here ever returns a partially read value.
"""

import struct

from glyphcore.exceptions import BufferOverrunError

_U8 = struct.Struct(">B")
_U16 = struct.Struct(">H")
_I16 = struct.Struct(">h")
_U32 = struct.Struct(">I")


def check_range(buf: bytes, offset: int, width: int, field: str | None = None) -> None:
    """Ensure ``width`` bytes starting at ``offset`` are inside ``buf``.

    Args:
        buf: Font buffer
        offset: Absolute start offset
        width: Number of bytes that will be read
        field: Optional name of the field, used in the error message

    Raises:
        BufferOverrunError: If the range falls outside the buffer
    """
    if offset < 0 or width < 0 or offset + width > len(buf):
        raise BufferOverrunError(offset, width, len(buf), field)


def _unpack(fmt: struct.Struct, buf: bytes, offset: int, field: str | None) -> int:
    check_range(buf, offset, fmt.size, field)
    return fmt.unpack_from(buf, offset)[0]


def read_u8(buf: bytes, offset: int, field: str | None = None) -> int:
    """Read an unsigned byte."""
    return _unpack(_U8, buf, offset, field)


def read_u16(buf: bytes, offset: int, field: str | None = None) -> int:
    """Read a big-endian unsigned 16-bit integer."""
    return _unpack(_U16, buf, offset, field)


def read_i16(buf: bytes, offset: int, field: str | None = None) -> int:
    """Read a big-endian signed 16-bit integer."""
    return _unpack(_I16, buf, offset, field)


def read_u32(buf: bytes, offset: int, field: str | None = None) -> int:
    """Read a big-endian unsigned 32-bit integer."""
    return _unpack(_U32, buf, offset, field)


def read_tag(buf: bytes, offset: int, field: str | None = None) -> str:
    """Read a 4-byte table tag.

    Tags are decoded as latin-1 so that any byte sequence maps to a string
    without raising; trailing spaces are significant (e.g. ``"CFF "``).
    """
    check_range(buf, offset, 4, field)
    return buf[offset : offset + 4].decode("latin-1")


def read_bytes(buf: bytes, offset: int, length: int, field: str | None = None) -> bytes:
    """Read a raw slice of ``length`` bytes."""
    check_range(buf, offset, length, field)
    return bytes(buf[offset : offset + length])


def bit(byte: int, index: int) -> bool:
    """Return True if bit ``index`` (0 = least significant) is set."""
    return (byte >> index) & 1 == 1
