"""Length of UTF-8 encoded glyphs."""

from __future__ import annotations

__all__ = ["utf8_glyph_length"]

# Two bits per (lead byte >> 3) value: 1 for 110xxxxx, 2 for 1110xxxx, 3 for 11110xxx.
_EXTRA_BYTES_TABLE = 0x3A55000000000000


def utf8_glyph_length(data: bytes | bytearray | memoryview, pos: int = 0) -> int:
    """Return the byte length of the UTF-8 glyph starting at ``data[pos]``.

    Returns 1 when the bytes there are not a legal UTF-8 sequence, including
    when the sequence runs past the end of ``data``.
    """
    if isinstance(data, str):
        raise TypeError("utf8_glyph_length needs bytes, not str")
    raw = memoryview(data).cast("B")
    if not 0 <= pos < len(raw):
        raise IndexError(f"position {pos} is outside the data of length {len(raw)}")
    lead = raw[pos]
    extra = (_EXTRA_BYTES_TABLE >> ((lead >> 2) & 0x3E)) & 0x3
    following = raw[pos + 1 : pos + 1 + extra]
    if len(following) < extra or any(byte >> 6 != 2 for byte in following):
        return 1
    return 1 + extra