"""Escape raw bytes the way C string literals spell them."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["iter_c_escape", "c_escape"]

_NAMED = {
    7: "a",
    8: "b",
    9: "t",
    10: "n",
    11: "v",
    12: "f",
    13: "r",
    27: "e",
    92: "\\",
}


def _as_bytes(data: str | bytes | bytearray | memoryview) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(memoryview(data))


def _escape_byte(byte: int) -> str:
    if 31 < byte < 127 and byte != 92:
        return chr(byte)
    name = _NAMED.get(byte)
    if name is not None:
        return "\\" + name
    return f"\\x{byte:02X}"


def _generate(raw: bytes) -> Iterator[str]:
    for byte in raw:
        yield from _escape_byte(byte)


def iter_c_escape(data: str | bytes | bytearray | memoryview) -> Iterator[str]:
    """Yield the characters of the escaped form of ``data`` one by one.

    Strings are encoded as UTF-8 first.
    """
    return _generate(_as_bytes(data))


def c_escape(data: str | bytes | bytearray | memoryview) -> str:
    """Return ``data`` with control, backslash and non-ASCII bytes escaped."""
    return "".join(_escape_byte(byte) for byte in _as_bytes(data))