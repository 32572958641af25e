import pytest

from aiutils.utf8 import utf8_glyph_length

SAMPLES = ["a", "~", "\u00e9", "\u07ff", "\u20ac", "\uffee", "\U0001f600", "\U0010ffff"]


@pytest.mark.parametrize("char", SAMPLES)
def test_length_matches_encoding(char):
    encoded = char.encode("utf-8")
    assert utf8_glyph_length(encoded) == len(encoded)
    assert utf8_glyph_length(encoded + b"\x00") == len(encoded)


def test_walking_a_string_counts_glyphs():
    text = "h\u00e9llo \u20ac \U0001f600 w\u00f6rld"
    data = text.encode("utf-8")
    pos = 0
    glyphs = 0
    while pos < len(data):
        pos += utf8_glyph_length(data, pos)
        glyphs += 1
    assert pos == len(data)
    assert glyphs == len(text)


def test_bad_continuation_gives_one():
    assert utf8_glyph_length(b"\xc3A") == 1
    assert utf8_glyph_length(b"\xe2\x82A") == 1


def test_truncated_sequence_gives_one():
    euro = "\u20ac".encode("utf-8")
    assert utf8_glyph_length(euro[:2]) == 1


def test_stray_and_invalid_lead_bytes_give_one():
    for lead in (0x80, 0xBF, 0xF8, 0xFF):
        assert utf8_glyph_length(bytes([lead, 0x80, 0x80, 0x80])) == 1


def test_accepts_bytearray_and_memoryview():
    encoded = "\U0001f600".encode("utf-8")
    assert utf8_glyph_length(bytearray(encoded)) == len(encoded)
    assert utf8_glyph_length(memoryview(b"x" + encoded), 1) == len(encoded)


def test_position_out_of_range():
    with pytest.raises(IndexError):
        utf8_glyph_length(b"abc", 3)
    with pytest.raises(IndexError):
        utf8_glyph_length(b"", 0)


def test_rejects_str():
    with pytest.raises(TypeError):
        utf8_glyph_length("abc")