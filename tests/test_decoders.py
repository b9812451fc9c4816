from __future__ import annotations

import string

import pytest

from pdftextx.decoders import DecoderKind, GlyphDecoder
from pdftextx.exceptions import Utf8DecodeError, Utf16DecodeError


LETTERS = string.ascii_letters + string.digits


def _full_unicode_map() -> dict[int, str]:
    return {code: LETTERS[code % len(LETTERS)] for code in range(256)}


def test_unicode_map_decodes_every_byte_in_order():
    mapping = _full_unicode_map()
    decoder = GlyphDecoder.unicode_map(mapping)
    data = bytes([0, 5, 255, 17, 17, 100])

    assert decoder.kind is DecoderKind.UNICODE_MAP
    assert decoder.decode(data) == "".join(mapping[code] for code in data)


def test_unicode_map_skips_unmapped_codes():
    decoder = GlyphDecoder.unicode_map({0x41: "a", 0x43: "c"})

    assert decoder.decode(b"ABC") == "ac"


def test_unicode_map_reads_two_byte_units_after_byte_order_mark():
    decoder = GlyphDecoder.unicode_map({0x0102: "X", 0x0304: "Y", 0x01: "1", 0x02: "2"})

    assert decoder.decode(b"\xfe\xff\x01\x02\x03\x04") == "XY"
    assert decoder.decode(b"\x01\x02") == "12"


def test_unicode_map_ignores_trailing_odd_byte():
    decoder = GlyphDecoder.unicode_map({0x0041: "A"})

    assert decoder.decode(b"\xfe\xff\x00\x41\x00") == "A"


def test_difference_map_single_byte_lookup():
    decoder = GlyphDecoder.difference_map({72: "H", 105: "i"})

    assert decoder.kind is DecoderKind.DIFFERENCE_MAP
    assert decoder.decode(b"Hi!") == "Hi"


def test_raw_fallback_utf8():
    decoder = GlyphDecoder.raw_fallback()

    assert decoder.decode("Grüezi".encode("utf-8")) == "Grüezi"


def test_raw_fallback_utf16_with_byte_order_mark():
    decoder = GlyphDecoder.raw_fallback()

    assert decoder.decode(b"\xfe\xff" + "Zürich".encode("utf-16-be")) == "Zürich"


def test_raw_fallback_invalid_utf8_reports_bytes():
    decoder = GlyphDecoder.raw_fallback()

    with pytest.raises(Utf8DecodeError) as excinfo:
        decoder.decode(b"ab\xff")

    assert excinfo.value.data == b"ab\xff"
    assert "\\xff" in str(excinfo.value)


def test_raw_fallback_invalid_utf16_raises():
    decoder = GlyphDecoder.raw_fallback()

    with pytest.raises(Utf16DecodeError):
        decoder.decode(b"\xfe\xff\xd8\x00")


def test_none_decoder_never_produces_text():
    decoder = GlyphDecoder.none()

    assert decoder.decode(b"anything") == ""
    assert decoder.decode(b"\xff\xfe\x00") == ""


def test_decoders_are_immutable():
    decoder = GlyphDecoder.unicode_map({1: "a"})

    with pytest.raises(AttributeError):
        decoder.kind = DecoderKind.NONE  # type: ignore[misc]
