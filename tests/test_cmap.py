from __future__ import annotations

from pypdf.generic import DecodedStreamObject, DictionaryObject, NameObject

from pdftextx.backends.cmap import to_unicode_map
from pdftextx.backends.pypdf_backend import font_description
from pdftextx.types import FontDescription


def _font(program: bytes) -> DictionaryObject:
    stream = DecodedStreamObject()
    stream.set_data(b"begincmap\n" + program + b"\nendcmap")
    return DictionaryObject(
        {
            NameObject("/Type"): NameObject("/Font"),
            NameObject("/Subtype"): NameObject("/Type1"),
            NameObject("/BaseFont"): NameObject("/Custom"),
            NameObject("/ToUnicode"): stream,
        }
    )


def test_bfchar_entries():
    font = _font(b"2 beginbfchar\n<01> <0048>\n<02> <0069>\nendbfchar")

    assert to_unicode_map(font) == {1: "H", 2: "i"}


def test_bfrange_with_incrementing_destination():
    font = _font(b"1 beginbfrange\n<0010> <0012> <0041>\nendbfrange")

    assert to_unicode_map(font) == {0x10: "A", 0x11: "B", 0x12: "C"}


def test_bfrange_with_destination_array():
    font = _font(b"1 beginbfrange\n<20> <21> [<0066006C> <0066>]\nendbfrange")

    assert to_unicode_map(font) == {0x20: "fl", 0x21: "f"}


def test_surrogate_pairs_are_joined():
    font = _font(b"1 beginbfchar\n<05> <D83DDE00>\nendbfchar")

    assert to_unicode_map(font)[5] == "\U0001f600"


def test_later_definition_wins_in_program_order():
    font = _font(
        b"1 beginbfrange\n<01> <01> <0041>\nendbfrange\n"
        b"1 beginbfchar\n<01> <0042>\nendbfchar"
    )

    assert to_unicode_map(font) == {1: "B"}


def test_font_description_carries_the_code_map():
    font = _font(b"1 beginbfchar\n<03> <0043>\nendbfchar")

    assert font_description(font) == FontDescription(name="Custom", to_unicode={3: "C"})


def test_font_without_to_unicode_has_no_code_map():
    font = DictionaryObject(
        {
            NameObject("/Type"): NameObject("/Font"),
            NameObject("/BaseFont"): NameObject("/Helvetica"),
        }
    )

    assert font_description(font).to_unicode is None
