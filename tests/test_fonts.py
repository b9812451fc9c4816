from __future__ import annotations

import logging

from pdftextx.decoders import DecoderKind
from pdftextx.fonts import FontRegistry
from pdftextx.types import EncodingDescription, FontDescription, GraphicsStateFont


HELVETICA = FontDescription(name="Helvetica", encoding=EncodingDescription(base="WinAnsiEncoding"))
TIMES = FontDescription(name="Times-Roman", to_unicode={1: "T"})


def test_named_fonts_are_registered():
    registry = FontRegistry({"F1": HELVETICA, "F2": TIMES})

    assert "F1" in registry
    assert registry.decoder_for("F1").kind is DecoderKind.DIFFERENCE_MAP
    assert registry.decoder_for("F2").kind is DecoderKind.UNICODE_MAP
    assert len(registry) == 2


def test_unknown_name_yields_default_decoder():
    registry = FontRegistry({"F1": HELVETICA})

    decoder = registry.decoder_for("F9")

    assert decoder is registry.default_decoder
    assert decoder.kind is DecoderKind.NONE


def test_decoders_are_shared_between_lookups():
    registry = FontRegistry({"F1": HELVETICA})

    assert registry.decoder_for("F1") is registry.decoder_for("F1")


def test_unresolvable_font_falls_back_to_default():
    registry = FontRegistry({"F1": None})

    assert "F1" not in registry
    assert registry.decoder_for("F1") is registry.default_decoder


def test_unsupported_encoding_drops_only_that_font(caplog):
    odd = FontDescription(name="Odd", encoding=EncodingDescription(base="MacExpertEncoding"))

    with caplog.at_level(logging.WARNING, logger="pdftextx.fonts"):
        registry = FontRegistry({"F1": HELVETICA, "F2": odd})

    assert "F1" in registry
    assert "F2" not in registry
    assert registry.decoder_for("F2").kind is DecoderKind.NONE
    assert any("MacExpertEncoding" in record.getMessage() for record in caplog.records)


def test_graphics_state_fonts_registered_by_internal_name():
    registry = FontRegistry({}, {"GS1": GraphicsStateFont(font=TIMES, size=9.0)})

    assert "Times-Roman" in registry
    decoder, size = registry.graphics_state_font("GS1")
    assert decoder is registry.decoder_for("Times-Roman")
    assert size == 9.0


def test_named_font_takes_precedence_over_graphics_state_font():
    other = FontDescription(name="F1", to_unicode={1: "x"})
    registry = FontRegistry({"F1": HELVETICA}, {"GS1": GraphicsStateFont(font=other, size=8.0)})

    assert registry.decoder_for("F1").kind is DecoderKind.DIFFERENCE_MAP


def test_graphics_state_without_font_is_absent():
    registry = FontRegistry({}, {"GS1": GraphicsStateFont(font=None, size=10.0)})

    assert registry.graphics_state_font("GS1") is None
    assert registry.graphics_state_font("GS2") is None


def test_summary_lists_decoder_kinds():
    registry = FontRegistry({"F2": TIMES, "F1": HELVETICA})

    assert list(registry.summary().items()) == [
        ("F1", DecoderKind.DIFFERENCE_MAP),
        ("F2", DecoderKind.UNICODE_MAP),
    ]
