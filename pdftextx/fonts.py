"""Per-page registry of glyph decoders."""

from __future__ import annotations

import logging
from typing import Mapping

from .backends.base import BackendPage
from .decoders import DecoderKind, GlyphDecoder
from .encodings import resolve_decoder
from .exceptions import UnsupportedEncodingError
from .types import FontDescription, GraphicsStateFont

__all__ = ["FontRegistry"]

LOGGER = logging.getLogger(__name__)


class FontRegistry:
    """Decoders for every font a page can select.

    Fonts are looked up by resource name (``Tf``) or, for fonts set through an
    ExtGState (``gs``), by their internal ``/BaseFont`` name. Lookups never
    fail: unknown names yield the registry's default decoder, which produces
    no text.
    """

    def __init__(
        self,
        fonts: Mapping[str, FontDescription | None] | None = None,
        graphics_states: Mapping[str, GraphicsStateFont] | None = None,
    ) -> None:
        self.default_decoder = GlyphDecoder.none()
        self._decoders: dict[str, GlyphDecoder] = {}
        self._graphics_states: dict[str, GraphicsStateFont] = dict(graphics_states or {})
        self._populate(fonts or {})

    @classmethod
    def from_page(cls, page: BackendPage) -> "FontRegistry":
        return cls(page.fonts(), page.graphics_states())

    def _populate(self, fonts: Mapping[str, FontDescription | None]) -> None:
        for name, font in fonts.items():
            if font is None:
                LOGGER.debug("Font resource %s cannot be resolved", name)
                continue
            self._add_font(name, font)

        for state in self._graphics_states.values():
            font = state.font
            if font is None or not font.name or font.name in self._decoders:
                continue
            self._add_font(font.name, font)

    def _add_font(self, name: str, font: FontDescription) -> None:
        try:
            decoder = resolve_decoder(font)
        except UnsupportedEncodingError as exc:
            LOGGER.warning("Dropping font %s: %s", name, exc)
            return
        self._decoders[name] = decoder

    def __contains__(self, name: object) -> bool:
        return name in self._decoders

    def __len__(self) -> int:
        return len(self._decoders)

    def decoder_for(self, name: str) -> GlyphDecoder:
        return self._decoders.get(name, self.default_decoder)

    def graphics_state_font(self, name: str) -> tuple[GlyphDecoder, float] | None:
        state = self._graphics_states.get(name)
        if state is None or state.font is None:
            return None
        decoder = self.decoder_for(state.font.name) if state.font.name else self.default_decoder
        return decoder, state.size

    def summary(self) -> dict[str, DecoderKind]:
        """Decoder kind per registered name, for diagnostics."""
        return {name: decoder.kind for name, decoder in sorted(self._decoders.items())}
