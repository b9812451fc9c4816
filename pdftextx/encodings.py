"""Selection of glyph decoders from font descriptions.

Simple fonts either embed a ``/ToUnicode`` CMap, declare an ``/Encoding``
(a base table optionally patched by a ``/Differences`` array), or carry
nothing usable, in which case string bytes are taken as UTF-8/UTF-16BE text.
Base tables and glyph names come from the codecs shipped with :mod:`pypdf`.
"""

from __future__ import annotations

import logging
import re
from typing import Mapping, Sequence

from pypdf import _codecs

from .decoders import GlyphDecoder
from .exceptions import UnsupportedEncodingError
from .types import FontDescription

__all__ = [
    "SUPPORTED_BASE_ENCODINGS",
    "base_encoding_table",
    "difference_forward_map",
    "glyph_name_to_text",
    "resolve_decoder",
]

LOGGER = logging.getLogger(__name__)

SUPPORTED_BASE_ENCODINGS: Mapping[str, str] = {
    "StandardEncoding": "/StandardEncoding",
    "SymbolEncoding": "/Symbol",
    "WinAnsiEncoding": "/WinAnsiEncoding",
    "MacRomanEncoding": "/MacRomanEncoding",
}

_UNI_NAME = re.compile(r"^uni((?:[0-9A-F]{4})+)$")
_U_NAME = re.compile(r"^u([0-9A-F]{4,6})$")


def base_encoding_table(name: str | None) -> Sequence[str] | None:
    """Return the 256 entry table for ``name``; ``None`` means no base table."""

    if name is None:
        return None
    key = SUPPORTED_BASE_ENCODINGS.get(name.lstrip("/"))
    table = _codecs.charset_encoding.get(key) if key is not None else None
    if table is None:
        raise UnsupportedEncodingError(name)
    return table


def _component_to_text(component: str) -> str | None:
    mapped = _codecs.adobe_glyphs.get(f"/{component}")
    if mapped is not None:
        return mapped
    match = _UNI_NAME.match(component)
    if match:
        digits = match.group(1)
        return "".join(chr(int(digits[i : i + 4], 16)) for i in range(0, len(digits), 4))
    match = _U_NAME.match(component)
    if match:
        return chr(int(match.group(1), 16))
    return None


def glyph_name_to_text(name: str) -> str | None:
    """Map a glyph name to text, following the Adobe Glyph List conventions."""

    name = name.lstrip("/")
    if not name:
        return None
    direct = _codecs.adobe_glyphs.get(f"/{name}")
    if direct is not None:
        return direct
    base = name.split(".", 1)[0]
    if not base:
        return None
    parts = [_component_to_text(component) for component in base.split("_")]
    if any(part is None for part in parts):
        return None
    return "".join(parts)  # type: ignore[arg-type]


def difference_forward_map(
    base: Sequence[str] | None,
    differences: Mapping[int, str],
) -> dict[int, str]:
    """Merge a base table with ``code -> glyph name`` overrides.

    An override always replaces the base entry for its code, even when the
    glyph name cannot be turned into text.
    """

    forward: dict[int, str] = {}
    for code in range(256):
        if code in differences:
            text = glyph_name_to_text(differences[code])
        elif base is not None and code < len(base):
            text = base[code]
        else:
            text = None
        if text and text != "\u0000":
            forward[code] = text
    return forward


def resolve_decoder(font: FontDescription) -> GlyphDecoder:
    """Pick the decode strategy for ``font``.

    Raises:
        UnsupportedEncodingError: the font names a base encoding without a
            known table.
    """

    if font.to_unicode is not None:
        return GlyphDecoder.unicode_map(font.to_unicode)
    if font.encoding is not None:
        table = base_encoding_table(font.encoding.base)
        return GlyphDecoder.difference_map(
            difference_forward_map(table, font.encoding.differences)
        )
    LOGGER.debug("Font %s has no encoding information; using raw text", font.name)
    return GlyphDecoder.raw_fallback()
