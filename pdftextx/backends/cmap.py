"""``/ToUnicode`` code maps, read through pypdf's CMap parser."""

from __future__ import annotations

import logging

from pypdf import _cmap
from pypdf.generic import DictionaryObject

__all__ = ["to_unicode_map"]

LOGGER = logging.getLogger(__name__)


def _code(key: str, width: int) -> int:
    if len(key) == 1:
        return ord(key)
    # Multi-character keys are multi-byte codes decoded by pypdf.
    raw = key.encode("utf-16-be" if width > 1 else "latin-1", "surrogatepass")
    return int.from_bytes(raw, "big")


def _text(value: object) -> str:
    if isinstance(value, bytes):
        try:
            return value.decode("utf-16-be", "surrogatepass")
        except UnicodeDecodeError:
            return value.decode("latin-1", "ignore")
    return str(value)


def to_unicode_map(font_dict: DictionaryObject) -> dict[int, str]:
    """Return the ``code -> text`` table of the font's ToUnicode CMap."""

    _encoding, cmap = _cmap.get_encoding(font_dict)
    width = cmap.get(-1, 1)
    if not isinstance(width, int):
        width = 1
    mapping: dict[int, str] = {}
    for key, value in cmap.items():
        if key == -1 or not isinstance(key, str):
            continue
        text = _text(value)
        if text:
            mapping[_code(key, width)] = text
    LOGGER.debug("Parsed ToUnicode CMap with %d entries", len(mapping))
    return mapping
