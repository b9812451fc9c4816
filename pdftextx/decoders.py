"""Glyph decoders turning raw string operands into Unicode text."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from .exceptions import Utf8DecodeError, Utf16DecodeError

__all__ = ["BYTE_ORDER_MARK", "DecoderKind", "GlyphDecoder"]

LOGGER = logging.getLogger(__name__)

BYTE_ORDER_MARK = b"\xfe\xff"


class DecoderKind(str, Enum):
    UNICODE_MAP = "unicode-map"
    DIFFERENCE_MAP = "difference-map"
    RAW_FALLBACK = "raw-fallback"
    NONE = "none"


@dataclass(frozen=True)
class GlyphDecoder:
    """Decode strategy for one font.

    ``mapping`` holds the code to text table for the two map based kinds and
    is empty otherwise. Instances are never mutated and may be shared by any
    number of text states.
    """

    kind: DecoderKind
    mapping: Mapping[int, str] = field(default_factory=dict)

    @classmethod
    def unicode_map(cls, mapping: Mapping[int, str]) -> "GlyphDecoder":
        return cls(DecoderKind.UNICODE_MAP, dict(mapping))

    @classmethod
    def difference_map(cls, mapping: Mapping[int, str]) -> "GlyphDecoder":
        return cls(DecoderKind.DIFFERENCE_MAP, dict(mapping))

    @classmethod
    def raw_fallback(cls) -> "GlyphDecoder":
        return cls(DecoderKind.RAW_FALLBACK)

    @classmethod
    def none(cls) -> "GlyphDecoder":
        return cls(DecoderKind.NONE)

    def decode(self, data: bytes) -> str:
        """Return the text drawn by ``data``; unmapped codes are skipped."""

        if self.kind is DecoderKind.UNICODE_MAP:
            if data.startswith(BYTE_ORDER_MARK):
                payload = data[2:]
                units = (
                    int.from_bytes(payload[index : index + 2], "big")
                    for index in range(0, len(payload) - 1, 2)
                )
                return "".join(self.mapping[unit] for unit in units if unit in self.mapping)
            return "".join(self.mapping[code] for code in data if code in self.mapping)
        if self.kind is DecoderKind.DIFFERENCE_MAP:
            return "".join(self.mapping[code] for code in data if code in self.mapping)
        if self.kind is DecoderKind.RAW_FALLBACK:
            return _decode_raw(data)
        if self.kind is DecoderKind.NONE:
            return ""
        raise AssertionError(f"Unhandled decoder kind: {self.kind!r}")


def _decode_raw(data: bytes) -> str:
    if data.startswith(BYTE_ORDER_MARK):
        try:
            return data[2:].decode("utf-16-be")
        except UnicodeDecodeError as exc:
            raise Utf16DecodeError(data) from exc
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        LOGGER.error("err: %s data: %r", exc, data)
        raise Utf8DecodeError(data) from exc
