"""Content stream operators relevant to text extraction.

Tokenized operations as produced by :class:`pypdf.generic.ContentStream`
(``(operands, operator)`` pairs) are mapped onto a closed set of small
immutable operator records. Operators without text relevance, or with
malformed operands, become :class:`OtherOperator`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Sequence, Union

from pypdf.generic import (
    ArrayObject,
    BooleanObject,
    ByteStringObject,
    DictionaryObject,
    FloatObject,
    IndirectObject,
    NameObject,
    NullObject,
    NumberObject,
    TextStringObject,
)

from .types import Matrix

__all__ = [
    "BeginMarkedContent",
    "BeginText",
    "ContentOperator",
    "DrawAdjustedText",
    "DrawText",
    "MoveTextPosition",
    "OtherOperator",
    "SetFontAndSize",
    "SetGraphicsState",
    "SetLeading",
    "SetTextMatrix",
    "TextNewline",
    "clean_name",
    "marked_content_text",
    "parse_operation",
    "parse_operations",
    "primitive_name",
    "string_bytes",
]

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BeginText:
    pass


@dataclass(frozen=True, slots=True)
class SetFontAndSize:
    name: str
    size: float


@dataclass(frozen=True, slots=True)
class SetGraphicsState:
    name: str


@dataclass(frozen=True, slots=True)
class SetLeading:
    leading: float


@dataclass(frozen=True, slots=True)
class TextNewline:
    pass


@dataclass(frozen=True, slots=True)
class MoveTextPosition:
    dx: float
    dy: float


@dataclass(frozen=True, slots=True)
class SetTextMatrix:
    matrix: Matrix


@dataclass(frozen=True, slots=True)
class DrawText:
    data: bytes


@dataclass(frozen=True, slots=True)
class DrawAdjustedText:
    """``TJ`` array: string items interleaved with kerning adjustments."""

    items: tuple[Union[bytes, float], ...]


@dataclass(frozen=True, slots=True)
class BeginMarkedContent:
    """``BMC``/``BDC``; ``properties`` is a plain dict for inline dictionaries."""

    tag: str
    properties: Any = None


@dataclass(frozen=True, slots=True)
class OtherOperator:
    operator: str


ContentOperator = Union[
    BeginText,
    SetFontAndSize,
    SetGraphicsState,
    SetLeading,
    TextNewline,
    MoveTextPosition,
    SetTextMatrix,
    DrawText,
    DrawAdjustedText,
    BeginMarkedContent,
    OtherOperator,
]


def _decode_operator(operator: object) -> str:
    if isinstance(operator, (bytes, bytearray)):
        return bytes(operator).decode("latin-1")
    return str(operator)


def clean_name(name: object) -> str:
    """Return a PDF name without its leading slash."""
    text = str(name)
    return text[1:] if text.startswith("/") else text


def string_bytes(value: object) -> bytes:
    """Raw bytes of a PDF string operand."""

    if isinstance(value, TextStringObject):
        return value.original_bytes
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("latin-1", "replace")
    raise TypeError(f"Not a string operand: {value!r}")


def _is_string(value: object) -> bool:
    return isinstance(value, (str, bytes, bytearray)) and not isinstance(value, NameObject)


def primitive_name(value: object) -> str:
    """Short PDF object type name used in diagnostics."""

    if value is None or isinstance(value, NullObject):
        return "Null"
    if isinstance(value, NameObject):
        return "Name"
    if isinstance(value, BooleanObject):
        return "Boolean"
    if isinstance(value, (NumberObject, FloatObject, int, float)):
        return "Number"
    if isinstance(value, (TextStringObject, ByteStringObject, str, bytes, bytearray)):
        return "String"
    if isinstance(value, (ArrayObject, list, tuple)):
        return "Array"
    if isinstance(value, (DictionaryObject, dict)):
        return "Dictionary"
    if isinstance(value, IndirectObject):
        return "Reference"
    return type(value).__name__


def _properties(value: object) -> Any:
    if isinstance(value, DictionaryObject):
        result: dict[str, Any] = {}
        for key, item in value.items():
            result[clean_name(key)] = string_bytes(item) if _is_string(item) else item
        return result
    return value


def parse_operation(operands: Sequence[Any], operator: object) -> List[ContentOperator]:
    """Map one tokenized operation onto text operators.

    Some PDF operators expand into several records: ``TD`` also sets the
    leading, and the quote operators move to the next line before drawing.
    """

    op = _decode_operator(operator)
    try:
        if op == "BT":
            return [BeginText()]
        if op == "Tf" and len(operands) >= 2:
            return [SetFontAndSize(clean_name(operands[0]), float(operands[1]))]
        if op == "gs" and operands:
            return [SetGraphicsState(clean_name(operands[0]))]
        if op == "TL" and operands:
            return [SetLeading(float(operands[0]))]
        if op == "T*":
            return [TextNewline()]
        if op == "Td" and len(operands) >= 2:
            return [MoveTextPosition(float(operands[0]), float(operands[1]))]
        if op == "TD" and len(operands) >= 2:
            dx, dy = float(operands[0]), float(operands[1])
            return [SetLeading(-dy), MoveTextPosition(dx, dy)]
        if op == "Tm" and len(operands) >= 6:
            return [SetTextMatrix(Matrix.from_operands(operands))]
        if op == "Tj" and operands:
            return [DrawText(string_bytes(operands[0]))]
        if op == "'" and operands:
            return [TextNewline(), DrawText(string_bytes(operands[-1]))]
        if op == '"' and len(operands) >= 3:
            return [TextNewline(), DrawText(string_bytes(operands[2]))]
        if op == "TJ" and operands:
            items: list[Union[bytes, float]] = []
            for item in operands[0]:
                if _is_string(item):
                    items.append(string_bytes(item))
                elif isinstance(item, (int, float)):
                    items.append(float(item))
            return [DrawAdjustedText(tuple(items))]
        if op == "BMC" and operands:
            return [BeginMarkedContent(clean_name(operands[0]))]
        if op == "BDC" and len(operands) >= 2:
            return [BeginMarkedContent(clean_name(operands[0]), _properties(operands[1]))]
    except (TypeError, ValueError) as exc:
        LOGGER.debug("Ignoring malformed %s operation %r: %s", op, operands, exc)
    return [OtherOperator(op)]


def parse_operations(operations: Iterable[tuple[Sequence[Any], object]]) -> List[ContentOperator]:
    result: list[ContentOperator] = []
    for operands, operator in operations:
        result.extend(parse_operation(operands, operator))
    return result


def marked_content_text(properties: Mapping[str, Any]) -> bytes | None:
    """``ActualText`` bytes of a marked-content property list, if any."""

    value = properties.get("ActualText")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return None
