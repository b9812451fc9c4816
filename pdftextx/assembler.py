"""Assembly of page text from operators and their text states.

Content streams contain no line structure, so separators are inferred from
cursor movements:

* ``T*`` (and the quote operators) always start a new line;
* a ``Td`` without vertical movement is a carriage return inside a line
  group and starts a new line, a wide horizontal ``Td`` becomes a tab;
* a ``Tm`` that moves the baseline starts a new line, any other ``Tm``
  becomes a tab.

The thresholds were tuned against statement layouts and are exposed through
:class:`~pdftextx.types.ExtractionOptions`.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from .exceptions import UnexpectedPrimitiveError
from .operators import (
    BeginMarkedContent,
    ContentOperator,
    DrawAdjustedText,
    DrawText,
    MoveTextPosition,
    SetTextMatrix,
    TextNewline,
    marked_content_text,
    primitive_name,
)
from .state import TextState
from .types import IDENTITY_MATRIX, ExtractionOptions, Matrix

__all__ = ["TextAssembler", "assemble_page_text"]


class TextAssembler:
    """Build the text of one page from ``(operator, state)`` pairs."""

    def __init__(self, options: ExtractionOptions | None = None) -> None:
        options = options or ExtractionOptions()
        self.line_epsilon = options.line_epsilon
        self.tab_threshold = options.tab_threshold

    def translation_separator(self, dx: float, dy: float) -> str:
        if abs(dy) < self.line_epsilon:
            return "\n"
        if abs(dx) > self.tab_threshold:
            return "\t"
        return ""

    def matrix_separator(self, previous: Matrix, matrix: Matrix) -> str:
        if abs(matrix.f - previous.f) > self.line_epsilon:
            return "\n"
        return "\t"

    def assemble(self, timeline: Iterable[Tuple[ContentOperator, TextState]]) -> str:
        out: list[str] = []
        previous_matrix = IDENTITY_MATRIX
        for op, state in timeline:
            if isinstance(op, DrawText):
                out.append(state.font.decode(op.data))
            elif isinstance(op, DrawAdjustedText):
                for item in op.items:
                    if isinstance(item, bytes):
                        out.append(state.font.decode(item))
            elif isinstance(op, TextNewline):
                out.append("\n")
            elif isinstance(op, MoveTextPosition):
                out.append(self.translation_separator(op.dx, op.dy))
            elif isinstance(op, SetTextMatrix):
                out.append(self.matrix_separator(previous_matrix, op.matrix))
            elif isinstance(op, BeginMarkedContent) and op.tag == "Span":
                out.append(self._actual_text(op, state))
            previous_matrix = state.text_matrix
        return "".join(out)

    def _actual_text(self, op: BeginMarkedContent, state: TextState) -> str:
        if op.properties is None:
            return ""
        if not isinstance(op.properties, dict):
            raise UnexpectedPrimitiveError("Dictionary", primitive_name(op.properties))
        data = marked_content_text(op.properties)
        if data is None:
            return ""
        return state.font.decode(data)


def assemble_page_text(
    timeline: Iterable[Tuple[ContentOperator, TextState]],
    options: ExtractionOptions | None = None,
) -> str:
    return TextAssembler(options).assemble(timeline)
