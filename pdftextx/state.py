"""Text state tracking over a page's operator sequence."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, List, Tuple

from .decoders import GlyphDecoder
from .fonts import FontRegistry
from .operators import (
    ContentOperator,
    MoveTextPosition,
    SetFontAndSize,
    SetGraphicsState,
    SetLeading,
    SetTextMatrix,
    TextNewline,
)
from .types import IDENTITY_MATRIX, Matrix

__all__ = ["TextState", "TextStateMachine", "ops_with_text_state"]


@dataclass(frozen=True, slots=True)
class TextState:
    """Snapshot of the text parameters in force at one operator."""

    font: GlyphDecoder
    font_size: float = 0.0
    leading: float = 0.0
    text_matrix: Matrix = IDENTITY_MATRIX


class TextStateMachine:
    """Pair every operator of a page with the text state after it.

    ``BT`` does not reset the state: fonts and positions carry over between
    text objects so that later runs can still be decoded.
    """

    def __init__(self, registry: FontRegistry) -> None:
        self.registry = registry
        self.initial_state = TextState(font=registry.default_decoder)

    def next_state(self, state: TextState, op: ContentOperator) -> TextState:
        if isinstance(op, SetFontAndSize):
            return replace(state, font=self.registry.decoder_for(op.name), font_size=op.size)
        if isinstance(op, SetGraphicsState):
            selected = self.registry.graphics_state_font(op.name)
            if selected is None:
                return state
            font, size = selected
            return replace(state, font=font, font_size=size)
        if isinstance(op, SetLeading):
            return replace(state, leading=op.leading)
        if isinstance(op, TextNewline):
            return replace(state, text_matrix=state.text_matrix.pre_translate(0.0, state.leading))
        if isinstance(op, MoveTextPosition):
            return replace(state, text_matrix=state.text_matrix.pre_translate(op.dx, op.dy))
        if isinstance(op, SetTextMatrix):
            return replace(state, text_matrix=op.matrix)
        return state

    def run(self, operations: Iterable[ContentOperator]) -> List[Tuple[ContentOperator, TextState]]:
        state = self.initial_state
        timeline: list[tuple[ContentOperator, TextState]] = []
        for op in operations:
            state = self.next_state(state, op)
            timeline.append((op, state))
        return timeline


def ops_with_text_state(
    registry: FontRegistry,
    operations: Iterable[ContentOperator],
) -> List[Tuple[ContentOperator, TextState]]:
    return TextStateMachine(registry).run(operations)
