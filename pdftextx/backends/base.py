"""Backend protocol for PDF container access."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Protocol

from ..operators import ContentOperator
from ..types import FontDescription, GraphicsStateFont


class BackendPage(Protocol):
    """One page as seen by the text extractor."""

    index: int

    def fonts(self) -> Mapping[str, Optional[FontDescription]]:
        """Font resources by resource name; ``None`` marks unresolvable ones."""

    def graphics_states(self) -> Mapping[str, GraphicsStateFont]:
        """ExtGState resources that set a font, by resource name."""

    def operations(self) -> List[ContentOperator]:
        """Text operators of all content streams of the page, in order."""


@dataclass
class BackendDocument:
    """Represents a loaded PDF document with backend-specific helpers."""

    num_pages: int
    title: Optional[str] = None
    author: Optional[str] = None

    def iter_pages(self) -> Iterable[BackendPage]:
        raise NotImplementedError

    def get_page(self, index: int) -> BackendPage:
        raise NotImplementedError


class PDFBackend(Protocol):
    """Protocol defining how documents are loaded."""

    def load(self, pdf_path: str, password: str | None = None) -> BackendDocument:
        """Load a PDF file and return a backend document wrapper."""
