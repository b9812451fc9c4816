"""Page and document level text extraction."""

from __future__ import annotations

import logging
from typing import List, Optional

from .assembler import TextAssembler
from .backends.base import BackendDocument, BackendPage, PDFBackend
from .backends.pypdf_backend import PypdfBackend
from .exceptions import PageOutOfBoundsError, PDFTextException
from .fonts import FontRegistry
from .state import TextStateMachine
from .types import ExtractedDocument, ExtractionOptions

__all__ = ["PageTextExtractor", "extract_document", "extract_text"]

LOGGER = logging.getLogger(__name__)


class PageTextExtractor:
    """Reconstruct the text of backend pages.

    Each page gets its own :class:`FontRegistry`; nothing is shared between
    pages, so pages may be handed to separate workers by the caller.
    """

    def __init__(self, options: Optional[ExtractionOptions] = None) -> None:
        self.options = options or ExtractionOptions()
        self.assembler = TextAssembler(self.options)

    def page_text(self, page: BackendPage) -> str:
        registry = FontRegistry.from_page(page)
        LOGGER.debug("Page %d fonts: %s", page.index + 1, registry.summary())
        timeline = TextStateMachine(registry).run(page.operations())
        return self.assembler.assemble(timeline)

    def _selected_pages(self, document: BackendDocument) -> List[int]:
        if not self.options.page_numbers:
            return list(range(document.num_pages))
        selected = []
        for index in self.options.page_numbers:
            if index < 0 or index >= document.num_pages:
                raise PageOutOfBoundsError(
                    f"Page {index + 1} is out of bounds for a document with {document.num_pages} pages."
                )
            selected.append(index)
        return selected

    def document_pages(self, document: BackendDocument) -> List[str]:
        """Text of every selected page; the first failing page aborts the run."""

        pages: list[str] = []
        for index in self._selected_pages(document):
            try:
                pages.append(self.page_text(document.get_page(index)))
            except PDFTextException as exc:
                LOGGER.error("Text extraction failed on page %d: %s", index + 1, exc)
                raise
        return pages

    def extract(self, document: BackendDocument, source_file: Optional[str] = None) -> ExtractedDocument:
        return ExtractedDocument(
            pages=self.document_pages(document),
            title=document.title,
            author=document.author,
            source_file=source_file,
        )


def extract_document(
    pdf_path: str,
    options: Optional[ExtractionOptions] = None,
    backend: Optional[PDFBackend] = None,
) -> ExtractedDocument:
    """Load ``pdf_path`` and reconstruct the text of its pages."""

    options = options or ExtractionOptions()
    backend = backend or PypdfBackend()
    document = backend.load(str(pdf_path), password=options.password)
    LOGGER.info("Extracting text from %s (%d pages)", pdf_path, document.num_pages)
    return PageTextExtractor(options).extract(document, source_file=str(pdf_path))


def extract_text(pdf_path: str, options: Optional[ExtractionOptions] = None) -> List[str]:
    """Per-page text of ``pdf_path``."""

    return extract_document(pdf_path, options).pages
