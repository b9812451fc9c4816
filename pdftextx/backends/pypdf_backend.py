"""pypdf backend implementation for pdftextx."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Mapping, Optional

from pypdf import PageObject, PdfReader
from pypdf.errors import PdfReadError, PyPdfError
from pypdf.generic import (
    ArrayObject,
    ContentStream,
    DictionaryObject,
    FloatObject,
    IndirectObject,
    NameObject,
    NumberObject,
    StreamObject,
)

from ..exceptions import EncryptedPDFError, InvalidPDFError
from ..operators import ContentOperator, clean_name, parse_operations
from ..types import EncodingDescription, FontDescription, GraphicsStateFont
from .base import BackendDocument, BackendPage, PDFBackend
from .cmap import to_unicode_map

LOGGER = logging.getLogger(__name__)


def _resolve(obj: object | None) -> object | None:
    if isinstance(obj, IndirectObject):
        try:
            return obj.get_object()
        except Exception as exc:
            LOGGER.debug("Unable to resolve %r: %s", obj, exc)
            return None
    return obj


def _resolve_dict(obj: object | None) -> DictionaryObject | None:
    resolved = _resolve(obj)
    return resolved if isinstance(resolved, DictionaryObject) else None


def _parse_differences(array: object) -> dict[int, str]:
    differences: dict[int, str] = {}
    resolved = _resolve(array)
    if not isinstance(resolved, ArrayObject):
        return differences
    code = 0
    for item in resolved:
        item = _resolve(item)
        if isinstance(item, (NumberObject, FloatObject)):
            code = int(item)
        elif isinstance(item, NameObject):
            differences[code] = clean_name(item)
            code += 1
    return differences


def _encoding_description(font: DictionaryObject) -> EncodingDescription | None:
    encoding = _resolve(font.get(NameObject("/Encoding")))
    if isinstance(encoding, NameObject):
        return EncodingDescription(base=clean_name(encoding))
    if isinstance(encoding, DictionaryObject):
        base = _resolve(encoding.get(NameObject("/BaseEncoding")))
        return EncodingDescription(
            base=clean_name(base) if isinstance(base, NameObject) else None,
            differences=_parse_differences(encoding.get(NameObject("/Differences"))),
        )
    return None


def _to_unicode(font: DictionaryObject) -> dict[int, str] | None:
    stream = _resolve(font.get(NameObject("/ToUnicode")))
    if not isinstance(stream, StreamObject):
        return None
    try:
        return to_unicode_map(font)
    except Exception as exc:
        LOGGER.warning("Ignoring unreadable ToUnicode CMap: %s", exc)
        return None


def font_description(font: object) -> FontDescription | None:
    """Describe a font dictionary; ``None`` when it cannot be resolved."""

    font_dict = _resolve_dict(font)
    if font_dict is None:
        return None
    base_font = font_dict.get(NameObject("/BaseFont"))
    return FontDescription(
        name=clean_name(base_font) if base_font is not None else None,
        to_unicode=_to_unicode(font_dict),
        encoding=_encoding_description(font_dict),
    )


@dataclass
class PypdfPage:
    index: int
    page: PageObject
    reader: PdfReader

    def _resources(self) -> DictionaryObject | None:
        return _resolve_dict(self.page.get(NameObject("/Resources")))

    def _resource_category(self, key: str) -> DictionaryObject | None:
        resources = self._resources()
        if resources is None:
            return None
        return _resolve_dict(resources.get(NameObject(key)))

    def fonts(self) -> Mapping[str, Optional[FontDescription]]:
        fonts = self._resource_category("/Font")
        if fonts is None:
            return {}
        return {clean_name(name): font_description(font) for name, font in fonts.items()}

    def graphics_states(self) -> Mapping[str, GraphicsStateFont]:
        states = self._resource_category("/ExtGState")
        if states is None:
            return {}
        result: dict[str, GraphicsStateFont] = {}
        for name, state in states.items():
            state_dict = _resolve_dict(state)
            if state_dict is None:
                continue
            entry = _resolve(state_dict.get(NameObject("/Font")))
            if not isinstance(entry, ArrayObject) or len(entry) < 2:
                continue
            try:
                size = float(_resolve(entry[1]))  # type: ignore[arg-type]
            except (TypeError, ValueError):
                continue
            result[clean_name(name)] = GraphicsStateFont(font=font_description(entry[0]), size=size)
        return result

    def operations(self) -> List[ContentOperator]:
        contents = self.page.get_contents()
        if contents is None:
            return []
        try:
            if not isinstance(contents, ContentStream):
                contents = ContentStream(contents, self.reader)
            return parse_operations(contents.operations)
        except PyPdfError as exc:
            raise InvalidPDFError(
                f"Unable to parse content stream of page {self.index + 1}. Error: {exc}"
            ) from exc


@dataclass
class PypdfDocument(BackendDocument):
    reader: Optional[PdfReader] = None

    def iter_pages(self) -> Iterable[PypdfPage]:
        for index in range(self.num_pages):
            yield self.get_page(index)

    def get_page(self, index: int) -> PypdfPage:
        if self.reader is None:
            raise InvalidPDFError("Document has no open reader.")
        return PypdfPage(index=index, page=self.reader.pages[index], reader=self.reader)


def document_from_reader(reader: PdfReader) -> PypdfDocument:
    title = author = None
    try:
        metadata = reader.metadata
    except PyPdfError as exc:
        LOGGER.warning("Unable to read document metadata: %s", exc)
        metadata = None
    if metadata is not None:
        title = metadata.title
        author = metadata.author
    return PypdfDocument(
        num_pages=len(reader.pages),
        title=title,
        author=author,
        reader=reader,
    )


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def load(self, pdf_path: str, password: str | None = None) -> PypdfDocument:
        path = Path(pdf_path)
        if not path.exists() or not path.is_file():
            raise InvalidPDFError(f"PDF file not found: {pdf_path}")

        try:
            raw_bytes = path.read_bytes()
        except OSError as exc:
            raise InvalidPDFError(f"Unable to read PDF file: {pdf_path}. Error: {exc}") from exc

        return self.load_bytes(raw_bytes, password=password, source=str(pdf_path))

    def load_bytes(
        self,
        raw_bytes: bytes,
        password: str | None = None,
        *,
        source: str = "<memory>",
    ) -> PypdfDocument:
        try:
            reader = PdfReader(io.BytesIO(raw_bytes))
        except PdfReadError as exc:
            raise InvalidPDFError(f"Corrupted or invalid PDF file: {source}. Error: {exc}") from exc
        except Exception as exc:
            raise InvalidPDFError(f"Unexpected error reading PDF: {source}. Error: {exc}") from exc

        try:
            if reader.is_encrypted:
                if password:
                    if reader.decrypt(password) == 0:
                        raise EncryptedPDFError("Failed to decrypt PDF with supplied password.")
                else:
                    raise EncryptedPDFError("PDF is encrypted. Supply a password to process this file.")

            return document_from_reader(reader)
        except PyPdfError as exc:
            raise InvalidPDFError(f"Corrupted or invalid PDF file: {source}. Error: {exc}") from exc
