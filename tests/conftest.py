from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Mapping, Sequence
import sys

import pytest
from pypdf import PdfWriter
from pypdf.generic import (
    ArrayObject,
    DecodedStreamObject,
    DictionaryObject,
    FloatObject,
    NameObject,
    NumberObject,
)

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

WINANSI_HELVETICA = {"base_font": "Helvetica", "encoding": "WinAnsiEncoding"}


def _stream(writer: PdfWriter, data: bytes):
    stream = DecodedStreamObject()
    stream.set_data(data)
    return writer._add_object(stream)


def _font_dictionary(writer: PdfWriter, spec: Mapping[str, Any]) -> DictionaryObject:
    font = DictionaryObject(
        {
            NameObject("/Type"): NameObject("/Font"),
            NameObject("/Subtype"): NameObject("/" + spec.get("subtype", "Type1")),
            NameObject("/BaseFont"): NameObject("/" + spec.get("base_font", "Helvetica")),
        }
    )
    encoding = spec.get("encoding")
    differences = spec.get("differences")
    if differences is not None:
        array = ArrayObject()
        for code, names in differences:
            array.append(NumberObject(code))
            array.extend(NameObject("/" + name) for name in names)
        encoding_dict = DictionaryObject(
            {NameObject("/Type"): NameObject("/Encoding"), NameObject("/Differences"): array}
        )
        if encoding:
            encoding_dict[NameObject("/BaseEncoding")] = NameObject("/" + encoding)
        font[NameObject("/Encoding")] = encoding_dict
    elif encoding:
        font[NameObject("/Encoding")] = NameObject("/" + encoding)
    if spec.get("to_unicode") is not None:
        font[NameObject("/ToUnicode")] = _stream(writer, spec["to_unicode"])
    return font


def build_pdf(
    path: Path,
    pages: Sequence[Mapping[str, Any]],
    metadata: Mapping[str, str] | None = None,
) -> Path:
    """Write a PDF whose pages carry the given content and font resources.

    Each page mapping holds ``content`` (bytes), ``fonts`` (resource name to
    font spec) and optionally ``ext_gstates`` (resource name to
    ``(font spec, size)``).
    """

    writer = PdfWriter()
    for spec in pages:
        page = writer.add_blank_page(width=612, height=792)
        page[NameObject("/Contents")] = _stream(writer, spec.get("content", b""))
        resources = DictionaryObject()
        fonts = DictionaryObject()
        for name, font_spec in spec.get("fonts", {}).items():
            fonts[NameObject("/" + name)] = writer._add_object(_font_dictionary(writer, font_spec))
        if fonts:
            resources[NameObject("/Font")] = fonts
        states = DictionaryObject()
        for name, (font_spec, size) in spec.get("ext_gstates", {}).items():
            font_ref = writer._add_object(_font_dictionary(writer, font_spec))
            states[NameObject("/" + name)] = DictionaryObject(
                {
                    NameObject("/Type"): NameObject("/ExtGState"),
                    NameObject("/Font"): ArrayObject([font_ref, FloatObject(size)]),
                }
            )
        if states:
            resources[NameObject("/ExtGState")] = states
        page[NameObject("/Resources")] = resources
    if metadata:
        writer.add_metadata(dict(metadata))
    with path.open("wb") as handle:
        writer.write(handle)
    return path


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(
        pages: Sequence[Mapping[str, Any]],
        *,
        filename: str = "document.pdf",
        metadata: Mapping[str, str] | None = None,
    ) -> Path:
        return build_pdf(tmp_path / filename, pages, metadata)

    return _create


@pytest.fixture()
def hello_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory(
        [
            {
                "content": b"BT /F1 12 Tf (Hello) Tj ET",
                "fonts": {"F1": WINANSI_HELVETICA},
            }
        ],
        filename="hello.pdf",
        metadata={"/Title": "Account statement", "/Author": "Example Bank"},
    )
