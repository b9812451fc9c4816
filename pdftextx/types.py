"""
Type definitions and dataclasses for pdftextx.

This module defines data structures used throughout the library.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence


@dataclass(frozen=True)
class Matrix:
    """
    Two dimensional affine transform ``[a b c d e f]`` as used by PDF.

    Attributes:
        a, b, c, d: Linear part of the transform
        e, f: Horizontal and vertical translation
    """
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def from_operands(cls, values: Sequence[Any]) -> "Matrix":
        a, b, c, d, e, f = (float(value) for value in values[:6])
        return cls(a, b, c, d, e, f)

    def pre_translate(self, dx: float, dy: float) -> "Matrix":
        """Apply a translation in text space before this transform."""
        return Matrix(
            self.a,
            self.b,
            self.c,
            self.d,
            self.e + self.a * dx + self.c * dy,
            self.f + self.b * dx + self.d * dy,
        )

    def as_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)


IDENTITY_MATRIX = Matrix()


@dataclass(frozen=True)
class EncodingDescription:
    """
    Simple-font ``/Encoding`` entry.

    Attributes:
        base: Base encoding name without the leading slash, ``None`` when the
            encoding dictionary names none
        differences: Sparse code to glyph name overrides
    """
    base: Optional[str] = None
    differences: Mapping[int, str] = field(default_factory=dict)


@dataclass(frozen=True)
class FontDescription:
    """
    Font information needed to pick a glyph decoder.

    Attributes:
        name: Internal font name (``/BaseFont``)
        to_unicode: Embedded code to text map, if the font carries one
        encoding: Base encoding and differences, if the font declares any
    """
    name: Optional[str] = None
    to_unicode: Optional[Mapping[int, str]] = None
    encoding: Optional[EncodingDescription] = None


@dataclass(frozen=True)
class GraphicsStateFont:
    """
    ``/Font`` entry of an ExtGState resource.

    Attributes:
        font: Resolved font, ``None`` when the reference cannot be resolved
        size: Font size set together with the font
    """
    font: Optional[FontDescription]
    size: float


@dataclass
class ExtractionOptions:
    """
    Options controlling how page text is reconstructed.

    Attributes:
        line_epsilon: Vertical movement below which a translation counts as
            staying on the same baseline
        tab_threshold: Horizontal movement above which a translation is
            rendered as a tab
        password: Password used to open encrypted documents
        page_numbers: Zero-based page indices to extract, all pages if empty
    """
    line_epsilon: float = 1.1920929e-07
    tab_threshold: float = 3.0
    password: Optional[str] = None
    page_numbers: Optional[Sequence[int]] = None


@dataclass
class ExtractedDocument:
    """
    Text of a whole document.

    Attributes:
        pages: Reconstructed text, one entry per extracted page
        title: Document title metadata
        author: Document author metadata
        source_file: Path of the source PDF, if loaded from disk
    """
    pages: List[str]
    title: Optional[str] = None
    author: Optional[str] = None
    source_file: Optional[str] = None

    @property
    def text(self) -> str:
        return "\f".join(self.pages)

    def __str__(self) -> str:
        return f"ExtractedDocument(pages={len(self.pages)}, title={self.title!r})"


@dataclass
class BatchResult:
    """
    Result of a batch extraction run.

    Attributes:
        total: Number of PDFs found
        success: Number of PDFs extracted
        failure: Number of PDFs that failed
        results: Per-file outcome records
    """
    total: int
    success: int
    failure: int
    results: List[Dict[str, Any]] = field(default_factory=list)

    def __str__(self) -> str:
        return "BatchResult(total={total}, success={success}, failure={failure})".format(
            total=self.total,
            success=self.success,
            failure=self.failure,
        )
