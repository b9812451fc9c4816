"""
pdftextx - Plain text reconstruction from PDF content streams.

PDF pages carry no text abstraction, only operators that move a cursor and
draw glyph codes in font specific encodings. This library replays those
operators, decodes every drawn run through the font active at that point,
and re-inserts line and tab separators from the cursor movements.

Quick Start:
    >>> from pdftextx import extract_text
    >>> pages = extract_text('statement.pdf')

Main Classes:
    - PageTextExtractor: Per-page orchestration
    - FontRegistry: Glyph decoders of one page
    - TextStateMachine: Operator/text-state timeline
    - TextAssembler: Separator heuristics and decoding
    - BatchExtractor: Process a directory of PDFs

For CLI usage, use the 'pdftextx' command after installation.
"""

from pdftextx.assembler import TextAssembler, assemble_page_text
from pdftextx.batch import BatchExtractor
from pdftextx.decoders import DecoderKind, GlyphDecoder
from pdftextx.encodings import glyph_name_to_text, resolve_decoder
from pdftextx.exceptions import (
    EncryptedPDFError,
    InvalidPDFError,
    InvalidRangeError,
    PageOutOfBoundsError,
    PDFTextException,
    TextDecodeError,
    UnexpectedPrimitiveError,
    UnsupportedEncodingError,
    Utf8DecodeError,
    Utf16DecodeError,
)
from pdftextx.extractor import PageTextExtractor, extract_document, extract_text
from pdftextx.fonts import FontRegistry
from pdftextx.state import TextState, TextStateMachine, ops_with_text_state
from pdftextx.types import (
    BatchResult,
    EncodingDescription,
    ExtractedDocument,
    ExtractionOptions,
    FontDescription,
    GraphicsStateFont,
    Matrix,
)

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Main classes
    "PageTextExtractor",
    "FontRegistry",
    "TextStateMachine",
    "TextAssembler",
    "BatchExtractor",
    "GlyphDecoder",
    "DecoderKind",
    # Functions
    "extract_text",
    "extract_document",
    "assemble_page_text",
    "ops_with_text_state",
    "resolve_decoder",
    "glyph_name_to_text",
    # Data types
    "TextState",
    "Matrix",
    "FontDescription",
    "EncodingDescription",
    "GraphicsStateFont",
    "ExtractionOptions",
    "ExtractedDocument",
    "BatchResult",
    # Exceptions
    "PDFTextException",
    "InvalidPDFError",
    "EncryptedPDFError",
    "InvalidRangeError",
    "PageOutOfBoundsError",
    "TextDecodeError",
    "Utf8DecodeError",
    "Utf16DecodeError",
    "UnexpectedPrimitiveError",
    "UnsupportedEncodingError",
    # Version info
    "__version__",
]
