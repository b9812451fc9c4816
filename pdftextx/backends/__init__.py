"""Backend abstractions for pdftextx."""

from .base import BackendDocument, BackendPage, PDFBackend
from .pypdf_backend import PypdfBackend, PypdfDocument, PypdfPage, font_description

__all__ = [
    "BackendDocument",
    "BackendPage",
    "PDFBackend",
    "PypdfBackend",
    "PypdfDocument",
    "PypdfPage",
    "font_description",
]
