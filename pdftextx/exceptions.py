"""
Custom exceptions for pdftextx.

This module defines all custom exceptions used throughout the library.
"""

from __future__ import annotations


class PDFTextException(Exception):
    """Base exception for all pdftextx errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown text extraction error occurred."


class InvalidPDFError(PDFTextException):
    """Raised when PDF file is invalid or corrupted."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF file."


class EncryptedPDFError(PDFTextException):
    """Raised when PDF is encrypted and cannot be processed."""

    @property
    def default_message(self) -> str:
        return "PDF is encrypted and cannot be processed without a password."


class InvalidRangeError(PDFTextException):
    """Raised when page range specification is invalid."""

    @property
    def default_message(self) -> str:
        return "Invalid page range specification."


class PageOutOfBoundsError(PDFTextException):
    """Raised when requested page number is out of bounds."""

    @property
    def default_message(self) -> str:
        return "Requested page number is out of bounds."


class UnsupportedEncodingError(PDFTextException):
    """Raised when a font names a base encoding without a known table."""

    def __init__(self, encoding: str) -> None:
        self.encoding = encoding
        super().__init__(f"Unsupported PDF encoding: {encoding}")


class TextDecodeError(PDFTextException):
    """Base class for errors that abort the extraction of a page."""

    @property
    def default_message(self) -> str:
        return "Unable to decode page text."


class Utf8DecodeError(TextDecodeError):
    """Raised when raw string bytes are not valid UTF-8."""

    def __init__(self, data: bytes) -> None:
        self.data = bytes(data)
        super().__init__(f"Invalid UTF-8 text data: {self.data!r}")


class Utf16DecodeError(TextDecodeError):
    """Raised when byte-order-marked string bytes are not valid UTF-16BE."""

    def __init__(self, data: bytes) -> None:
        self.data = bytes(data)
        super().__init__(f"Invalid UTF-16BE text data: {self.data!r}")


class UnexpectedPrimitiveError(TextDecodeError):
    """Raised when an operand has a different PDF object type than required."""

    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Expected {expected}, found {found}")
