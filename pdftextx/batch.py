"""Batch extraction of every PDF in a directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .exceptions import InvalidPDFError, PDFTextException
from .extractor import extract_document
from .types import BatchResult, ExtractionOptions
from .utils import time_block

__all__ = ["BatchExtractor"]

LOGGER = logging.getLogger(__name__)

class BatchExtractor:
    """Extract text from multiple PDF files.

    A document that fails to load or decode is logged and recorded in the
    result; the remaining files are still processed.
    """

    def __init__(
        self,
        *,
        options: Optional[ExtractionOptions] = None,
        passwords: Optional[Dict[str, str]] = None,
    ) -> None:
        self.options = options or ExtractionOptions()
        self.passwords = passwords or {}

    def find_pdf_files(self, input_dir: str) -> List[str]:
        input_path = Path(input_dir)
        if not input_path.exists():
            raise FileNotFoundError(f"Directory not found: {input_dir}")
        if not input_path.is_dir():
            raise InvalidPDFError(f"Not a directory: {input_dir}")

        return sorted(
            str(path)
            for path in input_path.rglob("*")
            if path.is_file() and path.suffix.lower() == ".pdf"
        )

    def _options_for(self, pdf_path: str) -> ExtractionOptions:
        password = self.passwords.get(Path(pdf_path).name)
        if password is None:
            return self.options
        return ExtractionOptions(
            line_epsilon=self.options.line_epsilon,
            tab_threshold=self.options.tab_threshold,
            password=password,
            page_numbers=self.options.page_numbers,
        )

    def process_directory(
        self,
        input_dir: str,
        output_dir: str,
        progress_callback: Optional[Callable[[str, int, int], None]] = None,
    ) -> BatchResult:
        pdf_files = self.find_pdf_files(input_dir)
        base_output = Path(output_dir)
        base_output.mkdir(parents=True, exist_ok=True)

        result = BatchResult(total=len(pdf_files), success=0, failure=0)
        with time_block(LOGGER, f"Batch extraction of {input_dir}"):
            for position, pdf_file in enumerate(pdf_files, 1):
                if progress_callback:
                    progress_callback(pdf_file, position, len(pdf_files))
                record = self._process_file(pdf_file, base_output)
                result.results.append(record)
                if record["success"]:
                    result.success += 1
                else:
                    result.failure += 1
        return result

    def _process_file(self, pdf_file: str, base_output: Path) -> Dict[str, object]:
        try:
            document = extract_document(pdf_file, self._options_for(pdf_file))
        except PDFTextException as exc:
            LOGGER.error("pdf reading error %s: %s", pdf_file, exc)
            return {"file": pdf_file, "success": False, "error": str(exc)}

        destination = base_output / f"{Path(pdf_file).stem}.txt"
        destination.write_text(document.text, encoding="utf-8")
        LOGGER.debug("author %r title %r", document.author, document.title)
        return {
            "file": pdf_file,
            "success": True,
            "output": str(destination),
            "pages": len(document.pages),
            "title": document.title,
            "author": document.author,
        }
