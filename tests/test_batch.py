from __future__ import annotations

from pathlib import Path

import pytest

from pdftextx.batch import BatchExtractor
from pdftextx.exceptions import InvalidPDFError

HELVETICA = {"base_font": "Helvetica", "encoding": "WinAnsiEncoding"}


@pytest.fixture()
def statement_dir(pdf_factory, tmp_path: Path) -> Path:
    pdf_factory(
        [
            {"content": b"BT /F1 12 Tf (Page one) Tj ET", "fonts": {"F1": HELVETICA}},
            {"content": b"BT /F1 12 Tf (Page two) Tj ET", "fonts": {"F1": HELVETICA}},
        ],
        filename="a_statement.pdf",
        metadata={"/Author": "Example Bank"},
    )
    pdf_factory(
        [{"content": b"BT /F1 12 Tf <FF> Tj ET", "fonts": {"F1": {"base_font": "Bare"}}}],
        filename="b_broken.pdf",
    )
    (tmp_path / "notes.txt").write_text("not a pdf")
    return tmp_path


def test_find_pdf_files_sorted(statement_dir: Path):
    files = BatchExtractor().find_pdf_files(str(statement_dir))

    assert [Path(name).name for name in files] == ["a_statement.pdf", "b_broken.pdf"]


def test_find_pdf_files_requires_directory(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        BatchExtractor().find_pdf_files(str(tmp_path / "missing"))

    file_path = tmp_path / "file.pdf"
    file_path.write_bytes(b"%PDF-1.4")
    with pytest.raises(InvalidPDFError):
        BatchExtractor().find_pdf_files(str(file_path))


def test_failed_document_does_not_stop_the_batch(statement_dir: Path, tmp_path: Path):
    output_dir = tmp_path / "out"
    seen = []

    result = BatchExtractor().process_directory(
        str(statement_dir),
        str(output_dir),
        progress_callback=lambda name, current, total: seen.append((Path(name).name, current, total)),
    )

    assert (result.total, result.success, result.failure) == (2, 1, 1)
    assert seen == [("a_statement.pdf", 1, 2), ("b_broken.pdf", 2, 2)]
    assert (output_dir / "a_statement.txt").read_text(encoding="utf-8") == "Page one\fPage two"
    assert not (output_dir / "b_broken.txt").exists()

    ok, failed = result.results
    assert ok["author"] == "Example Bank"
    assert ok["pages"] == 2
    assert failed["success"] is False
    assert "UTF-8" in failed["error"]
