"""Unit tests for résumé file text extraction."""

import pytest

from curriculo.contexts.parsing.exceptions import UnsupportedFileFormatError
from curriculo.utils.document_text import page_count, read_document_text


@pytest.mark.unit
def test_read_text_file_normalizes_and_trims(tmp_path):
    resume = tmp_path / "cv.txt"
    resume.write_bytes("\r\nJoão Silva\r\nSkills\rPython\r\n\r\n".encode("utf-8"))

    assert read_document_text(resume) == "João Silva\nSkills\nPython"


@pytest.mark.unit
def test_unsupported_extension(tmp_path):
    resume = tmp_path / "cv.docx"
    resume.write_bytes(b"PK")

    with pytest.raises(UnsupportedFileFormatError, match=r"\.docx"):
        read_document_text(resume)


@pytest.mark.unit
def test_unsupported_format_is_a_value_error(tmp_path):
    with pytest.raises(ValueError):
        read_document_text(tmp_path / "cv.odt")


@pytest.mark.unit
def test_missing_text_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_document_text(tmp_path / "missing.txt")


@pytest.mark.unit
def test_page_count_of_unreadable_pdf(tmp_path):
    broken = tmp_path / "broken.pdf"
    broken.write_text("not a pdf")

    assert page_count(broken) is None
