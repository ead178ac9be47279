"""
Résumé file text extraction.

Turns an uploaded file into the raw text the parsing context consumes. Only
plain text and PDF are readable here; layout is not reconstructed, so PDF
text comes out in pdfplumber's reading order.

Helper functions:
    read_document_text: Raw text of a .txt or .pdf file.
    page_count: Quick page count without full extraction.
"""

from pathlib import Path
from typing import Optional

import pdfplumber
from PyPDF2 import PdfReader

from curriculo.contexts.parsing.exceptions import UnsupportedFileFormatError

SUPPORTED_EXTENSIONS = (".txt", ".pdf")


def page_count(pdf_path: Path) -> Optional[int]:
    """Get page count from PDF, or None if unreadable."""
    try:
        reader = PdfReader(str(pdf_path))
        return len(reader.pages)
    except Exception:
        return None


def read_document_text(path: Path) -> str:
    """
    Read a résumé file into a single string.

    Args:
        path: .txt (UTF-8) or .pdf file

    Returns:
        Extracted text; .txt line endings are normalized to "\\n" and the
        result is trimmed, PDF pages are joined with "\\n"

    Raises:
        UnsupportedFileFormatError: If the extension is not .txt or .pdf
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFileFormatError(path, supported=SUPPORTED_EXTENSIONS)

    if not path.exists():
        raise FileNotFoundError(f"Résumé file not found: {path}")

    if suffix == ".txt":
        text = path.read_text(encoding="utf-8")
        return text.replace("\r\n", "\n").replace("\r", "\n").strip()

    with pdfplumber.open(path) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages)
